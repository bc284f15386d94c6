"""
Google Cloud Platform plugin.
"""

from .credentials import GoogleCredentials, GoogleCredentialValidator
from .launcher import GoogleLauncher
from .properties import GoogleCredentialsProviderConfigurationProperty
from .provider import GoogleCloudProvider

__all__ = [
    "GoogleCredentials",
    "GoogleCredentialValidator",
    "GoogleLauncher",
    "GoogleCredentialsProviderConfigurationProperty",
    "GoogleCloudProvider",
]
