"""
Domain Layer - provider metadata and plugin contracts.
"""

from .models import (
    ConfigurationProperty,
    CredentialsProviderMetadata,
    CloudProviderMetadata,
    HttpProxyParameters,
)
from .interfaces import CloudProvider, CredentialValidator

__all__ = [
    "ConfigurationProperty",
    "CredentialsProviderMetadata",
    "CloudProviderMetadata",
    "HttpProxyParameters",
    "CloudProvider",
    "CredentialValidator",
]
