"""
Launcher for the Google Cloud Platform plugin.
"""

from typing import Optional

from ...domain.interfaces import CredentialValidator
from ...framework.configuration import GOOGLE_CONFIG_FILENAME, default_base_source
from ...framework.launcher import Launcher
from ...framework.plugin_management import ProviderDescriptor, ProviderRegistry
from .credentials import GoogleCredentialValidator
from .provider import GoogleCloudProvider


class GoogleLauncher(Launcher):
    """Launcher with the shipped Google defaults and google.conf as the override document."""

    def __init__(self, credential_validator: Optional[CredentialValidator] = None):
        super().__init__(
            registry=ProviderRegistry([
                ProviderDescriptor(GoogleCloudProvider.METADATA, GoogleCloudProvider)
            ]),
            base_source=default_base_source(),
            config_filename=GOOGLE_CONFIG_FILENAME,
            credential_validator=credential_validator or GoogleCredentialValidator()
        )

    @property
    def google_config(self):
        """Alias of configuration, named after the document it was loaded from."""
        return self.configuration
