"""
Configuration properties understood by the Google provider.
"""

from enum import Enum

from ...domain.models import ConfigurationProperty


class GoogleCredentialsProviderConfigurationProperty(Enum):
    """Credentials properties; unwrap() returns the descriptor."""

    PROJECT_ID = ConfigurationProperty(
        config_key="projectId",
        name="projectId",
        label="Project ID",
        description="Google Cloud project identifier.",
        required=True,
    )

    JSON_KEY = ConfigurationProperty(
        config_key="jsonKey",
        name="jsonKey",
        label="Client ID JSON Key",
        description=(
            "Service account JSON key, inline or as a path to the key file. "
            "Leave empty to use Application Default Credentials."
        ),
        required=False,
        sensitive=True,
    )

    def unwrap(self) -> ConfigurationProperty:
        return self.value
