"""
Google Cloud Platform provider.
"""

import logging
from typing import Optional

from ...domain.interfaces import CloudProvider
from ...domain.models import (
    CloudProviderMetadata,
    CredentialsProviderMetadata,
    HttpProxyParameters,
)
from ...framework.configuration import ComputeConfiguration, TypedConfiguration
from .credentials import GoogleCredentials, PROVIDER_ID
from .properties import GoogleCredentialsProviderConfigurationProperty

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en_US"


class GoogleCloudProvider(CloudProvider):
    """
    Authenticated handle to Google Cloud Platform.

    Credentials come from the caller; compute defaults such as image aliases
    and polling intervals come from the launcher's merged configuration.
    """

    ID = PROVIDER_ID

    METADATA = CloudProviderMetadata(
        id=ID,
        name="Google Cloud Platform",
        description="A provider implementation that provisions virtual resources on Google Cloud Platform.",
        credentials_provider_metadata=CredentialsProviderMetadata(tuple(
            prop.unwrap() for prop in GoogleCredentialsProviderConfigurationProperty
        )),
        provider_configuration_properties=(),
    )

    def __init__(
        self,
        credentials: GoogleCredentials,
        configuration: TypedConfiguration,
        locale: Optional[str] = None,
        http_proxy: Optional[HttpProxyParameters] = None
    ):
        self.credentials = credentials
        self.configuration = configuration
        self.locale = locale or DEFAULT_LOCALE
        self.http_proxy = http_proxy
        self.compute = ComputeConfiguration.from_configuration(configuration)

    @classmethod
    def validate_configuration(cls, configuration: TypedConfiguration) -> None:
        ComputeConfiguration.from_configuration(configuration)

    @property
    def provider_id(self) -> str:
        return self.ID

    @property
    def project_id(self) -> str:
        return self.credentials.project_id

    def get_provider_metadata(self) -> CloudProviderMetadata:
        return self.METADATA

    def resolve_image(self, name: str) -> str:
        """Expand an image alias to its URL; anything else is taken as a URL or image name."""
        url = self.compute.image_aliases.get(name)
        if url is None:
            logger.debug(f"No image alias named {name}, using it verbatim")
            return name
        return url

    def __repr__(self) -> str:
        return f"GoogleCloudProvider(project_id={self.project_id!r}, locale={self.locale!r})"
