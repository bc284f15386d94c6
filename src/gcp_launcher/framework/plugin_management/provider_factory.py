"""
Provider Factory Module

Creates authenticated cloud provider instances. Credentials are always
validated against the identity service before an instance is constructed,
and every call builds a new instance.
"""

import logging
from typing import Any, Dict, Mapping, Optional

from .plugin_registry import ProviderRegistry
from ..configuration.core import TypedConfiguration
from ...domain.interfaces import CloudProvider, CredentialValidator
from ...domain.models import CloudProviderMetadata, HttpProxyParameters
from ...infrastructure.exceptions import (
    CredentialsError,
    CredentialValidationError,
    LauncherException,
    MissingCredentialPropertyError,
)
from ...infrastructure.observability.logging import correlation_context

logger = logging.getLogger(__name__)


def extract_credentials(
    metadata: CloudProviderMetadata,
    configuration: Mapping[str, str]
) -> Dict[str, str]:
    """
    Pick the credentials properties declared by the provider out of a caller configuration.

    Blank values count as absent. Optional properties fall back to their
    declared default, or are left out when they have none.

    Raises:
        MissingCredentialPropertyError: If a required property is absent
    """
    credentials: Dict[str, str] = {}
    properties = metadata.get_credentials_provider_metadata().get_credentials_configuration_properties()

    for prop in properties:
        value = configuration.get(prop.config_key)
        if value is not None and str(value).strip():
            credentials[prop.config_key] = str(value).strip()
        elif prop.required:
            raise MissingCredentialPropertyError(prop.config_key, provider_id=metadata.id)
        elif prop.default_value is not None:
            credentials[prop.config_key] = prop.default_value

    return credentials


class CloudProviderFactory:
    """
    Two-phase factory: validate the credentials, then construct the provider.

    The factory keeps no reference to the instances it returns.
    """

    def __init__(
        self,
        registry: ProviderRegistry,
        configuration: TypedConfiguration,
        validator: CredentialValidator,
        http_proxy: Optional[HttpProxyParameters] = None
    ):
        self.registry = registry
        self.configuration = configuration
        self.validator = validator
        self.http_proxy = http_proxy

    def validate_credentials(self, provider_id: str, configuration: Mapping[str, str]) -> Any:
        """
        Phase one: extract and verify credentials, blocking on the identity service.

        Raises:
            UnknownProviderError: If the provider id is not registered
            MissingCredentialPropertyError: If a required property is absent
            CredentialValidationError: If the identity service rejects the credentials
        """
        metadata = self.registry.get_metadata_for(provider_id)
        credentials = extract_credentials(metadata, configuration)

        try:
            return self.validator.validate(credentials, self.http_proxy)
        except CredentialsError:
            raise
        except Exception as e:
            raise CredentialValidationError(
                f"Credential validation failed for provider {provider_id}: {e}",
                provider_id=provider_id,
                cause=e
            ) from e

    def create_cloud_provider(
        self,
        provider_id: str,
        configuration: Mapping[str, str],
        locale: Optional[str] = None
    ) -> CloudProvider:
        """Validate the caller's credentials and build a new provider instance."""
        with correlation_context() as correlation_id:
            logger.info("Creating cloud provider", extra={"provider_id": provider_id})
            try:
                validated = self.validate_credentials(provider_id, configuration)
                descriptor = self.registry.get_descriptor(provider_id)
                provider = descriptor.provider_class(
                    credentials=validated,
                    configuration=self.configuration,
                    locale=locale,
                    http_proxy=self.http_proxy
                )
            except LauncherException as e:
                e.correlation_id = correlation_id
                logger.warning(
                    f"Cloud provider {provider_id} not created: {e.message}",
                    extra={"error_code": e.error_code}
                )
                raise

            logger.info("Cloud provider created", extra={"provider_id": provider_id})
            return provider
