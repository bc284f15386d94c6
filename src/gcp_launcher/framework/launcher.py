"""
Launcher - entry point of the plugin

Builds the merged configuration once, then serves provider metadata and
creates provider instances from caller supplied credentials.
"""

import logging
from pathlib import Path
from typing import List, Mapping, Optional, Union

from ..domain.interfaces import CloudProvider, CredentialValidator
from ..domain.models import CloudProviderMetadata, HttpProxyParameters
from ..infrastructure.exceptions import NotInitializedError
from .configuration import (
    ConfigurationSource,
    TypedConfiguration,
    load_configuration_from_directory,
)
from .plugin_management import CloudProviderFactory, ProviderRegistry

logger = logging.getLogger(__name__)


class Launcher:
    """
    Uninitialized -> Initialized, once per instance.

    initialize() is not synchronized; call it during startup before the
    launcher is shared. A second call is a no-op that keeps the first
    configuration.
    """

    def __init__(
        self,
        registry: ProviderRegistry,
        base_source: ConfigurationSource,
        config_filename: str,
        credential_validator: CredentialValidator
    ):
        self.registry = registry
        self.base_source = base_source
        self.config_filename = config_filename
        self.credential_validator = credential_validator

        self._configuration: Optional[TypedConfiguration] = None
        self._factory: Optional[CloudProviderFactory] = None

    def initialize(
        self,
        config_directory: Optional[Union[str, Path]],
        http_proxy: Optional[HttpProxyParameters] = None
    ) -> None:
        """
        Load the merged configuration from the configuration directory.

        Args:
            config_directory: Directory that may hold the override document
            http_proxy: Proxy for reaching the cloud API, if required

        Raises:
            ConfigurationError: If the base or override document cannot be loaded,
                or a registered provider rejects the merged configuration
        """
        if self.is_initialized():
            logger.warning("Launcher is already initialized, ignoring repeated initialize()")
            return

        configuration = load_configuration_from_directory(
            config_directory, self.config_filename, self.base_source
        )
        for descriptor in self.registry.descriptors():
            descriptor.provider_class.validate_configuration(configuration)

        self._factory = CloudProviderFactory(
            self.registry, configuration, self.credential_validator, http_proxy
        )
        self._configuration = configuration
        logger.info(
            "Launcher initialized",
            extra={
                "config_directory": str(config_directory) if config_directory is not None else None,
                "providers": self.registry.provider_ids(),
                "http_proxy": repr(http_proxy) if http_proxy else None
            }
        )

    def is_initialized(self) -> bool:
        return self._configuration is not None

    def _require_initialized(self, operation: str) -> CloudProviderFactory:
        if self._factory is None:
            raise NotInitializedError(operation)
        return self._factory

    @property
    def configuration(self) -> TypedConfiguration:
        """The merged configuration shared by every provider this launcher creates."""
        self._require_initialized("configuration")
        return self._configuration

    def get_cloud_provider_metadata(self) -> List[CloudProviderMetadata]:
        self._require_initialized("get_cloud_provider_metadata")
        return self.registry.get_cloud_provider_metadata()

    def get_metadata_for(self, provider_id: str) -> CloudProviderMetadata:
        self._require_initialized("get_metadata_for")
        return self.registry.get_metadata_for(provider_id)

    def create_cloud_provider(
        self,
        provider_id: str,
        configuration: Mapping[str, str],
        locale: Optional[str] = None
    ) -> CloudProvider:
        """
        Create a new, authenticated provider instance.

        Raises:
            NotInitializedError: If initialize() has not completed
            UnknownProviderError: If the provider id is not registered
            MissingCredentialPropertyError: If a required credentials property is absent
            CredentialValidationError: If the credentials are rejected
        """
        factory = self._require_initialized("create_cloud_provider")
        return factory.create_cloud_provider(provider_id, configuration, locale)
