"""
Core Domain Interfaces

Contracts between the launcher and the provider plugins it instantiates.
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional

from .models import CloudProviderMetadata, HttpProxyParameters


class CloudProvider(ABC):
    """
    Live handle to a cloud API, owned by the caller that requested it.

    Implementations are constructed by the provider factory with the keyword
    arguments ``credentials`` (the object returned by the credential
    validator), ``configuration`` (the merged launcher configuration),
    ``locale`` and ``http_proxy``.
    """

    @property
    @abstractmethod
    def provider_id(self) -> str:
        """Identifier of the provider this instance belongs to."""
        pass

    @abstractmethod
    def get_provider_metadata(self) -> CloudProviderMetadata:
        """Static metadata of the provider."""
        pass

    @classmethod
    def validate_configuration(cls, configuration) -> None:
        """
        Check the merged launcher configuration this provider will read.

        Called once by the launcher during initialization, before any
        provider is created.

        Raises:
            ConfigurationError: If a section the provider depends on is invalid
        """
        pass


class CredentialValidator(ABC):
    """
    Verifies credentials against an external identity service.

    This is the only blocking network call made while creating a provider.
    """

    @abstractmethod
    def validate(
        self,
        credentials: Mapping[str, str],
        http_proxy: Optional[HttpProxyParameters] = None
    ) -> Any:
        """
        Validate credentials and return the object the provider is seeded with.

        Args:
            credentials: Credentials properties keyed by config key
            http_proxy: Proxy to use for the round-trip, if any

        Raises:
            CredentialValidationError: If the identity service rejects the credentials
        """
        pass
