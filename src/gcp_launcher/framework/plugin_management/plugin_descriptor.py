"""
Plugin Descriptor Module

Binds a provider's static metadata to the class that implements it.
"""

from dataclasses import dataclass
from typing import Type

from ...domain.interfaces import CloudProvider
from ...domain.models import CloudProviderMetadata


@dataclass(frozen=True)
class ProviderDescriptor:
    """One entry of the provider registry."""
    metadata: CloudProviderMetadata
    provider_class: Type[CloudProvider]

    @property
    def provider_id(self) -> str:
        return self.metadata.id
