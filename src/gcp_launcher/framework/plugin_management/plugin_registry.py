"""
Plugin Registry Module

Closed, read-only registry of the cloud providers a launcher can create.
"""

import logging
from typing import Dict, List, Sequence

from .plugin_descriptor import ProviderDescriptor
from ...domain.models import CloudProviderMetadata
from ...infrastructure.exceptions import UnknownProviderError

logger = logging.getLogger(__name__)


class ProviderRegistry:
    """
    Registry of provider descriptors, fixed at construction.

    Lookups are pure reads and safe from any number of threads.
    """

    def __init__(self, descriptors: Sequence[ProviderDescriptor]):
        entries: Dict[str, ProviderDescriptor] = {}
        for descriptor in descriptors:
            if descriptor.provider_id in entries:
                raise ValueError(f"Duplicate cloud provider id: {descriptor.provider_id}")
            entries[descriptor.provider_id] = descriptor

        self._descriptors = entries
        self._metadata = tuple(d.metadata for d in entries.values())

        logger.debug("Provider registry initialized", extra={"provider_ids": list(entries)})

    def get_cloud_provider_metadata(self) -> List[CloudProviderMetadata]:
        """Metadata of every registered provider, in registration order."""
        return list(self._metadata)

    def get_descriptor(self, provider_id: str) -> ProviderDescriptor:
        try:
            return self._descriptors[provider_id]
        except KeyError:
            raise UnknownProviderError(provider_id, known_ids=self.provider_ids()) from None

    def get_metadata_for(self, provider_id: str) -> CloudProviderMetadata:
        return self.get_descriptor(provider_id).metadata

    def descriptors(self) -> List[ProviderDescriptor]:
        return list(self._descriptors.values())

    def provider_ids(self) -> List[str]:
        return list(self._descriptors)

    def __contains__(self, provider_id: object) -> bool:
        return provider_id in self._descriptors

    def __len__(self) -> int:
        return len(self._descriptors)
