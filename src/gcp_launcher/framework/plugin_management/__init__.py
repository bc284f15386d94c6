"""
Plugin Management

Registry of the supported cloud providers and the factory that creates
authenticated provider instances.
"""

from .plugin_descriptor import ProviderDescriptor
from .plugin_registry import ProviderRegistry
from .provider_factory import CloudProviderFactory, extract_credentials

__all__ = [
    'ProviderDescriptor',
    'ProviderRegistry',
    'CloudProviderFactory',
    'extract_credentials'
]
