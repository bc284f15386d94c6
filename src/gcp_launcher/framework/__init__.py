"""
Framework Layer - configuration, plugin management and the launcher.
"""

from .launcher import Launcher
from .configuration import TypedConfiguration, ConfigurationLoader
from .plugin_management import ProviderRegistry, ProviderDescriptor, CloudProviderFactory

__all__ = [
    "Launcher",
    "TypedConfiguration",
    "ConfigurationLoader",
    "ProviderRegistry",
    "ProviderDescriptor",
    "CloudProviderFactory",
]
