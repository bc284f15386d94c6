"""
Configuration Management System

Layered configuration: shipped defaults merged with an optional user
override, exposed through an immutable store with typed lookups.
"""

from .core import TypedConfiguration

from .sources import (
    ConfigurationSource,
    HoconSource,
    HoconConfigurationSource,
    YAMLConfigurationSource,
    PackagedConfigurationSource,
    parse_hocon,
    parse_hocon_tree,
    resolve_hocon
)

from .loader import ConfigurationLoader, deep_merge

from .models import ComputeConfiguration

from .keys import (
    GOOGLE_CONFIG_FILENAME,
    IMAGE_ALIASES_SECTION,
    COMPUTE_POLLING_TIMEOUT_KEY,
    COMPUTE_MAX_POLLING_INTERVAL_KEY
)

from .utils import default_base_source, load_configuration_from_directory

__all__ = [
    # Store
    'TypedConfiguration',

    # Sources
    'ConfigurationSource',
    'HoconSource',
    'HoconConfigurationSource',
    'YAMLConfigurationSource',
    'PackagedConfigurationSource',
    'parse_hocon',
    'parse_hocon_tree',
    'resolve_hocon',

    # Loading
    'ConfigurationLoader',
    'deep_merge',
    'default_base_source',
    'load_configuration_from_directory',

    # Models
    'ComputeConfiguration',

    # Keys
    'GOOGLE_CONFIG_FILENAME',
    'IMAGE_ALIASES_SECTION',
    'COMPUTE_POLLING_TIMEOUT_KEY',
    'COMPUTE_MAX_POLLING_INTERVAL_KEY'
]
