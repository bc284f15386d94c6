"""
Utility functions for common configuration patterns.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from ...infrastructure.exceptions import ConfigurationError
from .core import TypedConfiguration
from .keys import BASE_CONFIG_PACKAGE, BASE_CONFIG_RESOURCE, GOOGLE_CONFIG_FILENAME
from .loader import ConfigurationLoader
from .sources import ConfigurationSource, HoconConfigurationSource, PackagedConfigurationSource

logger = logging.getLogger(__name__)


def default_base_source() -> PackagedConfigurationSource:
    """The shipped Google defaults."""
    return PackagedConfigurationSource(BASE_CONFIG_PACKAGE, BASE_CONFIG_RESOURCE)


def load_configuration_from_directory(
    config_directory: Optional[Union[str, Path]],
    filename: str = GOOGLE_CONFIG_FILENAME,
    base: Optional[ConfigurationSource] = None
) -> TypedConfiguration:
    """
    Load the base configuration, overridden by ``<config_directory>/<filename>`` when present.

    Args:
        config_directory: Directory holding the user configuration, may be None
        filename: Name of the override document
        base: Base document source, defaults to the shipped Google defaults

    Returns:
        TypedConfiguration with the merged result
    """
    base = base or default_base_source()
    override = None

    if config_directory is not None:
        override_path = Path(config_directory) / filename
        if override_path.exists():
            if not override_path.is_file():
                raise ConfigurationError(
                    f"Configuration override is not a regular file: {override_path}",
                    config_path=str(override_path)
                )
            override = HoconConfigurationSource(override_path)
            logger.info(f"Using configuration override {override_path}")
        else:
            logger.info(f"No configuration override found at {override_path}, using defaults")

    return ConfigurationLoader().load(base, override)
