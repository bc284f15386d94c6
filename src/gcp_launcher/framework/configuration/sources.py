"""
Configuration sources for loading configuration documents.
"""

import logging
from abc import ABC, abstractmethod
from importlib import resources
from pathlib import Path
from typing import Dict, Any, Union

import yaml
from pyhocon import ConfigFactory, ConfigParser, ConfigTree
from pyhocon.config_tree import NoneValue
from pyhocon.exceptions import ConfigException
from pyparsing import ParseBaseException

from ...infrastructure.exceptions import ConfigurationError, ConfigParseError

logger = logging.getLogger(__name__)


def _plain(value: Any) -> Any:
    if isinstance(value, ConfigTree):
        return {str(k).strip('"'): _plain(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_plain(v) for v in value]
    if isinstance(value, NoneValue):
        return None
    return value


def parse_hocon_tree(text: str, origin: str) -> ConfigTree:
    """
    Parse HOCON text without resolving substitutions.

    Unresolved trees can be layered with ``ConfigTree.with_fallback`` so that
    an override may refer to keys defined only in the base document.
    """
    if not text.strip():
        return ConfigTree(root=True)

    try:
        tree = ConfigFactory.parse_string(text, resolve=False)
    except (ConfigException, ParseBaseException) as e:
        raise ConfigParseError(
            f"Invalid HOCON in configuration document: {origin}",
            config_path=origin,
            context={"parse_error": str(e)},
            cause=e
        ) from e
    except Exception as e:
        raise ConfigParseError(
            f"Unable to parse configuration document: {origin}",
            config_path=origin,
            context={"error": str(e)},
            cause=e
        ) from e

    if not isinstance(tree, ConfigTree):
        raise ConfigParseError(
            f"Configuration document must contain an object at the top level: {origin}",
            config_path=origin
        )
    return tree


def resolve_hocon(tree: ConfigTree, origin: str) -> Dict[str, Any]:
    """Resolve substitutions in a (possibly layered) tree and return plain dictionaries."""
    try:
        ConfigParser.resolve_substitutions(tree)
    except ConfigException as e:
        raise ConfigParseError(
            f"Unresolved substitution in configuration: {origin}",
            config_path=origin,
            context={"parse_error": str(e)},
            cause=e
        ) from e
    return _plain(tree)


def parse_hocon(text: str, origin: str) -> Dict[str, Any]:
    """Parse HOCON text into plain nested dictionaries."""
    return resolve_hocon(parse_hocon_tree(text, origin), origin)


class ConfigurationSource(ABC):
    """Abstract base class for configuration sources."""

    @abstractmethod
    def load(self) -> Dict[str, Any]:
        """Load configuration data from the source."""
        pass

    @abstractmethod
    def get_priority(self) -> int:
        """Get the priority of this source (higher number = higher priority)."""
        pass

    def describe(self) -> str:
        """Human readable origin, used in logs and errors."""
        return type(self).__name__


class HoconSource(ConfigurationSource):
    """Source holding a HOCON document."""

    @abstractmethod
    def read_text(self) -> str:
        """Raw document text."""
        pass

    def load_tree(self) -> ConfigTree:
        """Parse the document, leaving substitutions for the loader to resolve."""
        return parse_hocon_tree(self.read_text(), self.describe())

    def load(self) -> Dict[str, Any]:
        """Load the document on its own, resolving substitutions against itself."""
        return resolve_hocon(self.load_tree(), self.describe())


class _FileConfigurationSource(ConfigurationSource):

    def __init__(self, file_path: Union[str, Path], priority: int = 100):
        self.file_path = Path(file_path)
        self.priority = priority

    def _read(self) -> str:
        if not self.file_path.exists():
            raise ConfigurationError(
                f"Configuration file not found: {self.file_path}",
                config_path=str(self.file_path),
                error_code="CONFIG_FILE_NOT_FOUND"
            )

        try:
            return self.file_path.read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigurationError(
                f"Error reading configuration file: {self.file_path}",
                config_path=str(self.file_path),
                error_code="CONFIG_READ_ERROR",
                context={"error": str(e)},
                cause=e
            ) from e

    def get_priority(self) -> int:
        return self.priority

    def describe(self) -> str:
        return str(self.file_path)


class HoconConfigurationSource(_FileConfigurationSource, HoconSource):
    """HOCON file configuration source."""

    def read_text(self) -> str:
        return self._read()


class YAMLConfigurationSource(_FileConfigurationSource):
    """YAML file configuration source."""

    def load(self) -> Dict[str, Any]:
        """Load configuration from YAML file."""
        text = self._read()
        try:
            data = yaml.safe_load(text) or {}
        except yaml.YAMLError as e:
            raise ConfigParseError(
                f"Invalid YAML in configuration file: {self.file_path}",
                config_path=str(self.file_path),
                context={"yaml_error": str(e)},
                cause=e
            ) from e

        if not isinstance(data, dict):
            raise ConfigParseError(
                f"Configuration document must contain a mapping at the top level: {self.file_path}",
                config_path=str(self.file_path)
            )
        return data


class PackagedConfigurationSource(HoconSource):
    """HOCON document shipped inside a Python package."""

    def __init__(self, package: str, resource: str, priority: int = 0):
        self.package = package
        self.resource = resource
        self.priority = priority

    def read_text(self) -> str:
        """Read the bundled document; a missing resource means a broken installation."""
        try:
            text = resources.files(self.package).joinpath(self.resource).read_text(encoding='utf-8')
        except (OSError, ModuleNotFoundError) as e:
            raise ConfigurationError(
                f"Bundled configuration not found: {self.describe()}",
                config_path=self.describe(),
                error_code="CONFIG_FILE_NOT_FOUND",
                cause=e
            ) from e

        logger.debug("Loaded bundled configuration", extra={"source": self.describe()})
        return text

    def get_priority(self) -> int:
        return self.priority

    def describe(self) -> str:
        return f"{self.package}/{self.resource}"
