"""
Typed, immutable view over a merged configuration document.
"""

import re
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Optional

from ...infrastructure.exceptions import MissingKeyError, TypeMismatchError

PATH_SEPARATOR = "."

_INT_LITERAL = re.compile(r"^[+-]?\d+$")
_TRUE_WORDS = {"true", "yes", "on"}
_FALSE_WORDS = {"false", "no", "off"}


def freeze(value: Any) -> Any:
    """Recursively convert mappings to read-only proxies and lists to tuples."""
    if isinstance(value, Mapping):
        return MappingProxyType({str(k): freeze(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze(v) for v in value)
    return value


def thaw(value: Any) -> Any:
    """Inverse of freeze(): plain, mutable dicts and lists."""
    if isinstance(value, Mapping):
        return {k: thaw(v) for k, v in value.items()}
    if isinstance(value, tuple):
        return [thaw(v) for v in value]
    return value


class TypedConfiguration:
    """
    Hierarchical key/value store with typed accessors.

    Paths use ``.`` between sections and the leaf key, for example
    ``google.compute.imageAliases.centos6``. Lookups are strict: an absent
    path raises MissingKeyError and an unreadable value raises
    TypeMismatchError. Instances never change after construction.
    """

    __slots__ = ("_data", "_prefix")

    def __init__(self, data: Optional[Mapping[str, Any]] = None, prefix: str = ""):
        self._data = freeze(data or {})
        self._prefix = prefix

    def __setattr__(self, name, value):
        if hasattr(self, "_prefix"):
            raise AttributeError("TypedConfiguration is immutable")
        object.__setattr__(self, name, value)

    def _full_path(self, path: str) -> str:
        return f"{self._prefix}{PATH_SEPARATOR}{path}" if self._prefix else path

    def _lookup(self, path: str) -> Any:
        if not path:
            raise MissingKeyError(self._full_path(path))

        current: Any = self._data
        for segment in path.split(PATH_SEPARATOR):
            if not segment or not isinstance(current, Mapping) or segment not in current:
                raise MissingKeyError(self._full_path(path))
            current = current[segment]

        # null counts as absent
        if current is None:
            raise MissingKeyError(self._full_path(path))
        return current

    def has_path(self, path: str) -> bool:
        try:
            self._lookup(path)
        except MissingKeyError:
            return False
        return True

    def get_string(self, path: str) -> str:
        value = self._lookup(path)
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, int, float)):
            return str(value)
        raise TypeMismatchError(self._full_path(path), "string", thaw(value))

    def get_int(self, path: str) -> int:
        value = self._lookup(path)
        if isinstance(value, bool):
            raise TypeMismatchError(self._full_path(path), "integer", value)
        if isinstance(value, int):
            return value
        if isinstance(value, str) and _INT_LITERAL.match(value.strip()):
            return int(value.strip())
        raise TypeMismatchError(self._full_path(path), "integer", thaw(value))

    def get_float(self, path: str) -> float:
        value = self._lookup(path)
        if isinstance(value, bool):
            raise TypeMismatchError(self._full_path(path), "number", value)
        if isinstance(value, (int, float)):
            return float(value)
        if isinstance(value, str):
            try:
                return float(value.strip())
            except ValueError:
                pass
        raise TypeMismatchError(self._full_path(path), "number", thaw(value))

    def get_boolean(self, path: str) -> bool:
        value = self._lookup(path)
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            word = value.strip().lower()
            if word in _TRUE_WORDS:
                return True
            if word in _FALSE_WORDS:
                return False
        raise TypeMismatchError(self._full_path(path), "boolean", thaw(value))

    def get_config(self, path: str) -> 'TypedConfiguration':
        """Sub-store rooted at a map-valued section."""
        value = self._lookup(path)
        if not isinstance(value, Mapping):
            raise TypeMismatchError(self._full_path(path), "object", thaw(value))
        return TypedConfiguration(value, prefix=self._full_path(path))

    def get_string_map(self, path: str) -> Dict[str, str]:
        """Map-valued section with every entry read as a string."""
        section = self.get_config(path)
        return {key: section.get_string(key) for key in section.keys() if section.has_path(key)}

    def keys(self) -> List[str]:
        return list(self._data.keys())

    def as_dict(self) -> Dict[str, Any]:
        return thaw(self._data)

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and self.has_path(path)

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TypedConfiguration):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    __hash__ = None

    def __repr__(self) -> str:
        root = self._prefix or "<root>"
        return f"TypedConfiguration({root}, keys={self.keys()})"
