"""
Layered loading: a shipped base document overridden by optional user documents.
"""

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional

from .core import TypedConfiguration
from .sources import ConfigurationSource, HoconSource, resolve_hocon

logger = logging.getLogger(__name__)


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Deep merge two dictionaries, with override taking precedence.

    Nested mappings are merged key by key so entries only present in the
    base survive; any other value in the override (scalars, lists, null)
    replaces the base value outright. Neither input is modified.
    """
    result = dict(base)

    for key, value in override.items():
        if key in result and isinstance(result[key], Mapping) and isinstance(value, Mapping):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result


class ConfigurationLoader:
    """
    Builds a TypedConfiguration from layered configuration sources.

    When every source is a HOCON document the unresolved trees are layered
    first and substitutions are resolved once against the merged result, so
    an override may refer to base keys. Mixed sources are loaded one by one
    and deep merged.
    """

    def load(
        self,
        base: ConfigurationSource,
        override: Optional[ConfigurationSource] = None
    ) -> TypedConfiguration:
        """
        Merge the base document with an optional override document.

        Both documents must parse; a failure in either propagates and no
        configuration is produced.
        """
        sources = [base] if override is None else [base, override]
        return self._merge(sources)

    def load_sources(self, sources: Iterable[ConfigurationSource]) -> TypedConfiguration:
        """Merge any number of sources, lowest priority first."""
        return self._merge(sorted(sources, key=lambda s: s.get_priority()))

    def _merge(self, sources: List[ConfigurationSource]) -> TypedConfiguration:
        if sources and all(isinstance(s, HoconSource) for s in sources):
            merged = self._layer_hocon(sources)
        else:
            merged = self._layer_dicts(sources)

        logger.info(
            "Configuration loaded",
            extra={"sources": [s.describe() for s in sources]}
        )
        return TypedConfiguration(merged)

    def _layer_hocon(self, sources: List[HoconSource]) -> Dict[str, Any]:
        tree = None

        for source in sources:
            try:
                layer = source.load_tree()
            except Exception as e:
                logger.error(f"Failed to load configuration from {source.describe()}: {e}")
                raise
            tree = layer if tree is None else layer.with_fallback(tree, resolve=False)
            logger.debug("Merged configuration source", extra={"source": source.describe()})

        return resolve_hocon(tree, ", ".join(s.describe() for s in sources))

    def _layer_dicts(self, sources: List[ConfigurationSource]) -> Dict[str, Any]:
        merged: Dict[str, Any] = {}

        for source in sources:
            try:
                data = source.load()
            except Exception as e:
                logger.error(f"Failed to load configuration from {source.describe()}: {e}")
                raise
            merged = deep_merge(merged, data)
            logger.debug("Merged configuration source", extra={"source": source.describe()})

        return merged
