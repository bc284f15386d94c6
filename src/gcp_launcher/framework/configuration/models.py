"""
Configuration data models with validation.
"""

from typing import Dict

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ...infrastructure.exceptions import ConfigurationError
from .core import TypedConfiguration
from .keys import (
    IMAGE_ALIASES_SECTION,
    COMPUTE_POLLING_TIMEOUT_KEY,
    COMPUTE_MAX_POLLING_INTERVAL_KEY,
)


class ComputeConfiguration(BaseModel):
    """Compute defaults read from the merged configuration."""
    model_config = ConfigDict(frozen=True)

    image_aliases: Dict[str, str] = Field(default_factory=dict)
    polling_timeout_seconds: int = Field(ge=1)
    max_polling_interval_seconds: int = Field(ge=1)

    @classmethod
    def from_configuration(cls, config: TypedConfiguration) -> 'ComputeConfiguration':
        """
        Read the compute section of a merged configuration.

        Raises:
            MissingKeyError / TypeMismatchError: If a key is absent or unreadable
            ConfigurationError: If the values are out of range
        """
        aliases_path = IMAGE_ALIASES_SECTION.rstrip(".")
        image_aliases = config.get_string_map(aliases_path) if config.has_path(aliases_path) else {}

        try:
            return cls(
                image_aliases=image_aliases,
                polling_timeout_seconds=config.get_int(COMPUTE_POLLING_TIMEOUT_KEY),
                max_polling_interval_seconds=config.get_int(COMPUTE_MAX_POLLING_INTERVAL_KEY),
            )
        except ValidationError as e:
            raise ConfigurationError(
                "Invalid compute configuration",
                error_code="CONFIG_VALIDATION_ERROR",
                context={"validation_errors": [
                    {"loc": list(err["loc"]), "msg": err["msg"]} for err in e.errors()
                ]},
                cause=e
            ) from e
