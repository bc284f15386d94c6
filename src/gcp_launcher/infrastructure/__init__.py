"""
Infrastructure Layer - cross-cutting technical services

Structured exceptions and observability shared by every other layer.
"""

from .exceptions import (
    LauncherException,
    ConfigurationError,
    ConfigParseError,
    MissingKeyError,
    TypeMismatchError,
    NotInitializedError,
    PluginError,
    UnknownProviderError,
    CredentialsError,
    MissingCredentialPropertyError,
    CredentialValidationError,
)

__all__ = [
    "LauncherException",
    "ConfigurationError",
    "ConfigParseError",
    "MissingKeyError",
    "TypeMismatchError",
    "NotInitializedError",
    "PluginError",
    "UnknownProviderError",
    "CredentialsError",
    "MissingCredentialPropertyError",
    "CredentialValidationError",
]
