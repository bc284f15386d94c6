"""
Structured Exception Hierarchy

Every failure raised by the launcher carries an error code, context data,
the underlying cause and a correlation ID so callers can log it as one record.
"""

from typing import Dict, Any, Optional
import uuid
from datetime import datetime, timezone


class LauncherException(Exception):
    """
    Base exception class for all launcher errors.

    Provides structured error information including error codes,
    context data, and correlation IDs for tracing.
    """

    def __init__(
        self,
        message: str,
        error_code: str,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
        correlation_id: Optional[str] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context = context or {}
        self.cause = cause
        self.correlation_id = correlation_id or str(uuid.uuid4())
        self.timestamp = datetime.now(timezone.utc)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code,
            "context": self.context,
            "correlation_id": self.correlation_id,
            "timestamp": self.timestamp.isoformat(),
            "cause": str(self.cause) if self.cause else None
        }


class ConfigurationError(LauncherException):
    """Raised when a configuration document cannot be located or read."""

    def __init__(
        self,
        message: str,
        config_path: Optional[str] = None,
        error_code: str = "CONFIG_ERROR",
        **kwargs
    ):
        context = kwargs.pop('context', {})
        if config_path:
            context['config_path'] = config_path

        super().__init__(
            message=message,
            error_code=error_code,
            context=context,
            **kwargs
        )


class ConfigParseError(ConfigurationError):
    """Raised when a base or override document is malformed."""

    def __init__(self, message: str, config_path: Optional[str] = None, **kwargs):
        super().__init__(message, config_path=config_path, error_code="CONFIG_PARSE_ERROR", **kwargs)


class MissingKeyError(ConfigurationError):
    """Raised by a typed lookup when the path is absent from the merged configuration."""

    def __init__(self, path: str, **kwargs):
        context = kwargs.pop('context', {})
        context['path'] = path
        super().__init__(
            f"No configuration value at '{path}'",
            error_code="CONFIG_MISSING_KEY",
            context=context,
            **kwargs
        )
        self.path = path


class TypeMismatchError(ConfigurationError):
    """Raised by a typed lookup when the stored value cannot be read as the requested type."""

    def __init__(self, path: str, expected_type: str, actual_value: Any, **kwargs):
        context = kwargs.pop('context', {})
        context.update({
            'path': path,
            'expected_type': expected_type,
            'actual_type': type(actual_value).__name__,
        })
        super().__init__(
            f"Configuration value at '{path}' is not a valid {expected_type}: {actual_value!r}",
            error_code="CONFIG_TYPE_MISMATCH",
            context=context,
            **kwargs
        )
        self.path = path
        self.expected_type = expected_type


class NotInitializedError(LauncherException):
    """Raised when a launcher operation is invoked before initialize() completed."""

    def __init__(self, operation: str, **kwargs):
        context = kwargs.pop('context', {})
        context['operation'] = operation
        super().__init__(
            message=f"Launcher must be initialized before calling {operation}()",
            error_code="LAUNCHER_NOT_INITIALIZED",
            context=context,
            **kwargs
        )


class PluginError(LauncherException):
    """Raised when plugin-related errors occur."""

    def __init__(
        self,
        message: str,
        plugin_id: Optional[str] = None,
        error_code: str = "PLUGIN_ERROR",
        **kwargs
    ):
        context = kwargs.pop('context', {})
        if plugin_id:
            context['plugin_id'] = plugin_id

        super().__init__(
            message=message,
            error_code=error_code,
            context=context,
            **kwargs
        )


class UnknownProviderError(PluginError):
    """Raised for a provider identifier that is not registered."""

    def __init__(self, provider_id: str, known_ids=(), **kwargs):
        context = kwargs.pop('context', {})
        context['known_provider_ids'] = list(known_ids)
        super().__init__(
            f"Unknown cloud provider: {provider_id}",
            plugin_id=provider_id,
            error_code="UNKNOWN_PROVIDER",
            context=context,
            **kwargs
        )
        self.provider_id = provider_id


class CredentialsError(LauncherException):
    """Raised when credentials cannot be used to create a provider."""

    def __init__(
        self,
        message: str,
        provider_id: Optional[str] = None,
        error_code: str = "CREDENTIALS_ERROR",
        **kwargs
    ):
        context = kwargs.pop('context', {})
        if provider_id:
            context['provider_id'] = provider_id

        super().__init__(
            message=message,
            error_code=error_code,
            context=context,
            **kwargs
        )


class MissingCredentialPropertyError(CredentialsError):
    """Raised when a required credentials property is absent from the caller configuration."""

    def __init__(self, config_key: str, provider_id: Optional[str] = None, **kwargs):
        context = kwargs.pop('context', {})
        context['config_key'] = config_key
        super().__init__(
            f"Missing required credentials property: {config_key}",
            provider_id=provider_id,
            error_code="MISSING_CREDENTIAL_PROPERTY",
            context=context,
            **kwargs
        )
        self.config_key = config_key


class CredentialValidationError(CredentialsError):
    """Raised when the identity service rejects the supplied credentials."""

    def __init__(self, message: str, provider_id: Optional[str] = None, **kwargs):
        super().__init__(
            message,
            provider_id=provider_id,
            error_code="CREDENTIAL_VALIDATION_FAILED",
            **kwargs
        )
