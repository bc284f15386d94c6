"""
Tests for the structured exception hierarchy.
"""

from gcp_launcher.infrastructure.exceptions import (
    ConfigParseError,
    ConfigurationError,
    CredentialValidationError,
    CredentialsError,
    LauncherException,
    MissingCredentialPropertyError,
    MissingKeyError,
    NotInitializedError,
    PluginError,
    TypeMismatchError,
    UnknownProviderError,
)


class TestExceptionHierarchy:
    """Test error codes, context and inheritance."""

    def test_to_dict(self):
        cause = ValueError("bad")
        error = ConfigParseError("Invalid HOCON", config_path="/etc/google.conf", cause=cause)
        data = error.to_dict()

        assert data["error_type"] == "ConfigParseError"
        assert data["error_code"] == "CONFIG_PARSE_ERROR"
        assert data["context"] == {"config_path": "/etc/google.conf"}
        assert data["cause"] == "bad"
        assert data["correlation_id"]

    def test_configuration_family(self):
        """Test lookup errors are configuration errors."""
        missing = MissingKeyError("google.compute.x")
        mismatch = TypeMismatchError("google.compute.y", "integer", "abc")

        assert isinstance(missing, ConfigurationError)
        assert isinstance(mismatch, ConfigurationError)
        assert missing.error_code == "CONFIG_MISSING_KEY"
        assert mismatch.context == {
            "path": "google.compute.y",
            "expected_type": "integer",
            "actual_type": "str",
        }

    def test_credentials_family(self):
        missing = MissingCredentialPropertyError("projectId", provider_id="google")
        rejected = CredentialValidationError("denied", provider_id="google")

        assert isinstance(missing, CredentialsError)
        assert isinstance(rejected, CredentialsError)
        assert missing.context == {"provider_id": "google", "config_key": "projectId"}
        assert rejected.error_code == "CREDENTIAL_VALIDATION_FAILED"

    def test_plugin_and_state_errors(self):
        unknown = UnknownProviderError("aws", known_ids=["google"])
        assert isinstance(unknown, PluginError)
        assert unknown.context == {"known_provider_ids": ["google"], "plugin_id": "aws"}

        not_initialized = NotInitializedError("create_cloud_provider")
        assert isinstance(not_initialized, LauncherException)
        assert "create_cloud_provider()" in str(not_initialized)

    def test_explicit_correlation_id(self):
        error = LauncherException("boom", "X", correlation_id="corr-9")
        assert error.correlation_id == "corr-9"
