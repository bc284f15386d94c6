"""
Tests for the Google launcher: lifecycle, metadata and provider creation.
"""

import logging
from unittest.mock import patch

import pytest

from gcp_launcher.domain.models import HttpProxyParameters
from gcp_launcher.framework.configuration import (
    COMPUTE_MAX_POLLING_INTERVAL_KEY,
    COMPUTE_POLLING_TIMEOUT_KEY,
    IMAGE_ALIASES_SECTION,
    TypedConfiguration,
    default_base_source,
)
from gcp_launcher.infrastructure.exceptions import (
    ConfigParseError,
    ConfigurationError,
    CredentialValidationError,
    MissingCredentialPropertyError,
    NotInitializedError,
    UnknownProviderError,
)
from gcp_launcher.plugins.google import (
    GoogleCloudProvider,
    GoogleCredentialValidator,
    GoogleLauncher,
)
from gcp_launcher.plugins.google.properties import GoogleCredentialsProviderConfigurationProperty

PROJECT_ID = GoogleCredentialsProviderConfigurationProperty.PROJECT_ID
JSON_KEY = GoogleCredentialsProviderConfigurationProperty.JSON_KEY


class TestLauncherLifecycle:
    """Test the Uninitialized -> Initialized transition."""

    @pytest.mark.parametrize("call", [
        lambda launcher: launcher.get_cloud_provider_metadata(),
        lambda launcher: launcher.get_metadata_for(GoogleCloudProvider.ID),
        lambda launcher: launcher.create_cloud_provider(GoogleCloudProvider.ID, {"projectId": "p"}),
        lambda launcher: launcher.configuration,
    ])
    def test_operations_require_initialization(self, accepting_validator, call):
        """Test every operation fails before initialize()."""
        launcher = GoogleLauncher(credential_validator=accepting_validator)

        with pytest.raises(NotInitializedError) as exc_info:
            call(launcher)
        assert exc_info.value.error_code == "LAUNCHER_NOT_INITIALIZED"
        accepting_validator.validate.assert_not_called()

    def test_default_validator(self):
        """Test the launcher validates against Google unless told otherwise."""
        assert isinstance(GoogleLauncher().credential_validator, GoogleCredentialValidator)

    def test_initialize(self, launcher):
        """Test initialization without an override document."""
        assert launcher.is_initialized()
        assert launcher.configuration == TypedConfiguration(default_base_source().load())

    def test_initialize_without_directory(self, accepting_validator):
        """Test a launcher may be initialized with no configuration directory."""
        launcher = GoogleLauncher(credential_validator=accepting_validator)
        launcher.initialize(None)
        assert launcher.configuration.get_int(COMPUTE_POLLING_TIMEOUT_KEY) == 180

    def test_second_initialize_is_noop(self, tmp_path, write_config, accepting_validator, caplog):
        """Test repeated initialization keeps the first configuration."""
        launcher = GoogleLauncher(credential_validator=accepting_validator)
        launcher.initialize(tmp_path)
        first = launcher.configuration

        write_config("google.compute.pollingTimeoutSeconds = 999")
        with caplog.at_level(logging.WARNING):
            launcher.initialize(tmp_path)

        assert launcher.configuration is first
        assert launcher.configuration.get_int(COMPUTE_POLLING_TIMEOUT_KEY) == 180
        assert "already initialized" in caplog.text

    def test_malformed_override_is_fatal(self, tmp_path, write_config, accepting_validator):
        """Test a broken override aborts initialization and leaves no state."""
        write_config("google { compute { pollingTimeoutSeconds = ")
        launcher = GoogleLauncher(credential_validator=accepting_validator)

        with pytest.raises(ConfigParseError):
            launcher.initialize(tmp_path)

        assert not launcher.is_initialized()
        with pytest.raises(NotInitializedError):
            launcher.get_cloud_provider_metadata()


class TestLauncherConfig:
    """Test the merged configuration held by the launcher."""

    def test_launcher_config(self, tmp_path, write_config, override_document, accepting_validator):
        """Test base, overridden and added values after initialization."""
        write_config(override_document)
        launcher = GoogleLauncher(credential_validator=accepting_validator)
        launcher.initialize(tmp_path)
        config = launcher.google_config

        # Base config is reflected.
        assert config.get_string(IMAGE_ALIASES_SECTION + "centos6") == (
            "https://www.googleapis.com/compute/v1/projects/centos-cloud/global/images/centos-6-v20180611"
        )
        assert config.get_int(COMPUTE_MAX_POLLING_INTERVAL_KEY) == 8

        # Overridden config is reflected.
        assert config.get_string(IMAGE_ALIASES_SECTION + "rhel6") == (
            "https://www.googleapis.com/compute/v1/projects/rhel-cloud/global/images/rhel-6-v20150430"
        )
        assert config.get_int(COMPUTE_POLLING_TIMEOUT_KEY) == 300

        # New config is reflected.
        assert config.get_string(IMAGE_ALIASES_SECTION + "ubuntu") == (
            "https://www.googleapis.com/compute/v1/projects/ubuntu-os-cloud/global/images/ubuntu-1404-trusty-v20150128"
        )


    def test_low_polling_timeout_override(self, tmp_path, write_config, accepting_validator,
                                          valid_credentials):
        """Test a timeout below the polling interval is a usable configuration."""
        write_config("google.compute.pollingTimeoutSeconds = 5")
        launcher = GoogleLauncher(credential_validator=accepting_validator)
        launcher.initialize(tmp_path)

        provider = launcher.create_cloud_provider(GoogleCloudProvider.ID, valid_credentials)

        assert provider.compute.polling_timeout_seconds == 5
        assert provider.compute.max_polling_interval_seconds == 8
        assert accepting_validator.validate.call_count == 1

    @pytest.mark.parametrize("document, error_code", [
        ("google.compute.pollingTimeoutSeconds = 0", "CONFIG_VALIDATION_ERROR"),
        ("google.compute.imageAliases.extra { a = \"b\" }", "CONFIG_TYPE_MISMATCH"),
    ])
    def test_invalid_compute_section_fails_initialize(self, tmp_path, write_config,
                                                      accepting_validator, document, error_code):
        """Test a broken compute section is reported by initialize(), not by provider creation."""
        write_config(document)
        launcher = GoogleLauncher(credential_validator=accepting_validator)

        with pytest.raises(ConfigurationError) as exc_info:
            launcher.initialize(tmp_path)

        assert exc_info.value.error_code == error_code
        assert not launcher.is_initialized()
        accepting_validator.validate.assert_not_called()


class TestLauncherMetadata:
    """Test provider metadata exposed by the launcher."""

    def test_single_provider(self, launcher):
        """Test exactly one Google provider is registered."""
        metadata_list = launcher.get_cloud_provider_metadata()
        assert len(metadata_list) == 1

        metadata = metadata_list[0]
        assert metadata.id == GoogleCloudProvider.ID == "google"
        assert len(metadata.get_provider_configuration_properties()) == 0

    def test_credentials_properties(self, launcher):
        """Test the credentials properties are projectId and jsonKey."""
        metadata = launcher.get_cloud_provider_metadata()[0]
        properties = metadata.get_credentials_provider_metadata().get_credentials_configuration_properties()

        assert len(properties) == 2
        assert PROJECT_ID.unwrap() in properties
        assert JSON_KEY.unwrap() in properties
        assert PROJECT_ID.unwrap().config_key == "projectId"
        assert JSON_KEY.unwrap().config_key == "jsonKey"
        assert JSON_KEY.unwrap().sensitive

    def test_metadata_for(self, launcher):
        """Test metadata lookup by id."""
        assert launcher.get_metadata_for("google") is GoogleCloudProvider.METADATA
        with pytest.raises(UnknownProviderError):
            launcher.get_metadata_for("aws")


class TestCreateCloudProvider:
    """Test provider creation through the launcher."""

    def test_create(self, launcher, valid_credentials, accepting_validator):
        """Test a Google provider is created from validated credentials."""
        provider = launcher.create_cloud_provider(GoogleCloudProvider.ID, valid_credentials, "en_GB")

        assert type(provider) is GoogleCloudProvider
        assert provider.provider_id == "google"
        assert provider.project_id == "test-project"
        assert provider.locale == "en_GB"
        assert provider.configuration is launcher.configuration
        assert provider.get_provider_metadata() is GoogleCloudProvider.METADATA
        accepting_validator.validate.assert_called_once_with({"projectId": "test-project"}, None)

    def test_default_locale(self, launcher, valid_credentials):
        provider = launcher.create_cloud_provider(GoogleCloudProvider.ID, valid_credentials)
        assert provider.locale == "en_US"

    def test_instances_are_not_shared(self, launcher, valid_credentials, accepting_validator):
        """Test identical credentials produce distinct instances, each validated."""
        first = launcher.create_cloud_provider(GoogleCloudProvider.ID, valid_credentials)
        second = launcher.create_cloud_provider(GoogleCloudProvider.ID, dict(valid_credentials))

        assert first is not second
        assert accepting_validator.validate.call_count == 2

    def test_rejected_credentials(self, tmp_path, rejecting_validator, valid_credentials):
        """Test externally rejected credentials yield no provider."""
        launcher = GoogleLauncher(credential_validator=rejecting_validator)
        launcher.initialize(tmp_path)

        with patch.object(GoogleCloudProvider, "__init__") as provider_init:
            with pytest.raises(CredentialValidationError):
                launcher.create_cloud_provider(GoogleCloudProvider.ID, valid_credentials)
            provider_init.assert_not_called()

    def test_missing_project_id(self, launcher, accepting_validator):
        """Test projectId is required."""
        with pytest.raises(MissingCredentialPropertyError) as exc_info:
            launcher.create_cloud_provider(GoogleCloudProvider.ID, {"jsonKey": "/keys/sa.json"})
        assert exc_info.value.config_key == "projectId"
        accepting_validator.validate.assert_not_called()

    def test_unknown_provider(self, launcher, valid_credentials):
        with pytest.raises(UnknownProviderError):
            launcher.create_cloud_provider("aws", valid_credentials)

    def test_provider_uses_merged_defaults(self, tmp_path, write_config, override_document,
                                           accepting_validator, valid_credentials):
        """Test compute defaults come from the merged configuration."""
        write_config(override_document)
        launcher = GoogleLauncher(credential_validator=accepting_validator)
        launcher.initialize(tmp_path)

        provider = launcher.create_cloud_provider(GoogleCloudProvider.ID, valid_credentials)

        assert provider.compute.polling_timeout_seconds == 300
        assert provider.compute.max_polling_interval_seconds == 8
        assert provider.resolve_image("ubuntu").endswith("ubuntu-1404-trusty-v20150128")
        assert provider.resolve_image("centos6").endswith("centos-6-v20180611")
        assert provider.resolve_image("projects/debian-cloud/global/images/debian-12") == (
            "projects/debian-cloud/global/images/debian-12"
        )

    def test_proxy_passed_to_provider(self, tmp_path, accepting_validator, valid_credentials):
        """Test the initialization proxy is handed to validator and provider."""
        proxy = HttpProxyParameters(host="proxy.corp", port=8080, username="u", password="p")
        launcher = GoogleLauncher(credential_validator=accepting_validator)
        launcher.initialize(tmp_path, proxy)

        provider = launcher.create_cloud_provider(GoogleCloudProvider.ID, valid_credentials)

        assert provider.http_proxy is proxy
        accepting_validator.validate.assert_called_once_with({"projectId": "test-project"}, proxy)
