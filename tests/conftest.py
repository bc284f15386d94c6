"""
Shared pytest fixtures for the launcher test suite.
"""

import textwrap
from pathlib import Path
from typing import Callable
from unittest.mock import Mock

import pytest

from gcp_launcher.domain.interfaces import CredentialValidator
from gcp_launcher.framework.configuration import GOOGLE_CONFIG_FILENAME
from gcp_launcher.infrastructure.exceptions import CredentialValidationError
from gcp_launcher.plugins.google import GoogleCredentials, GoogleLauncher

OVERRIDE_DOCUMENT = """\
google {
  compute {
    imageAliases {
      rhel6 = "https://www.googleapis.com/compute/v1/projects/rhel-cloud/global/images/rhel-6-v20150430",
      ubuntu = "https://www.googleapis.com/compute/v1/projects/ubuntu-os-cloud/global/images/ubuntu-1404-trusty-v20150128"
    }
    pollingTimeoutSeconds = 300
  }
}
"""

VALID_CREDENTIALS = {"projectId": "test-project", "jsonKey": ""}


def _accept(credentials, http_proxy=None):
    return GoogleCredentials(
        project_id=credentials["projectId"],
        key_source="application_default",
        credentials=object()
    )


@pytest.fixture
def write_config(tmp_path) -> Callable[..., Path]:
    """Writes a document into tmp_path and returns its path."""
    def _write(text: str, name: str = GOOGLE_CONFIG_FILENAME) -> Path:
        path = tmp_path / name
        path.write_text(textwrap.dedent(text), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def accepting_validator():
    """Validator double that accepts any credentials."""
    validator = Mock(spec=CredentialValidator)
    validator.validate.side_effect = _accept
    return validator


@pytest.fixture
def rejecting_validator():
    """Validator double that rejects every credential."""
    validator = Mock(spec=CredentialValidator)
    validator.validate.side_effect = CredentialValidationError(
        "HTTP 403 Forbidden", provider_id="google"
    )
    return validator


@pytest.fixture
def launcher(tmp_path, accepting_validator):
    """Initialized Google launcher without an override document."""
    launcher = GoogleLauncher(credential_validator=accepting_validator)
    launcher.initialize(tmp_path)
    return launcher


@pytest.fixture
def override_document() -> str:
    """User override adding an alias, replacing one and raising the polling timeout."""
    return OVERRIDE_DOCUMENT


@pytest.fixture
def valid_credentials():
    return dict(VALID_CREDENTIALS)
