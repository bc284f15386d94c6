"""
Credential validation against Google Cloud.

Credentials are proven usable by fetching the project resource from the
Compute Engine API, which exercises both the OAuth token exchange and the
caller's access to the project.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Optional

import google.auth
import requests
from google.auth.exceptions import GoogleAuthError
from google.auth.transport.requests import AuthorizedSession, Request
from google.oauth2 import service_account

from ...domain.interfaces import CredentialValidator
from ...domain.models import HttpProxyParameters
from ...infrastructure.exceptions import CredentialValidationError
from .properties import GoogleCredentialsProviderConfigurationProperty

logger = logging.getLogger(__name__)

PROVIDER_ID = "google"

COMPUTE_SCOPES = ("https://www.googleapis.com/auth/compute",)
COMPUTE_API_URL = "https://compute.googleapis.com/compute/v1"

PROJECT_ID_KEY = GoogleCredentialsProviderConfigurationProperty.PROJECT_ID.unwrap().config_key
JSON_KEY_KEY = GoogleCredentialsProviderConfigurationProperty.JSON_KEY.unwrap().config_key

KEY_SOURCE_JSON = "json_key"
KEY_SOURCE_DEFAULT = "application_default"


@dataclass(frozen=True)
class GoogleCredentials:
    """Credentials that passed validation, ready to authorize API calls."""
    project_id: str
    key_source: str
    credentials: Any = field(repr=False, compare=False)

    def authorized_session(self, http_proxy: Optional[HttpProxyParameters] = None) -> AuthorizedSession:
        return _authorized_session(self.credentials, http_proxy)


def _proxies(http_proxy: Optional[HttpProxyParameters]):
    if http_proxy is None:
        return {}
    url = http_proxy.to_url()
    return {"http": url, "https": url}


def _authorized_session(credentials, http_proxy: Optional[HttpProxyParameters]) -> AuthorizedSession:
    proxies = _proxies(http_proxy)

    # Token refreshes go through their own session, which must use the proxy too.
    auth_http = requests.Session()
    auth_http.proxies.update(proxies)

    session = AuthorizedSession(credentials, auth_request=Request(auth_http))
    session.proxies.update(proxies)
    return session


def _load_json_key(json_key: str) -> Mapping[str, Any]:
    if json_key.lstrip().startswith("{"):
        text = json_key
    else:
        text = Path(json_key).expanduser().read_text(encoding="utf-8")
    return json.loads(text)


class GoogleCredentialValidator(CredentialValidator):
    """Validates a project id plus a JSON key (or Application Default Credentials)."""

    def __init__(self, timeout: float = 30.0, compute_api_url: str = COMPUTE_API_URL):
        self.timeout = timeout
        self.compute_api_url = compute_api_url.rstrip("/")

    def build_credentials(self, json_key: Optional[str]):
        """Turn the credentials material into google-auth credentials without any network call."""
        if json_key:
            info = _load_json_key(json_key)
            return service_account.Credentials.from_service_account_info(
                info, scopes=list(COMPUTE_SCOPES)
            ), KEY_SOURCE_JSON

        credentials, _ = google.auth.default(scopes=list(COMPUTE_SCOPES))
        return credentials, KEY_SOURCE_DEFAULT

    def validate(
        self,
        credentials: Mapping[str, str],
        http_proxy: Optional[HttpProxyParameters] = None
    ) -> GoogleCredentials:
        project_id = credentials.get(PROJECT_ID_KEY)
        if not project_id:
            raise CredentialValidationError(
                f"Missing {PROJECT_ID_KEY}", provider_id=PROVIDER_ID
            )

        try:
            google_credentials, key_source = self.build_credentials(credentials.get(JSON_KEY_KEY))
        except (OSError, ValueError, GoogleAuthError) as e:
            # ValueError covers malformed JSON as well as incomplete key files.
            raise CredentialValidationError(
                f"Unable to load Google credentials: {type(e).__name__}: {e}",
                provider_id=PROVIDER_ID,
                context={"project_id": project_id},
                cause=e
            ) from e

        url = f"{self.compute_api_url}/projects/{project_id}"
        try:
            session = _authorized_session(google_credentials, http_proxy)
            response = session.get(url, timeout=self.timeout)
        except (GoogleAuthError, requests.RequestException) as e:
            raise CredentialValidationError(
                f"Unable to verify Google credentials: {type(e).__name__}: {e}",
                provider_id=PROVIDER_ID,
                context={"project_id": project_id, "key_source": key_source},
                cause=e
            ) from e

        if not 200 <= response.status_code < 300:
            raise CredentialValidationError(
                f"Google rejected credentials for project {project_id}: "
                f"HTTP {response.status_code} {response.text[:200]}",
                provider_id=PROVIDER_ID,
                context={
                    "project_id": project_id,
                    "key_source": key_source,
                    "status_code": response.status_code
                }
            )

        logger.info(
            "Google credentials validated",
            extra={"project_id": project_id, "key_source": key_source}
        )
        return GoogleCredentials(project_id=project_id, key_source=key_source, credentials=google_credentials)
