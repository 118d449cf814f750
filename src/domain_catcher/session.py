"""Authenticated session with the registrar API."""

import json
import logging
from typing import Any, Optional

import requests
from requests.exceptions import RequestException

from . import __version__
from .exceptions import AuthError

logger = logging.getLogger(__name__)

API_TEST_PATH = "/api-test"


def response_detail(response: requests.Response) -> Optional[str]:
    """Return a structured body as compact JSON, else the raw text, else None."""
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, (dict, list)):
        return json.dumps(body, separators=(',', ':'))
    text = (response.text or "").strip()
    return text or None


class RegistrarSession:
    """
    Holds the bearer token and the HTTP session used for every registrar call.

    Created once at process start and passed explicitly to the gateway. The
    token is validated lazily on first use, or on demand via `authenticate()`.
    """

    def __init__(self, base_url: str, token: str, timeout_secs: float = 20.0):
        """
        Initialize the session.

        Args:
            base_url: Registrar API base URL (e.g. https://api.transip.nl/v6)
            token: Bearer access token
            timeout_secs: Per-request timeout in seconds
        """
        self.base_url = base_url.rstrip('/')
        self.token = token
        self.timeout_secs = timeout_secs
        self._authenticated = False

        self.session = requests.Session()
        self.session.headers.update({
            'User-Agent': f'DomainCatcher/{__version__}',
            'Content-Type': 'application/json',
            'Accept': 'application/json',
        })

    @property
    def is_authenticated(self) -> bool:
        return self._authenticated

    def url(self, path: str) -> str:
        return self.base_url + '/' + path.lstrip('/')

    def _send(self, method: str, path: str, **kwargs: Any) -> requests.Response:
        headers = kwargs.pop('headers', {}) or {}
        headers['Authorization'] = f'Bearer {self.token}'
        kwargs.setdefault('timeout', self.timeout_secs)
        logger.debug(f"{method} {self.url(path)}")
        return self.session.request(method=method, url=self.url(path), headers=headers, **kwargs)

    def authenticate(self) -> str:
        """
        Validate the token with a lightweight authenticated probe.

        Always performs the probe, even when a previous call succeeded.

        Returns:
            The validated token

        Raises:
            AuthError: If no token is configured or the probe fails
        """
        if not self.token:
            raise AuthError("No access token configured")

        try:
            response = self._send('GET', API_TEST_PATH)
        except RequestException as e:
            logger.error(f"Authentication request failed: {e}")
            raise AuthError(f"Authentication request failed: {e}") from e

        if not 200 <= response.status_code < 300:
            detail = response_detail(response)
            logger.error(f"Authentication failed with status {response.status_code}")
            raise AuthError(
                f"Authentication failed with status {response.status_code}",
                status_code=response.status_code,
                detail=detail,
            )

        self._authenticated = True
        return self.token

    def request(self, method: str, path: str, **kwargs: Any) -> requests.Response:
        """
        Issue an authenticated request, authenticating first if needed.

        Raises:
            AuthError: If lazy authentication fails
            RequestException: On transport errors
        """
        if not self._authenticated:
            self.authenticate()
        return self._send(method, path, **kwargs)

    def close(self) -> None:
        """Close the HTTP session."""
        self.session.close()

    def __enter__(self) -> 'RegistrarSession':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
