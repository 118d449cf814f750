"""Registrar API gateway: availability checks and registrations."""

import logging
from typing import Any, Dict, Optional

from requests.exceptions import RequestException

from .enums import Verdict
from .exceptions import AuthError
from .models import RegistrationOutcome
from .session import API_TEST_PATH, RegistrarSession, response_detail

logger = logging.getLogger(__name__)


def _is_free(body: Any) -> bool:
    """Accept both the nested and the top-level status shapes."""
    if not isinstance(body, dict):
        return False
    availability = body.get('availability')
    if isinstance(availability, dict) and availability.get('status') == 'free':
        return True
    return body.get('status') == 'free'


class RegistrarGateway:
    """
    Single point of contact with the registrar.

    `check_availability` and `register` never raise: every failure is turned
    into an `UNAVAILABLE` verdict or a failed `RegistrationOutcome`.
    """

    def __init__(self, session: RegistrarSession):
        self.session = session

    def authenticate(self) -> str:
        """Validate the credential. Raises AuthError on failure."""
        return self.session.authenticate()

    def verify_api_access(self) -> int:
        """Call the API test endpoint and return its HTTP status code."""
        response = self.session.request('GET', API_TEST_PATH)
        return response.status_code

    def check_availability(self, domain: str) -> Verdict:
        """
        Probe whether a domain can be registered.

        Args:
            domain: Fully qualified domain name

        Returns:
            Verdict.FREE only on a 2xx response that reports "free"
        """
        logger.debug(f"Checking if {domain} is available")
        try:
            response = self.session.request('GET', f'/domain-availability/{domain}')
        except AuthError as e:
            logger.warning(f"Availability check for {domain} skipped, not authenticated: {e}")
            return Verdict.UNAVAILABLE
        except RequestException as e:
            logger.warning(f"Availability check for {domain} failed: {e}")
            return Verdict.UNAVAILABLE

        if not 200 <= response.status_code < 300:
            logger.warning(f"Availability check for {domain} returned status {response.status_code}")
            return Verdict.UNAVAILABLE

        try:
            body = response.json()
        except ValueError:
            logger.warning(f"Availability check for {domain} returned a non-JSON body")
            return Verdict.UNAVAILABLE

        return Verdict.FREE if _is_free(body) else Verdict.UNAVAILABLE

    def register(self, domain: str) -> RegistrationOutcome:
        """
        Register a domain after re-confirming it is still free.

        The registration is billable and cannot be cancelled once accepted,
        so it is submitted at most once per call and never retried here.

        Args:
            domain: Fully qualified domain name

        Returns:
            RegistrationOutcome with the API response data on success
        """
        if self.check_availability(domain) is not Verdict.FREE:
            return RegistrationOutcome.failure(f"Domain {domain} is not available for registration")

        payload: Dict[str, Any] = {
            'domainName': domain,
            'registrationPeriod': 1,
            'authCode': '',
            'isTransferLocked': False,
        }

        try:
            response = self.session.request('POST', '/domains', json=payload)
        except (AuthError, RequestException) as e:
            logger.error(f"Registration request for {domain} failed: {e}")
            return RegistrationOutcome.failure(str(e))

        if not 200 <= response.status_code < 300:
            detail = response_detail(response) or f"HTTP {response.status_code}"
            logger.error(f"Registration of {domain} rejected with status {response.status_code}: {detail}")
            return RegistrationOutcome.failure(detail)

        data: Optional[Any] = None
        if response.content:
            try:
                data = response.json()
            except ValueError:
                data = response.text
        return RegistrationOutcome.ok(domain, data)
