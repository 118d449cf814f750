"""Credential smoke test for the registrar API."""

import logging
import sys
from typing import List, Optional

from dotenv import load_dotenv
from requests.exceptions import RequestException

from .config import CatcherConfig, read_from_env
from .exceptions import AuthError
from .gateway import RegistrarGateway
from .session import RegistrarSession

logger = logging.getLogger(__name__)


def diagnose_token(token: Optional[str]) -> List[str]:
    """Describe what is wrong (or plausible) about a configured token without leaking it."""
    if not token:
        return ["TRANSIP_ACCESS_TOKEN=not set"]
    if not token.startswith("eyJ"):
        return [
            "TRANSIP_ACCESS_TOKEN=*****",
            "Warning: the access token does not look like a JWT (should start with \"eyJ\").",
            "Make sure the FULL token was copied without extra spaces or quotes.",
        ]
    return [f"TRANSIP_ACCESS_TOKEN={token[:10]}***** (access token found with JWT format)"]


def check_credentials(cfg: CatcherConfig) -> bool:
    """
    Authenticate, then call the API test endpoint.

    Returns:
        True if both steps succeed
    """
    with RegistrarSession(cfg.base_url, cfg.token, cfg.http_timeout_secs) as session:
        gateway = RegistrarGateway(session)
        try:
            logger.info("Step 1: authenticating with the registrar API...")
            gateway.authenticate()
            logger.info("Authentication successful")

            logger.info("Step 2: testing API access with the api-test endpoint...")
            status = gateway.verify_api_access()
        except AuthError as e:
            logger.error(f"Credential test failed: {e}")
            if e.detail:
                logger.error(f"Response: {e.detail}")
            if e.status_code == 401:
                logger.error("Authentication was rejected. Make sure TRANSIP_ACCESS_TOKEN is correct and active.")
            for line in diagnose_token(cfg.token):
                logger.error(line)
            return False
        except RequestException as e:
            logger.error(f"No usable response from the API: {e}")
            for line in diagnose_token(cfg.token):
                logger.error(line)
            return False

    if status == 200:
        logger.info("API access successful - credentials are working correctly")
        return True

    logger.error(f"API access failed with status: {status}")
    return False


def main() -> int:
    load_dotenv()
    logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')
    try:
        cfg = read_from_env()
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1
    return 0 if check_credentials(cfg) else 1


if __name__ == "__main__":
    sys.exit(main())
