"""Main entrypoint for the Domain Catcher."""

import logging
import signal
import sys
from functools import partial

from dotenv import load_dotenv

from . import __version__
from .audit import FileAuditSink
from .cli import build_config, parse_args
from .config import CatcherConfig
from .domains import load_domains
from .engine import AcquisitionEngine
from .exceptions import AuthError
from .gateway import RegistrarGateway
from .scheduler import ScanScheduler
from .session import RegistrarSession

logger = logging.getLogger(__name__)

PACKAGE_LOGGER = "domain_catcher"


def configure_logging(cfg: CatcherConfig) -> None:
    """Route domain_catcher loggers to the console; third-party loggers stay at WARNING."""
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if cfg.dev else logging.INFO)

    if cfg.dev:
        logger.debug("Development mode enabled, domain_catcher loggers at DEBUG")


def install_signal_handlers(scheduler: ScanScheduler) -> None:
    """Stop the scheduler on SIGINT/SIGTERM. The handler only sets a flag."""
    def _handler(signum, frame):
        logger.info(f"Received signal {signum}, stopping after the current domain...")
        scheduler.stop()

    signal.signal(signal.SIGINT, _handler)
    signal.signal(signal.SIGTERM, _handler)


def build_engine(cfg: CatcherConfig, session: RegistrarSession) -> AcquisitionEngine:
    gateway = RegistrarGateway(session)
    return AcquisitionEngine(
        gateway=gateway,
        audit_sink=FileAuditSink(cfg.log_dir),
        domain_loader=partial(load_domains, cfg),
    )


def main(config=None, argv=None) -> int:
    """
    Main entrypoint for the catcher.

    Args:
        config: Optional CatcherConfig instance (overrides argv)
        argv: Command line arguments (for testing)

    Returns:
        Exit code: 0 on graceful shutdown, 1 if authentication fails, 2 on bad configuration
    """
    if config is not None:
        cfg = config
    else:
        load_dotenv()
        try:
            cfg = build_config(parse_args(argv))
        except ValueError as e:
            logging.basicConfig(level=logging.INFO)
            logger.error(f"Invalid configuration: {e}")
            return 2

    configure_logging(cfg)

    logger.info(f"Domain Catcher v{__version__} starting")
    logger.info(f"API base URL: {cfg.base_url}")
    logger.info(f"Audit log directory: {cfg.log_dir}")

    with RegistrarSession(cfg.base_url, cfg.token, cfg.http_timeout_secs) as session:
        logger.info("Connecting to registrar API...")
        try:
            session.authenticate()
        except AuthError as e:
            logger.error(f"Connection to registrar failed: {e}")
            if e.detail:
                logger.error(f"Details: {e.detail}")
            logger.error("Check TRANSIP_ACCESS_TOKEN, or run domain-catcher-check-credentials for details")
            return 1
        logger.info("Connected successfully")

        scheduler = ScanScheduler(build_engine(cfg, session), cfg.check_interval_secs)
        install_signal_handlers(scheduler)

        try:
            scheduler.run()
        except KeyboardInterrupt:
            logger.info("Interrupted by user")
            return 130

    logger.info("Shutdown complete")
    return 0


if __name__ == "__main__":
    sys.exit(main())
