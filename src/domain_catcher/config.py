"""Configuration management for the Domain Catcher."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

DEFAULT_BASE_URL = "https://api.transip.nl/v6"
DEFAULT_CHECK_INTERVAL_SECS = 15.0
DEFAULT_HTTP_TIMEOUT_SECS = 20.0


@dataclass
class CatcherConfig:
    """Configuration for the domain catcher."""

    token: str
    base_url: str = DEFAULT_BASE_URL
    check_interval_secs: float = DEFAULT_CHECK_INTERVAL_SECS
    http_timeout_secs: float = DEFAULT_HTTP_TIMEOUT_SECS
    domains_env: Optional[str] = None
    domains_file: Path = Path("config") / "domains.json"
    log_dir: Path = Path("logs")
    dev: bool = False


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}")
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {raw!r}")
    return value


def read_from_env() -> CatcherConfig:
    """Read configuration from environment variables."""
    base_url = os.getenv("TRANSIP_API_URL", DEFAULT_BASE_URL).rstrip("/")
    token = os.getenv("TRANSIP_ACCESS_TOKEN", "").strip()

    domains_file_str = os.getenv("DOMAIN_CATCHER_DOMAINS_FILE")
    domains_file = Path(domains_file_str) if domains_file_str else Path("config") / "domains.json"

    log_dir_str = os.getenv("DOMAIN_CATCHER_LOG_DIR")
    log_dir = Path(log_dir_str) if log_dir_str else Path("logs")

    return CatcherConfig(
        token=token,
        base_url=base_url,
        check_interval_secs=_env_float("CHECK_INTERVAL_SECONDS", DEFAULT_CHECK_INTERVAL_SECS),
        http_timeout_secs=_env_float("DOMAIN_CATCHER_HTTP_TIMEOUT", DEFAULT_HTTP_TIMEOUT_SECS),
        domains_env=os.getenv("DOMAINS"),
        domains_file=domains_file,
        log_dir=log_dir,
        dev=os.getenv("DOMAIN_CATCHER_DEV", "false").lower() == "true",
    )


def get_config() -> CatcherConfig:
    """Get catcher configuration with precedence: environment -> defaults."""
    return read_from_env()
