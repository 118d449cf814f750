"""Command-line interface for the Domain Catcher."""

import argparse
from pathlib import Path
from typing import List, Optional

from .config import CatcherConfig, read_from_env


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="domain-catcher",
        description="Domain Catcher - registers watched domains as soon as they become available"
    )

    parser.add_argument(
        "--base-url",
        help="Registrar API base URL (default: TRANSIP_API_URL or https://api.transip.nl/v6)"
    )
    parser.add_argument(
        "--token",
        help="Bearer access token (default: TRANSIP_ACCESS_TOKEN)"
    )
    parser.add_argument(
        "--domains",
        help="Comma-separated domains to watch (default: DOMAINS)"
    )
    parser.add_argument(
        "--domains-file",
        type=Path,
        help="JSON file with a list of domains, used when no domains are given"
    )
    parser.add_argument(
        "--interval",
        type=float,
        help="Seconds between the end of one scan and the start of the next (default: 15)"
    )
    parser.add_argument(
        "--http-timeout",
        type=float,
        help="HTTP request timeout in seconds (default: 20)"
    )
    parser.add_argument(
        "--log-dir",
        type=Path,
        help="Directory for the daily audit logs (default: logs)"
    )
    parser.add_argument(
        "--dev",
        action="store_true",
        help="Enable development mode (verbose logging)"
    )

    return parser.parse_args(argv)


def build_config(ns: argparse.Namespace) -> CatcherConfig:
    """Build CatcherConfig from parsed arguments with environment variable fallbacks."""
    cfg = read_from_env()

    if ns.base_url:
        cfg.base_url = ns.base_url
    if ns.token:
        cfg.token = ns.token
    if ns.domains:
        cfg.domains_env = ns.domains
    if ns.domains_file:
        cfg.domains_file = ns.domains_file
    if ns.interval is not None:
        cfg.check_interval_secs = ns.interval
    if ns.http_timeout is not None:
        cfg.http_timeout_secs = ns.http_timeout
    if ns.log_dir:
        cfg.log_dir = ns.log_dir
    if ns.dev:
        cfg.dev = True

    if cfg.check_interval_secs <= 0:
        raise ValueError(f"Interval must be positive, got {cfg.check_interval_secs}")
    if cfg.http_timeout_secs <= 0:
        raise ValueError(f"HTTP timeout must be positive, got {cfg.http_timeout_secs}")

    # Normalize base URL (remove trailing slash)
    cfg.base_url = cfg.base_url.rstrip("/")

    return cfg
