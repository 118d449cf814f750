"""Loading of the watched domain list."""

import json
import logging
from typing import List

from .config import CatcherConfig
from .exceptions import DomainListError

logger = logging.getLogger(__name__)


def parse_domain_csv(value: str) -> List[str]:
    """Split a comma-separated domain list, keeping order and duplicates."""
    return [part.strip() for part in value.split(",") if part.strip()]


def read_domains_file(path) -> List[str]:
    """
    Read a JSON array of domain names from disk.

    Raises:
        DomainListError: If the file is missing, unreadable or not a list of strings
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise DomainListError(f"Could not read domain file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise DomainListError(f"Invalid JSON in domain file {path}: {e}") from e

    if not isinstance(data, list):
        raise DomainListError(f"Domain file {path} must contain a JSON array, got {type(data).__name__}")

    domains = []
    for index, item in enumerate(data):
        if not isinstance(item, str):
            raise DomainListError(f"Entry {index} in {path} is not a string: {item!r}")
        item = item.strip()
        if item:
            domains.append(item)
    return domains


def load_domains(cfg: CatcherConfig) -> List[str]:
    """
    Load the watched domains, preferring the DOMAINS variable over the JSON file.

    Args:
        cfg: Catcher configuration

    Returns:
        Domain names in list order
    """
    if cfg.domains_env and cfg.domains_env.strip():
        domains = parse_domain_csv(cfg.domains_env)
        source = "environment"
    else:
        domains = read_domains_file(cfg.domains_file)
        source = "file"

    logger.info(f"Loaded {len(domains)} domain(s) from {source}")
    for domain in domains:
        logger.debug(f"  -> {domain}")
    return domains
