"""Pytest configuration and shared fixtures."""

import pytest

from domain_catcher.audit import MemoryAuditSink
from domain_catcher.config import CatcherConfig
from domain_catcher.session import RegistrarSession


@pytest.fixture
def config(tmp_path):
    """Test configuration."""
    return CatcherConfig(
        token="eyJtest-token",
        base_url="https://api.test/v6",
        check_interval_secs=0.01,
        http_timeout_secs=5.0,
        domains_file=tmp_path / "domains.json",
        log_dir=tmp_path / "logs",
    )


@pytest.fixture
def session(config):
    """Registrar session that has not authenticated yet."""
    s = RegistrarSession(config.base_url, config.token, config.http_timeout_secs)
    yield s
    s.close()


@pytest.fixture
def authed_session(session):
    """Session that skips the lazy authentication probe."""
    session._authenticated = True
    return session


@pytest.fixture
def audit_sink():
    return MemoryAuditSink()
