"""Exception hierarchy for the domain catcher."""

from typing import Optional


class CatcherError(Exception):
    """Base class for domain catcher errors."""
    pass


class ConfigurationError(CatcherError):
    """Raised when configuration or input data cannot be used."""
    pass


class DomainListError(ConfigurationError):
    """Raised when the watched domain list cannot be loaded."""
    pass


class AuthError(CatcherError):
    """Raised when the registrar rejects or cannot validate the credential."""

    def __init__(self, message: str, status_code: Optional[int] = None, detail: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail
