"""Data carriers passed between the gateway, the engine and the audit sink."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional

from .enums import AuditStatus


@dataclass
class RegistrationOutcome:
    """Result of attempting to claim a domain."""

    success: bool
    message: str
    data: Optional[Any] = None

    @classmethod
    def ok(cls, domain: str, data: Optional[Any] = None) -> 'RegistrationOutcome':
        return cls(success=True, message=f"Domain {domain} registered successfully", data=data)

    @classmethod
    def failure(cls, reason: str) -> 'RegistrationOutcome':
        return cls(success=False, message=reason)


@dataclass(frozen=True)
class AuditEvent:
    """A single append-only audit record."""

    domain: str
    status: AuditStatus
    message: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_line(self) -> str:
        """Render the event as one log line (without trailing newline)."""
        ts = self.timestamp.astimezone(timezone.utc).isoformat(timespec="milliseconds")
        ts = ts.replace("+00:00", "Z")
        return f"{ts} - Domain: {self.domain} - Status: {self.status.value} - {self.message}"


@dataclass
class CycleSummary:
    """Counters for one pass over the watched domain list."""

    checked: int = 0
    free: int = 0
    registered: int = 0
    failed: int = 0
    skipped: int = 0
    errors: int = 0
    interrupted: bool = False
