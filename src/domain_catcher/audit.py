"""Append-only audit log of domain outcomes."""

import logging
import threading
from abc import ABC, abstractmethod
from datetime import timezone
from pathlib import Path
from typing import List

from .models import AuditEvent

logger = logging.getLogger(__name__)


class AuditSink(ABC):
    """Receives one event per domain outcome."""

    @abstractmethod
    def record(self, event: AuditEvent) -> None:
        """Record an event. Implementations must not raise."""
        pass


class FileAuditSink(AuditSink):
    """Writes events to one log file per UTC calendar day."""

    def __init__(self, log_dir: Path, prefix: str = "domain-catcher"):
        self.log_dir = Path(log_dir)
        self.prefix = prefix
        self._lock = threading.Lock()

    def path_for(self, event: AuditEvent) -> Path:
        day = event.timestamp.astimezone(timezone.utc).date().isoformat()
        return self.log_dir / f"{self.prefix}-{day}.log"

    def record(self, event: AuditEvent) -> None:
        try:
            line = event.to_line() + "\n"
            with self._lock:
                self.log_dir.mkdir(parents=True, exist_ok=True)
                with self.path_for(event).open("a", encoding="utf-8", errors="backslashreplace") as f:
                    f.write(line)
        except Exception as e:
            logger.error(f"Failed to write audit event for {event.domain}: {e}")


class MemoryAuditSink(AuditSink):
    """Keeps events in memory."""

    def __init__(self):
        self.events: List[AuditEvent] = []

    def record(self, event: AuditEvent) -> None:
        self.events.append(event)

    def for_domain(self, domain: str) -> List[AuditEvent]:
        return [e for e in self.events if e.domain == domain]
