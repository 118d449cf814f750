"""Enums for the domain catcher."""

from enum import Enum


class Verdict(str, Enum):
    """Result of a single availability probe."""

    FREE = "free"
    UNAVAILABLE = "unavailable"


class AuditStatus(str, Enum):
    """Status codes written to the audit log."""

    FREE = "FREE"
    REGISTERED = "REGISTERED"
    REGISTRATION_FAILED = "REGISTRATION_FAILED"
    UNAVAILABLE = "UNAVAILABLE"
