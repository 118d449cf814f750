"""Acquisition engine: one scan cycle over the watched domains."""

import logging
from typing import Callable, FrozenSet, List, Optional, Set

from .audit import AuditSink
from .enums import AuditStatus, Verdict
from .gateway import RegistrarGateway
from .models import AuditEvent, CycleSummary

logger = logging.getLogger(__name__)

FREE_MESSAGE = "Domain is available for registration"
REGISTERED_MESSAGE = "Domain registration successful"
UNAVAILABLE_MESSAGE = "Domain not available for registration"


class AcquisitionEngine:
    """
    Checks each watched domain and registers the ones that are free.

    Domains are processed strictly one at a time in list order. A domain
    enters the claimed set only after a successful registration, and claimed
    domains are never probed again for the lifetime of the engine.
    """

    def __init__(
        self,
        gateway: RegistrarGateway,
        audit_sink: AuditSink,
        domain_loader: Callable[[], List[str]],
    ):
        """
        Initialize the engine.

        Args:
            gateway: Registrar gateway used for probes and registrations
            audit_sink: Receiver for audit events
            domain_loader: Called at the start of every cycle for the current list
        """
        self.gateway = gateway
        self.audit_sink = audit_sink
        self.domain_loader = domain_loader
        self._claimed: Set[str] = set()

    @property
    def claimed(self) -> FrozenSet[str]:
        return frozenset(self._claimed)

    def _emit(self, domain: str, status: AuditStatus, message: str) -> None:
        try:
            self.audit_sink.record(AuditEvent(domain=domain, status=status, message=message))
        except Exception as e:
            logger.error(f"Audit sink failed to record {status.value} for {domain}: {e}")

    def process_domain(self, domain: str, summary: CycleSummary) -> None:
        """Run the check/register state machine for a single domain."""
        if domain in self._claimed:
            logger.debug(f"Domain {domain} already registered in this session, skipping")
            summary.skipped += 1
            return

        summary.checked += 1
        verdict = self.gateway.check_availability(domain)

        if verdict is not Verdict.FREE:
            logger.info(f"{domain} is not available for registration")
            self._emit(domain, AuditStatus.UNAVAILABLE, UNAVAILABLE_MESSAGE)
            return

        summary.free += 1
        logger.info(f"Domain {domain} is available! Attempting to register...")
        self._emit(domain, AuditStatus.FREE, FREE_MESSAGE)

        outcome = self.gateway.register(domain)
        if outcome.success:
            self._claimed.add(domain)
            logger.info(f"Successfully registered {domain}")
            self._emit(domain, AuditStatus.REGISTERED, REGISTERED_MESSAGE)
            summary.registered += 1
        else:
            logger.error(f"Failed to register {domain}: {outcome.message}")
            self._emit(domain, AuditStatus.REGISTRATION_FAILED, outcome.message)
            summary.failed += 1

    def run_cycle(self, should_continue: Optional[Callable[[], bool]] = None) -> CycleSummary:
        """
        Run one full pass over the watched domains.

        Args:
            should_continue: Polled before each domain; returning False ends
                the cycle early without interrupting a call already in flight

        Returns:
            CycleSummary with per-cycle counters

        Raises:
            DomainListError: If the domain list cannot be loaded
        """
        domains = self.domain_loader()
        summary = CycleSummary()

        for domain in domains:
            if should_continue is not None and not should_continue():
                logger.info("Stop requested, ending cycle early")
                summary.interrupted = True
                break
            try:
                self.process_domain(domain, summary)
            except Exception:
                summary.errors += 1
                logger.exception(f"Unexpected error while processing {domain}")

        return summary
