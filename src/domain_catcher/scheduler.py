"""Fixed-interval scan scheduler."""

import logging
import time
from datetime import datetime

from .engine import AcquisitionEngine

logger = logging.getLogger(__name__)

# Longest single sleep while waiting between cycles; bounds shutdown latency.
WAIT_SLICE_SECS = 0.25


class ScanScheduler:
    """
    Runs engine cycles back to back with a fixed pause in between.

    The pause starts when a cycle finishes, so a slow cycle delays the next
    one instead of overlapping it. `stop()` only sets a flag, so it is safe
    to call from a signal handler or another thread: the current domain
    finishes, no new domain or cycle is started, and `run()` returns.
    """

    def __init__(self, engine: AcquisitionEngine, interval_secs: float):
        if interval_secs <= 0:
            raise ValueError(f"interval_secs must be positive, got {interval_secs}")
        self.engine = engine
        self.interval_secs = interval_secs
        self.cycles_completed = 0
        self._stop_requested = False
        self._running = False

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def stop_requested(self) -> bool:
        return self._stop_requested

    def stop(self) -> None:
        """Request shutdown; does not abort a call already in flight."""
        self._stop_requested = True

    def _wait(self) -> bool:
        """Sleep for the interval in short slices. Returns True if stopped meanwhile."""
        deadline = time.monotonic() + self.interval_secs
        while not self._stop_requested:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                return False
            time.sleep(min(WAIT_SLICE_SECS, remaining))
        return True

    def run_once(self) -> None:
        """Run a single cycle, logging instead of raising on failure."""
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        logger.info(f"Starting domain checks [{timestamp}]")
        try:
            summary = self.engine.run_cycle(should_continue=lambda: not self._stop_requested)
            logger.info(
                f"Finished checking all domains ({summary.checked} checked, {summary.registered} registered, "
                f"{summary.failed} failed, {summary.skipped} skipped, {summary.errors} errors)"
            )
        except Exception as e:
            logger.error(f"Error checking domains: {e}")
            logger.debug("Cycle failure details", exc_info=True)
        finally:
            self.cycles_completed += 1

    def run(self) -> None:
        """Loop until `stop()` is called."""
        logger.info(f"Checking domains every {self.interval_secs:g} seconds")
        self._running = True
        try:
            while not self._stop_requested:
                self.run_once()
                if self._wait():
                    break
        finally:
            self._running = False
            logger.info("Scan scheduler stopped")
