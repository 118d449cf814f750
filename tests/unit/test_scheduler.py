"""Tests for the scan scheduler loop."""

import threading
import time
from unittest.mock import Mock

import pytest

from domain_catcher.exceptions import DomainListError
from domain_catcher.models import CycleSummary
from domain_catcher.scheduler import ScanScheduler


class TestScanScheduler:
    """Test cycle sequencing, error isolation and shutdown."""

    def test_rejects_non_positive_interval(self):
        with pytest.raises(ValueError):
            ScanScheduler(Mock(), 0)

    def test_stops_after_requested(self):
        """Test that stop() during a cycle prevents the next one."""
        engine = Mock()
        scheduler = ScanScheduler(engine, interval_secs=0.01)

        def cycle(should_continue=None):
            if engine.run_cycle.call_count == 3:
                scheduler.stop()
            return CycleSummary()

        engine.run_cycle.side_effect = cycle
        scheduler.run()

        assert engine.run_cycle.call_count == 3
        assert scheduler.cycles_completed == 3
        assert scheduler.is_running is False

    def test_cycle_error_does_not_stop_scheduler(self):
        engine = Mock()
        scheduler = ScanScheduler(engine, interval_secs=0.01)
        results = [DomainListError("bad json"), RuntimeError("boom"), None]

        def cycle(should_continue=None):
            result = results.pop(0)
            if result is None:
                scheduler.stop()
                return CycleSummary()
            raise result

        engine.run_cycle.side_effect = cycle
        scheduler.run()

        assert engine.run_cycle.call_count == 3

    def test_should_continue_reflects_stop(self):
        engine = Mock()
        scheduler = ScanScheduler(engine, interval_secs=0.01)
        seen = []

        def cycle(should_continue=None):
            seen.append(should_continue())
            scheduler.stop()
            seen.append(should_continue())
            return CycleSummary()

        engine.run_cycle.side_effect = cycle
        scheduler.run()

        assert seen == [True, False]

    def test_stop_interrupts_wait(self):
        """Test that a long interval does not delay shutdown."""
        engine = Mock()
        engine.run_cycle.return_value = CycleSummary()
        scheduler = ScanScheduler(engine, interval_secs=60)

        thread = threading.Thread(target=scheduler.run)
        thread.start()
        try:
            for _ in range(200):
                if scheduler.cycles_completed:
                    break
                time.sleep(0.01)
            scheduler.stop()
            thread.join(timeout=5)
        finally:
            scheduler.stop()

        assert not thread.is_alive()
        assert engine.run_cycle.call_count == 1

    def test_stop_before_run_skips_all_cycles(self):
        engine = Mock()
        scheduler = ScanScheduler(engine, interval_secs=0.01)
        scheduler.stop()
        scheduler.run()
        engine.run_cycle.assert_not_called()

    def test_stop_is_a_plain_flag(self):
        """stop() must not take any lock, so a signal handler can call it mid-wait."""
        scheduler = ScanScheduler(Mock(), interval_secs=1)
        assert not any(isinstance(v, threading.Event) for v in vars(scheduler).values())
        scheduler.stop()
        assert scheduler.stop_requested is True

    def test_wait_runs_full_interval_without_stop(self):
        scheduler = ScanScheduler(Mock(), interval_secs=0.05)
        started = time.monotonic()
        assert scheduler._wait() is False
        assert time.monotonic() - started >= 0.05

    def test_wait_returns_early_when_stopped(self):
        scheduler = ScanScheduler(Mock(), interval_secs=60)
        timer = threading.Timer(0.05, scheduler.stop)
        timer.start()
        started = time.monotonic()
        try:
            assert scheduler._wait() is True
        finally:
            timer.cancel()
        assert time.monotonic() - started < 5
