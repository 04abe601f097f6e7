"""Fixed-interval poll loop around the detection engine."""

import logging
import threading
import time
from collections.abc import Callable, Sequence

from .engine import ChangeDetectionEngine
from .events import PollReport, format_event

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL = 60.0


class MonitorScheduler:
    """Runs poll cycles one after another with a pause between them.

    Targets are read from ``targets_provider`` at the start of every cycle,
    so edits to the configured repository list apply without a restart.
    """

    def __init__(
        self,
        engine: ChangeDetectionEngine,
        targets_provider: Callable[[], Sequence[str]],
        interval: float = DEFAULT_INTERVAL,
    ):
        if interval <= 0:
            raise ValueError(f"Interval must be positive, got {interval}")
        self.engine = engine
        self.targets_provider = targets_provider
        self.interval = interval
        self._stop = threading.Event()
        self.cycles = 0

    def run_cycle(self) -> PollReport:
        """Run one poll cycle and log its events and failures."""
        targets = list(self.targets_provider() or [])
        self.cycles += 1
        if not targets:
            logger.debug("No repositories to monitor")
            return PollReport()

        report = self.engine.process_all_repositories(targets)

        for event in report.events:
            logger.info("%s", format_event(event))
        for failure in report.failures:
            logger.log(failure.severity, "%s", failure)

        return report

    def run_forever(self, max_cycles: int | None = None) -> None:
        """Poll until ``stop()`` is called or ``max_cycles`` have run."""
        self._stop.clear()
        started = time.monotonic()
        completed = 0

        while not self._stop.is_set():
            try:
                self.run_cycle()
            except Exception:
                logger.exception("Issue monitoring cycle failed")

            completed += 1
            if max_cycles is not None and completed >= max_cycles:
                break
            # Event.wait returns early when stop() is called
            self._stop.wait(self.interval)

        logger.debug(
            "Monitor stopped after %d cycles (%.0fs)",
            completed,
            time.monotonic() - started,
        )

    def stop(self) -> None:
        """Ask ``run_forever`` to return after the current cycle."""
        self._stop.set()
