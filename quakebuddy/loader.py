"""Background loader for earthquake data.

Runs fetch-parse cycles on a worker thread so the display is never
blocked. Only the most recent request is delivered: starting a new load
supersedes any cycle still in flight, and late results are dropped.

Usage:
    loader = EarthquakeLoader(Orchestrator(), on_loaded)
    loader.load(config)      # initial load
    loader.restart(config)   # user refresh, supersedes the first
    loader.shutdown()
"""

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from datetime import datetime
from typing import Callable

from quakebuddy.core.config import Config
from quakebuddy.orchestrator import LoadResult, Orchestrator


logger = logging.getLogger(__name__)


def _call_now(delivery: Callable[[], None]) -> None:
    delivery()


class EarthquakeLoader:
    """Single-outstanding-request loader with supersede semantics.

    ``dispatch`` hands the delivery to the thread that owns the display
    (e.g. a GUI event loop's ``call_soon``). By default the callback runs
    on the worker thread.
    """

    def __init__(
        self,
        orchestrator: Orchestrator,
        callback: Callable[[LoadResult], None],
        dispatch: Callable[[Callable[[], None]], None] | None = None,
        executor: ThreadPoolExecutor | None = None,
    ) -> None:
        self.orchestrator = orchestrator
        self.callback = callback
        self.dispatch = dispatch or _call_now
        self._executor = executor or ThreadPoolExecutor(
            max_workers=1,
            thread_name_prefix="quake-loader",
        )
        self._lock = threading.Lock()
        self._generation = 0

    @property
    def generation(self) -> int:
        """Generation of the most recent request."""
        with self._lock:
            return self._generation

    def _next_generation(self) -> int:
        with self._lock:
            self._generation += 1
            return self._generation

    def is_current(self, generation: int) -> bool:
        """Check whether a generation is still the latest request."""
        with self._lock:
            return generation == self._generation

    def load(self, config: Config, now: datetime | None = None) -> Future:
        """Start a load, superseding any load in flight.

        Args:
            config: Application configuration
            now: Current time (defaults to local now at run time)

        Returns:
            Future resolving to the LoadResult, or None if superseded before it ran
        """
        generation = self._next_generation()
        logger.debug("Starting load generation %d", generation)
        return self._executor.submit(self._run, generation, config, now)

    def restart(self, config: Config, now: datetime | None = None) -> Future:
        """Refresh: restart loading with the current configuration."""
        return self.load(config, now)

    def cancel(self) -> None:
        """Drop the result of any load in flight."""
        generation = self._next_generation()
        logger.debug("Cancelled loads before generation %d", generation)

    def shutdown(self, wait: bool = True) -> None:
        """Cancel pending work and release the worker thread."""
        self.cancel()
        self._executor.shutdown(wait=wait)

    def _run(self, generation: int, config: Config, now: datetime | None) -> LoadResult | None:
        if not self.is_current(generation):
            logger.debug("Skipping superseded load generation %d", generation)
            return None

        result = self.orchestrator.process(config, now)

        def deliver() -> None:
            if not self.is_current(generation):
                logger.info("Discarding superseded load generation %d", generation)
                return
            try:
                self.callback(result)
            except Exception:
                logger.exception("Load callback failed for generation %d", generation)

        self.dispatch(deliver)
        return result
