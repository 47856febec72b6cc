"""Orchestrator - Wires Functional Core and Imperative Shell.

This module coordinates one fetch-parse cycle: build the query, fetch
the body, parse it. Every failure collapses to an empty list; the reason
is kept on the result for logging and tests.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime

from quakebuddy.core.config import Config
from quakebuddy.core.earthquake import Earthquake, FailureReason, parse_earthquakes
from quakebuddy.shell.usgs_client import USGSClient


logger = logging.getLogger(__name__)


@dataclass
class LoadResult:
    """Result of a complete fetch-parse cycle.

    Attributes:
        url: Request URL that was fetched
        earthquakes: Parsed earthquakes (empty on failure)
        failure: Why no data was produced, None on success
        error: Error message if failed
    """
    url: str
    earthquakes: list[Earthquake] = field(default_factory=list)
    failure: FailureReason | None = None
    error: str | None = None

    @property
    def success(self) -> bool:
        """Returns True if the cycle completed without a failure."""
        return self.failure is None

    @property
    def summary(self) -> str:
        """Human-readable summary of the load result."""
        if self.failure is not None:
            return f"No earthquakes loaded ({self.failure.value}: {self.error})"
        return f"Loaded {len(self.earthquakes)} earthquakes"


class Orchestrator:
    """Coordinates fetching and parsing earthquake data.

    This class wires together:
    - Core query building and parsing
    - USGS client (fetches earthquake data)
    """

    def __init__(
        self,
        usgs_client: USGSClient | None = None,
    ) -> None:
        """Initialize orchestrator.

        Args:
            usgs_client: USGS client (created per config if not provided)
        """
        self.usgs_client = usgs_client

    def _client_for(self, config: Config) -> USGSClient:
        if self.usgs_client is not None:
            return self.usgs_client
        return USGSClient(base_url=config.base_url)

    def process(self, config: Config, now: datetime | None = None) -> LoadResult:
        """Run one fetch-parse cycle.

        Args:
            config: Application configuration
            now: Current time (defaults to local now)

        Returns:
            LoadResult with earthquakes, or an empty list and a failure
        """
        client = self._client_for(config)
        url, fetched = client.fetch_earthquakes(config.filters, now)

        if not fetched.success:
            logger.warning("Fetch failed (%s): %s", fetched.failure.value, fetched.error)
            return LoadResult(url=url, failure=fetched.failure, error=fetched.error)

        parsed = parse_earthquakes(fetched.body)

        if parsed.earthquakes is None:
            logger.error("Parse failed (%s): %s", parsed.failure.value, parsed.error)
            return LoadResult(url=url, failure=parsed.failure, error=parsed.error)

        result = LoadResult(url=url, earthquakes=parsed.earthquakes)
        logger.info("Completed: %s", result.summary)
        return result
