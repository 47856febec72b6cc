"""USGS API Client - Imperative Shell.

This module handles HTTP communication with the USGS Earthquake API.
All I/O is contained here; query building and parsing are in the core module.

Failures are never raised to the caller. Each one is logged and reported
as an empty body with a FailureReason.
"""

import logging
from dataclasses import dataclass
from datetime import datetime

import requests

from quakebuddy.core.earthquake import FailureReason
from quakebuddy.core.query import USGS_API_BASE, QueryFilters, build_query_url


logger = logging.getLogger(__name__)


# Timeouts for API requests (seconds)
DEFAULT_CONNECT_TIMEOUT = 15.0
DEFAULT_READ_TIMEOUT = 10.0


@dataclass
class FetchResult:
    """Response body from the USGS API.

    Attributes:
        body: Response text, empty on any failure
        status_code: HTTP status code (0 if no response)
        failure: Reason the body is empty, None on success
        error: Error message if failed
    """
    body: str
    status_code: int = 0
    failure: FailureReason | None = None
    error: str | None = None

    @property
    def success(self) -> bool:
        """Returns True if the body was fetched."""
        return self.failure is None


class USGSClient:
    """Client for fetching earthquake data from USGS API.

    This is part of the imperative shell - it handles HTTP I/O.
    """

    def __init__(
        self,
        base_url: str = USGS_API_BASE,
        connect_timeout: float = DEFAULT_CONNECT_TIMEOUT,
        read_timeout: float = DEFAULT_READ_TIMEOUT,
        session: requests.Session | None = None,
    ) -> None:
        """Initialize USGS client.

        Args:
            base_url: USGS API base URL
            connect_timeout: Connection timeout in seconds
            read_timeout: Read timeout in seconds
            session: Session to send requests through (module-level
                requests.get if None)
        """
        self.base_url = base_url
        self.connect_timeout = connect_timeout
        self.read_timeout = read_timeout
        self.session = session

    def fetch(self, url: str) -> FetchResult:
        """Fetch the raw response body for a URL.

        This method performs HTTP I/O. The connection is released on every
        path.

        Args:
            url: Full request URL

        Returns:
            FetchResult with the body, or an empty body and a failure reason
        """
        logger.info("Fetching earthquakes from USGS: %s", url)

        try:
            http = self.session or requests
            with http.get(
                url,
                timeout=(self.connect_timeout, self.read_timeout),
                stream=True,
            ) as response:
                if response.status_code != 200:
                    logger.error(
                        "USGS returned HTTP error response code: %d",
                        response.status_code,
                    )
                    return FetchResult(
                        body="",
                        status_code=response.status_code,
                        failure=FailureReason.HTTP_ERROR,
                        error=f"HTTP {response.status_code}",
                    )

                body = response.content.decode("utf-8", errors="replace")

        except (
            requests.exceptions.MissingSchema,
            requests.exceptions.InvalidSchema,
            requests.exceptions.InvalidURL,
        ) as e:
            logger.error("Problem building the URL %r: %s", url, e)
            return FetchResult(
                body="",
                failure=FailureReason.INVALID_URL,
                error=str(e),
            )
        except requests.Timeout:
            logger.error("USGS request timed out")
            return FetchResult(
                body="",
                failure=FailureReason.NETWORK_ERROR,
                error="Request timed out",
            )
        except requests.RequestException as e:
            logger.error("Problem retrieving the earthquake JSON results: %s", e)
            return FetchResult(
                body="",
                failure=FailureReason.NETWORK_ERROR,
                error=str(e),
            )

        logger.info("Fetched %d bytes from USGS", len(body))

        return FetchResult(body=body, status_code=200)

    def fetch_earthquakes(
        self,
        filters: QueryFilters,
        now: datetime | None = None,
    ) -> tuple[str, FetchResult]:
        """Build the query URL for filters and fetch it.

        Args:
            filters: Query filters
            now: Current time (defaults to local now)

        Returns:
            Tuple of (request URL, FetchResult)
        """
        if now is None:
            now = datetime.now().astimezone()

        try:
            url = build_query_url(self.base_url, filters, now)
        except (requests.exceptions.MissingSchema, requests.exceptions.InvalidURL) as e:
            logger.error("Problem building the URL from %r: %s", self.base_url, e)
            return self.base_url, FetchResult(
                body="",
                failure=FailureReason.INVALID_URL,
                error=str(e),
            )

        return url, self.fetch(url)
