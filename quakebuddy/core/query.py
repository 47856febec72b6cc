"""USGS query building - Pure functions.

Builds the FDSN event query from user filters. The current time is always
passed in so results are deterministic.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta

from requests.models import PreparedRequest


# USGS FDSN Event Web Service base URL
USGS_API_BASE = "https://earthquake.usgs.gov/fdsnws/event/1/query"

# Number of results requested per fetch
DEFAULT_LIMIT = 50

# Time period preference -> days to look back
TIME_PERIODS: dict[str, int] = {
    "24": 1,
    "48": 2,
    "7": 7,
    "14": 14,
}

# Sort orders understood by the FDSN service
ORDER_BY_OPTIONS = ("time", "time-asc", "magnitude", "magnitude-asc")

START_TIME_FORMAT = "%Y-%m-%dT%H:%M:%S%z"


@dataclass(frozen=True)
class QueryFilters:
    """User-selected filters for the earthquake query.

    Values are passed to the service as-is; the service validates them.

    Attributes:
        time_period: One of "24", "48", "7", "14"
        min_magnitude: Minimum magnitude as a decimal string
        order_by: FDSN ``orderby`` value
        limit: Maximum number of results
    """
    time_period: str = "24"
    min_magnitude: str = "2.5"
    order_by: str = "time"
    limit: int = DEFAULT_LIMIT


def compute_start_time(time_period: str, now: datetime) -> datetime:
    """Compute the query start time for a time period preference.

    Pure function. Unrecognized periods leave ``now`` unchanged.

    Args:
        time_period: Time period preference
        now: Current time

    Returns:
        Start of the query window
    """
    days = TIME_PERIODS.get(time_period)
    if days is None:
        return now
    return now - timedelta(days=days)


def format_start_time(start: datetime) -> str:
    """Format a start time as ISO 8601 with a numeric offset.

    Naive datetimes are taken as local time. Example output:
    ``2017-02-11T09:30:00+0000``.
    """
    if start.tzinfo is None:
        start = start.astimezone()
    return start.strftime(START_TIME_FORMAT)


def build_query_params(filters: QueryFilters, now: datetime) -> dict[str, str]:
    """Build query parameters for USGS API request.

    Pure function.

    Args:
        filters: Query filters
        now: Current time

    Returns:
        Dict of URL query parameters, in request order
    """
    start = compute_start_time(filters.time_period, now)
    return {
        "format": "geojson",
        "starttime": format_start_time(start),
        "limit": str(filters.limit),
        "minmagnitude": filters.min_magnitude,
        "orderby": filters.order_by,
    }


def build_query_url(base_url: str, filters: QueryFilters, now: datetime) -> str:
    """Build the full request URL.

    Args:
        base_url: Service endpoint
        filters: Query filters
        now: Current time

    Returns:
        URL with encoded query string

    Raises:
        requests.exceptions.MissingSchema: If base_url has no scheme
        requests.exceptions.InvalidURL: If base_url cannot be parsed
    """
    request = PreparedRequest()
    request.prepare_url(base_url, build_query_params(filters, now))
    return request.url
