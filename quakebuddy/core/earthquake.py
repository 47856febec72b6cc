"""Earthquake data models and parsing - Pure functions.

This module handles parsing USGS GeoJSON text into typed Earthquake objects.
All functions are pure with no side effects.

Parsing is all-or-nothing: a document with a missing ``features`` array or a
feature lacking a required field yields the no-result sentinel rather than a
partial list.
"""

import json
import math
from dataclasses import dataclass
from enum import Enum
from typing import Any


class FailureReason(str, Enum):
    """Why a fetch-parse cycle produced no data."""
    INVALID_URL = "invalid_url"
    NETWORK_ERROR = "network_error"
    HTTP_ERROR = "http_error"
    EMPTY_BODY = "empty_body"
    MALFORMED_JSON = "malformed_json"


@dataclass(frozen=True)
class Earthquake:
    """Immutable earthquake record.

    Attributes:
        magnitude: Earthquake magnitude
        location: Location text, e.g. "10km SSW of Basilisa, Philippines"
        time: Event time as an epoch value, exactly as the service sent it
        tsunami: Whether a tsunami warning was flagged
        url: USGS event detail URL (None if the feed omitted it)
    """
    magnitude: float
    location: str
    time: int
    tsunami: bool = False
    url: str | None = None

    @property
    def has_detail_page(self) -> bool:
        """Return True if a detail URL is available."""
        return bool(self.url)


@dataclass(frozen=True)
class ParseResult:
    """Outcome of parsing a response body.

    ``earthquakes`` is None for the no-result sentinel. ``failure`` and
    ``error`` describe why, for logging only.

    Attributes:
        earthquakes: Parsed earthquakes in feed order, or None
        failure: Reason no data was produced
        error: Human-readable detail
    """
    earthquakes: list[Earthquake] | None
    failure: FailureReason | None = None
    error: str | None = None

    @property
    def has_data(self) -> bool:
        """Returns True if at least one earthquake was parsed."""
        return bool(self.earthquakes)


def no_result(failure: FailureReason, error: str | None = None) -> ParseResult:
    """Build the no-result sentinel for a failure."""
    return ParseResult(earthquakes=None, failure=failure, error=error)


def parse_earthquake(feature: dict[str, Any]) -> Earthquake:
    """Parse a single GeoJSON feature into an Earthquake.

    Pure function.

    Args:
        feature: GeoJSON feature dict from USGS API

    Returns:
        Earthquake object

    Raises:
        KeyError: If ``properties`` or a required field is missing
        TypeError: If a field has the wrong shape
        ValueError: If a numeric field cannot be converted or is not finite
        OverflowError: If an integer field is infinite
    """
    props = feature["properties"]

    magnitude = props["mag"]
    place = props["place"]
    time_value = props["time"]
    tsunami = props["tsunami"]

    # JSON null is as good as missing for required fields
    if magnitude is None or place is None or time_value is None or tsunami is None:
        raise ValueError("required property is null")
    if not isinstance(place, str):
        raise TypeError(f"place must be a string, got {type(place).__name__}")

    url = props.get("url")
    if url is not None and not isinstance(url, str):
        raise TypeError(f"url must be a string, got {type(url).__name__}")

    magnitude = float(magnitude)
    if not math.isfinite(magnitude):
        raise ValueError(f"mag must be finite, got {magnitude}")

    return Earthquake(
        magnitude=magnitude,
        location=place,
        time=int(time_value),
        tsunami=int(tsunami) != 0,
        url=url,
    )


def parse_earthquakes(raw_body: str | None) -> ParseResult:
    """Parse a USGS GeoJSON response body into a list of Earthquakes.

    Pure function. Empty input and malformed documents both produce the
    no-result sentinel; they differ only in ``failure``.

    Args:
        raw_body: Response body text (may be empty)

    Returns:
        ParseResult with earthquakes in feed order, or the sentinel
    """
    if not raw_body:
        return no_result(FailureReason.EMPTY_BODY, "Response body is empty")

    try:
        data = json.loads(raw_body)
        features = data["features"]
        if not isinstance(features, list):
            raise TypeError("features is not an array")
        earthquakes = [parse_earthquake(feature) for feature in features]
    except (KeyError, TypeError, ValueError, OverflowError) as e:
        # json.JSONDecodeError is a ValueError; int(inf) is an OverflowError
        return no_result(
            FailureReason.MALFORMED_JSON,
            f"Problem parsing earthquake JSON: {e!r}",
        )

    return ParseResult(earthquakes=earthquakes)
