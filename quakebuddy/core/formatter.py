"""Display formatting - Pure functions.

This module derives display strings from earthquake data.
All functions are pure with no side effects; the current time and the
time zone are always passed in.
"""

import math
from datetime import datetime, tzinfo
from decimal import Context, Decimal, ROUND_HALF_UP
from urllib.parse import urlparse


# USGS place strings look like "10km SSW of Basilisa, Philippines"
LOCATION_SEPARATOR = " of "

# Shown in place of an offset when the location has none
NEAR_THE = "Near the"

SECOND_MILLIS = 1000
MINUTE_MILLIS = 60 * SECOND_MILLIS
HOUR_MILLIS = 60 * MINUTE_MILLIS
DAY_MILLIS = 24 * HOUR_MILLIS

# Wide enough to quantize any finite float to one decimal place
MAGNITUDE_CONTEXT = Context(prec=400)

# Epoch values below this (fewer than 13 digits) are in seconds
MILLIS_THRESHOLD = 1_000_000_000_000

MAGNITUDE_10_PLUS = "magnitude10plus"

MAGNITUDE_COLORS: dict[str, str] = {
    "magnitude1": "#4A7BA7",
    "magnitude2": "#04B4B3",
    "magnitude3": "#10CAC9",
    "magnitude4": "#F5A623",
    "magnitude5": "#FF7D50",
    "magnitude6": "#FC6644",
    "magnitude7": "#E75F40",
    "magnitude8": "#E13A20",
    "magnitude9": "#D93218",
    MAGNITUDE_10_PLUS: "#C03823",
}


def split_location(location: str, near_label: str = NEAR_THE) -> tuple[str, str]:
    """Split a USGS place string into (offset, primary location).

    Pure function. Splits on the first " of " only; the separator stays
    with the offset.

    Args:
        location: Place string from the feed
        near_label: Offset text used when the place has no offset

    Returns:
        Tuple of (offset, primary location)
    """
    offset, separator, primary = location.partition(LOCATION_SEPARATOR)
    if not separator:
        return near_label, location
    return offset + separator, primary


def format_magnitude(magnitude: float) -> str:
    """Format magnitude to one decimal place, rounding half up.

    Pure function.
    """
    if not math.isfinite(magnitude):
        return str(magnitude)
    rounded = Decimal(repr(magnitude)).quantize(
        Decimal("0.1"), rounding=ROUND_HALF_UP, context=MAGNITUDE_CONTEXT,
    )
    return str(rounded)


def get_magnitude_color_key(magnitude: float) -> str:
    """Get the colour bucket key for a magnitude.

    Pure function. Floors 0 and 1 share a bucket; 10 and above, negative
    and non-finite values fall in the 10-plus bucket.
    """
    if not math.isfinite(magnitude):
        return MAGNITUDE_10_PLUS

    magnitude_floor = math.floor(magnitude)
    if magnitude_floor in (0, 1):
        return "magnitude1"
    if 2 <= magnitude_floor <= 9:
        return f"magnitude{magnitude_floor}"
    return MAGNITUDE_10_PLUS


def get_magnitude_color(magnitude: float) -> str:
    """Get the hex colour for a magnitude's bucket.

    Pure function.
    """
    return MAGNITUDE_COLORS[get_magnitude_color_key(magnitude)]


def to_millis(time: int) -> int:
    """Scale an epoch value in seconds to milliseconds if needed."""
    if time < MILLIS_THRESHOLD:
        return time * SECOND_MILLIS
    return time


def format_time_ago(time: int, now_ms: int) -> str | None:
    """Format an event time relative to now.

    Pure function.

    Args:
        time: Event time as epoch seconds or milliseconds
        now_ms: Current time in epoch milliseconds

    Returns:
        e.g. "just now", "5 minutes ago", "yesterday"; None if the time is
        in the future or not positive
    """
    time = to_millis(time)
    if time > now_ms or time <= 0:
        return None

    diff = now_ms - time
    if diff < MINUTE_MILLIS:
        return "just now"
    elif diff < 2 * MINUTE_MILLIS:
        return "a minute ago"
    elif diff < 50 * MINUTE_MILLIS:
        return f"{diff // MINUTE_MILLIS} minutes ago"
    elif diff < 120 * MINUTE_MILLIS:
        return "an hour ago"
    elif diff < 24 * HOUR_MILLIS:
        return f"{diff // HOUR_MILLIS} hours ago"
    elif diff < 48 * HOUR_MILLIS:
        return "yesterday"
    else:
        return f"{diff // DAY_MILLIS} days ago"


def to_local_datetime(time: int, tz: tzinfo | None) -> datetime | None:
    """Convert an epoch value to an aware datetime in ``tz``.

    ``tz=None`` uses the system zone's rules for that instant. Returns None
    when the value is outside the range the platform can represent.
    """
    try:
        local = datetime.fromtimestamp(to_millis(time) / SECOND_MILLIS, tz=tz)
        if tz is None:
            local = local.astimezone()
    except (OverflowError, ValueError, OSError):
        return None
    return local


def format_clock_time(time: int, tz: tzinfo | None, use_24_hour: bool = False) -> str:
    """Format the event time of day, e.g. "14:05" or "02:05 PM".

    Pure function. Empty for an unrepresentable time.
    """
    local = to_local_datetime(time, tz)
    if local is None:
        return ""
    if use_24_hour:
        return local.strftime("%H:%M")
    return local.strftime("%I:%M %p")


def format_date(time: int, tz: tzinfo | None) -> str:
    """Format the event date, e.g. "Feb 11, 2017".

    Pure function. Empty for an unrepresentable time.
    """
    local = to_local_datetime(time, tz)
    if local is None:
        return ""
    return f"{local:%b} {local.day}, {local.year}"


def is_today(time: int, now: datetime, tz: tzinfo | None) -> bool:
    """Check whether the event falls on the current calendar day in ``tz``.

    Pure function.
    """
    local = to_local_datetime(time, tz)
    if local is None:
        return False
    return local.date() == now.astimezone(tz).date()


def is_valid_detail_url(url: str | None) -> bool:
    """Check that a detail URL can be opened in a browser.

    Pure function.
    """
    if not url:
        return False
    parsed = urlparse(url)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)
