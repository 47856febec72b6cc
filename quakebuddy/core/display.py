"""List item rendering - Pure functions.

Combines the formatter derivations with the user's display preferences
into the rows a list view shows.
"""

from dataclasses import dataclass
from datetime import datetime, tzinfo

from quakebuddy.core.earthquake import Earthquake
from quakebuddy.core.formatter import (
    NEAR_THE,
    SECOND_MILLIS,
    format_clock_time,
    format_date,
    format_magnitude,
    format_time_ago,
    get_magnitude_color,
    is_today,
    split_location,
)


TIME_DISPLAY_AGO = "ago"
TIME_DISPLAY_STANDARD = "standard"
TIME_DISPLAY_OPTIONS = (TIME_DISPLAY_AGO, TIME_DISPLAY_STANDARD)

TSUNAMI_ALERT_COLOR = "#000000"
TSUNAMI_HEADER = "Check for Tsunamis"


@dataclass(frozen=True)
class DisplayPreferences:
    """How the user wants list items shown.

    Attributes:
        time_display: "ago" for relative times, "standard" for clock time and date
        tsunami_theme: Highlight today's tsunami warnings
        use_24_hour: Use a 24-hour clock in "standard" mode
        near_label: Offset text for places without one
    """
    time_display: str = TIME_DISPLAY_AGO
    tsunami_theme: bool = True
    use_24_hour: bool = False
    near_label: str = NEAR_THE


@dataclass(frozen=True)
class ListItem:
    """One rendered row of the earthquake list."""
    primary_location: str
    location_offset: str
    magnitude: str
    color: str
    time_text: str
    date_text: str
    tsunami_alert: bool
    url: str | None


def render_list_item(
    earthquake: Earthquake,
    now: datetime,
    tz: tzinfo | None,
    prefs: DisplayPreferences | None = None,
) -> ListItem:
    """Render an earthquake as a list row.

    Pure function.

    A tsunami warning issued today (in ``tz``) replaces the magnitude
    colour and the location offset when the tsunami theme is enabled.

    Args:
        earthquake: Earthquake to render
        now: Current time (aware)
        tz: Time zone used for clock times and "today" (None for system local)
        prefs: Display preferences (defaults if None)

    Returns:
        ListItem ready for display
    """
    prefs = prefs or DisplayPreferences()

    offset, primary = split_location(earthquake.location, prefs.near_label)

    if prefs.time_display == TIME_DISPLAY_STANDARD:
        time_text = format_clock_time(earthquake.time, tz, prefs.use_24_hour)
        date_text = format_date(earthquake.time, tz)
    else:
        now_ms = int(now.timestamp() * SECOND_MILLIS)
        time_text = format_time_ago(earthquake.time, now_ms) or ""
        date_text = ""

    color = get_magnitude_color(earthquake.magnitude)
    tsunami_alert = (
        prefs.tsunami_theme
        and earthquake.tsunami
        and is_today(earthquake.time, now, tz)
    )
    if tsunami_alert:
        color = TSUNAMI_ALERT_COLOR
        offset = TSUNAMI_HEADER

    return ListItem(
        primary_location=primary,
        location_offset=offset,
        magnitude=format_magnitude(earthquake.magnitude),
        color=color,
        time_text=time_text,
        date_text=date_text,
        tsunami_alert=tsunami_alert,
        url=earthquake.url,
    )


def render_list(
    earthquakes: list[Earthquake],
    now: datetime,
    tz: tzinfo | None,
    prefs: DisplayPreferences | None = None,
) -> list[ListItem]:
    """Render a list of earthquakes, preserving order.

    Pure function.
    """
    return [render_list_item(e, now, tz, prefs) for e in earthquakes]
