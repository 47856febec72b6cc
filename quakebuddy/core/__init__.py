"""Functional Core - Pure functions with no side effects.

This module contains all business logic as pure functions:
- Query URL building
- Earthquake data parsing
- Display formatting
- List item rendering

All functions here are deterministic and have no I/O.
"""

from quakebuddy.core.earthquake import Earthquake, FailureReason, ParseResult, parse_earthquakes
from quakebuddy.core.query import QueryFilters, build_query_url
from quakebuddy.core.formatter import (
    format_magnitude,
    format_time_ago,
    get_magnitude_color_key,
    split_location,
)
from quakebuddy.core.display import DisplayPreferences, ListItem, render_list_item

__all__ = [
    # Earthquake
    "Earthquake",
    "FailureReason",
    "ParseResult",
    "parse_earthquakes",
    # Query
    "QueryFilters",
    "build_query_url",
    # Formatter
    "format_magnitude",
    "format_time_ago",
    "get_magnitude_color_key",
    "split_location",
    # Display
    "DisplayPreferences",
    "ListItem",
    "render_list_item",
]
