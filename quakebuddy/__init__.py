"""QuakeBuddy - recent USGS earthquakes, formatted for a list view."""

__version__ = "1.0.0"
