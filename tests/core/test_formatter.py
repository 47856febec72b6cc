"""Unit tests for display formatting.

Pure function tests - no mocks needed.
"""

import math
from datetime import datetime, timedelta, timezone

import pytest

from quakebuddy.core.formatter import (
    MAGNITUDE_COLORS,
    NEAR_THE,
    format_clock_time,
    format_date,
    format_magnitude,
    format_time_ago,
    get_magnitude_color,
    get_magnitude_color_key,
    is_today,
    is_valid_detail_url,
    split_location,
    to_millis,
)


MINUTE = 60 * 1000
HOUR = 60 * MINUTE
DAY = 24 * HOUR

# 2017-02-11 09:30:00 UTC
NOW_MS = 1486805400000


class TestSplitLocation:
    """Tests for split_location()."""

    def test_splits_offset_and_primary(self):
        offset, primary = split_location("10km SSW of Basilisa, Philippines")

        assert offset == "10km SSW of "
        assert primary == "Basilisa, Philippines"

    def test_no_separator_uses_near_label(self):
        assert split_location("Philippines") == (NEAR_THE, "Philippines")

    def test_localized_near_label(self):
        assert split_location("Philippines", near_label="Cerca de") == ("Cerca de", "Philippines")

    def test_splits_on_first_separator_only(self):
        offset, primary = split_location("5km N of Isle of Man")

        assert offset == "5km N of "
        assert primary == "Isle of Man"

    def test_separator_needs_spaces(self):
        """'of' inside a word is not a separator."""
        assert split_location("Gulf ofAlaska") == (NEAR_THE, "Gulf ofAlaska")


class TestFormatMagnitude:
    """Tests for format_magnitude()."""

    @pytest.mark.parametrize("magnitude, expected", [
        (4.96, "5.0"),
        (0.0, "0.0"),
        (5.2, "5.2"),
        (4.25, "4.3"),
        (4.05, "4.1"),
        (7, "7.0"),
        (10.04, "10.0"),
    ])
    def test_one_decimal_half_up(self, magnitude, expected):
        assert format_magnitude(magnitude) == expected

    def test_same_input_same_output(self):
        assert format_magnitude(3.14159) == format_magnitude(3.14159)

    @pytest.mark.parametrize("magnitude, expected", [
        (1e30, "1000000000000000000000000000000.0"),
        (-1e30, "-1000000000000000000000000000000.0"),
        (1e-300, "0.0"),
    ])
    def test_extreme_values_do_not_raise(self, magnitude, expected):
        assert format_magnitude(magnitude) == expected

    def test_largest_float_formats(self):
        assert format_magnitude(1.7976931348623157e308).endswith(".0")


class TestMagnitudeColorKey:
    """Tests for get_magnitude_color_key()."""

    def test_zero_and_one_share_bucket(self):
        assert get_magnitude_color_key(0.9) == get_magnitude_color_key(1.9) == "magnitude1"

    def test_one_and_two_differ(self):
        assert get_magnitude_color_key(1.9) != get_magnitude_color_key(2.1)

    @pytest.mark.parametrize("magnitude", range(2, 10))
    def test_distinct_buckets_two_to_nine(self, magnitude):
        assert get_magnitude_color_key(magnitude + 0.5) == f"magnitude{magnitude}"

    def test_ten_plus_shared(self):
        assert get_magnitude_color_key(10.0) == get_magnitude_color_key(15.0) == "magnitude10plus"

    @pytest.mark.parametrize("magnitude", [-0.5, -3.0, math.nan, math.inf])
    def test_degenerate_values_are_ten_plus(self, magnitude):
        assert get_magnitude_color_key(magnitude) == "magnitude10plus"

    def test_color_for_every_bucket(self):
        for magnitude in range(0, 12):
            assert get_magnitude_color(magnitude) in MAGNITUDE_COLORS.values()


class TestFormatTimeAgo:
    """Tests for format_time_ago()."""

    @pytest.mark.parametrize("age_ms, expected", [
        (30 * 1000, "just now"),
        (90 * 1000, "a minute ago"),
        (5 * MINUTE, "5 minutes ago"),
        (49 * MINUTE, "49 minutes ago"),
        (50 * MINUTE, "an hour ago"),
        (90 * MINUTE, "an hour ago"),
        (2 * HOUR, "2 hours ago"),
        (23 * HOUR + 59 * MINUTE, "23 hours ago"),
        (30 * HOUR, "yesterday"),
        (48 * HOUR, "2 days ago"),
        (10 * DAY + 5 * HOUR, "10 days ago"),
    ])
    def test_thresholds(self, age_ms, expected):
        assert format_time_ago(NOW_MS - age_ms, NOW_MS) == expected

    def test_future_is_none(self):
        assert format_time_ago(NOW_MS + MINUTE, NOW_MS) is None

    @pytest.mark.parametrize("time", [0, -5])
    def test_non_positive_is_none(self, time):
        assert format_time_ago(time, NOW_MS) is None

    def test_seconds_are_scaled(self):
        """10-digit epoch seconds are compared as milliseconds."""
        seconds = (NOW_MS - 3 * HOUR) // 1000
        assert format_time_ago(seconds, NOW_MS) == "3 hours ago"

    def test_same_input_same_output(self):
        time = NOW_MS - 7 * MINUTE
        assert format_time_ago(time, NOW_MS) == format_time_ago(time, NOW_MS)

    def test_to_millis(self):
        assert to_millis(1486805400) == NOW_MS
        assert to_millis(NOW_MS) == NOW_MS


class TestClockAndDate:
    """Tests for format_clock_time(), format_date() and is_today()."""

    def test_24_hour_clock(self):
        assert format_clock_time(NOW_MS, timezone.utc, use_24_hour=True) == "09:30"

    def test_12_hour_clock(self):
        pm = NOW_MS + 5 * HOUR
        assert format_clock_time(pm, timezone.utc) == "02:30 PM"

    def test_clock_uses_timezone(self):
        nzdt = timezone(timedelta(hours=13))
        assert format_clock_time(NOW_MS, nzdt, use_24_hour=True) == "22:30"

    def test_date(self):
        assert format_date(NOW_MS, timezone.utc) == "Feb 11, 2017"

    def test_date_accepts_seconds(self):
        assert format_date(NOW_MS // 1000, timezone.utc) == "Feb 11, 2017"

    def test_is_today_same_day(self):
        now = datetime(2017, 2, 11, 23, 0, tzinfo=timezone.utc)
        assert is_today(NOW_MS, now, timezone.utc) is True

    def test_is_today_previous_day(self):
        now = datetime(2017, 2, 12, 0, 30, tzinfo=timezone.utc)
        assert is_today(NOW_MS, now, timezone.utc) is False

    def test_is_today_depends_on_zone(self):
        """Same instants, different local calendar days."""
        now = datetime(2017, 2, 11, 12, 0, tzinfo=timezone.utc)
        event = NOW_MS - 9 * HOUR  # 00:30 UTC on Feb 11
        pst = timezone(timedelta(hours=-8))
        assert is_today(event, now, timezone.utc) is True
        assert is_today(event, now, pst) is False

    @pytest.mark.parametrize("time", [10**17, -10**17, 10**30])
    def test_unrepresentable_time_is_blank(self, time):
        """Times far outside the datetime range render blank, not an error."""
        assert format_clock_time(time, timezone.utc) == ""
        assert format_date(time, timezone.utc) == ""
        assert is_today(time, datetime(2017, 2, 11, tzinfo=timezone.utc), timezone.utc) is False

    def test_no_zone_uses_system_rules(self):
        """Without a zone the system's rules for that instant apply."""
        expected = datetime.fromtimestamp(NOW_MS / 1000).astimezone()

        assert format_clock_time(NOW_MS, None, use_24_hour=True) == f"{expected:%H:%M}"
        assert format_date(NOW_MS, None) == f"{expected:%b} {expected.day}, {expected.year}"
        assert is_today(NOW_MS, expected, None) is True


class TestIsValidDetailUrl:
    """Tests for is_valid_detail_url()."""

    @pytest.mark.parametrize("url", [
        "https://earthquake.usgs.gov/earthquakes/eventpage/us1000abcd",
        "http://ptwc.weather.gov",
    ])
    def test_valid(self, url):
        assert is_valid_detail_url(url) is True

    @pytest.mark.parametrize("url", [None, "", "not a url", "ftp://example.com/x", "https://"])
    def test_invalid(self, url):
        assert is_valid_detail_url(url) is False
