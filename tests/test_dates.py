"""
Unit tests for the dates module.

Dutch dates are rendered in RFC 822 format using the Amsterdam offset in
effect on that day.
"""

import pytest

from rss_feed_generator.core.dates import DateParseError, normalize_date


def test_normalize_date_winter() -> None:
    """Test a plain Dutch date in winter time."""
    assert normalize_date("12 januari 2024") == "Fri, 12 Jan 2024 00:00:00 +0100"


def test_normalize_date_summer() -> None:
    """Test that daylight saving time shifts the offset."""
    assert normalize_date("1 juli 2024") == "Mon, 01 Jul 2024 00:00:00 +0200"


def test_normalize_date_abbreviated_month_with_time() -> None:
    """Test Dutch month abbreviations and a time of day."""
    assert normalize_date("3 mrt 2024 14:30") == "Sun, 03 Mar 2024 14:30:00 +0100"


def test_normalize_date_single_form_month() -> None:
    """Test a month with a single spelling."""
    assert normalize_date("12 mei 2024") == "Sun, 12 May 2024 00:00:00 +0200"


def test_normalize_date_with_weekday() -> None:
    """Test that a leading Dutch weekday name is accepted."""
    assert normalize_date("vrijdag 12 januari 2024") == "Fri, 12 Jan 2024 00:00:00 +0100"


def test_normalize_date_utc_renders_gmt() -> None:
    """Test that dates carrying UTC are rendered with the GMT marker."""
    assert normalize_date("12 januari 2024 10:00 UTC") == "Fri, 12 Jan 2024 10:00:00 GMT"


def test_normalize_date_empty() -> None:
    """Test that an empty date label yields an empty pubDate."""
    assert normalize_date("") == ""
    assert normalize_date("   ") == ""


def test_normalize_date_unparseable() -> None:
    """Test that text which is not a date raises DateParseError."""
    with pytest.raises(DateParseError, match="gisteren"):
        normalize_date("gisteren")


def test_normalize_date_out_of_range() -> None:
    """Test that impossible dates raise DateParseError."""
    with pytest.raises(DateParseError):
        normalize_date("32 januari 2024")


def test_normalize_date_unknown_calendar() -> None:
    """Test that an unsupported calendar raises DateParseError."""
    with pytest.raises(DateParseError, match="fr-FR"):
        normalize_date("12 janvier 2024", "fr-FR")


def test_date_parse_error_is_value_error() -> None:
    """Test that callers catching ValueError also see parse failures."""
    assert issubclass(DateParseError, ValueError)
