"""Tests for Java-style date pattern formatting."""

from datetime import UTC, datetime

import pytest

from cvs_tag.dates import DatePatternError, format_java_date


def test_formats_numeric_fields() -> None:
    when = datetime(2024, 3, 5, 9, 7, 3, 45000)
    assert format_java_date("yyyy_MM_dd", when) == "2024_03_05"
    assert format_java_date("yy-M-d HH:mm:ss.SSS", when) == "24-3-5 09:07:03.045"


def test_formats_names_in_english() -> None:
    when = datetime(2024, 3, 5)
    assert format_java_date("EEEE, MMMM d", when) == "Tuesday, March 5"
    assert format_java_date("EEE MMM", when) == "Tue Mar"


def test_twelve_hour_clock() -> None:
    assert format_java_date("h:mm a", datetime(2024, 1, 1, 0, 30)) == "12:30 AM"
    assert format_java_date("h:mm a", datetime(2024, 1, 1, 12, 5)) == "12:05 PM"
    assert format_java_date("h:mm a", datetime(2024, 1, 1, 23, 59)) == "11:59 PM"


def test_quoted_text_is_literal() -> None:
    when = datetime(2024, 3, 5)
    assert format_java_date("'build' yyyy", when) == "build 2024"
    assert format_java_date("yyyy''MM", when) == "2024'03"


def test_time_zone_name() -> None:
    assert format_java_date("z", datetime(2024, 3, 5, tzinfo=UTC)) == "UTC"


def test_unknown_letter_rejected() -> None:
    with pytest.raises(DatePatternError, match="'Q'"):
        format_java_date("yyyyQ", datetime(2024, 3, 5))


def test_unterminated_quote_rejected() -> None:
    with pytest.raises(DatePatternError, match="unterminated"):
        format_java_date("'oops", datetime(2024, 3, 5))
