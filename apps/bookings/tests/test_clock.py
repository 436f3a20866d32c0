"""Tests for 12-hour clock parsing and formatting."""

import pytest

from apps.bookings.domain.clock import (
    ClockTime,
    booking_span,
    canonical_clock,
    format_hour,
    parse_clock,
)
from apps.bookings.exceptions import BookingValidationError


@pytest.mark.parametrize(
    ("value", "hour", "minute"),
    [
        ("9 AM", 9, 0),
        ("12 AM", 0, 0),
        ("12 PM", 12, 0),
        ("1 PM", 13, 0),
        ("11 PM", 23, 0),
        ("10:30 PM", 22, 30),
        ("12:15 AM", 0, 15),
        ("7 pm", 19, 0),
        ("6AM", 6, 0),
    ],
)
def test_parse_clock(value, hour, minute):
    assert parse_clock(value) == ClockTime(hour, minute)


@pytest.mark.parametrize("value", ["9", "", "ab PM", "13 PM", "0 AM", "9:75 AM", "9:5 AM", "noon", None])
def test_parse_clock_rejects_malformed_values(value):
    with pytest.raises(BookingValidationError):
        parse_clock(value)


@pytest.mark.parametrize(
    ("hour", "label"),
    [(0, "12 AM"), (9, "9 AM"), (12, "12 PM"), (15, "3 PM"), (23, "11 PM"), (24, "12 AM"), (26, "2 AM")],
)
def test_format_hour(hour, label):
    assert format_hour(hour) == label


def test_canonical_clock_normalizes_spelling():
    assert canonical_clock(" 2:00 pm ") == "2 PM"
    assert canonical_clock("10:05 PM") == "10:05 PM"


def test_booking_span_same_day():
    span = booking_span(parse_clock("9 AM"), parse_clock("10 AM"))
    assert (span.start, span.end) == (540, 600)
    assert not span.ends_next_day


def test_booking_span_wraps_past_midnight():
    until_midnight = booking_span(parse_clock("11 PM"), parse_clock("12 AM"))
    overnight = booking_span(parse_clock("11 PM"), parse_clock("1 AM"))

    assert (until_midnight.start, until_midnight.end) == (1380, 1440)
    assert (overnight.start, overnight.end) == (1380, 1500)
    assert until_midnight.ends_next_day
    assert len(overnight) == 120
