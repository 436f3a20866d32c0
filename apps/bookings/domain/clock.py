"""
Clock values

Spaces and bookings store their times as 12-hour clock strings such as
"9 AM" or "10:30 PM". This module parses them once into ClockTime values;
all arithmetic downstream works on minutes since midnight.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from apps.bookings.exceptions import BookingValidationError
from shared.domain.base import ValueObject
from shared.domain.value_objects import MINUTES_PER_DAY, MINUTES_PER_HOUR, MinuteRange

CLOCK_PATTERN = re.compile(r"^\s*(\d{1,2})(?::(\d{2}))?\s*([AaPp][Mm])\s*$")


@dataclass(frozen=True)
class ClockTime(ValueObject):
    """Time of day on a 24-hour scale (hour 0-23)."""

    hour: int
    minute: int = 0

    def __post_init__(self):
        if not 0 <= self.hour <= 23:
            raise BookingValidationError(f"Hour out of range: {self.hour}")
        if not 0 <= self.minute <= 59:
            raise BookingValidationError(f"Minute out of range: {self.minute}")

    @property
    def minutes(self) -> int:
        return self.hour * MINUTES_PER_HOUR + self.minute

    @property
    def display(self) -> str:
        """Canonical 12-hour form, e.g. "2 PM" or "10:30 PM"."""
        label = format_hour(self.hour)
        if not self.minute:
            return label
        number, period = label.split(" ")
        return f"{number}:{self.minute:02d} {period}"

    def __str__(self):
        return self.display


def parse_clock(value: str) -> ClockTime:
    """
    Parse "<h>[:<mm>] <AM|PM>" into a ClockTime.

    12 AM is midnight (hour 0) and 12 PM is noon (hour 12).

    Raises:
        BookingValidationError: missing AM/PM suffix, non-numeric or
            out-of-range hour or minute.
    """
    if not isinstance(value, str):
        raise BookingValidationError(f"Time must be a string like '9 AM', got {value!r}")

    match = CLOCK_PATTERN.match(value)
    if not match:
        raise BookingValidationError(f"Invalid time '{value}'. Use a format like '9 AM' or '10:30 PM'.")

    hour = int(match.group(1))
    minute = int(match.group(2) or 0)
    period = match.group(3).upper()

    if not 1 <= hour <= 12:
        raise BookingValidationError(f"Invalid hour in '{value}'.")
    if minute > 59:
        raise BookingValidationError(f"Invalid minutes in '{value}'.")

    if period == "PM" and hour != 12:
        hour += 12
    elif period == "AM" and hour == 12:
        hour = 0

    return ClockTime(hour, minute)


def format_hour(hour: int) -> str:
    """Inverse of parse_clock for whole hours; hours >= 24 wrap around."""
    hour %= 24
    if hour == 0:
        return "12 AM"
    if hour < 12:
        return f"{hour} AM"
    if hour == 12:
        return "12 PM"
    return f"{hour - 12} PM"


def canonical_clock(value: str) -> str:
    """Validate a clock string and return its canonical display form."""
    return parse_clock(value).display


def booking_span(start: ClockTime, end: ClockTime) -> MinuteRange:
    """
    Minute interval of one booking on its own date.

    An end earlier than the start means the booking runs past midnight,
    so a day is added to the end. Equal start and end is an empty booking.

    Raises:
        ValueError: start equals end.
    """
    end_minutes = end.minutes
    if end_minutes < start.minutes:
        end_minutes += MINUTES_PER_DAY
    return MinuteRange(start.minutes, end_minutes)
