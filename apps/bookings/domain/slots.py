"""
Slot generation

A space's operating window is cut into one-hour slots. Windows whose
closing time is not after the opening time run overnight; their slots
carry raw hours of 24 and above, which are only wrapped when rendered.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from apps.bookings.domain.clock import ClockTime, format_hour
from shared.domain.base import ValueObject
from shared.domain.value_objects import MINUTES_PER_HOUR, MinuteRange


@dataclass(frozen=True)
class Slot(ValueObject):
    """One-hour bookable interval; hours may exceed 23 for overnight windows."""

    start_hour: int
    end_hour: int

    @property
    def start_label(self) -> str:
        return format_hour(self.start_hour)

    @property
    def end_label(self) -> str:
        return format_hour(self.end_hour)

    @property
    def label(self) -> str:
        return f"{self.start_label} - {self.end_label}"

    @property
    def next_day(self) -> bool:
        """Slot starts after midnight of the requested date."""
        return self.start_hour >= 24

    @property
    def span(self) -> MinuteRange:
        return MinuteRange(self.start_hour * MINUTES_PER_HOUR, self.end_hour * MINUTES_PER_HOUR)


def window_hours(opening: ClockTime, closing: ClockTime) -> tuple[int, int]:
    """
    First slot start and last slot end, in whole hours.

    Opening minutes round up and closing minutes round down so that every
    slot lies inside the window.
    """
    first = opening.hour + (1 if opening.minute else 0)
    closing_minutes = closing.minutes
    if closing_minutes <= opening.minutes:
        closing_minutes += 24 * MINUTES_PER_HOUR
    last = closing_minutes // MINUTES_PER_HOUR
    return first, last


def iter_slots(opening: ClockTime, closing: ClockTime) -> Iterator[Slot]:
    """Yield the window's one-hour slots in order. Each call starts afresh."""
    first, last = window_hours(opening, closing)
    for hour in range(first, last):
        yield Slot(hour, hour + 1)
