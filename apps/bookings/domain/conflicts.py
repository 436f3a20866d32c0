"""
Conflict detection

This is the first line of defense against double bookings; the partial
unique constraint on Booking is the storage-level backstop.

Intervals are half-open, so a booking that ends exactly when another one
starts is not a conflict. Each existing booking is also compared one day
earlier and one day later, because a booking dated D that runs past
midnight occupies hours that a "12 AM - 1 AM" booking on D names as well.
"""

from __future__ import annotations

from typing import Iterable, Protocol, Sequence, TypeVar

from apps.bookings.domain.clock import booking_span, parse_clock
from apps.bookings.domain.slots import Slot
from shared.domain.value_objects import MinuteRange

DAY_OFFSETS = (0, -1, 1)


class ClockInterval(Protocol):
    """Anything with stored 12-hour start/end strings (Booking rows)."""

    start_time: str
    end_time: str


T = TypeVar("T", bound=ClockInterval)


def span_of(booking: ClockInterval) -> MinuteRange:
    """Overnight-normalized interval of a stored booking."""
    return booking_span(parse_clock(booking.start_time), parse_clock(booking.end_time))


def spans_collide(candidate: MinuteRange, existing: MinuteRange) -> bool:
    for days in DAY_OFFSETS:
        if candidate.overlaps_with(existing.shifted(days)):
            return True
    return False


def find_conflict(candidate: MinuteRange, existing: Iterable[T]) -> T | None:
    """Return the first existing booking overlapping the candidate, if any."""
    for booking in existing:
        if spans_collide(candidate, span_of(booking)):
            return booking
    return None


def partition_slots(
    slots: Iterable[Slot],
    existing: Sequence[ClockInterval],
) -> tuple[list[Slot], list[Slot]]:
    """Split slots into (free, taken) against the existing bookings."""
    spans = [span_of(booking) for booking in existing]
    free: list[Slot] = []
    taken: list[Slot] = []
    for slot in slots:
        if any(spans_collide(slot.span, span) for span in spans):
            taken.append(slot)
        else:
            free.append(slot)
    return free, taken
