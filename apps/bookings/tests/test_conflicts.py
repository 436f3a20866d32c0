"""Tests for overlap detection between bookings."""

from dataclasses import dataclass

import pytest

from apps.bookings.domain.clock import booking_span, parse_clock
from apps.bookings.domain.conflicts import find_conflict, partition_slots
from apps.bookings.domain.slots import iter_slots
from shared.domain.value_objects import MinuteRange


@dataclass
class Stored:
    start_time: str
    end_time: str


def span(start, end):
    return booking_span(parse_clock(start), parse_clock(end))


def collides(candidate, existing):
    return find_conflict(candidate, existing) is not None


@pytest.mark.parametrize(
    ("candidate", "existing", "expected"),
    [
        (("2 PM", "3 PM"), ("2 PM", "3 PM"), True),
        (("2:30 PM", "4 PM"), ("2 PM", "3 PM"), True),  # start inside
        (("1 PM", "2:30 PM"), ("2 PM", "3 PM"), True),  # end inside
        (("1 PM", "4 PM"), ("2 PM", "3 PM"), True),  # encloses
        (("2:15 PM", "2:45 PM"), ("2 PM", "3 PM"), True),  # enclosed
        (("3 PM", "4 PM"), ("2 PM", "3 PM"), False),  # adjacent after
        (("1 PM", "2 PM"), ("2 PM", "3 PM"), False),  # adjacent before
        (("6 AM", "7 AM"), ("2 PM", "3 PM"), False),
    ],
)
def test_three_overlap_shapes_and_adjacency(candidate, existing, expected):
    assert collides(span(*candidate), [Stored(*existing)]) is expected


def test_midnight_neighbours_do_not_conflict():
    assert not collides(span("12 AM", "1 AM"), [Stored("11 PM", "12 AM")])
    assert not collides(span("11 PM", "12 AM"), [Stored("12 AM", "1 AM")])


def test_overnight_booking_conflicts_with_both_sides_of_midnight():
    overnight = span("11 PM", "1 AM")

    assert collides(overnight, [Stored("11 PM", "12 AM")])
    assert collides(overnight, [Stored("12 AM", "1 AM")])
    assert collides(span("12 AM", "1 AM"), [Stored("11 PM", "1 AM")])


def test_find_conflict_returns_the_blocking_booking():
    blocking = Stored("2 PM", "4 PM")
    existing = [Stored("9 AM", "10 AM"), blocking]

    assert find_conflict(span("3 PM", "5 PM"), existing) is blocking
    assert find_conflict(span("10 AM", "2 PM"), existing) is None


def test_minute_range_overlap_is_half_open():
    assert MinuteRange(540, 600).overlaps_with(MinuteRange(570, 630))
    assert not MinuteRange(540, 600).overlaps_with(MinuteRange(600, 660))


def test_partition_covers_every_slot_exactly_once():
    generated = list(iter_slots(parse_clock("6 AM"), parse_clock("10 PM")))

    free, taken = partition_slots(generated, [Stored("2 PM", "4 PM"), Stored("9:30 PM", "10 PM")])

    assert [slot.start_hour for slot in taken] == [14, 15, 21]
    assert len(free) + len(taken) == len(generated)
    assert set(free).isdisjoint(taken)
    assert set(free) | set(taken) == set(generated)
