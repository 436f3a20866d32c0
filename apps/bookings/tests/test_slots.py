"""Tests for slot generation from operating hours."""

from types import GeneratorType

from apps.bookings.domain.clock import parse_clock
from apps.bookings.domain.slots import Slot, iter_slots


def slots(opening, closing):
    return list(iter_slots(parse_clock(opening), parse_clock(closing)))


def test_day_window_yields_hourly_slots():
    result = slots("6 AM", "10 PM")

    assert len(result) == 16
    assert result[0] == Slot(6, 7)
    assert result[-1] == Slot(21, 22)
    assert all(slot.end_hour - slot.start_hour == 1 for slot in result)
    assert result[-1].label == "9 PM - 10 PM"


def test_overnight_window_runs_past_midnight():
    result = slots("9 PM", "3 AM")

    assert [slot.start_hour for slot in result] == [21, 22, 23, 24, 25, 26]
    assert [slot.label for slot in result] == [
        "9 PM - 10 PM",
        "10 PM - 11 PM",
        "11 PM - 12 AM",
        "12 AM - 1 AM",
        "1 AM - 2 AM",
        "2 AM - 3 AM",
    ]
    assert [slot.next_day for slot in result] == [False, False, False, True, True, True]


def test_partial_hours_are_trimmed_to_the_window():
    result = slots("6:30 AM", "9:30 AM")

    assert result == [Slot(7, 8), Slot(8, 9)]


def test_generation_is_lazy_and_restartable():
    opening, closing = parse_clock("8 AM"), parse_clock("11 AM")

    generator = iter_slots(opening, closing)

    assert isinstance(generator, GeneratorType)
    assert list(generator) == [Slot(8, 9), Slot(9, 10), Slot(10, 11)]
    assert list(generator) == []
    assert list(iter_slots(opening, closing)) == [Slot(8, 9), Slot(9, 10), Slot(10, 11)]


def test_slot_span_is_in_minutes():
    span = Slot(24, 25).span

    assert (span.start, span.end) == (1440, 1500)
