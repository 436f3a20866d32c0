"""Shared fixtures for booking tests."""

from __future__ import annotations

from datetime import date, datetime, timedelta
from decimal import Decimal

import pytest
from django.contrib.auth import get_user_model
from django.utils import timezone

from apps.bookings.domain.clock import booking_span, parse_clock
from apps.bookings.models import Booking
from apps.bookings.services import booking_duration, compute_expires_at
from apps.spaces.models import Space

FIXED_NOW = datetime(2030, 5, 10, 9, 15)
TODAY = FIXED_NOW.date()
TOMORROW = TODAY + timedelta(days=1)


def aware(value: datetime) -> datetime:
    return timezone.make_aware(value, timezone.get_current_timezone())


@pytest.fixture
def now():
    """Injected clock frozen at 2030-05-10 09:15 local time."""
    frozen = aware(FIXED_NOW)
    return lambda: frozen


@pytest.fixture
def owner(db):
    return get_user_model().objects.create_user(
        username="host", email="host@example.com", password="HostPass123"
    )


@pytest.fixture
def renter(db):
    return get_user_model().objects.create_user(
        username="renter", email="renter@example.com", password="RenterPass123"
    )


@pytest.fixture
def other_renter(db):
    return get_user_model().objects.create_user(
        username="other", email="other@example.com", password="OtherPass123"
    )


@pytest.fixture
def space(owner):
    return Space.objects.create(
        owner=owner,
        name="Riverside Turf",
        sport_type=Space.SportType.FOOTBALL,
        city="Pune",
        price_per_hour=Decimal("40.00"),
        opening_time="6 AM",
        closing_time="10 PM",
    )


@pytest.fixture
def night_space(owner):
    return Space.objects.create(
        owner=owner,
        name="Midnight Courts",
        sport_type=Space.SportType.BADMINTON,
        price_per_hour=Decimal("25.00"),
        opening_time="9 PM",
        closing_time="3 AM",
    )


@pytest.fixture
def make_booking():
    """Insert a booking row directly, bypassing the lifecycle checks."""

    def _make(space, renter, day: date, start: str, end: str, **extra) -> Booking:
        span = booking_span(parse_clock(start), parse_clock(end))
        fields = {
            "space": space,
            "renter": renter,
            "date": day,
            "start_time": start,
            "end_time": end,
            "duration_hours": booking_duration(span),
            "total_amount": space.price_per_hour * booking_duration(span),
            "expires_at": compute_expires_at(day, span),
        }
        fields.update(extra)
        return Booking.objects.create(**fields)

    return _make
