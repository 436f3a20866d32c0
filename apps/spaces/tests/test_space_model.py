"""Tests for space validation and lookup."""

from decimal import Decimal

import pytest
from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError

from apps.bookings.domain.clock import ClockTime
from apps.bookings.exceptions import SpaceNotFoundError
from apps.spaces.models import Space
from apps.spaces.services import get_space

pytestmark = pytest.mark.django_db


@pytest.fixture
def owner():
    return get_user_model().objects.create_user(username="host", password="HostPass123")


def build_space(owner, opening="6 AM", closing="10 PM"):
    return Space(
        owner=owner,
        name="Court One",
        price_per_hour=Decimal("30.00"),
        opening_time=opening,
        closing_time=closing,
    )


def test_operating_hours_are_parsed(owner):
    space = build_space(owner, "9 PM", "3 AM")

    assert space.operating_hours == (ClockTime(21, 0), ClockTime(3, 0))


def test_clean_accepts_overnight_hours(owner):
    build_space(owner, "9 PM", "3 AM").full_clean()


@pytest.mark.parametrize(("opening", "closing"), [("25 AM", "10 PM"), ("6", "10 PM"), ("8 AM", "8 AM")])
def test_clean_rejects_bad_hours(owner, opening, closing):
    with pytest.raises(ValidationError):
        build_space(owner, opening, closing).full_clean()


def test_get_space(owner):
    space = build_space(owner)
    space.save()

    assert get_space(space.pk) == space
    assert get_space(str(space.pk)) == space


@pytest.mark.parametrize("space_id", [987654, "not-a-number", None])
def test_get_space_missing(space_id):
    with pytest.raises(SpaceNotFoundError):
        get_space(space_id)
