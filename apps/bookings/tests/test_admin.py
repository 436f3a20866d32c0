"""Tests for the booking admin."""

import pytest
from django.contrib import admin
from django.contrib.auth import get_user_model
from django.test import RequestFactory
from django.urls import reverse

from apps.bookings.admin import BookingAdmin
from apps.bookings.models import Booking

from .conftest import TOMORROW

pytestmark = pytest.mark.django_db


@pytest.fixture
def superuser():
    return get_user_model().objects.create_superuser(
        username="admin", email="admin@example.com", password="AdminPass123"
    )


def test_bookings_cannot_be_added(superuser):
    request = RequestFactory().get("/admin/bookings/booking/add/")
    request.user = superuser

    assert not BookingAdmin(Booking, admin.site).has_add_permission(request)


def test_add_view_is_forbidden(client, superuser):
    client.force_login(superuser)

    response = client.get(reverse("admin:bookings_booking_add"))

    assert response.status_code == 403


def test_slot_fields_are_frozen_and_status_editable(client, superuser, space, renter, make_booking):
    booking = make_booking(space, renter, TOMORROW, "2 PM", "3 PM")
    client.force_login(superuser)

    response = client.post(
        reverse("admin:bookings_booking_change", args=[booking.pk]),
        {
            "start_time": "14h",
            "end_time": "9 PM",
            "status": Booking.Status.CANCELLED,
            "contact_number": "",
            "notes": "",
        },
    )

    assert response.status_code == 302
    booking.refresh_from_db()
    assert (booking.start_time, booking.end_time) == ("2 PM", "3 PM")
    assert booking.status == Booking.Status.CANCELLED
