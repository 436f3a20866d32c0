"""Admin registration for bookings."""

from __future__ import annotations

from django.contrib import admin

from .models import Booking


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    """Bookings are created through the booking service only; the slot is frozen here."""

    list_display = (
        "id",
        "space",
        "renter",
        "date",
        "start_time",
        "end_time",
        "status",
        "total_amount",
        "expires_at",
    )
    list_filter = ("status", "date")
    search_fields = ("space__name", "renter__email", "renter__username")
    readonly_fields = (
        "space",
        "renter",
        "date",
        "start_time",
        "end_time",
        "duration_hours",
        "total_amount",
        "currency",
        "expires_at",
        "created_at",
        "updated_at",
    )

    def has_add_permission(self, request) -> bool:
        return False
