"""Admin registration for spaces."""

from __future__ import annotations

from django.contrib import admin

from .models import Space


@admin.register(Space)
class SpaceAdmin(admin.ModelAdmin):
    list_display = (
        "name",
        "sport_type",
        "city",
        "opening_time",
        "closing_time",
        "price_per_hour",
        "is_active",
        "owner",
    )
    list_filter = ("sport_type", "is_active", "city")
    search_fields = ("name", "city", "owner__email")
    readonly_fields = ("created_at", "updated_at")
