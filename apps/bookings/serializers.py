"""Serializers for the booking domain."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .domain.clock import canonical_clock
from .exceptions import BookingValidationError
from .models import NOTES_MAX_LENGTH, Booking


def _clock_field_value(value: str) -> str:
    try:
        return canonical_clock(value)
    except BookingValidationError as exc:
        raise serializers.ValidationError(str(exc)) from exc


class BookingCreateSerializer(serializers.Serializer):
    """Booking request from a renter."""

    space = serializers.IntegerField(min_value=1)
    date = serializers.DateField()
    start_time = serializers.CharField(max_length=16)
    end_time = serializers.CharField(max_length=16)
    contact_number = serializers.CharField(max_length=20, required=False, allow_blank=True, default="")
    notes = serializers.CharField(
        max_length=NOTES_MAX_LENGTH,
        required=False,
        allow_blank=True,
        default="",
    )

    def validate_start_time(self, value: str) -> str:
        return _clock_field_value(value)

    def validate_end_time(self, value: str) -> str:
        return _clock_field_value(value)


class BookingSerializer(serializers.ModelSerializer):
    """Detailed booking representation."""

    space_id = serializers.ReadOnlyField(source="space.id")
    space_name = serializers.ReadOnlyField(source="space.name")
    renter_id = serializers.ReadOnlyField(source="renter.id")
    slot = serializers.ReadOnlyField(source="slot_label")

    class Meta:
        model = Booking
        fields = [
            "id",
            "space_id",
            "space_name",
            "renter_id",
            "date",
            "start_time",
            "end_time",
            "slot",
            "duration_hours",
            "total_amount",
            "currency",
            "status",
            "contact_number",
            "notes",
            "expires_at",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class AvailabilityQuerySerializer(serializers.Serializer):
    date = serializers.DateField()


class SlotSerializer(serializers.Serializer):
    start_time = serializers.CharField(source="start_label")
    end_time = serializers.CharField(source="end_label")
    slot = serializers.CharField(source="label")
    next_day = serializers.BooleanField()


class BookedSlotSerializer(serializers.Serializer):
    start_time = serializers.CharField()
    end_time = serializers.CharField()


class AvailabilitySerializer(serializers.Serializer):
    space_id = serializers.IntegerField()
    date = serializers.DateField()
    available_slots = SlotSerializer(source="free_slots", many=True)
    unavailable_slots = SlotSerializer(source="taken_slots", many=True)
    booked_slots = BookedSlotSerializer(many=True)
