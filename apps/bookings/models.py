"""Booking (reservation) models."""

from __future__ import annotations

from decimal import Decimal

from django.conf import settings  # type: ignore
from django.db import models  # type: ignore
from django.utils import timezone  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

NOTES_MAX_LENGTH = 500


class BookingQuerySet(models.QuerySet):
    def live(self):
        """Bookings that still hold their slot (everything except cancelled)."""
        return self.exclude(status=Booking.Status.CANCELLED)

    def for_slot_day(self, space_id, day):
        return self.live().filter(space_id=space_id, date=day)

    def expired(self, now):
        return self.filter(
            expires_at__lt=now,
            status__in=[Booking.Status.CONFIRMED, Booking.Status.COMPLETED],
        )


class Booking(models.Model):
    """Hourly reservation of a space by a renter.

    Start and end are stored as canonical 12-hour clock strings; they are
    normalized to minutes only while computing. A row is created once,
    then either deleted on cancellation or swept after ``expires_at``.
    """

    class Status(models.TextChoices):
        CONFIRMED = "confirmed", _("Confirmed")
        CANCELLED = "cancelled", _("Cancelled")
        COMPLETED = "completed", _("Completed")

    space = models.ForeignKey(
        "spaces.Space",
        on_delete=models.CASCADE,
        related_name="bookings",
    )
    renter = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="bookings",
    )
    date = models.DateField()
    start_time = models.CharField(max_length=8)
    end_time = models.CharField(max_length=8)
    duration_hours = models.DecimalField(
        max_digits=5,
        decimal_places=2,
        help_text=_("Booked hours after overnight normalization."),
    )
    total_amount = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal("0.00"))
    currency = models.CharField(max_length=3, default="INR")
    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.CONFIRMED,
    )
    contact_number = models.CharField(max_length=20, blank=True)
    notes = models.TextField(max_length=NOTES_MAX_LENGTH, blank=True)
    expires_at = models.DateTimeField(
        help_text=_("Moment the booked slot ends; the record is removed after it."),
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = BookingQuerySet.as_manager()

    class Meta:
        verbose_name = _("Booking")
        verbose_name_plural = _("Bookings")
        ordering = ["-created_at"]
        constraints = [
            models.UniqueConstraint(
                fields=["space", "date", "start_time"],
                condition=~models.Q(status="cancelled"),
                name="booking_unique_live_start",
            ),
            models.CheckConstraint(
                condition=models.Q(duration_hours__gte=1),
                name="booking_min_duration",
            ),
        ]
        indexes = [
            models.Index(fields=["space", "date"], name="booking_space_date_idx"),
            models.Index(fields=["expires_at"], name="booking_expires_at_idx"),
            models.Index(fields=["status"], name="booking_status_idx"),
        ]

    def __str__(self) -> str:
        return f"Booking #{self.pk} {self.date} {self.start_time}-{self.end_time} at space {self.space_id}"

    @property
    def slot_label(self) -> str:
        return f"{self.start_time} - {self.end_time}"

    def has_ended(self, now=None) -> bool:
        """True once the slot's end instant has passed (completed in effect)."""
        now = now or timezone.now()
        return self.status == self.Status.COMPLETED or self.expires_at <= now
