"""Space (sports facility) models."""

from __future__ import annotations

from decimal import Decimal

from django.conf import settings  # type: ignore
from django.core.exceptions import ValidationError  # type: ignore
from django.core.validators import MinValueValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

from apps.bookings.domain.clock import ClockTime, parse_clock
from apps.bookings.exceptions import BookingValidationError


class Space(models.Model):
    """A bookable sports facility with daily operating hours."""

    class SportType(models.TextChoices):
        CRICKET = "Cricket", _("Cricket")
        FOOTBALL = "Football", _("Football")
        BASKETBALL = "Basketball", _("Basketball")
        TENNIS = "Tennis", _("Tennis")
        BADMINTON = "Badminton", _("Badminton")
        VOLLEYBALL = "Volleyball", _("Volleyball")
        HOCKEY = "Hockey", _("Hockey")
        OTHER = "Other", _("Other")

    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="spaces",
    )
    name = models.CharField(max_length=100)
    sport_type = models.CharField(max_length=20, choices=SportType.choices, default=SportType.OTHER)
    city = models.CharField(max_length=100, blank=True)
    address = models.CharField(max_length=255, blank=True)
    price_per_hour = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
    )
    currency = models.CharField(max_length=3, default="INR")
    opening_time = models.CharField(
        max_length=8,
        help_text=_("12-hour clock, e.g. '6 AM'."),
    )
    closing_time = models.CharField(
        max_length=8,
        help_text=_("12-hour clock, e.g. '10 PM'. Earlier than opening means the space closes after midnight."),
    )
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Space")
        verbose_name_plural = _("Spaces")
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return f"{self.name} ({self.sport_type})"

    def clean(self) -> None:
        try:
            opening = parse_clock(self.opening_time)
            closing = parse_clock(self.closing_time)
        except BookingValidationError as exc:
            raise ValidationError({"opening_time": str(exc)}) from exc
        if opening == closing:
            raise ValidationError(_("Opening and closing time must differ."))

    @property
    def operating_hours(self) -> tuple[ClockTime, ClockTime]:
        return parse_clock(self.opening_time), parse_clock(self.closing_time)
