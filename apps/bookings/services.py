"""Domain services for booking workflows.

Creation, cancellation and expiry of bookings, plus the read-only
availability and listing queries. Every function that depends on the
current time accepts a ``now`` callable so the temporal rules can be
exercised deterministically.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from typing import Callable

from django.conf import settings  # type: ignore
from django.db import DatabaseError, IntegrityError, transaction  # type: ignore
from django.utils import timezone  # type: ignore

from apps.spaces.services import get_space
from shared.domain.value_objects import MINUTES_PER_DAY, MINUTES_PER_HOUR, MinuteRange, Money

from .domain.clock import booking_span, parse_clock
from .domain.conflicts import find_conflict, partition_slots
from .domain.slots import Slot, iter_slots
from .exceptions import (
    AlreadyCancelledError,
    AlreadyCompletedError,
    BookingForbiddenError,
    BookingNotFoundError,
    BookingStorageError,
    BookingValidationError,
    InvalidTimeRangeError,
    PastDateError,
    PastTimeSlotError,
    SlotUnavailableError,
    SpaceUnavailableError,
)
from .models import NOTES_MAX_LENGTH, Booking

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


@dataclass(frozen=True)
class BookedSlot:
    """Stored boundaries of a live booking, as the renter entered them."""

    start_time: str
    end_time: str


@dataclass
class Availability:
    """Slots of one space on one date, split into free and taken."""

    space_id: int
    date: date
    free_slots: list[Slot] = field(default_factory=list)
    taken_slots: list[Slot] = field(default_factory=list)
    booked_slots: list[BookedSlot] = field(default_factory=list)


def _local_now(now: Clock | None = None) -> datetime:
    current = (now or timezone.now)()
    if timezone.is_aware(current):
        current = timezone.localtime(current)
    return current


def _user_id(user):
    return getattr(user, "pk", user)


def compute_expires_at(day: date, span: MinuteRange) -> datetime:
    """
    Absolute end of a booking.

    Bookings ending at or after midnight expire on the following day,
    so the instant always lies after the slot's real end.
    """
    end_day = day + timedelta(days=1) if span.ends_next_day else day
    end_minutes = span.end % MINUTES_PER_DAY
    naive = datetime.combine(end_day, time(end_minutes // MINUTES_PER_HOUR, end_minutes % MINUTES_PER_HOUR))
    return timezone.make_aware(naive, timezone.get_current_timezone())


def booking_duration(span: MinuteRange) -> Decimal:
    """Length in hours, kept to two decimal places."""
    return (Decimal(len(span)) / Decimal(MINUTES_PER_HOUR)).quantize(Decimal("0.01"))


def create_booking(
    space_id,
    day: date,
    start_time: str,
    end_time: str,
    renter,
    contact_number: str = "",
    notes: str = "",
    *,
    now: Clock | None = None,
) -> Booking:
    """
    Validate, price and persist a booking.

    Checks run in a fixed order and the first failing one is raised:
    space exists and is active, time range, conflicts, past date or slot.

    Raises:
        SpaceNotFoundError, SpaceUnavailableError, BookingValidationError,
        InvalidTimeRangeError, SlotUnavailableError, PastDateError,
        PastTimeSlotError, BookingStorageError
    """

    space = get_space(space_id)
    if not space.is_active:
        raise SpaceUnavailableError()

    if not start_time or not end_time:
        raise BookingValidationError("Please provide start time and end time.")
    start = parse_clock(start_time)
    end = parse_clock(end_time)

    if start == end:
        raise InvalidTimeRangeError("End time must be after start time.")
    span = booking_span(start, end)
    if len(span) < MINUTES_PER_HOUR:
        raise InvalidTimeRangeError()

    notes = notes or ""
    if len(notes) > NOTES_MAX_LENGTH:
        raise BookingValidationError(f"Notes cannot exceed {NOTES_MAX_LENGTH} characters.")

    existing = Booking.objects.for_slot_day(space.pk, day)
    conflict = find_conflict(span, existing)
    if conflict is not None:
        logger.info(
            "Slot %s-%s on %s for space %s overlaps booking %s",
            start.display, end.display, day, space.pk, conflict.pk,
        )
        raise SlotUnavailableError()

    current = _local_now(now)
    if day < current.date():
        raise PastDateError()
    # Whole-hour granularity: a 2 PM start is rejected from 14:00 onwards,
    # a 2:30 PM start is still accepted until 15:00.
    if day == current.date() and span.start <= current.hour * MINUTES_PER_HOUR:
        raise PastTimeSlotError()

    hours = Decimal(len(span)) / Decimal(MINUTES_PER_HOUR)
    total = (Money(space.price_per_hour, space.currency) * hours).quantized()

    try:
        with transaction.atomic():
            booking = Booking.objects.create(
                space=space,
                renter_id=_user_id(renter),
                date=day,
                start_time=start.display,
                end_time=end.display,
                duration_hours=booking_duration(span),
                total_amount=total.amount,
                currency=total.currency,
                status=Booking.Status.CONFIRMED,
                contact_number=contact_number or "",
                notes=notes,
                expires_at=compute_expires_at(day, span),
            )
    except IntegrityError as exc:
        if Booking.objects.for_slot_day(space.pk, day).filter(start_time=start.display).exists():
            logger.info(
                "Storage rejected duplicate slot %s on %s for space %s",
                start.display, day, space.pk,
            )
            raise SlotUnavailableError() from None
        logger.exception("Integrity error creating booking for space %s on %s", space.pk, day)
        raise BookingStorageError() from exc
    except DatabaseError as exc:
        logger.exception("Error creating booking for space %s on %s", space.pk, day)
        raise BookingStorageError() from exc

    logger.info(
        "Booking %s created: space %s, %s %s-%s, total %s",
        booking.pk, space.pk, day, booking.start_time, booking.end_time, total,
    )
    return booking


def cancel_booking(booking_id, requester, *, now: Clock | None = None) -> None:
    """
    Cancel a booking on behalf of its renter.

    Cancellation removes the row so the slot frees up immediately. A row
    that vanished in between (swept or cancelled concurrently) is left alone.

    Raises:
        BookingNotFoundError, BookingForbiddenError, AlreadyCancelledError,
        AlreadyCompletedError, BookingStorageError
    """

    try:
        booking = Booking.objects.get(pk=booking_id)
    except (Booking.DoesNotExist, ValueError, TypeError):
        raise BookingNotFoundError() from None

    if booking.renter_id != _user_id(requester):
        raise BookingForbiddenError("Not authorized to cancel this booking.")
    if booking.status == Booking.Status.CANCELLED:
        raise AlreadyCancelledError()
    if booking.has_ended(_local_now(now)):
        raise AlreadyCompletedError()

    try:
        Booking.objects.filter(pk=booking.pk).delete()
    except DatabaseError as exc:
        logger.exception("Error cancelling booking %s", booking.pk)
        raise BookingStorageError() from exc

    logger.info("Booking %s cancelled and removed by renter %s", booking.pk, booking.renter_id)


def sweep_expired_bookings(*, now: Clock | None = None) -> int:
    """Delete bookings whose slot has ended. Safe to run repeatedly."""

    deleted, _ = Booking.objects.expired(_local_now(now)).delete()
    return deleted


def purge_cancelled_bookings(older_than: timedelta | None = None, *, now: Clock | None = None) -> int:
    """Remove cancelled rows kept for audit once the retention window passes."""

    if older_than is None:
        older_than = timedelta(hours=getattr(settings, "BOOKING_CANCELLED_RETENTION_HOURS", 24))
    cutoff = _local_now(now) - older_than
    deleted, _ = Booking.objects.filter(
        status=Booking.Status.CANCELLED,
        updated_at__lt=cutoff,
    ).delete()
    return deleted


def get_availability(space_id, day: date) -> Availability:
    """Partition the space's slots for ``day`` into free and taken ones."""

    space = get_space(space_id)
    opening, closing = space.operating_hours
    existing = list(Booking.objects.for_slot_day(space.pk, day).order_by("expires_at"))

    free, taken = partition_slots(iter_slots(opening, closing), existing)
    return Availability(
        space_id=space.pk,
        date=day,
        free_slots=free,
        taken_slots=taken,
        booked_slots=[BookedSlot(b.start_time, b.end_time) for b in existing],
    )


def list_renter_bookings(renter):
    """Live bookings made by the renter, most recent first."""

    return (
        Booking.objects.live()
        .filter(renter_id=_user_id(renter))
        .select_related("space")
        .order_by("-created_at")
    )


def list_owner_bookings(owner):
    """Live bookings received across all spaces of the owner, by date."""

    return (
        Booking.objects.live()
        .filter(space__owner_id=_user_id(owner))
        .select_related("space", "renter")
        .order_by("date", "expires_at")
    )


def list_space_bookings(space_id, requester):
    """Every booking of one space; only its owner may look."""

    space = get_space(space_id)
    if space.owner_id != _user_id(requester):
        raise BookingForbiddenError("Not authorized to view bookings for this space.")
    return (
        Booking.objects.filter(space=space)
        .select_related("renter")
        .order_by("date", "expires_at")
    )


def get_booking_for_user(booking_id, user) -> Booking:
    """A booking as seen by its renter or by the owner of its space."""

    try:
        booking = Booking.objects.select_related("space", "renter").get(pk=booking_id)
    except (Booking.DoesNotExist, ValueError, TypeError):
        raise BookingNotFoundError() from None

    user_id = _user_id(user)
    if booking.renter_id != user_id and booking.space.owner_id != user_id:
        raise BookingForbiddenError("Not authorized to view this booking.")
    return booking
