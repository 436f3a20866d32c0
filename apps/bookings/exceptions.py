"""Errors raised by the booking engine.

Every error except :class:`BookingStorageError` is an expected, user-facing
outcome: views render the message with ``status_code`` and ``code``.
"""

from __future__ import annotations


class BookingError(Exception):
    """Base class for booking engine errors."""

    code = "booking_error"
    status_code = 400
    default_message = "Booking request could not be processed."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)


class BookingValidationError(BookingError, ValueError):
    """Malformed clock value or missing required field."""

    code = "validation_error"
    default_message = "Invalid booking data."


class InvalidTimeRangeError(BookingError):
    code = "invalid_time_range"
    default_message = "End time must be at least one hour after start time."


class SlotUnavailableError(BookingError):
    """Requested slot overlaps a live booking."""

    code = "slot_unavailable"
    status_code = 409
    default_message = "This time slot is already booked. Please choose a different time."


class PastDateError(BookingError):
    code = "past_date"
    default_message = "Cannot book for past dates."


class PastTimeSlotError(BookingError):
    code = "past_time_slot"
    default_message = "Cannot book for past time slots."


class NotFoundError(BookingError):
    code = "not_found"
    status_code = 404
    default_message = "Not found."


class SpaceNotFoundError(NotFoundError):
    default_message = "Space not found."


class BookingNotFoundError(NotFoundError):
    default_message = "Booking not found."


class SpaceUnavailableError(BookingError):
    code = "space_unavailable"
    default_message = "Space is currently not available for booking."


class BookingForbiddenError(BookingError):
    code = "forbidden"
    status_code = 403
    default_message = "Not authorized to access this booking."


class AlreadyCancelledError(BookingError):
    code = "already_cancelled"
    default_message = "Booking is already cancelled."


class AlreadyCompletedError(BookingError):
    code = "already_completed"
    default_message = "Cannot cancel a completed booking."


class BookingStorageError(BookingError):
    """Unexpected storage failure; the message shown to clients is opaque."""

    code = "internal_error"
    status_code = 500
    default_message = "Server error while processing booking."
