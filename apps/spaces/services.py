"""Read-only space lookups used by the booking engine."""

from __future__ import annotations

from apps.bookings.exceptions import SpaceNotFoundError

from .models import Space


def get_space(space_id) -> Space:
    """Load a space or raise SpaceNotFoundError."""

    try:
        return Space.objects.select_related("owner").get(pk=space_id)
    except (Space.DoesNotExist, ValueError, TypeError):
        raise SpaceNotFoundError() from None
