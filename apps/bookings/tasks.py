"""Celery tasks for the booking domain."""

from __future__ import annotations

import structlog
from celery import shared_task  # type: ignore
from django.db import DatabaseError  # type: ignore

from .services import purge_cancelled_bookings, sweep_expired_bookings

logger = structlog.get_logger(__name__)


# ============================================================================
# PERIODIC TASKS (scheduled by Celery Beat, see config/celery.py)
# ============================================================================

@shared_task(name="bookings.sweep_expired_bookings")
def sweep_expired_bookings_task() -> dict[str, int]:
    """
    Remove bookings whose slot has already ended.

    A booking is completed the moment its end instant passes; the sweep
    simply deletes it. Running it twice, or alongside a cancellation of
    the same booking, deletes nothing extra.

    Returns:
        dict: {"deleted": number of removed bookings}
    """
    try:
        deleted = sweep_expired_bookings()
    except DatabaseError:
        logger.exception("expired_bookings_sweep_failed")
        raise

    if deleted:
        logger.info("expired_bookings_swept", deleted=deleted)
    else:
        logger.debug("expired_bookings_sweep_empty")
    return {"deleted": deleted}


@shared_task(name="bookings.purge_cancelled_bookings")
def purge_cancelled_bookings_task() -> dict[str, int]:
    """
    Remove cancelled bookings past their audit retention window.

    Returns:
        dict: {"deleted": number of removed bookings}
    """
    try:
        deleted = purge_cancelled_bookings()
    except DatabaseError:
        logger.exception("cancelled_bookings_purge_failed")
        raise

    if deleted:
        logger.info("cancelled_bookings_purged", deleted=deleted)
    return {"deleted": deleted}
