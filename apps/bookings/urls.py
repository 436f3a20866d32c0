"""URL routing for the booking engine.

Routes (names in parentheses):
    ""                         create / list own bookings (booking-list)
    "received/"                bookings on spaces the user owns (booking-received)
    "availability/<space_id>/" free and taken slots for ?date= (booking-availability)
    "space/<space_id>/"        all bookings of one owned space (booking-space)
    "<pk>/"                    booking detail (booking-detail)
    "<pk>/cancel/"             cancel a booking (booking-cancel)
"""

from __future__ import annotations

from django.urls import include, path  # type: ignore
from rest_framework.routers import SimpleRouter  # type: ignore

from .views import BookingViewSet

router = SimpleRouter()
router.register(r"", BookingViewSet, basename="booking")

urlpatterns = [
    path("", include(router.urls)),
]
