"""API views for the booking domain."""

from __future__ import annotations

from rest_framework import mixins, permissions, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from . import services
from .exceptions import BookingError
from .serializers import (
    AvailabilityQuerySerializer,
    AvailabilitySerializer,
    BookingCreateSerializer,
    BookingSerializer,
)


def booking_error_response(exc: BookingError) -> Response:
    return Response({"detail": exc.message, "code": exc.code}, status=exc.status_code)


class BookingViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    viewsets.GenericViewSet,
):
    """Bookings of the current user: create, list, inspect and cancel."""

    serializer_class = BookingSerializer
    permission_classes = [permissions.IsAuthenticated]
    filterset_fields = ["space", "date", "status"]

    def get_serializer_class(self):  # type: ignore
        if self.action == "create":
            return BookingCreateSerializer
        return BookingSerializer

    def get_queryset(self):  # type: ignore
        if self.action == "received":
            return services.list_owner_bookings(self.request.user)
        return services.list_renter_bookings(self.request.user)

    def create(self, request, *args, **kwargs):  # type: ignore
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        try:
            booking = services.create_booking(
                data["space"],
                data["date"],
                data["start_time"],
                data["end_time"],
                request.user,
                contact_number=data.get("contact_number", ""),
                notes=data.get("notes", ""),
            )
        except BookingError as exc:
            return booking_error_response(exc)

        read_serializer = BookingSerializer(booking, context=self.get_serializer_context())
        return Response(read_serializer.data, status=status.HTTP_201_CREATED)

    def retrieve(self, request, *args, **kwargs):  # type: ignore
        try:
            booking = services.get_booking_for_user(kwargs["pk"], request.user)
        except BookingError as exc:
            return booking_error_response(exc)
        return Response(BookingSerializer(booking, context=self.get_serializer_context()).data)

    @action(detail=False, methods=["get"])
    def received(self, request):  # type: ignore
        bookings = self.filter_queryset(self.get_queryset())
        serializer = BookingSerializer(bookings, many=True, context=self.get_serializer_context())
        return Response(serializer.data)

    @action(detail=True, methods=["post", "delete"])
    def cancel(self, request, pk=None):  # type: ignore
        try:
            services.cancel_booking(pk, request.user)
        except BookingError as exc:
            return booking_error_response(exc)
        return Response(
            {"detail": "Booking cancelled and removed successfully."},
            status=status.HTTP_200_OK,
        )

    @action(detail=False, methods=["get"], url_path=r"space/(?P<space_id>\d+)", url_name="space")
    def space_bookings(self, request, space_id=None):  # type: ignore
        try:
            bookings = services.list_space_bookings(space_id, request.user)
        except BookingError as exc:
            return booking_error_response(exc)
        serializer = BookingSerializer(bookings, many=True, context=self.get_serializer_context())
        return Response(serializer.data)

    @action(
        detail=False,
        methods=["get"],
        url_path=r"availability/(?P<space_id>\d+)",
        permission_classes=[permissions.AllowAny],
    )
    def availability(self, request, space_id=None):  # type: ignore
        query = AvailabilityQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        try:
            result = services.get_availability(space_id, query.validated_data["date"])
        except BookingError as exc:
            return booking_error_response(exc)
        return Response(AvailabilitySerializer(result).data)
