"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses (see handlers/errors.py)
- Never contain business logic
- Never expose internal error details
"""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from venues import cache
from venues.domain.errors import InvalidInputError
from venues.handlers.serializers import (
    BookedPeriodSerializer,
    BookingSerializer,
    CreateBookingSerializer,
    PaginationSerializer,
    VenueFilterSerializer,
    VenueSerializer,
)
from venues.services import BookingService, VenueService
from venues.stores.django_store import DjangoBookingStore, DjangoVenueStore

FILTER_PARAMS = ("search", "minCapacity", "maxPrice", "page", "limit")


def build_venue_service() -> VenueService:
    return VenueService(DjangoVenueStore())


def build_booking_service() -> BookingService:
    return BookingService(DjangoVenueStore(), DjangoBookingStore())


class VenueListView(APIView):
    """Handler for GET /api/venues"""

    def get(self, request: Request) -> Response:
        # Empty query values count as absent.
        raw = {
            name: request.query_params[name]
            for name in FILTER_PARAMS
            if request.query_params.get(name, "").strip()
        }
        serializer = VenueFilterSerializer(data=raw)
        if not serializer.is_valid():
            raise InvalidInputError(serializer.errors, message="Invalid query parameters")
        venue_filter = serializer.to_domain()

        def build() -> dict:
            page = build_venue_service().search(venue_filter)
            return {
                "data": VenueSerializer(page.items, many=True).data,
                "pagination": PaginationSerializer(page.pagination).data,
            }

        return Response(cache.get_or_build(cache.list_cache_key(venue_filter), build))


class VenueDetailView(APIView):
    """Handler for GET /api/venues/{slug}"""

    def get(self, request: Request, slug: str) -> Response:
        def build() -> dict:
            venue = build_venue_service().get_venue_by_slug(slug)
            return {"data": VenueSerializer(venue).data}

        return Response(cache.get_or_build(cache.detail_cache_key(slug), build))


class VenueBookingListView(APIView):
    """Handler for GET /api/venues/{slug}/bookings"""

    def get(self, request: Request, slug: str) -> Response:
        periods = build_booking_service().get_booked_periods(slug)
        return Response({"data": BookedPeriodSerializer(periods, many=True).data})


class BookingCreateView(APIView):
    """Handler for POST /api/bookings"""

    def post(self, request: Request) -> Response:
        serializer = CreateBookingSerializer(data=request.data)
        if not serializer.is_valid():
            raise InvalidInputError(serializer.errors, message="Invalid request body")

        booking = build_booking_service().create_booking(serializer.to_domain())
        return Response(
            {
                "data": BookingSerializer(booking).data,
                "message": "Booking inquiry submitted successfully",
            },
            status=status.HTTP_201_CREATED,
        )
