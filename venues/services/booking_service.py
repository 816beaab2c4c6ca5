"""Booking service - capacity and availability checks for booking inquiries.

An inquiry is accepted only when, in this order, the venue exists, the party
fits the venue, and no active booking overlaps the requested dates. Nothing
is written until every check has passed.
"""

import structlog

from venues.domain import BookedPeriod, BookingDraft, BookingInquiry, BookingRequest, VenueId
from venues.domain.errors import CapacityExceededError, DatesUnavailableError, VenueNotFoundError
from venues.stores.interfaces import BookingStore, VenueStore

logger = structlog.get_logger(__name__)


class BookingService:
    """Service for booking inquiry operations."""

    def __init__(self, venues: VenueStore, bookings: BookingStore) -> None:
        self._venues = venues
        self._bookings = bookings

    def create_booking(self, request: BookingRequest) -> BookingInquiry:
        """Create a pending inquiry quoting the venue's current price.

        Raises:
            VenueNotFoundError: If the venue does not exist.
            CapacityExceededError: If attendee_count exceeds the venue capacity.
            DatesUnavailableError: If an active booking overlaps the dates.
        """
        log = logger.bind(venue_id=request.venue_id)

        with self._bookings.atomic():
            venue = self._venues.get_venue(VenueId(request.venue_id)) if request.venue_id > 0 else None
            if venue is None:
                log.info("booking_rejected", reason="venue_not_found")
                raise VenueNotFoundError(request.venue_id)

            if not venue.capacity.admits(request.attendee_count):
                log.info(
                    "booking_rejected",
                    reason="capacity_exceeded",
                    attendee_count=request.attendee_count,
                    capacity=venue.capacity.value,
                )
                raise CapacityExceededError(venue.capacity.value)

            dates = request.dates
            log = log.bind(dates=str(dates))
            conflicts = self._bookings.find_overlapping(venue.id, dates)
            if conflicts:
                log.info("booking_rejected", reason="dates_unavailable", conflicts=len(conflicts))
                raise DatesUnavailableError(
                    [
                        {
                            "startDate": booking.start_date.isoformat(),
                            "endDate": booking.end_date.isoformat(),
                        }
                        for booking in conflicts
                    ]
                )

            booking = self._bookings.create_booking(
                BookingDraft(
                    venue_id=venue.id,
                    company_name=request.company_name,
                    email=request.email,
                    dates=dates,
                    attendee_count=request.attendee_count,
                    quoted_price_per_night=venue.price_per_night,
                    message=request.message,
                )
            )

        log.info("booking_created", booking_id=booking.id.value, quoted_price=str(booking.quoted_price_per_night))
        return booking

    def get_bookings_by_venue(self, venue_id: int) -> list[BookingInquiry]:
        """Return every booking of a venue, rejected ones included, by start date.

        Raises:
            VenueNotFoundError: If venue_id is not a valid identifier.
        """
        if venue_id < 1:
            raise VenueNotFoundError(venue_id)
        return self._bookings.list_bookings_for_venue(VenueId(venue_id))

    def get_booked_periods(self, slug: str) -> list[BookedPeriod]:
        """Return the dates taken at a venue, ignoring rejected inquiries.

        Raises:
            VenueNotFoundError: If the venue does not exist.
        """
        venue = self._venues.get_venue_by_slug(slug)
        if venue is None:
            raise VenueNotFoundError(slug)
        return [
            BookedPeriod(start_date=booking.start_date, end_date=booking.end_date)
            for booking in self.get_bookings_by_venue(venue.id.value)
            if booking.status.blocks_dates
        ]
