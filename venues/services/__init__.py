from venues.services.booking_service import BookingService
from venues.services.venue_service import VenueService

__all__ = ["VenueService", "BookingService"]
