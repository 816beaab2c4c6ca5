from venues.handlers.views import (
    BookingCreateView,
    VenueBookingListView,
    VenueDetailView,
    VenueListView,
)

__all__ = ["VenueListView", "VenueDetailView", "VenueBookingListView", "BookingCreateView"]
