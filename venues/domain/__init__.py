from venues.domain.models import (
    BookedPeriod,
    BookingDraft,
    BookingInquiry,
    BookingRequest,
    BookingStatus,
    PaginationMeta,
    Venue,
    VenueFilter,
    VenuePage,
)
from venues.domain.value_objects import BookingId, Capacity, DateRange, Money, VenueId

__all__ = [
    "Venue",
    "BookingInquiry",
    "BookingStatus",
    "BookedPeriod",
    "BookingRequest",
    "BookingDraft",
    "VenueFilter",
    "PaginationMeta",
    "VenuePage",
    "VenueId",
    "BookingId",
    "Money",
    "Capacity",
    "DateRange",
]
