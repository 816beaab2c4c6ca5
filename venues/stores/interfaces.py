"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager

from venues.domain import BookingDraft, BookingInquiry, DateRange, Venue, VenueFilter, VenueId


class VenueStore(ABC):
    """Interface for venue persistence operations."""

    @abstractmethod
    def get_venue(self, venue_id: VenueId) -> Venue | None:
        """Return a venue by ID, or None if not found.

        Inside BookingStore.atomic() implementations should lock the venue
        row so concurrent inquiries for one venue are serialised.
        """
        ...

    @abstractmethod
    def get_venue_by_slug(self, slug: str) -> Venue | None:
        """Return a venue by slug, or None if not found."""
        ...

    @abstractmethod
    def search_venues(self, venue_filter: VenueFilter) -> tuple[list[Venue], int]:
        """Return one page of matching venues and the total match count.

        Matches are ordered by created_at descending, then id descending.
        """
        ...


class BookingStore(ABC):
    """Interface for booking inquiry persistence operations."""

    @abstractmethod
    def list_bookings_for_venue(self, venue_id: VenueId) -> list[BookingInquiry]:
        """Return every booking of a venue, ordered by start_date ascending."""
        ...

    @abstractmethod
    def find_overlapping(self, venue_id: VenueId, dates: DateRange) -> list[BookingInquiry]:
        """Return non-rejected bookings of a venue whose dates overlap `dates`."""
        ...

    @abstractmethod
    def create_booking(self, draft: BookingDraft) -> BookingInquiry:
        """Persist a new booking inquiry and return it."""
        ...

    @abstractmethod
    def atomic(self) -> AbstractContextManager:
        """Return a context manager that makes the enclosed reads and write one unit."""
        ...
