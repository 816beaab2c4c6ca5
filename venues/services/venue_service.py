"""Venue service - venue lookup and the filtered, paginated listing.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

from venues.domain import PaginationMeta, Venue, VenueFilter, VenueId, VenuePage
from venues.domain.errors import VenueNotFoundError
from venues.stores.interfaces import VenueStore


class VenueService:
    """Service for venue catalog operations."""

    def __init__(self, store: VenueStore) -> None:
        self._store = store

    def search(self, venue_filter: VenueFilter) -> VenuePage:
        """Return one page of venues matching the filter.

        A page past the end yields no items; the pagination metadata still
        reports the real totals.
        """
        venues, total = self._store.search_venues(venue_filter)
        return VenuePage(
            items=tuple(venues),
            pagination=PaginationMeta.build(venue_filter.page, venue_filter.limit, total),
        )

    def get_venue(self, venue_id: int) -> Venue:
        """Return a venue by ID.

        Raises:
            VenueNotFoundError: If the venue does not exist.
        """
        if venue_id < 1:
            raise VenueNotFoundError(venue_id)
        venue = self._store.get_venue(VenueId(venue_id))
        if venue is None:
            raise VenueNotFoundError(venue_id)
        return venue

    def get_venue_by_slug(self, slug: str) -> Venue:
        """Return a venue by slug.

        Raises:
            VenueNotFoundError: If the venue does not exist.
        """
        venue = self._store.get_venue_by_slug(slug)
        if venue is None:
            raise VenueNotFoundError(slug)
        return venue
