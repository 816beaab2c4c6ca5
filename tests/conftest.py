"""Pytest configuration and shared fixtures."""

from contextlib import nullcontext
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

import pytest
from rest_framework.test import APIClient

from venues.domain import (
    BookingDraft,
    BookingId,
    BookingInquiry,
    BookingStatus,
    Capacity,
    DateRange,
    Money,
    Venue,
    VenueFilter,
    VenueId,
)
from venues.stores.interfaces import BookingStore, VenueStore

EPOCH = datetime(2025, 1, 1, tzinfo=timezone.utc)


def make_venue(
    venue_id: int = 1,
    *,
    name: str = "Test Venue",
    city: str = "San Francisco",
    capacity: int = 100,
    price: str = "500.00",
    created_at: datetime | None = None,
) -> Venue:
    created = created_at or EPOCH + timedelta(minutes=venue_id)
    return Venue(
        id=VenueId(venue_id),
        slug=f"venue-{venue_id}",
        name=name,
        city=city,
        address="123 Test St",
        capacity=Capacity(capacity),
        price_per_night=Money(Decimal(price)),
        description="A test venue",
        image_url="https://example.com/image.jpg",
        created_at=created,
        updated_at=created,
        amenities=("WiFi", "Parking"),
    )


class InMemoryVenueStore(VenueStore):
    """Venue store backed by a dict."""

    def __init__(self, venues: list[Venue] | None = None) -> None:
        self._venues = {venue.id.value: venue for venue in venues or []}
        self.search_calls: list[VenueFilter] = []

    def put(self, venue: Venue) -> None:
        self._venues[venue.id.value] = venue

    def get_venue(self, venue_id: VenueId) -> Venue | None:
        return self._venues.get(venue_id.value)

    def get_venue_by_slug(self, slug: str) -> Venue | None:
        return next((venue for venue in self._venues.values() if venue.slug == slug), None)

    def search_venues(self, venue_filter: VenueFilter) -> tuple[list[Venue], int]:
        self.search_calls.append(venue_filter)
        needle = (venue_filter.search or "").casefold()
        matches = [
            venue
            for venue in self._venues.values()
            if (not needle or needle in venue.name.casefold() or needle in venue.city.casefold())
            and (venue_filter.min_capacity is None or venue.capacity.value >= venue_filter.min_capacity)
            and (
                venue_filter.max_price is None
                or venue.price_per_night.amount <= venue_filter.max_price.amount
            )
        ]
        matches.sort(key=lambda venue: (venue.created_at, venue.id.value), reverse=True)
        window = matches[venue_filter.offset : venue_filter.offset + venue_filter.limit]
        return window, len(matches)


class InMemoryBookingStore(BookingStore):
    """Booking store backed by a list, using DateRange.overlaps for conflicts."""

    def __init__(self) -> None:
        self._bookings: list[BookingInquiry] = []
        self.created: list[BookingDraft] = []
        self.atomic_entries = 0

    def seed(
        self,
        venue_id: int,
        start: date,
        end: date,
        status: BookingStatus = BookingStatus.PENDING,
    ) -> BookingInquiry:
        booking = BookingInquiry(
            id=BookingId(len(self._bookings) + 1),
            venue_id=VenueId(venue_id),
            company_name="Existing Co",
            email="existing@example.com",
            start_date=start,
            end_date=end,
            attendee_count=10,
            status=status,
            quoted_price_per_night=Money(Decimal("500.00")),
            created_at=EPOCH,
            updated_at=EPOCH,
        )
        self._bookings.append(booking)
        return booking

    def list_bookings_for_venue(self, venue_id: VenueId) -> list[BookingInquiry]:
        bookings = [booking for booking in self._bookings if booking.venue_id == venue_id]
        return sorted(bookings, key=lambda booking: (booking.start_date, booking.id.value))

    def find_overlapping(self, venue_id: VenueId, dates: DateRange) -> list[BookingInquiry]:
        return [
            booking
            for booking in self.list_bookings_for_venue(venue_id)
            if booking.status.blocks_dates and booking.dates.overlaps(dates)
        ]

    def create_booking(self, draft: BookingDraft) -> BookingInquiry:
        self.created.append(draft)
        booking = BookingInquiry(
            id=BookingId(len(self._bookings) + 1),
            venue_id=draft.venue_id,
            company_name=draft.company_name,
            email=draft.email,
            start_date=draft.dates.start_date,
            end_date=draft.dates.end_date,
            attendee_count=draft.attendee_count,
            status=draft.status,
            quoted_price_per_night=draft.quoted_price_per_night,
            created_at=EPOCH,
            updated_at=EPOCH,
            message=draft.message,
        )
        self._bookings.append(booking)
        return booking

    def atomic(self):
        self.atomic_entries += 1
        return nullcontext()


@pytest.fixture
def venue_store() -> InMemoryVenueStore:
    return InMemoryVenueStore([make_venue(1, capacity=100, price="500.00")])


@pytest.fixture
def empty_venue_store() -> InMemoryVenueStore:
    return InMemoryVenueStore()


@pytest.fixture
def venue_factory():
    return make_venue


@pytest.fixture
def booking_store() -> InMemoryBookingStore:
    return InMemoryBookingStore()


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()
