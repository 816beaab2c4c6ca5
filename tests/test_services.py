"""Unit tests for VenueService and BookingService.

These run against in-memory stores and test the booking rules, the listing
rules and domain error mapping.
Run with: pytest tests/test_services.py -v
"""

from datetime import date
from decimal import Decimal

import pytest

from venues.domain import BookingRequest, BookingStatus, Money, VenueFilter
from venues.domain.errors import (
    CapacityExceededError,
    DatesUnavailableError,
    ErrorCode,
    VenueNotFoundError,
)
from venues.services import BookingService, VenueService


def booking_request(**overrides) -> BookingRequest:
    values = {
        "venue_id": 1,
        "company_name": "Acme Inc",
        "email": "test@example.com",
        "start_date": date(2025, 3, 1),
        "end_date": date(2025, 3, 5),
        "attendee_count": 50,
    }
    values.update(overrides)
    return BookingRequest(**values)


@pytest.fixture
def booking_service(venue_store, booking_store) -> BookingService:
    return BookingService(venue_store, booking_store)


class TestCreateBooking:
    """Tests for BookingService.create_booking."""

    def test_creates_pending_booking_when_all_checks_pass(self, booking_service, booking_store):
        """Given a valid request, creates a pending booking at the venue's price."""
        booking = booking_service.create_booking(booking_request(message="Offsite"))

        assert booking.status is BookingStatus.PENDING
        assert booking.quoted_price_per_night == Money(Decimal("500.00"))
        assert booking.dates.nights == 4
        assert booking.message == "Offsite"
        assert len(booking_store.created) == 1

    def test_checks_and_insert_run_in_one_unit(self, booking_service, booking_store):
        """Given a request, runs the checks and the insert in one atomic block."""
        booking_service.create_booking(booking_request())
        assert booking_store.atomic_entries == 1

    def test_unknown_venue_raises_not_found(self, booking_service, booking_store):
        """Given an unknown venue, raises VenueNotFoundError and writes nothing."""
        with pytest.raises(VenueNotFoundError) as exc_info:
            booking_service.create_booking(booking_request(venue_id=999, attendee_count=10_000))

        assert exc_info.value.code is ErrorCode.VENUE_NOT_FOUND
        assert booking_store.created == []

    def test_attendee_count_equal_to_capacity_is_accepted(self, booking_service):
        """Given attendees equal to capacity, accepts the booking."""
        booking = booking_service.create_booking(booking_request(attendee_count=100))
        assert booking.attendee_count == 100

    def test_one_over_capacity_is_rejected_with_capacity(self, booking_service, booking_store):
        """Given one attendee over capacity, raises with the venue capacity."""
        with pytest.raises(CapacityExceededError) as exc_info:
            booking_service.create_booking(booking_request(attendee_count=101))

        assert exc_info.value.capacity == 100
        assert exc_info.value.details == {"maxCapacity": 100}
        assert booking_store.created == []

    def test_capacity_message_mentions_limit(self, booking_service):
        """Given too many attendees, the error message names the limit."""
        with pytest.raises(CapacityExceededError) as exc_info:
            booking_service.create_booking(booking_request(attendee_count=150))

        assert "100" in exc_info.value.message

    def test_capacity_is_checked_before_dates(self, booking_service, booking_store):
        """Given too many attendees and taken dates, reports capacity first."""
        booking_store.seed(1, date(2025, 3, 2), date(2025, 3, 4))

        with pytest.raises(CapacityExceededError):
            booking_service.create_booking(booking_request(attendee_count=150))

    def test_overlapping_booking_raises_dates_unavailable(self, booking_service, booking_store):
        """Given an overlapping booking, raises DatesUnavailableError with its dates."""
        booking_store.seed(1, date(2025, 3, 2), date(2025, 3, 4))

        with pytest.raises(DatesUnavailableError) as exc_info:
            booking_service.create_booking(booking_request())

        assert exc_info.value.conflicts == [{"startDate": "2025-03-02", "endDate": "2025-03-04"}]
        assert exc_info.value.details == {"conflictingDates": exc_info.value.conflicts}
        assert booking_store.created == []

    def test_every_conflict_is_reported(self, booking_service, booking_store):
        """Given several overlapping bookings, reports each in start order."""
        booking_store.seed(1, date(2025, 3, 4), date(2025, 3, 6))
        booking_store.seed(1, date(2025, 2, 27), date(2025, 3, 2))

        with pytest.raises(DatesUnavailableError) as exc_info:
            booking_service.create_booking(booking_request())

        assert [c["startDate"] for c in exc_info.value.conflicts] == ["2025-02-27", "2025-03-04"]

    def test_booking_starting_on_checkout_day_is_accepted(self, booking_service, booking_store):
        """Given a start on an existing checkout day, accepts the booking."""
        booking_store.seed(1, date(2025, 3, 2), date(2025, 3, 4))

        booking = booking_service.create_booking(
            booking_request(start_date=date(2025, 3, 4), end_date=date(2025, 3, 6))
        )

        assert booking.start_date == date(2025, 3, 4)

    def test_booking_ending_on_existing_start_is_accepted(self, booking_service, booking_store):
        """Given an end on an existing start day, accepts the booking."""
        booking_store.seed(1, date(2025, 3, 5), date(2025, 3, 8))

        booking = booking_service.create_booking(booking_request())

        assert booking.end_date == date(2025, 3, 5)

    def test_rejected_booking_does_not_block_dates(self, booking_service, booking_store):
        """Given a rejected booking on the same dates, accepts the booking."""
        booking_store.seed(1, date(2025, 3, 1), date(2025, 3, 5), status=BookingStatus.REJECTED)

        booking = booking_service.create_booking(booking_request())

        assert booking.status is BookingStatus.PENDING

    def test_confirmed_booking_blocks_dates(self, booking_service, booking_store):
        """Given a confirmed overlapping booking, raises DatesUnavailableError."""
        booking_store.seed(1, date(2025, 3, 3), date(2025, 3, 4), status=BookingStatus.CONFIRMED)

        with pytest.raises(DatesUnavailableError):
            booking_service.create_booking(booking_request())

    def test_bookings_at_other_venues_do_not_conflict(
        self, booking_service, booking_store, venue_store, venue_factory
    ):
        """Given a booking at another venue on the same dates, accepts the booking."""
        venue_store.put(venue_factory(2))
        booking_store.seed(2, date(2025, 3, 1), date(2025, 3, 5))

        booking = booking_service.create_booking(booking_request())

        assert booking.venue_id.value == 1

    def test_quoted_price_is_a_snapshot(
        self, booking_service, venue_store, venue_factory
    ):
        """Given a later price change, the booking keeps the quoted price."""
        booking = booking_service.create_booking(booking_request())
        venue_store.put(venue_factory(1, price="900.00"))

        assert booking.quoted_price_per_night.amount == Decimal("500.00")

    def test_retrying_a_rejected_request_fails_the_same_way(self, booking_service, booking_store):
        """Given a conflicting request retried, fails the same way each time."""
        booking_store.seed(1, date(2025, 3, 2), date(2025, 3, 4))

        for _ in range(2):
            with pytest.raises(DatesUnavailableError):
                booking_service.create_booking(booking_request())

    def test_unknown_venue_wins_over_empty_date_range(self, booking_service, booking_store):
        """Given an unknown venue and a zero-night range, raises VenueNotFoundError."""
        request = booking_request(venue_id=999, start_date=date(2025, 3, 5), end_date=date(2025, 3, 5))

        with pytest.raises(VenueNotFoundError):
            booking_service.create_booking(request)

        assert booking_store.created == []

    def test_capacity_wins_over_empty_date_range(self, booking_service):
        """Given too many attendees and a zero-night range, raises CapacityExceededError."""
        request = booking_request(attendee_count=101, start_date=date(2025, 3, 5), end_date=date(2025, 3, 5))

        with pytest.raises(CapacityExceededError):
            booking_service.create_booking(request)


class TestBookingListings:
    """Tests for get_bookings_by_venue and get_booked_periods."""

    def test_bookings_by_venue_are_raw_and_ordered(self, booking_service, booking_store):
        """Given mixed statuses, returns every booking ordered by start date."""
        booking_store.seed(1, date(2025, 5, 1), date(2025, 5, 3))
        booking_store.seed(1, date(2025, 4, 1), date(2025, 4, 3), status=BookingStatus.REJECTED)

        bookings = booking_service.get_bookings_by_venue(1)

        assert [b.start_date for b in bookings] == [date(2025, 4, 1), date(2025, 5, 1)]

    def test_booked_periods_skip_rejected(self, booking_service, booking_store):
        """Given a rejected booking, leaves it out of the booked periods."""
        booking_store.seed(1, date(2025, 5, 1), date(2025, 5, 3))
        booking_store.seed(1, date(2025, 4, 1), date(2025, 4, 3), status=BookingStatus.REJECTED)

        periods = booking_service.get_booked_periods("venue-1")

        assert [(p.start_date, p.end_date) for p in periods] == [(date(2025, 5, 1), date(2025, 5, 3))]

    def test_booked_periods_unknown_slug(self, booking_service):
        """Given an unknown slug, raises VenueNotFoundError."""
        with pytest.raises(VenueNotFoundError):
            booking_service.get_booked_periods("nowhere")

    @pytest.mark.parametrize("venue_id", [0, -1])
    def test_bookings_by_venue_non_positive_id(self, booking_service, venue_id):
        """Given a non-positive id, raises VenueNotFoundError like get_venue."""
        with pytest.raises(VenueNotFoundError):
            booking_service.get_bookings_by_venue(venue_id)


class TestVenueSearch:
    """Tests for VenueService.search."""

    @pytest.fixture
    def catalog(self, empty_venue_store, venue_factory):
        for venue_id in range(1, 26):
            empty_venue_store.put(venue_factory(venue_id, capacity=venue_id * 10))
        return empty_venue_store

    def test_returns_page_with_pagination_metadata(self, catalog):
        """Given 25 venues, returns the first page with totals."""
        page = VenueService(catalog).search(VenueFilter(page=1, limit=10))

        assert len(page.items) == 10
        assert (page.pagination.page, page.pagination.limit) == (1, 10)
        assert page.pagination.total == 25
        assert page.pagination.total_pages == 3

    def test_last_page_is_partial(self, catalog):
        """Given the last page, returns the remaining oldest venues."""
        page = VenueService(catalog).search(VenueFilter(page=3, limit=10))

        assert [venue.id.value for venue in page.items] == [5, 4, 3, 2, 1]

    def test_page_past_the_end_is_empty_with_real_totals(self, catalog):
        """Given a page past the end, returns no items and real totals."""
        page = VenueService(catalog).search(VenueFilter(page=9, limit=10))

        assert page.items == ()
        assert page.pagination.total == 25
        assert page.pagination.total_pages == 3

    def test_no_matches(self, catalog):
        """Given a search with no matches, returns an empty page."""
        page = VenueService(catalog).search(VenueFilter(search="atlantis"))

        assert page.items == ()
        assert page.pagination.total == 0
        assert page.pagination.total_pages == 0

    def test_newest_first_with_id_tie_break(self, empty_venue_store, venue_factory):
        """Given equal creation times, orders by id descending."""
        same_time = venue_factory(1).created_at
        for venue_id in (1, 2, 3):
            empty_venue_store.put(venue_factory(venue_id, created_at=same_time))

        page = VenueService(empty_venue_store).search(VenueFilter())

        assert [venue.id.value for venue in page.items] == [3, 2, 1]

    def test_search_matches_name_or_city_case_insensitively(self, empty_venue_store, venue_factory):
        """Given a search in any case, matches name or city."""
        empty_venue_store.put(venue_factory(1, name="Lakeside Retreat", city="Austin"))
        empty_venue_store.put(venue_factory(2, name="Grand Ballroom", city="San Francisco"))
        empty_venue_store.put(venue_factory(3, name="Skyline Center", city="New York"))

        service = VenueService(empty_venue_store)

        assert [v.id.value for v in service.search(VenueFilter(search="LAKE")).items] == [1]
        assert [v.id.value for v in service.search(VenueFilter(search="francisco")).items] == [2]

    def test_search_folds_non_ascii_case(self, empty_venue_store, venue_factory):
        """Given an upper-case non-ASCII search, matches the mixed-case city."""
        empty_venue_store.put(venue_factory(1, name="Seehaus", city="Zürich"))

        page = VenueService(empty_venue_store).search(VenueFilter(search="ZÜRICH"))

        assert [venue.id.value for venue in page.items] == [1]

    def test_filters_are_combined(self, empty_venue_store, venue_factory):
        """Given capacity and price filters, returns venues matching both."""
        empty_venue_store.put(venue_factory(1, capacity=300, price="750.00"))
        empty_venue_store.put(venue_factory(2, capacity=80, price="350.00"))
        empty_venue_store.put(venue_factory(3, capacity=150, price="450.00"))

        page = VenueService(empty_venue_store).search(
            VenueFilter(min_capacity=100, max_price=Money(Decimal("500")))
        )

        assert [venue.id.value for venue in page.items] == [3]
        assert page.pagination.total == 1

    def test_filter_is_passed_to_store(self, empty_venue_store):
        """Given a filter, passes it to the store unchanged."""
        venue_filter = VenueFilter(search="Austin", min_capacity=50, page=2, limit=5)

        VenueService(empty_venue_store).search(venue_filter)

        assert empty_venue_store.search_calls == [venue_filter]


class TestVenueLookup:
    """Tests for VenueService.get_venue and get_venue_by_slug."""

    def test_get_venue_by_slug(self, venue_store):
        """Given a known slug, returns the venue."""
        assert VenueService(venue_store).get_venue_by_slug("venue-1").id.value == 1

    def test_get_venue_by_slug_not_found(self, venue_store):
        """Given an unknown slug, raises VenueNotFoundError."""
        with pytest.raises(VenueNotFoundError):
            VenueService(venue_store).get_venue_by_slug("nonexistent")

    def test_get_venue_not_found(self, venue_store):
        """Given an unknown id, raises VenueNotFoundError."""
        with pytest.raises(VenueNotFoundError):
            VenueService(venue_store).get_venue(404)

    def test_get_venue_rejects_non_positive_id(self, venue_store):
        """Given a zero id, raises VenueNotFoundError."""
        with pytest.raises(VenueNotFoundError):
            VenueService(venue_store).get_venue(0)
