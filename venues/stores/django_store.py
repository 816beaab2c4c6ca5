"""Django ORM implementation of the venue and booking stores."""

from contextlib import AbstractContextManager

from django.db import transaction
from django.db.models import Q, QuerySet

from venues import models
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


def _lock_if_in_transaction(queryset: QuerySet) -> QuerySet:
    """Apply select_for_update when inside transaction.atomic().

    Backends without row locks (SQLite) ignore it.
    """
    if not transaction.get_connection().in_atomic_block:
        return queryset
    return queryset.select_for_update()


def to_domain_venue(row: models.Venue) -> Venue:
    return Venue(
        id=VenueId(row.pk),
        slug=row.slug,
        name=row.name,
        city=row.city,
        address=row.address,
        capacity=Capacity(row.capacity),
        price_per_night=Money(row.price_per_night),
        description=row.description,
        image_url=row.image_url or None,
        created_at=row.created_at,
        updated_at=row.updated_at,
        amenities=tuple(row.amenities or ()),
    )


def to_domain_booking(row: models.BookingInquiry) -> BookingInquiry:
    return BookingInquiry(
        id=BookingId(row.pk),
        venue_id=VenueId(row.venue_id),
        company_name=row.company_name,
        email=row.email,
        start_date=row.start_date,
        end_date=row.end_date,
        attendee_count=row.attendee_count,
        status=BookingStatus(row.status),
        quoted_price_per_night=Money(row.quoted_price_per_night),
        created_at=row.created_at,
        updated_at=row.updated_at,
        message=row.message,
    )


class DjangoVenueStore(VenueStore):
    """Relational venue store using Django ORM."""

    def get_venue(self, venue_id: VenueId) -> Venue | None:
        queryset = _lock_if_in_transaction(models.Venue.objects.filter(pk=venue_id.value))
        row = queryset.first()
        return to_domain_venue(row) if row is not None else None

    def get_venue_by_slug(self, slug: str) -> Venue | None:
        row = models.Venue.objects.filter(slug=slug).first()
        return to_domain_venue(row) if row is not None else None

    def search_venues(self, venue_filter: VenueFilter) -> tuple[list[Venue], int]:
        queryset = models.Venue.objects.all()
        if venue_filter.search:
            needle = venue_filter.search.casefold()
            queryset = queryset.filter(Q(search_name__contains=needle) | Q(search_city__contains=needle))
        if venue_filter.min_capacity is not None:
            queryset = queryset.filter(capacity__gte=venue_filter.min_capacity)
        if venue_filter.max_price is not None:
            queryset = queryset.filter(price_per_night__lte=venue_filter.max_price.amount)

        total = queryset.count()
        if venue_filter.offset >= total:
            return [], total
        window = queryset.order_by("-created_at", "-id")[
            venue_filter.offset : venue_filter.offset + venue_filter.limit
        ]
        return [to_domain_venue(row) for row in window], total


class DjangoBookingStore(BookingStore):
    """Relational booking store using Django ORM."""

    def list_bookings_for_venue(self, venue_id: VenueId) -> list[BookingInquiry]:
        rows = models.BookingInquiry.objects.filter(venue_id=venue_id.value).order_by("start_date", "id")
        return [to_domain_booking(row) for row in rows]

    def find_overlapping(self, venue_id: VenueId, dates: DateRange) -> list[BookingInquiry]:
        rows = (
            models.BookingInquiry.objects.filter(venue_id=venue_id.value)
            .exclude(status=models.BookingInquiry.Status.REJECTED)
            .filter(start_date__lt=dates.end_date, end_date__gt=dates.start_date)
            .order_by("start_date", "id")
        )
        return [to_domain_booking(row) for row in rows]

    def create_booking(self, draft: BookingDraft) -> BookingInquiry:
        row = models.BookingInquiry.objects.create(
            venue_id=draft.venue_id.value,
            company_name=draft.company_name,
            email=draft.email,
            start_date=draft.dates.start_date,
            end_date=draft.dates.end_date,
            attendee_count=draft.attendee_count,
            status=draft.status.value,
            quoted_price_per_night=draft.quoted_price_per_night.amount,
            message=draft.message,
        )
        return to_domain_booking(row)

    def atomic(self) -> AbstractContextManager:
        return transaction.atomic()
