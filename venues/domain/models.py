"""Domain models representing persisted state and query results.

These are pure domain objects with no API input rules.
Django ORM models are in venues/models.py (persistence layer).
"""

import math
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum

from venues.domain.errors import InvalidStatusTransitionError
from venues.domain.value_objects import BookingId, Capacity, DateRange, Money, VenueId

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100


class BookingStatus(Enum):
    """Lifecycle of a booking inquiry.

    Every inquiry starts as PENDING. An administrator may confirm or reject
    it once; CONFIRMED and REJECTED are terminal.
    """

    PENDING = "pending"
    CONFIRMED = "confirmed"
    REJECTED = "rejected"

    def can_transition_to(self, target: "BookingStatus") -> bool:
        return target in _ALLOWED_TRANSITIONS[self]

    def transition_to(self, target: "BookingStatus") -> "BookingStatus":
        if not self.can_transition_to(target):
            raise InvalidStatusTransitionError(self.value, target.value)
        return target

    @property
    def blocks_dates(self) -> bool:
        return self is not BookingStatus.REJECTED


_ALLOWED_TRANSITIONS: dict[BookingStatus, frozenset[BookingStatus]] = {
    BookingStatus.PENDING: frozenset({BookingStatus.CONFIRMED, BookingStatus.REJECTED}),
    BookingStatus.CONFIRMED: frozenset(),
    BookingStatus.REJECTED: frozenset(),
}


@dataclass(frozen=True)
class Venue:
    """Domain representation of a Venue."""

    id: VenueId
    slug: str
    name: str
    city: str
    address: str
    capacity: Capacity
    price_per_night: Money
    description: str
    image_url: str | None
    created_at: datetime
    updated_at: datetime
    amenities: tuple[str, ...] = ()


@dataclass(frozen=True)
class BookingInquiry:
    """Domain representation of a BookingInquiry."""

    id: BookingId
    venue_id: VenueId
    company_name: str
    email: str
    start_date: date
    end_date: date
    attendee_count: int
    status: BookingStatus
    quoted_price_per_night: Money
    created_at: datetime
    updated_at: datetime
    message: str | None = None

    @property
    def dates(self) -> DateRange:
        return DateRange(self.start_date, self.end_date)


@dataclass(frozen=True)
class BookedPeriod:
    """Dates taken at a venue, without any details about who took them."""

    start_date: date
    end_date: date


@dataclass(frozen=True)
class BookingRequest:
    """Validated input for creating a booking inquiry.

    Range rules (end after start, start not in the past) are checked at the
    HTTP boundary before a request is built.
    """

    venue_id: int
    company_name: str
    email: str
    start_date: date
    end_date: date
    attendee_count: int
    message: str | None = None

    @property
    def dates(self) -> DateRange:
        return DateRange(self.start_date, self.end_date)


@dataclass(frozen=True)
class BookingDraft:
    """An accepted request ready to be persisted."""

    venue_id: VenueId
    company_name: str
    email: str
    dates: DateRange
    attendee_count: int
    quoted_price_per_night: Money
    message: str | None = None
    status: BookingStatus = BookingStatus.PENDING


@dataclass(frozen=True)
class VenueFilter:
    """Search criteria for the venue listing. All filters are ANDed."""

    search: str | None = None
    min_capacity: int | None = None
    max_price: Money | None = None
    page: int = 1
    limit: int = DEFAULT_PAGE_SIZE

    def __post_init__(self) -> None:
        if self.search is not None and not self.search.strip():
            object.__setattr__(self, "search", None)
        if self.page < 1:
            raise ValueError("Page must be a positive integer")
        if not 1 <= self.limit <= MAX_PAGE_SIZE:
            raise ValueError(f"Limit must be between 1 and {MAX_PAGE_SIZE}")
        if self.min_capacity is not None and self.min_capacity < 1:
            raise ValueError("Minimum capacity must be a positive integer")
        if self.max_price is not None and self.max_price.amount <= 0:
            raise ValueError("Maximum price must be positive")

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


@dataclass(frozen=True)
class PaginationMeta:
    """Describes a windowed view over a larger result set."""

    page: int
    limit: int
    total: int
    total_pages: int

    @classmethod
    def build(cls, page: int, limit: int, total: int) -> "PaginationMeta":
        return cls(page=page, limit=limit, total=total, total_pages=math.ceil(total / limit))


@dataclass(frozen=True)
class VenuePage:
    """One page of venues plus pagination metadata."""

    items: tuple[Venue, ...]
    pagination: PaginationMeta
