"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Self


@dataclass(frozen=True)
class VenueId:
    """Unique identifier for a Venue."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 1:
            raise ValueError("Venue ID must be a positive integer")

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=int(value))


@dataclass(frozen=True)
class BookingId:
    """Unique identifier for a BookingInquiry."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 1:
            raise ValueError("Booking ID must be a positive integer")


@dataclass(frozen=True)
class Money:
    """Price representation with validation."""

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, "amount", Decimal(str(self.amount)))
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    def __str__(self) -> str:
        return f"{self.amount:.2f}"


@dataclass(frozen=True)
class Capacity:
    """Positive integer representing how many attendees a venue holds."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 1:
            raise ValueError("Capacity must be positive")

    def admits(self, attendee_count: int) -> bool:
        return attendee_count <= self.value


@dataclass(frozen=True)
class DateRange:
    """Half-open calendar range [start_date, end_date).

    The end date is the checkout day and is not itself occupied, so ranges
    that only touch at a boundary do not overlap.
    """

    start_date: date
    end_date: date

    def __post_init__(self) -> None:
        if self.end_date <= self.start_date:
            raise ValueError(
                f"End date ({self.end_date}) must be after start date ({self.start_date})"
            )

    def overlaps(self, other: "DateRange") -> bool:
        return self.start_date < other.end_date and self.end_date > other.start_date

    def contains(self, day: date) -> bool:
        return self.start_date <= day < self.end_date

    @property
    def nights(self) -> int:
        return (self.end_date - self.start_date).days

    def __str__(self) -> str:
        return f"{self.start_date.isoformat()}..{self.end_date.isoformat()}"
