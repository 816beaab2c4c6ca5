"""Domain error codes for the venues module."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCode(Enum):
    """Domain error codes."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    VENUE_NOT_FOUND = "VENUE_NOT_FOUND"
    CAPACITY_EXCEEDED = "CAPACITY_EXCEEDED"
    DATES_UNAVAILABLE = "DATES_UNAVAILABLE"
    INVALID_STATUS_TRANSITION = "INVALID_STATUS_TRANSITION"
    INTERNAL_ERROR = "INTERNAL_ERROR"


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code, user-safe message and structured details."""

    code: ErrorCode
    message: str
    details: dict[str, Any] | None = field(default=None)

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidInputError(DomainError):
    """Raised when input fails validation before reaching a service."""

    def __init__(self, field_errors: dict[str, list[str]], message: str = "Invalid request") -> None:
        super().__init__(
            code=ErrorCode.VALIDATION_ERROR,
            message=message,
            details=field_errors,
        )
        self.field_errors = field_errors


class VenueNotFoundError(DomainError):
    """Raised when a venue is not found by id or slug."""

    def __init__(self, lookup: int | str) -> None:
        super().__init__(
            code=ErrorCode.VENUE_NOT_FOUND,
            message="Venue not found",
        )
        self.lookup = lookup


class CapacityExceededError(DomainError):
    """Raised when the attendee count is larger than the venue capacity."""

    def __init__(self, capacity: int) -> None:
        super().__init__(
            code=ErrorCode.CAPACITY_EXCEEDED,
            message=f"Attendee count exceeds venue capacity. Maximum allowed: {capacity}",
            details={"maxCapacity": capacity},
        )
        self.capacity = capacity


class DatesUnavailableError(DomainError):
    """Raised when the requested dates overlap an active booking."""

    def __init__(self, conflicts: list[dict[str, str]]) -> None:
        super().__init__(
            code=ErrorCode.DATES_UNAVAILABLE,
            message="Selected dates are not available for this venue",
            details={"conflictingDates": conflicts},
        )
        self.conflicts = conflicts


class InvalidStatusTransitionError(DomainError):
    """Raised when a booking status change is not allowed."""

    def __init__(self, current: str, target: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_STATUS_TRANSITION,
            message=f"Cannot change booking status from {current} to {target}",
        )
        self.current = current
        self.target = target


class InternalError(DomainError):
    """Opaque error for unexpected failures. Never carries internal detail."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INTERNAL_ERROR,
            message="An unexpected error occurred",
        )
