"""Serializers for validating API input and transforming domain models to API responses.

Input serializers are the validation gate: they either produce a well-typed
domain request or field-level errors keyed by the API field name.
"""

from decimal import Decimal

from django.utils import timezone
from rest_framework import serializers

from venues.domain import BookingRequest, Money, VenueFilter
from venues.domain.models import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE


class VenueFilterSerializer(serializers.Serializer):
    """Query parameters of the venue listing."""

    search = serializers.CharField(required=False, allow_blank=True, max_length=255)
    minCapacity = serializers.IntegerField(required=False, min_value=1, source="min_capacity")
    maxPrice = serializers.DecimalField(
        required=False, max_digits=None, decimal_places=None, source="max_price"
    )
    page = serializers.IntegerField(required=False, min_value=1, default=1)
    limit = serializers.IntegerField(
        required=False, min_value=1, max_value=MAX_PAGE_SIZE, default=DEFAULT_PAGE_SIZE
    )

    def validate_maxPrice(self, value: Decimal) -> Decimal:
        if value <= 0:
            raise serializers.ValidationError("Ensure this value is greater than 0.")
        return value

    def to_domain(self) -> VenueFilter:
        data = self.validated_data
        max_price = data.get("max_price")
        return VenueFilter(
            search=data.get("search") or None,
            min_capacity=data.get("min_capacity"),
            max_price=Money(max_price) if max_price is not None else None,
            page=data["page"],
            limit=data["limit"],
        )


class CreateBookingSerializer(serializers.Serializer):
    """Body of a booking inquiry submission."""

    venueId = serializers.IntegerField(min_value=1, source="venue_id")
    companyName = serializers.CharField(min_length=1, max_length=255, source="company_name")
    email = serializers.EmailField(max_length=255)
    startDate = serializers.DateField(input_formats=["iso-8601"], source="start_date")
    endDate = serializers.DateField(input_formats=["iso-8601"], source="end_date")
    attendeeCount = serializers.IntegerField(min_value=1, source="attendee_count")
    message = serializers.CharField(
        required=False, allow_blank=True, allow_null=True, max_length=1000
    )

    def validate_startDate(self, value):
        if value < timezone.localdate():
            raise serializers.ValidationError("Start date cannot be in the past")
        return value

    def validate(self, attrs: dict) -> dict:
        if attrs["end_date"] <= attrs["start_date"]:
            raise serializers.ValidationError({"endDate": ["End date must be after start date"]})
        return attrs

    def to_domain(self) -> BookingRequest:
        data = self.validated_data
        return BookingRequest(
            venue_id=data["venue_id"],
            company_name=data["company_name"],
            email=data["email"],
            start_date=data["start_date"],
            end_date=data["end_date"],
            attendee_count=data["attendee_count"],
            message=data.get("message") or None,
        )


class VenueSerializer(serializers.Serializer):
    """Serializer for Venue domain model."""

    id = serializers.IntegerField(source="id.value")
    slug = serializers.CharField()
    name = serializers.CharField()
    city = serializers.CharField()
    address = serializers.CharField()
    capacity = serializers.IntegerField(source="capacity.value")
    pricePerNight = serializers.DecimalField(
        max_digits=10, decimal_places=2, source="price_per_night.amount"
    )
    description = serializers.CharField()
    imageUrl = serializers.CharField(source="image_url", allow_null=True)
    amenities = serializers.ListField(child=serializers.CharField())
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at")


class BookingSerializer(serializers.Serializer):
    """Serializer for BookingInquiry domain model."""

    id = serializers.IntegerField(source="id.value")
    venueId = serializers.IntegerField(source="venue_id.value")
    companyName = serializers.CharField(source="company_name")
    email = serializers.EmailField()
    startDate = serializers.DateField(source="start_date")
    endDate = serializers.DateField(source="end_date")
    attendeeCount = serializers.IntegerField(source="attendee_count")
    status = serializers.CharField(source="status.value")
    quotedPricePerNight = serializers.DecimalField(
        max_digits=10, decimal_places=2, source="quoted_price_per_night.amount"
    )
    message = serializers.CharField(allow_null=True)
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at")


class BookedPeriodSerializer(serializers.Serializer):
    """Serializer for BookedPeriod domain model."""

    startDate = serializers.DateField(source="start_date")
    endDate = serializers.DateField(source="end_date")


class PaginationSerializer(serializers.Serializer):
    """Serializer for PaginationMeta domain model."""

    page = serializers.IntegerField()
    limit = serializers.IntegerField()
    total = serializers.IntegerField()
    totalPages = serializers.IntegerField(source="total_pages")
