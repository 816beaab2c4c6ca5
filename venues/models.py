"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models
from django.utils.text import slugify


class Venue(models.Model):
    """Persistence model for venues."""

    slug = models.SlugField(max_length=255, unique=True, editable=False)
    name = models.CharField(max_length=255)
    city = models.CharField(max_length=120)
    address = models.CharField(max_length=255)
    capacity = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    price_per_night = models.DecimalField(
        max_digits=10, decimal_places=2, validators=[MinValueValidator(Decimal("0.01"))]
    )
    description = models.TextField()
    image_url = models.URLField(max_length=500, blank=True, null=True)
    amenities = models.JSONField(default=list, blank=True)
    # Casefolded copies of name and city for Unicode-aware case-insensitive search.
    search_name = models.TextField(default="", editable=False)
    search_city = models.TextField(default="", editable=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["-created_at"], name="venue_created_at_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.name} ({self.city})"

    def save(self, *args, **kwargs) -> None:
        # The slug is derived once and never regenerated on later saves.
        if not self.slug:
            self.slug = self._unique_slug()
        self.search_name = self.name.casefold()
        self.search_city = self.city.casefold()
        update_fields = kwargs.get("update_fields")
        if update_fields is not None and ({"name", "city"} & set(update_fields)):
            kwargs["update_fields"] = {*update_fields, "search_name", "search_city"}
        super().save(*args, **kwargs)

    def _unique_slug(self) -> str:
        base = slugify(f"{self.name}-{self.city}")[:240] or "venue"
        candidate = base
        suffix = 2
        while Venue.objects.filter(slug=candidate).exists():
            candidate = f"{base}-{suffix}"
            suffix += 1
        return candidate


class BookingInquiry(models.Model):
    """Persistence model for booking inquiries."""

    class Status(models.TextChoices):
        PENDING = "pending", "Pending"
        CONFIRMED = "confirmed", "Confirmed"
        REJECTED = "rejected", "Rejected"

    venue = models.ForeignKey(Venue, on_delete=models.CASCADE, related_name="bookings")
    company_name = models.CharField(max_length=255)
    email = models.EmailField(max_length=255)
    start_date = models.DateField()
    end_date = models.DateField()
    attendee_count = models.PositiveIntegerField()
    status = models.CharField(max_length=16, choices=Status.choices, default=Status.PENDING)
    quoted_price_per_night = models.DecimalField(max_digits=10, decimal_places=2)
    message = models.TextField(max_length=1000, blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["start_date", "id"]
        indexes = [
            models.Index(fields=["venue", "start_date"], name="booking_venue_start_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(end_date__gt=models.F("start_date")),
                name="booking_end_after_start",
            ),
            models.CheckConstraint(
                condition=models.Q(attendee_count__gt=0),
                name="booking_attendee_count_positive",
            ),
        ]
        verbose_name_plural = "booking inquiries"

    def __str__(self) -> str:
        return f"{self.company_name} @ {self.venue_id}: {self.start_date} - {self.end_date}"
