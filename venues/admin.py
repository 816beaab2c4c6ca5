from django.contrib import admin, messages

from venues.domain import BookingStatus
from venues.domain.errors import InvalidStatusTransitionError
from venues.models import BookingInquiry, Venue


class BookingInquiryInline(admin.TabularInline):
    model = BookingInquiry
    extra = 0
    fields = ["company_name", "start_date", "end_date", "attendee_count", "status"]
    readonly_fields = fields
    can_delete = False


@admin.register(Venue)
class VenueAdmin(admin.ModelAdmin):
    list_display = ["name", "city", "capacity", "price_per_night", "created_at"]
    search_fields = ["name", "city"]
    readonly_fields = ["slug", "created_at", "updated_at"]
    inlines = [BookingInquiryInline]


def apply_status(queryset, target: BookingStatus) -> tuple[int, list[str]]:
    """Move each inquiry to target, skipping those the state machine forbids."""
    updated = 0
    refused = []
    for booking in queryset:
        try:
            new_status = BookingStatus(booking.status).transition_to(target)
        except InvalidStatusTransitionError as exc:
            refused.append(f"#{booking.pk}: {exc.message}")
            continue
        booking.status = new_status.value
        booking.save(update_fields=["status", "updated_at"])
        updated += 1
    return updated, refused


def _report(modeladmin, request, updated: int, refused: list[str], verb: str) -> None:
    if updated:
        modeladmin.message_user(request, f"{updated} inquiries {verb}.", messages.SUCCESS)
    for line in refused:
        modeladmin.message_user(request, line, messages.WARNING)


@admin.register(BookingInquiry)
class BookingInquiryAdmin(admin.ModelAdmin):
    list_display = ["company_name", "venue", "start_date", "end_date", "attendee_count", "status"]
    list_filter = ["status", "venue"]
    search_fields = ["company_name", "email"]
    readonly_fields = ["quoted_price_per_night", "status", "created_at", "updated_at"]
    actions = ["confirm_inquiries", "reject_inquiries"]

    @admin.action(description="Confirm selected inquiries")
    def confirm_inquiries(self, request, queryset):
        updated, refused = apply_status(queryset, BookingStatus.CONFIRMED)
        _report(self, request, updated, refused, "confirmed")

    @admin.action(description="Reject selected inquiries")
    def reject_inquiries(self, request, queryset):
        updated, refused = apply_status(queryset, BookingStatus.REJECTED)
        _report(self, request, updated, refused, "rejected")
