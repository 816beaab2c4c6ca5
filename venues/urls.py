from django.urls import path

from venues.handlers import BookingCreateView, VenueBookingListView, VenueDetailView, VenueListView

urlpatterns = [
    path("venues", VenueListView.as_view(), name="venue-list"),
    path("venues/<slug:slug>", VenueDetailView.as_view(), name="venue-detail"),
    path(
        "venues/<slug:slug>/bookings",
        VenueBookingListView.as_view(),
        name="venue-booking-list",
    ),
    path("bookings", BookingCreateView.as_view(), name="booking-create"),
]
