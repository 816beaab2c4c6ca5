from venues.stores.interfaces import BookingStore, VenueStore

__all__ = ["VenueStore", "BookingStore"]
