"""Django signals for cache invalidation."""

from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from venues.cache import invalidate_venue_cache
from venues.models import Venue


@receiver([post_save, post_delete], sender=Venue)
def invalidate_venue_caches(sender, instance, **kwargs):
    """Invalidate cached listings and details when a venue is saved or deleted."""
    invalidate_venue_cache()
