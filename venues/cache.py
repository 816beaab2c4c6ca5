"""Caching of public venue responses.

Venue listings and details change rarely and are read on every page view.
Booked dates are never cached; availability is always read fresh.

Every key embeds a generation number. Invalidation bumps the generation, so
older entries are never read again and expire after VENUE_CACHE_TIMEOUT.
"""

import hashlib
import time
from collections.abc import Callable

from django.conf import settings
from django.core.cache import cache

from venues.domain import VenueFilter

CACHE_PREFIX = "venues"
VERSION_KEY = f"{CACHE_PREFIX}:version"


def _timeout() -> int:
    return getattr(settings, "VENUE_CACHE_TIMEOUT", 60)


def current_version() -> int:
    version = cache.get(VERSION_KEY)
    if version is None:
        # add() keeps a value written by a concurrent process.
        cache.add(VERSION_KEY, time.time_ns(), None)
        version = cache.get(VERSION_KEY)
    return version


def list_cache_key(venue_filter: VenueFilter) -> str:
    max_price = str(venue_filter.max_price) if venue_filter.max_price is not None else ""
    fingerprint = "|".join(
        [
            f"search={(venue_filter.search or '').casefold()}",
            f"min_capacity={venue_filter.min_capacity or ''}",
            f"max_price={max_price}",
            f"page={venue_filter.page}",
            f"limit={venue_filter.limit}",
        ]
    )
    digest = hashlib.sha1(fingerprint.encode("utf-8")).hexdigest()
    return f"{CACHE_PREFIX}:{current_version()}:list:{digest}"


def detail_cache_key(slug: str) -> str:
    return f"{CACHE_PREFIX}:{current_version()}:detail:{slug}"


def get_or_build(key: str, builder: Callable[[], dict]) -> dict:
    """Return the cached payload for key, building and storing it on a miss."""
    cached: dict | None = cache.get(key)
    if cached is not None:
        return cached

    payload = builder()
    cache.set(key, payload, _timeout())
    return payload


def invalidate_venue_cache() -> None:
    """Retire every cached venue listing and detail payload."""
    try:
        cache.incr(VERSION_KEY)
    except ValueError:
        # Counter missing or evicted; any fresh value differs from the old one.
        cache.set(VERSION_KEY, time.time_ns(), None)
