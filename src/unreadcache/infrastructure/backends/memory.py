"""In-memory query cache implementation."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from cachetools import TTLCache  # type: ignore[import-untyped]

from unreadcache.core.entities.cache_config import RefetchScope
from unreadcache.core.entities.query_key import QueryKey

logger = logging.getLogger(__name__)


class RefetchError(Exception):
    """Raised after invalidation when one or more refetches failed.

    Every matching subscriber is still refetched before this is raised.

    Attributes:
        errors: The exception raised by each failing fetcher.
    """

    def __init__(self, errors: list[Exception]) -> None:
        self.errors = errors
        super().__init__(f"{len(errors)} refetch(es) failed: {errors[0]!r}")


@dataclass
class _Entry:
    value: Any
    stale: bool = False


@dataclass
class Subscription:
    """A consumer of a cached query.

    Attributes:
        key: The query key the consumer reads.
        fetcher: Callable returning a fresh value from the source of
            record.
        active: Whether the consumer is currently on screen.
        fetch_count: Number of refetches triggered for this consumer.
    """

    key: QueryKey
    fetcher: Callable[[], Any]
    active: bool = True
    fetch_count: int = 0


class InMemoryQueryCache:
    """In-memory query cache with stale tracking and subscribers.

    Suitable for single-process hosts and for tests. Uses cachetools
    for LRU eviction and TTL garbage collection. Invalidation marks
    entries stale and refetches subscribed consumers; stale data keeps
    being served until a refetch replaces it.
    """

    def __init__(
        self,
        maxsize: int = 1000,
        default_ttl: float = 3600.0,
    ) -> None:
        """Initialize the in-memory query cache.

        Args:
            maxsize: Maximum number of entries in the cache.
            default_ttl: Seconds an entry is kept before it is dropped.
        """
        self._maxsize = maxsize
        self._cache: TTLCache[QueryKey, _Entry] = TTLCache(
            maxsize=maxsize,
            ttl=default_ttl,
        )
        self._subscriptions: list[Subscription] = []

    def get(self, key: Any) -> Any | None:
        """Retrieve the cached value for a key.

        Args:
            key: The query key (or anything QueryKey.of accepts).

        Returns:
            The cached value, stale or not, or None if not cached.
        """
        entry = self._cache.get(QueryKey.of(key))
        return entry.value if entry is not None else None

    def set(self, key: Any, value: Any) -> None:
        """Store a value, replacing any previous one and clearing staleness.

        Args:
            key: The query key.
            value: The value to store.
        """
        self._cache[QueryKey.of(key)] = _Entry(value)

    def delete(self, key: Any) -> bool:
        """Delete the cached value for a key.

        Returns:
            True if the key existed and was deleted, False otherwise.
        """
        try:
            del self._cache[QueryKey.of(key)]
            return True
        except KeyError:
            return False

    def is_stale(self, key: Any) -> bool:
        """Check whether a cached entry was invalidated and not refetched.

        Returns:
            True if the entry exists and is stale, False otherwise.
        """
        entry = self._cache.get(QueryKey.of(key))
        return entry is not None and entry.stale

    def subscribe(
        self,
        key: Any,
        fetcher: Callable[[], Any],
        active: bool = True,
    ) -> Subscription:
        """Register a consumer of a query.

        Args:
            key: The query key the consumer reads.
            fetcher: Callable returning a fresh value.
            active: Whether the consumer is currently on screen.

        Returns:
            The subscription, whose ``active`` flag may be toggled.
        """
        subscription = Subscription(QueryKey.of(key), fetcher, active)
        self._subscriptions.append(subscription)
        return subscription

    def unsubscribe(self, subscription: Subscription) -> None:
        """Remove a consumer. Unknown subscriptions are ignored."""
        if subscription in self._subscriptions:
            self._subscriptions.remove(subscription)

    def invalidate(
        self,
        key_prefix: Any,
        scope: RefetchScope = RefetchScope.ACTIVE,
    ) -> int:
        """Mark every entry under a prefix stale and refetch consumers.

        Args:
            key_prefix: Prefix selecting the key family.
            scope: ACTIVE refetches on-screen consumers only, ALL
                refetches every matching consumer.

        Returns:
            Number of cached entries marked stale.

        Raises:
            RefetchError: If any fetcher failed. The remaining matching
                subscribers are refetched first.
        """
        prefix = QueryKey.of(key_prefix)

        stale_count = 0
        for key in list(self._cache.keys()):
            if not key.matches(prefix):
                continue
            # May have expired since the keys were listed
            entry = self._cache.get(key)
            if entry is None:
                continue
            entry.stale = True
            stale_count += 1

        errors: list[Exception] = []
        for subscription in list(self._subscriptions):
            if not subscription.key.matches(prefix):
                continue
            if scope is RefetchScope.ACTIVE and not subscription.active:
                continue
            try:
                self._refetch(subscription)
            except Exception as e:
                logger.warning(
                    "Refetch failed for %s: %s", subscription.key, e, exc_info=e
                )
                errors.append(e)

        if errors:
            raise RefetchError(errors)

        return stale_count

    def clear(self) -> None:
        """Clear all cached values. Subscriptions are kept."""
        self._cache.clear()

    def _refetch(self, subscription: Subscription) -> None:
        subscription.fetch_count += 1
        self.set(subscription.key, subscription.fetcher())

    def __len__(self) -> int:
        """Return the number of entries in the cache."""
        return len(self._cache)

    @property
    def maxsize(self) -> int:
        """Return the maximum size of the cache."""
        return self._maxsize
