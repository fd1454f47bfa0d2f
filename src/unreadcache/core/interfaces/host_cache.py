"""Host cache interface."""

from typing import Any, Protocol

from unreadcache.core.entities.cache_config import RefetchScope
from unreadcache.core.entities.query_key import QueryKey


class IHostCache(Protocol):
    """Contract for the keyed cache supplied by the host application.

    The engine depends only on this minimal shape. Methods are
    synchronous: every engine call reads and writes without a yield
    point in between.
    """

    def get(self, key: QueryKey) -> Any | None:
        """Retrieve the cached value for a key.

        Args:
            key: The cache key to retrieve.

        Returns:
            The cached value, or None if nothing is cached.
        """
        ...

    def set(self, key: QueryKey, value: Any) -> None:
        """Replace the cached value for a key.

        Args:
            key: The cache key.
            value: The new value. Always a whole-value replacement.
        """
        ...

    def invalidate(self, key_prefix: QueryKey, scope: RefetchScope) -> int:
        """Mark every value under a key family stale and trigger refetches.

        Args:
            key_prefix: Prefix selecting the key family.
            scope: Which subscribers refetch.

        Returns:
            Number of cached entries marked stale.
        """
        ...
