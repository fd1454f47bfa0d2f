"""Cache invalidator - scoped invalidation of the unread count."""

from unreadcache.core.entities.cache_config import RefetchScope
from unreadcache.core.entities.query_key import QueryKey
from unreadcache.core.interfaces.host_cache import IHostCache


class CacheInvalidator:
    """Invalidates the unread count key family on the host cache.

    Only the configured scope refetches (active subscribers by default),
    so views that are not on screen do not cause network traffic.
    """

    def __init__(
        self,
        host_cache: IHostCache,
        key_prefix: QueryKey,
        scope: RefetchScope = RefetchScope.ACTIVE,
    ) -> None:
        """Initialize the invalidator.

        Args:
            host_cache: The host's keyed cache.
            key_prefix: Prefix selecting every unread count entry.
            scope: Which subscribers refetch.
        """
        self._host_cache = host_cache
        self._key_prefix = key_prefix
        self._scope = scope

    @property
    def key_prefix(self) -> QueryKey:
        return self._key_prefix

    @property
    def scope(self) -> RefetchScope:
        return self._scope

    def invalidate(self) -> int:
        """Invalidate the unread count key family.

        Returns:
            Number of entries the host marked stale.
        """
        return self._host_cache.invalidate(self._key_prefix, self._scope)
