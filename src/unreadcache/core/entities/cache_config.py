"""Cache manager configuration entity."""

from dataclasses import dataclass, field
from enum import Enum

from unreadcache.core.entities.query_key import QueryKey


class RefetchScope(Enum):
    """Which subscribers refetch after an invalidation.

    ACTIVE: Only consumers currently on screen refetch.
    ALL: Every subscriber refetches, including inactive ones.
    """

    ACTIVE = "active"
    ALL = "all"


@dataclass
class CacheManagerConfig:
    """Cache manager configuration.

    Provides the aggregate's cache keys, the invalidation scope, and
    feature toggles.

    Optimistic mode:
        When enable_optimistic_updates=True, read/unread toggles adjust
        the cached unread count in place.

    Invalidation-only mode:
        When enable_optimistic_updates=False, read/unread toggles are
        handled like archive/delete: the count is invalidated and
        refetched.
    """

    aggregate_key: QueryKey = field(
        default_factory=lambda: QueryKey(("unreadCount", "all"))
    )
    invalidation_prefix: QueryKey = field(
        default_factory=lambda: QueryKey(("unreadCount",))
    )
    refetch_scope: RefetchScope = RefetchScope.ACTIVE

    enable_optimistic_updates: bool = True
    enable_performance_logging: bool = False

    def __post_init__(self) -> None:
        """Normalize keys and scope, and check the key belongs to the prefix."""
        self.aggregate_key = QueryKey.of(self.aggregate_key)
        self.invalidation_prefix = QueryKey.of(self.invalidation_prefix)
        if not isinstance(self.refetch_scope, RefetchScope):
            self.refetch_scope = RefetchScope(str(self.refetch_scope).lower())

        if not self.aggregate_key.matches(self.invalidation_prefix):
            raise ValueError(
                f"aggregate_key {self.aggregate_key} is not under "
                f"invalidation_prefix {self.invalidation_prefix}"
            )
