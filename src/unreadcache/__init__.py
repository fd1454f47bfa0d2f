"""unreadcache - Optimistic unread count cache for newsletter readers.

Keeps a cached unread count (an overall total plus a per-source
breakdown) in step with read/unread, archive, delete and navigation
mutations, without refetching the count after every mutation. Read and
unread toggles adjust the cached count in place; archive and delete
invalidate it so active consumers refetch; navigation never touches it.

Example:
    from unreadcache import (
        CacheManagerConfig,
        InMemoryQueryCache,
        OperationRequest,
        create_cache_manager,
        get_cache_manager,
    )

    cache = InMemoryQueryCache()
    cache.set(("unreadCount", "all"), {"total": 10, "bySource": {"s1": 5}})
    create_cache_manager(cache, CacheManagerConfig())

    # In a mutation handler
    get_cache_manager().update_unread_count_optimistically(
        OperationRequest(kind="mark-read", newsletter_ids=["n-1"], source_id="s1")
    )
    cache.get(("unreadCount", "all"))  # {"total": 9, "bySource": {"s1": 4}}
"""

from unreadcache.core.entities import (
    Absorbed,
    AggregateSnapshot,
    Applied,
    CacheManagerConfig,
    Invalidated,
    OperationKind,
    OperationRequest,
    Outcome,
    QueryKey,
    RefetchScope,
    Skipped,
    Strategy,
)
from unreadcache.core.interfaces import (
    IHostCache,
    IInvalidator,
    IStructuredLogger,
)
from unreadcache.core.services import (
    CacheInvalidator,
    CacheManager,
    apply_delta,
    classify,
)
from unreadcache.infrastructure import (
    InMemoryQueryCache,
    RefetchError,
    JsonSerializer,
    SerializationError,
)
from unreadcache.lifecycle import (
    CacheManagerRegistry,
    ConfigurationError,
    create_cache_manager,
    get_cache_manager,
    get_cache_manager_safe,
    get_current_unread_count,
    reset_cache_manager,
)
from unreadcache.utils import LoggingAdapter

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Core entities
    "AggregateSnapshot",
    "CacheManagerConfig",
    "OperationKind",
    "OperationRequest",
    "QueryKey",
    "RefetchScope",
    "Strategy",
    # Outcomes
    "Outcome",
    "Applied",
    "Invalidated",
    "Skipped",
    "Absorbed",
    # Core interfaces
    "IHostCache",
    "IInvalidator",
    "IStructuredLogger",
    # Core services
    "CacheManager",
    "CacheInvalidator",
    "classify",
    "apply_delta",
    # Lifecycle
    "CacheManagerRegistry",
    "ConfigurationError",
    "create_cache_manager",
    "get_cache_manager",
    "get_cache_manager_safe",
    "reset_cache_manager",
    "get_current_unread_count",
    # Infrastructure implementations
    "InMemoryQueryCache",
    "RefetchError",
    "JsonSerializer",
    "SerializationError",
    "LoggingAdapter",
]
