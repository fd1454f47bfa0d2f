"""Domain entities for unreadcache."""

from unreadcache.core.entities.aggregate_snapshot import AggregateSnapshot
from unreadcache.core.entities.cache_config import CacheManagerConfig, RefetchScope
from unreadcache.core.entities.operation import (
    OperationKind,
    OperationRequest,
    Strategy,
)
from unreadcache.core.entities.outcome import (
    Absorbed,
    Applied,
    Invalidated,
    Outcome,
    Skipped,
)
from unreadcache.core.entities.query_key import QueryKey

__all__ = [
    "AggregateSnapshot",
    "CacheManagerConfig",
    "RefetchScope",
    "OperationKind",
    "OperationRequest",
    "Strategy",
    "QueryKey",
    # Outcomes
    "Outcome",
    "Applied",
    "Invalidated",
    "Skipped",
    "Absorbed",
]
