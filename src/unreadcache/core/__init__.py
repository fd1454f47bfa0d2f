"""Core domain layer for unreadcache."""

from unreadcache.core.entities import (
    AggregateSnapshot,
    CacheManagerConfig,
    OperationKind,
    OperationRequest,
    QueryKey,
    RefetchScope,
    Strategy,
)
from unreadcache.core.interfaces import (
    IHostCache,
    IInvalidator,
    IStructuredLogger,
)
from unreadcache.core.services import CacheInvalidator, CacheManager

__all__ = [
    # Entities
    "AggregateSnapshot",
    "CacheManagerConfig",
    "OperationKind",
    "OperationRequest",
    "QueryKey",
    "RefetchScope",
    "Strategy",
    # Interfaces
    "IHostCache",
    "IInvalidator",
    "IStructuredLogger",
    # Services
    "CacheManager",
    "CacheInvalidator",
]
