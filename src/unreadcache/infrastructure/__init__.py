"""Infrastructure layer implementations for unreadcache."""

from unreadcache.infrastructure.backends import (
    InMemoryQueryCache,
    RefetchError,
    Subscription,
)
from unreadcache.infrastructure.serializers import JsonSerializer, SerializationError

__all__ = [
    "InMemoryQueryCache",
    "RefetchError",
    "Subscription",
    "JsonSerializer",
    "SerializationError",
]
