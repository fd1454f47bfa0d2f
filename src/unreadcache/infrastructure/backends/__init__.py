"""Host query cache implementations.

RedisQueryCache lives in ``unreadcache.infrastructure.backends.redis_cache``
and needs the ``redis`` extra.
"""

from unreadcache.infrastructure.backends.memory import (
    InMemoryQueryCache,
    RefetchError,
    Subscription,
)

__all__ = ["InMemoryQueryCache", "RefetchError", "Subscription"]
