"""Redis query cache implementation."""

from typing import Any

import redis

from unreadcache.core.entities.cache_config import RefetchScope
from unreadcache.core.entities.query_key import QueryKey
from unreadcache.infrastructure.serializers.json import JsonSerializer


class RedisQueryCache:
    """Redis-backed query cache for hosts that share the count across processes.

    Redis has no notion of subscribers, so invalidation deletes every key
    under the prefix; the next read misses and the host refetches from
    the source of record. The refetch scope is accepted and ignored.
    """

    def __init__(
        self,
        redis_url: str = "redis://localhost:6379",
        key_prefix: str = "unreadcache",
        default_ttl: int | None = 3600,
        serializer: JsonSerializer | None = None,
        client: Any = None,
    ) -> None:
        """Initialize the Redis query cache.

        Args:
            redis_url: Redis connection URL. Ignored when ``client`` is given.
            key_prefix: Namespace prepended to every key.
            default_ttl: TTL in seconds for stored values, or None to
                keep them until invalidated.
            serializer: Serializer for stored values.
            client: An existing ``redis.Redis`` client.
        """
        self._redis: redis.Redis = client or redis.Redis.from_url(redis_url)
        self._key_prefix = key_prefix
        self._default_ttl = default_ttl
        self._serializer = serializer or JsonSerializer()

    def get(self, key: Any) -> Any | None:
        """Retrieve the cached value for a key.

        Returns:
            The deserialized value, or None if not found or expired.
        """
        data = self._redis.get(self._prefixed_key(key))
        if data is None:
            return None
        return self._serializer.deserialize(data)

    def set(self, key: Any, value: Any) -> None:
        """Store a value, replacing any previous one."""
        prefixed_key = self._prefixed_key(key)
        serialized = self._serializer.serialize(value)

        if self._default_ttl is not None:
            self._redis.setex(prefixed_key, self._default_ttl, serialized)
        else:
            self._redis.set(prefixed_key, serialized)

    def delete(self, key: Any) -> bool:
        """Delete the cached value for a key.

        Returns:
            True if the key existed and was deleted, False otherwise.
        """
        return self._redis.delete(self._prefixed_key(key)) > 0

    def invalidate(
        self,
        key_prefix: Any,
        scope: RefetchScope = RefetchScope.ACTIVE,
    ) -> int:
        """Delete the prefix key and every key beneath it.

        Args:
            key_prefix: Prefix selecting the key family.
            scope: Ignored.

        Returns:
            Number of keys deleted.
        """
        prefixed = self._prefixed_key(key_prefix)
        count = self._redis.delete(prefixed)
        return count + self._delete_by_pattern(f"{prefixed}:*")

    def clear(self) -> None:
        """Clear all values under our namespace, not the whole Redis DB."""
        self._delete_by_pattern(f"{self._key_prefix}:*")

    def _delete_by_pattern(self, pattern: str) -> int:
        """Delete keys matching a pattern using SCAN.

        Args:
            pattern: Redis glob pattern.

        Returns:
            Number of keys deleted.
        """
        count = 0
        cursor = 0

        while True:
            cursor, keys = self._redis.scan(cursor, match=pattern, count=100)

            if keys:
                count += self._redis.delete(*keys)

            if cursor == 0:
                break

        return count

    def _prefixed_key(self, key: Any) -> str:
        return f"{self._key_prefix}:{QueryKey.of(key)}"

    def close(self) -> None:
        """Close the Redis connection."""
        self._redis.close()

    def __enter__(self) -> "RedisQueryCache":
        return self

    def __exit__(self, exc_type: type, exc_val: Exception, exc_tb: object) -> None:
        self.close()
