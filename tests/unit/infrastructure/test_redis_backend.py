"""Tests for RedisQueryCache against a mocked client."""

from unittest.mock import MagicMock

import pytest

from unreadcache import (
    AggregateSnapshot,
    CacheManager,
    OperationRequest,
    QueryKey,
    RefetchScope,
)
from unreadcache.infrastructure.backends.redis_cache import RedisQueryCache


@pytest.fixture
def client() -> MagicMock:
    """Create a mocked Redis client backed by a dict."""
    store: dict[str, bytes] = {}
    mock = MagicMock()
    mock.get.side_effect = store.get

    def setex(key: str, ttl: int, value: bytes) -> bool:
        store[key] = value
        return True

    def set_(key: str, value: bytes) -> bool:
        store[key] = value
        return True

    def delete(*keys: str) -> int:
        return sum(1 for key in keys if store.pop(key, None) is not None)

    def scan(cursor: int, match: str, count: int) -> tuple[int, list[str]]:
        prefix = match.rstrip("*")
        return 0, [key for key in store if key.startswith(prefix)]

    mock.setex.side_effect = setex
    mock.set.side_effect = set_
    mock.delete.side_effect = delete
    mock.scan.side_effect = scan
    mock.store = store
    return mock


@pytest.fixture
def cache(client: MagicMock) -> RedisQueryCache:
    """Create a Redis query cache over the mocked client."""
    return RedisQueryCache(key_prefix="test", default_ttl=60, client=client)


class TestRedisQueryCache:
    """Tests for RedisQueryCache."""

    def test_set_and_get(self, cache: RedisQueryCache, client: MagicMock) -> None:
        """Test values are serialized under the prefixed key."""
        cache.set(("unreadCount", "all"), {"total": 2, "bySource": {"s1": 2}})

        client.setex.assert_called_once_with(
            "test:unreadCount:all", 60, b'{"bySource": {"s1": 2}, "total": 2}'
        )
        assert cache.get(("unreadCount", "all")) == AggregateSnapshot(
            total=2, by_source={"s1": 2}
        )

    def test_set_without_ttl(self, client: MagicMock) -> None:
        """Test values are stored without expiry when no TTL is set."""
        cache = RedisQueryCache(key_prefix="test", default_ttl=None, client=client)

        cache.set(("unreadCount", "all"), {"total": 0, "bySource": {}})

        client.set.assert_called_once()
        client.setex.assert_not_called()

    def test_get_missing_key(self, cache: RedisQueryCache) -> None:
        """Test a miss returns None."""
        assert cache.get(("unreadCount", "all")) is None

    def test_delete(self, cache: RedisQueryCache) -> None:
        """Test deleting a key."""
        cache.set(("a",), 1)

        assert cache.delete(("a",)) is True
        assert cache.delete(("a",)) is False

    def test_invalidate_deletes_key_family(
        self, cache: RedisQueryCache, client: MagicMock
    ) -> None:
        """Test invalidation deletes the prefix key and its children only."""
        cache.set(("unreadCount",), {"total": 1, "bySource": {}})
        cache.set(("unreadCount", "all"), {"total": 1, "bySource": {}})
        cache.set(("unreadCount", "all", "user-1"), {"total": 1, "bySource": {}})
        cache.set(("newsletters", "list"), [])

        count = cache.invalidate(QueryKey(("unreadCount",)), RefetchScope.ACTIVE)

        assert count == 3
        assert set(client.store) == {"test:newsletters:list"}

    def test_clear(self, cache: RedisQueryCache, client: MagicMock) -> None:
        """Test clear only removes our namespace."""
        cache.set(("a",), 1)
        client.store["other:key"] = b"1"

        cache.clear()

        assert set(client.store) == {"other:key"}

    def test_context_manager_closes(self, client: MagicMock) -> None:
        """Test the connection is closed on exit."""
        with RedisQueryCache(client=client):
            pass

        client.close.assert_called_once()

    def test_with_cache_manager(self, cache: RedisQueryCache) -> None:
        """Test the manager adjusts a Redis-held count."""
        cache.set(("unreadCount", "all"), AggregateSnapshot(total=5, by_source={"s1": 5}))
        manager = CacheManager(cache, structured_logger=MagicMock())

        manager.update_unread_count_optimistically(
            OperationRequest(kind="mark-read", newsletter_ids=["n-1"], source_id="s1")
        )

        assert cache.get(("unreadCount", "all")) == AggregateSnapshot(
            total=4, by_source={"s1": 4}
        )

    def test_with_cache_manager_keeps_extra_keys(
        self, cache: RedisQueryCache, client: MagicMock
    ) -> None:
        """Test a count stored with extra keys keeps them after an update."""
        cache.set(
            ("unreadCount", "all"),
            {"total": 5, "bySource": {"s1": 5}, "userId": "u1"},
        )
        manager = CacheManager(cache, structured_logger=MagicMock())

        manager.update_unread_count_optimistically(
            OperationRequest(kind="mark-read", newsletter_ids=["n-1"], source_id="s1")
        )

        assert client.store["test:unreadCount:all"] == (
            b'{"bySource": {"s1": 4}, "total": 4, "userId": "u1"}'
        )
