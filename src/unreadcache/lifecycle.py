"""Cache manager lifecycle.

An application runs a single cache manager so that every mutation
handler adjusts the same view of the unread count. The registry holds
that instance; the module-level functions operate on a default registry
created at import time.

Example:
    cache = InMemoryQueryCache()
    create_cache_manager(cache, CacheManagerConfig())

    # Later, in a mutation handler
    get_cache_manager().invalidate_related(["n-1"], "mark-read")
"""

from unreadcache.core.entities.aggregate_snapshot import AggregateSnapshot
from unreadcache.core.entities.cache_config import CacheManagerConfig
from unreadcache.core.interfaces.host_cache import IHostCache
from unreadcache.core.interfaces.logger import IStructuredLogger
from unreadcache.core.services.cache_manager import CacheManager


class ConfigurationError(Exception):
    """Raised when the cache manager is used before it was created."""

    pass


class CacheManagerRegistry:
    """Holds the one cache manager of a running application.

    Creating again replaces the registered manager; state from the old
    manager is not carried over.
    """

    def __init__(self) -> None:
        self._manager: CacheManager | None = None

    def create(
        self,
        host_cache: IHostCache,
        config: CacheManagerConfig | None = None,
        structured_logger: IStructuredLogger | None = None,
    ) -> CacheManager:
        """Create and register a cache manager.

        Args:
            host_cache: The host's keyed cache.
            config: Optional configuration.
            structured_logger: Optional structured logger.

        Returns:
            The newly registered manager.
        """
        self._manager = CacheManager(
            host_cache,
            config=config,
            structured_logger=structured_logger,
        )
        return self._manager

    def get(self) -> CacheManager:
        """Return the registered manager.

        Raises:
            ConfigurationError: If no manager was created.
        """
        if self._manager is None:
            raise ConfigurationError(
                "Cache manager not initialized. Call create_cache_manager first."
            )
        return self._manager

    def get_safe(self) -> CacheManager | None:
        """Return the registered manager, or None if none was created."""
        return self._manager

    def reset(self) -> None:
        """Clear the registration."""
        self._manager = None


# Module-level registry used by the convenience functions below
_registry = CacheManagerRegistry()


def get_registry() -> CacheManagerRegistry:
    """Get the default registry."""
    return _registry


def create_cache_manager(
    host_cache: IHostCache,
    config: CacheManagerConfig | None = None,
    structured_logger: IStructuredLogger | None = None,
) -> CacheManager:
    """Create and register the application's cache manager.

    Must be called before get_cache_manager().

    Args:
        host_cache: The host's keyed cache.
        config: Optional configuration.
        structured_logger: Optional structured logger.

    Returns:
        The newly registered manager.
    """
    return _registry.create(host_cache, config, structured_logger)


def get_cache_manager() -> CacheManager:
    """Get the application's cache manager.

    Raises:
        ConfigurationError: If create_cache_manager() was never called.
    """
    return _registry.get()


def get_cache_manager_safe() -> CacheManager | None:
    """Get the application's cache manager, or None if not created."""
    return _registry.get_safe()


def reset_cache_manager() -> None:
    """Forget the application's cache manager."""
    _registry.reset()


def get_current_unread_count() -> AggregateSnapshot | None:
    """Return the cached unread count from the application's manager.

    Raises:
        ConfigurationError: If create_cache_manager() was never called.
    """
    return _registry.get().get_current_unread_count()
