"""Pytest configuration for unreadcache tests."""

import pytest


@pytest.fixture(autouse=True)
def reset_cache_manager_registry():
    """Reset the default cache manager registry around each test."""
    import unreadcache.lifecycle

    # Store original value
    original_manager = unreadcache.lifecycle._registry._manager

    yield

    # Restore original value after test
    unreadcache.lifecycle._registry._manager = original_manager
