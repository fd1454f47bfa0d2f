"""Domain services for unreadcache."""

from unreadcache.core.services.cache_invalidator import CacheInvalidator
from unreadcache.core.services.cache_manager import CacheManager
from unreadcache.core.services.classifier import classify, delta_sign
from unreadcache.core.services.delta_applier import apply_delta, plan_update

__all__ = [
    "CacheManager",
    "CacheInvalidator",
    # Pure computation
    "classify",
    "delta_sign",
    "apply_delta",
    "plan_update",
]
