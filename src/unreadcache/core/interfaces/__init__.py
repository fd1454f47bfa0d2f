"""Core interfaces (Protocol classes) for unreadcache."""

from unreadcache.core.interfaces.host_cache import IHostCache
from unreadcache.core.interfaces.invalidator import IInvalidator
from unreadcache.core.interfaces.logger import IStructuredLogger

__all__ = [
    "IHostCache",
    "IInvalidator",
    "IStructuredLogger",
]
