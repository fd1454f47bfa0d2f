"""Utilities for unreadcache."""

from unreadcache.utils.log_adapter import LoggingAdapter

__all__ = ["LoggingAdapter"]
