"""Serializers for string-keyed stores."""

from unreadcache.infrastructure.serializers.json import JsonSerializer, SerializationError

__all__ = ["JsonSerializer", "SerializationError"]
