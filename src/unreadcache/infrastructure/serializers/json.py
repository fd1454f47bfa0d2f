"""JSON codec for cached unread counts."""

import json
from collections.abc import Mapping
from typing import Any

from unreadcache.core.entities.aggregate_snapshot import AggregateSnapshot

_SNAPSHOT_KEYS = frozenset({"total", "bySource"})


class SerializationError(Exception):
    """Raised when a cached value cannot be encoded or decoded.

    Attributes:
        value: The value or payload that failed.
    """

    def __init__(self, message: str, value: Any = None) -> None:
        super().__init__(message)
        self.value = value


class JsonSerializer:
    """JSON serializer for cached unread counts.

    Snapshots are written in the host's mapping shape
    (``{"total": ..., "bySource": {...}}``) so other readers of the
    store see the same data the application does. A payload with
    exactly that shape is read back as an AggregateSnapshot; anything
    else, including a count carrying extra host keys, comes back as
    plain JSON data so its shape survives a write-back.
    """

    def __init__(self, encoding: str = "utf-8", decode_snapshots: bool = True) -> None:
        """Initialize the JSON serializer.

        Args:
            encoding: Character encoding to use.
            decode_snapshots: Whether snapshot-shaped payloads are read
                back as AggregateSnapshot.
        """
        self._encoding = encoding
        self._decode_snapshots = decode_snapshots

    def serialize(self, value: Any) -> bytes:
        """Encode a snapshot or JSON-compatible value.

        Raises:
            SerializationError: If the value cannot be encoded.
        """
        if isinstance(value, AggregateSnapshot):
            value = value.to_dict()
        try:
            text = json.dumps(value, default=_encode_nested, sort_keys=True)
        except (TypeError, ValueError) as e:
            raise SerializationError(
                f"Cannot encode {type(value).__name__} as JSON: {e}", value
            ) from e
        return text.encode(self._encoding)

    def deserialize(self, data: bytes) -> Any:
        """Decode a payload written by serialize.

        Returns:
            An AggregateSnapshot for snapshot-shaped payloads, otherwise
            the decoded JSON value.

        Raises:
            SerializationError: If the payload is not valid JSON or does
                not hold a valid snapshot.
        """
        try:
            decoded = json.loads(data.decode(self._encoding))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise SerializationError(f"Cannot decode cached payload: {e}", data) from e

        if not self._decode_snapshots or not _is_snapshot_shape(decoded):
            return decoded
        try:
            return AggregateSnapshot.from_dict(decoded)
        except (TypeError, ValueError, AttributeError) as e:
            raise SerializationError(f"Invalid unread count payload: {e}", data) from e


def _is_snapshot_shape(value: Any) -> bool:
    return isinstance(value, Mapping) and set(value) == _SNAPSHOT_KEYS


def _encode_nested(obj: Any) -> Any:
    if isinstance(obj, AggregateSnapshot):
        return obj.to_dict()
    if isinstance(obj, Mapping):
        return dict(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")
