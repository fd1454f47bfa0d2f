"""Unread count snapshot entity."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True)
class AggregateSnapshot:
    """Immutable snapshot of the cached unread count.

    Holds the overall unread total and a per-source breakdown. The
    breakdown is a subset view: it is not required to sum to ``total``,
    and neither value is ever derived from the other.
    """

    total: int
    by_source: Mapping[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate counts and freeze the per-source mapping."""
        if self.total < 0:
            raise ValueError(f"total must be >= 0, got {self.total}")
        for source_id, count in self.by_source.items():
            if count < 0:
                raise ValueError(
                    f"count for source {source_id!r} must be >= 0, got {count}"
                )
        object.__setattr__(
            self, "by_source", MappingProxyType(dict(self.by_source))
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AggregateSnapshot):
            return NotImplemented
        return self.total == other.total and dict(self.by_source) == dict(
            other.by_source
        )

    def __hash__(self) -> int:
        return hash((self.total, frozenset(self.by_source.items())))

    def count_for(self, source_id: str | None = None) -> int:
        """Return the unread count for a source, or the total.

        Args:
            source_id: Source to look up. ``None`` returns the total.

        Returns:
            The count; untracked sources count as zero.
        """
        if source_id is None:
            return self.total
        return self.by_source.get(source_id, 0)

    def to_dict(self) -> dict[str, Any]:
        """Return the host's plain mapping shape."""
        return {"total": self.total, "bySource": dict(self.by_source)}

    def merge_into(self, data: Mapping[str, Any]) -> dict[str, Any]:
        """Write this snapshot over a host mapping, keeping its shape.

        Keys other than the total and the breakdown are carried over,
        and the breakdown stays under whichever key the host used. An
        empty breakdown is not added to a mapping that had none.

        Args:
            data: The mapping the host cache held.

        Returns:
            A new mapping; ``data`` is not modified.
        """
        merged = dict(data)
        merged["total"] = self.total
        key = _breakdown_key(data)
        if key in data or self.by_source:
            merged[key] = dict(self.by_source)
        return merged

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AggregateSnapshot":
        """Build a snapshot from the host's plain mapping shape.

        Accepts both ``bySource`` and ``by_source`` for the breakdown.

        Args:
            data: Mapping with ``total`` and an optional breakdown.

        Returns:
            A new AggregateSnapshot.
        """
        by_source = data.get("bySource", data.get("by_source")) or {}
        return cls(
            total=int(data["total"]),
            by_source={str(k): int(v) for k, v in by_source.items()},
        )

    @classmethod
    def coerce(cls, value: Any) -> "AggregateSnapshot | None":
        """Interpret a raw cached value as a snapshot.

        Args:
            value: Whatever the host cache returned.

        Returns:
            The snapshot, or None when nothing is cached.

        Raises:
            TypeError: If the value has an unsupported shape.
        """
        if value is None or isinstance(value, AggregateSnapshot):
            return value
        if isinstance(value, Mapping):
            return cls.from_dict(value)
        raise TypeError(
            f"Unsupported unread count value of type {type(value).__name__}"
        )


def _breakdown_key(data: Mapping[str, Any]) -> str:
    if "by_source" in data and "bySource" not in data:
        return "by_source"
    return "bySource"
