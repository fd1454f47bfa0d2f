"""Tagged results returned by the engine's computation layer."""

from dataclasses import dataclass

from unreadcache.core.entities.aggregate_snapshot import AggregateSnapshot


@dataclass(frozen=True)
class Applied:
    """A new snapshot was computed and written."""

    snapshot: AggregateSnapshot
    previous: AggregateSnapshot


@dataclass(frozen=True)
class Invalidated:
    """The aggregate key family was invalidated."""

    count: int


@dataclass(frozen=True)
class Skipped:
    """Nothing was done.

    ``reason`` is one of ``"navigation"``, ``"no_data"`` or
    ``"unknown_operation"``.
    """

    reason: str


@dataclass(frozen=True)
class Absorbed:
    """An internal failure was logged and swallowed."""

    error: Exception


Outcome = Applied | Invalidated | Skipped | Absorbed
