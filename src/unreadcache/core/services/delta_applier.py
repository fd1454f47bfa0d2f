"""Delta applier - pure unread count arithmetic."""

from unreadcache.core.entities.aggregate_snapshot import AggregateSnapshot
from unreadcache.core.entities.operation import OperationKind, OperationRequest
from unreadcache.core.entities.outcome import Applied, Skipped
from unreadcache.core.services.classifier import delta_sign


def apply_delta(
    snapshot: AggregateSnapshot | None,
    kind: OperationKind | str,
    count: int,
    source_id: str | None = None,
) -> AggregateSnapshot | None:
    """Compute the snapshot that results from a read/unread toggle.

    Both the total and, when given, the source's count move by the same
    signed delta and are floored at zero independently. Overshoot is
    dropped rather than carried, so the result may under-count until the
    next authoritative refetch. Without a source id the per-source counts
    are left untouched.

    Args:
        snapshot: The currently cached snapshot, or None on a cold cache.
        kind: An optimistic mutation kind.
        count: Number of affected newsletters.
        source_id: Optional source whose count also changes.

    Returns:
        The new snapshot, or None when there was nothing to update.

    Raises:
        ValueError: If ``kind`` has no optimistic delta or ``count`` is
            negative.
    """
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    delta = delta_sign(kind) * count

    if snapshot is None:
        return None

    by_source = dict(snapshot.by_source)
    if source_id is not None:
        by_source[source_id] = max(by_source.get(source_id, 0) + delta, 0)

    return AggregateSnapshot(
        total=max(snapshot.total + delta, 0),
        by_source=by_source,
    )


def plan_update(
    snapshot: AggregateSnapshot | None,
    request: OperationRequest,
) -> Applied | Skipped:
    """Compute the outcome of an optimistic request without side effects.

    Args:
        snapshot: The currently cached snapshot, or None on a cold cache.
        request: A request whose kind is optimistic.

    Returns:
        Applied with the new and previous snapshots, or Skipped with
        reason ``"no_data"`` when nothing is cached.
    """
    updated = apply_delta(
        snapshot, request.kind, request.count, request.source_id
    )
    if updated is None or snapshot is None:
        return Skipped("no_data")
    return Applied(snapshot=updated, previous=snapshot)
