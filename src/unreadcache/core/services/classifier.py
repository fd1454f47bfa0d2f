"""Operation classifier - maps mutation kinds to handling strategies."""

from unreadcache.core.entities.operation import OperationKind, Strategy

_STRATEGIES: dict[OperationKind, Strategy] = {
    # Read/unread toggles have a bounded, computable effect on the count
    OperationKind.MARK_READ: Strategy.OPTIMISTIC,
    OperationKind.BULK_MARK_READ: Strategy.OPTIMISTIC,
    OperationKind.MARK_UNREAD: Strategy.OPTIMISTIC,
    OperationKind.BULK_MARK_UNREAD: Strategy.OPTIMISTIC,
    # Archive/delete can move newsletters in or out of the counted set
    OperationKind.ARCHIVE: Strategy.INVALIDATE,
    OperationKind.BULK_ARCHIVE: Strategy.INVALIDATE,
    OperationKind.UNARCHIVE: Strategy.INVALIDATE,
    OperationKind.BULK_UNARCHIVE: Strategy.INVALIDATE,
    OperationKind.DELETE: Strategy.INVALIDATE,
    OperationKind.BULK_DELETE: Strategy.INVALIDATE,
    OperationKind.UNREAD_COUNT_CHANGE: Strategy.INVALIDATE,
    # View-state only
    OperationKind.NAVIGATION: Strategy.SKIP,
}

_DELTA_SIGNS: dict[OperationKind, int] = {
    OperationKind.MARK_READ: -1,
    OperationKind.BULK_MARK_READ: -1,
    OperationKind.MARK_UNREAD: 1,
    OperationKind.BULK_MARK_UNREAD: 1,
}

_missing = set(OperationKind) - set(_STRATEGIES)
if _missing:
    raise ImportError(
        f"No strategy defined for: {sorted(kind.value for kind in _missing)}"
    )
_unsigned = {
    kind for kind, strategy in _STRATEGIES.items()
    if strategy is Strategy.OPTIMISTIC
} - set(_DELTA_SIGNS)
if _unsigned:
    raise ImportError(
        f"No delta sign defined for: {sorted(kind.value for kind in _unsigned)}"
    )


def classify(kind: OperationKind | str) -> Strategy:
    """Decide how a mutation kind is handled.

    Args:
        kind: The mutation kind, as an enum member or its string value.

    Returns:
        The handling strategy. Unrecognized kinds return UNKNOWN.
    """
    parsed = OperationKind.parse(kind)
    if parsed is None:
        return Strategy.UNKNOWN
    return _STRATEGIES[parsed]


def delta_sign(kind: OperationKind | str) -> int:
    """Return -1 for the mark-read family and +1 for mark-unread.

    Raises:
        ValueError: If the kind is not an optimistic kind.
    """
    parsed = OperationKind.parse(kind)
    if parsed is None or parsed not in _DELTA_SIGNS:
        raise ValueError(f"{kind!r} has no optimistic delta")
    return _DELTA_SIGNS[parsed]
