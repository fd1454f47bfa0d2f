"""Mutation kinds and operation requests."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum


class OperationKind(Enum):
    """Closed set of newsletter mutations the engine understands."""

    MARK_READ = "mark-read"
    MARK_UNREAD = "mark-unread"
    BULK_MARK_READ = "bulk-mark-read"
    BULK_MARK_UNREAD = "bulk-mark-unread"
    ARCHIVE = "archive"
    UNARCHIVE = "unarchive"
    BULK_ARCHIVE = "bulk-archive"
    BULK_UNARCHIVE = "bulk-unarchive"
    DELETE = "delete"
    BULK_DELETE = "bulk-delete"
    UNREAD_COUNT_CHANGE = "unread-count-change"
    NAVIGATION = "navigation"

    @classmethod
    def parse(cls, value: "OperationKind | str") -> "OperationKind | None":
        """Return the matching kind, or None for an unrecognized value."""
        if isinstance(value, OperationKind):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


class Strategy(Enum):
    """How the engine handles a mutation kind.

    OPTIMISTIC: Apply a locally computed delta to the cached snapshot.
    INVALIDATE: Mark the aggregate stale and let active consumers refetch.
    SKIP: The mutation never changes the aggregate.
    UNKNOWN: The kind is not recognized; treated as SKIP plus a warning.
    """

    OPTIMISTIC = "optimistic"
    INVALIDATE = "invalidate"
    SKIP = "skip"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class OperationRequest:
    """A single report that some newsletters underwent a mutation.

    Attributes:
        kind: The mutation kind. Unrecognized strings are accepted and
            classified as UNKNOWN.
        newsletter_ids: Affected newsletters. Only the length is used;
            duplicates are counted as given.
        source_id: Optional source whose count is adjusted alongside
            the total.
    """

    kind: OperationKind | str
    newsletter_ids: Sequence[str] = field(default_factory=tuple)
    source_id: str | None = None

    def __post_init__(self) -> None:
        # A bare string is a Sequence[str] of its characters
        if isinstance(self.newsletter_ids, (str, bytes)):
            raise TypeError(
                "newsletter_ids must be a sequence of ids, not a single "
                f"{type(self.newsletter_ids).__name__}"
            )
        object.__setattr__(self, "newsletter_ids", tuple(self.newsletter_ids))

    @property
    def count(self) -> int:
        """Number of affected newsletters."""
        return len(self.newsletter_ids)

    @property
    def kind_name(self) -> str:
        """The kind as its wire string, for logging."""
        if isinstance(self.kind, OperationKind):
            return self.kind.value
        return str(self.kind)
