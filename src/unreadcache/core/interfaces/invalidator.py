"""Cache invalidator interface."""

from typing import Protocol


class IInvalidator(Protocol):
    """Contract for invalidating the cached unread count.

    Used for mutations whose effect on the count cannot be computed
    locally, so the authoritative refetch has to correct it.
    """

    def invalidate(self) -> int:
        """Invalidate the unread count key family.

        Returns:
            Number of entries invalidated.
        """
        ...
