"""Query key value object."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class QueryKey:
    """Immutable, tuple-backed cache key.

    Mirrors the array-shaped query keys used by the host query cache,
    e.g. ``("unreadCount", "all")``. A key matches a prefix when its
    leading parts equal the prefix parts, which is how invalidation
    selects a whole key family.
    """

    parts: tuple[str, ...]

    def __str__(self) -> str:
        """Return the key joined with ``:`` for string-keyed backends."""
        return ":".join(self.parts)

    def __len__(self) -> int:
        return len(self.parts)

    def matches(self, prefix: "QueryKey") -> bool:
        """Check whether this key falls under ``prefix``.

        Args:
            prefix: The key family to test against.

        Returns:
            True if every part of ``prefix`` equals the corresponding
            leading part of this key.
        """
        return self.parts[: len(prefix.parts)] == prefix.parts

    def child(self, *parts: str) -> "QueryKey":
        """Return a new key extending this one with ``parts``."""
        return QueryKey(self.parts + tuple(parts))

    @classmethod
    def of(cls, value: Any) -> "QueryKey":
        """Coerce a key-like value into a QueryKey.

        Accepts an existing QueryKey, a ``:``-separated string, or any
        sequence of parts (``None`` parts are dropped, the same way a
        missing user id is dropped from the host's key).

        Args:
            value: The value to coerce.

        Returns:
            A QueryKey instance.

        Raises:
            TypeError: If the value cannot be interpreted as a key.
        """
        if isinstance(value, QueryKey):
            return value
        if isinstance(value, str):
            return cls(tuple(value.split(":")))
        if isinstance(value, (tuple, list)):
            return cls(tuple(str(part) for part in value if part is not None))
        raise TypeError(f"Cannot build a QueryKey from {type(value).__name__}")
