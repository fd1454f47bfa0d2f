"""Structured logger interface."""

from typing import Any, Protocol


class IStructuredLogger(Protocol):
    """Contract for the structured logger the cache manager writes to.

    ``context`` always carries an ``action`` tag naming the engine
    operation that produced the entry, plus an optional ``metadata``
    mapping (operation kind, newsletter ids, source id, counts).
    """

    def debug(self, message: str, context: dict[str, Any]) -> None:
        ...

    def warn(self, message: str, context: dict[str, Any]) -> None:
        ...

    def error(
        self,
        message: str,
        context: dict[str, Any],
        cause: BaseException | None = None,
    ) -> None:
        ...
