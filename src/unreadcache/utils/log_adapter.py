"""Structured logging on top of the standard library logger."""

import logging
from typing import Any


class LoggingAdapter:
    """Adapts a ``logging.Logger`` to the structured logger interface.

    The ``action`` tag and ``metadata`` mapping from the context are
    attached to each record through ``extra``, so handlers and
    formatters can read them as ``record.action`` and
    ``record.metadata``.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        """Initialize the adapter.

        Args:
            logger: Logger to write to. Defaults to the ``unreadcache``
                package logger.
        """
        self._logger = logger or logging.getLogger("unreadcache")

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def debug(self, message: str, context: dict[str, Any]) -> None:
        self._logger.debug(message, extra=_extra(context))

    def warn(self, message: str, context: dict[str, Any]) -> None:
        self._logger.warning(message, extra=_extra(context))

    def error(
        self,
        message: str,
        context: dict[str, Any],
        cause: BaseException | None = None,
    ) -> None:
        self._logger.error(message, extra=_extra(context), exc_info=cause)


def _extra(context: dict[str, Any]) -> dict[str, Any]:
    return {
        "action": context.get("action"),
        "metadata": dict(context.get("metadata") or {}),
    }
