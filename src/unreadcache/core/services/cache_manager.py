"""Cache manager - keeps the cached unread count in step with mutations."""

import logging
import time
from collections.abc import Mapping, Sequence
from typing import Any

from unreadcache.core.entities.aggregate_snapshot import AggregateSnapshot
from unreadcache.core.entities.cache_config import CacheManagerConfig
from unreadcache.core.entities.operation import (
    OperationKind,
    OperationRequest,
    Strategy,
)
from unreadcache.core.entities.outcome import (
    Absorbed,
    Invalidated,
    Outcome,
    Skipped,
)
from unreadcache.core.interfaces.host_cache import IHostCache
from unreadcache.core.interfaces.invalidator import IInvalidator
from unreadcache.core.interfaces.logger import IStructuredLogger
from unreadcache.core.services.cache_invalidator import CacheInvalidator
from unreadcache.core.services.classifier import classify
from unreadcache.core.services.delta_applier import plan_update
from unreadcache.utils.log_adapter import LoggingAdapter

logger = logging.getLogger(__name__)


class CacheManager:
    """Domain service that keeps the cached unread count consistent.

    This is the main entry point for mutation handlers: they report
    which newsletters changed and how, and the manager either adjusts
    the cached count in place, invalidates it, or does nothing.

    Every public method is best effort and never raises. The mutation
    that triggered the call makes its own round trip to the server, and
    the next authoritative fetch corrects whatever this manager got
    wrong.
    """

    def __init__(
        self,
        host_cache: IHostCache,
        config: CacheManagerConfig | None = None,
        structured_logger: IStructuredLogger | None = None,
        invalidator: IInvalidator | None = None,
    ) -> None:
        """Initialize the cache manager.

        Args:
            host_cache: The host's keyed cache holding the unread count.
            config: Optional configuration. Uses defaults if not provided.
            structured_logger: Optional logger. Defaults to a
                LoggingAdapter over this module's logger.
            invalidator: Optional invalidator. Defaults to a
                CacheInvalidator built from the configuration.
        """
        self._host_cache = host_cache
        self._config = config or CacheManagerConfig()
        self._log = structured_logger or LoggingAdapter(logger)
        self._invalidator = invalidator or CacheInvalidator(
            host_cache,
            key_prefix=self._config.invalidation_prefix,
            scope=self._config.refetch_scope,
        )

        # Statistics
        self._applied = 0
        self._invalidated = 0
        self._skipped = 0
        self._absorbed = 0

    @property
    def config(self) -> CacheManagerConfig:
        """Get the cache manager configuration."""
        return self._config

    @property
    def host_cache(self) -> IHostCache:
        """Get the host cache this manager writes to."""
        return self._host_cache

    @property
    def stats(self) -> dict[str, int]:
        """Get outcome statistics.

        Returns:
            Dictionary with applied, invalidated, skipped, absorbed and
            total counts.
        """
        return {
            "applied": self._applied,
            "invalidated": self._invalidated,
            "skipped": self._skipped,
            "absorbed": self._absorbed,
            "total": (
                self._applied + self._invalidated + self._skipped + self._absorbed
            ),
        }

    def update_unread_count_optimistically(
        self, request: OperationRequest
    ) -> Outcome:
        """Adjust the cached unread count for a mutation.

        Read/unread toggles rewrite the cached snapshot; archive and
        delete invalidate it; navigation does nothing; unrecognized
        kinds log a warning and do nothing.

        Args:
            request: The mutation being reported.

        Returns:
            The outcome of the request. Failures are returned as
            Absorbed, never raised.
        """
        strategy = classify(request.kind)

        if strategy is Strategy.OPTIMISTIC:
            if not self._config.enable_optimistic_updates:
                self._log.debug(
                    "Optimistic updates disabled, invalidating unread count",
                    {
                        "action": "update_unread_count_invalidate_fallback",
                        "metadata": {"operation": request.kind_name},
                    },
                )
                return self._invalidate(request)
            return self._apply(request)

        if strategy is Strategy.INVALIDATE:
            self._log.debug(
                "Archive/delete operation detected, invalidating unread count",
                {"action": "update_unread_count_archive_delete"},
            )
            return self._invalidate(request)

        if strategy is Strategy.SKIP:
            return self._skip_navigation(request)

        return self._warn_unknown(
            "Unknown operation type for unread count update",
            "update_unread_count_unknown_operation",
            request,
        )

    def invalidate_related(
        self,
        newsletter_ids: Sequence[str],
        kind: OperationKind | str,
    ) -> Outcome:
        """Invalidate whatever a mutation affected.

        Read/unread toggles are routed to the optimistic update (the
        total is adjusted, per-source counts are not, since no source is
        known here). Everything else follows the same strategy table.

        Args:
            newsletter_ids: Affected newsletters.
            kind: The mutation kind.

        Returns:
            The outcome of the request. An invalid request is returned
            as Absorbed, never raised.
        """
        try:
            request = OperationRequest(kind=kind, newsletter_ids=newsletter_ids)
        except TypeError as e:
            self._log.error(
                "Invalid request, skipping unread count invalidation",
                {
                    "action": "invalidate_related_invalid_request",
                    "metadata": {
                        "operation": kind.value
                        if isinstance(kind, OperationKind)
                        else str(kind),
                        "newsletter_ids": repr(newsletter_ids),
                    },
                },
                e,
            )
            self._absorbed += 1
            return Absorbed(e)

        strategy = classify(kind)

        if strategy is Strategy.OPTIMISTIC:
            return self.update_unread_count_optimistically(request)

        if strategy is Strategy.INVALIDATE:
            self._log.debug(
                "Invalidating unread count for related operation",
                {
                    "action": "invalidate_unread_count",
                    "metadata": self._metadata(request),
                },
            )
            return self._invalidate(request)

        if strategy is Strategy.SKIP:
            return self._skip_navigation(request)

        return self._warn_unknown(
            "Unknown operation type, skipping invalidation",
            "invalidate_related_unknown_operation",
            request,
        )

    def get_current_unread_count(self) -> AggregateSnapshot | None:
        """Return the cached unread count snapshot without changing it.

        Returns:
            The snapshot, or None when nothing is cached or the host
            cache could not be read.
        """
        try:
            return AggregateSnapshot.coerce(
                self._host_cache.get(self._config.aggregate_key)
            )
        except Exception as e:
            self._log.error(
                "Failed to read unread count",
                {"action": "get_unread_count_error"},
                e,
            )
            return None

    def _apply(self, request: OperationRequest) -> Outcome:
        key = self._config.aggregate_key
        started = time.perf_counter()

        try:
            raw = self._host_cache.get(key)
            outcome = plan_update(AggregateSnapshot.coerce(raw), request)

            if isinstance(outcome, Skipped):
                self._log.debug(
                    "No current unread count data found, skipping optimistic update",
                    {"action": "update_unread_count_no_data"},
                )
                self._skipped += 1
                return outcome

            self._log.debug(
                "Updating unread count optimistically",
                {
                    "action": "update_unread_count_optimistic",
                    "metadata": self._metadata(request),
                },
            )
            # Write back in the shape the host stored
            value: Any = outcome.snapshot
            if isinstance(raw, Mapping):
                value = outcome.snapshot.merge_into(raw)
            self._host_cache.set(key, value)
        except Exception as e:
            self._log.error(
                "Failed to update unread count optimistically",
                {
                    "action": "update_unread_count_optimistic_error",
                    "metadata": {
                        "operation": request.kind_name,
                        "newsletter_ids": list(request.newsletter_ids),
                    },
                },
                e,
            )
            self._absorbed += 1
            return Absorbed(e)

        if self._config.enable_performance_logging:
            self._log.debug(
                "Optimistic unread count update completed",
                {
                    "action": "update_unread_count_performance",
                    "metadata": {
                        "operation": request.kind_name,
                        "duration_ms": (time.perf_counter() - started) * 1000,
                    },
                },
            )

        self._applied += 1
        return outcome

    def _invalidate(self, request: OperationRequest) -> Outcome:
        try:
            count = self._invalidator.invalidate()
        except Exception as e:
            self._log.error(
                "Failed to invalidate unread count",
                {
                    "action": "invalidate_unread_count_error",
                    "metadata": {
                        "operation": request.kind_name,
                        "newsletter_ids": list(request.newsletter_ids),
                    },
                },
                e,
            )
            self._absorbed += 1
            return Absorbed(e)

        self._invalidated += 1
        return Invalidated(count)

    def _skip_navigation(self, request: OperationRequest) -> Skipped:
        self._log.debug(
            "Navigation operation detected, skipping unread count invalidation",
            {
                "action": "navigation_skip_unread_invalidation",
                "metadata": {"newsletter_ids": list(request.newsletter_ids)},
            },
        )
        self._skipped += 1
        return Skipped("navigation")

    def _warn_unknown(
        self, message: str, action: str, request: OperationRequest
    ) -> Skipped:
        self._log.warn(
            message,
            {"action": action, "metadata": {"operation": request.kind_name}},
        )
        self._skipped += 1
        return Skipped("unknown_operation")

    @staticmethod
    def _metadata(request: OperationRequest) -> dict[str, Any]:
        metadata: dict[str, Any] = {
            "operation": request.kind_name,
            "newsletter_ids": list(request.newsletter_ids),
            "count": request.count,
        }
        if request.source_id is not None:
            metadata["source_id"] = request.source_id
        return metadata
