"""Domain probe for the client bootstrap.

Following Domain-Oriented Observability patterns, this probe captures
domain-significant events of the once-per-page bootstrap.

See: https://martinfowler.com/articles/domain-oriented-observability.html
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class BootstrapProbe(Protocol):
    """Domain probe for bootstrap operations."""

    def snapshot_consumed(self, route_kind: str, query_count: int) -> None:
        """Record that the page's hydration snapshot was taken over."""
        ...

    def snapshot_absent(self) -> None:
        """Record that the page carried no usable snapshot."""
        ...

    def bootstrap_started(self, path: str, hostname: str) -> None:
        """Record the execution path chosen for this page."""
        ...

    def bootstrap_completed(self, path: str, tenant_id: str | None) -> None:
        """Record that tenant and auth state are ready."""
        ...

    def stale_result_discarded(self, stage: str) -> None:
        """Record that a result arrived for an abandoned bootstrap."""
        ...

    def mount_point_missing(self, element_id: str) -> None:
        """Record that startup was aborted for lack of a mount point."""
        ...

    def with_context(self, context: ObservationContext) -> BootstrapProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultBootstrapProbe:
    """Default implementation of BootstrapProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        """Get context metadata as kwargs for logging."""
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(self, context: ObservationContext) -> DefaultBootstrapProbe:
        """Create a new probe with observation context bound."""
        return DefaultBootstrapProbe(logger=self._logger, context=context)

    def snapshot_consumed(self, route_kind: str, query_count: int) -> None:
        """Record that the page's hydration snapshot was taken over."""
        self._logger.debug(
            "bootstrap_snapshot_consumed",
            route_kind=route_kind,
            query_count=query_count,
            **self._get_context_kwargs(),
        )

    def snapshot_absent(self) -> None:
        """Record that the page carried no usable snapshot."""
        self._logger.debug(
            "bootstrap_snapshot_absent",
            **self._get_context_kwargs(),
        )

    def bootstrap_started(self, path: str, hostname: str) -> None:
        """Record the execution path chosen for this page."""
        self._logger.info(
            "bootstrap_started",
            path=path,
            target_hostname=hostname,
            **self._get_context_kwargs(),
        )

    def bootstrap_completed(self, path: str, tenant_id: str | None) -> None:
        """Record that tenant and auth state are ready."""
        self._logger.info(
            "bootstrap_completed",
            path=path,
            resolved_tenant_id=tenant_id,
            **self._get_context_kwargs(),
        )

    def stale_result_discarded(self, stage: str) -> None:
        """Record that a result arrived for an abandoned bootstrap."""
        self._logger.info(
            "bootstrap_stale_result_discarded",
            stage=stage,
            **self._get_context_kwargs(),
        )

    def mount_point_missing(self, element_id: str) -> None:
        """Record that startup was aborted for lack of a mount point."""
        self._logger.error(
            "bootstrap_mount_point_missing",
            element_id=element_id,
            **self._get_context_kwargs(),
        )
