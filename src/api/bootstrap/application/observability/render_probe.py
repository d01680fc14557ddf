"""Domain probe for the server render pass.

See: https://martinfowler.com/articles/domain-oriented-observability.html
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class RenderProbe(Protocol):
    """Domain probe for render pass operations."""

    def page_rendered(
        self, path: str, route_kind: str, status_code: int, tenant_id: str | None
    ) -> None: ...

    def landing_redirected(self, path: str) -> None: ...

    def prefetch_failed(self, path: str, route_kind: str, error: Exception) -> None: ...

    def public_plans_unavailable(self, error: Exception) -> None: ...

    def sitemap_rendered(self, url_count: int, status_code: int) -> None: ...

    def sitemap_failed(self, tenant_id: str | None, error: Exception) -> None: ...

    def with_context(self, context: ObservationContext) -> RenderProbe: ...


class DefaultRenderProbe:
    """Default implementation of RenderProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultRenderProbe:
        """Create a new probe with observation context bound."""
        return DefaultRenderProbe(logger=self._logger, context=context)

    def page_rendered(
        self, path: str, route_kind: str, status_code: int, tenant_id: str | None
    ) -> None:
        self._logger.info(
            "render_page_rendered",
            path=path,
            route_kind=route_kind,
            status_code=status_code,
            resolved_tenant_id=tenant_id,
            **self._get_context_kwargs(),
        )

    def landing_redirected(self, path: str) -> None:
        self._logger.debug(
            "render_landing_redirected",
            path=path,
            **self._get_context_kwargs(),
        )

    def prefetch_failed(self, path: str, route_kind: str, error: Exception) -> None:
        self._logger.error(
            "render_prefetch_failed",
            path=path,
            route_kind=route_kind,
            error=str(error),
            error_type=type(error).__name__,
            **self._get_context_kwargs(),
        )

    def public_plans_unavailable(self, error: Exception) -> None:
        self._logger.warning(
            "render_public_plans_unavailable",
            error=str(error),
            error_type=type(error).__name__,
            **self._get_context_kwargs(),
        )

    def sitemap_rendered(self, url_count: int, status_code: int) -> None:
        self._logger.debug(
            "render_sitemap_rendered",
            url_count=url_count,
            status_code=status_code,
            **self._get_context_kwargs(),
        )

    def sitemap_failed(self, tenant_id: str | None, error: Exception) -> None:
        self._logger.error(
            "render_sitemap_failed",
            resolved_tenant_id=tenant_id,
            error=str(error),
            error_type=type(error).__name__,
            **self._get_context_kwargs(),
        )
