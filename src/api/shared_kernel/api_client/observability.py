"""Domain probe for storefront API client operations.

Following Domain-Oriented Observability patterns, this probe captures
events related to calls made against the remote storefront API.

See: https://martinfowler.com/articles/domain-oriented-observability.html
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class ApiClientProbe(Protocol):
    """Domain probe for storefront API client operations."""

    def request_rejected(
        self,
        method: str,
        path: str,
        status_code: int,
        tenant_id: str | None,
    ) -> None:
        """Record that the API answered a request with an error status."""
        ...

    def transport_failed(
        self,
        method: str,
        path: str,
        error: Exception,
    ) -> None:
        """Record that a request never produced a response."""
        ...

    def with_context(self, context: ObservationContext) -> ApiClientProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultApiClientProbe:
    """Default implementation of ApiClientProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultApiClientProbe:
        """Create a new probe with observation context bound."""
        return DefaultApiClientProbe(logger=self._logger, context=context)

    def request_rejected(
        self,
        method: str,
        path: str,
        status_code: int,
        tenant_id: str | None,
    ) -> None:
        """Record that the API answered a request with an error status."""
        self._logger.warning(
            "storefront_api_request_rejected",
            method=method,
            path=path,
            status_code=status_code,
            scoped_tenant_id=tenant_id,
            **self._get_context_kwargs(),
        )

    def transport_failed(
        self,
        method: str,
        path: str,
        error: Exception,
    ) -> None:
        """Record that a request never produced a response."""
        self._logger.error(
            "storefront_api_transport_failed",
            method=method,
            path=path,
            error=str(error),
            error_type=type(error).__name__,
            **self._get_context_kwargs(),
        )
