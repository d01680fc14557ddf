"""Domain probe for cart reconciliation.

Following Domain-Oriented Observability patterns, this probe captures
domain-significant events of the delta-based cart protocol.

See: https://martinfowler.com/articles/domain-oriented-observability.html
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class CartProbe(Protocol):
    """Domain probe for cart operations."""

    def cart_refreshed(self, item_count: int, tenant_id: str | None) -> None:
        """Record that the local cart was replaced by the remote one."""
        ...

    def cart_unavailable(self, error: Exception, tenant_id: str | None) -> None:
        """Record that the cart could not be read and is treated as absent."""
        ...

    def delta_sent(self, product_id: str, delta: int, tenant_id: str | None) -> None:
        """Record that a quantity delta was applied remotely."""
        ...

    def delta_skipped(self, product_id: str) -> None:
        """Record that a mutation resolved to a zero delta."""
        ...

    def mutation_failed(
        self, operation: str, product_id: str, error: Exception
    ) -> None:
        """Record that a cart mutation was rejected."""
        ...

    def checkout_completed(self, order_id: str | None, tenant_id: str | None) -> None:
        """Record that checkout terminated the cart."""
        ...

    def checkout_failed(self, error: Exception, tenant_id: str | None) -> None:
        """Record that checkout was rejected."""
        ...

    def with_context(self, context: ObservationContext) -> CartProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultCartProbe:
    """Default implementation of CartProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultCartProbe:
        """Create a new probe with observation context bound."""
        return DefaultCartProbe(logger=self._logger, context=context)

    def cart_refreshed(self, item_count: int, tenant_id: str | None) -> None:
        self._logger.debug(
            "cart_refreshed",
            item_count=item_count,
            scoped_tenant_id=tenant_id,
            **self._get_context_kwargs(),
        )

    def cart_unavailable(self, error: Exception, tenant_id: str | None) -> None:
        self._logger.info(
            "cart_unavailable",
            error=str(error),
            error_type=type(error).__name__,
            scoped_tenant_id=tenant_id,
            **self._get_context_kwargs(),
        )

    def delta_sent(self, product_id: str, delta: int, tenant_id: str | None) -> None:
        self._logger.info(
            "cart_delta_sent",
            product_id=product_id,
            delta=delta,
            scoped_tenant_id=tenant_id,
            **self._get_context_kwargs(),
        )

    def delta_skipped(self, product_id: str) -> None:
        self._logger.debug(
            "cart_delta_skipped",
            product_id=product_id,
            **self._get_context_kwargs(),
        )

    def mutation_failed(
        self, operation: str, product_id: str, error: Exception
    ) -> None:
        self._logger.warning(
            "cart_mutation_failed",
            operation=operation,
            product_id=product_id,
            error=str(error),
            error_type=type(error).__name__,
            **self._get_context_kwargs(),
        )

    def checkout_completed(self, order_id: str | None, tenant_id: str | None) -> None:
        self._logger.info(
            "cart_checkout_completed",
            order_id=order_id,
            scoped_tenant_id=tenant_id,
            **self._get_context_kwargs(),
        )

    def checkout_failed(self, error: Exception, tenant_id: str | None) -> None:
        self._logger.warning(
            "cart_checkout_failed",
            error=str(error),
            error_type=type(error).__name__,
            scoped_tenant_id=tenant_id,
            **self._get_context_kwargs(),
        )
