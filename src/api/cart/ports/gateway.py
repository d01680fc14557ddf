"""Port for the remote cart."""

from __future__ import annotations

from typing import Protocol

from cart.domain.value_objects import Cart, CheckoutResult, PaymentProof
from shared_kernel.tenant_scope import TenantScope


class CartGateway(Protocol):
    """Remote source of truth for the cart of the current session."""

    async def get_cart(self, scope: TenantScope) -> Cart | None:
        """Fetch the current cart, or None when there is none."""
        ...

    async def patch_item_delta(
        self, product_id: str, delta: int, scope: TenantScope
    ) -> None:
        """Apply a signed quantity change to one product."""
        ...

    async def checkout(self, proof: PaymentProof, scope: TenantScope) -> CheckoutResult:
        """Submit the cart for checkout with a proof of payment."""
        ...
