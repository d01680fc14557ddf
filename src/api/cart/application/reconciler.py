"""Delta-based cart reconciler.

The remote cart is the source of truth. Every mutation is sent as a signed
delta against the last known remote quantity, never as an absolute value,
and is followed by a refresh. Callers must await each mutation before
issuing the next one for the same cart.
"""

from __future__ import annotations

from dataclasses import replace

from cart.application.observability import CartProbe, DefaultCartProbe
from cart.domain.exceptions import InvalidQuantityError
from cart.domain.value_objects import Cart, CartState, CheckoutResult, PaymentProof
from cart.ports.gateway import CartGateway
from shared_kernel.api_client import ApiError
from shared_kernel.tenant_scope import ScopeProvider


class CartReconciler:
    """Keeps the local cart in step with the remote one.

    The tenant scope is read from ``scope_provider`` on every call.
    """

    def __init__(
        self,
        gateway: CartGateway,
        scope_provider: ScopeProvider,
        probe: CartProbe | None = None,
    ):
        self._gateway = gateway
        self._scope_provider = scope_provider
        self._probe = probe or DefaultCartProbe()
        self._state = CartState()

    @property
    def state(self) -> CartState:
        return self._state

    @property
    def cart(self) -> Cart | None:
        return self._state.cart

    @property
    def item_count(self) -> int:
        cart = self._state.cart
        return cart.item_count if cart is not None else 0

    def quantity_of(self, product_id: str) -> int:
        cart = self._state.cart
        return cart.quantity_of(product_id) if cart is not None else 0

    async def refresh(self) -> Cart | None:
        """Replace the local cart with the remote one.

        A failed read leaves no cart: a missing cart and an unreadable one
        are the same to callers.
        """
        scope = self._scope_provider()
        self._set_loading(True)
        try:
            cart = await self._gateway.get_cart(scope)
        except ApiError as e:
            self._probe.cart_unavailable(error=e, tenant_id=scope.tenant_id)
            cart = None
        else:
            if cart is not None:
                self._probe.cart_refreshed(
                    item_count=cart.item_count, tenant_id=scope.tenant_id
                )
        self._state = CartState(cart=cart, loading=False)
        return cart

    async def add(self, product_id: str, quantity: int) -> None:
        if quantity <= 0:
            raise InvalidQuantityError(quantity, "must be greater than zero")
        await self._apply_delta("add", product_id, quantity)

    async def set_quantity(self, product_id: str, quantity: int) -> None:
        if quantity < 0:
            raise InvalidQuantityError(quantity, "must not be negative")
        await self._apply_delta(
            "set_quantity", product_id, quantity - self.quantity_of(product_id)
        )

    async def remove(self, product_id: str) -> None:
        await self._apply_delta("remove", product_id, -self.quantity_of(product_id))

    async def checkout(self, proof: PaymentProof) -> CheckoutResult:
        """Submit the cart with a proof of payment.

        On success the local cart is cleared whatever the response holds.

        Raises:
            ApiError: If the checkout is rejected. The cart is kept.
        """
        scope = self._scope_provider()
        self._set_loading(True)
        try:
            result = await self._gateway.checkout(proof, scope)
        except ApiError as e:
            self._probe.checkout_failed(error=e, tenant_id=scope.tenant_id)
            raise
        finally:
            self._set_loading(False)

        self._state = CartState(cart=None, loading=False)
        self._probe.checkout_completed(
            order_id=result.order_id, tenant_id=scope.tenant_id
        )
        return result

    async def _apply_delta(self, operation: str, product_id: str, delta: int) -> None:
        if delta == 0:
            self._probe.delta_skipped(product_id=product_id)
            return

        scope = self._scope_provider()
        self._set_loading(True)
        try:
            await self._gateway.patch_item_delta(product_id, delta, scope)
        except ApiError as e:
            self._probe.mutation_failed(
                operation=operation, product_id=product_id, error=e
            )
            raise
        finally:
            self._set_loading(False)

        self._probe.delta_sent(
            product_id=product_id, delta=delta, tenant_id=scope.tenant_id
        )
        await self.refresh()

    def _set_loading(self, loading: bool) -> None:
        self._state = replace(self._state, loading=loading)
