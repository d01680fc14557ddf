"""Unit tests for the delta-based CartReconciler."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from cart.application.observability import CartProbe
from cart.application.reconciler import CartReconciler
from cart.domain.exceptions import InvalidQuantityError
from cart.domain.value_objects import Cart, CartItem, CheckoutResult, PaymentProof
from shared_kernel.api_client import ApiError
from shared_kernel.tenant_scope import TenantScope

SCOPE = TenantScope.for_tenant("t1")


class FakeRemoteCart:
    """Remote cart that applies deltas like the API does."""

    def __init__(self, **quantities: int):
        self.quantities = dict(quantities)
        self.deltas: list[tuple[str, int]] = []

    async def get_cart(self, scope: TenantScope) -> Cart:
        return Cart(
            items=tuple(
                CartItem(product_id=p, quantity=q)
                for p, q in self.quantities.items()
                if q > 0
            )
        )

    async def patch_item_delta(
        self, product_id: str, delta: int, scope: TenantScope
    ) -> None:
        self.deltas.append((product_id, delta))
        self.quantities[product_id] = self.quantities.get(product_id, 0) + delta


@pytest.fixture
def mock_probe() -> MagicMock:
    return MagicMock(spec=CartProbe)


@pytest.fixture
def mock_gateway() -> AsyncMock:
    gateway = AsyncMock()
    gateway.get_cart.return_value = Cart(items=(CartItem("p1", 3),))
    gateway.checkout.return_value = CheckoutResult(order_id="o1")
    return gateway


class TestDeltas:
    @pytest.mark.asyncio
    async def test_set_quantity_twice_sends_one_delta(self, mock_probe):
        """Setting the quantity already held locally sends nothing."""
        remote = FakeRemoteCart()
        reconciler = CartReconciler(remote, lambda: SCOPE, probe=mock_probe)

        await reconciler.set_quantity("p1", 3)
        await reconciler.set_quantity("p1", 3)

        assert remote.deltas == [("p1", 3)]
        assert reconciler.quantity_of("p1") == 3
        mock_probe.delta_skipped.assert_called_once_with(product_id="p1")

    @pytest.mark.asyncio
    async def test_add_then_remove_sends_opposite_deltas(self, mock_probe):
        """Remove sends the negated local quantity."""
        remote = FakeRemoteCart()
        reconciler = CartReconciler(remote, lambda: SCOPE, probe=mock_probe)

        await reconciler.add("p1", 2)
        await reconciler.remove("p1")

        assert remote.deltas == [("p1", 2), ("p1", -2)]
        assert reconciler.quantity_of("p1") == 0
        assert reconciler.item_count == 0

    @pytest.mark.asyncio
    async def test_set_quantity_sends_difference_to_known_quantity(self, mock_probe):
        remote = FakeRemoteCart(p1=5)
        reconciler = CartReconciler(remote, lambda: SCOPE, probe=mock_probe)
        await reconciler.refresh()

        await reconciler.set_quantity("p1", 2)

        assert remote.deltas == [("p1", -3)]
        assert reconciler.quantity_of("p1") == 2

    @pytest.mark.asyncio
    async def test_remove_unknown_product_sends_nothing(self, mock_probe):
        """Removing a product not in the cart is a no-op."""
        remote = FakeRemoteCart()
        reconciler = CartReconciler(remote, lambda: SCOPE, probe=mock_probe)

        await reconciler.remove("ghost")

        assert remote.deltas == []

    @pytest.mark.asyncio
    async def test_every_mutation_is_followed_by_a_refresh(
        self, mock_gateway, mock_probe
    ):
        """The local cart is re-read after each delta."""
        reconciler = CartReconciler(mock_gateway, lambda: SCOPE, probe=mock_probe)

        await reconciler.add("p1", 3)

        mock_gateway.patch_item_delta.assert_awaited_once_with("p1", 3, SCOPE)
        mock_gateway.get_cart.assert_awaited_once_with(SCOPE)
        assert reconciler.quantity_of("p1") == 3
        assert reconciler.state.loading is False


class TestValidation:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("quantity", [0, -1])
    async def test_add_requires_positive_quantity(self, mock_gateway, quantity):
        """Zero and negative quantities are rejected before any call."""
        reconciler = CartReconciler(mock_gateway, lambda: SCOPE)

        with pytest.raises(InvalidQuantityError):
            await reconciler.add("p1", quantity)

        mock_gateway.patch_item_delta.assert_not_called()

    @pytest.mark.asyncio
    async def test_set_quantity_rejects_negative(self, mock_gateway):
        reconciler = CartReconciler(mock_gateway, lambda: SCOPE)

        with pytest.raises(InvalidQuantityError):
            await reconciler.set_quantity("p1", -1)


class TestErrors:
    @pytest.mark.asyncio
    async def test_refresh_failure_leaves_no_cart(self, mock_gateway, mock_probe):
        """A failing refresh is swallowed and leaves no cart."""
        reconciler = CartReconciler(mock_gateway, lambda: SCOPE, probe=mock_probe)
        await reconciler.refresh()
        mock_gateway.get_cart.side_effect = ApiError(500, "down")

        cart = await reconciler.refresh()

        assert cart is None
        assert reconciler.cart is None
        assert reconciler.state.loading is False
        mock_probe.cart_unavailable.assert_called_once()

    @pytest.mark.asyncio
    async def test_mutation_failure_propagates(self, mock_gateway, mock_probe):
        """Mutation errors reach the caller and loading is reset."""
        mock_gateway.patch_item_delta.side_effect = ApiError(409, "Out of stock")
        reconciler = CartReconciler(mock_gateway, lambda: SCOPE, probe=mock_probe)

        with pytest.raises(ApiError):
            await reconciler.add("p1", 1)

        assert reconciler.state.loading is False
        mock_gateway.get_cart.assert_not_called()
        mock_probe.mutation_failed.assert_called_once()


class TestCheckout:
    @pytest.mark.asyncio
    async def test_checkout_clears_local_cart(self, mock_gateway, mock_probe):
        """A successful checkout empties the local cart whatever the body."""
        reconciler = CartReconciler(mock_gateway, lambda: SCOPE, probe=mock_probe)
        await reconciler.refresh()
        proof = PaymentProof(filename="proof.png", content=b"img", content_type="image/png")

        result = await reconciler.checkout(proof)

        assert result.order_id == "o1"
        assert reconciler.cart is None
        assert reconciler.item_count == 0
        mock_gateway.checkout.assert_awaited_once_with(proof, SCOPE)
        mock_probe.checkout_completed.assert_called_once_with(
            order_id="o1", tenant_id="t1"
        )

    @pytest.mark.asyncio
    async def test_failed_checkout_keeps_cart(self, mock_gateway, mock_probe):
        reconciler = CartReconciler(mock_gateway, lambda: SCOPE, probe=mock_probe)
        await reconciler.refresh()
        mock_gateway.checkout.side_effect = ApiError(400, "Missing proof")

        with pytest.raises(ApiError):
            await reconciler.checkout(PaymentProof(filename="p", content=b""))

        assert reconciler.quantity_of("p1") == 3
        assert reconciler.state.loading is False


class TestScope:
    @pytest.mark.asyncio
    async def test_scope_is_read_on_every_call(self, mock_gateway):
        """Switching tenants between calls changes the scope sent."""
        scopes = iter([TenantScope.for_tenant("a"), TenantScope.for_tenant("b")])
        reconciler = CartReconciler(mock_gateway, lambda: next(scopes))

        await reconciler.refresh()
        await reconciler.refresh()

        assert [c.args[0].tenant_id for c in mock_gateway.get_cart.await_args_list] == [
            "a",
            "b",
        ]
