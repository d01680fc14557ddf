"""Cart gateway against the storefront API."""

from __future__ import annotations

from collections.abc import Callable

from ulid import ULID

from cart.domain.value_objects import Cart, CheckoutResult, PaymentProof
from shared_kernel.api_client import ApiClient
from shared_kernel.tenant_scope import TenantScope

IDEMPOTENCY_HEADER = "Idempotency-Key"


def _new_idempotency_key() -> str:
    return str(ULID())


class HttpCartGateway:
    """Implements CartGateway.

    ``GET /cart`` answers ``{"data": {...cart}}``; ``PATCH /cart/items``
    takes ``{"productId", "delta"}``; ``POST /cart/checkout`` takes the proof
    as the multipart field ``comprobante`` and answers ``{"data": {"order"}}``.
    Any other successful body still counts as a placed order with no known id.
    Each checkout carries a fresh idempotency key.
    """

    CART_PATH = "/cart"
    ITEMS_PATH = "/cart/items"
    CHECKOUT_PATH = "/cart/checkout"
    PROOF_FIELD = "comprobante"

    def __init__(
        self,
        client: ApiClient,
        idempotency_key_factory: Callable[[], str] = _new_idempotency_key,
    ):
        self._client = client
        self._new_key = idempotency_key_factory

    async def get_cart(self, scope: TenantScope) -> Cart | None:
        body = await self._client.get(self.CART_PATH, scope=scope)
        data = body.get("data") if isinstance(body, dict) else None
        if not isinstance(data, dict):
            return None
        return Cart.from_api(data)

    async def patch_item_delta(
        self, product_id: str, delta: int, scope: TenantScope
    ) -> None:
        await self._client.patch(
            self.ITEMS_PATH,
            scope=scope,
            json={"productId": product_id, "delta": delta},
        )

    async def checkout(self, proof: PaymentProof, scope: TenantScope) -> CheckoutResult:
        body = await self._client.post(
            self.CHECKOUT_PATH,
            scope=scope,
            files={
                self.PROOF_FIELD: (proof.filename, proof.content, proof.content_type)
            },
            headers={IDEMPOTENCY_HEADER: self._new_key()},
        )
        data = body.get("data") if isinstance(body, dict) else None
        order = data.get("order") if isinstance(data, dict) else None
        if isinstance(order, dict):
            order = order.get("id")
        return CheckoutResult(order_id=str(order) if order is not None else None)
