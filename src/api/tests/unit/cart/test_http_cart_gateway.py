"""Unit tests for HttpCartGateway."""

from __future__ import annotations

import json
from collections.abc import Callable

import httpx
import pytest

from cart.application.reconciler import CartReconciler
from cart.domain.value_objects import PaymentProof
from cart.infrastructure.http_cart_gateway import HttpCartGateway
from shared_kernel.api_client import ApiClient, ApiError
from shared_kernel.tenant_scope import TenantScope

SCOPE = TenantScope.for_tenant("t1")


def make_gateway(
    handler: Callable[[httpx.Request], httpx.Response],
) -> HttpCartGateway:
    http = httpx.AsyncClient(
        base_url="http://api.test/api", transport=httpx.MockTransport(handler)
    )
    return HttpCartGateway(ApiClient(http), idempotency_key_factory=lambda: "key-1")


class TestGetCart:
    @pytest.mark.asyncio
    async def test_reads_cart_from_data(self):
        gateway = make_gateway(
            lambda request: httpx.Response(
                200, json={"data": {"items": [{"productId": "p1", "quantity": 4}]}}
            )
        )

        cart = await gateway.get_cart(SCOPE)

        assert cart.quantity_of("p1") == 4

    @pytest.mark.asyncio
    async def test_missing_cart_is_none(self):
        gateway = make_gateway(lambda request: httpx.Response(200, json={"data": None}))

        assert await gateway.get_cart(SCOPE) is None


class TestPatchItemDelta:
    @pytest.mark.asyncio
    async def test_sends_signed_delta(self):
        """Quantities change by delta, never by absolute value."""
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"data": {}})

        await make_gateway(handler).patch_item_delta("p1", -2, SCOPE)

        assert seen[0].method == "PATCH"
        assert seen[0].url.path == "/api/cart/items"
        assert seen[0].headers["x-tenant-id"] == "t1"
        assert json.loads(seen[0].content) == {"productId": "p1", "delta": -2}


class TestCheckout:
    @pytest.mark.asyncio
    async def test_sends_proof_as_multipart_with_idempotency_key(self):
        """The payment proof goes as multipart field comprobante."""
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(201, json={"data": {"order": {"id": 42}}})

        proof = PaymentProof(filename="proof.png", content=b"PNGDATA", content_type="image/png")

        result = await make_gateway(handler).checkout(proof, SCOPE)

        request = seen[0]
        assert request.url.path == "/api/cart/checkout"
        assert request.headers["idempotency-key"] == "key-1"
        assert request.headers["content-type"].startswith("multipart/form-data")
        assert b'name="comprobante"' in request.content
        assert b'filename="proof.png"' in request.content
        assert b"PNGDATA" in request.content
        assert result.order_id == "42"

    @pytest.mark.asyncio
    async def test_each_checkout_gets_a_fresh_key(self):
        """Retried checkouts are distinct attempts."""
        seen: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request.headers["idempotency-key"])
            return httpx.Response(200, json={"data": {"order": "o1"}})

        http = httpx.AsyncClient(
            base_url="http://api.test/api", transport=httpx.MockTransport(handler)
        )
        gateway = HttpCartGateway(ApiClient(http))
        proof = PaymentProof(filename="p.png", content=b"x")

        first = await gateway.checkout(proof, SCOPE)
        await gateway.checkout(proof, SCOPE)

        assert first.order_id == "o1"
        assert len(set(seen)) == 2

    @pytest.mark.asyncio
    async def test_rejected_checkout_raises(self):
        gateway = make_gateway(
            lambda request: httpx.Response(400, json={"message": "Proof required"})
        )

        with pytest.raises(ApiError, match="Proof required"):
            await gateway.checkout(PaymentProof(filename="p", content=b""), SCOPE)


class TestCheckoutThroughReconciler:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [b"null", b"[]", b'"ok"', b"{}"])
    async def test_any_successful_body_clears_the_cart(self, body):
        """A 2xx checkout empties the local cart whatever JSON it answers."""

        def handler(request: httpx.Request) -> httpx.Response:
            if request.method == "GET":
                return httpx.Response(
                    200, json={"data": {"items": [{"productId": "p1", "quantity": 2}]}}
                )
            return httpx.Response(200, content=body)

        reconciler = CartReconciler(make_gateway(handler), lambda: SCOPE)
        await reconciler.refresh()
        assert reconciler.quantity_of("p1") == 2

        result = await reconciler.checkout(PaymentProof(filename="p.png", content=b"x"))

        assert result.order_id is None
        assert reconciler.cart is None
        assert reconciler.state.loading is False
