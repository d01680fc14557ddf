"""Unit tests for the storefront ApiClient using httpx.MockTransport."""

from __future__ import annotations

import json
from collections.abc import Callable
from unittest.mock import MagicMock

import httpx
import pytest

from shared_kernel.api_client import (
    ApiClient,
    ApiClientProbe,
    ApiError,
    SessionCredentials,
)
from shared_kernel.tenant_scope import TenantScope

BASE_URL = "http://api.test/api"


def make_client(
    handler: Callable[[httpx.Request], httpx.Response],
    credentials: SessionCredentials | None = None,
    probe: ApiClientProbe | None = None,
) -> ApiClient:
    http = httpx.AsyncClient(base_url=BASE_URL, transport=httpx.MockTransport(handler))
    return ApiClient(http, credentials=credentials, probe=probe)


@pytest.fixture
def mock_probe() -> MagicMock:
    return MagicMock(spec=ApiClientProbe)


class TestApiClientHeaders:
    @pytest.mark.asyncio
    async def test_attaches_tenant_scope_and_bearer_token(self):
        """Every call carries the scope it was given and the session token."""
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"ok": True})

        client = make_client(handler, credentials=SessionCredentials("tok"))

        body = await client.get("/cart", scope=TenantScope.for_tenant("t1"))

        assert body == {"ok": True}
        assert seen[0].headers["x-tenant-id"] == "t1"
        assert seen[0].headers["authorization"] == "Bearer tok"
        assert seen[0].url.path == "/api/cart"

    @pytest.mark.asyncio
    async def test_unscoped_call_sends_no_tenant_header(self):
        """Unscoped calls must not send an empty tenant header."""
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={})

        client = make_client(handler)

        await client.get("/public/plans", scope=TenantScope.none())

        assert "x-tenant-id" not in seen[0].headers
        assert "authorization" not in seen[0].headers

    @pytest.mark.asyncio
    async def test_extra_headers_and_json_body_are_sent(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(204)

        client = make_client(handler)

        body = await client.patch(
            "/cart/items",
            scope=TenantScope.for_tenant("t1"),
            json={"productId": "p1", "delta": -2},
        )

        assert body == {}
        assert seen[0].method == "PATCH"
        assert json.loads(seen[0].content) == {"productId": "p1", "delta": -2}


class TestApiClientErrors:
    @pytest.mark.asyncio
    async def test_error_status_raises_api_error_with_body_message(self, mock_probe):
        """The API's own message and field errors are kept."""
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                422, json={"message": "Invalid", "err": {"delta": ["required"]}}
            )

        client = make_client(handler, probe=mock_probe)

        with pytest.raises(ApiError) as exc_info:
            await client.patch("/cart/items", scope=TenantScope.for_tenant("t1"))

        assert exc_info.value.status_code == 422
        assert exc_info.value.message == "Invalid"
        assert exc_info.value.errors == {"delta": ["required"]}
        mock_probe.request_rejected.assert_called_once_with(
            method="PATCH", path="/cart/items", status_code=422, tenant_id="t1"
        )

    @pytest.mark.asyncio
    async def test_unauthorized_runs_hook_before_raising(self):
        """401 runs the unauthorized hook, then raises."""
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(401, json={"message": "nope"})

        client = make_client(handler)
        on_unauthorized = MagicMock()
        client.set_on_unauthorized(on_unauthorized)

        with pytest.raises(ApiError) as exc_info:
            await client.get("/user/me", scope=TenantScope.none())

        on_unauthorized.assert_called_once_with()
        assert exc_info.value.message == "Session expired"

    @pytest.mark.asyncio
    async def test_payment_required_runs_billing_hook(self):
        """402 flags billing before raising."""
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(402)

        client = make_client(handler)
        on_billing_required = MagicMock()
        client.set_on_billing_required(on_billing_required)

        with pytest.raises(ApiError) as exc_info:
            await client.get("/cart", scope=TenantScope.none())

        on_billing_required.assert_called_once_with()
        assert exc_info.value.status_code == 402

    @pytest.mark.asyncio
    async def test_transport_failure_raises_api_error_without_status(self, mock_probe):
        """Network errors surface as ApiError with no status."""
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = make_client(handler, probe=mock_probe)

        with pytest.raises(ApiError) as exc_info:
            await client.get("/cart", scope=TenantScope.none())

        assert exc_info.value.is_transport_error
        assert exc_info.value.is_server_error
        mock_probe.transport_failed.assert_called_once()

    @pytest.mark.asyncio
    async def test_malformed_body_raises_api_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, content=b"<html>oops</html>")

        client = make_client(handler)

        with pytest.raises(ApiError):
            await client.get("/cart", scope=TenantScope.none())

    @pytest.mark.asyncio
    async def test_json_null_body_is_none(self):
        """A literal null is valid JSON, not a malformed body."""
        client = make_client(lambda request: httpx.Response(200, content=b"null"))

        assert await client.post("/cart/checkout", scope=TenantScope.none()) is None


class TestSessionCredentials:
    def test_empty_token_is_no_token(self):
        """Blank cookie values do not count as a session."""
        credentials = SessionCredentials("")

        assert credentials.has_token is False
        assert credentials.as_headers() == {}

    def test_set_and_clear(self):
        credentials = SessionCredentials()
        credentials.set_token("abc")
        assert credentials.as_headers() == {"Authorization": "Bearer abc"}

        credentials.clear()
        assert credentials.token is None
