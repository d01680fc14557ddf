"""HTTP client for the remote storefront API.

Every call takes an explicit TenantScope. Session credentials are attached
when present. Error statuses are raised as ApiError after the registered
unauthorized / billing-required hooks have run.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any

import httpx

from shared_kernel.api_client.credentials import SessionCredentials
from shared_kernel.api_client.observability import DefaultApiClientProbe
from shared_kernel.tenant_scope import TenantScope

if TYPE_CHECKING:
    from shared_kernel.api_client.observability import ApiClientProbe


_MALFORMED = object()

_STATUS_MESSAGES = {
    401: "Session expired",
    402: "Subscription required",
    403: "Access denied",
}


class ApiError(Exception):
    """Raised when the storefront API rejects a request or cannot be reached.

    Attributes:
        status_code: HTTP status, or None when no response was received.
        message: Human readable message from the API (or a default one).
        errors: Field errors reported by the API, if any.
    """

    def __init__(
        self,
        status_code: int | None,
        message: str,
        errors: Mapping[str, Any] | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.errors = dict(errors) if errors else {}

    @property
    def is_transport_error(self) -> bool:
        return self.status_code is None

    @property
    def is_server_error(self) -> bool:
        return self.status_code is None or self.status_code >= 500


class ApiClient:
    """Thin wrapper around ``httpx.AsyncClient`` for storefront API calls.

    The underlying ``httpx.AsyncClient`` is owned by the caller, which is
    responsible for its base URL, timeout and lifetime.
    """

    def __init__(
        self,
        http: httpx.AsyncClient,
        credentials: SessionCredentials | None = None,
        probe: ApiClientProbe | None = None,
    ):
        self._http = http
        self._credentials = credentials or SessionCredentials()
        self._probe = probe or DefaultApiClientProbe()
        self._on_unauthorized: Callable[[], None] | None = None
        self._on_billing_required: Callable[[], None] | None = None

    @property
    def credentials(self) -> SessionCredentials:
        return self._credentials

    def set_on_unauthorized(self, callback: Callable[[], None] | None) -> None:
        self._on_unauthorized = callback

    def set_on_billing_required(self, callback: Callable[[], None] | None) -> None:
        self._on_billing_required = callback

    async def get(
        self,
        path: str,
        *,
        scope: TenantScope,
        params: Mapping[str, str] | None = None,
    ) -> Any:
        return await self._send("GET", path, scope=scope, params=params)

    async def post(
        self,
        path: str,
        *,
        scope: TenantScope,
        json: Any = None,
        files: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        return await self._send(
            "POST", path, scope=scope, json=json, files=files, headers=headers
        )

    async def patch(self, path: str, *, scope: TenantScope, json: Any = None) -> Any:
        return await self._send("PATCH", path, scope=scope, json=json)

    async def _send(
        self,
        method: str,
        path: str,
        *,
        scope: TenantScope,
        params: Mapping[str, str] | None = None,
        json: Any = None,
        files: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        request_headers = {
            **scope.as_headers(),
            **self._credentials.as_headers(),
            **(headers or {}),
        }
        try:
            response = await self._http.request(
                method,
                path,
                params=params,
                json=json,
                files=files,
                headers=request_headers,
            )
        except httpx.HTTPError as e:
            self._probe.transport_failed(method=method, path=path, error=e)
            raise ApiError(None, f"Request to {path} failed: {e}") from e

        return self._handle_response(method, path, scope, response)

    def _handle_response(
        self,
        method: str,
        path: str,
        scope: TenantScope,
        response: httpx.Response,
    ) -> Any:
        status_code = response.status_code

        if status_code == 401 and self._on_unauthorized is not None:
            self._on_unauthorized()
        if status_code == 402 and self._on_billing_required is not None:
            self._on_billing_required()

        if status_code >= 400:
            self._probe.request_rejected(
                method=method,
                path=path,
                status_code=status_code,
                tenant_id=scope.tenant_id,
            )
            if status_code in _STATUS_MESSAGES:
                raise ApiError(status_code, _STATUS_MESSAGES[status_code])
            body = _safe_json(response)
            message = "Server error"
            errors = None
            if isinstance(body, dict):
                message = body.get("message") or message
                errors = body.get("err") if isinstance(body.get("err"), dict) else None
            raise ApiError(status_code, message, errors)

        if status_code == 204 or not response.content:
            return {}
        body = _safe_json(response)
        if body is _MALFORMED:
            raise ApiError(status_code, f"Malformed response body from {path}")
        return body


def _safe_json(response: httpx.Response) -> Any:
    """Decoded body, or ``_MALFORMED`` when it is not JSON. A JSON null is None."""
    try:
        return response.json()
    except ValueError:
        return _MALFORMED
