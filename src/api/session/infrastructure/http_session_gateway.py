"""Session gateway against the storefront API."""

from __future__ import annotations

from typing import Any

from session.domain.value_objects import UserIdentity, UserKind
from session.ports.exceptions import AuthenticationError
from shared_kernel.api_client import ApiClient
from shared_kernel.tenant_scope import TenantScope

_LOGIN_PATHS = {
    UserKind.CUSTOMER: "/public/login",
    UserKind.ADMIN: "/public/admin/login",
}


class HttpSessionGateway:
    """Implements SessionGateway.

    ``GET /user/me`` answers ``{"result": {"data": {...}}}``. Customer login
    returns its token under ``result.data.token``; admin login under
    ``data.token`` or a top-level ``token``.
    """

    ME_PATH = "/user/me"

    def __init__(self, client: ApiClient):
        self._client = client

    async def fetch_current_user(self, scope: TenantScope) -> UserIdentity | None:
        body = await self._client.get(self.ME_PATH, scope=scope)
        data = _dig(body, "result", "data")
        if not isinstance(data, dict) or "id" not in data:
            return None
        return UserIdentity.from_api(data)

    async def login(
        self,
        kind: UserKind,
        email: str,
        password: str,
        scope: TenantScope,
    ) -> str:
        body = await self._client.post(
            _LOGIN_PATHS[kind],
            scope=scope,
            json={"email": email, "password": password},
        )
        if kind is UserKind.CUSTOMER:
            token = _dig(body, "result", "data", "token")
        else:
            token = _dig(body, "data", "token") or _dig(body, "token")
        if not token:
            raise AuthenticationError("No token received")
        return str(token)


def _dig(body: Any, *path: str) -> Any:
    current = body
    for key in path:
        if not isinstance(current, dict):
            return None
        current = current.get(key)
    return current
