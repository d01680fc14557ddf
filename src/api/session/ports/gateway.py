"""Port for the remote session endpoints."""

from __future__ import annotations

from typing import Protocol

from session.domain.value_objects import UserIdentity, UserKind
from shared_kernel.tenant_scope import TenantScope


class SessionGateway(Protocol):
    """Remote session operations. Failures surface as ApiError."""

    async def fetch_current_user(self, scope: TenantScope) -> UserIdentity | None:
        """Resolve the current credentials to a user (the verifying round trip)."""
        ...

    async def login(
        self,
        kind: UserKind,
        email: str,
        password: str,
        scope: TenantScope,
    ) -> str:
        """Exchange credentials for a bearer token.

        Raises:
            AuthenticationError: If no token is returned.
        """
        ...
