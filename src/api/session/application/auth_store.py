"""Client-side auth state store."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import replace

from session.application.observability import (
    AuthHydrationProbe,
    DefaultAuthHydrationProbe,
)
from session.domain.value_objects import (
    AuthBootstrapState,
    AuthState,
    UserIdentity,
    UserKind,
)
from session.ports.exceptions import AuthenticationError
from session.ports.gateway import SessionGateway
from shared_kernel.api_client import ApiError, SessionCredentials
from shared_kernel.tenant_scope import TenantScope


class AuthStore:
    """Holds the verified user and turns credentials into session state.

    Hydration is split into ``verify_session`` (the round trip) and
    ``apply_session`` / ``reject_session`` (the state write) so that a
    bootstrap can drop a result that arrives after it was abandoned.
    """

    def __init__(
        self,
        gateway: SessionGateway,
        credentials: SessionCredentials,
        probe: AuthHydrationProbe | None = None,
    ):
        self._gateway = gateway
        self._credentials = credentials
        self._probe = probe or DefaultAuthHydrationProbe()
        self._state = AuthState()

    @property
    def state(self) -> AuthState:
        return self._state

    @property
    def user(self) -> UserIdentity | None:
        return self._state.user

    @property
    def has_credentials(self) -> bool:
        """Whether a session token is held. Not proof of a session."""
        return self._credentials.has_token

    def initialize_from_snapshot(self, auth_state: AuthBootstrapState) -> None:
        """Seed the store with the snapshot's auth state (minus the cookie hint)."""
        self._state = auth_state.to_auth_state()

    def mark_loaded(self) -> None:
        """Trust the current state as-is and stop loading."""
        self._state = replace(self._state, loading=False)

    async def verify_session(self, scope: TenantScope) -> UserIdentity | None:
        """Perform the verifying round trip, without touching state.

        Returns:
            The verified user, or None when there is no credential.

        Raises:
            ApiError: If the round trip fails.
        """
        if not self._credentials.has_token:
            return None
        return await self._gateway.fetch_current_user(scope)

    def apply_session(self, user: UserIdentity | None) -> None:
        if user is None:
            self._probe.session_absent()
        else:
            self._probe.session_verified(user_id=user.id, kind=user.kind.value)
        self._state = replace(self._state, user=user, loading=False)

    def reject_session(self, error: Exception) -> None:
        self._probe.session_verification_failed(error=error)
        self.logout()
        self._state = replace(self._state, loading=False)

    async def hydrate(
        self,
        scope: TenantScope,
        is_current: Callable[[], bool] = lambda: True,
    ) -> UserIdentity | None:
        """Verify the session and apply the outcome.

        Failures are absorbed: the session is dropped and loading ends.

        Args:
            scope: Tenant scope of the verifying round trip.
            is_current: Checked once the round trip returns. When it answers
                False the outcome is dropped and the state is left untouched.

        Returns:
            The verified user, or None when there is none or the outcome
            was dropped.
        """
        try:
            user = await self.verify_session(scope)
        except ApiError as e:
            if is_current():
                self.reject_session(e)
            return None
        if not is_current():
            return None
        self.apply_session(user)
        return user

    async def login_customer(
        self, email: str, password: str, scope: TenantScope
    ) -> UserIdentity:
        return await self._login(UserKind.CUSTOMER, email, password, scope)

    async def login_admin(
        self, email: str, password: str, scope: TenantScope
    ) -> UserIdentity:
        return await self._login(UserKind.ADMIN, email, password, scope)

    async def _login(
        self,
        kind: UserKind,
        email: str,
        password: str,
        scope: TenantScope,
    ) -> UserIdentity:
        try:
            token = await self._gateway.login(kind, email, password, scope)
            self._credentials.set_token(token)
            user = await self._gateway.fetch_current_user(scope)
            if user is None:
                raise AuthenticationError("Could not load the logged in user")
        except (ApiError, AuthenticationError) as e:
            self._probe.login_failed(kind=kind.value, error=e)
            raise

        self._probe.login_succeeded(user_id=user.id, kind=user.kind.value)
        self._state = replace(self._state, user=user, loading=False)
        return user

    def logout(self) -> None:
        self._credentials.clear()
        self._state = replace(self._state, user=None)
        self._probe.logged_out()

    def set_billing_required(self, value: bool = True) -> None:
        if value and not self._state.billing_required:
            self._probe.billing_required_flagged()
        self._state = replace(self._state, billing_required=value)
