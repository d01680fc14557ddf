"""Value objects for the session domain."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from shared_kernel.normalization import capitalize_words

CUSTOMER_ROLE = 2
SUPERADMIN_ROLE = 9


class UserKind(StrEnum):
    ADMIN = "admin"
    CUSTOMER = "customer"


def _role(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


@dataclass(frozen=True)
class UserIdentity:
    """The verified user behind the current session."""

    id: str
    name: str
    email: str
    kind: UserKind
    role: int | None = None
    phone: str | None = None

    @classmethod
    def from_api(cls, raw: Mapping[str, Any]) -> UserIdentity:
        """Build a user from the ``/user/me`` payload.

        Role 2 is a customer; every other role is an admin account. A
        missing, null or non-numeric role counts as role 0.
        """
        role = _role(raw.get("role"))
        is_customer = role == CUSTOMER_ROLE
        return cls(
            id=str(raw["id"]),
            name=capitalize_words(str(raw.get("name") or "")),
            email=str(raw.get("email") or ""),
            kind=UserKind.CUSTOMER if is_customer else UserKind.ADMIN,
            role=None if is_customer else role,
            phone=raw.get("phone") or None,
        )

    @property
    def is_customer(self) -> bool:
        return self.kind is UserKind.CUSTOMER

    @property
    def is_admin(self) -> bool:
        return self.kind is UserKind.ADMIN and (self.role or 0) >= 1

    @property
    def is_superadmin(self) -> bool:
        return self.kind is UserKind.ADMIN and self.role == SUPERADMIN_ROLE


@dataclass(frozen=True)
class AuthState:
    """Client-side auth state."""

    user: UserIdentity | None = None
    loading: bool = True
    billing_required: bool = False


@dataclass(frozen=True)
class AuthBootstrapState:
    """Auth state carried by the hydration snapshot.

    ``has_auth_cookie`` is a server-side hint that a session credential was
    present. It never proves a session; it only decides whether the client
    must verify one. No secret material is ever included.
    """

    user: UserIdentity | None = None
    loading: bool = True
    billing_required: bool = False
    has_auth_cookie: bool = False

    def to_auth_state(self) -> AuthState:
        return AuthState(
            user=self.user,
            loading=self.loading,
            billing_required=self.billing_required,
        )
