"""Hydration snapshot: the bootstrap state computed by one render pass."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from bootstrap.domain.routes import RouteKind
from bootstrap.domain.seo import SeoPayload
from session.domain.value_objects import AuthBootstrapState
from shared_kernel.query_keys import QueryKey
from tenancy.domain.value_objects import TenantResolutionState

SNAPSHOT_VERSION = 1


class DehydratedQuery(BaseModel):
    """One prefetched query result, keyed like the client's fetch layer."""

    model_config = ConfigDict(frozen=True)

    key: list[str | None]
    data: Any = None
    updated_at: float

    @property
    def query_key(self) -> QueryKey:
        return tuple(self.key)


class HydrationSnapshot(BaseModel):
    """Opaque, versioned bundle handed from the render pass to the client.

    Carries no secret material: the auth state only says whether a session
    cookie was present, never who the user is.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    version: Literal[1] = SNAPSHOT_VERSION
    route_kind: RouteKind
    tenant_state: TenantResolutionState
    auth_state: AuthBootstrapState
    queries: list[DehydratedQuery] = Field(default_factory=list)
    seo: SeoPayload | None = None

    @property
    def is_spa_fallback(self) -> bool:
        return self.route_kind is RouteKind.SPA

    def dehydrated_queries(self) -> list[dict[str, Any]]:
        """Queries in the form accepted by ``QueryCache.hydrate``."""
        return [query.model_dump() for query in self.queries]
