"""Bootstrap domain layer."""

from bootstrap.domain.exceptions import (
    BootstrapAlreadyStartedError,
    MountPointMissingError,
    SnapshotAlreadyConsumedError,
    SnapshotAlreadyPublishedError,
)
from bootstrap.domain.request_host import RequestHost
from bootstrap.domain.routes import (
    RouteKind,
    RouteMatch,
    classify_route,
    should_bypass_render,
)
from bootstrap.domain.seo import SeoPayload, build_seo
from bootstrap.domain.snapshot import (
    SNAPSHOT_VERSION,
    DehydratedQuery,
    HydrationSnapshot,
)

__all__ = [
    "SNAPSHOT_VERSION",
    "BootstrapAlreadyStartedError",
    "DehydratedQuery",
    "HydrationSnapshot",
    "MountPointMissingError",
    "RequestHost",
    "RouteKind",
    "RouteMatch",
    "SeoPayload",
    "SnapshotAlreadyConsumedError",
    "SnapshotAlreadyPublishedError",
    "build_seo",
    "classify_route",
    "should_bypass_render",
]
