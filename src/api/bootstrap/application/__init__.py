"""Bootstrap application layer."""

from bootstrap.application.coordinator import BootstrapCoordinator
from bootstrap.application.hydration import (
    HydrationSlot,
    SnapshotToken,
    get_ssr_bootstrap_payload,
)
from bootstrap.application.plan import BootstrapPath, BootstrapPlan
from bootstrap.application.render_service import (
    RenderRequest,
    RenderResult,
    RenderService,
)

__all__ = [
    "BootstrapCoordinator",
    "BootstrapPath",
    "BootstrapPlan",
    "HydrationSlot",
    "RenderRequest",
    "RenderResult",
    "RenderService",
    "SnapshotToken",
    "get_ssr_bootstrap_payload",
]
