"""Domain-Oriented Observability for the bootstrap application layer."""

from bootstrap.application.observability.bootstrap_probe import (
    BootstrapProbe,
    DefaultBootstrapProbe,
)
from bootstrap.application.observability.render_probe import (
    DefaultRenderProbe,
    RenderProbe,
)

__all__ = [
    "BootstrapProbe",
    "DefaultBootstrapProbe",
    "DefaultRenderProbe",
    "RenderProbe",
]
