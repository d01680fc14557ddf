"""Domain exceptions for the bootstrap context."""

from __future__ import annotations


class SnapshotAlreadyConsumedError(RuntimeError):
    """Raised when a hydration snapshot is read a second time."""

    def __init__(self) -> None:
        super().__init__("Hydration snapshot was already consumed")


class SnapshotAlreadyPublishedError(RuntimeError):
    """Raised when a hydration slot is populated a second time."""

    def __init__(self) -> None:
        super().__init__("Hydration slot was already populated")


class MountPointMissingError(RuntimeError):
    """Raised when the page has no element to mount the storefront on."""

    def __init__(self, element_id: str = "root"):
        super().__init__(f"Mount point #{element_id} not found")
        self.element_id = element_id


class BootstrapAlreadyStartedError(RuntimeError):
    """Raised when a bootstrap coordinator is run more than once."""

    def __init__(self) -> None:
        super().__init__("Bootstrap already ran for this page")
