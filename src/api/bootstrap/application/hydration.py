"""Hydration transport: a snapshot handed over exactly once.

The render pass publishes one snapshot per page. The client takes the
token out of the slot and consumes it; after that the snapshot is gone, so
it cannot be replayed into already-hydrated stores.
"""

from __future__ import annotations

from bootstrap.domain.exceptions import (
    SnapshotAlreadyConsumedError,
    SnapshotAlreadyPublishedError,
)
from bootstrap.domain.snapshot import HydrationSnapshot


class SnapshotToken:
    """Ownership of a snapshot. ``consume`` succeeds once."""

    __slots__ = ("_snapshot",)

    def __init__(self, snapshot: HydrationSnapshot):
        self._snapshot: HydrationSnapshot | None = snapshot

    @property
    def consumed(self) -> bool:
        return self._snapshot is None

    def consume(self) -> HydrationSnapshot:
        """Take the snapshot.

        Raises:
            SnapshotAlreadyConsumedError: On every call after the first.
        """
        snapshot = self._snapshot
        if snapshot is None:
            raise SnapshotAlreadyConsumedError()
        self._snapshot = None
        return snapshot


class HydrationSlot:
    """Single-write, single-read holder of the page's snapshot token."""

    def __init__(self) -> None:
        self._token: SnapshotToken | None = None
        self._published = False

    @property
    def published(self) -> bool:
        return self._published

    def publish(self, snapshot: HydrationSnapshot) -> None:
        """Populate the slot.

        Raises:
            SnapshotAlreadyPublishedError: If the slot was ever populated.
        """
        if self._published:
            raise SnapshotAlreadyPublishedError()
        self._published = True
        self._token = SnapshotToken(snapshot)

    def take(self) -> SnapshotToken | None:
        """Remove and return the token; None when empty or already taken."""
        token, self._token = self._token, None
        return token


def get_ssr_bootstrap_payload(slot: HydrationSlot) -> HydrationSnapshot | None:
    """Consume the snapshot held by ``slot``, if any."""
    token = slot.take()
    if token is None:
        return None
    return token.consume()
