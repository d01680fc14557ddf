"""Keyed cache of data-fetching results with a freshness window.

Used on both sides of the hydration boundary: the rendering pass fills a
cache and dehydrates it into the snapshot, the client hydrates its own cache
from that snapshot and then fetches through it. Cached values are kept in
their JSON form so a hydrated entry is indistinguishable from a fetched one.
"""

from __future__ import annotations

import time
from collections.abc import Awaitable, Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from shared_kernel.query_keys import QueryKey


@dataclass(frozen=True)
class CachedQuery:
    """A single cached query result."""

    key: QueryKey
    data: Any
    updated_at: float


class QueryCache:
    """In-memory query cache keyed by storefront query keys.

    Entries older than ``stale_seconds`` are stale: ``fetch`` calls the
    fetcher again for them. Concurrent fetches of the same key are not
    deduplicated.
    """

    def __init__(
        self,
        stale_seconds: float = 60.0,
        clock: Callable[[], float] = time.time,
    ):
        self._stale_seconds = stale_seconds
        self._clock = clock
        self._entries: dict[QueryKey, CachedQuery] = {}

    def __contains__(self, key: QueryKey) -> bool:
        return tuple(key) in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, key: QueryKey) -> Any | None:
        entry = self._entries.get(tuple(key))
        return entry.data if entry is not None else None

    def set(self, key: QueryKey, data: Any, updated_at: float | None = None) -> None:
        key = tuple(key)
        self._entries[key] = CachedQuery(
            key=key,
            data=data,
            updated_at=self._clock() if updated_at is None else updated_at,
        )

    def is_fresh(self, key: QueryKey) -> bool:
        entry = self._entries.get(tuple(key))
        if entry is None:
            return False
        return (self._clock() - entry.updated_at) < self._stale_seconds

    async def fetch(
        self,
        key: QueryKey,
        fetcher: Callable[[], Awaitable[Any]],
    ) -> Any:
        """Return fresh cached data for ``key``, or fetch and store it.

        Args:
            key: Query key built with StorefrontQueryKeys.
            fetcher: Coroutine factory returning JSON-compatible data.

        Returns:
            The cached or freshly fetched data.
        """
        if self.is_fresh(key):
            return self.get(key)
        data = await fetcher()
        self.set(key, data)
        return data

    def invalidate(self, key: QueryKey) -> None:
        self._entries.pop(tuple(key), None)

    def clear(self) -> None:
        self._entries.clear()

    def dehydrate(self) -> list[dict[str, Any]]:
        """Export all entries as JSON-compatible dictionaries."""
        return [
            {"key": list(entry.key), "data": entry.data, "updated_at": entry.updated_at}
            for entry in self._entries.values()
        ]

    def hydrate(self, entries: Iterable[Mapping[str, Any]]) -> int:
        """Load dehydrated entries, keeping their original timestamps.

        Existing entries with the same key are replaced.

        Returns:
            Number of entries loaded.
        """
        count = 0
        for entry in entries:
            self.set(
                tuple(entry["key"]),
                entry["data"],
                updated_at=float(entry["updated_at"]),
            )
            count += 1
        return count
