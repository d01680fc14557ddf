"""Port for turning render results into documents."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from bootstrap.domain.seo import SeoPayload
from bootstrap.domain.snapshot import HydrationSnapshot
from tenancy.domain.landing import StoreNotFoundFallback


@dataclass(frozen=True)
class SitemapEntry:
    loc: str
    lastmod: str | None = None


class DocumentRenderer(Protocol):
    """Serializes rendered pages and sitemaps."""

    def render_page(
        self,
        seo: SeoPayload,
        snapshot: HydrationSnapshot,
        *,
        favicon: str | None = None,
        fallback: StoreNotFoundFallback | None = None,
    ) -> str:
        """Render the HTML shell: head metadata, mount point and snapshot."""
        ...

    def render_sitemap(self, entries: Sequence[SitemapEntry]) -> str:
        """Render a sitemap ``urlset`` document."""
        ...
