"""HTML shell and sitemap documents."""

from __future__ import annotations

from collections.abc import Sequence
from html import escape

from bootstrap.domain.seo import SeoPayload
from bootstrap.domain.snapshot import HydrationSnapshot
from bootstrap.infrastructure.html_channel import (
    MOUNT_POINT_ID,
    embed_snapshot,
    safe_json_serialize,
)
from bootstrap.ports.renderer import SitemapEntry
from tenancy.domain.landing import StoreNotFoundFallback

SITEMAP_NAMESPACE = "http://www.sitemaps.org/schemas/sitemap/0.9"


def _meta(attribute: str, key: str, content: str | None) -> str:
    if not content:
        return ""
    return f'<meta {attribute}="{key}" content="{escape(content)}" />'


class HtmlDocumentRenderer:
    """Implements DocumentRenderer with plain string templates.

    The page body holds only the mount point; the storefront UI is rendered
    by the client scripts.
    """

    def __init__(
        self,
        scripts: Sequence[str] = (),
        styles: Sequence[str] = (),
        lang: str = "es",
    ):
        self._scripts = tuple(scripts)
        self._styles = tuple(styles)
        self._lang = lang

    def render_page(
        self,
        seo: SeoPayload,
        snapshot: HydrationSnapshot,
        *,
        favicon: str | None = None,
        fallback: StoreNotFoundFallback | None = None,
    ) -> str:
        head = [
            '<meta charset="UTF-8" />',
            '<meta name="viewport" content="width=device-width, initial-scale=1.0" />',
            f"<title>{escape(seo.title)}</title>",
            _meta("name", "description", seo.description),
            _meta("name", "robots", seo.robots),
            f'<link rel="canonical" href="{escape(seo.canonical_url)}" />',
            _meta("property", "og:type", seo.og.type),
            _meta("property", "og:site_name", seo.og.site_name),
            _meta("property", "og:title", seo.og.title),
            _meta("property", "og:description", seo.og.description),
            _meta("property", "og:url", seo.og.url),
            _meta("property", "og:image", seo.og.image),
            _meta("name", "twitter:card", seo.twitter.card),
            _meta("name", "twitter:title", seo.twitter.title),
            _meta("name", "twitter:description", seo.twitter.description),
            _meta("name", "twitter:image", seo.twitter.image),
        ]
        if favicon:
            head.append(f'<link rel="icon" href="{escape(favicon)}" />')
        if fallback is not None:
            head.append(_meta("http-equiv", "refresh", fallback.refresh_directive))
        head.extend(
            f'<link rel="stylesheet" href="{escape(href)}" />' for href in self._styles
        )
        if seo.json_ld:
            head.append(
                '<script type="application/ld+json">'
                f"{safe_json_serialize(seo.json_ld)}</script>"
            )

        scripts = "".join(
            f'<script type="module" src="{escape(src)}"></script>'
            for src in self._scripts
        )
        head_html = "\n    ".join(part for part in head if part)
        return (
            "<!doctype html>\n"
            f'<html lang="{escape(self._lang)}">\n'
            "  <head>\n"
            f"    {head_html}\n"
            "  </head>\n"
            "  <body>\n"
            f'    <div id="{MOUNT_POINT_ID}"></div>\n'
            f"    {embed_snapshot(snapshot)}\n"
            f"    {scripts}\n"
            "  </body>\n"
            "</html>\n"
        )

    def render_sitemap(self, entries: Sequence[SitemapEntry]) -> str:
        urls = []
        for entry in entries:
            lastmod = (
                f"<lastmod>{escape(entry.lastmod)}</lastmod>" if entry.lastmod else ""
            )
            urls.append(f"  <url><loc>{escape(entry.loc)}</loc>{lastmod}</url>")
        body = "\n".join(urls)
        return (
            '<?xml version="1.0" encoding="UTF-8"?>\n'
            f'<urlset xmlns="{SITEMAP_NAMESPACE}">\n'
            + (f"{body}\n" if body else "")
            + "</urlset>\n"
        )
