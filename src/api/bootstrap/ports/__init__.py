"""Bootstrap ports."""

from bootstrap.ports.renderer import DocumentRenderer, SitemapEntry

__all__ = ["DocumentRenderer", "SitemapEntry"]
