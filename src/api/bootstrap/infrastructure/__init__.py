"""Bootstrap infrastructure adapters."""

from bootstrap.infrastructure.html_channel import (
    embed_snapshot,
    extract_snapshot,
    has_mount_point,
    safe_json_serialize,
)
from bootstrap.infrastructure.html_document_renderer import HtmlDocumentRenderer

__all__ = [
    "HtmlDocumentRenderer",
    "embed_snapshot",
    "extract_snapshot",
    "has_mount_point",
    "safe_json_serialize",
]
