"""Carries the hydration snapshot inside the HTML page.

The snapshot is assigned to a single global in an inline script. Characters
that could close the script element or break JavaScript parsing are
escaped, so tenant-controlled strings cannot inject markup.
"""

from __future__ import annotations

import json
import re
from typing import Any

from pydantic import ValidationError

from bootstrap.domain.snapshot import HydrationSnapshot

GLOBAL_NAME = "__SHOPFRONT_SSR__"
MOUNT_POINT_ID = "root"

_UNSAFE_CHARACTERS = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}
_UNSAFE_PATTERN = re.compile("[<>&\u2028\u2029]")
_SNAPSHOT_SCRIPT = re.compile(
    r"<script>window\." + GLOBAL_NAME + r"=(.*?);</script>", re.DOTALL
)
_MOUNT_POINT = re.compile(
    r"<div\b[^>]*\bid\s*=\s*[\"']" + MOUNT_POINT_ID + r"[\"']", re.IGNORECASE
)


def safe_json_serialize(value: Any) -> str:
    """JSON text safe to place inside an inline ``<script>``."""
    raw = json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    return _UNSAFE_PATTERN.sub(lambda match: _UNSAFE_CHARACTERS[match.group(0)], raw)


def embed_snapshot(snapshot: HydrationSnapshot) -> str:
    payload = safe_json_serialize(snapshot.model_dump(mode="json"))
    return f"<script>window.{GLOBAL_NAME}={payload};</script>"


def extract_snapshot(html: str) -> HydrationSnapshot | None:
    """Read the snapshot back from a page.

    A page without one, or with one that does not parse as the current
    snapshot version, yields None: the client then starts cold.
    """
    match = _SNAPSHOT_SCRIPT.search(html)
    if match is None:
        return None
    try:
        return HydrationSnapshot.model_validate(json.loads(match.group(1)))
    except (ValueError, ValidationError):
        return None


def has_mount_point(html: str) -> bool:
    return _MOUNT_POINT.search(html) is not None
