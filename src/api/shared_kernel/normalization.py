"""Normalization of names into URL slugs and display names."""

from __future__ import annotations

import re
import unicodedata

_WHITESPACE_RUN = re.compile(r"\s+")
_NON_SLUG_CHARS = re.compile(r"[^a-z0-9-]")
_HYPHEN_RUN = re.compile(r"-+")


def slugify(value: str) -> str:
    """Build a URL slug from a business name.

    Lower-cases, strips accents, turns whitespace runs into a single hyphen,
    drops every character outside ``[a-z0-9-]`` and collapses repeated
    hyphens. ``"la  tienda feliz"`` becomes ``"la-tienda-feliz"``.
    """
    decomposed = unicodedata.normalize("NFD", value.strip().lower())
    ascii_only = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    slug = _WHITESPACE_RUN.sub("-", ascii_only)
    slug = _NON_SLUG_CHARS.sub("", slug)
    slug = _HYPHEN_RUN.sub("-", slug)
    return slug.strip("-")


def capitalize_words(value: str) -> str:
    """Capitalize every whitespace-separated word, lower-casing the rest.

    ``"la  tienda feliz"`` becomes ``"La Tienda Feliz"``.
    """
    return " ".join(word.capitalize() for word in value.split())
