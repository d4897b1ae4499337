"""Slug generation and uniqueness resolution for blog post URLs."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    SlugExists = Callable[[str, str], Awaitable[bool]]

FALLBACK_PREFIX = "blog-"

# Anything that is not an ASCII word char, whitespace, hyphen, or Arabic letter.
_DISALLOWED_RE = re.compile(r"[^A-Za-z0-9_\s\u0600-\u06FF-]")
_SEPARATOR_RE = re.compile(r"[\s_]+")
_HYPHEN_RUN_RE = re.compile(r"-+")
_FALLBACK_RE = re.compile(r"^blog-[a-f0-9]{24}$", re.IGNORECASE)


def generate_slug(title: str) -> str:
    """Generate a URL-safe slug from a title, keeping Arabic letters.

    - Strip surrounding whitespace
    - Drop punctuation and symbols (Arabic block U+0600-U+06FF is kept)
    - Replace whitespace/underscore runs with a single hyphen
    - Collapse multiple hyphens
    - Strip leading/trailing hyphens

    Returns an empty string when nothing usable remains; callers then fall
    back to :func:`fallback_slug`.
    """
    text = title.strip()
    text = _DISALLOWED_RE.sub("", text)
    text = _SEPARATOR_RE.sub("-", text)
    text = _HYPHEN_RUN_RE.sub("-", text)
    return text.strip("-")


def fallback_slug(entity_id: str) -> str:
    """Identity-based slug used when a title yields no slug."""
    return f"{FALLBACK_PREFIX}{entity_id}"


def is_fallback_slug(slug: str | None) -> bool:
    """Return True if *slug* has the ``blog-<24 hex chars>`` placeholder shape."""
    if not slug:
        return False
    return _FALLBACK_RE.match(slug) is not None


def derive_slug(title: str, entity_id: str) -> tuple[str, bool]:
    """Return ``(candidate, auto_generated)`` for a title.

    ``auto_generated`` is True when the title produced nothing and the
    identity fallback was used instead.
    """
    slug = generate_slug(title)
    if slug:
        return slug, False
    return fallback_slug(entity_id), True


async def resolve_unique_slug(
    candidate: str,
    entity_id: str,
    exists_excluding_self: SlugExists,
) -> str:
    """Append ``-1``, ``-2``, ... to *candidate* until no other entity owns it.

    *exists_excluding_self* is called as ``(slug, entity_id)`` and must report
    whether any entity other than *entity_id* already uses ``slug``.  Errors
    raised by it propagate to the caller.
    """
    base = candidate or fallback_slug(entity_id)
    unique = base
    counter = 1
    while await exists_excluding_self(unique, entity_id):
        unique = f"{base}-{counter}"
        counter += 1
    return unique
