"""Post-write cache invalidation.

After a successful content mutation the API marks the category's list/detail
path, and any image the document references, as stale.  Invalidation is a
side effect of a write that already committed, so failures are logged and
swallowed rather than turned into request errors.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING, Protocol
from urllib.parse import urlsplit

import httpx

if TYPE_CHECKING:
    from landsite.config import Settings
    from landsite.services.cache_policy import ContentCategory

logger = logging.getLogger(__name__)

DEFAULT_IMAGE_PREFIX = "/api/images/"


class Revalidator(Protocol):
    """Path revalidation primitive provided by the caching layer."""

    async def revalidate(self, path: str) -> None: ...


class MemoryRevalidator:
    """Keeps a per-path version counter bumped on every revalidation.

    ``stale_paths`` only remembers the most recent *history* revalidations;
    the counters cover every path ever seen.
    """

    def __init__(self, history: int = 1000) -> None:
        self._versions: dict[str, int] = {}
        self.stale_paths: deque[str] = deque(maxlen=history)

    async def revalidate(self, path: str) -> None:
        self._versions[path] = self._versions.get(path, 0) + 1
        self.stale_paths.append(path)

    def version(self, path: str) -> int:
        return self._versions.get(path, 0)


class HttpRevalidator:
    """Forwards revalidation to an external endpoint (CDN purge hook, frontend ISR)."""

    def __init__(self, url: str, token: str = "", timeout: float = 5.0) -> None:
        self.url = url
        self.token = token
        self.timeout = timeout

    async def revalidate(self, path: str) -> None:
        headers = {"Authorization": f"Bearer {self.token}"} if self.token else {}
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            resp = await client.post(self.url, json={"path": path}, headers=headers)
            resp.raise_for_status()


def create_revalidator(settings: Settings) -> Revalidator:
    """Pick the revalidation backend from settings."""
    if settings.revalidate_url:
        return HttpRevalidator(
            settings.revalidate_url,
            token=settings.revalidate_token,
            timeout=settings.revalidate_timeout_seconds,
        )
    return MemoryRevalidator()


def normalize_image_path(image_ref: str, image_prefix: str = DEFAULT_IMAGE_PREFIX) -> str:
    """Turn an image reference into the path it is served from.

    Absolute URLs contribute their path, path-shaped references are kept, and
    bare identifiers are placed under the image route.
    """
    path = image_ref
    try:
        parts = urlsplit(image_ref)
    except ValueError:
        parts = None
    if parts is not None and parts.scheme in ("http", "https"):
        # A bare origin such as "https://cdn.example.com" is its root path.
        path = parts.path or "/"
    if not path.startswith("/"):
        path = f"{image_prefix.rstrip('/')}/{path}"
    return path


class Invalidator:
    """Marks cached content stale after writes."""

    def __init__(self, revalidator: Revalidator, image_prefix: str = DEFAULT_IMAGE_PREFIX) -> None:
        self.revalidator = revalidator
        self.image_prefix = image_prefix

    async def _revalidate(self, path: str) -> bool:
        try:
            await self.revalidator.revalidate(path)
        except Exception as exc:
            logger.error("Cache invalidation failed for %s: %s", path, exc)
            return False
        logger.debug("Invalidated %s", path)
        return True

    async def invalidate(self, category: ContentCategory) -> str:
        """Mark a category's API responses stale. Returns the path signalled."""
        path = category.api_path
        await self._revalidate(path)
        return path

    async def invalidate_image(self, image_ref: str | None) -> str | None:
        """Mark a referenced image stale. No-op for empty references."""
        if not image_ref:
            return None
        path = normalize_image_path(image_ref, self.image_prefix)
        await self._revalidate(path)
        return path

    async def invalidate_images(self, *image_refs: str | None) -> None:
        """Invalidate each distinct non-empty reference once."""
        seen: set[str] = set()
        for ref in image_refs:
            if ref and ref not in seen:
                seen.add(ref)
                await self.invalidate_image(ref)
