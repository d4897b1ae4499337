"""HTTP cache policy for content responses.

Admin dashboard traffic always gets ``no-store`` so editors see their own
writes immediately; public traffic gets a per-category shared-cache lifetime.
The admin classification here only selects cache headers.  It is not an
authorization check (see ``landsite.api.deps.require_admin``).
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from starlette.requests import Request
    from starlette.responses import Response

    from landsite.config import Settings

NO_STORE = "no-store, no-cache, must-revalidate"


class ContentCategory(StrEnum):
    """Content collections that share a cache policy and an API path."""

    PROJECTS = "projects"
    SERVICES = "services"
    IMAGES = "images"
    BANNERS = "banners"
    GALLERY = "gallery"
    PAGE_ASSETS = "page-assets"
    HOME_SLIDES = "home-slides"
    TESTIMONIALS = "testimonials"
    BLOGS = "blogs"
    LINK_MAPPINGS = "link-mappings"
    SEO_CONFIG = "seo-config"

    @property
    def api_path(self) -> str:
        return f"/api/{self.value}"


# Seconds a shared cache may serve a public response without revalidating.
CACHE_DURATIONS: dict[ContentCategory, int] = {
    ContentCategory.PROJECTS: 600,
    ContentCategory.SERVICES: 600,
    ContentCategory.IMAGES: 1800,
    ContentCategory.BANNERS: 600,
    ContentCategory.GALLERY: 1800,
    ContentCategory.PAGE_ASSETS: 600,
    ContentCategory.HOME_SLIDES: 600,
    ContentCategory.TESTIMONIALS: 300,
    ContentCategory.BLOGS: 600,
    ContentCategory.LINK_MAPPINGS: 600,
    ContentCategory.SEO_CONFIG: 600,
}


def public_cache_control(duration: int) -> str:
    return f"public, max-age={duration}, stale-while-revalidate={duration * 2}"


def cache_duration(category: ContentCategory, overrides: dict[str, int] | None = None) -> int:
    if overrides and category.value in overrides:
        return overrides[category.value]
    return CACHE_DURATIONS[category]


def cache_control_for(
    category: ContentCategory,
    is_admin: bool,
    overrides: dict[str, int] | None = None,
) -> str:
    """Return the ``Cache-Control`` value for *category*."""
    if is_admin:
        return NO_STORE
    return public_cache_control(cache_duration(category, overrides))


def is_admin_request(
    request: Request,
    *,
    admin_segment: str = "/admin",
    marker_header: str = "X-Admin-Request",
) -> bool:
    """Classify a request as coming from the admin dashboard.

    Any one of these is enough: the request path contains the admin segment,
    the ``Referer`` contains it, or the marker header is ``true``.
    """
    if admin_segment in request.url.path:
        return True

    referer = request.headers.get("referer", "")
    if admin_segment in referer:
        return True

    return request.headers.get(marker_header, "").strip().lower() == "true"


def apply_cache_headers(
    response: Response,
    request: Request,
    category: ContentCategory,
    settings: Settings,
) -> str:
    """Set ``Cache-Control`` on *response* and return the value used."""
    is_admin = is_admin_request(
        request,
        admin_segment=settings.admin_path_segment,
        marker_header=settings.admin_request_header,
    )
    value = cache_control_for(category, is_admin, settings.cache_duration_overrides)
    response.headers["Cache-Control"] = value
    return value
