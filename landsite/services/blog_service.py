"""Blog service: CRUD with slug assignment."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from urllib.parse import quote

from sqlalchemy.exc import IntegrityError

from landsite.exceptions import SlugConflictError
from landsite.models.base import new_object_id
from landsite.models.blog import BlogPost
from landsite.schemas.blog import BlogResponse, ManualSeo, SeoMetadata
from landsite.services.slug_service import derive_slug, generate_slug, resolve_unique_slug

if TYPE_CHECKING:
    from landsite.repositories.blog import BlogRepository
    from landsite.schemas.blog import BlogCreate, BlogUpdate

logger = logging.getLogger(__name__)

# The in-app uniqueness loop only avoids the obvious collision; the unique
# index on blog_posts.slug is what actually enforces it.  A concurrent writer
# can still win the race, so resolution is retried a few times.
MAX_SLUG_ATTEMPTS = 3

DESCRIPTION_LIMIT = 160


def build_blog_url(site_url: str, slug: str) -> str:
    """Public URL of a blog post."""
    clean_slug = slug.lstrip("/")
    return f"{site_url.rstrip('/')}/blog/{quote(clean_slug, safe='')}"


def _summarize(text: str, limit: int = DESCRIPTION_LIMIT) -> str:
    collapsed = " ".join(text.split())
    if len(collapsed) <= limit:
        return collapsed
    return collapsed[:limit].rsplit(" ", 1)[0].rstrip(" ,.;:") + "…"


def resolve_seo(post: BlogPost, url: str) -> SeoMetadata:
    """Merge editor overrides, stored meta fields and generated fallbacks.

    Precedence per field: ``manual_seo`` value, then the ``meta_*`` column,
    then something derived from the post itself.
    """
    manual = ManualSeo.model_validate(post.manual_seo or {})
    return SeoMetadata(
        title=manual.title or post.meta_title or post.title,
        description=(
            manual.description
            or post.meta_description
            or post.excerpt
            or _summarize(post.content)
        ),
        keywords=manual.keywords or list(post.meta_keywords or []),
        canonical_url=manual.canonical_url or url,
        og_image=manual.og_image or post.image,
        no_index=manual.no_index,
        no_follow=manual.no_follow,
    )


def to_response(post: BlogPost, site_url: str) -> BlogResponse:
    response = BlogResponse.model_validate(post)
    response.url = build_blog_url(site_url, post.slug)
    response.seo = resolve_seo(post, response.url)
    return response


def _slug_candidate(explicit: str | None, title: str, blog_id: str) -> tuple[str, bool]:
    """Pick the slug base: explicit slug if it survives slugification, else the title."""
    if explicit:
        slug = generate_slug(explicit)
        if slug:
            return slug, False
    return derive_slug(title, blog_id)


async def create_blog(repo: BlogRepository, body: BlogCreate) -> BlogPost:
    """Create a blog post with a unique slug.

    Raises SlugConflictError if the store keeps rejecting the resolved slug.
    """
    blog_id = new_object_id()
    candidate, auto_generated = _slug_candidate(body.slug, body.title, blog_id)
    fields = body.model_dump(exclude={"slug"})

    for attempt in range(1, MAX_SLUG_ATTEMPTS + 1):
        slug = await resolve_unique_slug(candidate, blog_id, repo.slug_exists)
        post = BlogPost(
            id=blog_id,
            slug=slug,
            slug_auto_generated=auto_generated,
            **fields,
        )
        try:
            await repo.add(post)
        except IntegrityError:
            await repo.rollback()
            logger.warning(
                "Slug %r taken concurrently (attempt %d/%d)", slug, attempt, MAX_SLUG_ATTEMPTS
            )
            continue
        logger.info("Created blog post %s with slug %r", blog_id, slug)
        return post

    raise SlugConflictError(candidate, MAX_SLUG_ATTEMPTS)


async def update_blog(repo: BlogRepository, blog_id: str, body: BlogUpdate) -> BlogPost | None:
    """Apply a partial update. Returns None if the post does not exist.

    An explicit slug is always re-resolved.  A new title only changes the slug
    while the post still carries the auto-generated placeholder, so published
    URLs stay stable.
    """
    post = await repo.find_by_id(blog_id)
    if post is None:
        return None

    patch = body.model_dump(exclude_unset=True)
    explicit_slug = patch.pop("slug", None)
    title = patch.get("title") or post.title

    candidate: str | None = None
    auto_generated = post.slug_auto_generated
    if explicit_slug:
        candidate, auto_generated = _slug_candidate(explicit_slug, title, blog_id)
    elif "title" in patch and post.slug_auto_generated:
        candidate, auto_generated = derive_slug(title, blog_id)

    for attempt in range(1, MAX_SLUG_ATTEMPTS + 1):
        if candidate is not None:
            patch["slug"] = await resolve_unique_slug(candidate, blog_id, repo.slug_exists)
            patch["slug_auto_generated"] = auto_generated
        try:
            return await repo.update_by_id(blog_id, patch)
        except IntegrityError:
            await repo.rollback()
            if candidate is None:
                raise
            logger.warning(
                "Slug %r taken concurrently (attempt %d/%d)",
                patch["slug"],
                attempt,
                MAX_SLUG_ATTEMPTS,
            )

    raise SlugConflictError(candidate or "", MAX_SLUG_ATTEMPTS)


async def get_blog_by_slug(repo: BlogRepository, slug: str) -> BlogPost | None:
    return await repo.find_one(slug=slug)


async def delete_blog(repo: BlogRepository, blog_id: str) -> BlogPost | None:
    """Delete a post. Returns the deleted post, or None if it did not exist."""
    post = await repo.delete_by_id(blog_id)
    if post is not None:
        logger.info("Deleted blog post %s (%s)", blog_id, post.slug)
    return post
