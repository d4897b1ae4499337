"""Blog API endpoints."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response
from fastapi.responses import JSONResponse

from landsite.api.deps import get_blog_repository, get_invalidator, get_settings, require_admin
from landsite.config import Settings
from landsite.repositories.blog import BlogRepository
from landsite.schemas.blog import (
    BlogCreate,
    BlogDeleteResponse,
    BlogResponse,
    BlogUpdate,
    MigrationDetails,
    MigrationResponse,
)
from landsite.services.blog_service import (
    create_blog,
    delete_blog,
    get_blog_by_slug,
    to_response,
    update_blog,
)
from landsite.services.cache_policy import ContentCategory, apply_cache_headers
from landsite.services.invalidation_service import Invalidator
from landsite.services.migration_service import SlugRecord, migrate_slugs

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/blogs", tags=["blogs"])


@router.post(
    "/migrate-slugs",
    response_model=MigrationResponse,
    dependencies=[Depends(require_admin)],
)
async def migrate_slugs_endpoint(
    repo: Annotated[BlogRepository, Depends(get_blog_repository)],
    invalidator: Annotated[Invalidator, Depends(get_invalidator)],
) -> MigrationResponse | JSONResponse:
    """Replace placeholder ``blog-<id>`` slugs with title-derived ones."""
    try:
        posts = await repo.find()
        records = [SlugRecord.from_post(post) for post in posts]
        result = await migrate_slugs(records, repo)
    except Exception as exc:
        logger.error("Slug migration could not run: %s", exc, exc_info=exc)
        return JSONResponse(
            status_code=500,
            content={"success": False, "error": "Migration failed"},
        )

    if result.updated:
        await invalidator.invalidate(ContentCategory.BLOGS)

    return MigrationResponse(
        total_blogs=result.total,
        updated_count=result.updated_count,
        skipped_count=result.skipped_count,
        errors_count=result.errors_count,
        details=MigrationDetails(
            updated=result.updated,
            skipped=result.skipped,
            errors=result.errors,
        ),
    )


@router.get("", response_model=list[BlogResponse])
async def list_blogs(
    request: Request,
    response: Response,
    repo: Annotated[BlogRepository, Depends(get_blog_repository)],
    settings: Annotated[Settings, Depends(get_settings)],
    featured: bool | None = Query(default=None),
) -> list[BlogResponse]:
    """List blog posts, newest first."""
    posts = await repo.find(featured=featured)
    apply_cache_headers(response, request, ContentCategory.BLOGS, settings)
    return [to_response(post, settings.public_site_url) for post in posts]


@router.get("/{slug}", response_model=BlogResponse)
async def get_blog(
    slug: str,
    request: Request,
    response: Response,
    repo: Annotated[BlogRepository, Depends(get_blog_repository)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> BlogResponse:
    """Get a blog post by slug."""
    post = await get_blog_by_slug(repo, slug)
    if post is None:
        raise HTTPException(status_code=404, detail="Blog not found")
    apply_cache_headers(response, request, ContentCategory.BLOGS, settings)
    return to_response(post, settings.public_site_url)


@router.post(
    "",
    response_model=BlogResponse,
    status_code=201,
    dependencies=[Depends(require_admin)],
)
async def create_blog_endpoint(
    body: BlogCreate,
    repo: Annotated[BlogRepository, Depends(get_blog_repository)],
    invalidator: Annotated[Invalidator, Depends(get_invalidator)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> BlogResponse:
    """Create a blog post; the slug is derived from the title unless given."""
    post = await create_blog(repo, body)
    await invalidator.invalidate(ContentCategory.BLOGS)
    await invalidator.invalidate_image(post.image)
    return to_response(post, settings.public_site_url)


@router.put("/{blog_id}", response_model=BlogResponse, dependencies=[Depends(require_admin)])
async def update_blog_endpoint(
    blog_id: str,
    body: BlogUpdate,
    repo: Annotated[BlogRepository, Depends(get_blog_repository)],
    invalidator: Annotated[Invalidator, Depends(get_invalidator)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> BlogResponse:
    """Update a blog post."""
    existing = await repo.find_by_id(blog_id)
    if existing is None:
        raise HTTPException(status_code=404, detail="Blog not found")
    previous_image = existing.image

    post = await update_blog(repo, blog_id, body)
    if post is None:
        raise HTTPException(status_code=404, detail="Blog was deleted during update")

    await invalidator.invalidate(ContentCategory.BLOGS)
    if body.image:
        await invalidator.invalidate_images(body.image, previous_image)
    return to_response(post, settings.public_site_url)


@router.delete(
    "/{blog_id}",
    response_model=BlogDeleteResponse,
    dependencies=[Depends(require_admin)],
)
async def delete_blog_endpoint(
    blog_id: str,
    repo: Annotated[BlogRepository, Depends(get_blog_repository)],
    invalidator: Annotated[Invalidator, Depends(get_invalidator)],
) -> BlogDeleteResponse:
    """Delete a blog post."""
    post = await delete_blog(repo, blog_id)
    if post is None:
        raise HTTPException(status_code=404, detail="Blog not found")
    await invalidator.invalidate(ContentCategory.BLOGS)
    await invalidator.invalidate_image(post.image)
    return BlogDeleteResponse(id=blog_id)
