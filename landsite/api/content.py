"""CRUD endpoints for the dashboard-managed content categories.

Each category gets the same five routes.  Public reads carry the category's
cache policy; writes require the admin key and invalidate afterwards.
Singleton categories such as the SEO configuration get a GET/PUT pair on the
collection path instead.
"""

# Annotations here must be evaluated eagerly: the route functions are built in
# a factory and FastAPI resolves their parameter types at registration time.

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Depends, HTTPException, Request, Response
from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from landsite.api.deps import (
    get_invalidator,
    get_session,
    get_settings,
    has_admin_key,
    require_admin,
)
from landsite.config import Settings
from landsite.schemas.content import (
    BannerCreate,
    BannerResponse,
    BannerUpdate,
    DeleteResponse,
    GalleryImageCreate,
    GalleryImageResponse,
    GalleryImageUpdate,
    HomeSlideCreate,
    HomeSlideResponse,
    HomeSlideUpdate,
    LinkMappingCreate,
    LinkMappingResponse,
    LinkMappingUpdate,
    PageAssetCreate,
    PageAssetResponse,
    PageAssetUpdate,
    ProjectCreate,
    ProjectResponse,
    ProjectUpdate,
    SeoConfigResponse,
    SeoConfigUpdate,
    ServiceCreate,
    ServiceResponse,
    ServiceUpdate,
    TestimonialCreate,
    TestimonialResponse,
    TestimonialUpdate,
)
from landsite.services.cache_policy import apply_cache_headers
from landsite.services.content_service import (
    BANNERS,
    GALLERY,
    HOME_SLIDES,
    LINK_MAPPINGS,
    PAGE_ASSETS,
    PROJECTS,
    SEO_CONFIG,
    SERVICES,
    TESTIMONIALS,
    ContentKind,
    create_document,
    delete_document,
    get_document,
    get_singleton,
    list_documents,
    update_document,
    update_singleton,
)
from landsite.services.invalidation_service import Invalidator

logger = logging.getLogger(__name__)


async def _commit_or_conflict(session: AsyncSession, kind: ContentKind, coro: Any) -> Any:
    """Await a write, mapping unique-constraint violations to 409."""
    try:
        return await coro
    except IntegrityError as exc:
        await session.rollback()
        logger.warning("Conflicting %s write: %s", kind.category.value, exc.orig)
        raise HTTPException(
            status_code=409, detail=f"{kind.label} conflicts with an existing one"
        ) from exc


def build_router(
    kind: ContentKind,
    create_schema: type[BaseModel],
    update_schema: type[BaseModel],
    response_schema: type[BaseModel],
    *,
    public_create: bool = False,
) -> APIRouter:
    """Build the list/detail/create/update/delete routes for one category.

    With ``public_create`` anyone may POST, but submissions without the admin
    key are stored unapproved.
    """
    router = APIRouter(prefix=kind.category.api_path, tags=[kind.category.value])
    not_found = f"{kind.label} not found"

    @router.get("", response_model=list[response_schema])  # type: ignore[valid-type]
    async def list_endpoint(
        request: Request,
        response: Response,
        session: Annotated[AsyncSession, Depends(get_session)],
        settings: Annotated[Settings, Depends(get_settings)],
    ) -> Any:
        docs = await list_documents(session, kind, request.query_params)
        apply_cache_headers(response, request, kind.category, settings)
        return docs

    @router.get("/{doc_id}", response_model=response_schema)
    async def detail_endpoint(
        doc_id: str,
        request: Request,
        response: Response,
        session: Annotated[AsyncSession, Depends(get_session)],
        settings: Annotated[Settings, Depends(get_settings)],
    ) -> Any:
        doc = await get_document(session, kind, doc_id)
        if doc is None:
            raise HTTPException(status_code=404, detail=not_found)
        apply_cache_headers(response, request, kind.category, settings)
        return doc

    create_guard = [] if public_create else [Depends(require_admin)]

    @router.post(
        "", response_model=response_schema, status_code=201, dependencies=create_guard
    )
    async def create_endpoint(
        body: create_schema,  # type: ignore[valid-type]
        session: Annotated[AsyncSession, Depends(get_session)],
        invalidator: Annotated[Invalidator, Depends(get_invalidator)],
        is_admin: Annotated[bool, Depends(has_admin_key)],
    ) -> Any:
        data = body.model_dump()
        if public_create and not is_admin and "approved" in data:
            data["approved"] = False
        doc = await _commit_or_conflict(session, kind, create_document(session, kind, data))
        await invalidator.invalidate(kind.category)
        await invalidator.invalidate_image(kind.image_of(doc))
        return doc

    @router.put(
        "/{doc_id}", response_model=response_schema, dependencies=[Depends(require_admin)]
    )
    async def update_endpoint(
        doc_id: str,
        body: update_schema,  # type: ignore[valid-type]
        session: Annotated[AsyncSession, Depends(get_session)],
        invalidator: Annotated[Invalidator, Depends(get_invalidator)],
    ) -> Any:
        patch = body.model_dump(exclude_unset=True)
        doc, previous_image = await _commit_or_conflict(
            session, kind, update_document(session, kind, doc_id, patch)
        )
        if doc is None:
            raise HTTPException(status_code=404, detail=not_found)
        await invalidator.invalidate(kind.category)
        if kind.image_field is not None and kind.image_field in patch:
            await invalidator.invalidate_images(kind.image_of(doc), previous_image)
        return doc

    @router.delete(
        "/{doc_id}", response_model=DeleteResponse, dependencies=[Depends(require_admin)]
    )
    async def delete_endpoint(
        doc_id: str,
        session: Annotated[AsyncSession, Depends(get_session)],
        invalidator: Annotated[Invalidator, Depends(get_invalidator)],
    ) -> DeleteResponse:
        doc = await delete_document(session, kind, doc_id)
        if doc is None:
            raise HTTPException(status_code=404, detail=not_found)
        await invalidator.invalidate(kind.category)
        await invalidator.invalidate_image(kind.image_of(doc))
        return DeleteResponse(id=doc_id)

    return router


def build_singleton_router(
    kind: ContentKind,
    update_schema: type[BaseModel],
    response_schema: type[BaseModel],
) -> APIRouter:
    """Build GET/PUT routes for a category that holds exactly one document."""
    router = APIRouter(prefix=kind.category.api_path, tags=[kind.category.value])

    @router.get("", response_model=response_schema)
    async def read_endpoint(
        request: Request,
        response: Response,
        session: Annotated[AsyncSession, Depends(get_session)],
        settings: Annotated[Settings, Depends(get_settings)],
    ) -> Any:
        doc = await get_singleton(session, kind)
        apply_cache_headers(response, request, kind.category, settings)
        return doc

    @router.put("", response_model=response_schema, dependencies=[Depends(require_admin)])
    async def write_endpoint(
        body: update_schema,  # type: ignore[valid-type]
        session: Annotated[AsyncSession, Depends(get_session)],
        invalidator: Annotated[Invalidator, Depends(get_invalidator)],
    ) -> Any:
        patch = body.model_dump(exclude_unset=True)
        doc, previous_image = await update_singleton(session, kind, patch)
        await invalidator.invalidate(kind.category)
        if kind.image_field is not None and kind.image_field in patch:
            await invalidator.invalidate_images(kind.image_of(doc), previous_image)
        return doc

    return router


projects_router = build_router(PROJECTS, ProjectCreate, ProjectUpdate, ProjectResponse)
services_router = build_router(SERVICES, ServiceCreate, ServiceUpdate, ServiceResponse)
testimonials_router = build_router(
    TESTIMONIALS, TestimonialCreate, TestimonialUpdate, TestimonialResponse, public_create=True
)
banners_router = build_router(BANNERS, BannerCreate, BannerUpdate, BannerResponse)
gallery_router = build_router(
    GALLERY, GalleryImageCreate, GalleryImageUpdate, GalleryImageResponse
)
page_assets_router = build_router(
    PAGE_ASSETS, PageAssetCreate, PageAssetUpdate, PageAssetResponse
)
home_slides_router = build_router(
    HOME_SLIDES, HomeSlideCreate, HomeSlideUpdate, HomeSlideResponse
)
link_mappings_router = build_router(
    LINK_MAPPINGS, LinkMappingCreate, LinkMappingUpdate, LinkMappingResponse
)
seo_config_router = build_singleton_router(SEO_CONFIG, SeoConfigUpdate, SeoConfigResponse)

routers = (
    projects_router,
    services_router,
    testimonials_router,
    banners_router,
    gallery_router,
    page_assets_router,
    home_slides_router,
    link_mappings_router,
    seo_config_router,
)
