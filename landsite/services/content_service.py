"""Generic CRUD over the dashboard-managed content categories."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from sqlalchemy import select

from landsite.models.content import (
    Banner,
    GalleryImage,
    HomeSlide,
    LinkMapping,
    PageAsset,
    Project,
    SeoConfig,
    Service,
    Testimonial,
)
from landsite.services.cache_policy import ContentCategory

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from sqlalchemy.ext.asyncio import AsyncSession

    from landsite.models.base import DocumentMixin

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QueryFilter:
    """List filter driven by a query parameter.

    Boolean filters only apply for the literal value ``true``; string filters
    apply whenever the parameter is present and non-empty.
    """

    param: str
    column: str
    boolean: bool = False


@dataclass(frozen=True)
class ContentKind:
    """How one content category is stored and listed."""

    category: ContentCategory
    model: type[Any]
    label: str
    image_field: str | None = "image"
    filters: tuple[QueryFilter, ...] = field(default_factory=tuple)
    # Column names; a leading "-" sorts descending.
    ordering: tuple[str, ...] = ("order", "created_at")

    def image_of(self, doc: DocumentMixin | None) -> str | None:
        if doc is None or self.image_field is None:
            return None
        value = getattr(doc, self.image_field, None)
        return value or None


PROJECTS = ContentKind(
    ContentCategory.PROJECTS,
    Project,
    "Project",
    filters=(QueryFilter("featured", "featured", boolean=True),),
)
SERVICES = ContentKind(
    ContentCategory.SERVICES,
    Service,
    "Service",
    filters=(QueryFilter("featured", "featured", boolean=True),),
)
TESTIMONIALS = ContentKind(
    ContentCategory.TESTIMONIALS,
    Testimonial,
    "Testimonial",
    image_field=None,
    filters=(QueryFilter("approved", "approved", boolean=True),),
)
BANNERS = ContentKind(
    ContentCategory.BANNERS,
    Banner,
    "Banner",
    filters=(QueryFilter("page", "page"), QueryFilter("active", "is_active", boolean=True)),
)
GALLERY = ContentKind(ContentCategory.GALLERY, GalleryImage, "Gallery image")
PAGE_ASSETS = ContentKind(
    ContentCategory.PAGE_ASSETS,
    PageAsset,
    "Asset",
    image_field="image_url",
    filters=(QueryFilter("page", "page"), QueryFilter("section", "section")),
)
HOME_SLIDES = ContentKind(
    ContentCategory.HOME_SLIDES,
    HomeSlide,
    "Slide",
    filters=(QueryFilter("active", "is_active", boolean=True),),
)
LINK_MAPPINGS = ContentKind(
    ContentCategory.LINK_MAPPINGS,
    LinkMapping,
    "Link mapping",
    image_field=None,
    filters=(QueryFilter("active", "is_active", boolean=True),),
    ordering=("-priority", "keyword"),
)
SEO_CONFIG = ContentKind(
    ContentCategory.SEO_CONFIG,
    SeoConfig,
    "SEO configuration",
    image_field="default_og_image",
    ordering=("created_at",),
)


def _order_clauses(kind: ContentKind) -> list[Any]:
    clauses = []
    for name in kind.ordering:
        column = getattr(kind.model, name.lstrip("-"))
        clauses.append(column.desc() if name.startswith("-") else column.asc())
    return clauses


async def list_documents(
    session: AsyncSession,
    kind: ContentKind,
    params: Mapping[str, str] | None = None,
) -> Sequence[Any]:
    """List documents of a category in the category's ``ordering``."""
    model = kind.model
    stmt = select(model)
    for flt in kind.filters:
        raw = (params or {}).get(flt.param)
        if not raw:
            continue
        column = getattr(model, flt.column)
        if flt.boolean:
            if raw.lower() == "true":
                stmt = stmt.where(column.is_(True))
        else:
            stmt = stmt.where(column == raw)
    stmt = stmt.order_by(*_order_clauses(kind))
    result = await session.execute(stmt)
    return result.scalars().all()


async def get_document(session: AsyncSession, kind: ContentKind, doc_id: str) -> Any | None:
    return await session.get(kind.model, doc_id)


async def create_document(session: AsyncSession, kind: ContentKind, data: dict[str, Any]) -> Any:
    """Insert a document and commit."""
    doc = kind.model(**data)
    session.add(doc)
    await session.commit()
    logger.info("Created %s %s", kind.category.value, doc.id)
    return doc


async def update_document(
    session: AsyncSession,
    kind: ContentKind,
    doc_id: str,
    patch: dict[str, Any],
) -> tuple[Any | None, str | None]:
    """Apply *patch* and commit.

    Returns ``(document, previous_image)``; the document is None if it does
    not exist.  ``previous_image`` lets callers invalidate a replaced image.
    """
    doc = await session.get(kind.model, doc_id)
    if doc is None:
        return None, None
    previous_image = kind.image_of(doc)
    for name, value in patch.items():
        setattr(doc, name, value)
    await session.commit()
    return doc, previous_image


async def delete_document(session: AsyncSession, kind: ContentKind, doc_id: str) -> Any | None:
    """Delete a document. Returns it, or None if it did not exist."""
    doc = await session.get(kind.model, doc_id)
    if doc is None:
        return None
    await session.delete(doc)
    await session.commit()
    logger.info("Deleted %s %s", kind.category.value, doc_id)
    return doc


async def get_singleton(session: AsyncSession, kind: ContentKind) -> Any:
    """Return the category's only document, creating it with defaults if missing."""
    stmt = select(kind.model).order_by(*_order_clauses(kind)).limit(1)
    doc = (await session.execute(stmt)).scalar_one_or_none()
    if doc is None:
        doc = await create_document(session, kind, {})
    return doc


async def update_singleton(
    session: AsyncSession, kind: ContentKind, patch: dict[str, Any]
) -> tuple[Any, str | None]:
    """Apply *patch* to the singleton document. Returns ``(document, previous_image)``."""
    doc = await get_singleton(session, kind)
    previous_image = kind.image_of(doc)
    for name, value in patch.items():
        setattr(doc, name, value)
    await session.commit()
    return doc, previous_image
