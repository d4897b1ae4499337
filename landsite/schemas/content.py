"""Schemas for the dashboard-managed content categories."""

from __future__ import annotations

from datetime import datetime
from typing import ClassVar, Self

from pydantic import BaseModel, ConfigDict, Field, model_validator


class DocumentResponse(BaseModel):
    """Fields every stored document exposes."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    created_at: datetime
    updated_at: datetime


class DeleteResponse(BaseModel):
    """Response after deleting a document."""

    id: str
    deleted: bool = True


class PatchModel(BaseModel):
    """Partial update: omitted fields stay untouched, ``null`` clears a field.

    Only fields listed in ``nullable_fields`` may be sent as ``null``; the
    rest map to NOT NULL columns.
    """

    nullable_fields: ClassVar[frozenset[str]] = frozenset()

    @model_validator(mode="after")
    def reject_null_for_required(self) -> Self:
        for name in self.model_fields_set:
            if getattr(self, name) is None and name not in self.nullable_fields:
                raise ValueError(f"{name} cannot be null")
        return self


# Projects


class ProjectCreate(BaseModel):
    title: str = Field(min_length=1, max_length=500)
    title_ar: str = Field(min_length=1, max_length=500)
    description: str = Field(min_length=1, max_length=10_000)
    description_ar: str = Field(min_length=1, max_length=10_000)
    image: str = Field(min_length=1, max_length=2000)
    gallery_images: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    tags_ar: list[str] = Field(default_factory=list)
    category: str = Field(min_length=1, max_length=200)
    category_ar: str = Field(min_length=1, max_length=200)
    year: str = Field(min_length=4, max_length=10)
    link: str | None = Field(default=None, max_length=2000)
    featured: bool = False
    order: int = 0


class ProjectUpdate(PatchModel):
    nullable_fields = frozenset({"link"})

    title: str | None = Field(default=None, min_length=1, max_length=500)
    title_ar: str | None = Field(default=None, min_length=1, max_length=500)
    description: str | None = Field(default=None, min_length=1, max_length=10_000)
    description_ar: str | None = Field(default=None, min_length=1, max_length=10_000)
    image: str | None = Field(default=None, min_length=1, max_length=2000)
    gallery_images: list[str] | None = None
    tags: list[str] | None = None
    tags_ar: list[str] | None = None
    category: str | None = Field(default=None, min_length=1, max_length=200)
    category_ar: str | None = Field(default=None, min_length=1, max_length=200)
    year: str | None = Field(default=None, min_length=4, max_length=10)
    link: str | None = Field(default=None, max_length=2000)
    featured: bool | None = None
    order: int | None = None


class ProjectResponse(DocumentResponse):
    title: str
    title_ar: str
    description: str
    description_ar: str
    image: str
    gallery_images: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    tags_ar: list[str] = Field(default_factory=list)
    category: str
    category_ar: str
    year: str
    link: str | None = None
    featured: bool = False
    order: int = 0


# Services


class ServiceCreate(BaseModel):
    title: str = Field(min_length=1, max_length=500)
    title_ar: str = Field(min_length=1, max_length=500)
    description: str = Field(min_length=1, max_length=10_000)
    description_ar: str = Field(min_length=1, max_length=10_000)
    icon: str = Field(min_length=1, max_length=100)
    image: str | None = Field(default=None, max_length=2000)
    features: list[str] = Field(default_factory=list)
    features_ar: list[str] = Field(default_factory=list)
    featured: bool = False
    order: int = 0


class ServiceUpdate(PatchModel):
    nullable_fields = frozenset({"image"})

    title: str | None = Field(default=None, min_length=1, max_length=500)
    title_ar: str | None = Field(default=None, min_length=1, max_length=500)
    description: str | None = Field(default=None, min_length=1, max_length=10_000)
    description_ar: str | None = Field(default=None, min_length=1, max_length=10_000)
    icon: str | None = Field(default=None, min_length=1, max_length=100)
    image: str | None = Field(default=None, max_length=2000)
    features: list[str] | None = None
    features_ar: list[str] | None = None
    featured: bool | None = None
    order: int | None = None


class ServiceResponse(DocumentResponse):
    title: str
    title_ar: str
    description: str
    description_ar: str
    icon: str
    image: str | None = None
    features: list[str] = Field(default_factory=list)
    features_ar: list[str] = Field(default_factory=list)
    featured: bool = False
    order: int = 0


# Testimonials


class TestimonialCreate(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1, max_length=5000)
    rating: int = Field(default=5, ge=1, le=5)
    approved: bool = False
    order: int = 0


class TestimonialUpdate(PatchModel):
    name: str | None = Field(default=None, min_length=1, max_length=200)
    content: str | None = Field(default=None, min_length=1, max_length=5000)
    rating: int | None = Field(default=None, ge=1, le=5)
    approved: bool | None = None
    order: int | None = None


class TestimonialResponse(DocumentResponse):
    name: str
    content: str
    rating: int
    approved: bool
    order: int = 0


# Banners


class BannerCreate(BaseModel):
    page: str = Field(min_length=1, max_length=50, pattern=r"^[a-z0-9][a-z0-9-]*$")
    image: str = Field(min_length=1, max_length=2000)
    is_active: bool = True
    order: int = 0


class BannerUpdate(PatchModel):
    page: str | None = Field(
        default=None, min_length=1, max_length=50, pattern=r"^[a-z0-9][a-z0-9-]*$"
    )
    image: str | None = Field(default=None, min_length=1, max_length=2000)
    is_active: bool | None = None
    order: int | None = None


class BannerResponse(DocumentResponse):
    page: str
    image: str
    is_active: bool = True
    order: int = 0


# Gallery


class GalleryImageCreate(BaseModel):
    image: str = Field(min_length=1, max_length=2000)
    alt: str | None = Field(default=None, max_length=500)
    alt_ar: str | None = Field(default=None, max_length=500)
    order: int = 0


class GalleryImageUpdate(PatchModel):
    nullable_fields = frozenset({"alt", "alt_ar"})

    image: str | None = Field(default=None, min_length=1, max_length=2000)
    alt: str | None = Field(default=None, max_length=500)
    alt_ar: str | None = Field(default=None, max_length=500)
    order: int | None = None


class GalleryImageResponse(DocumentResponse):
    image: str
    alt: str | None = None
    alt_ar: str | None = None
    order: int = 0


# Page assets


class PageAssetCreate(BaseModel):
    page: str = Field(min_length=1, max_length=100)
    section: str = Field(min_length=1, max_length=100)
    key: str = Field(min_length=1, max_length=100)
    image_url: str = Field(min_length=1, max_length=2000)
    alt: str | None = Field(default=None, max_length=500)
    alt_ar: str | None = Field(default=None, max_length=500)
    text: str | None = Field(default=None, max_length=2000)
    text_ar: str | None = Field(default=None, max_length=2000)
    order: int = 0


class PageAssetUpdate(PatchModel):
    nullable_fields = frozenset({"alt", "alt_ar", "text", "text_ar"})

    page: str | None = Field(default=None, min_length=1, max_length=100)
    section: str | None = Field(default=None, min_length=1, max_length=100)
    key: str | None = Field(default=None, min_length=1, max_length=100)
    image_url: str | None = Field(default=None, min_length=1, max_length=2000)
    alt: str | None = Field(default=None, max_length=500)
    alt_ar: str | None = Field(default=None, max_length=500)
    text: str | None = Field(default=None, max_length=2000)
    text_ar: str | None = Field(default=None, max_length=2000)
    order: int | None = None


class PageAssetResponse(DocumentResponse):
    page: str
    section: str
    key: str
    image_url: str
    alt: str | None = None
    alt_ar: str | None = None
    text: str | None = None
    text_ar: str | None = None
    order: int = 0


# Home slides


class HomeSlideCreate(BaseModel):
    title: str = Field(min_length=1, max_length=500)
    title_ar: str = Field(min_length=1, max_length=500)
    subtitle: str = Field(min_length=1, max_length=1000)
    subtitle_ar: str = Field(min_length=1, max_length=1000)
    image: str = Field(min_length=1, max_length=2000)
    order: int = 0
    is_active: bool = True


class HomeSlideUpdate(PatchModel):
    title: str | None = Field(default=None, min_length=1, max_length=500)
    title_ar: str | None = Field(default=None, min_length=1, max_length=500)
    subtitle: str | None = Field(default=None, min_length=1, max_length=1000)
    subtitle_ar: str | None = Field(default=None, min_length=1, max_length=1000)
    image: str | None = Field(default=None, min_length=1, max_length=2000)
    order: int | None = None
    is_active: bool | None = None


class HomeSlideResponse(DocumentResponse):
    title: str
    title_ar: str
    subtitle: str
    subtitle_ar: str
    image: str
    order: int = 0
    is_active: bool = True


# Internal link mappings


class LinkMappingCreate(BaseModel):
    keyword: str = Field(min_length=1, max_length=200)
    url: str = Field(min_length=1, max_length=2000)
    priority: int = 0
    case_sensitive: bool = False
    max_occurrences: int = Field(default=1, ge=1, le=100)
    is_active: bool = True
    description: str | None = Field(default=None, max_length=1000)


class LinkMappingUpdate(PatchModel):
    nullable_fields = frozenset({"description"})

    keyword: str | None = Field(default=None, min_length=1, max_length=200)
    url: str | None = Field(default=None, min_length=1, max_length=2000)
    priority: int | None = None
    case_sensitive: bool | None = None
    max_occurrences: int | None = Field(default=None, ge=1, le=100)
    is_active: bool | None = None
    description: str | None = Field(default=None, max_length=1000)


class LinkMappingResponse(DocumentResponse):
    keyword: str
    url: str
    priority: int = 0
    case_sensitive: bool = False
    max_occurrences: int = 1
    is_active: bool = True
    description: str | None = None


# SEO configuration


class SeoConfigUpdate(PatchModel):
    nullable_fields = frozenset({"default_og_image", "twitter_handle"})

    global_auto_seo: bool | None = None
    global_auto_internal_links: bool | None = None
    max_internal_links_per_post: int | None = Field(default=None, ge=0, le=100)
    default_meta_keywords_count: int | None = Field(default=None, ge=0, le=50)
    site_name: str | None = Field(default=None, min_length=1, max_length=200)
    default_og_image: str | None = Field(default=None, max_length=2000)
    twitter_handle: str | None = Field(default=None, max_length=100)


class SeoConfigResponse(DocumentResponse):
    global_auto_seo: bool
    global_auto_internal_links: bool
    max_internal_links_per_post: int
    default_meta_keywords_count: int
    site_name: str
    default_og_image: str | None = None
    twitter_handle: str | None = None
