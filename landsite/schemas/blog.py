"""Blog-related schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from landsite.schemas.content import PatchModel


class ManualSeo(BaseModel):
    """Editor-set SEO overrides; non-empty values win over the generated ones."""

    title: str | None = Field(default=None, max_length=500)
    description: str | None = Field(default=None, max_length=2000)
    keywords: list[str] = Field(default_factory=list)
    og_image: str | None = Field(default=None, max_length=2000)
    canonical_url: str | None = Field(default=None, max_length=2000)
    no_index: bool = False
    no_follow: bool = False


class SeoMetadata(BaseModel):
    """Page metadata the site renders for a post."""

    title: str
    description: str
    keywords: list[str] = Field(default_factory=list)
    canonical_url: str
    og_image: str
    no_index: bool = False
    no_follow: bool = False


class BlogResponse(BaseModel):
    """Blog post as returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    content: str
    excerpt: str | None = None
    image: str
    author: str
    featured: bool = False
    slug: str
    slug_auto_generated: bool = False
    url: str = ""
    seo: SeoMetadata | None = None
    meta_title: str | None = None
    meta_description: str | None = None
    meta_keywords: list[str] = Field(default_factory=list)
    auto_seo: bool = True
    auto_internal_links: bool = True
    manual_seo: ManualSeo | None = None
    created_at: datetime
    updated_at: datetime


class BlogCreate(BaseModel):
    """Request to create a blog post."""

    title: str = Field(min_length=1, max_length=500)
    content: str = Field(min_length=1, max_length=500_000)
    excerpt: str | None = Field(default=None, max_length=2000)
    image: str = Field(min_length=1, max_length=2000)
    author: str = Field(min_length=1, max_length=200)
    featured: bool = False
    slug: str | None = Field(
        default=None,
        max_length=500,
        description="Optional explicit slug; derived from the title when omitted",
    )
    meta_title: str | None = Field(default=None, max_length=500)
    meta_description: str | None = Field(default=None, max_length=2000)
    meta_keywords: list[str] = Field(default_factory=list)
    auto_seo: bool = True
    auto_internal_links: bool = True
    manual_seo: ManualSeo | None = None

    @field_validator("title", mode="before")
    @classmethod
    def strip_title(cls, v: str) -> str:
        return v.strip() if isinstance(v, str) else v


class BlogUpdate(PatchModel):
    """Partial update of a blog post; omitted fields are left unchanged."""

    nullable_fields = frozenset({"excerpt", "meta_title", "meta_description", "manual_seo"})

    title: str | None = Field(default=None, min_length=1, max_length=500)
    content: str | None = Field(default=None, min_length=1, max_length=500_000)
    excerpt: str | None = Field(default=None, max_length=2000)
    image: str | None = Field(default=None, min_length=1, max_length=2000)
    author: str | None = Field(default=None, min_length=1, max_length=200)
    featured: bool | None = None
    slug: str | None = Field(default=None, max_length=500)
    meta_title: str | None = Field(default=None, max_length=500)
    meta_description: str | None = Field(default=None, max_length=2000)
    meta_keywords: list[str] | None = None
    auto_seo: bool | None = None
    auto_internal_links: bool | None = None
    manual_seo: ManualSeo | None = None

    @field_validator("title", mode="before")
    @classmethod
    def strip_title(cls, v: str | None) -> str | None:
        return v.strip() if isinstance(v, str) else v


class BlogDeleteResponse(BaseModel):
    """Response after deleting a blog post."""

    id: str
    deleted: bool = True


class MigrationDetails(BaseModel):
    """Per-post audit lines of a slug migration run."""

    updated: list[str] = Field(default_factory=list)
    skipped: list[str] = Field(default_factory=list)
    errors: list[str] = Field(default_factory=list)


class MigrationResponse(BaseModel):
    """Summary returned by ``POST /api/blogs/migrate-slugs``."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    message: str = "Migration completed"
    total_blogs: int = Field(ge=0, alias="totalBlogs")
    updated_count: int = Field(ge=0, alias="updatedCount")
    skipped_count: int = Field(ge=0, alias="skippedCount")
    errors_count: int = Field(ge=0, alias="errorsCount")
    details: MigrationDetails
