"""Site content models managed from the admin dashboard."""

from __future__ import annotations

from sqlalchemy import JSON, Boolean, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from landsite.models.base import Base, DocumentMixin


class Project(DocumentMixin, Base):
    """Portfolio project."""

    __tablename__ = "projects"

    title: Mapped[str] = mapped_column(Text, nullable=False)
    title_ar: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    description_ar: Mapped[str] = mapped_column(Text, nullable=False)
    image: Mapped[str] = mapped_column(Text, nullable=False)
    gallery_images: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    tags: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    tags_ar: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    category: Mapped[str] = mapped_column(String(200), nullable=False)
    category_ar: Mapped[str] = mapped_column(String(200), nullable=False)
    year: Mapped[str] = mapped_column(String(10), nullable=False)
    link: Mapped[str | None] = mapped_column(Text, nullable=True)
    featured: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)


class Service(DocumentMixin, Base):
    """Landscaping service offered by the company."""

    __tablename__ = "services"

    title: Mapped[str] = mapped_column(Text, nullable=False)
    title_ar: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    description_ar: Mapped[str] = mapped_column(Text, nullable=False)
    icon: Mapped[str] = mapped_column(String(100), nullable=False)
    image: Mapped[str | None] = mapped_column(Text, nullable=True)
    features: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    features_ar: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    featured: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)


class Testimonial(DocumentMixin, Base):
    """Customer testimonial; public submissions wait for approval."""

    __tablename__ = "testimonials"

    name: Mapped[str] = mapped_column(String(200), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    rating: Mapped[int] = mapped_column(Integer, nullable=False, default=5)
    approved: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    __table_args__ = (Index("idx_testimonials_approved", "approved"),)


class Banner(DocumentMixin, Base):
    """Hero banner image for a top-level page."""

    __tablename__ = "banners"

    page: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)
    image: Mapped[str] = mapped_column(Text, nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)


class GalleryImage(DocumentMixin, Base):
    """Image shown in the public gallery."""

    __tablename__ = "gallery"

    image: Mapped[str] = mapped_column(Text, nullable=False)
    alt: Mapped[str | None] = mapped_column(Text, nullable=True)
    alt_ar: Mapped[str | None] = mapped_column(Text, nullable=True)
    order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)


class PageAsset(DocumentMixin, Base):
    """Keyed image (with optional caption) placed in a page section."""

    __tablename__ = "page_assets"

    page: Mapped[str] = mapped_column(String(100), nullable=False)
    section: Mapped[str] = mapped_column(String(100), nullable=False)
    key: Mapped[str] = mapped_column(String(100), nullable=False)
    image_url: Mapped[str] = mapped_column(Text, nullable=False)
    alt: Mapped[str | None] = mapped_column(Text, nullable=True)
    alt_ar: Mapped[str | None] = mapped_column(Text, nullable=True)
    text: Mapped[str | None] = mapped_column(Text, nullable=True)
    text_ar: Mapped[str | None] = mapped_column(Text, nullable=True)
    order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    __table_args__ = (Index("idx_page_assets_page_section", "page", "section"),)


class HomeSlide(DocumentMixin, Base):
    """Slide in the home page hero carousel."""

    __tablename__ = "home_slides"

    title: Mapped[str] = mapped_column(Text, nullable=False)
    title_ar: Mapped[str] = mapped_column(Text, nullable=False)
    subtitle: Mapped[str] = mapped_column(Text, nullable=False)
    subtitle_ar: Mapped[str] = mapped_column(Text, nullable=False)
    image: Mapped[str] = mapped_column(Text, nullable=False)
    order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)


class LinkMapping(DocumentMixin, Base):
    """Keyword that blog content links to an internal page."""

    __tablename__ = "link_mappings"

    keyword: Mapped[str] = mapped_column(String(200), nullable=False)
    url: Mapped[str] = mapped_column(Text, nullable=False)
    priority: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    case_sensitive: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    max_occurrences: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    __table_args__ = (Index("idx_link_mappings_priority", "priority"),)


class SeoConfig(DocumentMixin, Base):
    """Site-wide SEO defaults. A single row, created on first read."""

    __tablename__ = "seo_config"

    global_auto_seo: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    global_auto_internal_links: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True
    )
    max_internal_links_per_post: Mapped[int] = mapped_column(Integer, nullable=False, default=5)
    default_meta_keywords_count: Mapped[int] = mapped_column(
        Integer, nullable=False, default=10
    )
    site_name: Mapped[str] = mapped_column(
        String(200), nullable=False, default="Landscape Masters"
    )
    default_og_image: Mapped[str | None] = mapped_column(Text, nullable=True)
    twitter_handle: Mapped[str | None] = mapped_column(String(100), nullable=True)
