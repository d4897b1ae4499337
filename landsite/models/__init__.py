"""SQLAlchemy ORM models for LandSite."""

from landsite.models.base import Base
from landsite.models.blog import BlogPost
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

__all__ = [
    "Banner",
    "Base",
    "BlogPost",
    "GalleryImage",
    "HomeSlide",
    "LinkMapping",
    "PageAsset",
    "Project",
    "SeoConfig",
    "Service",
    "Testimonial",
]
