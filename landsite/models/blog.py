"""Blog post model."""

from __future__ import annotations

from typing import Any

from sqlalchemy import JSON, Boolean, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from landsite.models.base import Base, DocumentMixin


class BlogPost(DocumentMixin, Base):
    """A blog article addressed publicly by its slug."""

    __tablename__ = "blog_posts"

    title: Mapped[str] = mapped_column(Text, nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    excerpt: Mapped[str | None] = mapped_column(Text, nullable=True)
    image: Mapped[str] = mapped_column(Text, nullable=False)
    author: Mapped[str] = mapped_column(String(200), nullable=False)
    featured: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    slug: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    # True while the slug is the "blog-<id>" placeholder rather than title-derived.
    slug_auto_generated: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    meta_title: Mapped[str | None] = mapped_column(Text, nullable=True)
    meta_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    meta_keywords: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    auto_seo: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    auto_internal_links: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    # Editor overrides: title, description, keywords, og_image, canonical_url,
    # no_index, no_follow.
    manual_seo: Mapped[dict[str, Any] | None] = mapped_column(JSON, nullable=True)

    __table_args__ = (
        Index("idx_blog_posts_created_at", "created_at"),
        Index("idx_blog_posts_featured", "featured"),
    )
