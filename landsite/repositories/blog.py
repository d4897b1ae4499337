"""Blog post persistence: the document-store operations the slug logic needs."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import exists, func, select

from landsite.models.blog import BlogPost
from landsite.services.slug_service import FALLBACK_PREFIX, is_fallback_slug

if TYPE_CHECKING:
    from collections.abc import Sequence

    from sqlalchemy.ext.asyncio import AsyncSession


class BlogRepository:
    """Find/update primitives over the ``blog_posts`` table.

    Each write commits on its own so one failed update never takes earlier
    ones down with it.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find(self, *, featured: bool | None = None) -> Sequence[BlogPost]:
        """Return posts newest first, optionally filtered by ``featured``."""
        stmt = select(BlogPost).order_by(BlogPost.created_at.desc())
        if featured is not None:
            stmt = stmt.where(BlogPost.featured.is_(featured))
        result = await self.session.execute(stmt)
        return result.scalars().all()

    async def find_by_id(self, blog_id: str) -> BlogPost | None:
        return await self.session.get(BlogPost, blog_id)

    async def find_one(self, *, slug: str) -> BlogPost | None:
        result = await self.session.execute(select(BlogPost).where(BlogPost.slug == slug))
        return result.scalar_one_or_none()

    async def slug_exists(self, slug: str, exclude_id: str) -> bool:
        """Report whether a post other than *exclude_id* already uses *slug*."""
        stmt = select(
            exists().where(BlogPost.slug == slug, BlogPost.id != exclude_id)
        )
        result = await self.session.execute(stmt)
        return bool(result.scalar())

    async def count_placeholder_slugs(self) -> int:
        """Count posts whose slug still has the ``blog-<id>`` placeholder shape.

        Uses the same test as the slug migration, so the two always agree.
        """
        stmt = select(BlogPost.slug).where(func.lower(BlogPost.slug).like(f"{FALLBACK_PREFIX}%"))
        result = await self.session.execute(stmt)
        return sum(1 for slug in result.scalars() if is_fallback_slug(slug))

    async def add(self, post: BlogPost) -> BlogPost:
        self.session.add(post)
        await self.session.commit()
        return post

    async def update_by_id(self, blog_id: str, patch: dict[str, Any]) -> BlogPost | None:
        """Apply *patch* to the post and commit. Returns None if it does not exist."""
        post = await self.session.get(BlogPost, blog_id)
        if post is None:
            return None
        for field, value in patch.items():
            setattr(post, field, value)
        await self.session.commit()
        return post

    async def delete_by_id(self, blog_id: str) -> BlogPost | None:
        post = await self.session.get(BlogPost, blog_id)
        if post is None:
            return None
        await self.session.delete(post)
        await self.session.commit()
        return post

    async def rollback(self) -> None:
        await self.session.rollback()
