"""One-off backfill replacing placeholder blog slugs with title-derived ones."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Protocol

from landsite.services.slug_service import generate_slug, is_fallback_slug, resolve_unique_slug

if TYPE_CHECKING:
    from collections.abc import Iterable

    from landsite.models.blog import BlogPost

logger = logging.getLogger(__name__)


class SlugStore(Protocol):
    """Store operations the migration needs."""

    async def slug_exists(self, slug: str, exclude_id: str) -> bool: ...

    async def update_by_id(self, blog_id: str, patch: dict[str, Any]) -> object | None: ...

    async def rollback(self) -> None: ...


@dataclass(frozen=True)
class SlugRecord:
    """Detached snapshot of the fields the migration reads."""

    id: str
    title: str
    slug: str

    @classmethod
    def from_post(cls, post: BlogPost) -> SlugRecord:
        return cls(id=post.id, title=post.title or "", slug=post.slug or "")


@dataclass
class MigrationResult:
    """Audit trail of one migration run."""

    total: int = 0
    updated: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def updated_count(self) -> int:
        return len(self.updated)

    @property
    def skipped_count(self) -> int:
        return len(self.skipped)

    @property
    def errors_count(self) -> int:
        return len(self.errors)


async def migrate_slugs(records: Iterable[SlugRecord], store: SlugStore) -> MigrationResult:
    """Replace ``blog-<id>`` slugs with slugs derived from each post's title.

    Posts whose slug is not a placeholder, or that have no title, are left
    alone.  A failure on one post is recorded in ``errors`` and the sweep moves
    on to the next one.  Running the job again right away changes nothing.
    """
    result = MigrationResult()

    for record in records:
        result.total += 1
        title = record.title.strip()

        if not (is_fallback_slug(record.slug) and title):
            result.skipped.append(f"{record.title} (slug: {record.slug})")
            continue

        new_slug = generate_slug(title)
        if not new_slug:
            result.skipped.append(f"{record.title} - could not generate slug")
            continue

        try:
            unique_slug = await resolve_unique_slug(new_slug, record.id, store.slug_exists)
            updated = await store.update_by_id(
                record.id, {"slug": unique_slug, "slug_auto_generated": False}
            )
        except Exception as exc:
            logger.warning("Slug migration failed for blog %s: %s", record.id, exc)
            await store.rollback()
            result.errors.append(f"{record.title}: {exc}")
            continue

        if updated is None:
            result.skipped.append(f"{record.title} - no longer exists")
            continue

        result.updated.append(f"{record.title}: {record.slug} → {unique_slug}")

    logger.info(
        "Slug migration finished: %d total, %d updated, %d skipped, %d errors",
        result.total,
        result.updated_count,
        result.skipped_count,
        result.errors_count,
    )
    return result
