"""Health check endpoint."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Response
from pydantic import BaseModel

from landsite import __version__
from landsite.api.deps import get_blog_repository
from landsite.repositories.blog import BlogRepository

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    status: str
    version: str
    database: str
    placeholder_slugs: int | None = None


@router.get("/api/health", response_model=HealthResponse)
async def health_check(
    response: Response,
    repo: Annotated[BlogRepository, Depends(get_blog_repository)],
) -> HealthResponse:
    """Report database reachability and how many posts still await slug migration."""
    response.headers["Cache-Control"] = "no-store"
    try:
        placeholders = await repo.count_placeholder_slugs()
    except Exception:
        logger.warning("Health check database query failed", exc_info=True)
        return HealthResponse(status="degraded", version=__version__, database="error")

    return HealthResponse(
        status="ok",
        version=__version__,
        database="ok",
        placeholder_slugs=placeholders,
    )
