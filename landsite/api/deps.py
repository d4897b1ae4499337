"""Shared API dependencies: settings, DB session, invalidation, admin key."""

from __future__ import annotations

import secrets
from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from landsite.config import Settings
from landsite.repositories.blog import BlogRepository
from landsite.services.invalidation_service import Invalidator


def get_settings(request: Request) -> Settings:
    """Get application settings from app state."""
    settings: Settings = request.app.state.settings
    return settings


def get_invalidator(request: Request) -> Invalidator:
    """Get the cache invalidator from app state."""
    invalidator: Invalidator = request.app.state.invalidator
    return invalidator


async def get_session(request: Request) -> AsyncGenerator[AsyncSession]:
    """Get a database session."""
    session_factory = request.app.state.session_factory
    async with session_factory() as session:
        yield session


async def get_blog_repository(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> BlogRepository:
    return BlogRepository(session)


def has_admin_key(
    request: Request,
    settings: Annotated[Settings, Depends(get_settings)],
) -> bool:
    """True if the request carries the shared admin key."""
    supplied = request.headers.get(settings.admin_key_header)
    if not supplied:
        return False
    return secrets.compare_digest(supplied.encode(), settings.admin_api_key.encode())


async def require_admin(
    is_admin: Annotated[bool, Depends(has_admin_key)],
) -> None:
    """Require the shared admin key. Raises 401 otherwise."""
    if not is_admin:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Admin key required",
        )
