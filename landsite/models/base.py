"""Declarative base and shared column helpers."""

from __future__ import annotations

import secrets
from datetime import UTC, datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

OBJECT_ID_LENGTH = 24


def new_object_id() -> str:
    """Return a fresh 24-character lowercase hex document id."""
    return secrets.token_hex(OBJECT_ID_LENGTH // 2)


def utc_now() -> datetime:
    return datetime.now(UTC)


class Base(DeclarativeBase):
    pass


class DocumentMixin:
    """Id and timestamp columns shared by every stored document."""

    id: Mapped[str] = mapped_column(
        String(OBJECT_ID_LENGTH), primary_key=True, default=new_object_id
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now, onupdate=utc_now
    )
