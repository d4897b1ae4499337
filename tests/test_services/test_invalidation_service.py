"""Tests for post-write cache invalidation."""

from __future__ import annotations

import json
import logging

import httpx
import pytest

from landsite.config import Settings
from landsite.services.cache_policy import ContentCategory
from landsite.services.invalidation_service import (
    HttpRevalidator,
    Invalidator,
    MemoryRevalidator,
    create_revalidator,
    normalize_image_path,
)


class FailingRevalidator:
    def __init__(self) -> None:
        self.attempts: list[str] = []

    async def revalidate(self, path: str) -> None:
        self.attempts.append(path)
        raise ConnectionError("cache layer down")


class TestNormalizeImagePath:
    def test_absolute_url_keeps_path(self) -> None:
        assert normalize_image_path("https://cdn.example.com/api/images/abc123") == (
            "/api/images/abc123"
        )

    def test_bare_id_goes_under_image_route(self) -> None:
        assert normalize_image_path("abc123") == "/api/images/abc123"

    def test_path_kept(self) -> None:
        assert normalize_image_path("/uploads/hero.jpg") == "/uploads/hero.jpg"

    def test_custom_prefix(self) -> None:
        assert normalize_image_path("abc123", "/media") == "/media/abc123"

    def test_origin_only_url_is_root(self) -> None:
        assert normalize_image_path("https://cdn.example.com") == "/"
        assert normalize_image_path("http://cdn.example.com?v=2") == "/"

    def test_id_starting_with_http_is_prefixed(self) -> None:
        assert normalize_image_path("http") == "/api/images/http"
        assert normalize_image_path("httpx-image") == "/api/images/httpx-image"


class TestMemoryRevalidator:
    async def test_version_bumps(self) -> None:
        revalidator = MemoryRevalidator()
        assert revalidator.version("/api/projects") == 0
        await revalidator.revalidate("/api/projects")
        await revalidator.revalidate("/api/projects")
        assert revalidator.version("/api/projects") == 2
        assert list(revalidator.stale_paths) == ["/api/projects", "/api/projects"]

    async def test_history_is_bounded(self) -> None:
        revalidator = MemoryRevalidator(history=2)
        for path in ("/api/projects", "/api/services", "/api/banners", "/api/projects"):
            await revalidator.revalidate(path)
        assert list(revalidator.stale_paths) == ["/api/banners", "/api/projects"]
        assert revalidator.version("/api/projects") == 2
        assert revalidator.version("/api/services") == 1


class TestInvalidator:
    async def test_invalidate_category(self) -> None:
        revalidator = MemoryRevalidator()
        invalidator = Invalidator(revalidator)
        path = await invalidator.invalidate(ContentCategory.PAGE_ASSETS)
        assert path == "/api/page-assets"
        assert list(revalidator.stale_paths) == ["/api/page-assets"]

    async def test_invalidate_image_url(self) -> None:
        revalidator = MemoryRevalidator()
        invalidator = Invalidator(revalidator)
        path = await invalidator.invalidate_image("https://cdn.example.com/api/images/abc123")
        assert path == "/api/images/abc123"
        assert list(revalidator.stale_paths) == ["/api/images/abc123"]

    async def test_empty_image_is_noop(self) -> None:
        revalidator = MemoryRevalidator()
        invalidator = Invalidator(revalidator)
        assert await invalidator.invalidate_image("") is None
        assert await invalidator.invalidate_image(None) is None
        assert list(revalidator.stale_paths) == []

    async def test_invalidate_images_dedupes(self) -> None:
        revalidator = MemoryRevalidator()
        invalidator = Invalidator(revalidator)
        await invalidator.invalidate_images("abc", None, "abc", "def", "")
        assert list(revalidator.stale_paths) == ["/api/images/abc", "/api/images/def"]

    async def test_failure_logged_not_raised(self, caplog) -> None:
        revalidator = FailingRevalidator()
        invalidator = Invalidator(revalidator)

        with caplog.at_level(logging.ERROR, logger="landsite.services.invalidation_service"):
            path = await invalidator.invalidate(ContentCategory.BLOGS)

        assert path == "/api/blogs"
        assert revalidator.attempts == ["/api/blogs"]
        assert "cache layer down" in caplog.text
        assert any(record.levelno == logging.ERROR for record in caplog.records)

    async def test_failure_does_not_stop_image_invalidation(self) -> None:
        revalidator = FailingRevalidator()
        invalidator = Invalidator(revalidator)
        await invalidator.invalidate_images("a", "b")
        assert revalidator.attempts == ["/api/images/a", "/api/images/b"]


class TestHttpRevalidator:
    async def test_posts_path_with_token(self, monkeypatch: pytest.MonkeyPatch) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"revalidated": True})

        transport = httpx.MockTransport(handler)
        real_client = httpx.AsyncClient

        def client_factory(**kwargs: object) -> httpx.AsyncClient:
            return real_client(transport=transport, **kwargs)

        monkeypatch.setattr(httpx, "AsyncClient", client_factory)

        revalidator = HttpRevalidator("https://site.test/api/revalidate", token="s3cret")
        await revalidator.revalidate("/api/projects")

        assert len(seen) == 1
        assert seen[0].method == "POST"
        assert str(seen[0].url) == "https://site.test/api/revalidate"
        assert seen[0].headers["Authorization"] == "Bearer s3cret"
        assert json.loads(seen[0].content) == {"path": "/api/projects"}

    async def test_error_status_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        transport = httpx.MockTransport(lambda request: httpx.Response(500))
        real_client = httpx.AsyncClient

        def client_factory(**kwargs: object) -> httpx.AsyncClient:
            return real_client(transport=transport, **kwargs)

        monkeypatch.setattr(httpx, "AsyncClient", client_factory)

        revalidator = HttpRevalidator("https://site.test/api/revalidate")
        with pytest.raises(httpx.HTTPStatusError):
            await revalidator.revalidate("/api/projects")


class TestCreateRevalidator:
    def test_memory_by_default(self) -> None:
        assert isinstance(create_revalidator(Settings(_env_file=None)), MemoryRevalidator)

    def test_http_when_url_configured(self) -> None:
        settings = Settings(
            _env_file=None,
            revalidate_url="https://site.test/api/revalidate",
            revalidate_token="tok",
            revalidate_timeout_seconds=2.5,
        )
        revalidator = create_revalidator(settings)
        assert isinstance(revalidator, HttpRevalidator)
        assert revalidator.token == "tok"
        assert revalidator.timeout == 2.5
