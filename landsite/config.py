"""Application configuration loaded from environment variables."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ADMIN_API_KEY = "change-me-in-production"


class Settings(BaseSettings):
    """LandSite application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Core
    debug: bool = False
    expose_docs: bool = False
    site_url: str = "https://almohtaref-sa.com"

    # Database
    database_url: str = "sqlite+aiosqlite:///data/db/landsite.db"

    # Server
    host: str = "0.0.0.0"
    port: int = Field(default=8000, ge=1, le=65535)

    # CORS
    cors_origins: list[str] = Field(default_factory=list)

    # Admin
    admin_api_key: str = DEFAULT_ADMIN_API_KEY
    admin_key_header: str = "X-Admin-Key"

    # Cache policy
    admin_path_segment: str = "/admin"
    admin_request_header: str = "X-Admin-Request"
    image_route_prefix: str = "/api/images/"
    cache_duration_overrides: dict[str, int] = Field(default_factory=dict)

    # Invalidation
    revalidate_url: str = ""
    revalidate_token: str = ""
    revalidate_timeout_seconds: float = Field(default=5.0, gt=0)

    def validate_runtime_security(self) -> None:
        """Validate security-critical production settings."""
        if self.debug:
            return

        violations: list[str] = []
        if self.admin_api_key == DEFAULT_ADMIN_API_KEY or len(self.admin_api_key) < 24:
            violations.append(
                "ADMIN_API_KEY must be overridden with a high-entropy value (>=24 chars)"
            )
        for name, seconds in self.cache_duration_overrides.items():
            if seconds < 0:
                violations.append(f"Cache duration for {name!r} must not be negative")

        if violations:
            joined = "; ".join(violations)
            raise ValueError(f"Insecure production configuration: {joined}")

    @property
    def public_site_url(self) -> str:
        """Site URL without trailing slashes."""
        return self.site_url.rstrip("/")
