"""Tests for application settings validation."""

from __future__ import annotations

import pytest

from landsite.config import DEFAULT_ADMIN_API_KEY, Settings

STRONG_KEY = "k" * 32


class TestRuntimeSecurity:
    def test_debug_skips_checks(self) -> None:
        Settings(_env_file=None, debug=True).validate_runtime_security()

    def test_default_key_rejected_in_production(self) -> None:
        settings = Settings(_env_file=None, admin_api_key=DEFAULT_ADMIN_API_KEY)
        with pytest.raises(ValueError, match="ADMIN_API_KEY"):
            settings.validate_runtime_security()

    def test_short_key_rejected(self) -> None:
        settings = Settings(_env_file=None, admin_api_key="short-key")
        with pytest.raises(ValueError, match="ADMIN_API_KEY"):
            settings.validate_runtime_security()

    def test_negative_override_rejected(self) -> None:
        settings = Settings(
            _env_file=None,
            admin_api_key=STRONG_KEY,
            cache_duration_overrides={"blogs": -1},
        )
        with pytest.raises(ValueError, match="'blogs'"):
            settings.validate_runtime_security()

    def test_strong_configuration_accepted(self) -> None:
        Settings(_env_file=None, admin_api_key=STRONG_KEY).validate_runtime_security()


class TestSettingsFromEnvironment:
    def test_reads_env_vars(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ADMIN_API_KEY", STRONG_KEY)
        monkeypatch.setenv("CACHE_DURATION_OVERRIDES", '{"testimonials": 120}')
        monkeypatch.setenv("REVALIDATE_URL", "https://site.test/api/revalidate")
        settings = Settings(_env_file=None)
        assert settings.admin_api_key == STRONG_KEY
        assert settings.cache_duration_overrides == {"testimonials": 120}
        assert settings.revalidate_url == "https://site.test/api/revalidate"

    def test_public_site_url_strips_trailing_slash(self) -> None:
        settings = Settings(_env_file=None, site_url="https://almohtaref-sa.com//")
        assert settings.public_site_url == "https://almohtaref-sa.com"

    def test_port_range_enforced(self) -> None:
        with pytest.raises(ValueError):
            Settings(_env_file=None, port=0)
