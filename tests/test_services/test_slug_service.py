"""Tests for slug generation and uniqueness resolution."""

from __future__ import annotations

import pytest
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from landsite.services.slug_service import (
    derive_slug,
    fallback_slug,
    generate_slug,
    is_fallback_slug,
    resolve_unique_slug,
)

PROPERTY_SETTINGS = settings(
    max_examples=300,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow],
)

# Mix of ASCII, Arabic, punctuation and whitespace to stress every rule.
_TITLE_TEXT = st.text(
    alphabet=st.one_of(
        st.characters(min_codepoint=0x20, max_codepoint=0x7E),
        st.characters(min_codepoint=0x0600, max_codepoint=0x06FF),
        st.sampled_from(["\t", "\n", "_", "-", " ", "é", "€", "—"]),
    ),
    max_size=60,
)


class TestGenerateSlug:
    def test_basic_title(self) -> None:
        assert generate_slug("Garden Tips") == "Garden-Tips"

    def test_case_preserved(self) -> None:
        assert generate_slug("My GREAT Garden") == "My-GREAT-Garden"

    def test_strips_whitespace(self) -> None:
        assert generate_slug("  garden tips  ") == "garden-tips"

    def test_punctuation_removed(self) -> None:
        assert generate_slug("Hello, World! How's it?") == "Hello-World-Hows-it"

    def test_underscores_become_hyphens(self) -> None:
        assert generate_slug("snake_case__title") == "snake-case-title"

    def test_multiple_hyphens_collapsed(self) -> None:
        assert generate_slug("garden---tips") == "garden-tips"

    def test_hyphen_runs_from_removed_symbols_collapsed(self) -> None:
        assert generate_slug("lawn - & - care") == "lawn-care"

    def test_leading_trailing_hyphens_stripped(self) -> None:
        assert generate_slug("---garden tips---") == "garden-tips"

    def test_arabic_preserved(self) -> None:
        assert generate_slug("حديقة منزلية") == "حديقة-منزلية"

    def test_mixed_arabic_and_english(self) -> None:
        assert generate_slug("تنسيق حدائق Riyadh 2026") == "تنسيق-حدائق-Riyadh-2026"

    def test_arabic_with_punctuation(self) -> None:
        assert generate_slug("نصائح للحديقة!") == "نصائح-للحديقة"

    def test_non_arabic_non_ascii_letters_dropped(self) -> None:
        assert generate_slug("café olé") == "caf-ol"

    def test_empty_string(self) -> None:
        assert generate_slug("") == ""

    def test_punctuation_only(self) -> None:
        assert generate_slug("!!!") == ""

    def test_whitespace_only(self) -> None:
        assert generate_slug(" \t\n ") == ""

    def test_tabs_and_newlines_handled(self) -> None:
        assert generate_slug("garden\ttips\nnew") == "garden-tips-new"


class TestGenerateSlugProperties:
    @PROPERTY_SETTINGS
    @given(title=_TITLE_TEXT)
    def test_idempotent(self, title: str) -> None:
        slug = generate_slug(title)
        assert generate_slug(slug) == slug

    @PROPERTY_SETTINGS
    @given(title=_TITLE_TEXT)
    def test_no_boundary_hyphens(self, title: str) -> None:
        slug = generate_slug(title)
        assert not slug.startswith("-")
        assert not slug.endswith("-")

    @PROPERTY_SETTINGS
    @given(title=_TITLE_TEXT)
    def test_no_doubled_hyphens(self, title: str) -> None:
        assert "--" not in generate_slug(title)

    @PROPERTY_SETTINGS
    @given(title=_TITLE_TEXT)
    def test_only_allowed_characters(self, title: str) -> None:
        for ch in generate_slug(title):
            assert ch == "-" or (ch.isascii() and ch.isalnum()) or "\u0600" <= ch <= "\u06ff"


class TestFallbackSlug:
    def test_fallback_form(self) -> None:
        assert fallback_slug("507f1f77bcf86cd799439011") == "blog-507f1f77bcf86cd799439011"

    def test_recognizes_object_id_fallback(self) -> None:
        assert is_fallback_slug("blog-507f1f77bcf86cd799439011")

    def test_recognizes_uppercase_hex(self) -> None:
        assert is_fallback_slug("blog-507F1F77BCF86CD799439011")

    def test_rejects_title_slug(self) -> None:
        assert not is_fallback_slug("blog-my-article")

    def test_rejects_wrong_length(self) -> None:
        assert not is_fallback_slug("blog-507f1f77bcf86cd79943901")
        assert not is_fallback_slug("blog-507f1f77bcf86cd7994390111")

    def test_rejects_suffixed_fallback(self) -> None:
        assert not is_fallback_slug("blog-507f1f77bcf86cd799439011-1")

    def test_rejects_empty(self) -> None:
        assert not is_fallback_slug("")
        assert not is_fallback_slug(None)

    def test_derive_uses_title(self) -> None:
        assert derive_slug("Garden Tips", "abc") == ("Garden-Tips", False)

    def test_derive_falls_back_on_empty_title(self) -> None:
        assert derive_slug("!!!", "507f1f77bcf86cd799439011") == (
            "blog-507f1f77bcf86cd799439011",
            True,
        )


def _owned_by_others(owners: dict[str, str]):
    """Build an existence predicate from a slug -> owner id mapping."""
    calls: list[tuple[str, str]] = []

    async def exists(slug: str, exclude_id: str) -> bool:
        calls.append((slug, exclude_id))
        owner = owners.get(slug)
        return owner is not None and owner != exclude_id

    exists.calls = calls  # type: ignore[attr-defined]
    return exists


class TestResolveUniqueSlug:
    async def test_free_candidate_returned_unchanged(self) -> None:
        exists = _owned_by_others({})
        assert await resolve_unique_slug("garden-tips", "new", exists) == "garden-tips"

    async def test_appends_first_free_suffix(self) -> None:
        exists = _owned_by_others({"garden-tips": "a", "garden-tips-1": "b"})
        assert await resolve_unique_slug("garden-tips", "new", exists) == "garden-tips-2"

    async def test_suffix_counts_from_base(self) -> None:
        exists = _owned_by_others({"garden-tips": "a", "garden-tips-1": "b", "garden-tips-2": "c"})
        assert await resolve_unique_slug("garden-tips", "new", exists) == "garden-tips-3"

    async def test_own_slug_is_not_a_collision(self) -> None:
        exists = _owned_by_others({"garden-tips": "self"})
        assert await resolve_unique_slug("garden-tips", "self", exists) == "garden-tips"

    async def test_passes_entity_id_to_predicate(self) -> None:
        exists = _owned_by_others({"garden-tips": "a"})
        await resolve_unique_slug("garden-tips", "me", exists)
        assert exists.calls == [("garden-tips", "me"), ("garden-tips-1", "me")]

    async def test_empty_candidate_uses_fallback(self) -> None:
        exists = _owned_by_others({})
        entity_id = "507f1f77bcf86cd799439011"
        assert await resolve_unique_slug("", entity_id, exists) == f"blog-{entity_id}"

    async def test_predicate_errors_propagate(self) -> None:
        async def broken(slug: str, exclude_id: str) -> bool:
            raise ConnectionError("store unavailable")

        with pytest.raises(ConnectionError):
            await resolve_unique_slug("garden-tips", "new", broken)
