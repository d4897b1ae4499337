"""Tests for partial-update request models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from landsite.schemas.blog import BlogUpdate
from landsite.schemas.content import (
    GalleryImageUpdate,
    LinkMappingCreate,
    SeoConfigUpdate,
    ServiceUpdate,
)


class TestPatchModel:
    def test_omitted_fields_are_not_in_the_patch(self) -> None:
        body = ServiceUpdate.model_validate({"order": 2})
        assert body.model_dump(exclude_unset=True) == {"order": 2}

    def test_null_kept_for_nullable_field(self) -> None:
        body = ServiceUpdate.model_validate({"image": None})
        assert body.model_dump(exclude_unset=True) == {"image": None}

    def test_null_rejected_for_required_field(self) -> None:
        with pytest.raises(ValidationError, match="title cannot be null"):
            ServiceUpdate.model_validate({"title": None})

    def test_nullable_sets_are_per_model(self) -> None:
        body = GalleryImageUpdate.model_validate({"alt": None, "alt_ar": None})
        assert body.model_dump(exclude_unset=True) == {"alt": None, "alt_ar": None}
        with pytest.raises(ValidationError, match="image cannot be null"):
            GalleryImageUpdate.model_validate({"image": None})

    def test_blog_excerpt_nullable_but_not_title(self) -> None:
        assert BlogUpdate.model_validate({"excerpt": None}).model_dump(exclude_unset=True) == {
            "excerpt": None
        }
        with pytest.raises(ValidationError, match="slug cannot be null"):
            BlogUpdate.model_validate({"slug": None})


class TestSeoSchemas:
    def test_seo_config_limits(self) -> None:
        with pytest.raises(ValidationError):
            SeoConfigUpdate.model_validate({"max_internal_links_per_post": 101})
        with pytest.raises(ValidationError, match="site_name cannot be null"):
            SeoConfigUpdate.model_validate({"site_name": None})
        body = SeoConfigUpdate.model_validate({"twitter_handle": None})
        assert body.model_dump(exclude_unset=True) == {"twitter_handle": None}

    def test_link_mapping_defaults(self) -> None:
        mapping = LinkMappingCreate(keyword="lawn care", url="/services/lawn")
        assert mapping.priority == 0
        assert mapping.max_occurrences == 1
        assert mapping.case_sensitive is False
        assert mapping.is_active is True

    def test_link_mapping_needs_at_least_one_occurrence(self) -> None:
        with pytest.raises(ValidationError):
            LinkMappingCreate(keyword="lawn", url="/x", max_occurrences=0)
