"""Tests for model/catalog.py."""

from __future__ import annotations

from awardodds.model.catalog import (
    CATEGORY_BY_ID,
    CATEGORY_DEFINITIONS,
    create_categories,
    display_limit,
    display_title,
    is_person_category,
)
from awardodds.shared.enums import CategoryId


class TestCatalog:
    def test_twenty_four_unique_categories(self):
        ids = [d.id for d in CATEGORY_DEFINITIONS]
        assert len(ids) == 24
        assert len(set(ids)) == 24

    def test_backtested_categories_present(self):
        for category_id in CategoryId:
            assert category_id.value in CATEGORY_BY_ID

    def test_picture_and_director(self):
        assert CATEGORY_BY_ID["picture"].nominees == 10
        assert CATEGORY_BY_ID["picture"].winner_base == 0.16
        assert CATEGORY_BY_ID["director"].nominees == 5
        assert CATEGORY_BY_ID["director"].winner_base == 0.24

    def test_create_categories_fresh_and_empty(self):
        first = create_categories()
        second = create_categories()
        assert len(first) == 24
        assert all(c.candidates == [] for c in first)
        first[0].candidates.append("x")
        assert second[0].candidates == []


class TestDisplayHelpers:
    def test_person_categories(self):
        assert is_person_category("director")
        assert is_person_category("supporting-actress")
        assert not is_person_category("picture")
        assert not is_person_category("original-screenplay")

    def test_display_limit(self):
        assert display_limit("picture") == 10
        assert display_limit("actor") == 5
        assert display_limit("sound") == 5

    def test_display_title(self):
        assert display_title("actress", "Emma Stone", "Poor Things") == "Emma Stone (Poor Things)"
        assert display_title("picture", "Poor Things", "Searchlight") == "Poor Things"
