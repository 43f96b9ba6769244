"""Tests for FoodCatalog storage and search."""

from __future__ import annotations

import pytest

from yada.foods import BasicFood, CompositeFood, FoodCatalog


class StaticSource:
    def __init__(self, foods):
        self.foods = foods

    def fetch_foods(self):
        return list(self.foods)


class TestCatalogMutation:
    """Tests for add/remove and ordering."""

    def test_add_preserves_order(self, sample_catalog):
        assert [f.id for f in sample_catalog.all_foods()] == ["Apple", "Bagel", "Lunch"]
        assert len(sample_catalog) == 3

    def test_add_none_rejected(self):
        catalog = FoodCatalog()
        with pytest.raises(ValueError):
            catalog.add(None)
        assert len(catalog) == 0

    def test_remove_returns_whether_found(self, sample_catalog, apple):
        assert sample_catalog.remove(apple) is True
        assert sample_catalog.remove(apple) is False
        assert sample_catalog.get_by_id("Apple") is None

    def test_remove_none_rejected(self, sample_catalog):
        with pytest.raises(ValueError):
            sample_catalog.remove(None)

    def test_remove_matches_by_identity(self, sample_catalog):
        lookalike = BasicFood("Apple", ["fruit", "snack"], "1 medium", 80.0, 0.5, 21.0, 0.3)
        assert sample_catalog.remove(lookalike) is False
        assert len(sample_catalog) == 3

    def test_all_foods_is_copy(self, sample_catalog):
        sample_catalog.all_foods().clear()
        assert len(sample_catalog) == 3

    def test_variant_filters(self, sample_catalog):
        assert [f.id for f in sample_catalog.basic_foods()] == ["Apple", "Bagel"]
        assert [f.id for f in sample_catalog.composite_foods()] == ["Lunch"]

    def test_import_from_source_appends(self, sample_catalog):
        extra = BasicFood("Kiwi", ["fruit"], "1", 42, 0.8, 10, 0.4)
        sample_catalog.import_from_source(StaticSource([extra]))
        assert sample_catalog.all_foods()[-1] is extra

    def test_import_from_none_rejected(self, sample_catalog):
        with pytest.raises(ValueError):
            sample_catalog.import_from_source(None)


class TestCatalogLookup:
    """Tests for keyword search and id lookup."""

    def test_empty_keywords_return_everything(self, sample_catalog):
        assert len(sample_catalog.find_by_keywords([], match_all=True)) == 3
        assert len(sample_catalog.find_by_keywords([], match_all=False)) == 3

    def test_match_all(self, sample_catalog):
        result = sample_catalog.find_by_keywords(["fruit", "snack"], match_all=True)
        assert [f.id for f in result] == ["Apple"]

    def test_match_any(self, sample_catalog):
        result = sample_catalog.find_by_keywords(["fruit", "BREAD"], match_all=False)
        assert [f.id for f in result] == ["Apple", "Bagel"]

    def test_no_match(self, sample_catalog):
        assert sample_catalog.find_by_keywords(["pizza"], match_all=False) == []

    def test_get_by_id_missing(self, sample_catalog):
        assert sample_catalog.get_by_id("Pizza") is None

    def test_duplicate_ids_return_first(self, sample_catalog, apple):
        second = BasicFood("Apple", ["green"], "1 small", 60, 0.3, 15, 0.2)
        sample_catalog.add(second)
        assert sample_catalog.get_by_id("Apple") is apple

    def test_composite_calories_visible_through_catalog(self, sample_catalog):
        lunch = sample_catalog.get_by_id("Lunch")
        assert isinstance(lunch, CompositeFood)
        assert lunch.calories_per_serving == pytest.approx(350.0)
