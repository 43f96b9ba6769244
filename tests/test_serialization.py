"""Tests for the foods.txt format and the two-pass loader."""

from __future__ import annotations

import pytest

from yada.foods import BasicFood, CompositeFood, FoodCatalog
from yada.foods.serialization import format_food, parse_component


class TestFormatFood:
    """Tests for single-line rendering."""

    def test_basic_line(self, apple):
        assert format_food(apple) == "BASIC:Apple:fruit,snack:1 medium:80.0:0.5:21.0:0.3"

    def test_integer_values_render_as_floats(self):
        food = BasicFood("Egg", ["egg"], "1 large", 70, 6, 0, 5)
        assert format_food(food) == "BASIC:Egg:egg:1 large:70.0:6.0:0.0:5.0"

    def test_composite_line_lists_components_in_order(self, sample_catalog):
        lunch = sample_catalog.get_by_id("Lunch")
        assert format_food(lunch) == "COMPOSITE:Lunch:meal,Lunch:1 plate:Apple=2.0:Bagel=1.0"

    def test_empty_composite_has_no_trailing_fields(self):
        meal = CompositeFood("Meal", ["meal"], "1 plate")
        assert format_food(meal) == "COMPOSITE:Meal:meal:1 plate"

    def test_unknown_variant_rejected(self):
        with pytest.raises(TypeError):
            format_food(object())

    def test_parse_component(self):
        assert parse_component("Apple=2.5") == ("Apple", 2.5)
        with pytest.raises(ValueError):
            parse_component("Apple")


class TestCatalogRoundTrip:
    """Tests for save followed by load."""

    def test_basic_foods_round_trip(self, tmp_path, apple, bagel):
        catalog = FoodCatalog()
        catalog.add(apple)
        catalog.add(bagel)
        path = tmp_path / "foods.txt"
        catalog.save(path)

        loaded = FoodCatalog()
        loaded.load(path)

        def as_tuple(f):
            return (f.id, f.keywords, f.serving_size, f.calories, f.protein, f.carbs, f.fats)

        assert [as_tuple(f) for f in loaded.all_foods()] == [as_tuple(apple), as_tuple(bagel)]

    def test_composite_round_trip(self, tmp_path, sample_catalog):
        path = tmp_path / "foods.txt"
        sample_catalog.save(path)

        loaded = FoodCatalog()
        loaded.load(path)
        lunch = loaded.get_by_id("Lunch")

        assert {f.id: s for f, s in lunch.components.items()} == {"Apple": 2.0, "Bagel": 1.0}
        assert lunch.calories_per_serving == pytest.approx(350.0)
        # components resolve to the catalog's own food objects
        assert loaded.get_by_id("Apple") in lunch.components

    def test_composite_before_its_components(self, tmp_path):
        path = tmp_path / "foods.txt"
        path.write_text(
            "COMPOSITE:Lunch:meal:1 plate:Apple=2.0:Bagel=1.0\n"
            "BASIC:Apple:fruit:1 medium:80.0:0.5:21.0:0.3\n"
            "BASIC:Bagel:bread:1 bagel:190.0:7.0:37.0:1.0\n"
        )
        catalog = FoodCatalog()
        catalog.load(path)

        assert [f.id for f in catalog.all_foods()] == ["Lunch", "Apple", "Bagel"]
        assert catalog.get_by_id("Lunch").calories_per_serving == pytest.approx(350.0)

    def test_composite_of_composite_declared_later(self, tmp_path):
        path = tmp_path / "foods.txt"
        path.write_text(
            "COMPOSITE:Dinner:meal:1 plate:Side=2.0\n"
            "COMPOSITE:Side:side:1 bowl:Apple=1.0\n"
            "BASIC:Apple:fruit:1 medium:80.0:0.5:21.0:0.3\n"
        )
        catalog = FoodCatalog()
        catalog.load(path)
        assert catalog.get_by_id("Dinner").calories_per_serving == pytest.approx(160.0)

    def test_unknown_component_dropped(self, tmp_path):
        path = tmp_path / "foods.txt"
        path.write_text(
            "BASIC:Apple:fruit:1 medium:80.0:0.5:21.0:0.3\n"
            "COMPOSITE:Lunch:meal:1 plate:Apple=1.0:Ghost=3.0\n"
        )
        catalog = FoodCatalog()
        catalog.load(path)
        lunch = catalog.get_by_id("Lunch")
        assert [f.id for f in lunch.components] == ["Apple"]

    def test_cyclic_component_dropped(self, tmp_path):
        path = tmp_path / "foods.txt"
        path.write_text(
            "COMPOSITE:A:a:1:B=1.0\n"
            "COMPOSITE:B:b:1:A=1.0\n"
        )
        catalog = FoodCatalog()
        catalog.load(path)
        a = catalog.get_by_id("A")
        b = catalog.get_by_id("B")
        assert list(a.components) == [b]
        assert b.components == {}

    def test_load_clears_existing_contents(self, tmp_path, sample_catalog):
        path = tmp_path / "foods.txt"
        path.write_text("BASIC:Kiwi:fruit:1:42.0:0.8:10.0:0.4\n")
        sample_catalog.load(path)
        assert [f.id for f in sample_catalog.all_foods()] == ["Kiwi"]

    def test_blank_and_unknown_lines_ignored(self, tmp_path):
        path = tmp_path / "foods.txt"
        path.write_text("\nOTHER:x\nBASIC:Kiwi:fruit:1:42.0:0.8:10.0:0.4\n")
        catalog = FoodCatalog()
        catalog.load(path)
        assert len(catalog) == 1

    def test_malformed_number_fails_load(self, tmp_path):
        path = tmp_path / "foods.txt"
        path.write_text("BASIC:Kiwi:fruit:1:lots:0.8:10.0:0.4\n")
        with pytest.raises(ValueError):
            FoodCatalog().load(path)

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            FoodCatalog().load(tmp_path / "absent.txt")

    def test_empty_filename_rejected(self):
        with pytest.raises(ValueError):
            FoodCatalog().save("")

    def test_default_path_from_settings(self, isolated_settings, sample_catalog):
        sample_catalog.save()
        assert isolated_settings.storage.foods_path.exists()

        loaded = FoodCatalog()
        loaded.load()
        assert len(loaded) == 3
