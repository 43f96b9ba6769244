"""Pytest fixtures for yada tests."""

from __future__ import annotations

import pytest

from yada.config import settings as settings_module
from yada.config.settings import Settings, StorageConfig
from yada.foods import BasicFood, CompositeFood, FoodCatalog


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Point every data file at a per-test temporary directory."""
    settings = Settings(storage=StorageConfig(data_dir=tmp_path))
    monkeypatch.setattr(settings_module, "_settings", settings)
    return settings


@pytest.fixture
def apple():
    return BasicFood("Apple", ["fruit", "snack"], "1 medium", 80.0, 0.5, 21.0, 0.3)


@pytest.fixture
def bagel():
    return BasicFood("Bagel", ["bread", "breakfast"], "1 bagel", 190.0, 7.0, 37.0, 1.0)


@pytest.fixture
def sample_catalog(apple, bagel):
    """Catalog with two basic foods and a composite built from them."""
    catalog = FoodCatalog()
    catalog.add(apple)
    catalog.add(bagel)

    lunch = CompositeFood("Lunch", ["meal", "Lunch"], "1 plate")
    lunch.add_component(apple, 2.0)
    lunch.add_component(bagel, 1.0)
    catalog.add(lunch)
    return catalog
