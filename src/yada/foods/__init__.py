"""Food model and catalog.

Key components:
- BasicFood / CompositeFood entities with keyword search
- FoodCatalog with the two-pass foods.txt loader
"""

from __future__ import annotations

from yada.foods.catalog import FoodCatalog, FoodDataSource
from yada.foods.models import BasicFood, CompositeFood, Food

__all__ = [
    "BasicFood",
    "CompositeFood",
    "Food",
    "FoodCatalog",
    "FoodDataSource",
]
