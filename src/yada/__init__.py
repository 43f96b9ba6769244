"""Food catalog, consumption log and calorie-target profile with flat-file storage."""

from __future__ import annotations

from yada.foods import BasicFood, CompositeFood, Food, FoodCatalog
from yada.profiles import ActivityLevel, CalorieMethod, ProfileEntry, UserProfile
from yada.tracking import ConsumptionRecord, DailyLog

__all__ = [
    "ActivityLevel",
    "BasicFood",
    "CalorieMethod",
    "CompositeFood",
    "ConsumptionRecord",
    "DailyLog",
    "Food",
    "FoodCatalog",
    "ProfileEntry",
    "UserProfile",
]
