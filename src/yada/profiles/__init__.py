"""User profile and calorie targets.

Key components:
- ActivityLevel / CalorieMethod enums and BMR equations
- UserProfile with per-date entries carried forward from the previous day
"""

from __future__ import annotations

from yada.profiles.body_calc import (
    ActivityLevel,
    CalorieMethod,
    calculate_target_calories,
    harris_benedict_bmr,
    mifflin_st_jeor_bmr,
)
from yada.profiles.user_profile import ProfileEntry, UserProfile

__all__ = [
    "ActivityLevel",
    "CalorieMethod",
    "ProfileEntry",
    "UserProfile",
    "calculate_target_calories",
    "harris_benedict_bmr",
    "mifflin_st_jeor_bmr",
]
