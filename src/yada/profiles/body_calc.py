"""Calorie target calculator.

Estimates BMR with either the Harris-Benedict or the Mifflin-St Jeor
equation and scales it by an activity multiplier to get a daily calorie
target. Inputs are metric: weight in kilograms, height in centimetres.
"""

from __future__ import annotations

from enum import Enum


class ActivityLevel(Enum):
    """Activity level multipliers for the daily calorie target."""
    SEDENTARY = 1.2                 # Little or no exercise
    LIGHTLY_ACTIVE = 1.375          # Light exercise 1-3 days/week
    MODERATELY_ACTIVE = 1.55        # Moderate exercise 3-5 days/week
    VERY_ACTIVE = 1.725             # Hard exercise 6-7 days/week
    EXTRA_ACTIVE = 1.9              # Very hard exercise, physical job

    @property
    def multiplier(self) -> float:
        return self.value


class CalorieMethod(Enum):
    """BMR equation used for calorie targets."""
    HARRIS_BENEDICT = "harris_benedict"
    MIFFLIN_ST_JEOR = "mifflin_st_jeor"


def is_male(gender: str) -> bool:
    """Case-insensitive check for "male". Anything else, empty included, is female."""
    return (gender or "").lower() == "male"


def harris_benedict_bmr(
    age: int,
    weight_kg: float,
    height_cm: float,
    gender: str,
) -> float:
    """Calculate Basal Metabolic Rate using the revised Harris-Benedict equation.

    Args:
        age: Age in years
        weight_kg: Weight in kilograms
        height_cm: Height in centimetres
        gender: "Male" or "Female" (case-insensitive)

    Returns:
        BMR in calories per day
    """
    if is_male(gender):
        return 66.5 + (13.75 * weight_kg) + (5.003 * height_cm) - (6.755 * age)
    return 655.1 + (9.563 * weight_kg) + (1.850 * height_cm) - (4.676 * age)


def mifflin_st_jeor_bmr(
    age: int,
    weight_kg: float,
    height_cm: float,
    gender: str,
) -> float:
    """Calculate Basal Metabolic Rate using the Mifflin-St Jeor equation.

    Args:
        age: Age in years
        weight_kg: Weight in kilograms
        height_cm: Height in centimetres
        gender: "Male" or "Female" (case-insensitive)

    Returns:
        BMR in calories per day
    """
    if is_male(gender):
        return (10 * weight_kg) + (6.25 * height_cm) - (5 * age) + 5
    return (10 * weight_kg) + (6.25 * height_cm) - (5 * age) - 161


BMR_FORMULAS = {
    CalorieMethod.HARRIS_BENEDICT: harris_benedict_bmr,
    CalorieMethod.MIFFLIN_ST_JEOR: mifflin_st_jeor_bmr,
}


def calculate_target_calories(
    method: CalorieMethod,
    age: int,
    weight_kg: float,
    height_cm: float,
    gender: str,
    activity_level: ActivityLevel,
) -> float:
    """Daily calorie target: BMR from ``method`` times the activity multiplier."""
    bmr = BMR_FORMULAS[method](age, weight_kg, height_cm, gender)
    return bmr * activity_level.multiplier
