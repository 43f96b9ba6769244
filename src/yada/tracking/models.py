"""Data models for the consumption log."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class ConsumptionRecord:
    """One logged instance of eating a food.

    Records compare equal when food id, servings and date all match.
    """

    food_id: str
    servings: float
    date: date
