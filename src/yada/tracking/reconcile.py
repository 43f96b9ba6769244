"""Keep profile consumed-calorie totals in step with the consumption log."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Iterable, Optional

from yada.foods.catalog import FoodCatalog
from yada.tracking.daily_log import DailyLog
from yada.tracking.models import ConsumptionRecord

if TYPE_CHECKING:
    from yada.profiles.user_profile import UserProfile


def calories_for_records(
    records: Iterable[ConsumptionRecord],
    catalog: FoodCatalog,
) -> float:
    """Sum calories for a set of records.

    Records naming a food that is no longer in the catalog count as zero.
    """
    total = 0.0
    for record in records:
        food = catalog.get_by_id(record.food_id)
        if food is not None:
            total += food.calories_per_serving * record.servings
    return total


def sync_consumed_calories(
    profile: UserProfile,
    log: DailyLog,
    catalog: FoodCatalog,
    dates: Optional[Iterable[date]] = None,
) -> dict[date, float]:
    """Overwrite consumed calories on the profile with totals from the log.

    Args:
        profile: Profile whose entries are updated in memory (not saved)
        log: Source of consumption records
        catalog: Used to resolve food ids to calories
        dates: Dates to recompute. If None, every date present in the log.

    Returns:
        The recomputed total per date
    """
    if dates is None:
        dates = log.all_entries().keys()

    totals: dict[date, float] = {}
    for day in dates:
        total = calories_for_records(log.entries_for_date(day), catalog)
        profile.set_consumed_calories(day, total)
        totals[day] = total
    return totals
