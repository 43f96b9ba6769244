"""Consumption tracking.

Key components:
- ConsumptionRecord value type
- DailyLog with auto-save and snapshot undo
- Helpers that recompute profile calorie totals from the log
"""

from __future__ import annotations

from yada.tracking.daily_log import DailyLog
from yada.tracking.models import ConsumptionRecord
from yada.tracking.reconcile import calories_for_records, sync_consumed_calories

__all__ = [
    "ConsumptionRecord",
    "DailyLog",
    "calories_for_records",
    "sync_consumed_calories",
]
