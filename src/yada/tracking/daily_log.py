"""Date-indexed consumption log with snapshot undo.

Every mutation persists the whole log to ``daily_logs.txt`` immediately and
pushes a copy of the pre-mutation state onto an undo stack. Storage errors
are logged, never raised: the in-memory log stays authoritative even if it
no longer matches the file.

File format, one record per line, dates ascending::

    <YYYY-MM-DD>|<foodId>|<servings>
"""

from __future__ import annotations

import logging
from collections import deque
from datetime import date
from pathlib import Path
from typing import Optional, Union

from yada.config import get_settings
from yada.foods.models import Food
from yada.tracking.models import ConsumptionRecord

logger = logging.getLogger(__name__)

Snapshot = dict[date, tuple[ConsumptionRecord, ...]]

_UNSET = object()


class DailyLog:
    """Consumption records grouped by date, with undo.

    The undo stack keeps every snapshot for the life of the instance unless
    ``max_undo`` is given (or configured under ``log.max_undo``), in which
    case the oldest snapshots are discarded.
    """

    def __init__(
        self,
        path: Optional[Union[str, Path]] = None,
        max_undo=_UNSET,
    ) -> None:
        settings = get_settings()
        self.path = Path(path) if path is not None else settings.storage.log_path
        if max_undo is _UNSET:
            max_undo = settings.log.max_undo
        self._entries: dict[date, list[ConsumptionRecord]] = {}
        self._undo_stack: deque[Snapshot] = deque(maxlen=max_undo)
        self._food_ids: dict[str, str] = {}
        self._loaded = False

    def _intern(self, food_id: str) -> str:
        return self._food_ids.setdefault(food_id, food_id)

    def _ensure_loaded(self) -> None:
        if self._loaded:
            return
        try:
            self.load()
        except (OSError, UnicodeDecodeError) as exc:
            logger.error("Error loading logs from %s: %s", self.path, exc)
        self._loaded = True

    def _snapshot(self) -> Snapshot:
        return {day: tuple(records) for day, records in self._entries.items()}

    def _restore(self, snapshot: Snapshot) -> None:
        self._entries = {day: list(records) for day, records in snapshot.items()}

    def _try_save(self, context: str) -> bool:
        try:
            self.save()
        except OSError as exc:
            logger.error("Error %s: %s", context, exc)
            return False
        return True

    def add_entry(self, food: Food, servings: float, day: date) -> None:
        """Log ``servings`` of ``food`` on ``day`` and persist."""
        if food is None:
            raise ValueError("Food cannot be None")
        self._ensure_loaded()
        record = ConsumptionRecord(self._intern(food.id), servings, day)

        snapshot = self._snapshot()
        self._entries.setdefault(day, []).append(record)

        if not self._try_save("saving daily logs"):
            return
        self._undo_stack.append(snapshot)

    def remove_entry(self, day: date, record: ConsumptionRecord) -> bool:
        """Remove every record on ``day`` equal to ``record``.

        Returns:
            True if something was removed and the log was saved
        """
        self._ensure_loaded()
        records = self._entries.get(day)
        if records is None:
            return False

        snapshot = self._snapshot()
        remaining = [r for r in records if r != record]
        if len(remaining) == len(records):
            return False

        if remaining:
            self._entries[day] = remaining
        else:
            del self._entries[day]

        if not self._try_save("saving daily logs"):
            return False
        self._undo_stack.append(snapshot)
        return True

    def entries_for_date(self, day: date) -> list[ConsumptionRecord]:
        self._ensure_loaded()
        return list(self._entries.get(day, ()))

    def all_entries(self) -> dict[date, list[ConsumptionRecord]]:
        """Every record grouped by date, dates ascending."""
        self._ensure_loaded()
        return {day: list(self._entries[day]) for day in sorted(self._entries)}

    def undo_last(self) -> None:
        """Restore the state before the most recent mutation. No-op if none."""
        self._ensure_loaded()
        if not self._undo_stack:
            return
        self._restore(self._undo_stack.pop())
        self._try_save("during undo save")

    def can_undo(self) -> bool:
        return bool(self._undo_stack)

    def save(self) -> None:
        """Write the log to its file.

        Raises:
            OSError: if the file cannot be written
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w") as f:
            for day in sorted(self._entries):
                for record in self._entries[day]:
                    f.write(f"{day.isoformat()}|{record.food_id}|{float(record.servings)}\n")

    def load(self) -> None:
        """Replace in-memory state with the file contents.

        A missing file leaves the state untouched. Lines that do not have
        exactly three fields are skipped; lines with a bad date or servings
        value are skipped with a warning. Undecodable bytes are replaced
        rather than failing the load.

        Raises:
            OSError: if the file exists but cannot be read
        """
        if not self.path.exists():
            self._loaded = True
            return

        with open(self.path, errors="replace") as f:
            lines = f.read().splitlines()

        self._entries.clear()
        for line in lines:
            parts = line.split("|")
            if len(parts) != 3:
                continue
            try:
                day = date.fromisoformat(parts[0])
                servings = float(parts[2])
            except ValueError:
                logger.warning("Error parsing log entry: %s", line)
                continue
            record = ConsumptionRecord(self._intern(parts[1]), servings, day)
            self._entries.setdefault(day, []).append(record)
        self._loaded = True
