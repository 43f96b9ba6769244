"""User profile with per-date body metrics and calorie targets.

Each date has its own entry. An entry is created the first time its date is
asked for, copying age, weight and activity level from the previous
calendar day when that day has an entry, and from the configured defaults
otherwise. Targets always use the profile's current calorie method at the
moment they are computed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, timedelta
from pathlib import Path
from typing import Optional, Union

from yada.config import get_settings
from yada.profiles.body_calc import (
    ActivityLevel,
    CalorieMethod,
    calculate_target_calories,
)

logger = logging.getLogger(__name__)


@dataclass
class ProfileEntry:
    """Body metrics and calorie totals for one date."""

    age: int
    weight: float  # kg
    activity_level: ActivityLevel
    target_calories: float
    consumed_calories: float = 0.0
    update_made: bool = False


def _member(enum_cls, name: str):
    try:
        return enum_cls[name]
    except KeyError:
        raise ValueError(f"Unknown {enum_cls.__name__}: {name!r}") from None


def _default_calorie_method() -> CalorieMethod:
    return CalorieMethod[get_settings().profile_defaults.calorie_method]


@dataclass
class UserProfile:
    """Name, gender, height and the date -> ProfileEntry history."""

    name: str
    gender: str
    height: float  # cm
    calorie_method: CalorieMethod = field(default_factory=_default_calorie_method)
    entries: dict[date, ProfileEntry] = field(default_factory=dict, repr=False)

    def target_calories_for(
        self,
        age: int,
        weight: float,
        activity_level: ActivityLevel,
    ) -> float:
        """Target calories for the given metrics under the current method."""
        return calculate_target_calories(
            self.calorie_method,
            age,
            weight,
            self.height,
            self.gender,
            activity_level,
        )

    def get_or_create_entry_for_date(self, day: date) -> ProfileEntry:
        """Return the entry for ``day``, creating it if needed.

        A new entry copies the previous calendar day's age, weight and
        activity level. Gaps are not bridged: if yesterday has no entry the
        configured defaults are used.
        """
        entry = self.entries.get(day)
        if entry is not None:
            return entry

        previous = self.entries.get(day - timedelta(days=1))
        if previous is not None:
            age = previous.age
            weight = previous.weight
            activity_level = previous.activity_level
        else:
            defaults = get_settings().profile_defaults
            age = defaults.age
            weight = defaults.weight_kg
            activity_level = ActivityLevel[defaults.activity_level]

        entry = ProfileEntry(
            age=age,
            weight=weight,
            activity_level=activity_level,
            target_calories=self.target_calories_for(age, weight, activity_level),
        )
        self.entries[day] = entry
        return entry

    def update_for_date(
        self,
        day: date,
        age: int,
        weight: float,
        activity_level: ActivityLevel,
    ) -> bool:
        """Overwrite the metrics for ``day`` and recompute its target.

        Returns:
            True if the entry was updated
        """
        entry = self.get_or_create_entry_for_date(day)
        if entry is None:
            return False
        entry.age = int(age)
        entry.weight = weight
        entry.activity_level = activity_level
        entry.target_calories = self.target_calories_for(
            entry.age, weight, activity_level
        )
        entry.update_made = True
        return True

    def record_consumed_calories(self, day: date, delta: float) -> None:
        """Add ``delta`` to the consumed calories for ``day``. May be negative."""
        entry = self.get_or_create_entry_for_date(day)
        entry.consumed_calories += delta

    def set_consumed_calories(self, day: date, total: float) -> None:
        self.get_or_create_entry_for_date(day).consumed_calories = total

    def calorie_information_for_date(self, day: date) -> dict[str, float]:
        entry = self.get_or_create_entry_for_date(day)
        return {
            "Target Calories": entry.target_calories,
            "Consumed Calories": entry.consumed_calories,
            "Calorie Difference": entry.target_calories - entry.consumed_calories,
        }

    def recalculate_targets(self) -> None:
        """Recompute every stored target with the current calorie method."""
        for entry in self.entries.values():
            entry.target_calories = self.target_calories_for(
                entry.age, entry.weight, entry.activity_level
            )

    def all_entries(self) -> dict[date, ProfileEntry]:
        """Entries ordered by date, ascending."""
        return {day: self.entries[day] for day in sorted(self.entries)}

    def to_lines(self) -> list[str]:
        """Render the profile in the ``key:value`` file format."""
        lines = [
            f"Name:{self.name}",
            f"Gender:{self.gender}",
            f"Height:{float(self.height)}",
            f"CalorieMethod:{self.calorie_method.name}",
        ]
        for day, entry in self.all_entries().items():
            lines.extend([
                f"EntryDate:{day.isoformat()}",
                f"Age:{int(entry.age)}",
                f"Weight:{float(entry.weight)}",
                f"ActivityLevel:{entry.activity_level.name}",
                f"TargetCalories:{float(entry.target_calories)}",
                f"ConsumedCalories:{float(entry.consumed_calories)}",
                f"UpdateMade:{str(entry.update_made).lower()}",
            ])
        return lines

    @classmethod
    def from_lines(cls, lines: list[str]) -> Optional["UserProfile"]:
        """Rebuild a profile from ``key:value`` lines.

        Entry fields attach to the most recent ``EntryDate``; an ``Age`` line
        starts the entry, and fields seen before any entry are ignored.

        Raises:
            ValueError: on a malformed number, date or enum name
        """
        profile: Optional[UserProfile] = None
        current_date: Optional[date] = None
        current: Optional[ProfileEntry] = None

        for line in lines:
            key, sep, value = line.partition(":")
            if not sep:
                continue
            if key == "Name":
                profile = cls(value, "", 0.0)
            elif key == "Gender":
                if profile is not None:
                    profile.gender = value
            elif key == "Height":
                if profile is not None:
                    profile.height = float(value)
            elif key == "CalorieMethod":
                if profile is not None:
                    profile.calorie_method = _member(CalorieMethod, value)
            elif key == "EntryDate":
                current_date = date.fromisoformat(value)
            elif key == "Age":
                if current_date is not None and profile is not None:
                    current = ProfileEntry(int(value), 0.0, ActivityLevel.SEDENTARY, 0.0)
                    profile.entries[current_date] = current
            elif current is None:
                continue
            elif key == "Weight":
                current.weight = float(value)
            elif key == "ActivityLevel":
                current.activity_level = _member(ActivityLevel, value)
            elif key == "TargetCalories":
                current.target_calories = float(value)
            elif key == "ConsumedCalories":
                current.consumed_calories = float(value)
            elif key == "UpdateMade":
                current.update_made = value.lower() == "true"

        return profile

    def save(self, path: Optional[Union[str, Path]] = None) -> None:
        """Write the profile to ``path`` (default: configured profile file).

        Raises:
            OSError: if the file cannot be written
        """
        target = Path(path) if path is not None else get_settings().storage.profile_path
        target.parent.mkdir(parents=True, exist_ok=True)
        with open(target, "w") as f:
            f.write("\n".join(self.to_lines()) + "\n")

    @classmethod
    def load(cls, path: Optional[Union[str, Path]] = None) -> Optional["UserProfile"]:
        """Read a profile from ``path``.

        Returns:
            The profile, or None if the file does not exist or has no Name line
        """
        source = Path(path) if path is not None else get_settings().storage.profile_path
        if not source.exists():
            return None
        with open(source) as f:
            lines = f.read().splitlines()
        profile = cls.from_lines(lines)
        if profile is not None:
            logger.debug("Loaded profile %s with %d entries", profile.name, len(profile.entries))
        return profile
