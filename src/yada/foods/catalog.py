"""The food catalog: ordered storage, keyword search and foods.txt persistence."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, Optional, Protocol, Sequence, Union

from yada.config import get_settings
from yada.foods.models import BasicFood, CompositeFood, Food
from yada.foods.serialization import read_catalog, write_catalog

logger = logging.getLogger(__name__)


class FoodDataSource(Protocol):
    """Anything that can supply basic foods for bulk import."""

    def fetch_foods(self) -> list[BasicFood]: ...


def _resolve_path(path: Optional[Union[str, Path]]) -> Path:
    if path is None:
        return get_settings().storage.foods_path
    if isinstance(path, str) and not path:
        raise ValueError("Filename cannot be empty")
    return Path(path)


class FoodCatalog:
    """Insertion-ordered collection of every known food.

    Duplicate ids are allowed; ``get_by_id`` returns the first match.
    """

    def __init__(self) -> None:
        self._foods: list[Food] = []

    def __len__(self) -> int:
        return len(self._foods)

    def __iter__(self) -> Iterator[Food]:
        return iter(list(self._foods))

    def add(self, food: Food) -> None:
        if food is None:
            raise ValueError("Food cannot be None")
        self._foods.append(food)

    def remove(self, food: Food) -> bool:
        """Remove ``food`` (matched by identity). Returns whether it was found."""
        if food is None:
            raise ValueError("Food cannot be None")
        try:
            self._foods.remove(food)
        except ValueError:
            return False
        return True

    def all_foods(self) -> list[Food]:
        return list(self._foods)

    def basic_foods(self) -> list[BasicFood]:
        return [f for f in self._foods if isinstance(f, BasicFood)]

    def composite_foods(self) -> list[CompositeFood]:
        return [f for f in self._foods if isinstance(f, CompositeFood)]

    def find_by_keywords(
        self, keywords: Sequence[str], match_all: bool = True
    ) -> list[Food]:
        """Search foods by keyword.

        An empty keyword list returns every food regardless of ``match_all``.

        Args:
            keywords: Search terms, matched case-insensitively as substrings
            match_all: Require every term (True) or any term (False) to match

        Returns:
            Matching foods in catalog order
        """
        if not keywords:
            return self.all_foods()
        if match_all:
            return [f for f in self._foods if f.matches_all_keywords(keywords)]
        return [f for f in self._foods if f.matches_any_keyword(keywords)]

    def get_by_id(self, food_id: str) -> Optional[Food]:
        for food in self._foods:
            if food.id == food_id:
                return food
        return None

    def import_from_source(self, source: FoodDataSource) -> None:
        """Append every food supplied by ``source``."""
        if source is None:
            raise ValueError("Source cannot be None")
        imported = source.fetch_foods()
        self._foods.extend(imported)
        logger.info("Imported %d foods", len(imported))

    def save(self, path: Optional[Union[str, Path]] = None) -> None:
        """Write the catalog to ``path`` (default: configured foods file).

        Raises:
            OSError: if the file cannot be written
        """
        target = _resolve_path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        with open(target, "w") as f:
            write_catalog(self._foods, f)

    def load(self, path: Optional[Union[str, Path]] = None) -> None:
        """Replace the catalog contents with the foods stored at ``path``.

        The catalog is cleared before reading; a failure part-way leaves it
        partially populated.

        Raises:
            FileNotFoundError: if the file does not exist
            ValueError: on a malformed numeric field
        """
        source = _resolve_path(path)
        self._foods.clear()
        with open(source) as f:
            lines = f.read().splitlines()
        read_catalog(lines, self)
        logger.debug("Loaded %d foods from %s", len(self._foods), source)
