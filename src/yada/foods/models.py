"""Food entities: basic foods with fixed nutrition and composite recipes.

A composite food references other foods from the same catalog and derives
its calories from them on every read. Protein, carbs and fats of a
composite are stored fields that start at zero and are never recomputed
from its components.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Iterable, Union


def _dedupe(keywords: Iterable[str]) -> tuple[str, ...]:
    result: list[str] = []
    for keyword in keywords:
        if keyword not in result:
            result.append(keyword)
    return tuple(result)


class _KeywordMixin:
    """Keyword storage and case-insensitive search shared by both variants.

    Keywords are held as a tuple; ``add_keyword`` replaces it.
    """

    keywords: tuple[str, ...]

    def add_keyword(self, keyword: str) -> None:
        """Append a keyword unless an identical one is already present."""
        if keyword not in self.keywords:
            object.__setattr__(self, "keywords", (*self.keywords, keyword))

    def matches_keyword(self, term: str) -> bool:
        """True if ``term`` is a case-insensitive substring of any keyword."""
        needle = term.lower()
        return any(needle in keyword.lower() for keyword in self.keywords)

    def matches_all_keywords(self, terms: Iterable[str]) -> bool:
        """True if every term matches. An empty list matches."""
        return all(self.matches_keyword(term) for term in terms)

    def matches_any_keyword(self, terms: Iterable[str]) -> bool:
        """True if at least one term matches. An empty list does not match."""
        return any(self.matches_keyword(term) for term in terms)


@dataclass(frozen=True, eq=False)
class BasicFood(_KeywordMixin):
    """A food with fixed, author-supplied nutrition per serving.

    Instances are frozen; keywords can only grow through ``add_keyword``.
    """

    id: str
    keywords: tuple[str, ...]
    serving_size: str
    calories: float
    protein: float
    carbs: float
    fats: float

    kind: ClassVar[str] = "BASIC"

    def __post_init__(self) -> None:
        object.__setattr__(self, "keywords", _dedupe(self.keywords))

    @property
    def calories_per_serving(self) -> float:
        return self.calories

    @property
    def total_nutrients(self) -> float:
        return self.protein + self.carbs + self.fats

    def __str__(self) -> str:
        return self.id


@dataclass(frozen=True, eq=False)
class CompositeFood(_KeywordMixin):
    """A food built from servings of other foods.

    Components are keyed by object identity and kept in insertion order.
    Only the component map and keywords change after construction.
    """

    id: str
    keywords: tuple[str, ...]
    serving_size: str
    protein: float = field(default=0.0, init=False)
    carbs: float = field(default=0.0, init=False)
    fats: float = field(default=0.0, init=False)
    _components: dict[Food, float] = field(
        default_factory=dict, init=False, repr=False
    )

    kind: ClassVar[str] = "COMPOSITE"

    def __post_init__(self) -> None:
        object.__setattr__(self, "keywords", _dedupe(self.keywords))

    @property
    def components(self) -> dict[Food, float]:
        """Copy of the component -> servings mapping."""
        return dict(self._components)

    @property
    def calories_per_serving(self) -> float:
        return sum(
            food.calories_per_serving * servings
            for food, servings in self._components.items()
        )

    @property
    def total_nutrients(self) -> float:
        return self.protein + self.carbs + self.fats

    def contains(self, food: Food) -> bool:
        """True if ``food`` is a direct or nested component of this composite."""
        for component in self._components:
            if component is food:
                return True
            if isinstance(component, CompositeFood) and component.contains(food):
                return True
        return False

    def add_component(self, food: Food, servings: float) -> None:
        """Add servings of ``food``, accumulating onto an existing entry.

        Raises:
            ValueError: if ``food`` is this composite or already contains it.
        """
        if food is None:
            raise ValueError("Component food cannot be None")
        if food is self or (
            isinstance(food, CompositeFood) and food.contains(self)
        ):
            raise ValueError(
                f"Adding '{food.id}' to '{self.id}' would create a cycle"
            )
        self._components[food] = self._components.get(food, 0.0) + servings

    def remove_component(self, food: Food) -> None:
        """Drop ``food`` from the components. Absent foods are ignored."""
        self._components.pop(food, None)

    def __str__(self) -> str:
        return self.id


Food = Union[BasicFood, CompositeFood]
