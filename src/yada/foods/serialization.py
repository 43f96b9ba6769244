"""Line codec for the foods.txt catalog file.

One food per line, colon-delimited::

    BASIC:<id>:<kw,kw,...>:<servingSize>:<calories>:<protein>:<carbs>:<fats>
    COMPOSITE:<id>:<kw,kw,...>:<servingSize>:<compId>=<servings>:...

Composites name their components by id, and a component may appear later
in the file than the composite using it, so loading resolves them in a
second pass once every food exists.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable

from yada.foods.models import BasicFood, CompositeFood, Food

if TYPE_CHECKING:
    from yada.foods.catalog import FoodCatalog

logger = logging.getLogger(__name__)

BASIC_TAG = BasicFood.kind
COMPOSITE_TAG = CompositeFood.kind


def _num(value: float) -> str:
    return str(float(value))


def _head(food: Food) -> list[str]:
    return [food.id, ",".join(food.keywords), food.serving_size]


def format_food(food: Food) -> str:
    """Render a single food as one catalog line (without newline)."""
    if isinstance(food, BasicFood):
        fields = [
            BASIC_TAG,
            *_head(food),
            _num(food.calories),
            _num(food.protein),
            _num(food.carbs),
            _num(food.fats),
        ]
    elif isinstance(food, CompositeFood):
        fields = [COMPOSITE_TAG, *_head(food)]
        fields.extend(
            f"{component.id}={_num(servings)}"
            for component, servings in food.components.items()
        )
    else:
        raise TypeError(f"Unknown food type: {type(food).__name__}")
    return ":".join(fields)


def parse_basic(parts: list[str]) -> BasicFood:
    """Build a BasicFood from the split fields of a BASIC line.

    Raises:
        ValueError: if the line is short or a numeric field is malformed
    """
    if len(parts) < 8:
        raise ValueError(f"BASIC line has {len(parts)} fields, expected 8")
    return BasicFood(
        id=parts[1],
        keywords=parts[2].split(","),
        serving_size=parts[3],
        calories=float(parts[4]),
        protein=float(parts[5]),
        carbs=float(parts[6]),
        fats=float(parts[7]),
    )


def parse_composite_shell(parts: list[str]) -> CompositeFood:
    """Build a CompositeFood with no components from a COMPOSITE line."""
    if len(parts) < 4:
        raise ValueError(f"COMPOSITE line has {len(parts)} fields, expected 4+")
    return CompositeFood(
        id=parts[1],
        keywords=parts[2].split(","),
        serving_size=parts[3],
    )


def parse_component(token: str) -> tuple[str, float]:
    """Split an ``id=servings`` token."""
    food_id, sep, servings = token.partition("=")
    if not sep:
        raise ValueError(f"Malformed component token: {token!r}")
    return food_id, float(servings)


def write_catalog(foods: Iterable[Food], stream) -> None:
    """Write every food to a text stream in catalog order."""
    for food in foods:
        stream.write(format_food(food) + "\n")


def read_catalog(lines: list[str], catalog: FoodCatalog) -> None:
    """Populate ``catalog`` from catalog lines using two passes.

    Pass 1 inserts every food, composites without components. Pass 2 links
    each composite's ``id=servings`` tokens against the populated catalog;
    tokens naming an unknown id are dropped.

    Raises:
        ValueError: on a malformed numeric field
    """
    composites: dict[str, CompositeFood] = {}

    # First pass: create every food
    for line in lines:
        parts = line.split(":")
        if parts[0] == BASIC_TAG:
            catalog.add(parse_basic(parts))
        elif parts[0] == COMPOSITE_TAG:
            composite = parse_composite_shell(parts)
            catalog.add(composite)
            composites[composite.id] = composite

    # Second pass: link composites to their components
    for line in lines:
        parts = line.split(":")
        if parts[0] != COMPOSITE_TAG:
            continue
        composite = composites[parts[1]]
        for token in parts[4:]:
            component_id, servings = parse_component(token)
            component = catalog.get_by_id(component_id)
            if component is None:
                continue
            try:
                composite.add_component(component, servings)
            except ValueError:
                logger.warning(
                    "Dropping component %s of %s: cyclic reference",
                    component_id,
                    composite.id,
                )
