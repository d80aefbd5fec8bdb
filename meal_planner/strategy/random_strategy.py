"""Uniform random recipe selection."""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING

from meal_planner.models import MealPlan, MealSlot
from meal_planner.strategy.base import iter_slots, validate_request

if TYPE_CHECKING:
    from collections.abc import Sequence

    from meal_planner.models import MealType, Recipe

logger = logging.getLogger(__name__)


class RandomStrategy:
    """Draws a uniformly random catalog recipe for every slot.

    Recipes may repeat across slots. With a seeded random source the plan
    is fully determined by the seed and the catalog order.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        *,
        seed: int | None = None,
    ) -> None:
        """Initialize the strategy with its random source.

        Args:
            rng: Random source to draw from. Takes precedence over ``seed``.
            seed: Seed for a new ``random.Random`` when ``rng`` is not given.
        """
        self._rng = rng if rng is not None else random.Random(seed)

    def generate_plan(
        self,
        days: int,
        meal_types: Sequence[MealType],
        catalog: Sequence[Recipe],
    ) -> MealPlan:
        """Fill each slot with a random catalog recipe.

        Args:
            days: Number of days to plan.
            meal_types: Meal types per day.
            catalog: Candidate recipes.

        Returns:
            Plan with ``days * len(meal_types)`` slots.

        Raises:
            ValueError: If the request is invalid.
        """
        validate_request(days, meal_types, catalog)
        slots = [
            MealSlot(
                day_index=day,
                meal_type=meal_type,
                recipe=catalog[self._rng.randrange(len(catalog))],
            )
            for day, meal_type in iter_slots(days, meal_types)
        ]
        logger.info("Random plan: %d slots from %d recipes", len(slots), len(catalog))
        return MealPlan(slots=tuple(slots))
