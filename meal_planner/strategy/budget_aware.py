"""Greedy selection that spends as much of a budget as it can.

Each slot gets the most expensive recipe that still fits the remaining
budget. When nothing fits, the cheapest recipe is used anyway: the budget
is advisory and a complete plan is always produced.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from meal_planner.models import MealPlan, MealSlot
from meal_planner.strategy.base import iter_slots, validate_request

if TYPE_CHECKING:
    from collections.abc import Sequence

    from meal_planner.models import MealType, Recipe
    from meal_planner.price_book import PriceBook

logger = logging.getLogger(__name__)

# Cost used for recipes with no priced ingredients.
NOMINAL_COST = 1.0
BUDGET_EPSILON = 1e-9


class BudgetAwareStrategy:
    """Chooses the priciest recipe that fits the remaining budget."""

    def __init__(self, price_book: PriceBook, budget: float) -> None:
        """Initialize the strategy.

        Args:
            price_book: Unit prices used to cost recipes. Only read.
            budget: Total spend target for the whole plan; must be positive.

        Raises:
            ValueError: If no price book is given or the budget is not
                a positive finite number.
        """
        if price_book is None:
            raise ValueError("price_book must not be null")
        if not math.isfinite(budget) or budget <= 0:
            raise ValueError(f"budget must be > 0, got {budget!r}")
        self._price_book = price_book
        self._budget = budget

    @property
    def budget(self) -> float:
        """Total spend target."""
        return self._budget

    def recipe_cost(self, recipe: Recipe) -> float:
        """Estimated cost of a recipe, never zero.

        Args:
            recipe: Recipe to price.

        Returns:
            The price book estimate, or ``NOMINAL_COST`` if that is 0.
        """
        cost = self._price_book.estimate_cost(recipe)
        if cost == 0.0:
            return NOMINAL_COST
        return cost

    def generate_plan(
        self,
        days: int,
        meal_types: Sequence[MealType],
        catalog: Sequence[Recipe],
    ) -> MealPlan:
        """Assign recipes slot by slot against the remaining budget.

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

        priced = [(recipe, self.recipe_cost(recipe)) for recipe in catalog]
        # sorted() is stable, so equal costs keep catalog order
        by_cost_desc = sorted(priced, key=lambda pair: pair[1], reverse=True)
        # min() returns the first minimal pair in catalog order
        cheapest, cheapest_cost = min(priced, key=lambda pair: pair[1])

        spent = 0.0
        slots: list[MealSlot] = []
        for day, meal_type in iter_slots(days, meal_types):
            remaining = self._budget - spent
            chosen: tuple[Recipe, float] | None = None
            if remaining > 0:
                chosen = next(
                    (
                        pair
                        for pair in by_cost_desc
                        if pair[1] <= remaining + BUDGET_EPSILON
                    ),
                    None,
                )
            if chosen is None:
                logger.warning(
                    "Day %d %s: nothing fits remaining budget %.2f; using %r",
                    day,
                    meal_type,
                    remaining,
                    cheapest.name,
                )
                chosen = (cheapest, cheapest_cost)
            recipe, cost = chosen
            spent += cost
            logger.debug(
                "Day %d %s: %r (cost %.2f, spent %.2f)",
                day,
                meal_type,
                recipe.name,
                cost,
                spent,
            )
            slots.append(MealSlot(day_index=day, meal_type=meal_type, recipe=recipe))

        logger.info(
            "Budget plan: %d slots, spent %.2f of %.2f", len(slots), spent, self._budget
        )
        return MealPlan(slots=tuple(slots))
