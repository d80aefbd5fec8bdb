"""Greedy selection that uses up pantry stock before buying anything.

For every slot the recipe with the smallest total missing amount against
the current working stock wins; ties go to the earlier catalog recipe.
The chosen recipe's ingredients are then consumed from the working stock.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from meal_planner.models import MealPlan, MealSlot
from meal_planner.strategy.base import iter_slots, validate_request

if TYPE_CHECKING:
    from collections.abc import Sequence

    from meal_planner.models import IngredientKey, MealType, Recipe
    from meal_planner.pantry import Pantry

logger = logging.getLogger(__name__)


def missing_amount(recipe: Recipe, stock: dict[IngredientKey, float]) -> float:
    """Sum the per-ingredient shortfalls of a recipe against stock.

    Args:
        recipe: Candidate recipe.
        stock: Working stock keyed by canonical identity.

    Returns:
        Total canonical amount that would have to be bought.
    """
    missing = 0.0
    for ingredient in recipe.ingredients:
        have = stock.get(ingredient.canonical_key, 0.0)
        shortfall = ingredient.canonical_amount - have
        if shortfall > 0:
            missing += shortfall
    return missing


def choose_best_recipe(
    catalog: Sequence[Recipe],
    stock: dict[IngredientKey, float],
) -> tuple[Recipe, float]:
    """Pick the recipe with the strictly smallest missing amount.

    Args:
        catalog: Non-empty candidate recipes in catalog order.
        stock: Working stock keyed by canonical identity.

    Returns:
        The winning recipe and its missing amount. The first minimal
        recipe in catalog order wins ties.
    """
    best = catalog[0]
    best_missing = math.inf
    for recipe in catalog:
        missing = missing_amount(recipe, stock)
        if missing < best_missing:
            best, best_missing = recipe, missing
    return best, best_missing


def consume(recipe: Recipe, stock: dict[IngredientKey, float]) -> None:
    """Subtract a recipe's ingredients from the working stock in place.

    Keys that reach zero or below are removed.

    Args:
        recipe: Recipe being cooked.
        stock: Working stock to update.
    """
    for ingredient in recipe.ingredients:
        key = ingredient.canonical_key
        left = stock.get(key, 0.0) - ingredient.canonical_amount
        if left <= 0:
            stock.pop(key, None)
        else:
            stock[key] = left


class PantryFirstStrategy:
    """Chooses the recipes that leave the least to buy.

    The pantry is snapshotted at construction and never mutated. Each
    ``generate_plan`` call works on its own fresh copy of that snapshot,
    so repeated calls on one instance return the same plan.
    """

    def __init__(self, pantry: Pantry) -> None:
        """Initialize the strategy from a pantry snapshot.

        Args:
            pantry: On-hand stock. Only read.

        Raises:
            ValueError: If no pantry is given.
        """
        if pantry is None:
            raise ValueError("pantry must not be null")
        self._initial_stock = pantry.snapshot()

    def generate_plan(
        self,
        days: int,
        meal_types: Sequence[MealType],
        catalog: Sequence[Recipe],
    ) -> MealPlan:
        """Greedily assign the least-missing recipe to every slot.

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
        stock = dict(self._initial_stock)
        slots: list[MealSlot] = []
        for day, meal_type in iter_slots(days, meal_types):
            recipe, missing = choose_best_recipe(catalog, stock)
            logger.debug(
                "Day %d %s: %r (missing %.2f)", day, meal_type, recipe.name, missing
            )
            slots.append(MealSlot(day_index=day, meal_type=meal_type, recipe=recipe))
            consume(recipe, stock)
        logger.info("Pantry-first plan: %d slots", len(slots))
        return MealPlan(slots=tuple(slots))
