"""Ingredient aggregation: merges recipe ingredients into a shopping list.

Each ingredient is canonicalized (KG to G, L to ML) and summed into a
running total keyed by (normalized name, canonical unit). Totals come out
in the order each key was first seen. Mass and volume occurrences of the
same name never merge.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from meal_planner.models import IngredientKey, ShoppingList, ShoppingListItem

if TYPE_CHECKING:
    from collections.abc import Iterable

    from meal_planner.models import Recipe

logger = logging.getLogger(__name__)


class ShoppingListBuilder:
    """Accumulates canonical ingredient totals across recipes."""

    def __init__(self) -> None:
        """Initialize an empty builder."""
        # dicts keep insertion order, which is the first-seen order we emit
        self._totals: dict[IngredientKey, float] = {}

    def add_recipe(self, recipe: Recipe) -> ShoppingListBuilder:
        """Merge every ingredient of a recipe into the running totals.

        Args:
            recipe: Recipe whose ingredients are added.

        Returns:
            This builder, for chaining.
        """
        for ingredient in recipe.ingredients:
            key = ingredient.canonical_key
            amount = ingredient.canonical_amount
            self._totals[key] = self._totals.get(key, 0.0) + amount
        logger.debug(
            "Aggregated %d ingredients from %r (%d distinct rows)",
            len(recipe.ingredients),
            recipe.name,
            len(self._totals),
        )
        return self

    def add_recipes(self, recipes: Iterable[Recipe]) -> ShoppingListBuilder:
        """Merge several recipes in order.

        Args:
            recipes: Recipes to add.

        Returns:
            This builder, for chaining.
        """
        for recipe in recipes:
            self.add_recipe(recipe)
        return self

    def build(self) -> ShoppingList:
        """Emit the aggregated shopping list.

        Returns:
            ShoppingList with one row per distinct (name, canonical unit).
        """
        items = [
            ShoppingListItem(name=key.name, unit=key.unit, total_amount=total)
            for key, total in self._totals.items()
        ]
        return ShoppingList(items=tuple(items))
