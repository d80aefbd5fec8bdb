"""Fulfillment: turns a meal plan into what actually has to be bought.

Aggregates every slot's recipe into needed totals, then subtracts pantry
stock. Rows the pantry fully covers are dropped; there is no "zero
remaining" row.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from meal_planner.models import ShoppingList, ShoppingListItem
from meal_planner.shopping_list import ShoppingListBuilder

if TYPE_CHECKING:
    from meal_planner.models import MealPlan
    from meal_planner.pantry import Pantry

logger = logging.getLogger(__name__)

# Absorbs floating-point error from repeated additions.
COVERAGE_EPSILON = 1e-7


class GroceryService:
    """Builds shopping lists from meal plans."""

    def build_from(self, plan: MealPlan, pantry: Pantry | None = None) -> ShoppingList:
        """Aggregate a plan's ingredients, optionally net of pantry stock.

        Args:
            plan: The meal plan to shop for.
            pantry: Optional on-hand stock to subtract.

        Returns:
            Needed totals, or the remaining purchases when a pantry is given.
        """
        need = ShoppingListBuilder().add_recipes(plan.recipes()).build()
        if pantry is None:
            return need
        return self.subtract(need, pantry)

    def subtract(self, need: ShoppingList, pantry: Pantry) -> ShoppingList:
        """Subtract pantry stock from aggregated needs.

        Args:
            need: Aggregated totals in canonical units.
            pantry: Stock to offset against the totals. Only read.

        Returns:
            Items still to buy, in the same order as ``need``.
        """
        remaining: list[ShoppingListItem] = []
        for item in need.items:
            have = pantry.amount_of(item.name, item.unit)
            buy = item.total_amount - have
            if buy > COVERAGE_EPSILON:
                remaining.append(
                    ShoppingListItem(name=item.name, unit=item.unit, total_amount=buy)
                )
            else:
                logger.debug("Pantry covers %s %s", item.name, item.unit.name)
        logger.info(
            "Shopping list: %d of %d items still needed", len(remaining), len(need)
        )
        return ShoppingList(items=tuple(remaining))
