"""Facade that wires a catalog, a strategy, and fulfillment together."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from meal_planner.grocery_service import GroceryService
from meal_planner.models import meal_types_for

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from meal_planner.models import MealPlan, MealType, Recipe, ShoppingList
    from meal_planner.pantry import Pantry
    from meal_planner.strategy import MealPlanStrategy

logger = logging.getLogger(__name__)


class MealPlannerService:
    """Plans meals from a fixed catalog with one strategy.

    Args:
        catalog: Recipes to plan from, in catalog order.
        strategy: Strategy that fills the slots.
    """

    def __init__(self, catalog: Iterable[Recipe], strategy: MealPlanStrategy) -> None:
        """Initialize the service.

        Args:
            catalog: A RecipeCatalog or any iterable of recipes.
            strategy: Strategy used by every ``plan`` call.

        Raises:
            ValueError: If the catalog is empty or no strategy is given.
        """
        if catalog is None:
            raise ValueError("catalog must not be null")
        if strategy is None:
            raise ValueError("strategy must not be null")
        self._catalog: tuple[Recipe, ...] = tuple(catalog)
        if not self._catalog:
            raise ValueError("catalog must not be empty")
        self._strategy = strategy
        self._grocery = GroceryService()

    @property
    def catalog(self) -> tuple[Recipe, ...]:
        """Recipes the service plans from."""
        return self._catalog

    def plan(self, days: int, meal_types: Sequence[MealType]) -> MealPlan:
        """Generate a plan with the configured strategy.

        Args:
            days: Number of days to plan.
            meal_types: Meal types per day.

        Returns:
            The generated plan.
        """
        return self._strategy.generate_plan(days, meal_types, self._catalog)

    def plan_per_day(self, days: int, meals_per_day: int) -> MealPlan:
        """Plan with the quick lunch-then-dinner pattern.

        Args:
            days: Number of days to plan.
            meals_per_day: Meals per day; the first is lunch, the rest dinner.

        Returns:
            The generated plan.

        Raises:
            ValueError: If ``meals_per_day`` is not positive.
        """
        return self.plan(days, meal_types_for(meals_per_day))

    def build_shopping_list(
        self,
        days: int,
        meal_types: Sequence[MealType],
    ) -> ShoppingList:
        """Plan, then aggregate everything the plan needs.

        No pantry stock is subtracted.

        Args:
            days: Number of days to plan.
            meal_types: Meal types per day.

        Returns:
            Aggregated needs for a freshly generated plan.
        """
        return self._grocery.build_from(self.plan(days, meal_types))

    def build_shopping_list_per_day(
        self,
        days: int,
        meals_per_day: int,
    ) -> ShoppingList:
        """Aggregate needs for a ``plan_per_day`` plan, with no pantry."""
        return self._grocery.build_from(self.plan_per_day(days, meals_per_day))

    def build_purchase_list(
        self,
        days: int,
        meal_types: Sequence[MealType],
        pantry: Pantry,
    ) -> ShoppingList:
        """Plan, aggregate, and subtract pantry stock.

        Args:
            days: Number of days to plan.
            meal_types: Meal types per day.
            pantry: On-hand stock to subtract. Only read.

        Returns:
            What still has to be bought for a freshly generated plan.
        """
        return self._grocery.build_from(self.plan(days, meal_types), pantry)
