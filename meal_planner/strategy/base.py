"""Strategy protocol and the request checks every strategy shares."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from meal_planner.models import MealPlan, MealType, Recipe


class MealPlanStrategy(Protocol):
    """Protocol for meal plan generation.

    Implementations must not mutate the catalog and must validate the
    request before producing any slot.
    """

    def generate_plan(
        self,
        days: int,
        meal_types: Sequence[MealType],
        catalog: Sequence[Recipe],
    ) -> MealPlan:
        """Fill every (day, meal type) slot with a recipe.

        Args:
            days: Number of days to plan; must be positive.
            meal_types: Meal types per day, in within-day order.
            catalog: Candidate recipes, in catalog order.

        Returns:
            The generated plan.
        """
        ...  # pragma: no cover


def validate_request(
    days: int,
    meal_types: Sequence[MealType],
    catalog: Sequence[Recipe],
) -> None:
    """Check the preconditions shared by every strategy.

    Args:
        days: Number of days requested.
        meal_types: Meal types per day.
        catalog: Candidate recipes.

    Raises:
        ValueError: On an empty catalog, non-positive days, or no meal types.
    """
    if not catalog:
        raise ValueError("catalog must not be empty")
    if days <= 0:
        raise ValueError(f"days must be > 0, got {days}")
    if not meal_types:
        raise ValueError("meal types must not be empty")


def iter_slots(
    days: int,
    meal_types: Sequence[MealType],
) -> Iterator[tuple[int, MealType]]:
    """Yield (day index, meal type) pairs in day-major order."""
    for day in range(days):
        for meal_type in meal_types:
            yield day, meal_type
