"""Planning strategies that assign a catalog recipe to every meal slot.

All strategies share one contract, ``MealPlanStrategy.generate_plan``:
given a positive number of days, a non-empty ordered list of meal types,
and a non-empty catalog, return a plan with exactly
``days * len(meal_types)`` slots in day-major order.
"""

from meal_planner.strategy.base import MealPlanStrategy, iter_slots, validate_request
from meal_planner.strategy.budget_aware import BudgetAwareStrategy
from meal_planner.strategy.pantry_first import PantryFirstStrategy
from meal_planner.strategy.random_strategy import RandomStrategy

__all__ = [
    "BudgetAwareStrategy",
    "MealPlanStrategy",
    "PantryFirstStrategy",
    "RandomStrategy",
    "iter_slots",
    "validate_request",
]
