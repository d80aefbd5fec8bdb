"""Pydantic models and enums for the meal planner.

This is the shared type system: meal types, ingredients, recipes, plans,
and shopping lists. Ingredient identity is (normalized name, unit); the
amount never takes part in equality so quantities can be summed.
"""

from __future__ import annotations

import math
from enum import StrEnum
from typing import NamedTuple

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationInfo,
    field_validator,
)

from meal_planner.units import (
    Unit,
    UnitFamily,
    canonical,
    coerce_unit,
    parse_unit,
    to_canonical,
)

__all__ = [
    "Ingredient",
    "IngredientKey",
    "MealPlan",
    "MealSlot",
    "MealType",
    "Recipe",
    "ShoppingList",
    "ShoppingListItem",
    "Unit",
    "UnitFamily",
    "meal_types_for",
    "normalize_name",
    "parse_meal_types",
    "parse_unit",
]

# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class MealType(StrEnum):
    """Meal positions within a single day."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"


def meal_types_for(meals_per_day: int) -> list[MealType]:
    """Build the quick per-day pattern: lunch first, dinner for the rest.

    Args:
        meals_per_day: Number of meals each day.

    Returns:
        ``[LUNCH, DINNER, DINNER, ...]`` of the requested length.

    Raises:
        ValueError: If ``meals_per_day`` is not positive.
    """
    if meals_per_day <= 0:
        raise ValueError(f"meals per day must be > 0, got {meals_per_day}")
    return [MealType.LUNCH] + [MealType.DINNER] * (meals_per_day - 1)


def parse_meal_types(csv: str) -> list[MealType]:
    """Parse a comma-separated list of meal types.

    A bare count such as ``"3"`` expands through ``meal_types_for``.

    Args:
        csv: Text such as ``"breakfast, dinner"`` or ``"2"``.

    Returns:
        Meal types in the order given.

    Raises:
        ValueError: If the list is empty or names an unknown meal type.
    """
    if csv.strip().isdigit():
        return meal_types_for(int(csv))
    parts = [p.strip() for p in csv.split(",") if p.strip()]
    if not parts:
        raise ValueError("meal types must not be empty")
    result: list[MealType] = []
    for part in parts:
        try:
            result.append(MealType(part.lower()))
        except ValueError as err:
            raise ValueError(
                f"Unknown meal type: {part} (use breakfast,lunch,dinner)"
            ) from err
    return result


def normalize_name(name: str) -> str:
    """Normalize an ingredient name for identity comparison.

    Args:
        name: Raw ingredient name.

    Returns:
        Trimmed, lowercased name.
    """
    return name.strip().lower()


class IngredientKey(NamedTuple):
    """Composite identity of an ingredient: normalized name plus unit."""

    name: str
    unit: Unit


# ---------------------------------------------------------------------------
# Recipe models
# ---------------------------------------------------------------------------


class Ingredient(BaseModel):
    """An ingredient occurrence with an amount.

    Two ingredients are equal when their normalized name and unit match,
    whatever their amounts.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    amount: float = Field(ge=0, allow_inf_nan=False)
    unit: Unit

    @field_validator("name", mode="before")
    @classmethod
    def _normalize_name(cls, v: object) -> str:
        """Reject blank names and normalize the rest.

        Args:
            v: Raw name value.

        Returns:
            Trimmed, lowercased name.
        """
        if not isinstance(v, str) or not v.strip():
            raise ValueError("name must not be blank")
        return normalize_name(v)

    @field_validator("unit", mode="before")
    @classmethod
    def _normalize_unit(cls, v: object) -> Unit:
        """Normalize raw unit strings to Unit enum members.

        Args:
            v: Raw value (string, Unit, or other).

        Returns:
            Normalized Unit enum member.
        """
        return coerce_unit(v)

    @field_validator("unit")
    @classmethod
    def _check_canonical_amount(cls, v: Unit, info: ValidationInfo) -> Unit:
        """Reject amounts that overflow when converted to the canonical unit.

        Args:
            v: Validated unit.
            info: Validation context holding the already-validated amount.

        Returns:
            The unit, unchanged.
        """
        amount = info.data.get("amount")
        if amount is not None and not math.isfinite(to_canonical(amount, v)):
            raise ValueError(
                f"amount {amount!r} {v.name} overflows in {canonical(v).name}"
            )
        return v

    @classmethod
    def of(cls, name: str, amount: float, unit: Unit | str) -> Ingredient:
        """Shorthand constructor taking positional arguments."""
        return cls(name=name, amount=amount, unit=unit)

    @property
    def key(self) -> IngredientKey:
        """Identity of this ingredient in its own unit."""
        return IngredientKey(self.name, self.unit)

    @property
    def canonical_key(self) -> IngredientKey:
        """Identity of this ingredient in its family's canonical unit."""
        return IngredientKey(self.name, canonical(self.unit))

    @property
    def canonical_amount(self) -> float:
        """Amount expressed in the canonical unit."""
        return to_canonical(self.amount, self.unit)

    def with_amount(self, amount: float) -> Ingredient:
        """Return a copy of this ingredient with a different amount."""
        return Ingredient(name=self.name, amount=amount, unit=self.unit)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ingredient):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __str__(self) -> str:
        return f"{self.name} {self.amount:g} {self.unit.name}"


class Recipe(BaseModel):
    """A named, ordered list of ingredients."""

    model_config = ConfigDict(frozen=True)

    name: str
    ingredients: tuple[Ingredient, ...] = ()

    @field_validator("name", mode="before")
    @classmethod
    def _strip_name(cls, v: object) -> str:
        """Reject blank recipe names and trim the rest."""
        if not isinstance(v, str) or not v.strip():
            raise ValueError("recipe name must not be blank")
        return v.strip()

    @classmethod
    def of(cls, name: str, *ingredients: Ingredient) -> Recipe:
        """Build a recipe from positional ingredients."""
        return cls(name=name, ingredients=ingredients)

    def __str__(self) -> str:
        return self.name


# ---------------------------------------------------------------------------
# Plan models
# ---------------------------------------------------------------------------


class MealSlot(BaseModel):
    """One (day, meal type) position filled with a catalog recipe."""

    model_config = ConfigDict(frozen=True)

    day_index: int = Field(ge=0)
    meal_type: MealType
    recipe: Recipe


class MealPlan(BaseModel):
    """Slot assignments in day-major order."""

    model_config = ConfigDict(frozen=True)

    slots: tuple[MealSlot, ...] = ()

    def recipes(self) -> list[Recipe]:
        """Return the assigned recipes in slot order."""
        return [slot.recipe for slot in self.slots]

    def __len__(self) -> int:
        return len(self.slots)


# ---------------------------------------------------------------------------
# Shopping list models
# ---------------------------------------------------------------------------


class ShoppingListItem(BaseModel):
    """A single aggregated row: one per (name, canonical unit)."""

    model_config = ConfigDict(frozen=True)

    name: str
    unit: Unit
    total_amount: float = Field(ge=0, allow_inf_nan=False)

    @field_validator("unit", mode="before")
    @classmethod
    def _normalize_unit(cls, v: object) -> Unit:
        """Normalize raw unit strings to Unit enum members.

        Args:
            v: Raw value (string, Unit, or other).

        Returns:
            Normalized Unit enum member.
        """
        return coerce_unit(v)

    def __str__(self) -> str:
        return f"{self.name} {self.total_amount} {self.unit.name}"


class ShoppingList(BaseModel):
    """Shopping list rows in first-encounter order."""

    model_config = ConfigDict(frozen=True)

    items: tuple[ShoppingListItem, ...] = ()

    def amount_of(self, name: str, unit: Unit) -> float | None:
        """Look up the total for an item.

        Args:
            name: Ingredient name (normalized before lookup).
            unit: Unit of the row.

        Returns:
            The row's total amount, or None if the list has no such row.
        """
        wanted = normalize_name(name)
        for item in self.items:
            if item.name == wanted and item.unit == unit:
                return item.total_amount
        return None

    def is_empty(self) -> bool:
        """Return True when there is nothing to buy."""
        return not self.items

    def __len__(self) -> int:
        return len(self.items)
