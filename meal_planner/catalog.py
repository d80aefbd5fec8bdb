"""Immutable, ordered recipe catalogs and the built-in sample catalog."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, overload

from meal_planner.models import Ingredient, Recipe
from meal_planner.units import Unit

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


class RecipeCatalog(Sequence[Recipe]):
    """An ordered, read-only collection of recipes.

    Catalog order matters: strategies break ties by it, and seeded random
    plans are only reproducible for the same order.
    """

    def __init__(self, recipes: Iterable[Recipe] = ()) -> None:
        """Initialize the catalog.

        Args:
            recipes: Recipes in catalog order.
        """
        self._recipes: tuple[Recipe, ...] = tuple(recipes)

    def all(self) -> list[Recipe]:
        """Return the recipes as a new list."""
        return list(self._recipes)

    def plus(self, extra: Recipe) -> RecipeCatalog:
        """Return a new catalog with ``extra`` appended."""
        return RecipeCatalog((*self._recipes, extra))

    def find(self, name: str) -> Recipe | None:
        """Return the first recipe with the given name (case-insensitive)."""
        wanted = name.strip().lower()
        for recipe in self._recipes:
            if recipe.name.lower() == wanted:
                return recipe
        return None

    @overload
    def __getitem__(self, index: int) -> Recipe: ...

    @overload
    def __getitem__(self, index: slice) -> Sequence[Recipe]: ...

    def __getitem__(self, index: int | slice) -> Recipe | Sequence[Recipe]:
        return self._recipes[index]

    def __len__(self) -> int:
        return len(self._recipes)

    def __iter__(self) -> Iterator[Recipe]:
        return iter(self._recipes)

    def __repr__(self) -> str:
        names = ", ".join(r.name for r in self._recipes)
        return f"RecipeCatalog([{names}])"

    @classmethod
    def samples(cls) -> RecipeCatalog:
        """Return the built-in demo catalog."""
        return cls(
            [
                Recipe.of(
                    "Eggs",
                    Ingredient.of("Egg", 2, Unit.PCS),
                    Ingredient.of("Milk", 50, Unit.ML),
                ),
                Recipe.of(
                    "Pasta",
                    Ingredient.of("Pasta", 100, Unit.G),
                    Ingredient.of("Milk", 100, Unit.ML),
                ),
                Recipe.of(
                    "Chicken Salad",
                    Ingredient.of("Chicken", 150, Unit.G),
                    Ingredient.of("Lettuce", 100, Unit.G),
                    Ingredient.of("Olive Oil", 10, Unit.ML),
                ),
                Recipe.of(
                    "Fried Rice",
                    Ingredient.of("Rice", 150, Unit.G),
                    Ingredient.of("Egg", 1, Unit.PCS),
                    Ingredient.of("Oil", 10, Unit.ML),
                ),
            ]
        )
