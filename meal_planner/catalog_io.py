"""JSON files for recipe catalogs and pantries.

File shapes::

    {"recipes": [{"name": "Eggs",
                  "ingredients": [{"name": "egg", "amount": 2, "unit": "PCS"}]}]}

    {"stock": [{"name": "milk", "amount": 200, "unit": "ML"}]}

Null entries are skipped. Names and amounts are validated by the domain
models when the entries are turned into recipes or pantry stock.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TypeVar

from pydantic import BaseModel, ValidationError

from meal_planner.catalog import RecipeCatalog
from meal_planner.models import Ingredient, Recipe
from meal_planner.pantry import Pantry
from meal_planner.units import parse_unit

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


class CatalogFileError(Exception):
    """Raised when a catalog or pantry file cannot be read or is invalid."""


_M = TypeVar("_M", bound=BaseModel)


# ---------------------------------------------------------------------------
# File DTOs
# ---------------------------------------------------------------------------


class IngredientEntry(BaseModel):
    """One ingredient line of a recipe file."""

    name: str
    amount: float
    unit: str


class RecipeEntry(BaseModel):
    """One recipe of a catalog file."""

    name: str
    ingredients: list[IngredientEntry | None] | None = None


class RecipeCatalogFile(BaseModel):
    """Top-level catalog file."""

    recipes: list[RecipeEntry | None] | None = None


class StockEntry(BaseModel):
    """One stock line of a pantry file."""

    name: str
    amount: float
    unit: str


class PantryFile(BaseModel):
    """Top-level pantry file."""

    stock: list[StockEntry | None] | None = None


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _read_model(path: Path, model: type[_M]) -> _M:
    """Read and validate a JSON file.

    Args:
        path: File to read.
        model: DTO class to validate against.

    Returns:
        The validated DTO.

    Raises:
        CatalogFileError: If the file is missing, not JSON, or malformed.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as err:
        raise CatalogFileError(f"Cannot read {path}: {err}") from err
    try:
        return model.model_validate_json(text)
    except ValidationError as err:
        raise CatalogFileError(f"Invalid file {path}: {err}") from err


def _entry_to_recipe(entry: RecipeEntry) -> Recipe:
    ingredients = [
        Ingredient(name=ie.name, amount=ie.amount, unit=parse_unit(ie.unit))
        for ie in entry.ingredients or []
        if ie is not None
    ]
    return Recipe(name=entry.name, ingredients=tuple(ingredients))


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_catalog(path: Path) -> RecipeCatalog:
    """Load a recipe catalog from a JSON file.

    Args:
        path: Catalog file.

    Returns:
        Catalog in file order.

    Raises:
        CatalogFileError: If the file cannot be read or fails validation.
    """
    dto = _read_model(path, RecipeCatalogFile)
    try:
        recipes = [_entry_to_recipe(r) for r in dto.recipes or [] if r is not None]
    except ValueError as err:
        raise CatalogFileError(f"Invalid recipe in {path}: {err}") from err
    logger.info("Loaded %d recipes from %s", len(recipes), path)
    return RecipeCatalog(recipes)


def save_catalog(catalog: RecipeCatalog, path: Path) -> None:
    """Write a recipe catalog as pretty-printed JSON.

    Args:
        catalog: Catalog to write.
        path: Destination file; overwritten if it exists.
    """
    dto = RecipeCatalogFile(
        recipes=[
            RecipeEntry(
                name=recipe.name,
                ingredients=[
                    IngredientEntry(
                        name=ing.name, amount=ing.amount, unit=ing.unit.name
                    )
                    for ing in recipe.ingredients
                ],
            )
            for recipe in catalog
        ]
    )
    path.write_text(dto.model_dump_json(indent=2), encoding="utf-8")


def load_pantry(path: Path) -> Pantry:
    """Load pantry stock from a JSON file.

    Args:
        path: Pantry file.

    Returns:
        Pantry holding the file's stock, merged by canonical identity.

    Raises:
        CatalogFileError: If the file cannot be read or fails validation.
    """
    dto = _read_model(path, PantryFile)
    pantry = Pantry()
    try:
        for entry in dto.stock or []:
            if entry is None:
                continue
            pantry.add(entry.name, entry.amount, parse_unit(entry.unit))
    except ValueError as err:
        raise CatalogFileError(f"Invalid stock entry in {path}: {err}") from err
    logger.info("Loaded %d pantry entries from %s", len(pantry), path)
    return pantry


def save_pantry(pantry: Pantry, path: Path) -> None:
    """Write pantry stock as pretty-printed JSON.

    Args:
        pantry: Pantry to write.
        path: Destination file; overwritten if it exists.
    """
    dto = PantryFile(
        stock=[
            StockEntry(name=key.name, amount=amount, unit=key.unit.name)
            for key, amount in pantry.snapshot().items()
        ]
    )
    path.write_text(dto.model_dump_json(indent=2), encoding="utf-8")

