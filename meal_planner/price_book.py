"""Unit prices for ingredients and recipe cost estimation."""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from meal_planner.models import IngredientKey, normalize_name
from meal_planner.units import Unit, coerce_unit

if TYPE_CHECKING:
    from meal_planner.models import Ingredient, Recipe

logger = logging.getLogger(__name__)


def _price_key(name: str, unit: Unit | str) -> IngredientKey:
    if name is None or not name.strip():
        raise ValueError("name must not be blank")
    return IngredientKey(normalize_name(name), coerce_unit(unit))


class PriceBook:
    """Price per unit, keyed by (normalized name, unit).

    Prices are looked up in the ingredient's own unit, with no
    canonicalization. A missing entry means "no price", which is not the
    same as a price of zero.
    """

    def __init__(self) -> None:
        """Initialize an empty price book."""
        self._unit_prices: dict[IngredientKey, float] = {}

    def add(self, name: str, unit: Unit | str, price_per_unit: float) -> PriceBook:
        """Set the price of one unit of an ingredient.

        Args:
            name: Ingredient name.
            unit: Unit the price refers to.
            price_per_unit: Non-negative price; replaces any existing price.

        Returns:
            This price book, for chaining.

        Raises:
            ValueError: On a blank name, missing unit, or a negative or
                non-finite price.
        """
        key = _price_key(name, unit)
        if not math.isfinite(price_per_unit) or price_per_unit < 0:
            raise ValueError(f"price_per_unit must be >= 0, got {price_per_unit!r}")
        self._unit_prices[key] = price_per_unit
        return self

    def unit_price(self, name: str, unit: Unit | str) -> float | None:
        """Return the unit price, or None if the ingredient is unpriced."""
        return self._unit_prices.get(_price_key(name, unit))

    def unit_price_of(self, ingredient: Ingredient) -> float | None:
        """Return the unit price for an ingredient's name and unit."""
        return self._unit_prices.get(ingredient.key)

    def estimate_cost(self, recipe: Recipe) -> float:
        """Estimate a recipe's cost as the sum of amount x unit price.

        Unpriced ingredients contribute nothing.

        Args:
            recipe: Recipe to price.

        Returns:
            Estimated total cost.
        """
        total = 0.0
        for ingredient in recipe.ingredients:
            price = self.unit_price_of(ingredient)
            if price is None:
                logger.debug("No price for %s in %r", ingredient.key, recipe.name)
                continue
            total += price * ingredient.amount
        return total

    def snapshot(self) -> dict[IngredientKey, float]:
        """Return a copy of the price mapping."""
        return dict(self._unit_prices)

    def __len__(self) -> int:
        return len(self._unit_prices)

    @classmethod
    def samples(cls) -> PriceBook:
        """Return a price book covering the sample catalog's ingredients."""
        book = cls()
        for name, unit, price in _SAMPLE_PRICES:
            book.add(name, unit, price)
        return book


_SAMPLE_PRICES: list[tuple[str, Unit, float]] = [
    # Proteins
    ("egg", Unit.PCS, 0.30),
    ("chicken", Unit.G, 0.020),
    ("pork", Unit.G, 0.018),
    ("shrimp", Unit.G, 0.045),
    ("tofu", Unit.G, 0.008),
    # Dairy
    ("milk", Unit.ML, 0.002),
    # Grains and starches
    ("rice", Unit.G, 0.005),
    ("pasta", Unit.G, 0.012),
    ("noodles", Unit.G, 0.010),
    ("cornstarch", Unit.G, 0.006),
    ("sugar", Unit.G, 0.004),
    # Vegetables
    ("lettuce", Unit.G, 0.010),
    ("broccoli", Unit.G, 0.008),
    ("bell pepper", Unit.G, 0.012),
    ("carrot", Unit.G, 0.005),
    ("onion", Unit.G, 0.004),
    ("bok choy", Unit.G, 0.007),
    ("garlic", Unit.G, 0.015),
    ("ginger", Unit.G, 0.020),
    ("scallion", Unit.PCS, 0.25),
    # Oils and sauces
    ("oil", Unit.ML, 0.008),
    ("olive oil", Unit.ML, 0.025),
    ("sesame oil", Unit.ML, 0.030),
    ("chili oil", Unit.ML, 0.035),
    ("soy sauce", Unit.ML, 0.010),
    ("sriracha", Unit.ML, 0.015),
    ("rice vinegar", Unit.ML, 0.012),
    # Seasonings
    ("sesame seeds", Unit.G, 0.025),
]
