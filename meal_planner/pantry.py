"""Pantry stock ledger keyed by canonical ingredient identity.

Stock is stored in canonical units, so adding 1 L of milk and then
200 ML of milk yields a single 1200 ML entry. Stock never goes negative
and is only ever changed through ``Pantry.add``.
"""

from __future__ import annotations

import logging
import math

from meal_planner.models import IngredientKey, normalize_name
from meal_planner.units import Unit, canonical, coerce_unit, to_canonical

logger = logging.getLogger(__name__)


def _validate_entry(
    name: str | None,
    amount: float,
    unit: Unit | str | None,
) -> Unit:
    """Check a stock entry before it touches the ledger.

    Args:
        name: Ingredient name.
        amount: Amount to add.
        unit: Unit of the amount, as a member or a raw token.

    Returns:
        The unit as a Unit member.

    Raises:
        ValueError: If the name is blank, the unit missing or unknown, or
            the amount negative or not finite.
    """
    if name is None or not name.strip():
        raise ValueError("name must not be blank")
    unit = coerce_unit(unit)
    if not math.isfinite(amount):
        raise ValueError(f"amount must be finite, got {amount!r}")
    if amount < 0:
        raise ValueError(f"amount must be >= 0, got {amount!r}")
    return unit


class Pantry:
    """Mutable on-hand stock for a planning run.

    Entries are merged by sum under their (normalized name, canonical unit)
    identity. Volume stock of an ingredient never offsets a mass need for
    the same name.
    """

    def __init__(self) -> None:
        """Initialize an empty pantry."""
        self._stock: dict[IngredientKey, float] = {}

    def add(self, name: str, amount: float, unit: Unit | str) -> Pantry:
        """Add stock for an ingredient.

        Args:
            name: Ingredient name (normalized before storage).
            amount: Non-negative amount expressed in ``unit``.
            unit: Unit of the amount; converted to its canonical unit.

        Returns:
            This pantry, for chaining.

        Raises:
            ValueError: If the entry fails validation.
        """
        unit = _validate_entry(name, amount, unit)
        key = IngredientKey(normalize_name(name), canonical(unit))
        total = self._stock.get(key, 0.0) + to_canonical(amount, unit)
        if not math.isfinite(total):
            raise ValueError(f"stock of {key.name} overflows in {key.unit.name}")
        self._stock[key] = total
        logger.debug("Pantry %s %s now %g", key.name, key.unit.name, self._stock[key])
        return self

    def amount_of(self, name: str, unit: Unit | str) -> float:
        """Return the stock held for an ingredient.

        Args:
            name: Ingredient name (case and surrounding whitespace ignored).
            unit: Any unit of the family to look up; the result is always
                in the canonical unit.

        Returns:
            Stock in the canonical unit, or 0.0 if none is held.
        """
        key = IngredientKey(normalize_name(name), canonical(coerce_unit(unit)))
        return self._stock.get(key, 0.0)

    def snapshot(self) -> dict[IngredientKey, float]:
        """Return a copy of the stock mapping."""
        return dict(self._stock)

    def is_empty(self) -> bool:
        """Return True if no stock is held."""
        return not self._stock

    def __len__(self) -> int:
        return len(self._stock)

    def __repr__(self) -> str:
        return f"Pantry({len(self._stock)} entries)"
