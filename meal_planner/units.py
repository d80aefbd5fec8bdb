"""Measurement units, unit families, and canonicalization.

Every family has exactly one canonical unit (PCS, G, ML). All internal
storage and comparison happens in canonical units; conversion only ever
happens within a family.
"""

from __future__ import annotations

from enum import StrEnum


class UnitFamily(StrEnum):
    """Groups of mutually convertible units."""

    COUNT = "count"
    MASS = "mass"
    VOLUME = "volume"


class Unit(StrEnum):
    """Supported measurement units."""

    PCS = "pcs"
    G = "g"
    KG = "kg"
    ML = "ml"
    L = "l"


_FAMILIES: dict[Unit, UnitFamily] = {
    Unit.PCS: UnitFamily.COUNT,
    Unit.G: UnitFamily.MASS,
    Unit.KG: UnitFamily.MASS,
    Unit.ML: UnitFamily.VOLUME,
    Unit.L: UnitFamily.VOLUME,
}

_CANONICAL: dict[UnitFamily, Unit] = {
    UnitFamily.COUNT: Unit.PCS,
    UnitFamily.MASS: Unit.G,
    UnitFamily.VOLUME: Unit.ML,
}

# Multiplier from each unit to its family's canonical unit.
_TO_CANONICAL_FACTOR: dict[Unit, float] = {
    Unit.PCS: 1.0,
    Unit.G: 1.0,
    Unit.KG: 1000.0,
    Unit.ML: 1.0,
    Unit.L: 1000.0,
}

_UNIT_ALIASES: dict[str, Unit] = {
    # Count
    "piece": Unit.PCS,
    "pieces": Unit.PCS,
    "pc": Unit.PCS,
    "each": Unit.PCS,
    "ea": Unit.PCS,
    # Mass
    "gram": Unit.G,
    "grams": Unit.G,
    "kilogram": Unit.KG,
    "kilograms": Unit.KG,
    # Volume
    "milliliter": Unit.ML,
    "milliliters": Unit.ML,
    "millilitre": Unit.ML,
    "millilitres": Unit.ML,
    "liter": Unit.L,
    "liters": Unit.L,
    "litre": Unit.L,
    "litres": Unit.L,
}


def parse_unit(raw: str) -> Unit:
    """Parse a raw unit token into a Unit enum member.

    Handles exact matches, aliases, and case-insensitive lookup.

    Args:
        raw: Unit token from a file, CLI argument, or caller code.

    Returns:
        Matching Unit enum member.

    Raises:
        ValueError: If the token is blank or not a known unit.
    """
    if not raw or not raw.strip():
        raise ValueError("unit must not be blank")
    cleaned = raw.strip().lower()
    try:
        return Unit(cleaned)
    except ValueError:
        pass
    result = _UNIT_ALIASES.get(cleaned)
    if result is not None:
        return result
    raise ValueError(f"Unknown unit: {raw!r} (use PCS|G|KG|ML|L)")


def coerce_unit(value: object) -> Unit:
    """Return ``value`` as a Unit, parsing strings such as ``"ML"`` or ``"kg"``.

    Args:
        value: A Unit member or a raw unit token.

    Returns:
        Matching Unit enum member.

    Raises:
        ValueError: If the value is None, blank, or not a known unit.
    """
    if value is None:
        raise ValueError("unit must not be null")
    if isinstance(value, Unit):
        return value
    return parse_unit(str(value))


def family(unit: Unit) -> UnitFamily:
    """Return the family a unit belongs to."""
    return _FAMILIES[unit]


def canonical(unit: Unit) -> Unit:
    """Return the canonical unit of the unit's family."""
    return _CANONICAL[_FAMILIES[unit]]


def to_canonical(amount: float, unit: Unit) -> float:
    """Convert an amount into the canonical unit of its family.

    Args:
        amount: Amount expressed in ``unit``.
        unit: Unit the amount is expressed in.

    Returns:
        The amount in the canonical unit (x1000 for KG and L).
    """
    return amount * _TO_CANONICAL_FACTOR[unit]


def convertible(a: Unit, b: Unit) -> bool:
    """Return True if both units belong to the same family."""
    return _FAMILIES[a] is _FAMILIES[b]
