"""Tests for meal_planner.units module."""

from __future__ import annotations

import pytest

from meal_planner.units import (
    Unit,
    UnitFamily,
    canonical,
    coerce_unit,
    convertible,
    family,
    parse_unit,
    to_canonical,
)


class TestFamily:
    """Tests for family()."""

    @pytest.mark.parametrize(
        ("unit", "expected"),
        [
            (Unit.PCS, UnitFamily.COUNT),
            (Unit.G, UnitFamily.MASS),
            (Unit.KG, UnitFamily.MASS),
            (Unit.ML, UnitFamily.VOLUME),
            (Unit.L, UnitFamily.VOLUME),
        ],
    )
    def test_family(self, unit: Unit, expected: UnitFamily) -> None:
        """Test every unit maps to its family."""
        assert family(unit) is expected


class TestCanonical:
    """Tests for canonical() and to_canonical()."""

    def test_canonical_units(self) -> None:
        """Test each family has exactly one canonical unit."""
        assert canonical(Unit.KG) is Unit.G
        assert canonical(Unit.L) is Unit.ML
        assert canonical(Unit.G) is Unit.G
        assert canonical(Unit.ML) is Unit.ML
        assert canonical(Unit.PCS) is Unit.PCS

    def test_kg_and_l_scale_by_1000(self) -> None:
        """Test KG and L are multiplied into G and ML."""
        assert to_canonical(1.5, Unit.KG) == 1500.0
        assert to_canonical(0.25, Unit.L) == 250.0

    def test_canonical_units_unchanged(self) -> None:
        """Test PCS, G and ML amounts pass through."""
        assert to_canonical(3.0, Unit.PCS) == 3.0
        assert to_canonical(42.0, Unit.G) == 42.0
        assert to_canonical(7.5, Unit.ML) == 7.5

    def test_idempotent_on_canonical_unit(self) -> None:
        """Test converting an already canonical amount again is a no-op."""
        once = to_canonical(123.4, Unit.G)
        assert to_canonical(once, Unit.G) == once

    def test_canonical_of_canonical(self) -> None:
        """Test canonical() is idempotent."""
        for unit in Unit:
            assert canonical(canonical(unit)) is canonical(unit)


class TestConvertible:
    """Tests for convertible()."""

    def test_same_family(self) -> None:
        """Test units in one family are convertible."""
        assert convertible(Unit.G, Unit.KG)
        assert convertible(Unit.L, Unit.ML)
        assert convertible(Unit.PCS, Unit.PCS)

    def test_different_family(self) -> None:
        """Test mass and volume never convert."""
        assert not convertible(Unit.G, Unit.ML)
        assert not convertible(Unit.PCS, Unit.KG)


class TestParseUnit:
    """Tests for parse_unit()."""

    def test_exact_values(self) -> None:
        """Test enum values parse directly."""
        assert parse_unit("g") is Unit.G
        assert parse_unit("ml") is Unit.ML

    def test_case_insensitive(self) -> None:
        """Test upper-case tokens as written in files parse."""
        assert parse_unit("PCS") is Unit.PCS
        assert parse_unit(" Kg ") is Unit.KG

    def test_aliases(self) -> None:
        """Test common spelled-out aliases."""
        assert parse_unit("grams") is Unit.G
        assert parse_unit("litre") is Unit.L
        assert parse_unit("pieces") is Unit.PCS
        assert parse_unit("each") is Unit.PCS

    def test_unknown_raises(self) -> None:
        """Test unknown units are rejected, not defaulted."""
        with pytest.raises(ValueError, match="Unknown unit"):
            parse_unit("cup")

    def test_blank_raises(self) -> None:
        """Test blank tokens are rejected."""
        with pytest.raises(ValueError, match="blank"):
            parse_unit("   ")


class TestCoerceUnit:
    """Tests for coerce_unit."""

    def test_member_passes_through(self) -> None:
        """Test Unit members are returned as-is."""
        assert coerce_unit(Unit.ML) is Unit.ML

    def test_token_parsed(self) -> None:
        """Test raw tokens go through parse_unit."""
        assert coerce_unit("ML") is Unit.ML
        assert coerce_unit("grams") is Unit.G

    def test_none_rejected(self) -> None:
        """Test a missing unit is a ValueError."""
        with pytest.raises(ValueError, match="unit must not be null"):
            coerce_unit(None)

    def test_unknown_token_rejected(self) -> None:
        """Test an unknown token is a ValueError, not a KeyError."""
        with pytest.raises(ValueError, match="Unknown unit"):
            coerce_unit("cup")
