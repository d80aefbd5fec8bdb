"""Tests for meal_planner.printer module."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from meal_planner.models import (
    MealPlan,
    MealSlot,
    MealType,
    Recipe,
    ShoppingList,
    ShoppingListItem,
    Unit,
)
from meal_planner.printer import format_plan, format_text, write_csv

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture()
def shopping() -> ShoppingList:
    """Return a three-row list in aggregation order."""
    return ShoppingList(
        items=(
            ShoppingListItem(name="milk", unit=Unit.ML, total_amount=300.0),
            ShoppingListItem(name="egg", unit=Unit.PCS, total_amount=3.0),
            ShoppingListItem(name="rice", unit=Unit.G, total_amount=150.0),
        )
    )


def _row(name: str, amount: str) -> str:
    return "  " + name.ljust(18) + " " + amount.rjust(8)


class TestFormatText:
    """Tests for format_text."""

    def test_empty_list(self) -> None:
        """Test an empty list prints a placeholder."""
        assert format_text(ShoppingList()) == "== Shopping List ==\n(nothing to buy)"

    def test_grouped_by_unit_sorted_by_name(self, shopping: ShoppingList) -> None:
        """Test rows are sorted by name and grouped under unit headers."""
        assert format_text(shopping).splitlines() == [
            "== Shopping List ==",
            "",
            "[PCS]",
            _row("egg", "3.0"),
            "",
            "[ML]",
            _row("milk", "300.0"),
            "",
            "[G]",
            _row("rice", "150.0"),
        ]

    def test_same_unit_shares_header(self) -> None:
        """Test rows of one unit appear under a single header."""
        shopping = ShoppingList(
            items=(
                ShoppingListItem(name="rice", unit=Unit.G, total_amount=100),
                ShoppingListItem(name="flour", unit=Unit.G, total_amount=0.5),
            )
        )
        lines = format_text(shopping).splitlines()
        assert lines.count("[G]") == 1
        assert lines[-2:] == [_row("flour", "0.5"), _row("rice", "100.0")]

    def test_does_not_reorder_list(self, shopping: ShoppingList) -> None:
        """Test formatting leaves the list's own order alone."""
        format_text(shopping)
        assert [i.name for i in shopping.items] == ["milk", "egg", "rice"]


class TestFormatPlan:
    """Tests for format_plan."""

    def test_empty_plan(self) -> None:
        """Test an empty plan prints a placeholder."""
        assert format_plan(MealPlan()) == "Plan is empty."

    def test_one_line_per_slot(self) -> None:
        """Test days are 1-based and meal types padded."""
        eggs = Recipe(name="Eggs")
        pasta = Recipe(name="Pasta")
        plan = MealPlan(
            slots=(
                MealSlot(day_index=0, meal_type=MealType.LUNCH, recipe=eggs),
                MealSlot(day_index=0, meal_type=MealType.DINNER, recipe=pasta),
                MealSlot(day_index=1, meal_type=MealType.LUNCH, recipe=pasta),
            )
        )
        assert format_plan(plan).splitlines() == [
            "Day 1  lunch      Eggs",
            "Day 1  dinner     Pasta",
            "Day 2  lunch      Pasta",
        ]


class TestWriteCsv:
    """Tests for write_csv."""

    def test_writes_rows_in_list_order(
        self, shopping: ShoppingList, tmp_path: Path
    ) -> None:
        """Test the CSV has a header and one row per item."""
        path = tmp_path / "list.csv"
        write_csv(shopping, path)
        assert path.read_text(encoding="utf-8").splitlines() == [
            "name,amount,unit",
            "milk,300.0,ML",
            "egg,3.0,PCS",
            "rice,150.0,G",
        ]

    def test_empty_list_writes_header_only(self, tmp_path: Path) -> None:
        """Test an empty list still produces a header."""
        path = tmp_path / "list.csv"
        write_csv(ShoppingList(), path)
        assert path.read_text(encoding="utf-8") == "name,amount,unit\n"

    def test_names_with_commas_are_quoted(self, tmp_path: Path) -> None:
        """Test CSV quoting for awkward names."""
        shopping = ShoppingList(
            items=(
                ShoppingListItem(name="salt, sea", unit=Unit.G, total_amount=5.0),
            )
        )
        path = tmp_path / "list.csv"
        write_csv(shopping, path)
        assert path.read_text(encoding="utf-8").splitlines()[1] == '"salt, sea",5.0,G'
