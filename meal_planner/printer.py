"""Text and CSV rendering for plans and shopping lists.

Sorting happens here, for display only; shopping lists themselves keep
their aggregation order.
"""

from __future__ import annotations

import csv
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from meal_planner.models import MealPlan, ShoppingList, ShoppingListItem


def _display_order(items: tuple[ShoppingListItem, ...]) -> list[ShoppingListItem]:
    return sorted(items, key=lambda i: (i.name, i.unit.name))


def format_text(shopping_list: ShoppingList) -> str:
    """Format a shopping list grouped by unit with aligned columns.

    Args:
        shopping_list: List to format.

    Returns:
        Multi-line text; ``(nothing to buy)`` when the list is empty.
    """
    lines = ["== Shopping List =="]
    if shopping_list.is_empty():
        lines.append("(nothing to buy)")
        return "\n".join(lines)

    by_unit: dict[str, list[ShoppingListItem]] = {}
    for item in _display_order(shopping_list.items):
        by_unit.setdefault(item.unit.name, []).append(item)

    for unit_name, items in by_unit.items():
        lines.append("")
        lines.append(f"[{unit_name}]")
        for item in items:
            lines.append(f"  {item.name:<18s} {item.total_amount:>8.1f}")
    return "\n".join(lines)


def format_plan(plan: MealPlan) -> str:
    """Format a plan as one line per slot.

    Args:
        plan: Plan to format.

    Returns:
        Lines such as ``Day 1  lunch      Fried Rice``.
    """
    if not plan.slots:
        return "Plan is empty."
    return "\n".join(
        f"Day {slot.day_index + 1}  {slot.meal_type.value:<10s} {slot.recipe.name}"
        for slot in plan.slots
    )


def write_csv(shopping_list: ShoppingList, path: Path) -> None:
    """Write a shopping list as CSV (``name,amount,unit``) in list order.

    Args:
        shopping_list: List to write.
        path: Destination file; overwritten if it exists.
    """
    with path.open("w", encoding="utf-8", newline="") as fh:
        writer = csv.writer(fh, lineterminator="\n")
        writer.writerow(["name", "amount", "unit"])
        for item in shopping_list.items:
            writer.writerow([item.name, repr(item.total_amount), item.unit.name])
