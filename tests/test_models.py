"""Tests for meal_planner.models module."""

from __future__ import annotations

import math

import pytest
from pydantic import ValidationError

from meal_planner.models import (
    Ingredient,
    IngredientKey,
    MealPlan,
    MealSlot,
    MealType,
    Recipe,
    ShoppingList,
    ShoppingListItem,
    Unit,
    meal_types_for,
    parse_meal_types,
)

# ---------------------------------------------------------------------------
# Enum tests
# ---------------------------------------------------------------------------


class TestMealType:
    """Tests for MealType enum and parse_meal_types."""

    def test_all_values(self) -> None:
        """Test all meal type values exist."""
        assert {m.value for m in MealType} == {"breakfast", "lunch", "dinner"}

    def test_parse_preserves_order(self) -> None:
        """Test meal types come back in the order given."""
        assert parse_meal_types("dinner, Breakfast") == [
            MealType.DINNER,
            MealType.BREAKFAST,
        ]

    def test_parse_skips_blank_parts(self) -> None:
        """Test stray commas are ignored."""
        assert parse_meal_types("lunch,,") == [MealType.LUNCH]

    def test_parse_empty_raises(self) -> None:
        """Test an empty list is rejected."""
        with pytest.raises(ValueError, match="must not be empty"):
            parse_meal_types(" , ")

    def test_parse_unknown_raises(self) -> None:
        """Test unknown meal types are rejected."""
        with pytest.raises(ValueError, match="Unknown meal type: brunch"):
            parse_meal_types("lunch,brunch")

    def test_meal_types_for_pattern(self) -> None:
        """Test the quick pattern is lunch first, then dinners."""
        assert meal_types_for(1) == [MealType.LUNCH]
        assert meal_types_for(3) == [MealType.LUNCH, MealType.DINNER, MealType.DINNER]

    @pytest.mark.parametrize("count", [0, -2])
    def test_meal_types_for_non_positive_raises(self, count: int) -> None:
        """Test the meal count must be positive."""
        with pytest.raises(ValueError, match="meals per day must be > 0"):
            meal_types_for(count)

    def test_parse_count(self) -> None:
        """Test a bare count expands to the quick pattern."""
        assert parse_meal_types(" 2 ") == [MealType.LUNCH, MealType.DINNER]


# ---------------------------------------------------------------------------
# Ingredient tests
# ---------------------------------------------------------------------------


class TestIngredient:
    """Tests for the Ingredient model."""

    def test_name_normalized(self) -> None:
        """Test names are trimmed and lowercased."""
        ing = Ingredient(name="  Olive Oil ", amount=10, unit=Unit.ML)
        assert ing.name == "olive oil"

    def test_identity_excludes_amount(self) -> None:
        """Test equal identities compare equal whatever the amounts."""
        a = Ingredient.of("Egg", 2, Unit.PCS)
        b = Ingredient.of(" egg ", 5, Unit.PCS)
        assert a == b
        assert hash(a) == hash(b)
        assert a.key == IngredientKey("egg", Unit.PCS)

    def test_different_unit_not_equal(self) -> None:
        """Test the unit is part of identity."""
        assert Ingredient.of("milk", 1, Unit.L) != Ingredient.of("milk", 1, Unit.ML)

    def test_unit_string_parsed(self) -> None:
        """Test unit tokens are normalized to Unit members."""
        assert Ingredient(name="rice", amount=1, unit="KG").unit is Unit.KG

    def test_canonical_key_and_amount(self) -> None:
        """Test canonical identity and amount use the family's canonical unit."""
        ing = Ingredient.of("Rice", 1.5, Unit.KG)
        assert ing.canonical_key == IngredientKey("rice", Unit.G)
        assert ing.canonical_amount == 1500.0

    def test_with_amount(self) -> None:
        """Test with_amount keeps identity and changes the amount."""
        ing = Ingredient.of("egg", 2, Unit.PCS).with_amount(6)
        assert ing.amount == 6
        assert ing.key == IngredientKey("egg", Unit.PCS)

    def test_zero_amount_allowed(self) -> None:
        """Test zero is a valid amount."""
        assert Ingredient.of("salt", 0, Unit.G).amount == 0

    @pytest.mark.parametrize("name", ["", "   ", None])
    def test_blank_name_rejected(self, name: str | None) -> None:
        """Test blank or missing names are rejected."""
        with pytest.raises(ValidationError):
            Ingredient(name=name, amount=1, unit=Unit.G)

    @pytest.mark.parametrize("amount", [-0.1, math.inf, math.nan])
    def test_bad_amount_rejected(self, amount: float) -> None:
        """Test negative and non-finite amounts are rejected."""
        with pytest.raises(ValidationError):
            Ingredient(name="egg", amount=amount, unit=Unit.PCS)

    def test_null_unit_rejected(self) -> None:
        """Test a missing unit is rejected."""
        with pytest.raises(ValidationError, match="unit must not be null"):
            Ingredient(name="egg", amount=1, unit=None)

    def test_canonical_overflow_rejected(self) -> None:
        """Test a finite amount that overflows once canonicalized is rejected."""
        with pytest.raises(ValidationError, match="overflows in G"):
            Ingredient.of("salt", 1e306, Unit.KG)

    def test_large_canonical_amount_allowed(self) -> None:
        """Test amounts that stay finite after conversion are kept."""
        assert math.isfinite(Ingredient.of("salt", 1e300, Unit.KG).canonical_amount)

    def test_validation_error_is_value_error(self) -> None:
        """Test callers can catch model validation as ValueError."""
        with pytest.raises(ValueError):
            Ingredient(name="egg", amount=-1, unit=Unit.PCS)

    def test_frozen(self) -> None:
        """Test ingredients are immutable."""
        ing = Ingredient.of("egg", 1, Unit.PCS)
        with pytest.raises(ValidationError):
            ing.amount = 3  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Recipe and plan tests
# ---------------------------------------------------------------------------


class TestRecipe:
    """Tests for the Recipe model."""

    def test_name_trimmed_case_kept(self) -> None:
        """Test recipe names are trimmed but keep their case."""
        assert Recipe(name="  Fried Rice ").name == "Fried Rice"

    def test_blank_name_rejected(self) -> None:
        """Test blank recipe names are rejected."""
        with pytest.raises(ValidationError, match="recipe name must not be blank"):
            Recipe(name="  ")

    def test_of_keeps_order_and_duplicates(self) -> None:
        """Test ingredient order is kept and duplicates are allowed."""
        recipe = Recipe.of(
            "Omelette",
            Ingredient.of("egg", 2, Unit.PCS),
            Ingredient.of("milk", 20, Unit.ML),
            Ingredient.of("egg", 1, Unit.PCS),
        )
        assert [i.name for i in recipe.ingredients] == ["egg", "milk", "egg"]

    def test_ingredients_immutable(self) -> None:
        """Test ingredients are stored as a tuple."""
        recipe = Recipe(name="Toast", ingredients=[Ingredient.of("bread", 1, "pcs")])
        assert isinstance(recipe.ingredients, tuple)


class TestMealPlan:
    """Tests for MealSlot and MealPlan."""

    def test_slot_shares_recipe(self) -> None:
        """Test a slot references the catalog recipe, not a copy."""
        recipe = Recipe.of("Toast", Ingredient.of("bread", 2, Unit.PCS))
        slot = MealSlot(day_index=0, meal_type=MealType.LUNCH, recipe=recipe)
        assert slot.recipe is recipe

    def test_negative_day_rejected(self) -> None:
        """Test day indexes start at zero."""
        recipe = Recipe(name="Toast")
        with pytest.raises(ValidationError):
            MealSlot(day_index=-1, meal_type=MealType.LUNCH, recipe=recipe)

    def test_recipes_in_slot_order(self) -> None:
        """Test recipes() follows slot order."""
        a, b = Recipe(name="A"), Recipe(name="B")
        plan = MealPlan(
            slots=(
                MealSlot(day_index=0, meal_type=MealType.LUNCH, recipe=b),
                MealSlot(day_index=0, meal_type=MealType.DINNER, recipe=a),
            )
        )
        assert [r.name for r in plan.recipes()] == ["B", "A"]
        assert len(plan) == 2


# ---------------------------------------------------------------------------
# Shopping list tests
# ---------------------------------------------------------------------------


class TestShoppingList:
    """Tests for ShoppingListItem and ShoppingList."""

    def test_negative_total_rejected(self) -> None:
        """Test totals must be non-negative."""
        with pytest.raises(ValidationError):
            ShoppingListItem(name="milk", unit=Unit.ML, total_amount=-1)

    def test_amount_of(self) -> None:
        """Test lookup by name and unit."""
        shopping = ShoppingList(
            items=(
                ShoppingListItem(name="milk", unit=Unit.ML, total_amount=300.0),
                ShoppingListItem(name="sugar", unit=Unit.G, total_amount=60.0),
            )
        )
        assert shopping.amount_of("Milk", Unit.ML) == 300.0
        assert shopping.amount_of("sugar", Unit.ML) is None
        assert len(shopping) == 2
        assert not shopping.is_empty()

    def test_empty(self) -> None:
        """Test an empty list reports empty."""
        assert ShoppingList().is_empty()
