"""Command-line interface for the meal planner.

Provides ``plan`` (show slot assignments) and ``shop`` (show or export the
shopping list) subcommands. Wires together the recipe catalog, a planning
strategy, and the grocery service; defaults come from ``Config``.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from meal_planner.catalog import RecipeCatalog
from meal_planner.catalog_io import CatalogFileError, load_catalog, load_pantry
from meal_planner.config import STRATEGIES, ConfigError, load_config
from meal_planner.grocery_service import GroceryService
from meal_planner.models import parse_meal_types
from meal_planner.pantry import Pantry
from meal_planner.planner_service import MealPlannerService
from meal_planner.price_book import PriceBook
from meal_planner.printer import format_plan, format_text, write_csv
from meal_planner.strategy import (
    BudgetAwareStrategy,
    PantryFirstStrategy,
    RandomStrategy,
)
from meal_planner.units import parse_unit

if TYPE_CHECKING:
    from meal_planner.config import Config
    from meal_planner.models import MealPlan, MealType
    from meal_planner.strategy import MealPlanStrategy


logger = logging.getLogger(__name__)


# ------------------------------------------------------------------
# Input parsing
# ------------------------------------------------------------------


def parse_pantry_spec(spec: str) -> Pantry:
    """Parse inline pantry stock such as ``"milk=200:ML,egg=1:PCS"``.

    Args:
        spec: Comma-separated ``name=amount:UNIT`` entries. Blank entries
            are ignored.

    Returns:
        Pantry holding the parsed stock.

    Raises:
        ValueError: If an entry is malformed.
    """
    pantry = Pantry()
    for entry in (e.strip() for e in spec.split(",")):
        if not entry:
            continue
        name, sep, rest = entry.partition("=")
        amount_raw, sep2, unit_raw = rest.partition(":")
        if not sep or not sep2:
            raise ValueError(f"Bad pantry entry: {entry} (use name=amount:UNIT)")
        try:
            amount = float(amount_raw.strip())
        except ValueError as err:
            raise ValueError(f"Bad amount: {amount_raw.strip()!r}") from err
        pantry.add(name.strip(), amount, parse_unit(unit_raw))
    return pantry


def _build_strategy(
    name: str,
    *,
    seed: int,
    budget: float,
    pantry: Pantry | None,
) -> MealPlanStrategy:
    """Create the strategy selected on the command line.

    Args:
        name: One of ``STRATEGIES``.
        seed: Seed for the random strategy.
        budget: Budget for the budget-aware strategy.
        pantry: Stock for the pantry-first strategy (empty if None).

    Returns:
        The strategy instance.
    """
    if name == "pantry-first":
        return PantryFirstStrategy(pantry if pantry is not None else Pantry())
    if name == "budget":
        return BudgetAwareStrategy(PriceBook.samples(), budget)
    return RandomStrategy(seed=seed)


def _load_catalog(args: argparse.Namespace, cfg: Config) -> RecipeCatalog:
    """Load the catalog file if one is configured, else the samples."""
    path = args.catalog or cfg.catalog_path
    if path:
        return load_catalog(Path(path))
    return RecipeCatalog.samples()


def _load_pantry(args: argparse.Namespace, cfg: Config) -> Pantry | None:
    """Combine pantry file stock and inline ``--pantry`` stock.

    Returns:
        The pantry, or None if no stock source was given.
    """
    path = args.pantry_file or cfg.pantry_path
    pantry = load_pantry(Path(path)) if path else None
    if args.pantry:
        inline = parse_pantry_spec(args.pantry)
        if pantry is None:
            return inline
        for key, amount in inline.snapshot().items():
            pantry.add(key.name, amount, key.unit)
    return pantry


def _generate(
    args: argparse.Namespace,
    cfg: Config,
) -> tuple[MealPlan, Pantry | None]:
    """Resolve options against config and generate a plan.

    Args:
        args: Parsed command-line arguments.
        cfg: Loaded configuration.

    Returns:
        The plan and the pantry used (if any).
    """
    days: int = args.days if args.days is not None else cfg.default_days
    meal_types: list[MealType] = parse_meal_types(args.meals or cfg.default_meals)
    strategy_name: str = args.strategy or cfg.default_strategy
    seed: int = args.seed if args.seed is not None else cfg.default_seed
    budget: float = args.budget if args.budget is not None else cfg.default_budget

    catalog = _load_catalog(args, cfg)
    pantry = _load_pantry(args, cfg)
    strategy = _build_strategy(strategy_name, seed=seed, budget=budget, pantry=pantry)
    logger.info(
        "Planning %d day(s) x %d meal(s) with %s strategy",
        days,
        len(meal_types),
        strategy_name,
    )
    service = MealPlannerService(catalog, strategy)
    return service.plan(days, meal_types), pantry


# ------------------------------------------------------------------
# Handlers
# ------------------------------------------------------------------


def _handle_plan(args: argparse.Namespace, cfg: Config) -> int:
    """Handle the ``plan`` subcommand.

    Args:
        args: Parsed command-line arguments.
        cfg: Loaded configuration.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    try:
        plan, _pantry = _generate(args, cfg)
    except (ValueError, CatalogFileError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(format_plan(plan))
    return 0


def _handle_shop(args: argparse.Namespace, cfg: Config) -> int:
    """Handle the ``shop`` subcommand.

    Args:
        args: Parsed command-line arguments.
        cfg: Loaded configuration.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    try:
        plan, pantry = _generate(args, cfg)
    except (ValueError, CatalogFileError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    shopping_list = GroceryService().build_from(plan, pantry)
    print(format_text(shopping_list))

    if args.csv:
        csv_path = Path(args.csv)
        try:
            write_csv(shopping_list, csv_path)
        except OSError as exc:
            print(f"Error writing {csv_path}: {exc}", file=sys.stderr)
            return 1
        print(f"Wrote {len(shopping_list)} item(s) to {csv_path}")
    return 0


# ------------------------------------------------------------------
# Parser
# ------------------------------------------------------------------


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser with all subcommands.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog="meal-planner",
        description="Meal Planner: plan meals and build a shopping list.",
    )
    subparsers = parser.add_subparsers(dest="command")

    _add_plan_parser(subparsers)
    _add_shop_parser(subparsers)

    return parser


def _add_common_options(parser: argparse.ArgumentParser) -> None:
    """Add the planning options shared by every subcommand.

    Defaults are None so unset options fall back to ``Config``.

    Args:
        parser: Subcommand parser to extend.
    """
    parser.add_argument("--days", type=int, default=None, help="Number of days.")
    parser.add_argument(
        "--meals",
        default=None,
        help="Comma-separated meals (breakfast,lunch,dinner) or a count per day.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducible plans.",
    )
    parser.add_argument(
        "--strategy",
        choices=STRATEGIES,
        default=None,
        help="Planning strategy.",
    )
    parser.add_argument(
        "--budget",
        type=float,
        default=None,
        help="Total budget for the budget strategy.",
    )
    parser.add_argument(
        "--catalog",
        default=None,
        help="Recipe catalog JSON file (default: built-in samples).",
    )
    parser.add_argument(
        "--pantry",
        default=None,
        help='Existing stock, e.g. "milk=200:ML,egg=1:PCS".',
    )
    parser.add_argument(
        "--pantry-file",
        default=None,
        help="Pantry JSON file.",
    )


def _add_plan_parser(
    subparsers: argparse._SubParsersAction[argparse.ArgumentParser],
) -> None:
    """Add the ``plan`` subcommand parser.

    Args:
        subparsers: Subparsers action from the main parser.
    """
    plan_parser = subparsers.add_parser(
        "plan",
        help="Show the recipe chosen for every meal slot.",
    )
    _add_common_options(plan_parser)


def _add_shop_parser(
    subparsers: argparse._SubParsersAction[argparse.ArgumentParser],
) -> None:
    """Add the ``shop`` subcommand parser.

    Args:
        subparsers: Subparsers action from the main parser.
    """
    shop_parser = subparsers.add_parser(
        "shop",
        help="Show what to buy, net of pantry stock.",
    )
    _add_common_options(shop_parser)
    shop_parser.add_argument(
        "--csv",
        default=None,
        help="Also write the shopping list to this CSV file.",
    )


# ------------------------------------------------------------------
# Entry point
# ------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """Run the CLI application.

    Args:
        argv: Optional argument list (defaults to sys.argv[1:]).
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    try:
        cfg = load_config()
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    logging.basicConfig(level=cfg.log_level_number, format="%(levelname)s: %(message)s")

    exit_code = _dispatch(args, cfg)
    sys.exit(exit_code)


def _dispatch(args: argparse.Namespace, cfg: Config) -> int:
    """Dispatch a parsed command to the appropriate handler.

    Args:
        args: Parsed command-line arguments.
        cfg: Loaded configuration.

    Returns:
        Exit code from the handler.
    """
    command: str = args.command
    if command == "plan":
        return _handle_plan(args, cfg)
    if command == "shop":
        return _handle_shop(args, cfg)
    return 1  # pragma: no cover
