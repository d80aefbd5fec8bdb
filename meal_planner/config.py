"""Configuration loading and validation for the meal planner.

Loads settings from .env via python-dotenv. Every setting has a default,
so a missing .env is fine; malformed values fail fast with a clear error.
"""

from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass
from typing import TYPE_CHECKING

from dotenv import load_dotenv

if TYPE_CHECKING:
    from pathlib import Path

STRATEGIES = ("random", "pantry-first", "budget")

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(Exception):
    """Raised when configuration is missing or invalid."""


@dataclass(frozen=True)
class Config:
    """Typed, validated application configuration."""

    # Planning defaults
    default_days: int = 2
    default_meals: str = "lunch,dinner"
    default_seed: int = 7
    default_strategy: str = "random"
    default_budget: float = 20.0

    # Data files (empty means built-in samples / empty pantry)
    catalog_path: str = ""
    pantry_path: str = ""

    log_level: str = "WARNING"

    @property
    def log_level_number(self) -> int:
        """Numeric ``logging`` level for ``log_level``."""
        return getattr(logging, self.log_level)


def _int_env(name: str, default: str) -> int:
    raw = os.getenv(name, default)
    try:
        return int(raw)
    except ValueError as err:
        raise ConfigError(f"{name} must be an integer, got: {raw!r}") from err


def _float_env(name: str, default: str) -> float:
    raw = os.getenv(name, default)
    try:
        return float(raw)
    except ValueError as err:
        raise ConfigError(f"{name} must be a number, got: {raw!r}") from err


def load_config(env_path: str | Path | None = None) -> Config:
    """Load and validate configuration from environment / .env file.

    Args:
        env_path: Optional path to .env file. If None, searches from cwd upward.

    Returns:
        Validated Config instance.

    Raises:
        ConfigError: If a value is malformed.
    """
    load_dotenv(dotenv_path=env_path)

    default_days = _int_env("MEAL_PLANNER_DAYS", "2")
    if default_days <= 0:
        raise ConfigError(f"MEAL_PLANNER_DAYS must be > 0, got: {default_days}")

    default_budget = _float_env("MEAL_PLANNER_BUDGET", "20.0")
    if not math.isfinite(default_budget) or default_budget <= 0:
        raise ConfigError(f"MEAL_PLANNER_BUDGET must be > 0, got: {default_budget}")

    strategy = os.getenv("MEAL_PLANNER_STRATEGY", "random").strip().lower()
    if strategy not in STRATEGIES:
        raise ConfigError(
            f"MEAL_PLANNER_STRATEGY must be one of {', '.join(STRATEGIES)}, "
            f"got: {strategy!r}"
        )

    log_level = os.getenv("MEAL_PLANNER_LOG_LEVEL", "WARNING").strip().upper()
    if log_level not in _LOG_LEVELS:
        raise ConfigError(
            f"MEAL_PLANNER_LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}, "
            f"got: {log_level!r}"
        )

    return Config(
        default_days=default_days,
        default_meals=os.getenv("MEAL_PLANNER_MEALS", "lunch,dinner"),
        default_seed=_int_env("MEAL_PLANNER_SEED", "7"),
        default_strategy=strategy,
        default_budget=default_budget,
        catalog_path=os.getenv("MEAL_PLANNER_CATALOG", ""),
        pantry_path=os.getenv("MEAL_PLANNER_PANTRY", ""),
        log_level=log_level,
    )
