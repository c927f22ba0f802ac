"""Exception types raised by the feeder components."""

from __future__ import annotations

import re

# ASCII decimal integer with an optional sign; no padding, no digit grouping.
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


class MealPlanError(ValueError):
    """Raised when a meal-plan ingredient amount is not a non-negative integer."""


class StockError(ValueError):
    """Raised when a replenish amount is not a non-negative integer."""


class PlanIndexError(IndexError):
    """Raised when a meal-plan slot index falls outside the repository bounds."""

    def __init__(self, index: int, capacity: int) -> None:
        super().__init__(f"Meal plan index {index} out of range [0, {capacity})")
        self.index = index
        self.capacity = capacity


def parse_amount(raw: object, *, label: str, error: type[ValueError]) -> int:
    """Parse ``raw`` as a non-negative integer or raise ``error``."""

    text = str(raw)
    if not _INTEGER_PATTERN.fullmatch(text):
        raise error(f"{label} must be a non-negative integer, got {raw!r}")
    value = int(text)
    if value < 0:
        raise error(f"{label} must be a non-negative integer, got {raw!r}")
    return value


__all__ = ["MealPlanError", "StockError", "PlanIndexError", "parse_amount"]
