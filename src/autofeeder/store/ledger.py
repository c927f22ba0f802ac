"""Ingredient stock ledger."""

from __future__ import annotations

import logging
import threading
from typing import Dict, Optional

from autofeeder.errors import StockError, parse_amount
from autofeeder.models.meal_plan import MealPlan
from autofeeder.models.stock import StockLevels

logger = logging.getLogger(__name__)

INGREDIENTS = ("kibble", "water", "wet_food", "treats")

_LABELS = {
    "kibble": "Kibble",
    "water": "Water",
    "wet_food": "Wet food",
    "treats": "Treats",
}


class StockLedger:
    """Four non-negative ingredient quantities with validated mutation.

    Every read-modify-write runs under the ledger lock, so a replenish from the caller thread
    and a consume from the scheduler thread cannot interleave.
    """

    def __init__(self, initial_stock: Optional[int] = None) -> None:
        if initial_stock is None:
            from autofeeder.config import get_settings

            initial_stock = get_settings().initial_stock
        if initial_stock < 0:
            raise StockError(f"Initial stock must be non-negative, got {initial_stock}")
        self._lock = threading.Lock()
        self._stock: Dict[str, int] = {name: initial_stock for name in INGREDIENTS}

    @property
    def kibble(self) -> int:
        return self._stock["kibble"]

    @property
    def water(self) -> int:
        return self._stock["water"]

    @property
    def wet_food(self) -> int:
        return self._stock["wet_food"]

    @property
    def treats(self) -> int:
        return self._stock["treats"]

    def levels(self) -> StockLevels:
        """Return a consistent snapshot of all four quantities."""

        with self._lock:
            return StockLevels(**self._stock)

    def replenish(self, kibble: str, treats: str, water: str, wet_food: str) -> None:
        """Add the parsed amounts to the stock.

        All four values are validated before anything is added; a single bad value raises
        :class:`StockError` and leaves the ledger untouched.
        """

        amounts = {
            "kibble": parse_amount(kibble, label="Units of kibble", error=StockError),
            "treats": parse_amount(treats, label="Units of treats", error=StockError),
            "water": parse_amount(water, label="Units of water", error=StockError),
            "wet_food": parse_amount(wet_food, label="Units of wet food", error=StockError),
        }
        with self._lock:
            for name, amount in amounts.items():
                self._stock[name] += amount
        logger.debug("Replenished stock %s", amounts)

    def add_kibble(self, raw: str) -> None:
        self._add("kibble", raw)

    def add_water(self, raw: str) -> None:
        self._add("water", raw)

    def add_wet_food(self, raw: str) -> None:
        self._add("wet_food", raw)

    def add_treats(self, raw: str) -> None:
        self._add("treats", raw)

    def _add(self, name: str, raw: str) -> None:
        amount = parse_amount(raw, label=f"Units of {_LABELS[name].lower()}", error=StockError)
        with self._lock:
            self._stock[name] += amount

    def has_enough(self, plan: MealPlan) -> bool:
        """Return True when every amount required by ``plan`` is in stock."""

        with self._lock:
            return self._has_enough(plan)

    def _has_enough(self, plan: MealPlan) -> bool:
        return all(getattr(plan, name) <= self._stock[name] for name in INGREDIENTS)

    def consume(self, plan: MealPlan) -> bool:
        """Deduct the plan's amounts if all are available; otherwise change nothing."""

        with self._lock:
            if not self._has_enough(plan):
                return False
            for name in INGREDIENTS:
                self._stock[name] -= getattr(plan, name)
            return True

    def report(self) -> str:
        """Human-readable stock summary, one labelled line per ingredient."""

        levels = self.levels()
        return "".join(f"{_LABELS[name]}: {getattr(levels, name)}\n" for name in INGREDIENTS)

    def __str__(self) -> str:
        return self.report()
