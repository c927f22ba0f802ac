"""Feeder controller gating dispenses on stock and energy."""

from __future__ import annotations

import enum
import logging
import threading
from typing import Optional, Tuple

from autofeeder import metrics
from autofeeder.models.meal_plan import MealPlan
from autofeeder.store.ledger import StockLedger
from autofeeder.store.meal_plans import MealPlanRepository

logger = logging.getLogger(__name__)


class DispenseResult(str, enum.Enum):
    """Outcome label recorded for every dispense attempt."""

    DISPENSED = "dispensed"
    EMPTY_SLOT = "empty_slot"
    INSUFFICIENT_ENERGY = "insufficient_energy"
    INSUFFICIENT_STOCK = "insufficient_stock"


class FeederController:
    """Owns the stock ledger, the meal-plan repository and the energy budget.

    A single controller lock serialises dispenses against replenish and plan edits, so the
    scheduler thread and the caller thread never observe a half-applied feeding. ``name`` labels the
    remaining-energy gauge so several controllers in one process report separately.
    """

    def __init__(
        self,
        *,
        ledger: Optional[StockLedger] = None,
        meal_plans: Optional[MealPlanRepository] = None,
        energy_limit: Optional[int] = None,
        name: str = "default",
    ) -> None:
        if energy_limit is None:
            from autofeeder.config import get_settings

            energy_limit = get_settings().energy_limit
        if energy_limit < 0:
            raise ValueError(f"Energy limit must be non-negative, got {energy_limit}")
        self._ledger = ledger or StockLedger()
        self._meal_plans = meal_plans or MealPlanRepository()
        self._energy_limit = energy_limit
        self._remaining_energy = energy_limit
        self._lock = threading.Lock()
        self._energy_gauge = metrics.REMAINING_ENERGY.labels(feeder=name)
        self._energy_gauge.set(self._remaining_energy)
        self.name = name

    @property
    def energy_limit(self) -> int:
        return self._energy_limit

    @property
    def remaining_energy_budget(self) -> int:
        return self._remaining_energy

    @property
    def ledger(self) -> StockLedger:
        return self._ledger

    @property
    def meal_plans(self) -> MealPlanRepository:
        return self._meal_plans

    def dispense(self, index: int) -> bool:
        """Dispense the meal plan stored at ``index``.

        Raises :class:`~autofeeder.errors.PlanIndexError` for an out-of-range index. Returns
        False without changing stock or energy when the slot is empty, the plan costs more
        energy than remains, or the stock cannot cover it.
        """

        with self._lock:
            # get() hands back a private copy, so cost and consume see the same amounts.
            plan = self._meal_plans.get(index)
            result = self._attempt(plan)
            remaining = self._remaining_energy

        metrics.DISPENSE_RESULTS.labels(result=result.value).inc()
        if result is DispenseResult.DISPENSED:
            self._energy_gauge.set(remaining)
            logger.info(
                "Dispensed meal plan %r from slot %s remaining_energy=%s",
                plan.name if plan else None,
                index,
                remaining,
                extra={"plan_index": index},
            )
            return True
        logger.debug(
            "Dispense from slot %s skipped: %s",
            index,
            result.value,
            extra={"plan_index": index},
        )
        return False

    def _attempt(self, plan: Optional[MealPlan]) -> DispenseResult:
        if plan is None:
            return DispenseResult.EMPTY_SLOT
        cost = plan.energy_cost
        if cost > self._remaining_energy:
            return DispenseResult.INSUFFICIENT_ENERGY
        if not self._ledger.consume(plan):
            return DispenseResult.INSUFFICIENT_STOCK
        self._remaining_energy -= cost
        return DispenseResult.DISPENSED

    def reset_energy_budget(self) -> None:
        """Start a new feeding period with the full energy budget."""

        with self._lock:
            self._remaining_energy = self._energy_limit
        self._energy_gauge.set(self._energy_limit)
        logger.info("Energy budget reset to %s", self._energy_limit)

    def replenish_food(self, kibble: str, treats: str, water: str, wet_food: str) -> None:
        with self._lock:
            self._ledger.replenish(kibble, treats, water, wet_food)

    def check_stock(self) -> str:
        return self._ledger.report()

    def add_meal_plan(self, plan: Optional[MealPlan]) -> bool:
        with self._lock:
            return self._meal_plans.add(plan)

    def edit_meal_plan(self, index: int, plan: MealPlan) -> Optional[str]:
        with self._lock:
            return self._meal_plans.edit(index, plan)

    def delete_meal_plan(self, index: int) -> Optional[str]:
        with self._lock:
            return self._meal_plans.delete(index)

    def get_meal_plans(self) -> Tuple[Optional[MealPlan], ...]:
        with self._lock:
            return self._meal_plans.all()
