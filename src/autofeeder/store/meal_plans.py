"""Fixed-capacity meal plan repository."""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from autofeeder.errors import PlanIndexError
from autofeeder.models.meal_plan import MealPlan

logger = logging.getLogger(__name__)


def _copy(plan: Optional[MealPlan]) -> Optional[MealPlan]:
    return plan.model_copy() if plan is not None else None


class MealPlanRepository:
    """Indexed slots holding at most ``capacity`` distinct meal plans.

    Empty slots are ``None``. Plans are copied on the way in and out, so a caller mutating its
    own ``MealPlan`` never changes what is stored. Index misuse raises :class:`PlanIndexError`
    instead of returning a soft failure; negative indexes are never wrapped around.
    """

    def __init__(self, capacity: Optional[int] = None) -> None:
        if capacity is None:
            from autofeeder.config import get_settings

            capacity = get_settings().meal_plan_capacity
        if capacity < 1:
            raise ValueError(f"Meal plan capacity must be positive, got {capacity}")
        self._slots: List[Optional[MealPlan]] = [None] * capacity

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._slots):
            raise PlanIndexError(index, len(self._slots))

    def all(self) -> Tuple[Optional[MealPlan], ...]:
        """Return copies of the slots in index order."""

        return tuple(_copy(plan) for plan in self._slots)

    def get(self, index: int) -> Optional[MealPlan]:
        self._check_index(index)
        return _copy(self._slots[index])

    def add(self, plan: Optional[MealPlan]) -> bool:
        """Store ``plan`` in the first empty slot.

        Returns False for ``None``, for a plan equal to one already stored, or when every slot
        is taken.
        """

        if plan is None:
            return False
        if any(existing == plan for existing in self._slots if existing is not None):
            logger.debug("Rejected duplicate meal plan %r", plan.name)
            return False
        for index, existing in enumerate(self._slots):
            if existing is None:
                self._slots[index] = plan.model_copy()
                logger.debug("Stored meal plan %r in slot %s", plan.name, index)
                return True
        logger.debug("Meal plan repository full, rejected %r", plan.name)
        return False

    def edit(self, index: int, plan: MealPlan) -> Optional[str]:
        """Replace the plan at ``index`` and return the previous plan's name."""

        self._check_index(index)
        previous = self._slots[index]
        if previous is None:
            return None
        self._slots[index] = plan.model_copy()
        return previous.name

    def delete(self, index: int) -> Optional[str]:
        """Clear the slot at ``index`` and return the removed plan's name."""

        self._check_index(index)
        previous = self._slots[index]
        if previous is None:
            return None
        self._slots[index] = None
        return previous.name
