"""In-memory stores backing the feeder controller."""

from .ledger import INGREDIENTS, StockLedger
from .meal_plans import MealPlanRepository

__all__ = ["INGREDIENTS", "StockLedger", "MealPlanRepository"]
