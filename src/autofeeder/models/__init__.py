"""Pydantic models shared by the feeder components."""

from autofeeder.models.meal_plan import ENERGY_WEIGHTS, MealPlan
from autofeeder.models.stock import StockLevels

__all__ = ["ENERGY_WEIGHTS", "MealPlan", "StockLevels"]
