"""Meal plan model."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from autofeeder.errors import MealPlanError, parse_amount

# Energy units consumed per unit of each ingredient.
ENERGY_WEIGHTS = {
    "kibble": 10,
    "water": 5,
    "wet_food": 15,
    "treats": 20,
}


class MealPlan(BaseModel):
    """Named bundle of ingredient amounts dispensed together.

    Amounts are plain non-negative integers. The string setters mirror how amounts arrive from
    user input and raise :class:`~autofeeder.errors.MealPlanError` without touching the plan
    when the value does not parse.
    """

    name: str = Field(default="")
    kibble: int = Field(default=0, ge=0)
    water: int = Field(default=0, ge=0)
    wet_food: int = Field(default=0, ge=0)
    treats: int = Field(default=0, ge=0)

    model_config = ConfigDict(validate_assignment=True)

    @field_validator("name", mode="before")
    @classmethod
    def _blank_name(cls, value: Optional[str]) -> str:
        return "" if value is None else value

    @computed_field  # type: ignore[prop-decorator]
    @property
    def energy_cost(self) -> int:
        """Weighted sum of the four ingredient amounts."""

        return sum(getattr(self, field) * weight for field, weight in ENERGY_WEIGHTS.items())

    def set_name(self, name: Optional[str]) -> None:
        self.name = name  # type: ignore[assignment]

    def set_amount_kibble(self, raw: str) -> None:
        self.kibble = parse_amount(raw, label="Units of kibble", error=MealPlanError)

    def set_amount_water(self, raw: str) -> None:
        self.water = parse_amount(raw, label="Units of water", error=MealPlanError)

    def set_amount_wet_food(self, raw: str) -> None:
        self.wet_food = parse_amount(raw, label="Units of wet food", error=MealPlanError)

    def set_amount_treats(self, raw: str) -> None:
        self.treats = parse_amount(raw, label="Units of treats", error=MealPlanError)

    def __str__(self) -> str:
        return self.name
