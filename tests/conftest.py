"""Shared pytest fixtures for the autofeeder test suite."""

from __future__ import annotations

from typing import Callable

import pytest

from autofeeder.config import get_settings
from autofeeder.feeder.controller import FeederController
from autofeeder.models.meal_plan import MealPlan

_SETTINGS_ENV = (
    "AUTOFEEDER_ENERGY_LIMIT",
    "AUTOFEEDER_INITIAL_STOCK",
    "AUTOFEEDER_MEAL_PLAN_CAPACITY",
    "AUTOFEEDER_LOG_LEVEL",
    "AUTOFEEDER_LOG_FORMAT",
)


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Run each test with default settings and no stray .env files."""

    monkeypatch.chdir(tmp_path)
    for key in _SETTINGS_ENV:
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def make_plan() -> Callable[..., MealPlan]:
    """Build a meal plan through the string setters, as user input would."""

    def _make(
        kibble: str = "0",
        treats: str = "0",
        water: str = "0",
        wet_food: str = "0",
        name: str = "TestMeal",
    ) -> MealPlan:
        plan = MealPlan()
        plan.set_name(name)
        plan.set_amount_kibble(kibble)
        plan.set_amount_treats(treats)
        plan.set_amount_water(water)
        plan.set_amount_wet_food(wet_food)
        return plan

    return _make


@pytest.fixture()
def controller() -> FeederController:
    """Fresh controller with default stock (15 of each) and energy limit (500)."""

    return FeederController()
