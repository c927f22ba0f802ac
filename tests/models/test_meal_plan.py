"""Tests for the meal plan model."""

from __future__ import annotations

import pytest

from autofeeder.errors import MealPlanError
from autofeeder.models.meal_plan import MealPlan


def test_setters_parse_amounts():
    plan = MealPlan()
    plan.set_amount_kibble("4")
    plan.set_amount_water("2")
    plan.set_amount_wet_food("3")
    plan.set_amount_treats("0")

    assert (plan.kibble, plan.water, plan.wet_food, plan.treats) == (4, 2, 3, 0)


@pytest.mark.parametrize("raw", ["-3", "abc", "1.5", "", "1_000", " 7 ", "\u0661\u0662"])
def test_invalid_amount_raises_and_keeps_value(raw):
    plan = MealPlan(treats=2)

    with pytest.raises(MealPlanError):
        plan.set_amount_treats(raw)

    assert plan.treats == 2


def test_energy_cost_tracks_amount_changes():
    plan = MealPlan()
    plan.set_amount_kibble("2")
    plan.set_amount_water("1")
    plan.set_amount_wet_food("1")
    plan.set_amount_treats("0")

    # 2*10 + 1*5 + 1*15 + 0*20
    assert plan.energy_cost == 40

    plan.set_amount_treats("1")
    assert plan.energy_cost == 60


def test_name_defaults_to_empty():
    plan = MealPlan()
    assert plan.name == ""

    plan.set_name(None)
    assert plan.name == ""


def test_equality_is_structural(make_plan):
    first = make_plan(kibble="2", water="1", wet_food="1", name="Meal A")
    same = make_plan(kibble="2", water="1", wet_food="1", name="Meal A")
    renamed = make_plan(kibble="2", water="1", wet_food="1", name="Meal B")
    more_kibble = make_plan(kibble="1", water="1", wet_food="1", name="Meal A")

    assert first == same
    assert first != renamed
    assert first != more_kibble


def test_energy_cost_is_serialized():
    plan = MealPlan(name="Dinner", kibble=1)
    assert plan.model_dump()["energy_cost"] == 10
