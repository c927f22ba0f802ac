"""Tests for the ingredient stock ledger."""

from __future__ import annotations

import threading

import pytest

from autofeeder.errors import StockError
from autofeeder.models.meal_plan import MealPlan
from autofeeder.store.ledger import StockLedger


@pytest.fixture()
def ledger() -> StockLedger:
    return StockLedger()


def test_initial_stock_uses_settings_default(ledger):
    levels = ledger.levels()
    assert (levels.kibble, levels.water, levels.wet_food, levels.treats) == (15, 15, 15, 15)


def test_initial_stock_respects_environment(monkeypatch):
    from autofeeder.config import get_settings

    monkeypatch.setenv("AUTOFEEDER_INITIAL_STOCK", "40")
    get_settings.cache_clear()

    assert StockLedger().kibble == 40


def test_replenish_adds_exact_amounts(ledger):
    ledger.replenish("5", "1", "2", "3")

    assert ledger.kibble == 20
    assert ledger.treats == 16
    assert ledger.water == 17
    assert ledger.wet_food == 18


@pytest.mark.parametrize(
    "amounts",
    [
        ("abc", "0", "0", "0"),
        ("0", "-1", "0", "0"),
        ("0", "0", "2.5", "0"),
        ("5", "5", "5", "x"),
        ("1_000", "0", "0", "0"),
        (" 7 ", "0", "0", "0"),
        ("\u0661\u0662", "0", "0", "0"),
    ],
)
def test_replenish_rejects_bad_input_without_mutation(ledger, amounts):
    before = ledger.report()

    with pytest.raises(StockError):
        ledger.replenish(*amounts)

    assert ledger.report() == before


def test_single_ingredient_adds(ledger):
    ledger.add_kibble("5")
    ledger.add_wet_food("5")

    assert ledger.kibble == 20
    assert ledger.wet_food == 20
    with pytest.raises(StockError):
        ledger.add_treats("-1")
    with pytest.raises(StockError):
        ledger.add_water("abc")


@pytest.mark.parametrize("field", ["kibble", "water", "wet_food", "treats"])
def test_has_enough_detects_each_shortfall(ledger, field):
    assert ledger.has_enough(MealPlan(kibble=10, water=10, wet_food=10, treats=10))
    assert not ledger.has_enough(MealPlan(**{field: 20}))


def test_consume_deducts_all_amounts(ledger):
    assert ledger.consume(MealPlan(kibble=5, water=5, wet_food=5, treats=5))

    levels = ledger.levels()
    assert (levels.kibble, levels.water, levels.wet_food, levels.treats) == (10, 10, 10, 10)


def test_consume_failure_leaves_stock_unchanged(ledger):
    before = ledger.levels()

    assert not ledger.consume(MealPlan(kibble=20, water=1))

    assert ledger.levels() == before


def test_concurrent_consumers_never_overdraw():
    ledger = StockLedger(initial_stock=100)
    plan = MealPlan(kibble=3)
    results: list[bool] = []
    barrier = threading.Barrier(8)

    def _worker() -> None:
        barrier.wait()
        for _ in range(10):
            results.append(ledger.consume(plan))

    threads = [threading.Thread(target=_worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert results.count(True) == 33
    assert ledger.kibble == 1


def test_report_labels_each_quantity(ledger):
    ledger.replenish("20", "0", "0", "0")
    report = ledger.report()

    assert "Kibble: 35" in report
    assert "Water: 15" in report
    assert "Wet food: 15" in report
    assert "Treats: 15" in report


def test_replenish_accepts_explicit_plus_sign(ledger):
    ledger.replenish("+5", "0", "0", "0")

    assert ledger.kibble == 20
