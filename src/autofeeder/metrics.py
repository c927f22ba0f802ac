"""Prometheus metrics definitions for the feeder."""

from __future__ import annotations

from prometheus_client import Counter, Gauge, Histogram

DISPENSE_RESULTS = Counter(
    "autofeeder_dispense_total",
    "Number of dispense attempts by result",
    ["result"],
)

SCHEDULE_TICKS = Counter(
    "autofeeder_schedule_ticks_total",
    "Number of scheduled feeding ticks by outcome",
    ["outcome"],
)

TICK_LATENCY = Histogram(
    "autofeeder_schedule_tick_duration_seconds",
    "Time spent running a single scheduled feeding tick",
)

REMAINING_ENERGY = Gauge(
    "autofeeder_remaining_energy",
    "Energy budget remaining in the current feeding period",
    ["feeder"],
)

__all__ = [
    "DISPENSE_RESULTS",
    "SCHEDULE_TICKS",
    "TICK_LATENCY",
    "REMAINING_ENERGY",
]
