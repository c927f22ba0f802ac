"""Feeder controller and recurring feeding scheduler."""

from .controller import DispenseResult, FeederController
from .scheduler import FeedingScheduler, ScheduleHandle

__all__ = [
    "DispenseResult",
    "FeederController",
    "FeedingScheduler",
    "ScheduleHandle",
]
