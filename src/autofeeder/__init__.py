"""
Autofeeder pet-feeding automation package.

The package models a feeder with a bounded meal-plan book, a finite ingredient stock and a
per-period energy budget, and exposes a background scheduler that dispenses a chosen plan on a
fixed period.

Example usage:
    from autofeeder.feeder import FeederController, FeedingScheduler
    from autofeeder.logging_utils import configure_from_settings
    from autofeeder.models import MealPlan

    # Apply AUTOFEEDER_LOG_LEVEL / AUTOFEEDER_LOG_FORMAT once at startup.
    configure_from_settings()

    feeder = FeederController()
    feeder.add_meal_plan(MealPlan(name="Breakfast", kibble=5, water=1))
    scheduler = FeedingScheduler(feeder)
    scheduler.schedule_recurring_feeding(0, period_seconds=3600)
    ...
    scheduler.shutdown()
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
