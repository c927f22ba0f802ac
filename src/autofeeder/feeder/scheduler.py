"""Background scheduler that dispenses a meal plan on a fixed period."""

from __future__ import annotations

import itertools
import logging
import math
import threading
import time
from dataclasses import dataclass
from typing import Optional

from autofeeder import metrics
from autofeeder.feeder.controller import FeederController

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScheduleHandle:
    """Identifies the recurring feeding currently installed on a scheduler."""

    schedule_id: int
    controller: Optional[FeederController]
    plan_index: int
    period_seconds: float


class _RecurringFeeding:
    """One recurring dispense running on its own daemon thread.

    Ticks are due at fixed multiples of the period from the start time, independent of how
    long each tick takes. Ticks of the same job run on one thread and never overlap.
    """

    def __init__(self, handle: ScheduleHandle) -> None:
        self.handle = handle
        self._cancelled = threading.Event()
        self._guard = threading.Lock()
        self._thread = threading.Thread(
            target=self._run_loop,
            name=f"feeding-schedule-{handle.schedule_id}",
            daemon=True,
        )

    def start(self) -> None:
        self._thread.start()

    def cancel(self) -> None:
        """Prevent further ticks; a tick already running is left to finish."""

        with self._guard:
            self._cancelled.set()

    def _run_loop(self) -> None:
        period = self.handle.period_seconds
        next_due = time.monotonic() + period
        while not self._cancelled.wait(max(0.0, next_due - time.monotonic())):
            with self._guard:
                if self._cancelled.is_set():
                    break
            self._tick()
            next_due += period
            behind = time.monotonic() - next_due
            if behind > 0:
                # Overran one or more periods: skip the missed slots instead of bursting.
                next_due += math.ceil(behind / period) * period

    def _tick(self) -> None:
        handle = self.handle
        log_extra = {"schedule_id": handle.schedule_id, "plan_index": handle.plan_index}
        started = time.perf_counter()
        try:
            dispensed = handle.controller.dispense(handle.plan_index)  # type: ignore[union-attr]
        except Exception:
            metrics.SCHEDULE_TICKS.labels(outcome="fault").inc()
            logger.exception(
                "Scheduled feeding of slot %s failed",
                handle.plan_index,
                extra=log_extra,
            )
            return
        finally:
            metrics.TICK_LATENCY.observe(time.perf_counter() - started)

        if dispensed:
            metrics.SCHEDULE_TICKS.labels(outcome="dispensed").inc()
        else:
            metrics.SCHEDULE_TICKS.labels(outcome="skipped").inc()
            logger.info(
                "Scheduled feeding of slot %s skipped",
                handle.plan_index,
                extra=log_extra,
            )


class FeedingScheduler:
    """Run at most one recurring ``dispense`` call against a feeder controller.

    Control operations never block on a running tick and never raise to the caller: a bad
    index, a missing controller or a failed thread start is logged and absorbed. Once
    :meth:`shutdown` has been called the scheduler refuses new schedules.
    """

    def __init__(self, controller: Optional[FeederController]) -> None:
        self._controller = controller
        self._lock = threading.Lock()
        self._active: Optional[_RecurringFeeding] = None
        self._closed = False
        self._ids = itertools.count(1)

    @property
    def active_schedule(self) -> Optional[ScheduleHandle]:
        job = self._active
        return job.handle if job is not None else None

    @property
    def is_shutdown(self) -> bool:
        return self._closed

    def has_active_schedule(self) -> bool:
        return self._active is not None

    def schedule_recurring_feeding(self, index: int, period_seconds: float) -> None:
        """Dispense the plan at ``index`` every ``period_seconds``, replacing any current schedule.

        The first dispense happens one period from now.
        """

        try:
            self._install(index, period_seconds)
        except Exception:
            logger.exception(
                "Unable to schedule recurring feeding of slot %s",
                index,
                extra={"plan_index": index},
            )

    def _install(self, index: int, period_seconds: float) -> None:
        period = float(period_seconds)
        if not (math.isfinite(period) and period > 0):
            logger.warning(
                "Ignoring recurring feeding of slot %s with invalid period %r",
                index,
                period_seconds,
                extra={"plan_index": index},
            )
            return

        with self._lock:
            if self._closed:
                logger.warning(
                    "Scheduler is shut down; not scheduling slot %s",
                    index,
                    extra={"plan_index": index},
                )
                return
            handle = ScheduleHandle(
                schedule_id=next(self._ids),
                controller=self._controller,
                plan_index=index,
                period_seconds=period,
            )
            job = _RecurringFeeding(handle)
            job.start()
            previous, self._active = self._active, job
            if previous is not None:
                previous.cancel()

        if previous is not None:
            logger.info(
                "Replaced schedule %s with schedule %s",
                previous.handle.schedule_id,
                handle.schedule_id,
                extra={"schedule_id": handle.schedule_id, "plan_index": index},
            )
        logger.info(
            "Scheduled feeding of slot %s every %ss",
            index,
            period,
            extra={"schedule_id": handle.schedule_id, "plan_index": index},
        )

    def stop(self) -> None:
        """Cancel the active schedule, if any. Safe to call repeatedly."""

        with self._lock:
            job, self._active = self._active, None
            if job is not None:
                job.cancel()
        if job is not None:
            logger.info(
                "Stopped schedule %s",
                job.handle.schedule_id,
                extra={"schedule_id": job.handle.schedule_id},
            )

    def shutdown(self) -> None:
        """Cancel the active schedule and refuse any further scheduling."""

        with self._lock:
            if self._closed:
                return
            self._closed = True
            job, self._active = self._active, None
            if job is not None:
                job.cancel()
        logger.info("Feeding scheduler shut down")


__all__ = ["FeedingScheduler", "ScheduleHandle"]
