"""Elapsed-time measurement against a scheduler's clock."""

from datetime import timedelta
from typing import Self

from reactivex.abc import SchedulerBase
from reactivex.scheduler import CurrentThreadScheduler


class Stopwatch:
    """Measures time using scheduler.now, so virtual time works in tests.

    When no scheduler is given the current-thread scheduler's wall clock is used.
    """

    def __init__(self, scheduler: SchedulerBase | None = None) -> None:
        self._scheduler = scheduler or CurrentThreadScheduler.singleton()
        self._started_at = self._scheduler.now

    @classmethod
    def start_new(cls, scheduler: SchedulerBase | None = None) -> Self:
        return cls(scheduler)

    @property
    def elapsed(self) -> timedelta:
        return self._scheduler.now - self._started_at

    def restart(self) -> timedelta:
        """Return the elapsed time and start measuring again from now."""
        now = self._scheduler.now
        elapsed = now - self._started_at
        self._started_at = now
        return elapsed
