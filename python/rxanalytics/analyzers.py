"""Analyzers: observers that turn a stream into a stream of measurements.

Example:
    analyzer = CountAnalyzer()
    analyzer.results.subscribe(on_next=print)
    rx.of("a", "b").subscribe(analyzer)
    # CountAnalysisResult(count=1)
    # CountAnalysisResult(count=2)
"""

import logging
import threading
from datetime import timedelta

from reactivex import Observable, Observer
from reactivex.abc import SchedulerBase
from reactivex.subject import Subject

from rxanalytics.exceptions import AnalyzerDisposedError, TimerAlreadyRunningError
from rxanalytics.results import CountAnalysisResult, ThroughputAnalysisResult
from rxanalytics.stopwatch import Stopwatch

logger = logging.getLogger(__name__)


class Analyzer[T, R](Observer[T]):
    """Observer of T that publishes results of type R on `results`.

    Errors and completion of the analyzed stream are forwarded to `results`.
    Subclasses implement _on_next_core and call _publish.
    """

    def __init__(self) -> None:
        super().__init__()
        self._results: Subject[R] = Subject()
        self.is_disposed = False

    @property
    def results(self) -> Observable[R]:
        self._check_disposed()
        return self._results

    def _publish(self, result: R) -> None:
        # Callers hold their counter lock so results leave in count order.
        self._results.on_next(result)

    def _on_error_core(self, error: Exception) -> None:
        self._results.on_error(error)

    def _on_completed_core(self) -> None:
        self._results.on_completed()

    def _check_disposed(self) -> None:
        if self.is_disposed:
            raise AnalyzerDisposedError(f"{type(self).__name__} has been disposed")

    def dispose(self) -> None:
        if self.is_disposed:
            return
        super().dispose()
        self._results.dispose()
        self.is_disposed = True
        logger.debug("%s disposed", type(self).__name__)


class CountAnalyzer[T](Analyzer[T, CountAnalysisResult]):
    """Publishes the running item count for every item."""

    def __init__(self, initial_count: int = 0) -> None:
        if initial_count < 0:
            raise ValueError(f"initial_count must not be negative, got {initial_count}")
        super().__init__()
        self._count = initial_count
        self._lock = threading.RLock()

    @property
    def count(self) -> int:
        self._check_disposed()
        return self._count

    def _on_next_core(self, value: T) -> None:
        with self._lock:
            self._count += 1
            self._publish(CountAnalysisResult(self._count))


class ThroughputAnalyzer[T](Analyzer[T, ThroughputAnalysisResult]):
    """Publishes total count and elapsed time for every item since the timer started.

    Items that arrive before start_timer() are not counted.
    """

    def __init__(
        self,
        scheduler: SchedulerBase | None = None,
        initial_count: int = 0,
        start_timer_immediately: bool = True,
    ) -> None:
        if initial_count < 0:
            raise ValueError(f"initial_count must not be negative, got {initial_count}")
        super().__init__()
        self._scheduler = scheduler
        self._total_count = initial_count
        self._stopwatch: Stopwatch | None = None
        self._lock = threading.RLock()
        if start_timer_immediately:
            self.start_timer()

    @property
    def is_running(self) -> bool:
        self._check_disposed()
        return self._stopwatch is not None

    @property
    def total_count(self) -> int:
        self._check_disposed()
        return self._total_count

    @property
    def elapsed(self) -> timedelta | None:
        self._check_disposed()
        return self._stopwatch.elapsed if self._stopwatch else None

    def start_timer(self) -> None:
        if self.is_running:
            raise TimerAlreadyRunningError("timer is already running and can only be started once")
        self._stopwatch = Stopwatch.start_new(self._scheduler)
        logger.debug("%s timer started", type(self).__name__)

    def _on_next_core(self, value: T) -> None:
        stopwatch = self._stopwatch
        if stopwatch is None:
            return
        with self._lock:
            self._total_count += 1
            self._publish(ThroughputAnalysisResult(self._total_count, stopwatch.elapsed))
