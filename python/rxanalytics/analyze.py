"""Operators that run analyzers over a source stream."""

from collections.abc import Callable
from datetime import timedelta

import reactivex
from reactivex import Observable
from reactivex import operators as ops
from reactivex.abc import DisposableBase, ObserverBase, SchedulerBase
from reactivex.disposable import CompositeDisposable
from reactivex.scheduler import TimeoutScheduler
from rxlinq.utils import Operator

from rxanalytics.analyzers import Analyzer, CountAnalyzer, ThroughputAnalyzer
from rxanalytics.config import RESOLUTION_SECOND
from rxanalytics.results import CountAnalysisResult, ThroughputAnalysisResult
from rxanalytics.stopwatch import Stopwatch


def analyze[T, R](
    *analyzers: Analyzer[T, R],
    scheduler: SchedulerBase | None = None,
    on_subscribe: Callable[[Analyzer[T, R]], None] | None = None,
) -> Operator[T, R]:
    """Feed the source into each analyzer and emit their merged results.

    The downstream observer is attached to the analyzers' results before the
    source is subscribed, so synchronous sources are not missed. When scheduler
    is given the source is subscribed on it. on_subscribe runs for every
    analyzer right before it is wired up.
    """
    if not analyzers:
        raise ValueError("at least one analyzer is required")

    def _operator(source: Observable[T]) -> Observable[R]:
        def subscribe(
            observer: ObserverBase[R], subscribe_scheduler: SchedulerBase | None = None
        ) -> DisposableBase:
            if on_subscribe is not None:
                for analyzer in analyzers:
                    on_subscribe(analyzer)

            results = reactivex.merge(*(analyzer.results for analyzer in analyzers))
            forwarding = results.subscribe(observer, scheduler=subscribe_scheduler)

            feed = source.pipe(ops.subscribe_on(scheduler)) if scheduler else source
            feeding = CompositeDisposable(
                *(feed.subscribe(analyzer, scheduler=subscribe_scheduler) for analyzer in analyzers)
            )
            return CompositeDisposable(forwarding, feeding)

        return reactivex.create(subscribe)

    return _operator


def analyze_count[T](
    initial_count: int = 0, scheduler: SchedulerBase | None = None
) -> Operator[T, CountAnalysisResult]:
    """Emit the running count for every item, using a fresh analyzer per subscription."""

    def _operator(source: Observable[T]) -> Observable[CountAnalysisResult]:
        return reactivex.defer(
            lambda _: source.pipe(analyze(CountAnalyzer(initial_count), scheduler=scheduler))
        )

    return _operator


def analyze_overall_throughput[T](
    initial_count: int = 0,
    scheduler: SchedulerBase | None = None,
    clock: SchedulerBase | None = None,
) -> Operator[T, ThroughputAnalysisResult]:
    """Emit total count and time since subscription for every item.

    Time is read from clock, falling back to scheduler and then to the
    scheduler the subscription was made with.
    """

    def _operator(source: Observable[T]) -> Observable[ThroughputAnalysisResult]:
        def subscribe(
            observer: ObserverBase[ThroughputAnalysisResult],
            subscribe_scheduler: SchedulerBase | None = None,
        ) -> DisposableBase:
            analyzer: ThroughputAnalyzer[T] = ThroughputAnalyzer(
                clock or scheduler or subscribe_scheduler,
                initial_count,
                start_timer_immediately=False,
            )
            analyzed = source.pipe(
                analyze(analyzer, scheduler=scheduler, on_subscribe=lambda _: analyzer.start_timer())
            )
            return analyzed.subscribe(observer, scheduler=subscribe_scheduler)

        return reactivex.create(subscribe)

    return _operator


def analyze_throughput[T](
    resolution: timedelta | float = RESOLUTION_SECOND,
    initial_count: int = 0,
    scheduler: SchedulerBase | None = None,
) -> Operator[T, ThroughputAnalysisResult]:
    """Emit one result per resolution window with the items counted in it.

    The elapsed time of each result is the measured length of its window; the
    last window is cut short when the source completes. initial_count is
    added to the first window only, for items seen before subscribing.
    """
    if initial_count < 0:
        raise ValueError(f"initial_count must not be negative, got {initial_count}")
    seconds = resolution.total_seconds() if isinstance(resolution, timedelta) else resolution
    if seconds <= 0:
        raise ValueError(f"resolution must be positive, got {resolution}")

    def _operator(source: Observable[T]) -> Observable[ThroughputAnalysisResult]:
        def subscribe(
            observer: ObserverBase[ThroughputAnalysisResult],
            subscribe_scheduler: SchedulerBase | None = None,
        ) -> DisposableBase:
            window_scheduler = scheduler or subscribe_scheduler or TimeoutScheduler.singleton()
            stopwatch = Stopwatch.start_new(window_scheduler)
            carried = initial_count

            def measure(window: list[T]) -> ThroughputAnalysisResult:
                nonlocal carried
                count, carried = len(window) + carried, 0
                return ThroughputAnalysisResult(count, stopwatch.restart())

            windows = source.pipe(
                ops.buffer_with_time(resolution, scheduler=window_scheduler),
                ops.map(measure),
            )
            return windows.subscribe(observer, scheduler=subscribe_scheduler)

        return reactivex.create(subscribe)

    return _operator
