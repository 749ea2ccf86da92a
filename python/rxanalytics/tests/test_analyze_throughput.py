"""Tests for throughput analysis."""

from datetime import timedelta

import pytest
import reactivex as rx
from reactivex.testing import ReactiveTest, TestScheduler

from rxanalytics import (
    ThroughputAnalysisResult,
    ThroughputAnalyzer,
    TimerAlreadyRunningError,
    analyze_overall_throughput,
    analyze_throughput,
)

on_next = ReactiveTest.on_next
on_completed = ReactiveTest.on_completed


def test_overall_throughput_measures_from_subscription() -> None:
    """Elapsed time is counted from the moment of subscription."""
    scheduler = TestScheduler()
    source = scheduler.create_hot_observable(
        on_next(150, "early"),
        on_next(210, "a"),
        on_next(220, "b"),
        on_completed(240),
    )

    results = scheduler.start(lambda: source.pipe(analyze_overall_throughput(clock=scheduler)))

    assert results.messages == [
        on_next(210, ThroughputAnalysisResult(1, timedelta(seconds=10))),
        on_next(220, ThroughputAnalysisResult(2, timedelta(seconds=20))),
        on_completed(240),
    ]


def test_overall_throughput_rates() -> None:
    scheduler = TestScheduler()
    source = scheduler.create_hot_observable(
        on_next(205, 1),
        on_next(210, 2),
        on_completed(220),
    )

    results = scheduler.start(lambda: source.pipe(analyze_overall_throughput(clock=scheduler)))
    last: ThroughputAnalysisResult = results.messages[1].value.value

    assert last.count == 2
    assert last.elapsed == timedelta(seconds=10)
    assert last.per_second == pytest.approx(0.2)
    assert last.per_millisecond == pytest.approx(2 / 10_000)
    assert last.per_minute == pytest.approx(12.0)


def test_overall_throughput_initial_count() -> None:
    scheduler = TestScheduler()
    source = scheduler.create_hot_observable(on_next(210, "a"), on_completed(220))

    results = scheduler.start(
        lambda: source.pipe(analyze_overall_throughput(initial_count=41, clock=scheduler))
    )

    assert results.messages[0] == on_next(210, ThroughputAnalysisResult(42, timedelta(seconds=10)))


def test_windowed_throughput_counts_per_window() -> None:
    """One result per window with the number of items seen in it."""
    scheduler = TestScheduler()
    source = scheduler.create_hot_observable(
        on_next(205, "a"),
        on_next(212, "b"),
        on_next(215, "c"),
        on_completed(228),
    )

    results = scheduler.start(lambda: source.pipe(analyze_throughput(10, scheduler=scheduler)))

    assert results.messages[:2] == [
        on_next(210, ThroughputAnalysisResult(1, timedelta(seconds=10))),
        on_next(220, ThroughputAnalysisResult(2, timedelta(seconds=10))),
    ]
    assert results.messages[-1].value.kind == "C"


def test_windowed_throughput_rejects_non_positive_resolution() -> None:
    with pytest.raises(ValueError, match="resolution must be positive"):
        analyze_throughput(timedelta(0))


def test_throughput_analyzer_ignores_items_before_start() -> None:
    scheduler = TestScheduler()
    analyzer: ThroughputAnalyzer[int] = ThroughputAnalyzer(scheduler, start_timer_immediately=False)
    results: list[ThroughputAnalysisResult] = []
    analyzer.results.subscribe(on_next=results.append)

    analyzer.on_next(1)
    assert not analyzer.is_running
    assert analyzer.elapsed is None

    analyzer.start_timer()
    scheduler.advance_to(5)
    analyzer.on_next(2)

    assert results == [ThroughputAnalysisResult(1, timedelta(seconds=5))]
    assert analyzer.total_count == 1


def test_throughput_analyzer_timer_starts_once() -> None:
    analyzer: ThroughputAnalyzer[int] = ThroughputAnalyzer(TestScheduler())

    with pytest.raises(TimerAlreadyRunningError):
        analyzer.start_timer()


def test_throughput_analyzer_wall_clock_default() -> None:
    """Without a scheduler the analyzer still measures non-negative time."""
    results: list[ThroughputAnalysisResult] = []
    rx.of(1, 2, 3).pipe(analyze_overall_throughput()).subscribe(on_next=results.append)

    assert [r.count for r in results] == [1, 2, 3]
    assert all(r.elapsed >= timedelta(0) for r in results)


def test_windowed_throughput_initial_count_seeds_first_window() -> None:
    """Items seen before subscribing are added to the first window only."""
    scheduler = TestScheduler()
    source = scheduler.create_hot_observable(
        on_next(205, "a"),
        on_next(215, "b"),
        on_completed(228),
    )

    results = scheduler.start(
        lambda: source.pipe(analyze_throughput(10, initial_count=3, scheduler=scheduler))
    )

    assert results.messages[:2] == [
        on_next(210, ThroughputAnalysisResult(4, timedelta(seconds=10))),
        on_next(220, ThroughputAnalysisResult(1, timedelta(seconds=10))),
    ]


def test_windowed_throughput_rejects_negative_initial_count() -> None:
    with pytest.raises(ValueError, match="initial_count must not be negative"):
        analyze_throughput(initial_count=-1)
