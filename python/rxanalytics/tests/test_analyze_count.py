"""Tests for count analysis."""

import threading

import pytest
import reactivex as rx
from reactivex.testing import ReactiveTest, TestScheduler

from rxanalytics import (
    AnalyzerDisposedError,
    CountAnalysisResult,
    CountAnalyzer,
    analyze,
    analyze_count,
)

on_next = ReactiveTest.on_next
on_error = ReactiveTest.on_error
on_completed = ReactiveTest.on_completed


@pytest.mark.parametrize(("start", "count"), [(0, 1), (10, 90), (0, 1000)])
def test_analyze_count_emits_per_item_then_completes(start: int, count: int) -> None:
    """One result per item plus the completion notification."""
    results: list[CountAnalysisResult] = []
    completed: list[bool] = []

    rx.range(start, start + count).pipe(analyze_count()).subscribe(
        on_next=results.append,
        on_completed=lambda: completed.append(True),
    )

    assert len(results) == count
    assert results[-1] == CountAnalysisResult(count)
    assert completed == [True]


def test_analyze_count_on_virtual_time() -> None:
    scheduler = TestScheduler()
    source = scheduler.create_hot_observable(
        on_next(210, "a"),
        on_next(220, "b"),
        on_completed(230),
    )

    results = scheduler.start(lambda: source.pipe(analyze_count(initial_count=5)))

    assert results.messages == [
        on_next(210, CountAnalysisResult(6)),
        on_next(220, CountAnalysisResult(7)),
        on_completed(230),
    ]


def test_analyze_count_forwards_error() -> None:
    scheduler = TestScheduler()
    source = scheduler.create_hot_observable(on_next(210, "a"), on_error(220, Exception("boom")))

    results = scheduler.start(lambda: source.pipe(analyze_count()))

    assert results.messages == [
        on_next(210, CountAnalysisResult(1)),
        on_error(220, Exception("boom")),
    ]


def test_analyze_count_fresh_state_per_subscription() -> None:
    pipeline = rx.of("a", "b").pipe(analyze_count())

    first: list[CountAnalysisResult] = []
    second: list[CountAnalysisResult] = []
    pipeline.subscribe(on_next=first.append)
    pipeline.subscribe(on_next=second.append)

    assert first == second == [CountAnalysisResult(1), CountAnalysisResult(2)]


def test_analyze_merges_several_analyzers() -> None:
    """Each analyzer sees the whole source; results are merged."""
    results: list[CountAnalysisResult] = []

    rx.of("a", "b").pipe(analyze(CountAnalyzer(), CountAnalyzer(initial_count=100))).subscribe(
        on_next=results.append
    )

    assert sorted(r.count for r in results) == [1, 2, 101, 102]


def test_analyze_requires_an_analyzer() -> None:
    with pytest.raises(ValueError, match="at least one analyzer"):
        analyze()


def test_analyze_runs_on_subscribe_hook() -> None:
    hooked: list[CountAnalyzer[str]] = []
    analyzer: CountAnalyzer[str] = CountAnalyzer()

    pipeline = rx.of("a").pipe(analyze(analyzer, on_subscribe=hooked.append))
    assert hooked == []

    pipeline.subscribe()
    assert hooked == [analyzer]


def test_count_analyzer_direct_subscription() -> None:
    analyzer: CountAnalyzer[str] = CountAnalyzer()
    results: list[CountAnalysisResult] = []
    analyzer.results.subscribe(on_next=results.append)

    rx.of("a", "b", "c").subscribe(analyzer)

    assert analyzer.count == 3
    assert results[-1] == CountAnalysisResult(3)


def test_count_analyzer_disposed_access_raises() -> None:
    analyzer: CountAnalyzer[str] = CountAnalyzer()
    analyzer.dispose()

    with pytest.raises(AnalyzerDisposedError):
        _ = analyzer.results
    with pytest.raises(AnalyzerDisposedError):
        _ = analyzer.count


def test_count_analyzer_rejects_negative_start() -> None:
    with pytest.raises(ValueError, match="initial_count"):
        CountAnalyzer(initial_count=-1)


def test_count_analyzer_results_ordered_across_threads() -> None:
    """Feeding one analyzer from several threads still publishes counts in order."""
    analyzer: CountAnalyzer[int] = CountAnalyzer()
    counts: list[int] = []
    analyzer.results.subscribe(on_next=lambda r: counts.append(r.count))

    def feed() -> None:
        for i in range(250):
            analyzer.on_next(i)

    feeders = [threading.Thread(target=feed) for _ in range(4)]
    for feeder in feeders:
        feeder.start()
    for feeder in feeders:
        feeder.join()

    assert counts == list(range(1, 1001))
