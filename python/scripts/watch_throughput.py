#!/usr/bin/env python3
"""Demo program: batch a ticking stream with buffer_while and report throughput."""

import argparse
import logging
import signal
import sys
import threading
from itertools import count

import reactivex as rx
from reactivex import Observable
from reactivex import operators as ops
from reactivex.abc import SchedulerBase
from rxanalytics import AnalyticsConfig, LogLevel, ThroughputAnalysisResult, analyze_overall_throughput
from rxlinq import buffer_while


def build_pipeline[T](
    source: Observable[T], batch_size: int
) -> tuple[Observable[list[T]], Observable[ThroughputAnalysisResult]]:
    """Return (batches, throughput) for source.

    Batches are closed by a counter gate every batch_size items, counted afresh
    for each subscription; throughput is reported once per released batch.
    """

    def counted(_: SchedulerBase) -> Observable[list[T]]:
        ticks = count(1)
        return source.pipe(buffer_while(lambda: next(ticks) % batch_size != 0))

    batches: Observable[list[T]] = rx.defer(counted).pipe(ops.share())
    throughput: Observable[ThroughputAnalysisResult] = batches.pipe(
        ops.flat_map(rx.from_iterable),
        analyze_overall_throughput(),
        ops.filter(lambda result: result.count % batch_size == 0),
    )
    return batches, throughput


def main() -> int:
    parser = argparse.ArgumentParser(description="Batch a ticking stream and report throughput")
    parser.add_argument("--batch-size", type=int, default=10, help="Items per batch (default: 10)")
    parser.add_argument(
        "--interval",
        type=float,
        default=0.05,
        help="Seconds between ticks (default: 0.05)",
    )
    parser.add_argument(
        "--log-level",
        choices=[level.name for level in LogLevel],
        default=AnalyticsConfig().log_level.name,
        help="Log level (default: INFO)",
    )
    args = parser.parse_args()

    if args.batch_size <= 0:
        parser.error("--batch-size must be positive")

    config = AnalyticsConfig(log_level=LogLevel[args.log_level])
    logging.basicConfig(level=config.log_level, format="%(levelname)s: %(name)s: %(message)s")

    done = threading.Event()
    batches, throughput = build_pipeline(rx.interval(args.interval), args.batch_size)

    print("Ticking... (Ctrl+C to stop)")

    subscription = throughput.subscribe(
        on_next=lambda r: print(f"> {r.count} items, {r.per_second:.1f}/s"),
        on_error=lambda e: print(f"Error: {e}", file=sys.stderr),
        on_completed=done.set,
    )
    batch_subscription = batches.subscribe(on_next=lambda b: logging.debug("batch of %d", len(b)))

    def stop(*_: object) -> None:
        subscription.dispose()
        batch_subscription.dispose()
        done.set()

    signal.signal(signal.SIGINT, stop)
    done.wait()
    print("Done.")

    return 0


if __name__ == "__main__":
    sys.exit(main())
