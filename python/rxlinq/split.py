"""Fan-out helpers that push one source into several observers."""

from collections.abc import Callable

from reactivex import Observable
from reactivex import operators as ops
from reactivex.abc import DisposableBase, ObserverBase, SchedulerBase

from rxlinq.utils import notify_on


def split_two_ways[T](
    source: Observable[T],
    predicate: Callable[[T], bool],
    target_for_true: ObserverBase[T],
    target_for_false: ObserverBase[T],
    scheduler: SchedulerBase | None = None,
) -> DisposableBase:
    """Route each item to one of two observers depending on predicate(item).

    Errors and completion are delivered to both targets. An exception raised by
    the predicate ends the source and is delivered to both as an error.
    """
    when_true = notify_on(target_for_true, scheduler)
    when_false = notify_on(target_for_false, scheduler)

    def on_next(routed: tuple[bool, T]) -> None:
        matched, value = routed
        if matched:
            when_true.on_next(value)
        else:
            when_false.on_next(value)

    def on_error(error: Exception) -> None:
        when_true.on_error(error)
        when_false.on_error(error)

    def on_completed() -> None:
        when_true.on_completed()
        when_false.on_completed()

    # ops.map turns a raising predicate into on_error and disposes upstream
    routed: Observable[tuple[bool, T]] = source.pipe(ops.map(lambda value: (predicate(value), value)))
    return routed.subscribe(on_next=on_next, on_error=on_error, on_completed=on_completed)


def split[T](
    source: Observable[T],
    *targets: ObserverBase[T],
    scheduler: SchedulerBase | None = None,
) -> DisposableBase:
    """Broadcast every notification of source to each target observer."""
    observers = [notify_on(target, scheduler) for target in targets]

    def on_next(value: T) -> None:
        for observer in observers:
            observer.on_next(value)

    def on_error(error: Exception) -> None:
        for observer in observers:
            observer.on_error(error)

    def on_completed() -> None:
        for observer in observers:
            observer.on_completed()

    return source.subscribe(on_next=on_next, on_error=on_error, on_completed=on_completed)
