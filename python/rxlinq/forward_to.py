"""Pass-through operator that mirrors notifications into side observers."""

import reactivex
from reactivex import Observable
from reactivex.abc import DisposableBase, ObserverBase, SchedulerBase

from rxlinq.utils import Operator, notify_on


def forward_to[T](
    *targets: ObserverBase[T], scheduler: SchedulerBase | None = None
) -> Operator[T, T]:
    """Forward every notification to targets before passing it downstream.

    The stream itself is left unchanged. When scheduler is given, targets are
    notified on it; the downstream observer is always notified synchronously.
    """

    def _operator(source: Observable[T]) -> Observable[T]:
        def subscribe(
            observer: ObserverBase[T], subscribe_scheduler: SchedulerBase | None = None
        ) -> DisposableBase:
            mirrors = [notify_on(target, scheduler) for target in targets]

            def on_next(value: T) -> None:
                for mirror in mirrors:
                    mirror.on_next(value)
                observer.on_next(value)

            def on_error(error: Exception) -> None:
                for mirror in mirrors:
                    mirror.on_error(error)
                observer.on_error(error)

            def on_completed() -> None:
                for mirror in mirrors:
                    mirror.on_completed()
                observer.on_completed()

            return source.subscribe(
                on_next=on_next,
                on_error=on_error,
                on_completed=on_completed,
                scheduler=subscribe_scheduler,
            )

        return reactivex.create(subscribe)

    return _operator
