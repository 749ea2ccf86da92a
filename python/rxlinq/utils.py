"""Shared types and helpers for rxlinq operators."""

from collections.abc import Callable

from reactivex import Observable
from reactivex.abc import ObserverBase, SchedulerBase
from reactivex.observer import ObserveOnObserver

type Operator[T, U] = Callable[[Observable[T]], Observable[U]]

# Gate evaluated once per item, independent of the item itself
type Predicate = Callable[[], bool]


def notify_on[T](target: ObserverBase[T], scheduler: SchedulerBase | None) -> ObserverBase[T]:
    """Wrap target so its notifications are delivered on scheduler, if any."""
    if scheduler is None:
        return target
    return ObserveOnObserver(scheduler, target)
