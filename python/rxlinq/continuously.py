"""Gate operators that re-check their predicate for every item."""

from collections.abc import Callable

from reactivex import Observable
from reactivex import operators as ops

from rxlinq.utils import Operator, Predicate


def skip_continuously_while[T](predicate: Predicate) -> Operator[T, T]:
    """Drop items that arrive while predicate() is true.

    Unlike skip_while, the gate can close and reopen any number of times.
    """

    def _operator(source: Observable[T]) -> Observable[T]:
        return source.pipe(ops.filter(lambda _: not predicate()))

    return _operator


def take_continuously_while[T](predicate: Predicate) -> Operator[T, T]:
    """Forward items that arrive while predicate() is true, without completing early."""

    def _operator(source: Observable[T]) -> Observable[T]:
        return source.pipe(ops.filter(lambda _: predicate()))

    return _operator


def skip_continuously_while_value[T](predicate: Callable[[T], bool]) -> Operator[T, T]:
    """Drop each item for which predicate(item) is true; later items are still checked."""

    def _operator(source: Observable[T]) -> Observable[T]:
        return source.pipe(ops.filter(lambda value: not predicate(value)))

    return _operator


def take_continuously_while_value[T](predicate: Callable[[T], bool]) -> Operator[T, T]:
    """Forward each item for which predicate(item) is true, without completing early."""

    def _operator(source: Observable[T]) -> Observable[T]:
        return source.pipe(ops.filter(predicate))

    return _operator
