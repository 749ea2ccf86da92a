"""Merge operator that tolerates an empty list of other sources."""

import reactivex as rx
from reactivex import Observable

from rxlinq.utils import Operator


def merge_with[T](*others: Observable[T]) -> Operator[T, T]:
    """Merge the source with others; with no others the source is returned as is."""

    def _operator(source: Observable[T]) -> Observable[T]:
        if not others:
            return source
        return rx.merge(source, *others)

    return _operator
