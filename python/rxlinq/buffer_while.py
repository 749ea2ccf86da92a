"""Buffer operator that releases its batch when a gate closes.

Example:
    from rxlinq import buffer_while

    recording = False
    events.pipe(buffer_while(lambda: recording)).subscribe(
        on_next=lambda batch: store(batch),
    )

Items are collected while the gate holds. The item that arrives when the gate
is closed is appended and the whole batch is released with it. Whatever is
left over is flushed on completion and dropped on error or dispose.
"""

import logging
from collections.abc import Callable

import reactivex
from reactivex import Observable
from reactivex.abc import DisposableBase, ObserverBase, SchedulerBase
from reactivex.disposable import CompositeDisposable, Disposable

from rxlinq.utils import Operator, Predicate

logger = logging.getLogger(__name__)


class OpenBuffer[T]:
    """The batch currently being collected by one subscription."""

    def __init__(self, count: int | None = None) -> None:
        self._items: list[T] = []
        self._count = count
        self.closed = False

    def __len__(self) -> int:
        return len(self._items)

    @property
    def is_full(self) -> bool:
        return self._count is not None and len(self._items) >= self._count

    def append(self, item: T) -> None:
        if not self.closed:
            self._items.append(item)

    def release(self) -> list[T]:
        """Hand out the collected items and start over with an empty batch."""
        released, self._items = self._items, []
        return released

    def discard(self) -> None:
        """Drop the collected items; nothing is collected afterwards."""
        if self._items:
            logger.debug("discarding %d unreleased item(s)", len(self._items))
        self._items = []
        self.closed = True


def _buffer_while[T](gate: Callable[[T], bool], count: int | None) -> Operator[T, list[T]]:
    if count is not None and count <= 0:
        raise ValueError(f"count must be positive, got {count}")

    def _operator(source: Observable[T]) -> Observable[list[T]]:
        def subscribe(
            observer: ObserverBase[list[T]], scheduler: SchedulerBase | None = None
        ) -> DisposableBase:
            buffer: OpenBuffer[T] = OpenBuffer(count)

            def on_next(item: T) -> None:
                if buffer.closed:
                    return
                try:
                    keep_open = gate(item)
                except Exception as e:
                    buffer.discard()
                    observer.on_error(e)
                    return

                buffer.append(item)
                if not keep_open or buffer.is_full:
                    observer.on_next(buffer.release())

            def on_error(error: Exception) -> None:
                buffer.discard()
                observer.on_error(error)

            def on_completed() -> None:
                if len(buffer) > 0:
                    observer.on_next(buffer.release())
                buffer.discard()
                observer.on_completed()

            subscription = source.subscribe(
                on_next=on_next,
                on_error=on_error,
                on_completed=on_completed,
                scheduler=scheduler,
            )
            return CompositeDisposable(subscription, Disposable(buffer.discard))

        return reactivex.create(subscribe)

    return _operator


def buffer_while[T](predicate: Predicate, count: int | None = None) -> Operator[T, list[T]]:
    """Collect items while predicate() is true, release the batch when it turns false.

    The predicate takes no arguments and is called exactly once per item. When
    count is given, a batch is also released as soon as it holds count items.
    """
    return _buffer_while(lambda _: predicate(), count)


def buffer_while_value[T](
    predicate: Callable[[T], bool], count: int | None = None
) -> Operator[T, list[T]]:
    """Like buffer_while, but the predicate is given the incoming item."""
    return _buffer_while(predicate, count)
