"""Subjects that hold back values until their source terminates.

Example:
    subject: AsyncBufferingSubject[int] = AsyncBufferingSubject()
    rx.of(1, 2, 3).subscribe(subject)
    subject.result()
    # [1, 2, 3]
"""

import logging
import threading
from typing import Self

from reactivex import abc
from reactivex.disposable import Disposable
from reactivex.internal.exceptions import SequenceContainsNoElementsError
from reactivex.subject import AsyncSubject, Subject
from reactivex.subject.innersubscription import InnerSubscription

logger = logging.getLogger(__name__)


class SubjectCancelledError(Exception):
    """The subject was terminated by cancel() before its source finished."""


class AsyncBufferingSubject[T](Subject[T]):
    """Like AsyncSubject, but keeps every value instead of only the last one.

    Nothing is emitted while the source runs. Once it terminates, every
    observer, current or late, receives all buffered values in arrival order
    followed by the terminal notification. Values are replayed on error too.
    """

    def __init__(self) -> None:
        super().__init__()
        self.values: list[T] = []
        self._terminated = threading.Event()

    @property
    def is_completed(self) -> bool:
        return self._terminated.is_set()

    def _subscribe_core(
        self,
        observer: abc.ObserverBase[T],
        scheduler: abc.SchedulerBase | None = None,
    ) -> abc.DisposableBase:
        with self.lock:
            self.check_disposed()
            if not self.is_stopped:
                self.observers.append(observer)
                return InnerSubscription(self, observer)

            values = list(self.values)
            error = self.exception

        for value in values:
            observer.on_next(value)
        if error is not None:
            observer.on_error(error)
        else:
            observer.on_completed()

        return Disposable()

    def _on_next_core(self, value: T) -> None:
        with self.lock:
            self.values.append(value)

    def _on_error_core(self, error: Exception) -> None:
        with self.lock:
            observers = self.observers.copy()
            self.observers.clear()
            self.exception = error
            values = list(self.values)
        self._terminated.set()

        for observer in observers:
            for value in values:
                observer.on_next(value)
            observer.on_error(error)

    def _on_completed_core(self) -> None:
        with self.lock:
            observers = self.observers.copy()
            self.observers.clear()
            values = list(self.values)
        self._terminated.set()

        for observer in observers:
            for value in values:
                observer.on_next(value)
            observer.on_completed()

    def cancel(self) -> Self:
        """Terminate the subject with SubjectCancelledError and return it."""
        self.on_error(SubjectCancelledError())
        return self

    def result(self, timeout: float | None = None) -> list[T]:
        """Block until the subject terminates and return the buffered values.

        Raises the error the subject terminated with, or TimeoutError when
        timeout elapses first.
        """
        if not self._terminated.wait(timeout):
            raise TimeoutError(f"{type(self).__name__} did not terminate within {timeout}s")

        with self.lock:
            self.check_disposed()
            if self.exception is not None:
                raise self.exception
            return list(self.values)

    def dispose(self) -> None:
        with self.lock:
            self.values = []
            super().dispose()
        # Wake blocked result() calls; they raise DisposedException.
        self._terminated.set()
        logger.debug("%s disposed", type(self).__name__)


class BufferedAsyncSubject[T](AsyncSubject[T]):
    """AsyncSubject whose final value can also be fetched by blocking on result()."""

    def __init__(self) -> None:
        super().__init__()
        self._terminated = threading.Event()

    @property
    def is_completed(self) -> bool:
        return self._terminated.is_set()

    def _on_error_core(self, error: Exception) -> None:
        with self.lock:
            self.exception = error
        self._terminated.set()
        super()._on_error_core(error)

    def _on_completed_core(self) -> None:
        self._terminated.set()
        super()._on_completed_core()

    def result(self, timeout: float | None = None) -> T:
        """Block until the subject terminates and return its last value.

        Raises the error the subject terminated with, SequenceContainsNoElementsError
        when it completed without a value, or TimeoutError.
        """
        if not self._terminated.wait(timeout):
            raise TimeoutError(f"{type(self).__name__} did not terminate within {timeout}s")

        with self.lock:
            self.check_disposed()
            if self.exception is not None:
                raise self.exception
            if not self.has_value:
                raise SequenceContainsNoElementsError()
            return self.value

    def dispose(self) -> None:
        super().dispose()
        self._terminated.set()
        logger.debug("%s disposed", type(self).__name__)
