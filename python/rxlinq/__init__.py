"""Reactive stream operators for RxPy pipelines."""

from rxlinq.buffer_while import OpenBuffer, buffer_while, buffer_while_value
from rxlinq.continuously import (
    skip_continuously_while,
    skip_continuously_while_value,
    take_continuously_while,
    take_continuously_while_value,
)
from rxlinq.forward_to import forward_to
from rxlinq.merge_with import merge_with
from rxlinq.split import split, split_two_ways
from rxlinq.subjects import AsyncBufferingSubject, BufferedAsyncSubject, SubjectCancelledError

__all__ = [
    "AsyncBufferingSubject",
    "BufferedAsyncSubject",
    "OpenBuffer",
    "SubjectCancelledError",
    "buffer_while",
    "buffer_while_value",
    "forward_to",
    "merge_with",
    "skip_continuously_while",
    "skip_continuously_while_value",
    "split",
    "split_two_ways",
    "take_continuously_while",
    "take_continuously_while_value",
]
