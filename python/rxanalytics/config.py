"""Configuration types for stream analytics."""

import logging
from dataclasses import dataclass, field
from datetime import timedelta
from enum import IntEnum


class LogLevel(IntEnum):
    """Log levels mirroring Python's logging module."""

    NOTSET = logging.NOTSET
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL


# Presets for windowed throughput
RESOLUTION_SECOND = timedelta(seconds=1)
RESOLUTION_MINUTE = timedelta(minutes=1)


@dataclass(frozen=True)
class AnalyticsConfig:
    """Static analytics configuration.

    Attributes:
        log_level: Level applied to the root logger by scripts
        initial_count: Count analyzers start from (e.g. when resuming a stream)
        resolution: Window length for windowed throughput
    """

    log_level: LogLevel = LogLevel.INFO
    initial_count: int = 0
    resolution: timedelta = field(default_factory=lambda: RESOLUTION_SECOND)

    def __post_init__(self) -> None:
        if self.initial_count < 0:
            raise ValueError(f"initial_count must not be negative, got {self.initial_count}")
        if self.resolution <= timedelta(0):
            raise ValueError(f"resolution must be positive, got {self.resolution}")
