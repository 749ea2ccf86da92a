"""Result types emitted by analyzers."""

import math
from dataclasses import dataclass
from datetime import timedelta

_MILLISECOND = 0.001
_MINUTE = 60.0
_HOUR = 60.0 * _MINUTE
_DAY = 24.0 * _HOUR


@dataclass(frozen=True)
class CountAnalysisResult:
    """Number of items seen so far."""

    count: int

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError(f"count must not be negative, got {self.count}")


@dataclass(frozen=True)
class ThroughputAnalysisResult:
    """Items counted over a measured span of time.

    Rates for a zero-length span follow float division: inf for a positive
    count, nan for no items at all.
    """

    count: int
    elapsed: timedelta

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError(f"count must not be negative, got {self.count}")

    def _per(self, unit_seconds: float) -> float:
        units = self.elapsed.total_seconds() / unit_seconds
        if units == 0:
            return math.inf if self.count else math.nan
        return self.count / units

    @property
    def per_millisecond(self) -> float:
        return self._per(_MILLISECOND)

    @property
    def per_second(self) -> float:
        return self._per(1.0)

    @property
    def per_minute(self) -> float:
        return self._per(_MINUTE)

    @property
    def per_hour(self) -> float:
        return self._per(_HOUR)

    @property
    def per_day(self) -> float:
        return self._per(_DAY)


type AnalysisResult = CountAnalysisResult | ThroughputAnalysisResult
