"""Exceptions for stream analytics."""


class AnalyticsError(Exception):
    """Base exception for analytics errors."""


class AnalyzerDisposedError(AnalyticsError):
    """Analyzer was used after it has been disposed."""


class TimerAlreadyRunningError(AnalyticsError):
    """Timer of a throughput analyzer can only be started once."""
