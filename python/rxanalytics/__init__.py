"""Analyzers and analysis operators for RxPy streams."""

from rxanalytics.analyze import analyze, analyze_count, analyze_overall_throughput, analyze_throughput
from rxanalytics.analyzers import Analyzer, CountAnalyzer, ThroughputAnalyzer
from rxanalytics.config import RESOLUTION_MINUTE, RESOLUTION_SECOND, AnalyticsConfig, LogLevel
from rxanalytics.exceptions import AnalyticsError, AnalyzerDisposedError, TimerAlreadyRunningError
from rxanalytics.results import (
    AnalysisResult,
    CountAnalysisResult,
    ThroughputAnalysisResult,
)
from rxanalytics.stopwatch import Stopwatch

__all__ = [
    "RESOLUTION_MINUTE",
    "RESOLUTION_SECOND",
    "AnalysisResult",
    "AnalyticsConfig",
    "AnalyticsError",
    "Analyzer",
    "AnalyzerDisposedError",
    "CountAnalysisResult",
    "CountAnalyzer",
    "LogLevel",
    "Stopwatch",
    "ThroughputAnalysisResult",
    "ThroughputAnalyzer",
    "TimerAlreadyRunningError",
    "analyze",
    "analyze_count",
    "analyze_overall_throughput",
    "analyze_throughput",
]
