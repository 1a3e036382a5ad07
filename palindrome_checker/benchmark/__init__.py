"""Micro-benchmark harness comparing palindrome strategies.

This module provides:
- BenchmarkRunner: warm-up then timed loop per strategy
- BenchmarkReport / BenchmarkEntry / RankedEntry: timing results and ranking
- format_report: plain-text ranked table
"""

from .exceptions import BenchmarkConfigurationError
from .models import BenchmarkEntry, BenchmarkReport, RankedEntry
from .report import format_report
from .runner import DEFAULT_ITERATIONS, DEFAULT_WARMUP_ITERATIONS, BenchmarkRunner

__all__ = [
    "BenchmarkRunner",
    "BenchmarkReport",
    "BenchmarkEntry",
    "RankedEntry",
    "BenchmarkConfigurationError",
    "format_report",
    "DEFAULT_ITERATIONS",
    "DEFAULT_WARMUP_ITERATIONS",
]
