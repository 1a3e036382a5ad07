"""Micro-benchmark harness comparing palindrome strategies.

For every strategy the runner:
1. Calls check() warmup_iterations times without timing
2. Times iterations further calls with a monotonic clock
3. Records the total, the per-call average and the verdict

The input is normalized once up front so only the strategy is measured.
"""

import logging
import time
from datetime import datetime, timezone
from typing import Callable, Optional, Sequence

from palindrome_checker.logging import get_logger
from palindrome_checker.logging.context import strategy_log_context
from palindrome_checker.normalization import normalize
from palindrome_checker.strategies import PalindromeStrategy

from .exceptions import BenchmarkConfigurationError
from .models import BenchmarkEntry, BenchmarkReport

logger = get_logger(__name__, component="benchmark")

DEFAULT_WARMUP_ITERATIONS = 1000
DEFAULT_ITERATIONS = 10000


class BenchmarkRunner:
    """Times strategies on a fixed input.

    Example:
        >>> from palindrome_checker.strategies import core_strategies
        >>> runner = BenchmarkRunner(warmup_iterations=10, iterations=100)
        >>> report = runner.run(core_strategies(), "A man a plan a canal Panama")
        >>> report.fastest.strategy_name in {"two_pointer", "stack", "deque", "recursive"}
        True
    """

    def __init__(
        self,
        warmup_iterations: int = DEFAULT_WARMUP_ITERATIONS,
        iterations: int = DEFAULT_ITERATIONS,
        clock: Callable[[], float] = time.perf_counter,
        logger_instance: Optional[logging.Logger] = None,
    ):
        """Initialize the runner.

        Args:
            warmup_iterations: Untimed calls per strategy (>= 0)
            iterations: Timed calls per strategy (>= 1)
            clock: Monotonic clock returning seconds
            logger_instance: Logger instance (defaults to module logger)

        Raises:
            BenchmarkConfigurationError: If an iteration count is out of range
        """
        if isinstance(warmup_iterations, bool) or not isinstance(warmup_iterations, int) or warmup_iterations < 0:
            raise BenchmarkConfigurationError(
                f"warmup_iterations must be a non-negative integer, got: {warmup_iterations!r}"
            )
        if isinstance(iterations, bool) or not isinstance(iterations, int) or iterations < 1:
            raise BenchmarkConfigurationError(
                f"iterations must be a positive integer, got: {iterations!r}"
            )

        self.warmup_iterations = warmup_iterations
        self.iterations = iterations
        self.clock = clock
        self.logger = logger_instance or logger

    def run(self, strategies: Sequence[PalindromeStrategy], text: str) -> BenchmarkReport:
        """Benchmark each strategy on text.

        Args:
            strategies: Strategies to time, each with a distinct name
            text: Raw benchmark input

        Returns:
            BenchmarkReport with one entry per strategy in run order

        Raises:
            BenchmarkConfigurationError: If strategies is empty or names repeat
        """
        if not strategies:
            raise BenchmarkConfigurationError("At least one strategy is required")

        names = [strategy.name for strategy in strategies]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise BenchmarkConfigurationError(
                f"Duplicate strategies in benchmark: {', '.join(duplicates)}"
            )

        normalized = normalize(text)
        report = BenchmarkReport(
            input_text=text,
            normalized_input=normalized,
            warmup_iterations=self.warmup_iterations,
            iterations=self.iterations,
            started_at=datetime.now(timezone.utc),
        )

        self.logger.info(
            "Benchmark started",
            extra={
                "event": "benchmark.started",
                "strategy_count": len(strategies),
                "normalized_length": len(normalized),
                "warmup_iterations": self.warmup_iterations,
                "iterations": self.iterations,
            },
        )

        for strategy in strategies:
            with strategy_log_context(strategy):
                entry = self._time_strategy(strategy, normalized)
                report.entries.append(entry)

                self.logger.debug(
                    f"Benchmarked {entry.strategy_name}",
                    extra={
                        "event": "benchmark.strategy.completed",
                        "strategy": entry.strategy_name,
                        "average_us": round(entry.average_microseconds, 4),
                        "is_palindrome": entry.is_palindrome,
                    },
                )

        report.finished_at = datetime.now(timezone.utc)

        fastest = report.fastest
        self.logger.info(
            "Benchmark completed",
            extra={
                "event": "benchmark.completed",
                "fastest": fastest.strategy_name if fastest else None,
                "consistent": report.consistent,
                "duration_seconds": round(report.duration_seconds, 3),
            },
        )

        if not report.consistent:
            self.logger.warning(
                "Strategies returned different verdicts on the benchmark input",
                extra={"event": "benchmark.inconsistent"},
            )

        return report

    def _time_strategy(self, strategy: PalindromeStrategy, normalized: str) -> BenchmarkEntry:
        check = strategy.check

        for _ in range(self.warmup_iterations):
            check(normalized)

        verdict = False
        started = self.clock()
        for _ in range(self.iterations):
            verdict = check(normalized)
        elapsed = self.clock() - started

        return BenchmarkEntry(
            strategy_name=strategy.name,
            display_name=strategy.display_name or strategy.name,
            description=strategy.description,
            iterations=self.iterations,
            total_seconds=max(elapsed, 0.0),
            is_palindrome=bool(verdict),
        )
