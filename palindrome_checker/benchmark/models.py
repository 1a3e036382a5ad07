"""Data models for benchmark runs and reports."""

import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional


@dataclass
class BenchmarkEntry:
    """Timing for a single strategy within a benchmark run.

    Attributes:
        strategy_name: Registry name of the strategy
        display_name: Human-readable strategy name
        description: Backing data structure
        iterations: Number of timed calls
        total_seconds: Wall-clock time spent in the timed calls
        is_palindrome: Verdict returned by the strategy on the benchmark input
    """

    strategy_name: str
    display_name: str
    description: str
    iterations: int
    total_seconds: float
    is_palindrome: bool

    @property
    def average_seconds(self) -> float:
        """Average wall-clock seconds per timed call."""
        return self.total_seconds / self.iterations

    @property
    def average_microseconds(self) -> float:
        return self.average_seconds * 1_000_000


@dataclass
class RankedEntry:
    """A BenchmarkEntry placed in the ranking.

    Attributes:
        rank: 1 for the fastest strategy
        entry: Underlying timing
        slowdown: Average time relative to the fastest entry (fastest = 1.0)
    """

    rank: int
    entry: BenchmarkEntry
    slowdown: float


@dataclass
class BenchmarkReport:
    """Aggregate result of benchmarking several strategies on one input.

    Attributes:
        input_text: Raw benchmark input
        normalized_input: Canonical form every strategy received
        warmup_iterations: Untimed calls per strategy before timing
        iterations: Timed calls per strategy
        started_at: UTC time the run began
        finished_at: UTC time the run ended
        entries: Timings in the order the strategies were run
    """

    input_text: str
    normalized_input: str
    warmup_iterations: int
    iterations: int
    started_at: datetime
    finished_at: Optional[datetime] = None
    entries: List[BenchmarkEntry] = field(default_factory=list)

    def ranked(self) -> List[RankedEntry]:
        """Return entries from fastest to slowest with slowdown factors.

        Ties keep run order. A zero-duration fastest entry yields a slowdown
        of 1.0 for other zero-duration entries and infinity otherwise.
        """
        ordered = sorted(self.entries, key=lambda entry: entry.average_seconds)
        if not ordered:
            return []

        fastest = ordered[0].average_seconds
        ranked = []
        for position, entry in enumerate(ordered, start=1):
            if fastest > 0:
                slowdown = entry.average_seconds / fastest
            elif entry.average_seconds == 0:
                slowdown = 1.0
            else:
                slowdown = math.inf
            ranked.append(RankedEntry(rank=position, entry=entry, slowdown=slowdown))
        return ranked

    @property
    def fastest(self) -> Optional[BenchmarkEntry]:
        """The entry with the lowest average time, or None for an empty report."""
        ranked = self.ranked()
        return ranked[0].entry if ranked else None

    @property
    def consistent(self) -> bool:
        """Whether every strategy returned the same verdict on the input."""
        return len({entry.is_palindrome for entry in self.entries}) <= 1

    @property
    def duration_seconds(self) -> float:
        if self.finished_at is None:
            return 0.0
        return (self.finished_at - self.started_at).total_seconds()
