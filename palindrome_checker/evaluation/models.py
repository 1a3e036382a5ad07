"""Data models for evaluation results."""

from dataclasses import dataclass, field
from typing import Dict, List


@dataclass(frozen=True)
class EvaluationResult:
    """Outcome of evaluating one raw input.

    Attributes:
        raw_input: Text exactly as supplied by the caller
        normalized_input: Canonical form that was actually compared
        is_palindrome: Strategy verdict on normalized_input
        strategy_name: Name of the strategy that produced the verdict
    """

    raw_input: str
    normalized_input: str
    is_palindrome: bool
    strategy_name: str

    def to_dict(self) -> Dict[str, object]:
        """Serialize to a plain dict for logging or JSON output."""
        return {
            "raw_input": self.raw_input,
            "normalized_input": self.normalized_input,
            "is_palindrome": self.is_palindrome,
            "strategy_name": self.strategy_name,
        }


@dataclass
class StrategyComparison:
    """One raw input evaluated by several strategies.

    Attributes:
        raw_input: Text as supplied
        normalized_input: Canonical form shared by every result
        results: One EvaluationResult per strategy, in the order run
    """

    raw_input: str
    normalized_input: str
    results: List[EvaluationResult] = field(default_factory=list)

    @property
    def consistent(self) -> bool:
        """Whether every strategy returned the same verdict."""
        return len({result.is_palindrome for result in self.results}) <= 1

    @property
    def verdicts(self) -> Dict[str, bool]:
        """Map strategy name to its verdict."""
        return {result.strategy_name: result.is_palindrome for result in self.results}

    @property
    def disagreeing_strategies(self) -> List[str]:
        """Names of strategies that differ from the majority verdict."""
        if self.consistent:
            return []
        true_votes = sum(1 for result in self.results if result.is_palindrome)
        majority = true_votes * 2 >= len(self.results)
        return [
            result.strategy_name for result in self.results
            if result.is_palindrome != majority
        ]
