"""Palindrome evaluator: normalize raw text and delegate to a strategy.

The evaluator is the context object of the strategy pattern. It owns:
1. The active strategy reference (swappable at any time)
2. A running count of evaluations, never reset
3. The normalizer applied before every check

A single lock guards the strategy reference and the counter. The check
itself runs outside the lock because strategies are stateless.
"""

import logging
import threading
from typing import Iterable, List, Optional, Sequence

from palindrome_checker.logging import get_logger
from palindrome_checker.logging.context import strategy_log_context
from palindrome_checker.normalization import CanonicalNormalizer, TextNormalizer, is_canonical
from palindrome_checker.strategies import PalindromeStrategy

from .exceptions import InvalidStrategyError
from .models import EvaluationResult, StrategyComparison

logger = get_logger(__name__, component="evaluation")


def _strategy_name(strategy: PalindromeStrategy) -> str:
    return getattr(strategy, "name", "") or type(strategy).__name__


def _ensure_usable(strategy: Optional[PalindromeStrategy]) -> PalindromeStrategy:
    if strategy is None:
        raise InvalidStrategyError("Strategy must not be None")
    if not callable(getattr(strategy, "check", None)):
        raise InvalidStrategyError(
            f"Strategy {strategy!r} does not provide a callable check()"
        )
    return strategy


class PalindromeEvaluator:
    """Evaluates raw text with the currently selected strategy.

    Example:
        >>> from palindrome_checker.strategies import get_strategy
        >>> evaluator = PalindromeEvaluator(get_strategy("two_pointer"))
        >>> evaluator.evaluate("Race, Car!").is_palindrome
        True
        >>> evaluator.get_check_count()
        1
    """

    def __init__(
        self,
        strategy: PalindromeStrategy,
        normalizer: Optional[TextNormalizer] = None,
        logger_instance: Optional[logging.Logger] = None,
    ):
        """Initialize the evaluator.

        Args:
            strategy: Initial strategy
            normalizer: Normalizer applied before each check (defaults to CanonicalNormalizer)
            logger_instance: Logger instance (defaults to module logger)

        Raises:
            InvalidStrategyError: If strategy is None or has no callable check()
        """
        self._strategy = _ensure_usable(strategy)
        self._check_count = 0
        self._lock = threading.Lock()
        self.normalizer = normalizer or CanonicalNormalizer()
        self.logger = logger_instance or logger

    @property
    def strategy(self) -> PalindromeStrategy:
        """The strategy used by the next evaluate() call."""
        with self._lock:
            return self._strategy

    def evaluate(self, raw: str) -> EvaluationResult:
        """Normalize raw text and check it with the active strategy.

        Args:
            raw: Text to evaluate (any string, including empty)

        Returns:
            EvaluationResult for this call
        """
        with self._lock:
            strategy = self._strategy

        normalized = self.normalizer.normalize(raw)
        is_palindrome = bool(strategy.check(normalized))

        with self._lock:
            self._check_count += 1
            check_number = self._check_count

        strategy_name = _strategy_name(strategy)

        self.logger.debug(
            "Evaluated input",
            extra={
                "event": "evaluation.completed",
                "strategy": strategy_name,
                "normalized_length": len(normalized),
                "canonical_input": is_canonical(raw),
                "is_palindrome": is_palindrome,
                "check_number": check_number,
            },
        )

        return EvaluationResult(
            raw_input=raw,
            normalized_input=normalized,
            is_palindrome=is_palindrome,
            strategy_name=strategy_name,
        )

    def evaluate_many(self, raws: Iterable[str]) -> List[EvaluationResult]:
        """Evaluate each input in order with the active strategy."""
        return [self.evaluate(raw) for raw in raws]

    def set_strategy(self, strategy: PalindromeStrategy) -> None:
        """Replace the active strategy.

        The counter and previously returned results are untouched.

        Raises:
            InvalidStrategyError: If strategy is None or has no callable check()
        """
        new_strategy = _ensure_usable(strategy)

        with self._lock:
            previous = self._strategy
            self._strategy = new_strategy

        self.logger.debug(
            f"Strategy changed to {_strategy_name(new_strategy)}",
            extra={
                "event": "evaluation.strategy_changed",
                "previous_strategy": _strategy_name(previous),
                "strategy": _strategy_name(new_strategy),
            },
        )

    def get_check_count(self) -> int:
        """Return the number of evaluate() calls since construction."""
        with self._lock:
            return self._check_count

    def __repr__(self) -> str:
        return (
            f"PalindromeEvaluator(strategy={_strategy_name(self.strategy)!r}, "
            f"check_count={self.get_check_count()})"
        )


def compare_strategies(
    raw: str,
    strategies: Sequence[PalindromeStrategy],
    normalizer: Optional[TextNormalizer] = None,
) -> StrategyComparison:
    """Evaluate one input with each strategy.

    Args:
        raw: Text to evaluate
        strategies: Strategies to run, in reporting order
        normalizer: Optional normalizer shared by every run

    Returns:
        StrategyComparison with one result per strategy

    Raises:
        InvalidStrategyError: If strategies is empty or contains an unusable entry
    """
    if not strategies:
        raise InvalidStrategyError("At least one strategy is required for a comparison")

    evaluator = PalindromeEvaluator(strategies[0], normalizer=normalizer)
    results = []
    for strategy in strategies:
        with strategy_log_context(strategy):
            evaluator.set_strategy(strategy)
            results.append(evaluator.evaluate(raw))

    comparison = StrategyComparison(
        raw_input=raw,
        normalized_input=results[0].normalized_input,
        results=results,
    )

    if not comparison.consistent:
        logger.warning(
            "Strategies disagree",
            extra={
                "event": "evaluation.strategies_disagree",
                "normalized_input": comparison.normalized_input,
                "disagreeing": comparison.disagreeing_strategies,
            },
        )

    return comparison
