"""Evaluator holding the active strategy.

This module provides:
- PalindromeEvaluator: normalize-then-check context with a swappable strategy
- EvaluationResult: immutable outcome of one evaluation
- StrategyComparison: one input evaluated by several strategies
- compare_strategies: build a StrategyComparison
- InvalidStrategyError: raised for an unusable strategy
"""

from .evaluator import PalindromeEvaluator, compare_strategies
from .exceptions import InvalidStrategyError
from .models import EvaluationResult, StrategyComparison

__all__ = [
    "PalindromeEvaluator",
    "compare_strategies",
    "EvaluationResult",
    "StrategyComparison",
    "InvalidStrategyError",
]
