"""Pluggable palindrome evaluation library.

Raw text is normalized into a canonical lowercase alphanumeric form and
checked by an interchangeable strategy held by a PalindromeEvaluator.
"""

from .evaluation import EvaluationResult, InvalidStrategyError, PalindromeEvaluator
from .normalization import normalize
from .strategies import PalindromeStrategy, available_strategies, get_strategy

__version__ = "1.0.0"

__all__ = [
    "EvaluationResult",
    "InvalidStrategyError",
    "PalindromeEvaluator",
    "PalindromeStrategy",
    "available_strategies",
    "get_strategy",
    "normalize",
]
