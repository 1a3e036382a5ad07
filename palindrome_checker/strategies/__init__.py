"""Interchangeable palindrome comparison algorithms.

Core strategies:
- two_pointer: two_pointer.TwoPointerStrategy
- stack: stack.StackStrategy
- deque: deque.DequeStrategy
- recursive: recursive.RecursiveStrategy

Supplementary strategies (legacy.py): reverse_concat, queue_stack, linked_list

Use the factory to resolve a strategy by name:
    from palindrome_checker.strategies import get_strategy
    strategy = get_strategy("deque")
    strategy.check("racecar")
"""

from .base import PalindromeStrategy
from .deque import DequeStrategy
from .exceptions import UnknownStrategyError
from .factory import (
    all_strategies,
    available_strategies,
    canonical_strategy_name,
    core_strategies,
    get_strategy,
)
from .legacy import LinkedListStrategy, QueueStackStrategy, ReverseConcatStrategy
from .recursive import RecursiveStrategy
from .stack import StackStrategy
from .two_pointer import TwoPointerStrategy

__all__ = [
    # Base and factory
    "PalindromeStrategy",
    "get_strategy",
    "available_strategies",
    "canonical_strategy_name",
    "core_strategies",
    "all_strategies",
    # Strategies
    "TwoPointerStrategy",
    "StackStrategy",
    "DequeStrategy",
    "RecursiveStrategy",
    "ReverseConcatStrategy",
    "QueueStackStrategy",
    "LinkedListStrategy",
    # Exceptions
    "UnknownStrategyError",
]
