"""Registry and factory functions for palindrome strategies."""

import logging
from typing import Dict, List, Type

from .base import PalindromeStrategy
from .deque import DequeStrategy
from .exceptions import UnknownStrategyError
from .legacy import LinkedListStrategy, QueueStackStrategy, ReverseConcatStrategy
from .recursive import RecursiveStrategy
from .stack import StackStrategy
from .two_pointer import TwoPointerStrategy

logger = logging.getLogger(__name__)

# Core strategies first, in reporting order
CORE_STRATEGIES: List[Type[PalindromeStrategy]] = [
    TwoPointerStrategy,
    StackStrategy,
    DequeStrategy,
    RecursiveStrategy,
]

SUPPLEMENTARY_STRATEGIES: List[Type[PalindromeStrategy]] = [
    ReverseConcatStrategy,
    QueueStackStrategy,
    LinkedListStrategy,
]

STRATEGY_MAP: Dict[str, Type[PalindromeStrategy]] = {
    strategy_class.name: strategy_class
    for strategy_class in CORE_STRATEGIES + SUPPLEMENTARY_STRATEGIES
}


def canonical_strategy_name(name: str) -> str:
    """Fold a user-supplied strategy name onto registry spelling.

    Lookups are case-insensitive and accept '-' or spaces for '_'.
    """
    return name.strip().lower().replace("-", "_").replace(" ", "_")


def get_strategy(name: str) -> PalindromeStrategy:
    """Instantiate the strategy registered under name.

    Args:
        name: Strategy identifier, e.g. "deque" or "Two-Pointer"

    Returns:
        New strategy instance

    Raises:
        UnknownStrategyError: If no strategy is registered under name

    Example:
        >>> get_strategy("two-pointer").check("level")
        True
    """
    key = canonical_strategy_name(name) if isinstance(name, str) else ""
    strategy_class = STRATEGY_MAP.get(key)

    if strategy_class is None:
        raise UnknownStrategyError(str(name), STRATEGY_MAP.keys())

    logger.debug(
        "Creating strategy instance",
        extra={"strategy": key, "strategy_class": strategy_class.__name__},
    )
    return strategy_class()


def available_strategies() -> List[str]:
    """Return the sorted names of every registered strategy."""
    return sorted(STRATEGY_MAP)


def core_strategies() -> List[PalindromeStrategy]:
    """Instantiate the four core strategies in reporting order."""
    return [strategy_class() for strategy_class in CORE_STRATEGIES]


def all_strategies() -> List[PalindromeStrategy]:
    """Instantiate every registered strategy, core strategies first."""
    return [strategy_class() for strategy_class in STRATEGY_MAP.values()]
