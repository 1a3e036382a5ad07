"""Scoped context fields for structured logging.

ContextualFilter copies these fields onto every record emitted while they are
active. The CLI tags records with the running command, and the benchmark
runner and strategy comparison tag them with the strategy being exercised.
"""

from contextlib import contextmanager
from contextvars import ContextVar, Token
from typing import Any, Dict, Iterator

_fields: ContextVar[Dict[str, Any]] = ContextVar("palindrome_log_fields", default={})


def get_log_context() -> Dict[str, Any]:
    """Return a copy of the active context fields."""
    return dict(_fields.get())


def push_log_context(**fields: Any) -> Token:
    """Merge fields into the active context.

    Fields set to None are skipped, so optional values such as an unset
    config path can be passed through unchecked.

    Returns:
        Token for pop_log_context()
    """
    merged = dict(_fields.get())
    merged.update((key, value) for key, value in fields.items() if value is not None)
    return _fields.set(merged)


def pop_log_context(token: Token) -> None:
    """Restore the fields that were active before the matching push."""
    _fields.reset(token)


def clear_log_context() -> None:
    _fields.set({})


@contextmanager
def log_context(**fields: Any) -> Iterator[Dict[str, Any]]:
    """Apply fields for the duration of a with-block.

    Yields the merged fields. They are restored on exit, including when the
    block raises.

    Example:
        >>> with log_context(command="benchmark"):
        ...     logger.info("Benchmark started")  # record carries command=benchmark
    """
    token = push_log_context(**fields)
    try:
        yield get_log_context()
    finally:
        pop_log_context(token)


def strategy_log_context(strategy: Any):
    """Tag records with a strategy's registry name (class name if it has none)."""
    name = getattr(strategy, "name", None) or type(strategy).__name__
    return log_context(strategy=name)
