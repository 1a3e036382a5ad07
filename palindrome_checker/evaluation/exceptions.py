"""Exceptions raised by the evaluator."""


class InvalidStrategyError(ValueError):
    """Raised when the evaluator is handed no usable strategy.

    A usable strategy is any object exposing a callable ``check``. The
    evaluator raises before touching its state, so a failed swap leaves the
    previous strategy active.
    """
