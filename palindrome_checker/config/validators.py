"""Non-fatal configuration checks."""

import warnings
from typing import Any, Dict, List

from palindrome_checker.strategies import canonical_strategy_name

LOW_ITERATION_THRESHOLD = 100
HIGH_ITERATION_THRESHOLD = 1_000_000


def check_for_warnings(config_dict: Dict[str, Any]) -> List[str]:
    """Return warnings for settings that are valid but probably unintended.

    Args:
        config_dict: Raw configuration dictionary (before validation)

    Returns:
        List of warning messages
    """
    warning_messages = []

    strategy = config_dict.get("strategy")
    if isinstance(strategy, str) and canonical_strategy_name(strategy) == "reverse_concat":
        warning_messages.append(
            "Default strategy 'reverse_concat' is quadratic and intended only as a benchmark baseline"
        )

    benchmark = config_dict.get("benchmark", {})
    if isinstance(benchmark, dict):
        iterations = benchmark.get("iterations")
        if isinstance(iterations, int) and not isinstance(iterations, bool):
            if 0 < iterations < LOW_ITERATION_THRESHOLD:
                warning_messages.append(
                    f"Low benchmark iterations ({iterations}) give noisy timings"
                )
            elif iterations > HIGH_ITERATION_THRESHOLD:
                warning_messages.append(
                    f"High benchmark iterations ({iterations}) may take a long time"
                )

    return warning_messages


def emit_warnings(warning_messages: List[str]) -> None:
    """Emit each message as a UserWarning."""
    for message in warning_messages:
        warnings.warn(message, UserWarning, stacklevel=2)
