"""Plain-text rendering of benchmark reports."""

import math
from typing import List

from .models import BenchmarkReport


def _format_slowdown(slowdown: float) -> str:
    if math.isinf(slowdown):
        return "inf"
    return f"{slowdown:.2f}x"


def format_report(report: BenchmarkReport) -> str:
    """Render a ranked table, fastest strategy first.

    Example output::

        Input: "racecar" -> "racecar" (warm-up 1000, timed 10000)
        Rank  Strategy         Avg (us)  Slowdown  Result
        1     two_pointer        0.1520     1.00x  palindrome
    """
    lines: List[str] = [
        f'Input: "{report.input_text}" -> "{report.normalized_input}" '
        f"(warm-up {report.warmup_iterations}, timed {report.iterations})",
    ]

    ranked = report.ranked()
    name_width = max([len("Strategy")] + [len(item.entry.strategy_name) for item in ranked])

    lines.append(
        f"{'Rank':<5} {'Strategy':<{name_width}} {'Avg (us)':>10} {'Slowdown':>9}  Result"
    )
    lines.append("-" * (5 + 1 + name_width + 1 + 10 + 1 + 9 + 2 + len("not a palindrome")))

    for item in ranked:
        verdict = "palindrome" if item.entry.is_palindrome else "not a palindrome"
        lines.append(
            f"{item.rank:<5} {item.entry.strategy_name:<{name_width}} "
            f"{item.entry.average_microseconds:>10.4f} {_format_slowdown(item.slowdown):>9}  {verdict}"
        )

    if not report.consistent:
        lines.append("WARNING: strategies disagree on this input")

    return "\n".join(lines)
