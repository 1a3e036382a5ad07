"""Recursive inward comparison."""

from .base import PalindromeStrategy

DEFAULT_MAX_DEPTH = 500


class RecursiveStrategy(PalindromeStrategy):
    """Compare the outermost pair, then recurse on the inner substring.

    A single recursive chain needs ceil(n / 2) frames, which would exceed
    the interpreter's recursion limit on long inputs. The recursion therefore
    runs in windows of at most ``max_depth`` frames; when a window finishes
    without a mismatch the next one starts from where it stopped. The answer
    is the same as one unbroken recursive chain.
    """

    name = "recursive"
    display_name = "Recursive"
    description = "Call stack, one frame per compared pair"

    def __init__(self, max_depth: int = DEFAULT_MAX_DEPTH) -> None:
        if max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got: {max_depth}")
        self.max_depth = max_depth

    def check(self, normalized: str) -> bool:
        half = len(normalized) // 2

        for window_start in range(0, max(half, 1), self.max_depth):
            stop = min(window_start + self.max_depth, half)
            end = len(normalized) - 1 - window_start
            if not self._compare(normalized, window_start, end, stop):
                return False

        return True

    def _compare(self, text: str, start: int, end: int, stop: int) -> bool:
        # Base case: pointers met or crossed, or this window is exhausted
        if start >= end or start >= stop:
            return True
        if text[start] != text[end]:
            return False
        return self._compare(text, start + 1, end - 1, stop)
