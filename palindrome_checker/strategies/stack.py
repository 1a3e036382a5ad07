"""Stack-based reversal."""

from typing import List

from .base import PalindromeStrategy


class StackStrategy(PalindromeStrategy):
    """Push every character, pop them all to build the reverse, compare."""

    name = "stack"
    display_name = "Stack Reversal"
    description = "LIFO stack backed by a Python list"

    def check(self, normalized: str) -> bool:
        stack: List[str] = []
        for char in normalized:
            stack.append(char)

        reversed_chars = []
        while stack:
            reversed_chars.append(stack.pop())

        return "".join(reversed_chars) == normalized
