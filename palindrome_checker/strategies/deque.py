"""Double-ended queue shrinking from both ends."""

from collections import deque

from .base import PalindromeStrategy


class DequeStrategy(PalindromeStrategy):
    """Remove matching front/rear pairs until at most one element remains.

    On odd lengths the middle element is left in the deque and never
    compared.
    """

    name = "deque"
    display_name = "Deque Front/Rear"
    description = "collections.deque popped from both ends"

    def check(self, normalized: str) -> bool:
        chars = deque(normalized)

        while len(chars) > 1:
            if chars.popleft() != chars.pop():
                return False

        return True
