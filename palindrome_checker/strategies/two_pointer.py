"""Two-pointer scan over the character array."""

from .base import PalindromeStrategy


class TwoPointerStrategy(PalindromeStrategy):
    """Walk inward from both ends, stopping at the first mismatch."""

    name = "two_pointer"
    display_name = "Two-Pointer"
    description = "Character array indexed from both ends"

    def check(self, normalized: str) -> bool:
        left = 0
        right = len(normalized) - 1

        # Length 0 or 1 never enters the loop
        while left < right:
            if normalized[left] != normalized[right]:
                return False
            left += 1
            right -= 1

        return True
