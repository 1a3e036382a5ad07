"""Base class shared by every palindrome strategy.

A strategy is one interchangeable algorithm answering "is this canonical
string a palindrome". Strategies are stateless: every call works only on
its argument, so one instance can be shared across evaluators and threads.
"""

from abc import ABC, abstractmethod


class PalindromeStrategy(ABC):
    """Base class for all palindrome comparison algorithms.

    Subclasses set three class attributes and implement check().

    Attributes:
        name: Stable registry identifier (e.g. "two_pointer")
        display_name: Human-readable name for reports
        description: Backing data structure, used for reporting only
    """

    name: str = ""
    display_name: str = ""
    description: str = ""

    @abstractmethod
    def check(self, normalized: str) -> bool:
        """Return True if the canonical string reads the same both ways.

        Implementations must be pure and deterministic, must treat the empty
        string and single characters as palindromes, and must never raise
        for string input.

        Args:
            normalized: Canonical string produced by the normalizer

        Returns:
            True for a palindrome, False otherwise
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
