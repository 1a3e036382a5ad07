"""Supplementary strategies kept for comparison with the core four.

These exist for comparison and benchmarking. reverse_concat is kept as the
deliberately slow baseline: it rebuilds the reverse by repeated string
concatenation, which is quadratic in the input length.
"""

from collections import deque
from typing import List, Optional

from .base import PalindromeStrategy


class ReverseConcatStrategy(PalindromeStrategy):
    """Build the reverse one character at a time, then compare."""

    name = "reverse_concat"
    display_name = "Naive Reversal"
    description = "Immutable str rebuilt by concatenation (quadratic)"

    def check(self, normalized: str) -> bool:
        reversed_text = ""
        for index in range(len(normalized) - 1, -1, -1):
            reversed_text = reversed_text + normalized[index]
        return reversed_text == normalized


class QueueStackStrategy(PalindromeStrategy):
    """Feed the same characters to a FIFO queue and a LIFO stack.

    Dequeuing yields the text forwards and popping yields it backwards, so
    comparing the two streams pairwise checks the palindrome property.
    """

    name = "queue_stack"
    display_name = "Queue vs Stack"
    description = "FIFO deque and LIFO list drained in parallel"

    def check(self, normalized: str) -> bool:
        queue = deque()
        stack: List[str] = []
        for char in normalized:
            queue.append(char)
            stack.append(char)

        while queue:
            if queue.popleft() != stack.pop():
                return False

        return True


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: str, next_node: Optional["_Node"] = None) -> None:
        self.value = value
        self.next = next_node


def _reverse(head: Optional[_Node]) -> Optional[_Node]:
    previous = None
    current = head
    while current is not None:
        following = current.next
        current.next = previous
        previous = current
        current = following
    return previous


class LinkedListStrategy(PalindromeStrategy):
    """Singly linked list split at the middle with fast/slow pointers.

    The second half is reversed in place, walked in lockstep with the first
    half, then reversed back so the list is intact when check() returns.
    The list is built per call, so no state is shared between calls.
    """

    name = "linked_list"
    display_name = "Linked List Fast/Slow"
    description = "Singly linked list, second half reversed in place"

    def check(self, normalized: str) -> bool:
        if len(normalized) < 2:
            return True

        head = None
        for char in reversed(normalized):
            head = _Node(char, head)

        # slow stops at the last node of the first half
        slow = head
        fast = head
        while fast.next is not None and fast.next.next is not None:
            slow = slow.next
            fast = fast.next.next

        second_half = _reverse(slow.next)

        is_palindrome = True
        left, right = head, second_half
        while right is not None:
            if left.value != right.value:
                is_palindrome = False
                break
            left = left.next
            right = right.next

        slow.next = _reverse(second_half)
        return is_palindrome
