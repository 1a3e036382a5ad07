"""Unit tests for palindrome strategies and the strategy factory.

Covers:
- Each strategy on palindromes, non-palindromes and trivial inputs
- Cross-strategy agreement
- Recursive strategy windowing on long inputs
- Linked list strategy on odd and even lengths
- Factory lookup, name folding and unknown names
"""

import itertools

import pytest

from palindrome_checker.normalization import normalize
from palindrome_checker.strategies import (
    DequeStrategy,
    LinkedListStrategy,
    PalindromeStrategy,
    QueueStackStrategy,
    RecursiveStrategy,
    ReverseConcatStrategy,
    StackStrategy,
    TwoPointerStrategy,
    UnknownStrategyError,
    all_strategies,
    available_strategies,
    core_strategies,
    get_strategy,
)
from palindrome_checker.strategies.legacy import _Node, _reverse

PALINDROMES = ["madam", "racecar", "amanaplanacanalpanama", "wasitacaroracatisaw", "12321", "abba", "aa"]
NON_PALINDROMES = ["helloworld", "ab", "abca", "abcdba", "12312", "palindrome"]


class TestStrategyContract:
    """Every registered strategy must satisfy the shared contract."""

    @pytest.mark.parametrize("text", PALINDROMES)
    def test_palindromes(self, any_strategy, text):
        assert any_strategy.check(text) is True

    @pytest.mark.parametrize("text", NON_PALINDROMES)
    def test_non_palindromes(self, any_strategy, text):
        assert any_strategy.check(text) is False

    def test_empty_string_is_palindrome(self, any_strategy):
        assert any_strategy.check("") is True

    @pytest.mark.parametrize("char", ["a", "z", "0", "9"])
    def test_single_character_is_palindrome(self, any_strategy, char):
        assert any_strategy.check(char) is True

    def test_check_is_deterministic(self, any_strategy):
        assert [any_strategy.check("level") for _ in range(3)] == [True, True, True]
        assert [any_strategy.check("levels") for _ in range(3)] == [False, False, False]

    def test_metadata(self, any_strategy):
        assert isinstance(any_strategy, PalindromeStrategy)
        assert any_strategy.name
        assert any_strategy.display_name
        assert any_strategy.description

    def test_mismatch_only_in_middle_pair(self, any_strategy):
        assert any_strategy.check("abcxba") is False
        assert any_strategy.check("abcdcxba") is False


class TestCrossStrategyConsistency:
    """All strategies agree on every input."""

    def test_agree_on_every_short_binary_string(self):
        strategies = all_strategies()
        for length in range(0, 9):
            for chars in itertools.product("ab", repeat=length):
                text = "".join(chars)
                verdicts = {strategy.name: strategy.check(text) for strategy in strategies}
                expected = text == text[::-1]
                assert set(verdicts.values()) == {expected}, (text, verdicts)

    @pytest.mark.parametrize(
        "raw",
        [
            "A man a plan a canal Panama",
            "Was it a car or a cat I saw?",
            "Hello World",
            "Never odd or even",
            "Step on no pets!",
            "",
            "?!",
        ],
    )
    def test_agree_on_normalized_phrases(self, raw):
        normalized = normalize(raw)
        verdicts = {strategy.check(normalized) for strategy in all_strategies()}
        assert len(verdicts) == 1


class TestTwoPointerStrategy:
    def test_name(self):
        assert TwoPointerStrategy().name == "two_pointer"


class TestStackStrategy:
    def test_name(self):
        assert StackStrategy().name == "stack"


class TestDequeStrategy:
    def test_odd_middle_is_never_compared(self):
        strategy = DequeStrategy()
        assert strategy.check("abXba") is True
        assert strategy.check("ab1ba") is True


class TestRecursiveStrategy:
    def test_long_palindrome_does_not_hit_recursion_limit(self):
        half = "abc" * 2000
        text = half + half[::-1]
        assert RecursiveStrategy().check(text) is True

    def test_long_non_palindrome_mismatch_near_centre(self):
        half = "xyz" * 2000
        text = half + "q" + "r" + half[::-1]
        assert RecursiveStrategy().check(text) is False

    @pytest.mark.parametrize("max_depth", [1, 2, 3, 7])
    def test_small_windows_match_unwindowed_result(self, max_depth):
        strategy = RecursiveStrategy(max_depth=max_depth)
        for text in PALINDROMES + NON_PALINDROMES + ["", "a", "abcdefgfedcba", "abcdefggfedcbx"]:
            assert strategy.check(text) == (text == text[::-1]), text

    def test_invalid_max_depth(self):
        with pytest.raises(ValueError):
            RecursiveStrategy(max_depth=0)


class TestSupplementaryStrategies:
    def test_reverse_concat(self):
        strategy = ReverseConcatStrategy()
        assert strategy.check("rotor") is True
        assert strategy.check("rotors") is False

    def test_queue_stack(self):
        strategy = QueueStackStrategy()
        assert strategy.check("kayak") is True
        assert strategy.check("kayaks") is False

    @pytest.mark.parametrize("text", ["aa", "aba", "abba", "abcba", "abccba"])
    def test_linked_list_even_and_odd_palindromes(self, text):
        assert LinkedListStrategy().check(text) is True

    @pytest.mark.parametrize("text", ["ab", "abb", "abcb", "abcab", "abcdba"])
    def test_linked_list_non_palindromes(self, text):
        assert LinkedListStrategy().check(text) is False

    def test_linked_list_reverse_round_trip(self):
        head = _Node("a", next_node=_Node("b", next_node=_Node("c")))

        reversed_head = _reverse(head)
        assert [reversed_head.value, reversed_head.next.value, reversed_head.next.next.value] == ["c", "b", "a"]

        restored = _reverse(reversed_head)
        assert restored is head
        assert head.next.next.next is None


class TestFactory:
    """Tests for strategy lookup."""

    def test_available_strategies_sorted(self):
        names = available_strategies()
        assert names == sorted(names)
        assert set(names) == {
            "two_pointer",
            "stack",
            "deque",
            "recursive",
            "reverse_concat",
            "queue_stack",
            "linked_list",
        }

    def test_core_strategies_order(self):
        assert [strategy.name for strategy in core_strategies()] == [
            "two_pointer",
            "stack",
            "deque",
            "recursive",
        ]

    def test_all_strategies_starts_with_core(self):
        names = [strategy.name for strategy in all_strategies()]
        assert names[:4] == ["two_pointer", "stack", "deque", "recursive"]
        assert len(names) == 7

    @pytest.mark.parametrize(
        "name, expected_class",
        [
            ("two_pointer", TwoPointerStrategy),
            ("Two-Pointer", TwoPointerStrategy),
            ("  STACK ", StackStrategy),
            ("deque", DequeStrategy),
            ("recursive", RecursiveStrategy),
            ("queue stack", QueueStackStrategy),
            ("linked-list", LinkedListStrategy),
        ],
    )
    def test_get_strategy(self, name, expected_class):
        assert isinstance(get_strategy(name), expected_class)

    def test_get_strategy_returns_new_instances(self):
        assert get_strategy("deque") is not get_strategy("deque")

    def test_unknown_strategy(self):
        with pytest.raises(UnknownStrategyError) as exc_info:
            get_strategy("bogus")

        assert exc_info.value.name == "bogus"
        assert "two_pointer" in str(exc_info.value)
        assert isinstance(exc_info.value, ValueError)
