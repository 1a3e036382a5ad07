#!/usr/bin/env python3
"""Replay the classic demonstration inputs through every strategy.

Prints one table per input showing the canonical form and each strategy's
verdict, followed by a short benchmark on the longest input. Useful as a
quick manual check that all strategies still agree.

Usage:
    python scripts/run_demo.py
    python scripts/run_demo.py --iterations 5000 "Never odd or even"
"""

import argparse
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from palindrome_checker.benchmark import BenchmarkRunner, format_report
from palindrome_checker.evaluation import compare_strategies
from palindrome_checker.logging.config import configure_logging
from palindrome_checker.strategies import all_strategies

DEMO_INPUTS = [
    "madam",
    "RaceCar",
    "A man a plan a canal Panama",
    "Was it a car or a cat I saw?",
    "Hello World",
    "12321",
]


def print_header(title: str):
    """Print a formatted section header."""
    width = 60
    print("\n" + "=" * width)
    print(f" {title}")
    print("=" * width + "\n")


def main() -> int:
    parser = argparse.ArgumentParser(description="Run the palindrome strategy demo")
    parser.add_argument("texts", nargs="*", help="Extra inputs to include")
    parser.add_argument("--iterations", type=int, default=2000, help="Timed calls per strategy")
    args = parser.parse_args()

    configure_logging(level="WARNING")

    strategies = all_strategies()
    inputs = DEMO_INPUTS + args.texts
    disagreements = 0

    print_header("Strategy verdicts")
    for text in inputs:
        comparison = compare_strategies(text, strategies)
        verdicts = "  ".join(
            f"{name}={'Y' if verdict else 'N'}" for name, verdict in comparison.verdicts.items()
        )
        marker = "ok" if comparison.consistent else "MISMATCH"
        print(f"{text!r:34} -> {comparison.normalized_input!r:26} [{marker}]")
        print(f"    {verdicts}")
        if not comparison.consistent:
            disagreements += 1

    print_header("Benchmark")
    longest = max(inputs, key=len)
    runner = BenchmarkRunner(warmup_iterations=args.iterations // 10, iterations=args.iterations)
    print(format_report(runner.run(strategies, longest)))

    return 1 if disagreements else 0


if __name__ == "__main__":
    sys.exit(main())
