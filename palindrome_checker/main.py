"""Command-line entry point for the palindrome checker."""

from dotenv import load_dotenv

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from palindrome_checker.benchmark import BenchmarkConfigurationError, BenchmarkRunner, format_report
from palindrome_checker.config.environment import EnvironmentConfig
from palindrome_checker.config.exceptions import ConfigurationError
from palindrome_checker.config.loader import load_config
from palindrome_checker.config.models import AppConfig
from palindrome_checker.evaluation import PalindromeEvaluator, compare_strategies
from palindrome_checker.logging import get_logger
from palindrome_checker.logging.config import configure_logging
from palindrome_checker.logging.context import log_context
from palindrome_checker.strategies import (
    UnknownStrategyError,
    all_strategies,
    core_strategies,
    get_strategy,
)

logger = get_logger(__name__, component="cli")

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INCONSISTENT = 2

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def load_runtime_config(
    config_path: Optional[Path],
    log_level_override: Optional[str] = None,
    log_format_override: Optional[str] = None,
) -> Tuple[AppConfig, EnvironmentConfig]:
    """Load configuration and resolve overrides.

    Priority for strategy, log level and log format: CLI > environment > file > default.
    The resolved values are written back onto the returned AppConfig.

    Raises:
        ConfigurationError: If configuration is invalid
    """
    app_config, env_config = load_config(config_path)

    if env_config.strategy:
        app_config.strategy = env_config.strategy

    if log_level_override:
        app_config.logging.level = log_level_override.upper()
    elif env_config.log_level:
        app_config.logging.level = env_config.log_level

    if log_format_override:
        app_config.logging.format = log_format_override
    elif env_config.log_format:
        app_config.logging.format = env_config.log_format

    return app_config, env_config


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="palindrome-checker",
        description="Palindrome Checker - evaluate text with interchangeable palindrome strategies",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to configuration file (default: palindrome.yaml if present)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=LOG_LEVELS,
        help="Log level (overrides config and environment)",
    )
    parser.add_argument(
        "--log-format",
        default=None,
        choices=["json", "key-value"],
        help="Log format (overrides config and environment)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    check_parser = subparsers.add_parser("check", help="Check whether each text is a palindrome")
    check_parser.add_argument("texts", nargs="+", metavar="TEXT", help="Text to evaluate")
    check_parser.add_argument("--strategy", default=None, help="Strategy name (default from config)")

    compare_parser = subparsers.add_parser(
        "compare", help="Evaluate each text with several strategies and report agreement"
    )
    compare_parser.add_argument("texts", nargs="+", metavar="TEXT", help="Text to evaluate")
    compare_parser.add_argument(
        "--all", action="store_true", help="Include supplementary strategies, not just the core four"
    )

    benchmark_parser = subparsers.add_parser("benchmark", help="Time strategies on a fixed input")
    benchmark_parser.add_argument("--input", default=None, help="Benchmark input text")
    benchmark_parser.add_argument("--iterations", type=int, default=None, help="Timed calls per strategy")
    benchmark_parser.add_argument("--warmup", type=int, default=None, help="Warm-up calls per strategy")
    benchmark_parser.add_argument(
        "--strategy",
        action="append",
        dest="strategies",
        default=None,
        help="Strategy to include (repeatable; default from config, else all)",
    )

    subparsers.add_parser("strategies", help="List available strategies")

    return parser


def run_check(app_config: AppConfig, texts: List[str], strategy_name: Optional[str]) -> int:
    strategy = get_strategy(strategy_name or app_config.strategy)
    evaluator = PalindromeEvaluator(strategy)

    for result in evaluator.evaluate_many(texts):
        verdict = "palindrome" if result.is_palindrome else "not a palindrome"
        print(
            f'"{result.raw_input}" -> "{result.normalized_input}": '
            f"{verdict} [{result.strategy_name}]"
        )

    logger.info(
        "Check completed",
        extra={
            "event": "cli.check.completed",
            "strategy": strategy.name,
            "check_count": evaluator.get_check_count(),
        },
    )
    return EXIT_OK


def run_compare(texts: List[str], include_all: bool) -> int:
    strategies = all_strategies() if include_all else core_strategies()
    exit_code = EXIT_OK

    for text in texts:
        comparison = compare_strategies(text, strategies)
        print(f'"{comparison.raw_input}" -> "{comparison.normalized_input}"')

        name_width = max(len(result.strategy_name) for result in comparison.results)
        for result in comparison.results:
            verdict = "palindrome" if result.is_palindrome else "not a palindrome"
            print(f"  {result.strategy_name:<{name_width}}  {verdict}")

        if comparison.consistent:
            print("  all strategies agree")
        else:
            print(f"  DISAGREEMENT: {', '.join(comparison.disagreeing_strategies)}")
            exit_code = EXIT_INCONSISTENT

    return exit_code


def run_benchmark(app_config: AppConfig, args: argparse.Namespace) -> int:
    bench = app_config.benchmark

    names = args.strategies or bench.strategies
    strategies = [get_strategy(name) for name in names] if names else all_strategies()

    runner = BenchmarkRunner(
        warmup_iterations=args.warmup if args.warmup is not None else bench.warmup_iterations,
        iterations=args.iterations if args.iterations is not None else bench.iterations,
    )
    report = runner.run(strategies, args.input if args.input is not None else bench.input)

    print(format_report(report))
    return EXIT_OK if report.consistent else EXIT_INCONSISTENT


def run_list_strategies() -> int:
    strategies = all_strategies()
    name_width = max(len(strategy.name) for strategy in strategies)
    for strategy in strategies:
        print(f"{strategy.name:<{name_width}}  {strategy.display_name}: {strategy.description}")
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the palindrome checker CLI.

    Returns:
        Exit code: 0 on success, 1 on error, 2 if strategies disagreed
    """
    load_dotenv()

    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        app_config, env_config = load_runtime_config(args.config, args.log_level, args.log_format)

        configure_logging(
            level=app_config.logging.level,
            format_type=app_config.logging.format,
            environment=env_config.environment,
        )

        config_path = str(args.config) if args.config else None

        logger.debug(
            "Configuration loaded",
            extra={
                "event": "config.loaded",
                "config_path": config_path,
                "strategy": app_config.strategy,
                "command": args.command,
            },
        )

        with log_context(command=args.command, config_path=config_path):
            if args.command == "check":
                return run_check(app_config, args.texts, args.strategy)
            if args.command == "compare":
                return run_compare(args.texts, args.all)
            if args.command == "benchmark":
                return run_benchmark(app_config, args)
            return run_list_strategies()

    except (ConfigurationError, UnknownStrategyError, BenchmarkConfigurationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        logger.error(
            f"{type(e).__name__}: {e}",
            extra={"event": "cli.error", "error_type": type(e).__name__},
        )
        return EXIT_ERROR
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return EXIT_ERROR
    except Exception as e:
        print(f"Fatal error: {e}", file=sys.stderr)
        logger.critical(
            "Fatal error",
            extra={
                "event": "cli.failed",
                "error_type": type(e).__name__,
                "error": str(e),
            },
            exc_info=True,
        )
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
