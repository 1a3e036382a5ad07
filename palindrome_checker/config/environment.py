"""Environment variable loading and validation."""

import os
from typing import Optional

from palindrome_checker.strategies import available_strategies, canonical_strategy_name

from .exceptions import ConfigurationError

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
VALID_LOG_FORMATS = ["json", "key-value"]


class EnvironmentConfig:
    """Environment variable configuration holder."""

    def __init__(
        self,
        strategy: Optional[str] = None,
        log_level: Optional[str] = None,
        log_format: Optional[str] = None,
        environment: Optional[str] = None,
    ):
        self.strategy = strategy
        self.log_level = log_level
        self.log_format = log_format
        self.environment = environment or "local"


def load_environment_config() -> EnvironmentConfig:
    """Load and validate environment variables.

    All variables are optional:
    - PALINDROME_STRATEGY: Default strategy name (overrides the config file)
    - LOG_LEVEL: DEBUG, INFO, WARNING, ERROR or CRITICAL
    - LOG_FORMAT: json or key-value
    - ENVIRONMENT: Label attached to log records (default: local)

    Returns:
        EnvironmentConfig with validated values

    Raises:
        ConfigurationError: If any variable has an invalid value
    """
    errors = []

    strategy = os.getenv("PALINDROME_STRATEGY") or None
    log_level = os.getenv("LOG_LEVEL") or None
    log_format = os.getenv("LOG_FORMAT") or None
    environment = os.getenv("ENVIRONMENT") or None

    if strategy:
        canonical = canonical_strategy_name(strategy)
        if canonical not in available_strategies():
            errors.append(
                f"Invalid PALINDROME_STRATEGY: '{strategy}'. "
                f"Must be one of: {', '.join(available_strategies())}"
            )
        else:
            strategy = canonical

    if log_level:
        if log_level.upper() not in VALID_LOG_LEVELS:
            errors.append(
                f"Invalid LOG_LEVEL: '{log_level}'. Must be one of: {', '.join(VALID_LOG_LEVELS)}"
            )
        else:
            log_level = log_level.upper()

    if log_format:
        if log_format.lower() not in VALID_LOG_FORMATS:
            errors.append(
                f"Invalid LOG_FORMAT: '{log_format}'. Must be one of: {', '.join(VALID_LOG_FORMATS)}"
            )
        else:
            log_format = log_format.lower()

    if errors:
        raise ConfigurationError(
            "Environment variable validation failed",
            errors=errors,
            suggestions=[
                "Check the values in your .env file",
                "Unset the variable to fall back to the config file",
            ],
        )

    return EnvironmentConfig(
        strategy=strategy,
        log_level=log_level,
        log_format=log_format,
        environment=environment,
    )
