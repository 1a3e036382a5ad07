"""Configuration schema models using Pydantic."""

from enum import Enum
from typing import List

from pydantic import BaseModel, Field, field_validator

from palindrome_checker.benchmark import DEFAULT_ITERATIONS, DEFAULT_WARMUP_ITERATIONS
from palindrome_checker.strategies import available_strategies, canonical_strategy_name

DEFAULT_STRATEGY = "two_pointer"
DEFAULT_BENCHMARK_INPUT = "A man a plan a canal Panama"


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Log output formats."""

    JSON = "json"
    KEY_VALUE = "key-value"


def _validate_strategy_name(value: str) -> str:
    name = canonical_strategy_name(value)
    supported = available_strategies()
    if name not in supported:
        raise ValueError(
            f"Unknown strategy '{value}'. Supported strategies: {', '.join(supported)}"
        )
    return name


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.INFO, description="Log level")
    format: LogFormat = Field(
        LogFormat.KEY_VALUE, description="Log output format (json or key-value)"
    )

    @field_validator("level", mode="before")
    @classmethod
    def upper_level(cls, v):
        """Accept lowercase level names."""
        return v.upper() if isinstance(v, str) else v

    model_config = {"use_enum_values": True, "validate_default": True}


class BenchmarkConfig(BaseModel):
    """Benchmark harness settings."""

    warmup_iterations: int = Field(
        DEFAULT_WARMUP_ITERATIONS, ge=0, le=1_000_000,
        description="Untimed calls per strategy before timing",
    )
    iterations: int = Field(
        DEFAULT_ITERATIONS, ge=1, le=10_000_000,
        description="Timed calls per strategy",
    )
    input: str = Field(DEFAULT_BENCHMARK_INPUT, description="Raw text every strategy is timed on")
    strategies: List[str] = Field(
        default_factory=list,
        description="Strategies to benchmark (empty = every registered strategy)",
    )

    @field_validator("strategies")
    @classmethod
    def validate_strategies(cls, v: List[str]) -> List[str]:
        """Canonicalize names, reject unknown names and duplicates."""
        names = [_validate_strategy_name(name) for name in v]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"Duplicate strategies: {', '.join(duplicates)}")
        return names


class AppConfig(BaseModel):
    """Root configuration object for the palindrome checker."""

    strategy: str = Field(DEFAULT_STRATEGY, description="Default evaluation strategy")
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )
    benchmark: BenchmarkConfig = Field(
        default_factory=BenchmarkConfig, description="Benchmark harness settings"
    )

    @field_validator("strategy")
    @classmethod
    def validate_strategy(cls, v: str) -> str:
        """Resolve the strategy name against the registry."""
        return _validate_strategy_name(v)
