"""Exceptions raised by the benchmark harness."""


class BenchmarkConfigurationError(ValueError):
    """Invalid benchmark parameters (iteration counts, strategy set)."""
