"""Exceptions raised while resolving strategies."""

from typing import Iterable


class UnknownStrategyError(ValueError):
    """Raised when a strategy name is not in the registry."""

    def __init__(self, name: str, supported: Iterable[str]) -> None:
        self.name = name
        self.supported = sorted(supported)
        super().__init__(
            f"Unknown strategy: {name!r}. Supported strategies: {', '.join(self.supported)}"
        )
