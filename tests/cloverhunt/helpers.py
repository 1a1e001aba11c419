from __future__ import annotations

from collections.abc import Iterable


class ScriptedRandomSource:
    """RandomSource replaying fixed fractions and indices."""

    def __init__(self, fractions: Iterable[float] = (), indices: Iterable[int] | None = None) -> None:
        self._fractions = list(fractions)
        self._indices = None if indices is None else list(indices)

    def uniform(self, low: float, high: float) -> float:
        fraction = self._fractions.pop(0) if self._fractions else 0.5
        return low + fraction * (high - low)

    def randrange(self, stop: int) -> int:
        # Without scripted indices every Fisher-Yates step keeps its element.
        if self._indices is None:
            return stop - 1
        return self._indices.pop(0)


class FakeClock:
    def __init__(self, now: float = 100.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now
