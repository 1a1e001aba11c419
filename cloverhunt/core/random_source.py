"""Injectable randomness used by layout generation."""

from __future__ import annotations

import math
import random
from typing import Protocol, runtime_checkable


@runtime_checkable
class RandomSource(Protocol):
    """Uniform real and integer draws."""

    def uniform(self, low: float, high: float) -> float:
        """Return a float in ``[low, high)``; ``low`` when the bounds are equal."""
        ...

    def randrange(self, stop: int) -> int:
        """Return an int in ``[0, stop)``."""
        ...


class SeededRandomSource:
    """RandomSource over ``random.Random`` with optional reseeding."""

    def __init__(self, seed: int | None = None) -> None:
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def seed(self) -> int | None:
        return self._seed

    def reseed(self, seed: int | None) -> None:
        """Restart the stream; ``None`` reseeds from system entropy."""
        self._seed = seed
        self._rng = random.Random(seed)

    def uniform(self, low: float, high: float) -> float:
        if high <= low:
            return low
        value = low + (high - low) * self._rng.random()
        # Float rounding can land exactly on the upper bound.
        return min(value, math.nextafter(high, low))

    def randrange(self, stop: int) -> int:
        if stop <= 0:
            raise ValueError("randrange stop must be > 0")
        return self._rng.randrange(stop)
