"""Host-owned difficulty and token-size configuration."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from cloverhunt.core.models import DEFAULT_SIZE_RANGE, SizeRange

DEFAULT_DIFFICULTY = "normal"
DEFAULT_COUNTS: dict[str, int] = {
    "easy": 45,
    "normal": 90,
    "hard": 150,
    "insane": 240,
}


@dataclass(frozen=True, slots=True)
class DifficultyTable:
    """Maps difficulty names to item counts."""

    counts: Mapping[str, int] = field(default_factory=lambda: dict(DEFAULT_COUNTS))

    def __post_init__(self) -> None:
        if not self.counts:
            raise ValueError("DifficultyTable requires at least one difficulty.")
        for name, count in self.counts.items():
            if count < 1:
                raise ValueError(f"Difficulty '{name}' must place at least one item.")

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self.counts)

    def resolve(self, name: str) -> str:
        """Return the table key matching ``name``, ignoring case and padding."""
        if name in self.counts:
            return name
        key = name.strip().lower()
        if key not in self.counts:
            raise ValueError(f"Unknown difficulty: {name}.")
        return key

    def count_for(self, name: str) -> int:
        """Return the item count for a difficulty name."""
        return self.counts[self.resolve(name)]


@dataclass(frozen=True, slots=True)
class SizeRule:
    """Chooses token size bounds from the board width."""

    default: SizeRange = DEFAULT_SIZE_RANGE
    narrow: SizeRange | None = None
    narrow_below_width: float = 0.0

    def size_range_for(self, board_width: float) -> SizeRange:
        if self.narrow is not None and board_width < self.narrow_below_width:
            return self.narrow
        return self.default
