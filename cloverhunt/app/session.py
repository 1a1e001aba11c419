"""Game session host: owns the current layout, round state and timing."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from time import monotonic

from cloverhunt.app.difficulty import DEFAULT_DIFFICULTY, DifficultyTable, SizeRule
from cloverhunt.core.board import item_at
from cloverhunt.core.layout_engine import layout
from cloverhunt.core.models import DEFAULT_PADDING, BoardRect, Layout, PlacedItem
from cloverhunt.core.random_source import RandomSource, SeededRandomSource

logger = logging.getLogger(__name__)


class SessionStatus(StrEnum):
    """Round lifecycle."""

    IDLE = "IDLE"
    PLAYING = "PLAYING"
    SUCCESS = "SUCCESS"


class SelectOutcome(StrEnum):
    """Result of selecting an item."""

    STARTED = "STARTED"
    FOUND = "FOUND"
    MISS = "MISS"
    IGNORED = "IGNORED"


@dataclass(frozen=True, slots=True)
class SelectResult:
    """Outcome of a single selection."""

    outcome: SelectOutcome
    item: PlacedItem | None
    status: str


class HuntSession:
    """Host-side state around the layout engine.

    The session keeps exactly one current layout and replaces it wholesale
    whenever the board size, difficulty or round changes.
    """

    def __init__(
        self,
        *,
        rng: RandomSource | None = None,
        time_source: Callable[[], float] | None = None,
        difficulties: DifficultyTable | None = None,
        size_rule: SizeRule | None = None,
        difficulty: str = DEFAULT_DIFFICULTY,
        padding: float = DEFAULT_PADDING,
        min_cell_size: float = 1.0,
    ) -> None:
        self._rng = rng or SeededRandomSource()
        self._time_source = time_source or monotonic
        self._difficulties = difficulties or DifficultyTable()
        self._size_rule = size_rule or SizeRule()
        self._padding = padding
        self._min_cell_size = min_cell_size
        self._difficulty = self._difficulties.resolve(difficulty)
        self._count = self._difficulties.counts[self._difficulty]
        self._rect = BoardRect(0.0, 0.0)
        self._layout = Layout(rect=self._rect, padding=padding)
        self._status = SessionStatus.IDLE
        self._round = 0
        self._started_at = 0.0
        self._elapsed_seconds = 0.0
        self._best_seconds: float | None = None
        self._miss_count = 0

    @property
    def layout(self) -> Layout:
        return self._layout

    @property
    def status(self) -> SessionStatus:
        return self._status

    @property
    def round(self) -> int:
        return self._round

    @property
    def difficulty(self) -> str:
        return self._difficulty

    @property
    def count(self) -> int:
        return self._count

    @property
    def elapsed_seconds(self) -> float:
        return self._elapsed_seconds

    @property
    def best_seconds(self) -> float | None:
        return self._best_seconds

    @property
    def miss_count(self) -> int:
        return self._miss_count

    def resize(self, width: float, height: float) -> None:
        """Track a new board size; a usable size while idle starts a game."""
        rect = BoardRect(width, height)
        if rect == self._rect:
            return
        self._rect = rect
        usable = width > 0 and height > 0
        if usable and self._status is SessionStatus.IDLE:
            self.start()
            return
        self._relayout()

    def start(self) -> None:
        """Begin a new timed round on a fresh layout."""
        self._status = SessionStatus.PLAYING
        self._started_at = self._time_source()
        self._elapsed_seconds = 0.0
        self._miss_count = 0
        self._round += 1
        self._relayout()
        logger.info("round_started round=%s count=%s", self._round, len(self._layout))

    def reshuffle(self) -> None:
        """Replace the layout without touching the round status or timer."""
        self._round += 1
        self._relayout()

    def set_difficulty(self, name: str) -> None:
        """Switch difficulty and rebuild the layout for the new item count."""
        self._difficulty = self._difficulties.resolve(name)
        self._count = self._difficulties.counts[self._difficulty]
        self._relayout()

    def tick(self) -> float:
        """Refresh elapsed time while a round is running."""
        if self._status is SessionStatus.PLAYING:
            self._elapsed_seconds = self._time_source() - self._started_at
        return self._elapsed_seconds

    def select(self, item_id: int) -> SelectResult:
        """Resolve a player selection against the current layout."""
        if self._status is SessionStatus.IDLE:
            self.start()
            return SelectResult(SelectOutcome.STARTED, None, "Round started.")
        if self._status is not SessionStatus.PLAYING:
            return SelectResult(SelectOutcome.IGNORED, None, "Round is not running.")

        item = self._layout.item_by_id(item_id)
        if item is None:
            return SelectResult(SelectOutcome.IGNORED, None, f"Unknown item {item_id}.")
        if not item.is_target:
            self._miss_count += 1
            return SelectResult(SelectOutcome.MISS, item, "Not this one.")

        spent = self._time_source() - self._started_at
        self._elapsed_seconds = spent
        self._status = SessionStatus.SUCCESS
        if self._best_seconds is None or spent < self._best_seconds:
            self._best_seconds = spent
        logger.info(
            "target_found round=%s elapsed=%.3f misses=%s",
            self._round,
            spent,
            self._miss_count,
        )
        return SelectResult(SelectOutcome.FOUND, item, f"Found in {spent:.2f}s.")

    def select_at(self, px: float, py: float) -> SelectResult:
        """Hit-test a board-space point and select the item under it."""
        item = item_at(self._layout, px, py)
        if item is None:
            return SelectResult(SelectOutcome.IGNORED, None, "Nothing there.")
        return self.select(item.id)

    def dismiss(self) -> None:
        """Close the success state and return to idle."""
        if self._status is SessionStatus.SUCCESS:
            self._status = SessionStatus.IDLE

    def _relayout(self) -> None:
        self._layout = layout(
            self._rect,
            self._padding,
            self._count,
            self._size_rule.size_range_for(self._rect.width),
            self._rng,
            min_cell_size=self._min_cell_size,
        )
