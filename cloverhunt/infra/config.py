"""Game configuration and env loading."""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from cloverhunt.app.difficulty import DEFAULT_DIFFICULTY
from cloverhunt.core.models import DEFAULT_MAX_SIZE, DEFAULT_MIN_SIZE, DEFAULT_PADDING, SizeRange


@dataclass(frozen=True, slots=True)
class GameConfig:
    """Immutable game configuration sourced from environment."""

    padding: float = DEFAULT_PADDING
    min_size: float = DEFAULT_MIN_SIZE
    max_size: float = DEFAULT_MAX_SIZE
    difficulty: str = DEFAULT_DIFFICULTY
    seed: int | None = None
    min_cell_size: float = 1.0

    @property
    def size_range(self) -> SizeRange:
        return SizeRange(self.min_size, self.max_size)


def load_env_file(path: str = ".env.app", *, override_existing: bool = True) -> None:
    """Load KEY=VALUE pairs from an env file into the process environment."""
    env_path = _resolve_env_path(path)
    if not env_path.exists():
        return
    for line in env_path.read_text(encoding="utf-8").splitlines():
        entry = _parse_env_line(line)
        if entry is None:
            continue
        key, value = entry
        if override_existing or key not in os.environ:
            os.environ[key] = value


def load_default_env_files(
    *, override_existing: bool = True, paths: Sequence[str] | None = None
) -> None:
    """Load env files with optional local overrides, later files winning."""
    to_load = (
        tuple(paths)
        if paths is not None
        else (
            "appdata/config/.env.app",
            "appdata/config/.env.app.local",
            ".env.app",
            ".env.app.local",
        )
    )
    for path in to_load:
        load_env_file(path, override_existing=override_existing)


def load_game_config() -> GameConfig:
    """Load game configuration from env vars, falling back on malformed values."""
    padding = max(0.0, _float("CLOVER_PADDING", DEFAULT_PADDING))
    min_size = _float("CLOVER_MIN_SIZE", DEFAULT_MIN_SIZE)
    max_size = _float("CLOVER_MAX_SIZE", DEFAULT_MAX_SIZE)
    if min_size <= 0 or min_size > max_size:
        min_size, max_size = DEFAULT_MIN_SIZE, DEFAULT_MAX_SIZE
    min_cell_size = _float("CLOVER_MIN_CELL_SIZE", 1.0)
    if min_cell_size <= 0:
        min_cell_size = 1.0
    difficulty = os.getenv("CLOVER_DIFFICULTY", DEFAULT_DIFFICULTY).strip().lower()
    return GameConfig(
        padding=padding,
        min_size=min_size,
        max_size=max_size,
        difficulty=difficulty or DEFAULT_DIFFICULTY,
        seed=_optional_int("CLOVER_SEED"),
        min_cell_size=min_cell_size,
    )


def _float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _optional_int(name: str) -> int | None:
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def _parse_env_line(line: str) -> tuple[str, str] | None:
    """Split one env-file line; blanks, comments and malformed lines give None."""
    key, sep, value = line.strip().partition("=")
    key = key.strip()
    if not sep or not key or key.startswith("#"):
        return None
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "'\"":
        value = value[1:-1]
    return key, value


def _resolve_env_path(path: str) -> Path:
    """Resolve an env path from the cwd, then from the project root."""
    candidate = Path(path)
    if candidate.exists() or candidate.is_absolute():
        return candidate
    return Path(__file__).resolve().parents[2] / path
