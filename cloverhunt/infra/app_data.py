"""Clover Hunt app-data paths."""

from __future__ import annotations

import os
from pathlib import Path


def resolve_app_data_root() -> Path:
    """Resolve app-data root directory for runtime state."""
    configured = os.getenv("CLOVER_APP_DATA_DIR", "").strip()
    if configured:
        candidate = Path(configured)
        if candidate.is_absolute():
            return candidate
        return resolve_game_root() / candidate
    return resolve_game_root() / "appdata"


def resolve_game_root() -> Path:
    """Resolve the project root that holds the default app-data directory."""
    return Path(__file__).resolve().parents[2]


def resolve_logs_dir() -> Path:
    """Resolve logs directory under app-data root."""
    return resolve_app_data_root() / "logs"
