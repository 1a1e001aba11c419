"""Command-line entry point: generate a board layout and print it as JSON."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from dataclasses import replace
from typing import Any

import orjson

from cloverhunt.app.difficulty import DifficultyTable
from cloverhunt.core.layout_engine import layout, reshuffle
from cloverhunt.core.models import BoardRect, Layout
from cloverhunt.core.random_source import SeededRandomSource
from cloverhunt.infra.config import load_default_env_files, load_game_config
from cloverhunt.infra.logging import setup_logging

logger = logging.getLogger(__name__)


def layout_to_payload(board_layout: Layout) -> dict[str, object]:
    """Convert a layout to a JSON-serializable payload."""
    geometry = board_layout.geometry
    target = board_layout.target
    return {
        "width": board_layout.rect.width,
        "height": board_layout.rect.height,
        "padding": board_layout.padding,
        "grid": (
            None
            if geometry is None
            else {
                "rows": geometry.rows,
                "cols": geometry.cols,
                "cell_width": geometry.cell_width,
                "cell_height": geometry.cell_height,
            }
        ),
        "target_id": None if target is None else target.id,
        "items": [
            {
                "id": item.id,
                "x": round(item.x, 2),
                "y": round(item.y, 2),
                "size": round(item.size, 2),
                "rotation": round(item.rotation, 2),
                "is_target": item.is_target,
            }
            for item in board_layout
        ],
    }


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate a clover hunt board layout.")
    parser.add_argument("--width", type=float, default=960.0)
    parser.add_argument("--height", type=float, default=640.0)
    parser.add_argument("--padding", type=float, default=None)
    count_group = parser.add_mutually_exclusive_group()
    count_group.add_argument("--difficulty", default=None)
    count_group.add_argument("--count", type=int, default=None)
    parser.add_argument("--min-size", type=float, default=None)
    parser.add_argument("--max-size", type=float, default=None)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--reshuffles", type=int, default=0)
    parser.add_argument("--pretty", action="store_true")
    parser.add_argument("--log-file", action="store_true", help="Also write a JSONL run log.")
    return parser


def _config_overrides(args: argparse.Namespace) -> dict[str, Any]:
    """Return the config fields set explicitly on the command line."""
    overrides = {
        "padding": args.padding,
        "min_size": args.min_size,
        "max_size": args.max_size,
        "seed": args.seed,
    }
    return {name: value for name, value in overrides.items() if value is not None}


def main(argv: Sequence[str] | None = None) -> int:
    """Run the layout generator CLI."""
    args = build_parser().parse_args(argv)
    load_default_env_files(override_existing=False)
    setup_logging(with_file=args.log_file)
    config = replace(load_game_config(), **_config_overrides(args))
    try:
        size_range = config.size_range
        if args.count is not None:
            count = args.count
        else:
            count = DifficultyTable().count_for(args.difficulty or config.difficulty)
    except ValueError as exc:
        logger.error("invalid_arguments error=%s", exc)
        return 2

    rng = SeededRandomSource(config.seed)
    board_layout = layout(
        BoardRect(args.width, args.height),
        config.padding,
        count,
        size_range,
        rng,
        min_cell_size=config.min_cell_size,
    )
    for _ in range(max(0, args.reshuffles)):
        board_layout = reshuffle(board_layout, size_range, rng, min_cell_size=config.min_cell_size)

    option = orjson.OPT_INDENT_2 if args.pretty else 0
    sys.stdout.write(orjson.dumps(layout_to_payload(board_layout), option=option).decode("utf-8"))
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
