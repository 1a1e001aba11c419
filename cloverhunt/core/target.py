"""Target selection over a placed item list."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace

from cloverhunt.core.models import PlacedItem
from cloverhunt.core.random_source import RandomSource


def mark_target(items: Sequence[PlacedItem], rng: RandomSource) -> tuple[PlacedItem, ...]:
    """Return the items with exactly one, chosen uniformly, flagged as target."""
    if not items:
        return ()
    target_index = rng.randrange(len(items))
    return tuple(
        replace(item, is_target=index == target_index) for index, item in enumerate(items)
    )
