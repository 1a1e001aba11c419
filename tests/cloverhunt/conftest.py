from __future__ import annotations

import pytest

from cloverhunt.core.random_source import SeededRandomSource
from tests.cloverhunt.helpers import FakeClock


@pytest.fixture
def seeded_rng() -> SeededRandomSource:
    return SeededRandomSource(1337)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()
