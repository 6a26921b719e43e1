"""Pytest fixtures for StackDeck."""

from __future__ import annotations

from random import Random

import pytest

from ..app import GameApp
from ..config import StackDeckConfig
from ..domain.cards import Card, QualityTier

SAMPLE_CARDS: tuple[Card, ...] = (
    Card("Rain of Chaos", 100, 1, QualityTier.COMMON),
    Card("The Lover", 100, 5, QualityTier.COMMON),
    Card("The Nurse", 10, 150, QualityTier.RARE),
    Card("The Doctor", 1, 1500, QualityTier.LEGENDARY),
)


class FakeClock:
    """Manually advanced clock returning seconds."""

    def __init__(self, start: float = 1_700_000_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture()
def memory_app() -> GameApp:
    return app_fixture()


def app_fixture(cards=SAMPLE_CARDS, *, seed: int = 7, clock=None, **kwargs) -> GameApp:
    """Helper for ad-hoc tests where pytest is not available."""
    config = StackDeckConfig(rng_seed=seed, **kwargs)
    return GameApp(config, cards=cards, rng=Random(seed), clock=clock or FakeClock())
