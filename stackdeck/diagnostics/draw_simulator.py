"""Monte-Carlo draw simulation helpers."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from random import Random

from ..domain.cards import QualityTier
from ..domain.draw_engine import DrawEngine, total_score
from ..domain.exceptions import InvalidArgumentError
from ..domain.pool import WeightedPool
from ..domain.upgrades import UpgradeCollection


@dataclass(slots=True)
class SimulationResult:
    pulls: int
    card_counts: Counter = field(default_factory=Counter)
    tier_counts: Counter = field(default_factory=Counter)
    total_value: float = 0.0

    @property
    def mean_value(self) -> float:
        return self.total_value / self.pulls

    def share(self, card_name: str) -> float:
        return self.card_counts[card_name] / self.pulls


class DrawSimulator:
    """Estimate the draw distribution a set of upgrades produces."""

    def __init__(self, engine: DrawEngine | None = None, *, rng: Random | None = None) -> None:
        self._engine = engine or DrawEngine(clock=lambda: 0.0)
        self._rng = rng or Random()

    def simulate(
        self,
        pool: WeightedPool,
        upgrades: UpgradeCollection | None = None,
        *,
        pulls: int = 1000,
    ) -> SimulationResult:
        if isinstance(pulls, bool) or not isinstance(pulls, int) or pulls <= 0:
            raise InvalidArgumentError(f"pulls must be a positive integer, got {pulls!r}")
        if upgrades is None:
            upgrades = UpgradeCollection.create()
        results = self._engine.draw_many(pulls, pool, upgrades, self._rng.random)
        simulation = SimulationResult(pulls=pulls, total_value=total_score(results))
        for result in results:
            simulation.card_counts[result.card.name] += 1
            simulation.tier_counts[QualityTier(result.card.quality_tier).value] += 1
        return simulation
