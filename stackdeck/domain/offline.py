"""Replay of auto-opened decks for time spent away from the game."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable, Sequence

from .draw_engine import DrawEngine, DrawResult, total_score
from .pool import WeightedPool
from .selector import Prng, seeded_prng
from .upgrades import UpgradeCollection, UpgradeEffectResolver, UpgradeType
from ..config import OfflineConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class OfflineProgressionResult:
    """Everything that happened while the game was closed."""

    draw_results: Sequence[DrawResult] = ()
    total_score_gained: float = 0.0
    decks_consumed: int = 0
    elapsed_seconds_simulated: float = 0.0
    was_capped: bool = False
    decks_produced: int = 0

    @property
    def is_empty(self) -> bool:
        return self.decks_consumed == 0 and self.decks_produced == 0


class OfflineProgressionSimulator:
    """Synthesize auto-opened draws for an offline interval.

    Work is proportional to the number of decks opened, never to the number
    of seconds elapsed. The generator is seeded from ``last_timestamp`` so the
    same interval always replays to the same draws.
    """

    def __init__(
        self,
        engine: DrawEngine | None = None,
        *,
        config: OfflineConfig | None = None,
        prng_factory: Callable[[float], Prng] = seeded_prng,
    ) -> None:
        self._engine = engine or DrawEngine()
        self._resolver: UpgradeEffectResolver = self._engine.resolver
        self._config = config or OfflineConfig()
        self._prng_factory = prng_factory

    def calculate(
        self,
        last_timestamp: float,
        current_timestamp: float,
        upgrades: UpgradeCollection,
        pool: WeightedPool,
        available_decks: int,
        *,
        max_offline_seconds: float | None = None,
        rarity_percent_override: float | None = None,
    ) -> OfflineProgressionResult:
        limit = self._config.max_offline_seconds if max_offline_seconds is None else max_offline_seconds

        # A clock that moved backwards means no offline time, not an error.
        elapsed = max(0.0, current_timestamp - last_timestamp)
        capped = min(elapsed, limit)
        was_capped = elapsed > limit

        if upgrades.level(UpgradeType.AUTO_OPENING) == 0:
            return OfflineProgressionResult()

        if was_capped:
            logger.info(
                "Offline interval of %.0f s exceeds the %.0f s cap; simulating the cap only.",
                elapsed,
                limit,
            )

        rate = self._resolver.auto_opening_rate(upgrades)
        decks_produced = 0
        if self._config.count_produced_decks:
            decks_produced = math.floor(capped * self._resolver.deck_production_rate(upgrades))

        available = max(0, int(available_decks)) + decks_produced
        decks_to_open = min(math.floor(capped * rate), available)

        draw_results: list[DrawResult] = []
        if decks_to_open > 0:
            prng = self._prng_factory(last_timestamp)
            draw_results = self._engine.draw_many(
                decks_to_open,
                pool,
                upgrades,
                prng,
                timestamps=(last_timestamp + (i + 1) / rate for i in range(decks_to_open)),
                rarity_percent_override=rarity_percent_override,
            )

        result = OfflineProgressionResult(
            draw_results=tuple(draw_results),
            total_score_gained=total_score(draw_results),
            decks_consumed=decks_to_open,
            elapsed_seconds_simulated=capped,
            was_capped=was_capped,
            decks_produced=decks_produced,
        )
        logger.debug(
            "Offline progression: %.0f s simulated, %s decks opened, %s produced, %g score.",
            capped,
            result.decks_consumed,
            decks_produced,
            result.total_score_gained,
        )
        return result
