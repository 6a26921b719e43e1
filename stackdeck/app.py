"""Top level application object for StackDeck games."""

from __future__ import annotations

import time
from random import Random
from typing import Any, Callable, Iterable

from .config import StackDeckConfig
from .domain.cards import Card
from .domain.draw_engine import DrawEngine
from .domain.events import EventBus
from .domain.game import GameService
from .domain.offline import OfflineProgressionSimulator
from .domain.pool import WeightedPool
from .domain.upgrades import UpgradeEffectResolver
from .storage.base import GameStateStore
from .storage.memory import InMemoryGameStateStore


class GameApp:
    """Central dependency container wiring the draw core to game state."""

    def __init__(
        self,
        config: StackDeckConfig,
        *,
        cards: Iterable[Card] | None = None,
        store: GameStateStore | None = None,
        event_bus: EventBus | None = None,
        rng: Random | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.config = config
        self.event_bus = event_bus or EventBus()
        self.store = store or InMemoryGameStateStore()

        self._rng = rng or (Random(config.rng_seed) if config.rng_seed is not None else Random())
        self._pool: WeightedPool | None = None

        self.resolver = UpgradeEffectResolver(config.draw)
        self.engine = DrawEngine(self.resolver, clock=clock)
        self.simulator = OfflineProgressionSimulator(self.engine, config=config.offline)
        self.game_service = GameService(
            self.store,
            self.engine,
            self.simulator,
            self.event_bus,
            rng=self._rng,
            clock=clock,
            default_mode=config.mode,
        )
        if cards is not None:
            self.load_pool(cards)

    @property
    def pool(self) -> WeightedPool | None:
        return self._pool

    def load_pool(self, cards: Iterable[Card]) -> WeightedPool:
        """Build a fresh pool from ``cards`` and hand it to the game service."""
        pool = WeightedPool(cards)
        self._pool = pool
        self.game_service.attach_pool(pool)
        return pool

    def snapshot(self) -> dict[str, Any]:
        """Export current configuration for debugging."""
        return {
            "mode": self.config.mode,
            "cards": [card.name for card in self._pool] if self._pool else [],
            "total_weight": self._pool.total_weight if self._pool else 0.0,
            "max_offline_seconds": self.config.offline.max_offline_seconds,
            "rng_seed": self.config.rng_seed,
        }
