"""Game actions: opening decks, buying upgrades and resuming after absence."""

from __future__ import annotations

import sys
import time
from random import Random
from typing import Callable, Sequence

from .draw_engine import DrawEngine, DrawResult, total_score
from .events import DECK_OPENED, OFFLINE_APPLIED, UPGRADE_PURCHASED, EventBus
from .exceptions import InsufficientDecks, InsufficientScore, PoolNotLoaded, UpgradeNotAllowed
from .modes import GameMode, get_mode
from .offline import OfflineProgressionResult, OfflineProgressionSimulator
from .pool import WeightedPool
from .state import GameStateRecord
from .upgrades import Upgrade, UpgradeCollection, UpgradeType
from ..storage.base import GameStateStore


class GameService:
    """Apply draw and offline results to persisted game state."""

    def __init__(
        self,
        store: GameStateStore,
        engine: DrawEngine,
        simulator: OfflineProgressionSimulator,
        event_bus: EventBus,
        *,
        pool: WeightedPool | None = None,
        rng: Random | None = None,
        clock: Callable[[], float] = time.time,
        default_mode: str = "stacked-deck-clicker",
    ) -> None:
        self._store = store
        self._engine = engine
        self._resolver = engine.resolver
        self._simulator = simulator
        self._event_bus = event_bus
        self._pool = pool
        self._rng = rng or Random()
        self._clock = clock
        self._default_mode = default_mode

    def attach_pool(self, pool: WeightedPool) -> None:
        self._pool = pool

    @property
    def pool(self) -> WeightedPool:
        if self._pool is None:
            raise PoolNotLoaded("Card pool not loaded yet")
        return self._pool

    async def new_game(
        self, profile_id: str = "default", mode: GameMode | str | None = None
    ) -> GameStateRecord:
        if mode is None:
            mode = self._default_mode
        if isinstance(mode, str):
            mode = get_mode(mode)
        record = GameStateRecord(
            profile_id=profile_id,
            score=mode.starting_score,
            decks=mode.starting_decks or 0,
            last_session_timestamp=self._clock(),
            upgrades=UpgradeCollection.create(mode.initial_upgrade_levels),
            mode=mode.mode_id,
            unlimited_decks=mode.unlimited_decks,
            rarity_percent_override=mode.rarity_percent_override,
        )
        await self._store.save(record)
        return record

    async def fetch(self, profile_id: str = "default") -> GameStateRecord:
        record = await self._store.load(profile_id)
        if record is None:
            record = await self.new_game(profile_id)
        return record

    async def open_deck(self, profile_id: str = "default") -> DrawResult:
        results = await self.open_decks(profile_id, count=1)
        return results[0]

    async def open_decks(
        self, profile_id: str = "default", count: int | None = None
    ) -> Sequence[DrawResult]:
        """Open ``count`` decks, defaulting to the multidraw batch size."""
        record = await self.fetch(profile_id)
        if count is None:
            count = self._resolver.batch_size(record.upgrades)
        if not record.unlimited_decks and record.decks < count:
            raise InsufficientDecks(count, record.decks)

        results = self._engine.draw_many(
            count,
            self.pool,
            record.upgrades,
            self._rng.random,
            rarity_percent_override=record.rarity_percent_override,
        )

        record.score += total_score(results)
        if not record.unlimited_decks:
            record.decks -= count
        for result in results:
            record.collect(result.card.name)
        record.last_session_timestamp = self._clock()
        await self._store.save(record)

        await self._event_bus.publish(
            DECK_OPENED,
            {
                "profile_id": profile_id,
                "cards": [result.card.name for result in results],
                "score_gained": total_score(results),
            },
        )
        return results

    async def purchase_upgrade(
        self, upgrade_type: UpgradeType | str, profile_id: str = "default"
    ) -> Upgrade:
        upgrade_type = self._resolver.resolve_type(upgrade_type)
        record = await self.fetch(profile_id)
        if not get_mode(record.mode).sells(upgrade_type):
            raise UpgradeNotAllowed(
                f"Upgrade {upgrade_type.value} is not available in mode {record.mode}"
            )

        current = record.upgrades.get(upgrade_type)
        if current is None:
            current = UpgradeCollection.create().get(upgrade_type)
        cost = self._resolver.cost(current)
        if not self._resolver.can_afford(current, record.score):
            raise InsufficientScore(cost, record.score)

        upgraded = current.next_level()
        record.score -= cost
        record.upgrades.set(upgraded)
        record.last_session_timestamp = self._clock()
        await self._store.save(record)

        await self._event_bus.publish(
            UPGRADE_PURCHASED,
            {
                "profile_id": profile_id,
                "upgrade": upgrade_type.value,
                "level": upgraded.level,
                "cost": cost,
            },
        )
        return upgraded

    async def resume(
        self, profile_id: str = "default", now: float | None = None
    ) -> OfflineProgressionResult:
        """Merge what auto-opening produced since the last session."""
        record = await self.fetch(profile_id)
        now = self._clock() if now is None else now
        available = sys.maxsize if record.unlimited_decks else record.decks

        result = self._simulator.calculate(
            record.last_session_timestamp,
            now,
            record.upgrades,
            self.pool,
            available,
            rarity_percent_override=record.rarity_percent_override,
        )

        record.score += result.total_score_gained
        if not record.unlimited_decks:
            record.decks += result.decks_produced - result.decks_consumed
        for draw in result.draw_results:
            record.collect(draw.card.name)
        record.last_session_timestamp = now
        await self._store.save(record)

        await self._event_bus.publish(
            OFFLINE_APPLIED,
            {
                "profile_id": profile_id,
                "decks_consumed": result.decks_consumed,
                "decks_produced": result.decks_produced,
                "score_gained": result.total_score_gained,
                "was_capped": result.was_capped,
            },
        )
        return result
