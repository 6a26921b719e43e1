"""Single and batched card draws with upgrade effects applied."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Iterable, Sequence

from .cards import Card
from .exceptions import InvalidArgumentError
from .pool import WeightedPool
from .selector import Prng, select
from .upgrades import UpgradeCollection, UpgradeEffectResolver


@dataclass(frozen=True, slots=True)
class DrawResult:
    """Outcome of opening one deck."""

    card: Card
    timestamp: float
    score_gained: float


class DrawEngine:
    """Draw cards from a pool, applying rarity and luck upgrades.

    The engine keeps no per-draw state. Every draw consumes the caller's
    ``prng`` in call order, so two engines fed identically seeded generators
    produce identical results.
    """

    def __init__(
        self,
        resolver: UpgradeEffectResolver | None = None,
        *,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._resolver = resolver or UpgradeEffectResolver()
        self._clock = clock

    @property
    def resolver(self) -> UpgradeEffectResolver:
        return self._resolver

    def draw_one(
        self,
        pool: WeightedPool,
        upgrades: UpgradeCollection,
        prng: Prng,
        *,
        timestamp: float | None = None,
        rarity_percent_override: float | None = None,
    ) -> DrawResult:
        effective = self.effective_pool(pool, upgrades, rarity_percent_override)
        draws = self._resolver.luck_draws(upgrades)
        return self._draw(effective, draws, prng, timestamp)

    def draw_many(
        self,
        count: int,
        pool: WeightedPool,
        upgrades: UpgradeCollection,
        prng: Prng,
        *,
        timestamps: Iterable[float] | None = None,
        rarity_percent_override: float | None = None,
    ) -> list[DrawResult]:
        """Open ``count`` decks in order on the same ``prng`` stream.

        Equivalent to ``count`` consecutive :meth:`draw_one` calls. The
        rarity-adjusted pool is derived once for the batch and dropped when
        the call returns.
        """
        if isinstance(count, bool) or not isinstance(count, int) or count <= 0:
            raise InvalidArgumentError(f"Draw count must be a positive integer, got {count!r}")

        effective = self.effective_pool(pool, upgrades, rarity_percent_override)
        draws = self._resolver.luck_draws(upgrades)
        stamps = iter(timestamps) if timestamps is not None else None
        return [
            self._draw(effective, draws, prng, next(stamps, None) if stamps else None)
            for _ in range(count)
        ]

    def effective_pool(
        self,
        pool: WeightedPool,
        upgrades: UpgradeCollection,
        rarity_percent_override: float | None = None,
    ) -> WeightedPool:
        """Return the pool a draw actually samples from.

        A fixed override replaces the level-derived rarity bonus; a bonus of
        zero or less leaves the source pool untouched.
        """
        if rarity_percent_override is not None:
            percent = rarity_percent_override
        else:
            percent = self._resolver.rarity_bonus_percent(upgrades)
        if percent <= 0:
            return pool
        return apply_rarity_bonus(pool, percent)

    def _draw(
        self,
        pool: WeightedPool,
        draws: int,
        prng: Prng,
        timestamp: float | None,
    ) -> DrawResult:
        if draws > 1:
            card = best_of(select(pool, prng) for _ in range(draws))
        else:
            card = select(pool, prng)
        return DrawResult(
            card=card,
            timestamp=self._clock() if timestamp is None else timestamp,
            score_gained=card.value,
        )


def apply_rarity_bonus(pool: WeightedPool, percent: float) -> WeightedPool:
    """New pool with every non-common weight scaled by ``1 + percent / 100``."""
    multiplier = 1 + percent / 100
    return pool.reweighted(
        lambda card: card.weight if card.is_common else card.weight * multiplier
    )


def best_of(cards: Iterable[Card]) -> Card:
    """Highest-value card; the earliest one wins ties."""
    best: Card | None = None
    for card in cards:
        if best is None or card.value > best.value:
            best = card
    if best is None:
        raise InvalidArgumentError("best_of() needs at least one card")
    return best


def total_score(results: Sequence[DrawResult]) -> float:
    return sum(result.score_gained for result in results)
