"""Weighted card selection against a :class:`WeightedPool`."""

from __future__ import annotations

from bisect import bisect_right
from random import Random
from typing import Callable

from .cards import Card
from .exceptions import EmptyPoolError
from .pool import WeightedPool

Prng = Callable[[], float]


def select(pool: WeightedPool, prng: Prng) -> Card:
    """Pick one card with probability proportional to its weight.

    ``prng`` must return a float in ``[0, 1)``. The selected card is the first
    one whose cumulative weight is strictly greater than
    ``prng() * pool.total_weight``. The generator is advanced exactly once per
    call, including for single-card pools.
    """
    if len(pool) == 0:
        raise EmptyPoolError("Cannot select from an empty card pool")

    threshold = prng() * pool.total_weight
    cumulative = pool.cumulative_weights
    index = bisect_right(cumulative, threshold)
    # Guard against a generator that returns exactly 1.0.
    return pool.card_at(min(index, len(cumulative) - 1))


def seeded_prng(seed: int | float | str) -> Prng:
    """Return a fresh reproducible ``[0, 1)`` generator for ``seed``.

    Numeric seeds are normalised, so ``1700000000`` and ``1700000000.0`` give
    the same stream.
    """
    if isinstance(seed, (int, float)) and not isinstance(seed, bool):
        seed = float(seed).hex()
    return Random(str(seed)).random
