"""Immutable weighted index over a card collection."""

from __future__ import annotations

from dataclasses import replace
from itertools import accumulate
from typing import Callable, Iterable, Iterator

from .cards import Card
from .exceptions import InvalidPoolError


class WeightedPool:
    """Cards with precomputed cumulative weights for weighted selection.

    Pools are never mutated. Any change to the card set or to a weight
    produces a new pool through :meth:`reweighted` or the constructor.
    """

    __slots__ = ("_cards", "_cumulative", "_total")

    def __init__(self, cards: Iterable[Card]) -> None:
        cards = tuple(cards)
        if not cards:
            raise InvalidPoolError("Card pool is empty")

        seen: set[str] = set()
        for card in cards:
            # ``not >`` also rejects NaN weights.
            if not card.weight > 0:
                raise InvalidPoolError(
                    f"Card {card.name!r} has non-positive weight {card.weight!r}"
                )
            if card.name in seen:
                raise InvalidPoolError(f"Card {card.name!r} appears more than once")
            seen.add(card.name)

        self._cards = cards
        self._cumulative = tuple(accumulate(float(card.weight) for card in cards))
        self._total = self._cumulative[-1]

    @property
    def cards(self) -> tuple[Card, ...]:
        return self._cards

    @property
    def total_weight(self) -> float:
        return self._total

    @property
    def cumulative_weights(self) -> tuple[float, ...]:
        return self._cumulative

    def card_at(self, index: int) -> Card:
        return self._cards[index]

    def reweighted(self, weigh: Callable[[Card], float]) -> "WeightedPool":
        """Return a new pool whose card weights are ``weigh(card)``."""
        return WeightedPool(replace(card, weight=weigh(card)) for card in self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __repr__(self) -> str:
        return f"WeightedPool(cards={len(self._cards)}, total_weight={self._total:g})"
