"""Mutable game state owned by the game service."""

from __future__ import annotations

from dataclasses import dataclass, field

from .upgrades import UpgradeCollection


@dataclass(slots=True)
class GameStateRecord:
    profile_id: str
    score: float = 0.0
    decks: int = 0
    last_session_timestamp: float = 0.0
    upgrades: UpgradeCollection = field(default_factory=UpgradeCollection.create)
    card_collection: dict[str, int] = field(default_factory=dict)
    mode: str = "stacked-deck-clicker"
    unlimited_decks: bool = False
    rarity_percent_override: float | None = None

    def collect(self, card_name: str) -> None:
        self.card_collection[card_name] = self.card_collection.get(card_name, 0) + 1
