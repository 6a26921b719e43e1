"""Game mode presets defining starting conditions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from .upgrades import UpgradeType


@dataclass(frozen=True, slots=True)
class GameMode:
    mode_id: str
    name: str
    description: str
    starting_decks: int | None  # None means unlimited decks
    starting_score: float = 0
    shop_enabled: bool = True
    allowed_upgrades: tuple[UpgradeType, ...] = tuple(UpgradeType)
    initial_upgrade_levels: Mapping[UpgradeType, int] = field(default_factory=dict)
    rarity_percent_override: float | None = None

    @property
    def unlimited_decks(self) -> bool:
        return self.starting_decks is None

    def sells(self, upgrade_type: UpgradeType) -> bool:
        return self.shop_enabled and upgrade_type in self.allowed_upgrades


CLASSIC = GameMode(
    mode_id="classic",
    name="Classic",
    description="Unlimited Stacked Decks, no shop, no upgrades",
    starting_decks=None,
    shop_enabled=False,
    allowed_upgrades=(),
)

RUTHLESS = GameMode(
    mode_id="ruthless",
    name="Ruthless",
    description="Limited Stacked Decks, low starting score, no shop, no upgrades",
    starting_decks=5,
    starting_score=25,
    shop_enabled=False,
    allowed_upgrades=(),
)

DOPAMINE = GameMode(
    mode_id="dopamine",
    name="Give me my Dopamine",
    description="High starting resources, increased rarity, lucky drop level 1",
    starting_decks=75,
    starting_score=750,
    allowed_upgrades=(UpgradeType.IMPROVED_RARITY, UpgradeType.LUCKY_DROP),
    initial_upgrade_levels={UpgradeType.LUCKY_DROP: 1},
    rarity_percent_override=25,
)

STACKED_DECK_CLICKER = GameMode(
    mode_id="stacked-deck-clicker",
    name="Stacked Deck Clicker",
    description="Limited decks, no starting score, full shop",
    starting_decks=10,
)

GAME_MODES: Mapping[str, GameMode] = {
    mode.mode_id: mode for mode in (CLASSIC, RUTHLESS, DOPAMINE, STACKED_DECK_CLICKER)
}


def get_mode(mode_id: str) -> GameMode:
    try:
        return GAME_MODES[mode_id]
    except KeyError as exc:
        raise KeyError(f"Game mode {mode_id} not found") from exc
