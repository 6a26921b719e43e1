"""Upgrade models and the pure cost/effect formulas behind them."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, Iterator, Mapping

from .exceptions import UnknownUpgradeTypeError
from ..config import DrawConfig

logger = logging.getLogger(__name__)


class UpgradeType(str, Enum):
    AUTO_OPENING = "autoOpening"
    IMPROVED_RARITY = "improvedRarity"
    LUCKY_DROP = "luckyDrop"
    MULTIDRAW = "multidraw"
    DECK_PRODUCTION = "deckProduction"
    SCENE_CUSTOMIZATION = "sceneCustomization"


DEFAULT_BASE_COSTS: Mapping[UpgradeType, float] = {
    UpgradeType.AUTO_OPENING: 100,
    UpgradeType.IMPROVED_RARITY: 500,
    UpgradeType.LUCKY_DROP: 250,
    UpgradeType.MULTIDRAW: 1000,
    UpgradeType.DECK_PRODUCTION: 200,
    UpgradeType.SCENE_CUSTOMIZATION: 50,
}

DEFAULT_COST_MULTIPLIERS: Mapping[UpgradeType, float] = {
    UpgradeType.AUTO_OPENING: 1.5,
    UpgradeType.IMPROVED_RARITY: 2.0,
    UpgradeType.LUCKY_DROP: 1.75,
    UpgradeType.MULTIDRAW: 2.5,
    UpgradeType.DECK_PRODUCTION: 1.6,
    UpgradeType.SCENE_CUSTOMIZATION: 1.3,
}


@dataclass(frozen=True, slots=True)
class Upgrade:
    """A purchasable enhancement and its current level."""

    type: UpgradeType
    level: int = 0
    base_cost: float = 100
    cost_multiplier: float = 1.5

    def next_level(self) -> "Upgrade":
        return replace(self, level=clamp_level(self.level) + 1)


class UpgradeCollection:
    """Upgrades owned by a player, one entry per type."""

    def __init__(self, upgrades: Iterable[Upgrade] = ()) -> None:
        self._upgrades: dict[UpgradeType | str, Upgrade] = {}
        for upgrade in upgrades:
            self.set(upgrade)

    @classmethod
    def create(cls, levels: Mapping[UpgradeType | str, int] | None = None) -> "UpgradeCollection":
        """Build the full upgrade set with default pricing and optional levels."""
        resolved: dict[UpgradeType, int] = {}
        for key, value in (levels or {}).items():
            try:
                resolved[UpgradeType(key)] = value
            except ValueError:
                logger.error("Unknown upgrade type %r in upgrade levels.", key)
                raise UnknownUpgradeTypeError(key) from None
        return cls(
            Upgrade(
                type=upgrade_type,
                level=resolved.get(upgrade_type, 0),
                base_cost=DEFAULT_BASE_COSTS[upgrade_type],
                cost_multiplier=DEFAULT_COST_MULTIPLIERS[upgrade_type],
            )
            for upgrade_type in UpgradeType
        )

    def get(self, upgrade_type: UpgradeType | str) -> Upgrade | None:
        return self._upgrades.get(_collection_key(upgrade_type))

    def level(self, upgrade_type: UpgradeType | str) -> int:
        upgrade = self.get(upgrade_type)
        return clamp_level(upgrade.level) if upgrade else 0

    def set(self, upgrade: Upgrade) -> None:
        self._upgrades[_collection_key(upgrade.type)] = upgrade

    def __iter__(self) -> Iterator[Upgrade]:
        return iter(self._upgrades.values())

    def __len__(self) -> int:
        return len(self._upgrades)


def _collection_key(upgrade_type: object):
    # Unrecognised types are kept verbatim so the resolver can reject them later.
    try:
        return UpgradeType(upgrade_type)
    except ValueError:
        return upgrade_type


@dataclass(frozen=True, slots=True)
class UpgradeInfo:
    type: UpgradeType
    level: int
    cost: int
    effect: float
    description: str


def clamp_level(level: object) -> int:
    """Normalise a stored level; anything negative or unreadable becomes 0."""
    try:
        value = int(level)  # type: ignore[call-overload]
    except (TypeError, ValueError, OverflowError):
        return 0
    return max(0, value)


class UpgradeEffectResolver:
    """Map upgrade levels to costs and effect magnitudes.

    The resolver holds only the tunable per-level rates from :class:`DrawConfig`
    and never mutates the upgrades it is given.
    """

    def __init__(self, config: DrawConfig | None = None) -> None:
        self._config = config or DrawConfig()

    @property
    def config(self) -> DrawConfig:
        return self._config

    def resolve_type(self, upgrade_type: object) -> UpgradeType:
        if isinstance(upgrade_type, UpgradeType):
            return upgrade_type
        try:
            return UpgradeType(upgrade_type)
        except ValueError:
            logger.error("Unknown upgrade type %r; refusing to resolve it.", upgrade_type)
            raise UnknownUpgradeTypeError(upgrade_type) from None

    def cost(self, upgrade: Upgrade) -> int:
        self.resolve_type(upgrade.type)
        level = clamp_level(upgrade.level)
        return math.ceil(upgrade.base_cost * upgrade.cost_multiplier**level)

    def effect(self, upgrade: Upgrade) -> float:
        upgrade_type = self.resolve_type(upgrade.type)
        level = clamp_level(upgrade.level)
        cfg = self._config

        if upgrade_type is UpgradeType.AUTO_OPENING:
            return level * cfg.auto_opening_rate_per_level
        if upgrade_type is UpgradeType.DECK_PRODUCTION:
            return level * cfg.deck_production_rate_per_level
        if upgrade_type is UpgradeType.IMPROVED_RARITY:
            return level * cfg.rarity_percent_per_level
        if upgrade_type is UpgradeType.LUCKY_DROP:
            return level + 1
        if upgrade_type is UpgradeType.MULTIDRAW:
            return level + 1
        if upgrade_type is UpgradeType.SCENE_CUSTOMIZATION:
            return level
        logger.error("Upgrade type %r has no effect formula.", upgrade_type)
        raise UnknownUpgradeTypeError(upgrade_type)

    def can_afford(self, upgrade: Upgrade, current_score: float) -> bool:
        return current_score >= self.cost(upgrade)

    def describe(self, upgrade: Upgrade) -> str:
        """Human-readable summary of what the current level does."""
        upgrade_type = self.resolve_type(upgrade.type)
        effect = self.effect(upgrade)
        if upgrade_type is UpgradeType.AUTO_OPENING:
            return f"{effect:.1f} decks/second"
        if upgrade_type is UpgradeType.DECK_PRODUCTION:
            return f"{effect:.2f} decks/second"
        if upgrade_type is UpgradeType.IMPROVED_RARITY:
            return f"+{effect:g}% rare card chance"
        if upgrade_type is UpgradeType.LUCKY_DROP:
            return f"Best of {effect} draws"
        if upgrade_type is UpgradeType.MULTIDRAW:
            return f"Open {effect} decks at once"
        return f"{effect} customization(s) unlocked"

    def available_upgrades(self, upgrades: UpgradeCollection) -> list[UpgradeInfo]:
        return [
            UpgradeInfo(
                type=self.resolve_type(upgrade.type),
                level=clamp_level(upgrade.level),
                cost=self.cost(upgrade),
                effect=self.effect(upgrade),
                description=self.describe(upgrade),
            )
            for upgrade in upgrades
        ]

    # Collection-level lookups; a missing upgrade behaves like level 0.

    def auto_opening_rate(self, upgrades: UpgradeCollection) -> float:
        return self._effect_of(upgrades, UpgradeType.AUTO_OPENING)

    def deck_production_rate(self, upgrades: UpgradeCollection) -> float:
        return self._effect_of(upgrades, UpgradeType.DECK_PRODUCTION)

    def rarity_bonus_percent(self, upgrades: UpgradeCollection) -> float:
        return self._effect_of(upgrades, UpgradeType.IMPROVED_RARITY)

    def luck_draws(self, upgrades: UpgradeCollection) -> int:
        return int(self._effect_of(upgrades, UpgradeType.LUCKY_DROP))

    def batch_size(self, upgrades: UpgradeCollection) -> int:
        return int(self._effect_of(upgrades, UpgradeType.MULTIDRAW))

    def _effect_of(self, upgrades: UpgradeCollection, upgrade_type: UpgradeType) -> float:
        upgrade = upgrades.get(upgrade_type) or Upgrade(type=upgrade_type)
        return self.effect(upgrade)
