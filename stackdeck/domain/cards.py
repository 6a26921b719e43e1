"""Card domain models and utilities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class QualityTier(str, Enum):
    COMMON = "common"
    RARE = "rare"
    EPIC = "epic"
    LEGENDARY = "legendary"


# Upper value bounds (inclusive) for each tier below legendary.
TIER_VALUE_THRESHOLDS: tuple[tuple[float, QualityTier], ...] = (
    (50, QualityTier.COMMON),
    (200, QualityTier.RARE),
    (1000, QualityTier.EPIC),
)


@dataclass(frozen=True, slots=True)
class Card:
    """Definition of a collectible card."""

    name: str
    weight: float
    value: float = 0.0
    quality_tier: QualityTier = QualityTier.COMMON

    @property
    def is_common(self) -> bool:
        return self.quality_tier == QualityTier.COMMON


def tier_for_value(value: float) -> QualityTier:
    """Derive the quality tier a card falls into from its score value."""
    for bound, tier in TIER_VALUE_THRESHOLDS:
        if value <= bound:
            return tier
    return QualityTier.LEGENDARY
