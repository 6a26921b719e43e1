"""StackDeck public API."""

from .app import GameApp
from .config import DrawConfig, OfflineConfig, StackDeckConfig
from .domain import (
    Card,
    DrawEngine,
    DrawResult,
    OfflineProgressionResult,
    OfflineProgressionSimulator,
    QualityTier,
    UpgradeCollection,
    UpgradeEffectResolver,
    UpgradeType,
    WeightedPool,
    select,
)

__all__ = [
    "GameApp",
    "DrawConfig",
    "OfflineConfig",
    "StackDeckConfig",
    "Card",
    "DrawEngine",
    "DrawResult",
    "OfflineProgressionResult",
    "OfflineProgressionSimulator",
    "QualityTier",
    "UpgradeCollection",
    "UpgradeEffectResolver",
    "UpgradeType",
    "WeightedPool",
    "select",
]
