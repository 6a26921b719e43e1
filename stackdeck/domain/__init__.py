"""Domain models and services."""

from .cards import Card, QualityTier, tier_for_value
from .pool import WeightedPool
from .selector import Prng, seeded_prng, select
from .upgrades import (
    Upgrade,
    UpgradeCollection,
    UpgradeEffectResolver,
    UpgradeInfo,
    UpgradeType,
)
from .draw_engine import DrawEngine, DrawResult
from .offline import OfflineProgressionResult, OfflineProgressionSimulator
from .modes import GAME_MODES, GameMode, get_mode
from .state import GameStateRecord
from .game import GameService
from .exceptions import (
    EmptyPoolError,
    InsufficientDecks,
    InsufficientScore,
    InvalidArgumentError,
    InvalidPoolError,
    PoolNotLoaded,
    StackDeckError,
    UnknownUpgradeTypeError,
    UpgradeNotAllowed,
)

__all__ = [
    "Card",
    "QualityTier",
    "tier_for_value",
    "WeightedPool",
    "Prng",
    "seeded_prng",
    "select",
    "Upgrade",
    "UpgradeCollection",
    "UpgradeEffectResolver",
    "UpgradeInfo",
    "UpgradeType",
    "DrawEngine",
    "DrawResult",
    "OfflineProgressionResult",
    "OfflineProgressionSimulator",
    "GAME_MODES",
    "GameMode",
    "get_mode",
    "GameStateRecord",
    "GameService",
    "EmptyPoolError",
    "InsufficientDecks",
    "InsufficientScore",
    "InvalidArgumentError",
    "InvalidPoolError",
    "PoolNotLoaded",
    "StackDeckError",
    "UnknownUpgradeTypeError",
    "UpgradeNotAllowed",
]
