"""Configuration models for StackDeck."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

DEFAULT_MAX_OFFLINE_SECONDS = 7 * 24 * 60 * 60


@dataclass(slots=True)
class DrawConfig:
    """Tunable per-level rates used by the upgrade formulas."""

    rarity_percent_per_level: float = 10.0
    auto_opening_rate_per_level: float = 0.1
    deck_production_rate_per_level: float = 0.05


@dataclass(slots=True)
class OfflineConfig:
    """Bounds applied when replaying time spent away from the game."""

    max_offline_seconds: float = DEFAULT_MAX_OFFLINE_SECONDS
    count_produced_decks: bool = True


@dataclass(slots=True)
class StackDeckConfig:
    """Top-level configuration container."""

    draw: DrawConfig = field(default_factory=DrawConfig)
    offline: OfflineConfig = field(default_factory=OfflineConfig)
    mode: str = "stacked-deck-clicker"
    rng_seed: int | None = None

    @classmethod
    def from_env(cls) -> "StackDeckConfig":
        """Create config from environment variables prefixed with STACKDECK_."""
        prefix = "STACKDECK_"
        defaults = DrawConfig()

        draw_config = DrawConfig(
            rarity_percent_per_level=_env_float(
                f"{prefix}RARITY_PERCENT_PER_LEVEL", defaults.rarity_percent_per_level
            ),
            auto_opening_rate_per_level=_env_float(
                f"{prefix}AUTO_OPENING_RATE", defaults.auto_opening_rate_per_level
            ),
            deck_production_rate_per_level=_env_float(
                f"{prefix}DECK_PRODUCTION_RATE", defaults.deck_production_rate_per_level
            ),
        )

        offline_config = OfflineConfig(
            max_offline_seconds=_env_float(
                f"{prefix}MAX_OFFLINE_SECONDS", DEFAULT_MAX_OFFLINE_SECONDS
            ),
            count_produced_decks=os.getenv(f"{prefix}OFFLINE_COUNT_PRODUCED_DECKS", "true").lower()
            in {"1", "true", "yes"},
        )

        raw_seed = os.getenv(f"{prefix}RNG_SEED")
        try:
            rng_seed = int(raw_seed) if raw_seed else None
        except ValueError as exc:
            raise ValueError(f"Invalid integer for {prefix}RNG_SEED: {raw_seed!r}") from exc

        return cls(
            draw=draw_config,
            offline=offline_config,
            mode=os.getenv(f"{prefix}MODE", "stacked-deck-clicker") or "stacked-deck-clicker",
            rng_seed=rng_seed,
        )


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError as exc:
        raise ValueError(f"Invalid number for {name}: {raw!r}") from exc
    if value < 0:
        raise ValueError(f"{name} cannot be negative")
    return value
