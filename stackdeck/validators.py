"""Validation utilities for StackDeck game state."""

from __future__ import annotations

from .domain.modes import GAME_MODES
from .domain.state import GameStateRecord
from .domain.upgrades import Upgrade, UpgradeType


def validate_upgrade(upgrade: Upgrade) -> list[str]:
    """Return list of problems with a stored upgrade entry."""
    errors: list[str] = []
    try:
        label = UpgradeType(upgrade.type).value
    except ValueError:
        errors.append(f"Upgrade has unknown type '{upgrade.type}'.")
        label = str(upgrade.type)

    if isinstance(upgrade.level, bool) or not isinstance(upgrade.level, int) or upgrade.level < 0:
        errors.append(f"Upgrade '{label}' has invalid level '{upgrade.level}'.")
    if not upgrade.base_cost > 0:
        errors.append(f"Upgrade '{label}' must have a positive base cost.")
    if not upgrade.cost_multiplier >= 1.0:
        errors.append(f"Upgrade '{label}' cost multiplier must be at least 1.0.")
    return errors


def validate_game_state(record: GameStateRecord) -> list[str]:
    """Return list of validation errors discovered in a game state record."""
    errors: list[str] = []

    if record.score < 0:
        errors.append(f"Score cannot be negative (got {record.score}).")
    if isinstance(record.decks, bool) or not isinstance(record.decks, int) or record.decks < 0:
        errors.append(f"Deck count must be a non-negative integer (got {record.decks}).")
    if record.last_session_timestamp < 0:
        errors.append("Last session timestamp cannot be negative.")
    if record.mode not in GAME_MODES:
        errors.append(f"Unknown game mode '{record.mode}'.")

    for upgrade in record.upgrades:
        errors.extend(validate_upgrade(upgrade))

    for name, count in record.card_collection.items():
        if count <= 0:
            errors.append(f"Card collection entry '{name}' has non-positive count {count}.")

    if record.rarity_percent_override is not None and not 0 <= record.rarity_percent_override <= 100:
        errors.append("Rarity override must be between 0 and 100.")

    return errors


__all__ = ["validate_game_state", "validate_upgrade"]
