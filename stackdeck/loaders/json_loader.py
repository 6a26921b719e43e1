"""Load card pools from JSON definitions."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Sequence, TYPE_CHECKING

from ..domain.cards import Card, QualityTier, tier_for_value

if TYPE_CHECKING:
    from ..app import GameApp


@dataclass(slots=True)
class PoolDefinition:
    cards: Sequence[Card]


def load_pool_from_json(app: "GameApp", path: str | Path) -> PoolDefinition:
    """Load cards from a JSON file and install them as the app's pool."""
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    definition = parse_pool_dict(data)
    app.load_pool(definition.cards)
    return definition


def parse_pool_dict(data: dict[str, Any]) -> PoolDefinition:
    """Parse a JSON dict (already decoded) into cards."""
    errors = validate_pool_dict(data)
    if errors:
        raise ValueError(_format_errors("Card pool validation failed", errors))
    return PoolDefinition(cards=tuple(parse_card(entry) for entry in data["cards"]))


def parse_card(entry: dict[str, Any]) -> Card:
    value = float(entry.get("value", 0))
    tier = entry.get("tier")
    return Card(
        name=entry["name"],
        weight=float(entry["weight"]),
        value=value,
        quality_tier=QualityTier(tier) if tier else tier_for_value(value),
    )


def merge_card_sources(
    cards_data: Iterable[dict[str, Any]], values_data: Iterable[dict[str, Any]]
) -> list[Card]:
    """Join drop-weight records with value records on ``detailsId``.

    Records without a positive ``dropWeight`` are skipped, cards missing from
    ``values_data`` are worth 0, and the tier is derived from the value.
    """
    values = {
        entry["detailsId"]: float(entry.get("chaosValue", 0))
        for entry in values_data
        if "detailsId" in entry
    }
    cards: list[Card] = []
    for entry in cards_data:
        weight = entry.get("dropWeight")
        if not isinstance(weight, (int, float)) or weight <= 0:
            continue
        value = values.get(entry.get("detailsId"), 0.0)
        cards.append(
            Card(
                name=entry["name"],
                weight=float(weight),
                value=value,
                quality_tier=tier_for_value(value),
            )
        )
    return cards


def load_card_sources(cards_path: str | Path, values_path: str | Path) -> list[Card]:
    cards_data = json.loads(Path(cards_path).read_text(encoding="utf-8"))
    values_data = json.loads(Path(values_path).read_text(encoding="utf-8"))
    cards = merge_card_sources(cards_data, values_data)
    if not cards:
        raise ValueError(f"No cards with a positive dropWeight found in {cards_path}")
    return cards


def validate_pool_file(path: str | Path) -> list[str]:
    """Validate a pool JSON file and return a list of errors."""
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    return validate_pool_dict(data)


def validate_pool_dict(data: dict[str, Any]) -> list[str]:
    errors: list[str] = []
    if not isinstance(data, dict):
        return ["Card pool must be a JSON object."]

    cards_raw = data.get("cards")
    if not isinstance(cards_raw, list) or not cards_raw:
        errors.append("Card pool must contain non-empty 'cards' array.")
        return errors

    names: set[str] = set()
    for idx, entry in enumerate(cards_raw, start=1):
        if not isinstance(entry, dict):
            errors.append(f"Card #{idx} must be an object.")
            continue
        name = entry.get("name")
        if not isinstance(name, str) or not name.strip():
            errors.append(f"Card #{idx} must define non-empty 'name'.")
            continue
        if name in names:
            errors.append(f"Card name '{name}' defined multiple times.")
        names.add(name)

        weight = entry.get("weight")
        if isinstance(weight, bool) or not isinstance(weight, (int, float)) or not weight > 0:
            errors.append(f"Card '{name}' has invalid 'weight' value '{weight}'.")

        value = entry.get("value", 0)
        if isinstance(value, bool) or not isinstance(value, (int, float)) or value < 0:
            errors.append(f"Card '{name}' has invalid 'value' '{value}'.")

        tier = entry.get("tier")
        if tier is not None:
            try:
                QualityTier(tier)
            except ValueError:
                errors.append(f"Card '{name}' has invalid tier '{tier}'.")

    return errors


def _format_errors(prefix: str, errors: Iterable[str]) -> str:
    formatted = "\n".join(f"- {err}" for err in errors)
    return f"{prefix}:\n{formatted}"
