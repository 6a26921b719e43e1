"""Automated checks to highlight balancing issues."""

from __future__ import annotations

from dataclasses import dataclass
from statistics import mean

from ..domain.cards import QualityTier
from ..domain.pool import WeightedPool


@dataclass(slots=True)
class ChecklistIssue:
    severity: str
    message: str


def run_checklist(pool: WeightedPool) -> list[ChecklistIssue]:
    issues: list[ChecklistIssue] = []
    by_tier: dict[QualityTier, list[float]] = {tier: [] for tier in QualityTier}
    for card in pool:
        by_tier[QualityTier(card.quality_tier)].append(card.weight)

    for tier, weights in by_tier.items():
        if not weights:
            issues.append(ChecklistIssue("warning", f"Pool has no {tier.value} cards."))

    commons = by_tier[QualityTier.COMMON]
    legendaries = by_tier[QualityTier.LEGENDARY]
    if commons and legendaries and max(legendaries) > mean(commons):
        issues.append(
            ChecklistIssue(
                "warning",
                "A legendary card is heavier than the average common card.",
            )
        )

    if all(card.value == 0 for card in pool):
        issues.append(ChecklistIssue("error", "Every card in the pool is worth 0."))

    return issues
