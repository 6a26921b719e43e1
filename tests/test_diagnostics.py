from random import Random

import pytest

from stackdeck.diagnostics.checklist import run_checklist
from stackdeck.diagnostics.draw_simulator import DrawSimulator
from stackdeck.domain.cards import Card, QualityTier
from stackdeck.domain.exceptions import InvalidArgumentError
from stackdeck.domain.pool import WeightedPool
from stackdeck.domain.upgrades import UpgradeCollection
from stackdeck.testing import SAMPLE_CARDS


def test_simulator_counts_every_pull():
    pool = WeightedPool(SAMPLE_CARDS)
    result = DrawSimulator(rng=Random(5)).simulate(pool, pulls=2000)

    assert sum(result.card_counts.values()) == 2000
    assert sum(result.tier_counts.values()) == 2000
    assert result.mean_value == result.total_value / 2000
    assert result.share("Rain of Chaos") > result.share("The Nurse")


def test_rarity_upgrade_shifts_the_distribution():
    pool = WeightedPool(SAMPLE_CARDS)
    plain = DrawSimulator(rng=Random(5)).simulate(pool, pulls=5000)
    boosted = DrawSimulator(rng=Random(5)).simulate(
        pool, UpgradeCollection.create({"improvedRarity": 10}), pulls=5000
    )
    assert boosted.tier_counts["rare"] > plain.tier_counts["rare"]


def test_checklist_flags_missing_tiers_and_heavy_legendaries():
    pool = WeightedPool(
        [
            Card("Common", 10, 1, QualityTier.COMMON),
            Card("Heavy Legend", 50, 5000, QualityTier.LEGENDARY),
        ]
    )
    messages = [issue.message for issue in run_checklist(pool)]
    assert "Pool has no rare cards." in messages
    assert "Pool has no epic cards." in messages
    assert "A legendary card is heavier than the average common card." in messages


def test_checklist_rejects_worthless_pool():
    pool = WeightedPool([Card("Dust", 1), Card("Lint", 2)])
    issues = run_checklist(pool)
    assert any(issue.severity == "error" for issue in issues)


def test_checklist_passes_balanced_pool():
    pool = WeightedPool(
        list(SAMPLE_CARDS) + [Card("The Fiend", 2, 800, QualityTier.EPIC)]
    )
    assert run_checklist(pool) == []


@pytest.mark.parametrize("pulls", [0, -10])
def test_simulator_requires_positive_pulls(pulls):
    with pytest.raises(InvalidArgumentError, match="pulls must be a positive integer"):
        DrawSimulator(rng=Random(5)).simulate(WeightedPool(SAMPLE_CARDS), pulls=pulls)
