import math

import pytest

from stackdeck.domain.cards import Card, QualityTier, tier_for_value
from stackdeck.domain.exceptions import InvalidPoolError
from stackdeck.domain.pool import WeightedPool


def _cards(*weights):
    return [Card(name=f"card-{idx}", weight=weight, value=idx) for idx, weight in enumerate(weights)]


def test_cumulative_weights_are_prefix_sums():
    pool = WeightedPool(_cards(100, 100, 10, 1))
    assert pool.cumulative_weights == (100, 200, 210, 211)
    assert pool.total_weight == 211
    assert pool.cumulative_weights[-1] == pool.total_weight


def test_cumulative_weights_never_decrease():
    pool = WeightedPool(_cards(0.5, 3, 0.25, 7, 1))
    pairs = zip(pool.cumulative_weights, pool.cumulative_weights[1:])
    assert all(a <= b for a, b in pairs)
    assert math.isclose(pool.total_weight, 11.75)


def test_empty_pool_is_rejected():
    with pytest.raises(InvalidPoolError):
        WeightedPool([])


@pytest.mark.parametrize("weight", [0, -1, float("nan")])
def test_non_positive_weight_is_rejected(weight):
    with pytest.raises(InvalidPoolError):
        WeightedPool(_cards(10, weight))


def test_duplicate_names_are_rejected():
    cards = [Card("Twin", 1), Card("Twin", 2)]
    with pytest.raises(InvalidPoolError):
        WeightedPool(cards)


def test_reweighted_builds_a_new_pool():
    pool = WeightedPool(_cards(10, 20))
    doubled = pool.reweighted(lambda card: card.weight * 2)

    assert doubled is not pool
    assert doubled.cumulative_weights == (20, 60)
    assert pool.cumulative_weights == (10, 30)
    assert pool.card_at(0).weight == 10


def test_card_at_and_iteration_follow_input_order():
    cards = _cards(5, 6, 7)
    pool = WeightedPool(cards)
    assert len(pool) == 3
    assert pool.card_at(2) is cards[2]
    assert [card.name for card in pool] == ["card-0", "card-1", "card-2"]


@pytest.mark.parametrize(
    ("value", "tier"),
    [
        (0, QualityTier.COMMON),
        (50, QualityTier.COMMON),
        (51, QualityTier.RARE),
        (200, QualityTier.RARE),
        (1000, QualityTier.EPIC),
        (1000.5, QualityTier.LEGENDARY),
    ],
)
def test_tier_for_value_thresholds(value, tier):
    assert tier_for_value(value) is tier
