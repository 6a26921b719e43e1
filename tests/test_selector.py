from collections import Counter
from random import Random

import pytest

from stackdeck.domain.cards import Card
from stackdeck.domain.exceptions import EmptyPoolError
from stackdeck.domain.pool import WeightedPool
from stackdeck.domain.selector import seeded_prng, select


def _scripted(*values):
    return iter(values).__next__


@pytest.fixture()
def pool():
    return WeightedPool(
        [
            Card("Rain of Chaos", 100, 1),
            Card("The Lover", 100, 5),
            Card("The Nurse", 10, 150),
            Card("The Doctor", 1, 1500),
        ]
    )


def test_same_seed_gives_same_sequence(pool):
    first = Random(123).random
    second = Random(123).random
    left = [select(pool, first).name for _ in range(200)]
    right = [select(pool, second).name for _ in range(200)]
    assert left == right


def test_seeded_prng_is_reproducible(pool):
    left = [select(pool, seeded_prng(1_700_000_000)).name for _ in range(5)]
    right = [select(pool, seeded_prng(1_700_000_000)).name for _ in range(5)]
    assert left == right


def test_distribution_follows_weights(pool):
    prng = Random(42).random
    counts = Counter(select(pool, prng).name for _ in range(10_000))

    heavy = counts["Rain of Chaos"] + counts["The Lover"]
    assert heavy > 10 * counts["The Nurse"]
    assert counts["The Nurse"] > 3 * counts["The Doctor"]


def test_selection_uses_strictly_greater_boundary():
    pool = WeightedPool([Card(name, 1) for name in "abcd"])
    # r == 1.0 lands exactly on the first boundary, so the second card wins.
    assert select(pool, _scripted(0.25)).name == "b"
    assert select(pool, _scripted(0.0)).name == "a"
    assert select(pool, _scripted(0.999999)).name == "d"


def test_single_card_pool_always_returns_it():
    pool = WeightedPool([Card("Only", 3, 10)])
    for value in (0.0, 0.5, 0.9999999, 1.0):
        assert select(pool, _scripted(value)).name == "Only"


def test_empty_pool_raises():
    class HollowPool:
        def __len__(self):
            return 0

    with pytest.raises(EmptyPoolError):
        select(HollowPool(), Random(1).random)


def test_seeded_prng_ignores_numeric_type(pool):
    left = [select(pool, seeded_prng(1_700_000_000)).name for _ in range(5)]
    right = [select(pool, seeded_prng(1_700_000_000.0)).name for _ in range(5)]
    assert left == right
