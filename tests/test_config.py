import pytest

from stackdeck.config import DEFAULT_MAX_OFFLINE_SECONDS, StackDeckConfig


def test_from_env_defaults(monkeypatch):
    for name in (
        "STACKDECK_RARITY_PERCENT_PER_LEVEL",
        "STACKDECK_AUTO_OPENING_RATE",
        "STACKDECK_DECK_PRODUCTION_RATE",
        "STACKDECK_MAX_OFFLINE_SECONDS",
        "STACKDECK_OFFLINE_COUNT_PRODUCED_DECKS",
        "STACKDECK_MODE",
        "STACKDECK_RNG_SEED",
    ):
        monkeypatch.delenv(name, raising=False)

    config = StackDeckConfig.from_env()
    assert config.draw.rarity_percent_per_level == 10.0
    assert config.draw.auto_opening_rate_per_level == 0.1
    assert config.offline.max_offline_seconds == DEFAULT_MAX_OFFLINE_SECONDS
    assert config.offline.count_produced_decks
    assert config.mode == "stacked-deck-clicker"
    assert config.rng_seed is None


def test_from_env_reads_overrides(monkeypatch):
    monkeypatch.setenv("STACKDECK_RARITY_PERCENT_PER_LEVEL", "12.5")
    monkeypatch.setenv("STACKDECK_MAX_OFFLINE_SECONDS", "3600")
    monkeypatch.setenv("STACKDECK_OFFLINE_COUNT_PRODUCED_DECKS", "no")
    monkeypatch.setenv("STACKDECK_MODE", "dopamine")
    monkeypatch.setenv("STACKDECK_RNG_SEED", "42")

    config = StackDeckConfig.from_env()
    assert config.draw.rarity_percent_per_level == 12.5
    assert config.offline.max_offline_seconds == 3600
    assert not config.offline.count_produced_decks
    assert config.mode == "dopamine"
    assert config.rng_seed == 42


@pytest.mark.parametrize(
    ("name", "value", "message"),
    [
        ("STACKDECK_AUTO_OPENING_RATE", "fast", "Invalid number"),
        ("STACKDECK_MAX_OFFLINE_SECONDS", "-1", "cannot be negative"),
        ("STACKDECK_RNG_SEED", "abc", "Invalid integer"),
    ],
)
def test_from_env_rejects_bad_values(monkeypatch, name, value, message):
    monkeypatch.setenv(name, value)
    with pytest.raises(ValueError, match=message):
        StackDeckConfig.from_env()
