from stackdeck.domain.state import GameStateRecord
from stackdeck.domain.upgrades import Upgrade, UpgradeCollection, UpgradeType
from stackdeck.validators import validate_game_state, validate_upgrade


def test_validate_game_state_success():
    record = GameStateRecord(
        profile_id="default",
        score=120.5,
        decks=3,
        last_session_timestamp=1_700_000_000,
        upgrades=UpgradeCollection.create({"luckyDrop": 2}),
        card_collection={"The Lover": 2},
    )
    assert validate_game_state(record) == []


def test_validate_game_state_collects_problems():
    record = GameStateRecord(
        profile_id="broken",
        score=-1,
        decks=-2,
        last_session_timestamp=-5,
        card_collection={"The Lover": 0},
        mode="hardcore",
        rarity_percent_override=150,
    )
    issues = validate_game_state(record)
    assert any("Score cannot be negative" in issue for issue in issues)
    assert any("Deck count must be a non-negative integer" in issue for issue in issues)
    assert "Last session timestamp cannot be negative." in issues
    assert "Unknown game mode 'hardcore'." in issues
    assert any("'The Lover'" in issue for issue in issues)
    assert "Rarity override must be between 0 and 100." in issues


def test_validate_upgrade_flags_bad_entries():
    issues = validate_upgrade(Upgrade("teleport", level=-1, base_cost=0, cost_multiplier=0.5))
    assert "Upgrade has unknown type 'teleport'." in issues
    assert "Upgrade 'teleport' has invalid level '-1'." in issues
    assert "Upgrade 'teleport' must have a positive base cost." in issues
    assert "Upgrade 'teleport' cost multiplier must be at least 1.0." in issues

    assert validate_upgrade(Upgrade(UpgradeType.MULTIDRAW, level=4, base_cost=1000, cost_multiplier=2.5)) == []
