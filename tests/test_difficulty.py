import pytest

from adaptive_rps.difficulty import (
    DEFAULT_WIN_RATES,
    DifficultyPolicy,
    DifficultyTier,
    InvalidDifficultyError,
    parse_tier,
)


def test_tier_targets():
    assert DifficultyPolicy.for_tier(DifficultyTier.EASY).ai_win_rate == 0.35
    assert DifficultyPolicy.for_tier(DifficultyTier.MEDIUM).ai_win_rate == 0.55
    assert DifficultyPolicy.for_tier(DifficultyTier.HARD).ai_win_rate == 0.75


def test_exploration_is_the_same_for_every_tier():
    rates = {DifficultyPolicy.for_tier(t).exploration_rate for t in DifficultyTier}
    assert rates == {0.2}


def test_policy_is_a_pure_value():
    assert DifficultyPolicy.for_tier("hard") == DifficultyPolicy.for_tier(DifficultyTier.HARD)
    with pytest.raises(Exception):
        DifficultyPolicy.for_tier("hard").ai_win_rate = 0.1
    assert DEFAULT_WIN_RATES[DifficultyTier.HARD] == 0.75


def test_parse_tier():
    assert parse_tier("EASY") is DifficultyTier.EASY
    assert parse_tier(" medium ") is DifficultyTier.MEDIUM
    assert parse_tier(DifficultyTier.HARD) is DifficultyTier.HARD


@pytest.mark.parametrize("bad", ["", "expert", None, 2, 0.75])
def test_parse_tier_rejects(bad):
    with pytest.raises(InvalidDifficultyError):
        parse_tier(bad)
    with pytest.raises(InvalidDifficultyError):
        DifficultyPolicy.for_tier(bad)
