import random

import pytest

from adaptive_rps.ai_policy import WIN, YIELD, MoveSelector
from adaptive_rps.difficulty import DifficultyTier, InvalidDifficultyError
from adaptive_rps.game_logic import MOVES, Move, beats, loses_to
from adaptive_rps.pattern_model import PatternModel

R, P, S = Move.ROCK, Move.PAPER, Move.SCISSORS


def make_selector(rng, moves=(), tier=DifficultyTier.HARD):
    model = PatternModel(rng=rng)
    for m in moves:
        model.observe(m)
    return MoveSelector(model, tier, rng=rng)


def test_win_branch_beats_prediction(scripted_rng):
    sel = make_selector(scripted_rng([0.5, 0.1]), [R, P, S, R, P, S])
    d = sel.decide()
    assert d.predicted == R
    assert d.intent == WIN
    assert not d.explored
    assert d.move == beats(R) == P


def test_yield_branch_loses_to_prediction(scripted_rng):
    sel = make_selector(scripted_rng([0.5, 0.9]), [R, P, S, R, P, S])
    d = sel.decide()
    assert d.intent == YIELD
    assert d.move == loses_to(R) == S


def test_win_rate_threshold_is_exclusive(scripted_rng):
    sel = make_selector(scripted_rng([0.5, 0.75]), [R, P, S, R, P, S])
    assert sel.decide().intent == YIELD


def test_exploration_skips_prediction(scripted_rng):
    sel = make_selector(scripted_rng([0.1, 0.1]), [R, P, S, R, P, S])
    d = sel.decide()
    assert d.explored
    assert d.predicted is None
    assert d.intent == WIN
    assert d.move in MOVES


def test_exploration_threshold_is_exclusive(scripted_rng):
    sel = make_selector(scripted_rng([0.2, 0.1]), [R, P, S, R, P, S])
    d = sel.decide()
    assert not d.explored
    assert d.predicted == R


def test_short_history_plays_without_prediction(scripted_rng):
    sel = make_selector(scripted_rng([0.9, 0.1]), [R, P])
    d = sel.decide()
    assert not d.explored
    assert d.predicted is None
    assert d.move in MOVES


def test_hard_scenario_with_forced_win(scripted_rng):
    rng = scripted_rng([0.99, 0.0], seed=5)
    sel = make_selector(rng, [R, P, S, R, P])
    assert sel.model.current_signature() == "SRP"
    d = sel.decide()
    assert d.predicted in MOVES
    assert d.move == beats(d.predicted)


def test_tier_changes_apply_to_next_decision(scripted_rng):
    sel = make_selector(scripted_rng([0.5, 0.5, 0.5, 0.5]), [R, P, S, R, P, S], tier=DifficultyTier.EASY)
    assert sel.decide().intent == YIELD
    sel.tier = "hard"
    assert sel.tier is DifficultyTier.HARD
    assert sel.decide().intent == WIN


def test_invalid_tier_rejected():
    model = PatternModel()
    with pytest.raises(InvalidDifficultyError):
        MoveSelector(model, "impossible")
    sel = MoveSelector(model)
    with pytest.raises(InvalidDifficultyError):
        sel.tier = 3
    assert sel.tier is DifficultyTier.MEDIUM


def test_policy_reflects_custom_rates():
    sel = MoveSelector(PatternModel(), "easy", win_rates={DifficultyTier.EASY: 0.1,
                                                          DifficultyTier.MEDIUM: 0.5,
                                                          DifficultyTier.HARD: 0.9},
                       exploration_rate=0.0)
    assert sel.policy.ai_win_rate == 0.1
    assert sel.policy.exploration_rate == 0.0


def test_choose_always_returns_a_move():
    rng = random.Random(4)
    sel = make_selector(rng)
    for _ in range(200):
        assert sel.choose() in MOVES
        sel.model.observe(rng.choice(MOVES))


def test_partial_win_rates_fall_back_to_defaults():
    sel = MoveSelector(PatternModel(), "medium", win_rates={DifficultyTier.HARD: 0.9})
    assert sel.policy.ai_win_rate == 0.55
    assert sel.choose() in MOVES
    sel.tier = "hard"
    assert sel.policy.ai_win_rate == 0.9


def test_win_rate_keys_accept_tier_names():
    sel = MoveSelector(PatternModel(), "easy", win_rates={"EASY": 0.2})
    assert sel.policy.ai_win_rate == 0.2


@pytest.mark.parametrize("rates, error", [
    ({DifficultyTier.HARD: 1.5}, ValueError),
    ({"easy": -0.1}, ValueError),
    ({"nightmare": 0.5}, InvalidDifficultyError),
])
def test_bad_win_rates_rejected_at_construction(rates, error):
    with pytest.raises(error):
        MoveSelector(PatternModel(), win_rates=rates)
