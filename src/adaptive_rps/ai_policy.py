import random
from dataclasses import dataclass
from typing import Mapping, Optional

from loguru import logger

from adaptive_rps.difficulty import (
    EXPLORATION_RATE,
    DifficultyPolicy,
    DifficultyTier,
    merge_win_rates,
    parse_tier,
)
from adaptive_rps.game_logic import MOVES, Move, beats, loses_to
from adaptive_rps.pattern_model import PatternModel

WIN = "win"
YIELD = "yield"


@dataclass(frozen=True)
class Decision:
    move: Move
    predicted: Optional[Move]  # None when exploring or history is too short
    explored: bool
    intent: str  # WIN | YIELD


class MoveSelector:
    """
    Two-stage randomized opponent.

    Stage one decides whether to consult the pattern model at all (the
    exploration draw). Stage two decides whether to try to win this round,
    with probability equal to the tier's target win-rate, or to hand the
    round to the player. Without a prediction both branches play a uniformly
    random move, so an unpredictable player only ever faces chance.
    """
    def __init__(self, model: PatternModel, tier=DifficultyTier.MEDIUM,
                 win_rates: Optional[Mapping[DifficultyTier, float]] = None,
                 exploration_rate: float = EXPLORATION_RATE, rng: Optional[random.Random] = None):
        self.model = model
        self.win_rates = merge_win_rates(win_rates)
        self.exploration_rate = exploration_rate
        self.rng = rng or model.rng
        self._tier = parse_tier(tier)

    @property
    def tier(self) -> DifficultyTier:
        return self._tier

    @tier.setter
    def tier(self, value):
        self._tier = parse_tier(value)

    @property
    def policy(self) -> DifficultyPolicy:
        return DifficultyPolicy.for_tier(self._tier, self.win_rates, self.exploration_rate)

    def decide(self) -> Decision:
        policy = self.policy

        predicted = None
        explored = self.rng.random() < policy.exploration_rate
        if not explored:
            predicted = self.model.predict()

        if self.rng.random() < policy.ai_win_rate:
            intent = WIN
            move = beats(predicted) if predicted is not None else self.rng.choice(MOVES)
        else:
            intent = YIELD
            move = loses_to(predicted) if predicted is not None else self.rng.choice(MOVES)

        decision = Decision(move=move, predicted=predicted, explored=explored, intent=intent)
        logger.debug(
            f"tier={self._tier.value} explored={explored} "
            f"predicted={predicted.value if predicted else None} intent={intent} move={move.value}"
        )
        return decision

    def choose(self) -> Move:
        return self.decide().move
