import random
from typing import Mapping, Optional

from loguru import logger

from adaptive_rps.ai_policy import Decision, MoveSelector
from adaptive_rps.difficulty import DEFAULT_WIN_RATES, EXPLORATION_RATE, DifficultyTier
from adaptive_rps.game_logic import Move, parse_move
from adaptive_rps.history import MoveHistory
from adaptive_rps.pattern_model import DECAY_FACTOR, PATTERN_LENGTH, PatternModel


class AdaptiveOpponent:
    """
    The computer player of one match session.

    Callers record each human move once it is known and ask for a computer
    move once per round. Not thread-safe: one session, one caller.
    """
    def __init__(self, difficulty=DifficultyTier.MEDIUM, pattern_length: int = PATTERN_LENGTH,
                 decay_factor: float = DECAY_FACTOR, exploration_rate: float = EXPLORATION_RATE,
                 win_rates: Optional[Mapping[DifficultyTier, float]] = None,
                 rng: Optional[random.Random] = None, seed: Optional[int] = None):
        self.rng = rng or random.Random(seed)
        self.history = MoveHistory()
        self.model = PatternModel(self.history, pattern_length, decay_factor, rng=self.rng)
        self.selector = MoveSelector(self.model, difficulty, win_rates, exploration_rate, rng=self.rng)
        self.last_decision: Optional[Decision] = None

    @classmethod
    def from_config(cls, ai_cfg, rng: Optional[random.Random] = None) -> "AdaptiveOpponent":
        return cls(
            difficulty=ai_cfg.default_difficulty,
            pattern_length=ai_cfg.pattern_length,
            decay_factor=ai_cfg.decay_factor,
            exploration_rate=ai_cfg.exploration_rate,
            win_rates=ai_cfg.tier_win_rates(),
            rng=rng,
            seed=ai_cfg.seed,
        )

    def record_human_move(self, move):
        self.model.observe(parse_move(move))

    def select_computer_move(self) -> Move:
        self.last_decision = self.selector.decide()
        return self.last_decision.move

    def set_difficulty(self, tier):
        self.selector.tier = tier
        logger.info(f"Difficulty set to {self.selector.tier.value}")

    def get_difficulty(self) -> DifficultyTier:
        return self.selector.tier

    def reset_match(self):
        self.model.reset()
        self.last_decision = None
        logger.info("Opponent memory cleared for new match")
