from adaptive_rps.ai_policy import Decision, MoveSelector
from adaptive_rps.difficulty import DifficultyPolicy, DifficultyTier, InvalidDifficultyError, parse_tier
from adaptive_rps.game_logic import InvalidMoveError, Move, adjudicate, beats, loses_to, parse_move
from adaptive_rps.history import MoveHistory
from adaptive_rps.match import Match, MatchOverError, RoundResult
from adaptive_rps.opponent import AdaptiveOpponent
from adaptive_rps.pattern_model import PatternModel, update_weights

__all__ = [
    "AdaptiveOpponent",
    "Decision",
    "DifficultyPolicy",
    "DifficultyTier",
    "InvalidDifficultyError",
    "InvalidMoveError",
    "Match",
    "MatchOverError",
    "Move",
    "MoveHistory",
    "MoveSelector",
    "PatternModel",
    "RoundResult",
    "adjudicate",
    "beats",
    "loses_to",
    "parse_move",
    "parse_tier",
    "update_weights",
]
