import random
from typing import Dict, Optional, Sequence

from loguru import logger

from adaptive_rps.game_logic import MOVES, Move
from adaptive_rps.history import MoveHistory

PATTERN_LENGTH = 3
DECAY_FACTOR = 0.9

# weights[signature][next_move] = decayed count
TransitionWeights = Dict[str, Dict[Move, float]]


def signature_of(moves: Sequence[Move]) -> str:
    """'RPS' for [rock, paper, scissors]."""
    return "".join(m.letter for m in moves)


def update_weights(weights: TransitionWeights, signature: str, next_move: Move,
                   decay: float = DECAY_FACTOR) -> TransitionWeights:
    """
    Return a new table where every existing weight of `signature` is decayed
    and `next_move` then gains 1.0. The input table is left untouched.
    """
    updated = {sig: dict(row) for sig, row in weights.items()}
    row = {m: w * decay for m, w in updated.get(signature, {}).items()}
    row[next_move] = row.get(next_move, 0.0) + 1.0
    updated[signature] = row
    return updated


class PatternModel:
    """
    Order-k sequence model over the human's moves.
    observe() feeds moves in play order; predict() guesses the next one from
    what followed earlier occurrences of the current signature.
    """
    def __init__(self, history: Optional[MoveHistory] = None, pattern_length: int = PATTERN_LENGTH,
                 decay_factor: float = DECAY_FACTOR, rng: Optional[random.Random] = None):
        if pattern_length < 1:
            raise ValueError("pattern_length must be >= 1")
        if not 0.0 < decay_factor <= 1.0:
            raise ValueError("decay_factor must be in (0, 1]")
        self.history = history if history is not None else MoveHistory()
        self.k = pattern_length
        self.decay_factor = decay_factor
        self.rng = rng or random.Random()
        self.weights: TransitionWeights = {}

    def observe(self, move: Move):
        prior = self.history.recent(self.k)
        self.history.record(move)
        if prior is not None:
            sig = signature_of(prior)
            self.weights = update_weights(self.weights, sig, move, self.decay_factor)
            logger.debug(f"transition {sig} -> {move.value} weights={self._row_repr(sig)}")

    def current_signature(self) -> Optional[str]:
        recent = self.history.recent(self.k)
        return signature_of(recent) if recent is not None else None

    def predict(self) -> Optional[Move]:
        sig = self.current_signature()
        if sig is None:
            return None

        moves = list(self.history)
        row = self.weights.get(sig, {})
        scores: Dict[Move, float] = {}
        # only occurrences that already have a follower count
        for i in range(len(moves) - self.k):
            if signature_of(moves[i:i + self.k]) == sig:
                nxt = moves[i + self.k]
                scores[nxt] = scores.get(nxt, 0.0) + row.get(nxt, 1.0)

        if not scores:
            return self.rng.choice(MOVES)

        best, best_score = None, -1.0
        for m in MOVES:
            if scores.get(m, -1.0) > best_score:
                best, best_score = m, scores[m]
        return best

    def reset(self):
        self.history.reset()
        self.weights = {}

    def _row_repr(self, sig: str) -> str:
        row = self.weights.get(sig, {})
        return ", ".join(f"{m.letter}={w:.3f}" for m, w in row.items())
