import random
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

import numpy as np

from adaptive_rps.ai_policy import WIN
from adaptive_rps.game_logic import MOVES, Move, adjudicate
from adaptive_rps.opponent import AdaptiveOpponent

# A scripted human: (round index, own past moves) -> next move
HumanStrategy = Callable[[int, List[Move]], Move]


def random_human(seed: Optional[int] = None) -> HumanStrategy:
    rng = random.Random(seed)

    def play(i, history):
        return rng.choice(MOVES)
    return play


def cycle_human(pattern: Sequence[Move] = tuple(MOVES)) -> HumanStrategy:
    pattern = list(pattern)

    def play(i, history):
        return pattern[i % len(pattern)]
    return play


def constant_human(move: Move = Move.ROCK) -> HumanStrategy:
    def play(i, history):
        return move
    return play


@dataclass(frozen=True)
class SimulationReport:
    rounds: int
    ai_win_rate: float
    human_win_rate: float
    tie_rate: float
    win_intent_rate: float
    prediction_rate: float


def simulate(opponent: AdaptiveOpponent, human: HumanStrategy, rounds: int = 200,
             warmup: int = 0) -> SimulationReport:
    """
    Play `rounds` rounds in a single open-ended match (no best-of-N cutoff)
    and report rates over the rounds after `warmup`.
    """
    if rounds <= warmup:
        raise ValueError("rounds must exceed warmup")
    played: List[Move] = []
    ai_won = np.zeros(rounds, dtype=bool)
    human_won = np.zeros(rounds, dtype=bool)
    win_intent = np.zeros(rounds, dtype=bool)
    predicted = np.zeros(rounds, dtype=bool)

    for i in range(rounds):
        ai = opponent.select_computer_move()
        decision = opponent.last_decision
        player = human(i, list(played))
        outcome = adjudicate(player, ai)
        opponent.record_human_move(player)
        played.append(player)

        ai_won[i] = outcome == "lose"
        human_won[i] = outcome == "win"
        win_intent[i] = decision.intent == WIN
        predicted[i] = decision.predicted is not None

    window = slice(warmup, rounds)
    ai_rate = float(np.mean(ai_won[window]))
    human_rate = float(np.mean(human_won[window]))
    return SimulationReport(
        rounds=rounds - warmup,
        ai_win_rate=ai_rate,
        human_win_rate=human_rate,
        tie_rate=1.0 - ai_rate - human_rate,
        win_intent_rate=float(np.mean(win_intent[window])),
        prediction_rate=float(np.mean(predicted[window])),
    )
