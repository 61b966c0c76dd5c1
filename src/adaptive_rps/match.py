import secrets
from dataclasses import dataclass
from hashlib import sha256
from typing import List, Optional

from loguru import logger

from adaptive_rps.game_logic import Move, adjudicate, parse_move
from adaptive_rps.opponent import AdaptiveOpponent


class MatchOverError(RuntimeError):
    pass


def commit(move: Move, salt: str) -> str:
    """Short proof that the computer's move was fixed before the reveal."""
    payload = f"{salt}|{move.value}"
    return sha256(payload.encode("utf-8")).hexdigest()[:10]


@dataclass(frozen=True)
class RoundResult:
    round: int
    player: Move
    ai: Move
    result: str  # player's view: win | lose | tie
    proof: str
    salt: str


class Match:
    """Best-of-N match between the human and an AdaptiveOpponent."""

    def __init__(self, opponent: AdaptiveOpponent, total_rounds: int = 3):
        if total_rounds < 1:
            raise ValueError("total_rounds must be >= 1")
        self.opponent = opponent
        self.total_rounds = total_rounds
        self.rounds: List[RoundResult] = []
        self.wins = self.losses = self.ties = 0

    @property
    def rounds_played(self) -> int:
        return len(self.rounds)

    @property
    def is_over(self) -> bool:
        majority = self.total_rounds // 2
        return (self.rounds_played >= self.total_rounds
                or self.wins > majority or self.losses > majority)

    @property
    def winner(self) -> Optional[str]:
        if not self.is_over:
            return None
        if self.wins > self.losses:
            return "player"
        if self.losses > self.wins:
            return "computer"
        return "draw"

    def play_round(self, player_move) -> RoundResult:
        player = parse_move(player_move)
        if self.is_over:
            raise MatchOverError("Match is over; reset to start a new one")

        # lock the computer's move before the human move is learned
        ai = self.opponent.select_computer_move()
        salt = secrets.token_hex(8)
        proof = commit(ai, salt)

        outcome = adjudicate(player, ai)
        self.opponent.record_human_move(player)

        if outcome == "win":
            self.wins += 1
        elif outcome == "lose":
            self.losses += 1
        else:
            self.ties += 1

        result = RoundResult(round=self.rounds_played + 1, player=player, ai=ai,
                             result=outcome, proof=proof, salt=salt)
        self.rounds.append(result)
        logger.info(
            f"Round {result.round}/{self.total_rounds}: player={player.value} ai={ai.value} "
            f"-> {outcome} (score {self.wins}-{self.losses}-{self.ties})"
        )
        if self.is_over:
            logger.info(f"Match over: winner={self.winner}")
        return result

    def reset(self):
        self.rounds = []
        self.wins = self.losses = self.ties = 0
        self.opponent.reset_match()
