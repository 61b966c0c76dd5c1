from enum import Enum


class Move(str, Enum):
    ROCK = "rock"
    PAPER = "paper"
    SCISSORS = "scissors"

    @property
    def letter(self) -> str:
        return self.value[0].upper()


MOVES = [Move.ROCK, Move.PAPER, Move.SCISSORS]
WINMAP = {Move.ROCK: Move.SCISSORS, Move.PAPER: Move.ROCK, Move.SCISSORS: Move.PAPER}
BEATEN_BY = {v: k for k, v in WINMAP.items()}  # inverse

_SHORTCUTS = {"r": Move.ROCK, "p": Move.PAPER, "s": Move.SCISSORS}


class InvalidMoveError(ValueError):
    pass


def parse_move(value) -> Move:
    """Accept a Move, a move name in any case, or r/p/s."""
    if isinstance(value, Move):
        return value
    key = str(value or "").strip().lower()
    if key in _SHORTCUTS:
        return _SHORTCUTS[key]
    try:
        return Move(key)
    except ValueError:
        raise InvalidMoveError(f"Unknown move: {value!r}") from None


def beats(move: Move) -> Move:
    """The move that beats `move`."""
    return BEATEN_BY[move]


def loses_to(move: Move) -> Move:
    """The move that loses to `move`."""
    return WINMAP[move]


def adjudicate(player, ai) -> str:
    """
    Return one of: 'win' | 'lose' | 'tie' | 'invalid'
    """
    try:
        player, ai = parse_move(player), parse_move(ai)
    except InvalidMoveError:
        return "invalid"
    if player == ai:
        return "tie"
    return "win" if WINMAP[player] == ai else "lose"
