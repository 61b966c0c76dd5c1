from typing import List, Optional

from adaptive_rps.game_logic import Move


class MoveHistory:
    """Ordered log of the human's moves for the current match."""

    def __init__(self):
        self._moves: List[Move] = []

    def record(self, move: Move):
        self._moves.append(move)

    def reset(self):
        self._moves.clear()

    def length(self) -> int:
        return len(self._moves)

    def __len__(self):
        return len(self._moves)

    def __iter__(self):
        return iter(list(self._moves))

    def __getitem__(self, idx):
        return self._moves[idx]

    def recent(self, k: int) -> Optional[List[Move]]:
        # None means "unavailable", not an empty window
        if k <= 0 or len(self._moves) < k:
            return None
        return list(self._moves[-k:])
