from dataclasses import dataclass
from enum import Enum
from typing import Dict, Mapping, Optional


class DifficultyTier(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


# probability that the computer should win a round
DEFAULT_WIN_RATES: Dict[DifficultyTier, float] = {
    DifficultyTier.EASY: 0.35,
    DifficultyTier.MEDIUM: 0.55,
    DifficultyTier.HARD: 0.75,
}
EXPLORATION_RATE = 0.20


class InvalidDifficultyError(ValueError):
    pass


def parse_tier(value) -> DifficultyTier:
    """Accept a DifficultyTier or its name in any case; reject anything else."""
    if isinstance(value, DifficultyTier):
        return value
    if isinstance(value, str):
        try:
            return DifficultyTier(value.strip().lower())
        except ValueError:
            pass
    choices = ", ".join(t.value for t in DifficultyTier)
    raise InvalidDifficultyError(f"Unknown difficulty {value!r} (expected one of: {choices})")


def merge_win_rates(overrides: Optional[Mapping] = None) -> Dict[DifficultyTier, float]:
    """Default table with `overrides` (tier or tier name -> rate) applied on top."""
    rates = dict(DEFAULT_WIN_RATES)
    for name, rate in (overrides or {}).items():
        tier = parse_tier(name)
        rate = float(rate)
        if not 0.0 <= rate <= 1.0:
            raise ValueError(f"win rate for {tier.value} must be within [0, 1], got {rate}")
        rates[tier] = rate
    return rates


@dataclass(frozen=True)
class DifficultyPolicy:
    ai_win_rate: float
    exploration_rate: float = EXPLORATION_RATE

    @classmethod
    def for_tier(cls, tier, win_rates: Optional[Mapping[DifficultyTier, float]] = None,
                 exploration_rate: float = EXPLORATION_RATE) -> "DifficultyPolicy":
        rates = merge_win_rates(win_rates)
        return cls(ai_win_rate=float(rates[parse_tier(tier)]), exploration_rate=float(exploration_rate))
