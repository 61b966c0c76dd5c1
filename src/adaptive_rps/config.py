import os
import sys
from typing import Dict, Optional

import yaml
from loguru import logger
from pydantic import BaseModel, Field, field_validator

from adaptive_rps.difficulty import DEFAULT_WIN_RATES, DifficultyTier, merge_win_rates, parse_tier


class AIConfig(BaseModel):
    pattern_length: int = Field(3, ge=1)
    decay_factor: float = Field(0.9, gt=0.0, le=1.0)
    exploration_rate: float = Field(0.2, ge=0.0, le=1.0)
    default_difficulty: str = "medium"
    win_rates: Dict[str, float] = Field(default_factory=lambda: {t.value: r for t, r in DEFAULT_WIN_RATES.items()})
    seed: Optional[int] = None

    @field_validator("default_difficulty")
    @classmethod
    def _check_difficulty(cls, v: str) -> str:
        # InvalidDifficultyError is a ValueError, so pydantic reports it
        return parse_tier(v).value

    @field_validator("win_rates")
    @classmethod
    def _check_win_rates(cls, v: Dict[str, float]) -> Dict[str, float]:
        return {t.value: r for t, r in merge_win_rates(v).items()}

    def tier_win_rates(self) -> Dict[DifficultyTier, float]:
        return {DifficultyTier(name): rate for name, rate in self.win_rates.items()}


class MatchConfig(BaseModel):
    total_rounds: int = Field(3, ge=1)


class LoggingConfig(BaseModel):
    level: str = "INFO"


class GameConfig(BaseModel):
    ai: AIConfig = Field(default_factory=AIConfig)
    match: MatchConfig = Field(default_factory=MatchConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def default_config_path() -> str:
    return os.path.join(os.path.dirname(__file__), "config.yaml")


def load_config(path: Optional[str] = None) -> GameConfig:
    config_path = path or default_config_path()
    with open(config_path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    return GameConfig.model_validate(raw)


def configure_logging(level: str = "INFO"):
    logger.remove()
    logger.add(sys.stderr, level=level.upper())
