# ninarow/config.py
import logging
import os
import tomllib  # python >=3.11
from dataclasses import dataclass, field
from typing import Optional

logger = logging.getLogger(__name__)

# Defaults for the near-win ordering heuristic
NEAR_WIN_BONUS = 5
NEAR_WIN_PENALTY = 100

@dataclass
class SearchConfig:
    strategy: str = "alpha_beta_cached_symmetric"
    ordering: str = "none"
    depth: Optional[int] = None  # None means search to the end of the game

@dataclass
class EvalConfig:
    near_win_bonus: int = NEAR_WIN_BONUS
    near_win_penalty: int = NEAR_WIN_PENALTY

@dataclass
class GameConfig:
    board_size: int = 3

@dataclass
class UIConfig:
    engine_name: str = "ninarow"
    api_port: int = 8000

@dataclass
class Config:
    search: SearchConfig = field(default_factory=SearchConfig)
    eval: EvalConfig = field(default_factory=EvalConfig)
    game: GameConfig = field(default_factory=GameConfig)
    ui: UIConfig = field(default_factory=UIConfig)
    log_level: str = "INFO"

    @staticmethod
    def load_from_toml(path: str = "config.toml") -> "Config":
        cfg = Config()
        if not os.path.exists(path):
            return cfg
        with open(path, "rb") as f:
            raw = tomllib.load(f)
        for section in ("search", "eval", "game", "ui"):
            target = getattr(cfg, section)
            values = raw.get(section, {})
            if not isinstance(values, dict):
                logger.warning("Config section %s is not a table, ignored", section)
                continue
            for k, v in values.items():
                if hasattr(target, k):
                    setattr(target, k, v)
                else:
                    logger.warning("Unknown config key %s.%s ignored", section, k)
        if "log_level" in raw:
            cfg.log_level = str(raw["log_level"]).upper()
        return cfg

# single globally importable config instance
CONFIG = Config.load_from_toml(os.environ.get("NINAROW_CONFIG_TOML", "config.toml"))
# allow env override of depth for quick debugging
override_depth = os.environ.get("NINAROW_SEARCH_DEPTH")
if override_depth:
    try:
        CONFIG.search.depth = int(override_depth)
    except ValueError:
        logger.warning("Ignoring NINAROW_SEARCH_DEPTH=%r: not an integer", override_depth)
