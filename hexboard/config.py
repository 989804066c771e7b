from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Literal, cast

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]

ENV_PREFIX = "HEXBOARD_"


@dataclass
class ServiceConfig:
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: LogLevel = "INFO"
    default_preset: str = "base_standard"
    default_players: int = 4

    @classmethod
    def from_env(cls) -> "ServiceConfig":
        env = os.environ
        cfg = cls()
        cfg.host = env.get(ENV_PREFIX + "HOST", cfg.host)
        cfg.port = int(env.get(ENV_PREFIX + "PORT", cfg.port))
        level = env.get(ENV_PREFIX + "LOG_LEVEL", cfg.log_level).upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR"):
            raise ValueError(f"unknown log level {level!r}")
        cfg.log_level = cast(LogLevel, level)
        cfg.default_preset = env.get(ENV_PREFIX + "DEFAULT_PRESET", cfg.default_preset)
        cfg.default_players = int(env.get(ENV_PREFIX + "DEFAULT_PLAYERS", cfg.default_players))
        return cfg
