"""Configuration for simulation runs."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any

ENV_PREFIX = "UNO_SIM_"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class SimulationConfig:
    """Settings for a batch of simulated games."""
    num_games: int = 100
    seed: int | None = None
    log_level: str = "WARNING"
    save_logs: bool = False
    log_dir: str = "logs/games"

    def to_dict(self) -> dict[str, Any]:
        return {
            "num_games": self.num_games,
            "seed": self.seed,
            "log_level": self.log_level,
            "save_logs": self.save_logs,
            "log_dir": self.log_dir,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SimulationConfig":
        """Build a config from a dictionary.

        Raises:
            ValueError: If log_level is not a standard logging level name.
        """
        log_level = str(data.get("log_level", "WARNING")).upper()
        if log_level not in LOG_LEVELS:
            raise ValueError(
                f"Unknown log level {log_level!r}, expected one of {', '.join(LOG_LEVELS)}"
            )
        return cls(
            num_games=int(data.get("num_games", 100)),
            seed=data.get("seed"),
            log_level=log_level,
            save_logs=bool(data.get("save_logs", False)),
            log_dir=data.get("log_dir", "logs/games"),
        )

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "SimulationConfig":
        """Build a config from UNO_SIM_* environment variables.

        Recognized: UNO_SIM_GAMES, UNO_SIM_SEED, UNO_SIM_LOG_LEVEL,
        UNO_SIM_LOG_DIR. Unset variables keep their defaults.

        Raises:
            ValueError: If a variable holds a value of the wrong type.
        """
        env = os.environ if environ is None else environ
        data: dict[str, Any] = {}

        if games := env.get(f"{ENV_PREFIX}GAMES"):
            data["num_games"] = _parse_int(f"{ENV_PREFIX}GAMES", games)
        if seed := env.get(f"{ENV_PREFIX}SEED"):
            data["seed"] = _parse_int(f"{ENV_PREFIX}SEED", seed)
        if level := env.get(f"{ENV_PREFIX}LOG_LEVEL"):
            data["log_level"] = level
        if log_dir := env.get(f"{ENV_PREFIX}LOG_DIR"):
            data["log_dir"] = log_dir
            data["save_logs"] = True

        return cls.from_dict(data)


def _parse_int(name: str, value: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}") from None
