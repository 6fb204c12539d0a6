"""Simulation and match running."""

from simulation.config import SimulationConfig
from simulation.match import (
    MatchSummary,
    format_summary,
    play_many,
    play_one_game,
)
from simulation.runner import (
    GameLog,
    GameResult,
    GameRunner,
    Outcome,
    TurnEntry,
    run_batch,
    save_game_log,
)

__all__ = [
    # config
    "SimulationConfig",
    # runner
    "GameResult",
    "GameLog",
    "GameRunner",
    "Outcome",
    "TurnEntry",
    "save_game_log",
    "run_batch",
    # match
    "MatchSummary",
    "play_one_game",
    "play_many",
    "format_summary",
]
