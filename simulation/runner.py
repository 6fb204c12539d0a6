"""Game runner for Uno simulations."""

from __future__ import annotations

import json
import logging
import random
import time
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

from uno_engine.executor import execute_turn
from uno_engine.state import create_initial_state

if TYPE_CHECKING:
    from uno_engine.state import GameState

logger = logging.getLogger(__name__)


class Outcome(Enum):
    """Final result of one game."""

    PLAYER_ONE_WINS = "player_one_wins"
    PLAYER_TWO_WINS = "player_two_wins"
    DRAW = "draw"

    @classmethod
    def from_winner(cls, winner: int | None) -> Outcome:
        """Map a winner index (0, 1, or None) to an outcome."""
        if winner is None:
            return cls.DRAW
        return cls.PLAYER_ONE_WINS if winner == 0 else cls.PLAYER_TWO_WINS


@dataclass
class GameResult:
    """Result of a completed game."""

    game_id: str
    outcome: Outcome
    winner: int | None  # 0, 1, or None for draw
    end_reason: str | None
    turns: int
    final_hand_sizes: tuple[int, int]
    deck_remaining: int
    seed: int | None
    duration_ms: float


@dataclass
class TurnEntry:
    """Record of a single turn."""

    turn: int
    player: int
    description: str
    played: str | None
    drawn: list[str]
    penalty: list[str]
    state_after: dict


@dataclass
class GameLog:
    """Complete log of a game."""

    game_id: str
    timestamp: str
    seed: int | None
    initial_state: dict
    turns: list[TurnEntry] = field(default_factory=list)
    result: GameResult | None = None


class GameRunner:
    """Runs simulated Uno games between two first-playable-card players."""

    def __init__(self, log_moves: bool = True):
        """Initialize the game runner.

        Args:
            log_moves: Whether to record every turn in a GameLog.
        """
        self.log_moves = log_moves

    def run_game(
        self, seed: int | None = None, rng: random.Random | None = None
    ) -> tuple[GameResult, GameLog | None]:
        """Run a single game.

        Args:
            seed: Random seed for the shuffle, used when rng is not given.
            rng: Random source for the shuffle. Shared sources advance
                across games.

        Returns:
            Tuple of (result, log). Log is None if log_moves is False.
        """
        start_time = time.perf_counter()
        game_id = str(uuid.uuid4())

        if rng is None:
            rng = random.Random(seed)
        state = create_initial_state(rng=rng)

        game_log = None
        if self.log_moves:
            game_log = GameLog(
                game_id=game_id,
                timestamp=datetime.now().isoformat(),
                seed=seed,
                initial_state=self._state_to_dict(state),
            )

        turns = 0
        while not state.is_game_over:
            state, record = execute_turn(state)
            turns += 1

            if game_log:
                game_log.turns.append(
                    TurnEntry(
                        turn=record.turn,
                        player=record.player,
                        description=str(record),
                        played=str(record.played) if record.played else None,
                        drawn=[str(c) for c in record.drawn],
                        penalty=[str(c) for c in record.penalty],
                        state_after=self._state_to_dict(state),
                    )
                )

        duration_ms = (time.perf_counter() - start_time) * 1000

        result = GameResult(
            game_id=game_id,
            outcome=Outcome.from_winner(state.winner),
            winner=state.winner,
            end_reason=state.end_reason.name if state.end_reason else None,
            turns=turns,
            final_hand_sizes=state.hand_sizes,
            deck_remaining=len(state.deck),
            seed=seed,
            duration_ms=duration_ms,
        )
        logger.debug(
            f"Game {game_id}: {result.outcome.value} after {turns} turns "
            f"({result.end_reason}), hands {result.final_hand_sizes}"
        )

        if game_log:
            game_log.result = result

        return result, game_log

    def _state_to_dict(self, state: GameState) -> dict:
        """Convert game state to a dictionary for logging."""
        return {
            "turn": state.turn_number,
            "current_player": state.current_player,
            "phase": state.phase.name,
            "top_card": str(state.top_card),
            "deck_size": len(state.deck),
            "discard_size": len(state.discard),
            "hands": [[str(c) for c in hand] for hand in state.hands],
        }


def save_game_log(log: GameLog, base_dir: str = "logs/games") -> Path:
    """Save a game log to disk.

    Args:
        log: Game log to save.
        base_dir: Base directory for logs.

    Returns:
        Path to the saved file.
    """
    date_str = log.timestamp[:10]  # YYYY-MM-DD
    dir_path = Path(base_dir) / date_str
    dir_path.mkdir(parents=True, exist_ok=True)

    file_path = dir_path / f"game_{log.game_id}.json"

    data = {
        "game_id": log.game_id,
        "timestamp": log.timestamp,
        "seed": log.seed,
        "initial_state": log.initial_state,
        "turns": [
            {
                "turn": t.turn,
                "player": t.player,
                "description": t.description,
                "played": t.played,
                "drawn": t.drawn,
                "penalty": t.penalty,
                "state_after": t.state_after,
            }
            for t in log.turns
        ],
        "result": {
            "outcome": log.result.outcome.value,
            "winner": log.result.winner,
            "end_reason": log.result.end_reason,
            "turns": log.result.turns,
            "final_hand_sizes": log.result.final_hand_sizes,
            "deck_remaining": log.result.deck_remaining,
            "duration_ms": log.result.duration_ms,
        }
        if log.result
        else None,
    }

    with open(file_path, "w") as f:
        json.dump(data, f, indent=2)

    return file_path


def run_batch(
    num_games: int,
    start_seed: int = 0,
    log_moves: bool = False,
) -> list[GameResult]:
    """Run multiple games.

    Args:
        num_games: Number of games to run.
        start_seed: Starting seed (incremented for each game).
        log_moves: Whether to log turns (slower).

    Returns:
        List of game results.
    """
    runner = GameRunner(log_moves=log_moves)
    results = []

    for i in range(num_games):
        result, _ = runner.run_game(seed=start_seed + i)
        results.append(result)

    return results
