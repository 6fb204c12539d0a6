"""Match running: many simulated games aggregated into one summary.

Provides win/draw tallies, an overall verdict and a Wilson confidence
interval on Player 1's win rate.
"""

from __future__ import annotations

import logging
import math
import random
import time
from collections import Counter
from dataclasses import dataclass

from simulation.runner import GameRunner, Outcome, save_game_log
from uno_engine.deck import InvalidCountError

logger = logging.getLogger(__name__)

_Z_SCORES = {0.90: 1.645, 0.95: 1.96, 0.99: 2.576}


@dataclass
class MatchSummary:
    """Aggregated outcome of a series of games.

    Attributes:
        player_one_wins: Games won by Player 1.
        player_two_wins: Games won by Player 2.
        draws: Games that ended with the deck exhausted.
        total_games: Total games played.
        avg_turns: Average turns per game.
        duration_seconds: Wall time for the whole match.
    """

    player_one_wins: int
    player_two_wins: int
    draws: int
    total_games: int
    avg_turns: float = 0.0
    duration_seconds: float = 0.0

    @property
    def overall_winner(self) -> int:
        """1 or 2. Player 2 must win strictly more games; ties go to Player 1."""
        return 2 if self.player_two_wins > self.player_one_wins else 1

    @property
    def player_one_win_rate(self) -> float:
        if self.total_games == 0:
            return 0.0
        return self.player_one_wins / self.total_games

    @property
    def player_two_win_rate(self) -> float:
        if self.total_games == 0:
            return 0.0
        return self.player_two_wins / self.total_games

    @property
    def draw_rate(self) -> float:
        if self.total_games == 0:
            return 0.0
        return self.draws / self.total_games

    def confidence_interval(self, confidence: float = 0.95) -> tuple[float, float]:
        """Wilson score confidence interval for Player 1's win rate."""
        if self.total_games == 0:
            return (0.0, 1.0)

        z = _Z_SCORES.get(confidence)
        if z is None:
            supported = ", ".join(str(c) for c in sorted(_Z_SCORES))
            raise ValueError(f"Unsupported confidence level {confidence}, expected one of {supported}")
        p_hat = self.player_one_win_rate
        n = self.total_games

        denominator = 1 + z * z / n
        center = (p_hat + z * z / (2 * n)) / denominator
        margin = z * math.sqrt(p_hat * (1 - p_hat) / n + z * z / (4 * n * n)) / denominator

        return (max(0.0, center - margin), min(1.0, center + margin))

    def __str__(self) -> str:
        return (
            f"Player 1 vs Player 2: {self.player_one_wins}-{self.player_two_wins} "
            f"({self.draws} draws) [Player {self.overall_winner} wins]"
        )


def next_game_seed(rng: random.Random) -> int:
    """Draw the seed for the next game of a series."""
    return rng.randrange(2**32)


def play_one_game(rng: random.Random) -> Outcome:
    """Shuffle, deal and play one game to the end."""
    result, _ = GameRunner(log_moves=False).run_game(seed=next_game_seed(rng))
    return result.outcome


def play_many(
    num_games: int,
    seed: int | None = None,
    rng: random.Random | None = None,
    log_dir: str | None = None,
) -> MatchSummary:
    """Play a series of games and tally the outcomes.

    Each game gets its own seed drawn from one random source, so a fixed
    seed reproduces the whole series and every game can be replayed from
    the seed in its result or log.

    Args:
        num_games: Number of games, at least 1.
        seed: Seed for the random source, used when rng is not given.
        rng: Random source the per-game seeds are drawn from.
        log_dir: If set, every game's turn log is saved under this directory.

    Raises:
        InvalidCountError: If num_games < 1.
    """
    if num_games < 1:
        raise InvalidCountError(num_games, what="games")

    if rng is None:
        rng = random.Random(seed)

    runner = GameRunner(log_moves=log_dir is not None)
    counts: Counter[Outcome] = Counter()
    total_turns = 0
    start_time = time.perf_counter()

    for i in range(num_games):
        result, game_log = runner.run_game(seed=next_game_seed(rng))
        counts[result.outcome] += 1
        total_turns += result.turns
        if game_log is not None and log_dir is not None:
            path = save_game_log(game_log, base_dir=log_dir)
            logger.debug(f"Saved game {i + 1} log to {path}")

    summary = MatchSummary(
        player_one_wins=counts[Outcome.PLAYER_ONE_WINS],
        player_two_wins=counts[Outcome.PLAYER_TWO_WINS],
        draws=counts[Outcome.DRAW],
        total_games=num_games,
        avg_turns=total_turns / num_games,
        duration_seconds=time.perf_counter() - start_time,
    )
    logger.info(f"Match finished: {summary}")
    return summary


def format_summary(summary: MatchSummary) -> str:
    """Human-readable report of a match."""
    n = summary.total_games
    ci = summary.confidence_interval()
    lines = [
        f"Results ({n} games):",
        f"  Player 1 wins: {summary.player_one_wins} ({100 * summary.player_one_win_rate:.1f}%)",
        f"  Player 2 wins: {summary.player_two_wins} ({100 * summary.player_two_win_rate:.1f}%)",
        f"  Draws: {summary.draws} ({100 * summary.draw_rate:.1f}%)",
        f"  Average turns: {summary.avg_turns:.1f}",
        f"  Player 1 win rate 95% CI: {ci[0]:.1%}-{ci[1]:.1%}",
        f"Overall winner: Player {summary.overall_winner}",
    ]
    return "\n".join(lines)
