"""Command-line interface for Uno."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from simulation.config import LOG_LEVELS, SimulationConfig
from uno_engine.card_file import read_card_file, write_card_file
from uno_engine.cards import ParseError
from uno_engine.deck import InvalidCountError, create_deck, is_complete_deck, shuffle_deck
from uno_engine.executor import execute_turn
from uno_engine.state import EndReason, create_initial_state

if TYPE_CHECKING:
    from uno_engine.state import GameState


def format_state(state: GameState) -> str:
    """Format game state for display."""
    lines = []

    lines.append("=" * 60)
    lines.append(f"Turn {state.turn_number} | Top card: {state.top_card}")
    lines.append("=" * 60)

    for i, hand in enumerate(state.hands):
        prefix = "→ " if i == state.current_player and not state.is_game_over else "  "
        hand_str = ", ".join(str(c) for c in hand) or "(empty)"
        lines.append(f"{prefix}Player {i + 1} ({len(hand)} cards): {hand_str}")

    lines.append(f"\nDeck: {len(state.deck)} cards | Discard: {len(state.discard)} cards")

    if state.is_game_over:
        lines.append("\n" + "=" * 60)
        if state.end_reason == EndReason.EMPTY_HAND:
            lines.append(f"GAME OVER - Player {state.winner + 1} wins!")
        else:
            lines.append("GAME OVER - Draw (deck exhausted)")
        lines.append("=" * 60)

    return "\n".join(lines)


def watch_game(seed: int | None = None) -> None:
    """Print one simulated game turn by turn."""
    state = create_initial_state(seed=seed)

    print("\nWatching: Player 1 vs Player 2")
    print(format_state(state))

    while not state.is_game_over:
        state, record = execute_turn(state)
        print(f"\n{record}")

    print()
    print(format_state(state))


def simulate(config: SimulationConfig) -> int:
    """Run a match and print its summary. Returns a process exit code."""
    from simulation.match import format_summary, play_many

    try:
        summary = play_many(
            config.num_games,
            seed=config.seed,
            log_dir=config.log_dir if config.save_logs else None,
        )
    except InvalidCountError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    print(format_summary(summary))
    return 0


def check_deck(path: str) -> int:
    """Report whether a card-list file holds exactly one complete deck."""
    try:
        cards = read_card_file(path)
    except (ParseError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if is_complete_deck(cards):
        print(f"{path}: complete deck ({len(cards)} cards)")
        return 0

    print(f"{path}: not a complete deck ({len(cards)} cards)")
    return 1


def export_deck(path: str, seed: int | None = None) -> int:
    """Write the canonical deck, shuffled if a seed is given."""
    deck = create_deck()
    if seed is not None:
        shuffle_deck(deck, seed=seed)
    written = write_card_file(path, deck)
    print(f"Wrote {len(deck)} cards to {written}")
    return 0


def _load_config() -> SimulationConfig:
    """Defaults from the environment, with a .env file loaded first if present."""
    env_file = Path.cwd() / ".env"
    if env_file.exists():
        from dotenv import load_dotenv

        load_dotenv(env_file)
    return SimulationConfig.from_env()


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    try:
        config = _load_config()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    parser = argparse.ArgumentParser(description="Uno card game simulator")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=config.log_level,
        help="Logging level (default: %(default)s)",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Simulate command
    simulate_parser = subparsers.add_parser("simulate", help="Simulate many games")
    simulate_parser.add_argument(
        "--games", type=int, default=config.num_games, help="Number of games"
    )
    simulate_parser.add_argument("--seed", type=int, default=config.seed, help="Random seed")
    simulate_parser.add_argument(
        "--save-logs", metavar="DIR", help="Save every game's turn log under DIR"
    )

    # Watch command
    watch_parser = subparsers.add_parser("watch", help="Watch one game turn by turn")
    watch_parser.add_argument("--seed", type=int, help="Random seed")

    # Deck file commands
    check_parser = subparsers.add_parser("check-deck", help="Check a card-list file")
    check_parser.add_argument("file", help="Card-list file, one card per line")

    export_parser = subparsers.add_parser("export-deck", help="Write a deck as a card-list file")
    export_parser.add_argument("file", help="Output path")
    export_parser.add_argument("--seed", type=int, help="Shuffle with this seed")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "simulate":
        config.num_games = args.games
        config.seed = args.seed
        if args.save_logs:
            config.save_logs = True
            config.log_dir = args.save_logs
        return simulate(config)
    elif args.command == "watch":
        watch_game(seed=args.seed)
        return 0
    elif args.command == "check-deck":
        return check_deck(args.file)
    elif args.command == "export-deck":
        return export_deck(args.file, seed=args.seed)

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
