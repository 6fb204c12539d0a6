"""Uno card game engine."""

from uno_engine.cards import Card, Color, ParseError, Rank, UnoError, card_from_token, card_to_token
from uno_engine.deck import (
    InsufficientCardsError,
    InvalidCountError,
    create_deck,
    deal,
    is_complete_deck,
    shuffle_deck,
)
from uno_engine.executor import GameOverError, TurnRecord, execute_turn, run_to_completion
from uno_engine.rules import find_playable, is_valid_play
from uno_engine.state import EndReason, GamePhase, GameState, SetupPreconditionError, create_initial_state

__all__ = [
    "Card",
    "Color",
    "Rank",
    "card_to_token",
    "card_from_token",
    "create_deck",
    "shuffle_deck",
    "deal",
    "is_complete_deck",
    "is_valid_play",
    "find_playable",
    "GameState",
    "GamePhase",
    "EndReason",
    "create_initial_state",
    "TurnRecord",
    "execute_turn",
    "run_to_completion",
    "UnoError",
    "ParseError",
    "InvalidCountError",
    "InsufficientCardsError",
    "SetupPreconditionError",
    "GameOverError",
]
