"""Immutable game state models for Uno."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from uno_engine.cards import UnoError
from uno_engine.deck import InsufficientCardsError, create_deck, deal, shuffle_deck

if TYPE_CHECKING:
    from uno_engine.cards import Card

HAND_SIZE = 7


class SetupPreconditionError(UnoError):
    """Raised when the deck cannot supply the opening hands and discard."""

    def __init__(self, requested: int, available: int):
        self.requested = requested
        self.available = available
        super().__init__(
            f"Cannot set up a game: need {requested} cards, deck has {available}"
        )


class GamePhase(IntEnum):
    """Current phase of the game."""

    AWAITING_PLAY = auto()  # Current player must play or draw
    GAME_OVER = auto()


class EndReason(IntEnum):
    """How the game ended."""

    EMPTY_HAND = auto()  # Winner played their last card
    DECK_EXHAUSTED = auto()  # Deck ran out before a legal play or full penalty draw


@dataclass(frozen=True, slots=True)
class GameState:
    """Complete immutable game state.

    Attributes:
        hands: Hands of player 0 ("Player 1") and player 1 ("Player 2")
        deck: Remaining draw pile, top card first
        discard: Played cards, most recent last
        current_player: 0 or 1, whose turn it is
        phase: Current game phase
        turn_number: Current turn, starting at 1
        winner: 0, 1, or None (game ongoing or stalemate)
        end_reason: Set once the game is over
    """

    hands: tuple[tuple[Card, ...], tuple[Card, ...]]
    deck: tuple[Card, ...]
    discard: tuple[Card, ...]
    current_player: int = 0
    phase: GamePhase = GamePhase.AWAITING_PLAY
    turn_number: int = 1
    winner: int | None = None
    end_reason: EndReason | None = None

    @property
    def opponent(self) -> int:
        """The other player (not current_player)."""
        return 1 - self.current_player

    @property
    def top_card(self) -> Card:
        """The card every play is checked against."""
        return self.discard[-1]

    @property
    def current_hand(self) -> tuple[Card, ...]:
        return self.hands[self.current_player]

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def is_stalemate(self) -> bool:
        return self.end_reason == EndReason.DECK_EXHAUSTED

    @property
    def hand_sizes(self) -> tuple[int, int]:
        return (len(self.hands[0]), len(self.hands[1]))

    @property
    def card_count(self) -> int:
        """Cards in hands, deck and discard pile together."""
        return len(self.hands[0]) + len(self.hands[1]) + len(self.deck) + len(self.discard)

    def with_hand(self, player: int, hand: tuple[Card, ...]) -> GameState:
        """Return new state with one player's hand replaced."""
        hands = list(self.hands)
        hands[player] = hand
        return GameState(
            hands=(hands[0], hands[1]),
            deck=self.deck,
            discard=self.discard,
            current_player=self.current_player,
            phase=self.phase,
            turn_number=self.turn_number,
            winner=self.winner,
            end_reason=self.end_reason,
        )

    def with_deck(self, deck: tuple[Card, ...]) -> GameState:
        """Return new state with updated deck."""
        return GameState(
            hands=self.hands,
            deck=deck,
            discard=self.discard,
            current_player=self.current_player,
            phase=self.phase,
            turn_number=self.turn_number,
            winner=self.winner,
            end_reason=self.end_reason,
        )

    def with_discard(self, discard: tuple[Card, ...]) -> GameState:
        """Return new state with updated discard pile."""
        return GameState(
            hands=self.hands,
            deck=self.deck,
            discard=discard,
            current_player=self.current_player,
            phase=self.phase,
            turn_number=self.turn_number,
            winner=self.winner,
            end_reason=self.end_reason,
        )

    def with_next_turn(self, current_player: int) -> GameState:
        """Return new state with the turn handed to current_player."""
        return GameState(
            hands=self.hands,
            deck=self.deck,
            discard=self.discard,
            current_player=current_player,
            phase=self.phase,
            turn_number=self.turn_number + 1,
            winner=self.winner,
            end_reason=self.end_reason,
        )

    def with_game_over(self, winner: int | None, end_reason: EndReason) -> GameState:
        """Return new finished state."""
        return GameState(
            hands=self.hands,
            deck=self.deck,
            discard=self.discard,
            current_player=self.current_player,
            phase=GamePhase.GAME_OVER,
            turn_number=self.turn_number,
            winner=winner,
            end_reason=end_reason,
        )


def create_initial_state(
    deck: list[Card] | None = None,
    seed: int | None = None,
    rng: random.Random | None = None,
    hand_size: int = HAND_SIZE,
) -> GameState:
    """Create the initial game state.

    Player 1 is dealt first, then Player 2, then one card seeds the
    discard pile. Player 1 (index 0) moves first.

    Args:
        deck: Optional pre-ordered deck, top card first. Not modified.
            If None, creates and shuffles a new deck.
        seed: Random seed for shuffling (only used if deck and rng are None).
        rng: Random source for shuffling (only used if deck is None).
        hand_size: Cards dealt to each player.

    Raises:
        SetupPreconditionError: If the deck cannot supply both hands and
            the discard seed.
    """
    if deck is None:
        cards = shuffle_deck(create_deck(), rng=rng, seed=seed)
    else:
        cards = list(deck)

    needed = 2 * hand_size + 1
    available = len(cards)
    try:
        hand0 = deal(cards, hand_size)
        hand1 = deal(cards, hand_size)
        seed_card = deal(cards, 1)
    except InsufficientCardsError as e:
        raise SetupPreconditionError(needed, available) from e

    return GameState(
        hands=(tuple(hand0), tuple(hand1)),
        deck=tuple(cards),
        discard=tuple(seed_card),
        current_player=0,
        phase=GamePhase.AWAITING_PLAY,
    )
