"""Turn execution for Uno.

Each call to :func:`execute_turn` plays one complete turn for the current
player: play the first legal card in hand, or draw until a legal card turns
up, then apply the played card's effect. Every turn moves exactly one card
onto the discard pile or ends the game, so a game always terminates.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from uno_engine.cards import Card, Rank, UnoError
from uno_engine.rules import find_playable, is_valid_play
from uno_engine.state import EndReason, GameState

logger = logging.getLogger(__name__)


class GameOverError(UnoError):
    """Raised when a turn is requested on a finished game."""

    pass


@dataclass(frozen=True, slots=True)
class TurnRecord:
    """What happened during one turn.

    Attributes:
        turn: Turn number
        player: 0 or 1, who took the turn
        played: Card put on the discard pile, None on a stalemate draw
        drawn: Cards drawn from the deck this turn, in draw order
        penalty: Cards the opponent had to draw because of the play
        next_player: Who moves next, None if the game ended
        end_reason: Set if this turn ended the game
    """

    turn: int
    player: int
    played: Card | None
    drawn: tuple[Card, ...] = ()
    penalty: tuple[Card, ...] = ()
    next_player: int | None = None
    end_reason: EndReason | None = None

    def __str__(self) -> str:
        parts = [f"Player {self.player + 1}"]
        if self.drawn:
            parts.append(f"drew {len(self.drawn)}")
        if self.played is not None:
            parts.append(f"played {self.played}")
        if self.penalty:
            parts.append(f"(opponent draws {len(self.penalty)})")
        if self.end_reason == EndReason.EMPTY_HAND:
            parts.append("and wins")
        elif self.end_reason == EndReason.DECK_EXHAUSTED:
            parts.append("- deck exhausted")
        return " ".join(parts)


def execute_turn(state: GameState) -> tuple[GameState, TurnRecord]:
    """Play one turn and return the new state with a record of the turn.

    Args:
        state: Current game state.

    Returns:
        Tuple of (new state, turn record).

    Raises:
        GameOverError: If the game has already ended.
    """
    if state.is_game_over:
        raise GameOverError("Game is already over")

    player = state.current_player
    hand = state.current_hand
    top = state.top_card

    index = find_playable(hand, top)
    if index is not None:
        played = hand[index]
        drawn: tuple[Card, ...] = ()
        new_hand = hand[:index] + hand[index + 1 :]
        deck = state.deck
    else:
        played, drawn, deck = _draw_until_valid(state.deck, top)
        if played is None:
            return _stalemate(state.with_hand(player, hand + drawn).with_deck(deck), drawn)
        # The winning draw goes straight from the deck to the discard pile
        new_hand = hand + drawn[:-1]

    new_state = (
        state.with_hand(player, new_hand)
        .with_deck(deck)
        .with_discard(state.discard + (played,))
    )

    # An empty hand wins before the played card takes effect
    if not new_hand:
        logger.debug(f"Turn {state.turn_number}: player {player + 1} played last card {played}")
        return new_state.with_game_over(player, EndReason.EMPTY_HAND), TurnRecord(
            turn=state.turn_number,
            player=player,
            played=played,
            drawn=drawn,
            end_reason=EndReason.EMPTY_HAND,
        )

    return _resolve_effect(new_state, played, drawn)


def _draw_until_valid(
    deck: tuple[Card, ...], top: Card
) -> tuple[Card | None, tuple[Card, ...], tuple[Card, ...]]:
    """Draw from the deck top until a card is playable on ``top``.

    Returns:
        Tuple of (playable card or None, all cards drawn in order, remaining
        deck). The playable card, when found, is the last card drawn.
    """
    for position, card in enumerate(deck):
        if is_valid_play(card, top):
            return card, deck[: position + 1], deck[position + 1 :]
    return None, deck, ()


def _stalemate(state: GameState, drawn: tuple[Card, ...]) -> tuple[GameState, TurnRecord]:
    """End the game with no winner: the deck ran out."""
    logger.debug(
        f"Turn {state.turn_number}: player {state.current_player + 1} "
        f"drew {len(drawn)} without a legal play, deck exhausted"
    )
    return state.with_game_over(None, EndReason.DECK_EXHAUSTED), TurnRecord(
        turn=state.turn_number,
        player=state.current_player,
        played=None,
        drawn=drawn,
        end_reason=EndReason.DECK_EXHAUSTED,
    )


def _resolve_effect(
    state: GameState, played: Card, drawn: tuple[Card, ...]
) -> tuple[GameState, TurnRecord]:
    """Apply the played card's effect and hand over the turn."""
    player = state.current_player
    opponent = state.opponent
    penalty: tuple[Card, ...] = ()

    match played.rank:
        case Rank.SKIP | Rank.REVERSE:
            # With two players both mean "go again"
            next_player = player
        case Rank.DRAW_TWO | Rank.WILD_DRAW_FOUR:
            count = played.rank.draw_penalty
            if len(state.deck) < count:
                logger.debug(
                    f"Turn {state.turn_number}: {played} needs {count} cards, "
                    f"deck has {len(state.deck)}"
                )
                return state.with_game_over(None, EndReason.DECK_EXHAUSTED), TurnRecord(
                    turn=state.turn_number,
                    player=player,
                    played=played,
                    drawn=drawn,
                    end_reason=EndReason.DECK_EXHAUSTED,
                )
            penalty = state.deck[:count]
            state = state.with_hand(opponent, state.hands[opponent] + penalty).with_deck(
                state.deck[count:]
            )
            next_player = opponent
        case _:
            next_player = opponent

    record = TurnRecord(
        turn=state.turn_number,
        player=player,
        played=played,
        drawn=drawn,
        penalty=penalty,
        next_player=next_player,
    )
    logger.debug(f"Turn {state.turn_number}: {record}")
    return state.with_next_turn(next_player), record


def run_to_completion(state: GameState) -> tuple[GameState, list[TurnRecord]]:
    """Play turns until the game ends.

    Returns:
        Tuple of (final state, records of every turn played).
    """
    records = []
    while not state.is_game_over:
        state, record = execute_turn(state)
        records.append(record)
    return state, records
