"""Deck construction, shuffling, and dealing."""

from __future__ import annotations

import random
from collections import Counter
from collections.abc import Iterable, Sequence

from uno_engine.cards import Card, Color, Rank, UnoError

DECK_SIZE = 108


class InvalidCountError(UnoError):
    """Raised when a deal or game count is not positive."""

    def __init__(self, requested: int, what: str = "cards"):
        self.requested = requested
        self.what = what
        super().__init__(f"Must request at least one of {what}, got {requested}")


class InsufficientCardsError(UnoError):
    """Raised when a deal asks for more cards than the deck holds."""

    def __init__(self, requested: int, available: int):
        self.requested = requested
        self.available = available
        super().__init__(
            f"Cannot deal {requested} cards: only {available} left in the deck"
        )


def create_deck() -> list[Card]:
    """Create the canonical 108-card deck in a fixed order.

    Per color: one 0, two each of 1-9, two each of Skip, Draw Two and
    Reverse. Four Wild and four Wild Draw Four cards come last.
    """
    deck = []
    for color in Color.playable():
        deck.append(Card(Rank.ZERO, color))
        for rank in Rank:
            if rank == Rank.ZERO or rank.is_wild:
                continue
            deck.extend([Card(rank, color)] * 2)

    deck.extend([Card(Rank.WILD, Color.NONE)] * 4)
    deck.extend([Card(Rank.WILD_DRAW_FOUR, Color.NONE)] * 4)
    return deck


def expected_composition() -> Counter[Card]:
    """Card counts of a complete deck."""
    return Counter(create_deck())


def is_complete_deck(cards: Iterable[Card]) -> bool:
    """Whether the cards are exactly one complete deck, in any order."""
    return Counter(cards) == expected_composition()


def shuffle_deck(
    deck: list[Card],
    rng: random.Random | None = None,
    seed: int | None = None,
) -> list[Card]:
    """Shuffle the deck in place and return it.

    Args:
        deck: Cards to shuffle.
        rng: Random source to use. Takes precedence over seed.
        seed: Seed for a fresh random source when rng is not given.
    """
    if rng is None:
        rng = random.Random(seed)
    rng.shuffle(deck)
    return deck


def deal(deck: list[Card], n: int) -> list[Card]:
    """Remove the top n cards from the deck and return them as a hand.

    The top of the deck is index 0.

    Raises:
        InvalidCountError: If n < 1.
        InsufficientCardsError: If the deck holds fewer than n cards.
    """
    if n < 1:
        raise InvalidCountError(n)
    if n > len(deck):
        raise InsufficientCardsError(n, len(deck))

    hand = deck[:n]
    del deck[:n]
    return hand


def draw_card(deck: list[Card]) -> Card:
    """Remove and return the top card of the deck."""
    return deal(deck, 1)[0]


def remove_one(hand: Sequence[Card], card: Card) -> tuple[Card, ...]:
    """Return the hand without the first card equal to ``card``."""
    for i, held in enumerate(hand):
        if held == card:
            return tuple(hand[:i]) + tuple(hand[i + 1 :])
    return tuple(hand)
