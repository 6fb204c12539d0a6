"""Play legality for Uno.

There is no declared color after a wild card: a wild on the discard pile
only matches another card of the same wild rank, or any wild.
"""

from __future__ import annotations

from collections.abc import Sequence

from uno_engine.cards import Card


def is_valid_play(card: Card, top: Card) -> bool:
    """Whether ``card`` may be played on ``top``."""
    return card.color == top.color or card.rank == top.rank or card.is_wild


def find_playable(hand: Sequence[Card], top: Card) -> int | None:
    """Index of the first playable card in hand order, or None."""
    for i, card in enumerate(hand):
        if is_valid_play(card, top):
            return i
    return None


def playable_cards(hand: Sequence[Card], top: Card) -> list[Card]:
    """All playable cards, in hand order."""
    return [card for card in hand if is_valid_play(card, top)]
