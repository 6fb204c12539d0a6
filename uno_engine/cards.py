"""Card, Color, and Rank models for Uno."""

from __future__ import annotations

from enum import IntEnum
from typing import ClassVar


class UnoError(Exception):
    """Base class for all errors raised by the Uno engine."""

    pass


class ParseError(UnoError):
    """Raised when a card token cannot be parsed."""

    def __init__(self, token: str, reason: str):
        self.token = token
        self.reason = reason
        super().__init__(f"Cannot parse card token {token!r}: {reason}")


class Color(IntEnum):
    """Card colors. NONE is reserved for wild cards."""

    RED = 0
    YELLOW = 1
    GREEN = 2
    BLUE = 3
    NONE = 4

    def __str__(self) -> str:
        return self.token

    @property
    def token(self) -> str:
        return _COLOR_TOKENS[self]

    @classmethod
    def playable(cls) -> tuple[Color, ...]:
        """The four real colors, in deck-building order."""
        return (cls.RED, cls.YELLOW, cls.GREEN, cls.BLUE)


class Rank(IntEnum):
    """Card ranks: numerals 0-9, three colored actions, two wilds."""

    ZERO = 0
    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    SKIP = 10
    DRAW_TWO = 11
    REVERSE = 12
    WILD = 13
    WILD_DRAW_FOUR = 14

    def __str__(self) -> str:
        return self.token

    @property
    def token(self) -> str:
        return _RANK_TOKENS[self]

    @property
    def is_number(self) -> bool:
        return self.value <= 9

    @property
    def is_action(self) -> bool:
        return self in (Rank.SKIP, Rank.DRAW_TWO, Rank.REVERSE)

    @property
    def is_wild(self) -> bool:
        return self in (Rank.WILD, Rank.WILD_DRAW_FOUR)

    @property
    def draw_penalty(self) -> int:
        """Cards the opponent must draw when this rank is played."""
        if self == Rank.DRAW_TWO:
            return 2
        if self == Rank.WILD_DRAW_FOUR:
            return 4
        return 0


_RANK_TOKENS: dict[Rank, str] = {
    **{rank: str(rank.value) for rank in Rank if rank.value <= 9},
    Rank.SKIP: "skip",
    Rank.DRAW_TWO: "plus-two",
    Rank.REVERSE: "reverse",
    Rank.WILD: "wild",
    Rank.WILD_DRAW_FOUR: "wild-draw-four",
}

_COLOR_TOKENS: dict[Color, str] = {color: color.name.lower() for color in Color}

# Reverse lookups; aliases parse but are never written
_RANKS_BY_TOKEN: dict[str, Rank] = {
    **{token: rank for rank, token in _RANK_TOKENS.items()},
    "draw two": Rank.DRAW_TWO,
    "wild draw four": Rank.WILD_DRAW_FOUR,
}

_COLORS_BY_TOKEN: dict[str, Color] = {token: color for color, token in _COLOR_TOKENS.items()}


class Card:
    """An Uno card.

    Cards are immutable and interned: two cards with the same rank and
    color are the same object. Wild ranks always carry Color.NONE and no
    other rank may.
    """

    __slots__ = ("_rank", "_color")

    _instances: ClassVar[dict[tuple[Rank, Color], Card]] = {}

    def __new__(cls, rank: Rank, color: Color) -> Card:
        key = (rank, color)
        if key not in cls._instances:
            if rank.is_wild != (color == Color.NONE):
                raise ValueError(f"Invalid card: {rank.name} cannot have color {color.name}")
            instance = object.__new__(cls)
            instance._rank = rank
            instance._color = color
            cls._instances[key] = instance
        return cls._instances[key]

    @property
    def rank(self) -> Rank:
        return self._rank

    @property
    def color(self) -> Color:
        return self._color

    @property
    def is_wild(self) -> bool:
        return self._rank.is_wild

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self._rank == other._rank and self._color == other._color

    def __hash__(self) -> int:
        return hash((self._rank, self._color))

    def __reduce__(self) -> tuple:
        return (Card, (self._rank, self._color))

    def __repr__(self) -> str:
        return f"Card({self._rank.name}, {self._color.name})"

    def __str__(self) -> str:
        return card_to_token(self)


def card_to_token(card: Card) -> str:
    """Format a card as ``rank|color``, or a bare rank for wild cards."""
    if card.color == Color.NONE:
        return card.rank.token
    return f"{card.rank.token}|{card.color.token}"


def card_from_token(text: str) -> Card:
    """Parse a card token such as ``"3|yellow"``, ``"plus-two|green"`` or ``"wild"``.

    Matching is case-insensitive and ignores surrounding whitespace.

    Raises:
        ParseError: If the token is malformed, names an unknown rank or
            color, or pairs a rank with a color it cannot have.
    """
    parts = [part.strip().lower() for part in text.split("|")]

    if len(parts) > 2:
        raise ParseError(text, "too many '|' separators")

    rank = _RANKS_BY_TOKEN.get(parts[0])
    if rank is None:
        raise ParseError(text, f"unknown rank {parts[0]!r}")

    if len(parts) == 1:
        if not rank.is_wild:
            raise ParseError(text, f"rank {rank.token!r} needs a color (expected 'rank|color')")
        return Card(rank, Color.NONE)

    color = _COLORS_BY_TOKEN.get(parts[1])
    if color is None:
        raise ParseError(text, f"unknown color {parts[1]!r}")

    try:
        return Card(rank, color)
    except ValueError as e:
        raise ParseError(text, str(e)) from e
