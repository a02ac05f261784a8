"""Card abstractions and the suit-scoped ordering used by run validation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import cmp_to_key
from typing import Final, Iterable

__all__ = [
    "Suit",
    "Rank",
    "Card",
    "Ordering",
    "WellDefined",
    "IllDefined",
    "CardOrdering",
    "ILL_DEFINED",
    "JOKER_VALUE",
    "JOKER_POINTS",
    "rank_value",
    "compare",
    "distance",
    "sort_key",
    "sort_cards",
    "point_value",
]

JOKER_VALUE: Final[int] = 99
JOKER_POINTS: Final[int] = 25
ACE_HIGH_VALUE: Final[int] = 14


class Suit(str, Enum):
    """Enumeration of the four suits plus the Joker sentinel."""

    SPADES = "S"
    DIAMONDS = "D"
    CLUBS = "C"
    HEARTS = "H"
    JOKER = "J"

    @classmethod
    def real(cls) -> tuple["Suit", ...]:
        """Return the four suits a natural card can carry."""

        return (cls.SPADES, cls.DIAMONDS, cls.CLUBS, cls.HEARTS)


class Rank(str, Enum):
    """Enumeration of card ranks; numbered ranks are limited to two through ten."""

    ACE = "A"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "X"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"
    JOKER = "?"

    @classmethod
    def number(cls, value: int) -> "Rank":
        """Return the numbered rank for ``value``."""

        if not 2 <= value <= 10:
            raise ValueError(f"numbered rank must be between 2 and 10, got {value}")
        return _NUMBERED[value - 2]

    @classmethod
    def ordered(cls) -> tuple["Rank", ...]:
        """Return the natural ranks in Ace-low order."""

        return (cls.ACE, *_NUMBERED, cls.JACK, cls.QUEEN, cls.KING)

    @property
    def is_number(self) -> bool:
        return self in _NUMBERED

    @property
    def is_face(self) -> bool:
        return self in (Rank.JACK, Rank.QUEEN, Rank.KING)


_NUMBERED: Final[tuple[Rank, ...]] = (
    Rank.TWO,
    Rank.THREE,
    Rank.FOUR,
    Rank.FIVE,
    Rank.SIX,
    Rank.SEVEN,
    Rank.EIGHT,
    Rank.NINE,
    Rank.TEN,
)

_RANK_VALUES: Final[dict[Rank, int]] = {
    **{rank: idx for idx, rank in enumerate(Rank.ordered(), start=1)},
    Rank.JOKER: JOKER_VALUE,
}

_RANK_NAMES: Final[dict[Rank, str]] = {
    Rank.ACE: "Ace",
    Rank.JACK: "Jack",
    Rank.QUEEN: "Queen",
    Rank.KING: "King",
}

_SUIT_SYMBOLS: Final[dict[Suit, str]] = {
    Suit.SPADES: "♠",
    Suit.DIAMONDS: "♦",
    Suit.CLUBS: "♣",
    Suit.HEARTS: "♥",
}


@dataclass(frozen=True, slots=True)
class Card:
    """Value object describing a physical card."""

    rank: Rank
    suit: Suit

    def __post_init__(self) -> None:
        object.__setattr__(self, "rank", Rank(self.rank))
        object.__setattr__(self, "suit", Suit(self.suit))
        if (self.rank is Rank.JOKER) != (self.suit is Suit.JOKER):
            raise ValueError(f"{self.rank.name} cannot carry suit {self.suit.name}")

    @classmethod
    def joker(cls) -> "Card":
        return cls(Rank.JOKER, Suit.JOKER)

    @classmethod
    def from_code(cls, code: str) -> "Card":
        """Parse a two-character code such as ``"SA"`` or ``"HX"``."""

        from . import encoding

        return encoding.parse_code(code)

    @property
    def is_joker(self) -> bool:
        """Return ``True`` when the card represents a Joker."""

        return self.rank is Rank.JOKER

    @property
    def code(self) -> str:
        if self.is_joker:
            return Suit.JOKER.value
        return f"{self.suit.value}{self.rank.value}"

    @property
    def value(self) -> int:
        return rank_value(self)

    @property
    def points(self) -> int:
        return point_value(self)

    def label(self) -> str:
        """Create a short display label, e.g. ``A♠`` or ``10♥``."""

        if self.is_joker:
            return "🃏"
        rank = "10" if self.rank is Rank.TEN else self.rank.value
        return f"{rank}{_SUIT_SYMBOLS[self.suit]}"

    def format_simple(self) -> str:
        """Format the card as plain text, e.g. ``Queen of Hearts``."""

        if self.is_joker:
            return "Joker"
        name = _RANK_NAMES.get(self.rank, str(rank_value(self)))
        return f"{name} of {self.suit.name.title()}"


class Ordering(int, Enum):
    """Linear comparison outcome."""

    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def of(cls, difference: int) -> "Ordering":
        if difference < 0:
            return cls.LESS
        if difference > 0:
            return cls.GREATER
        return cls.EQUAL


@dataclass(frozen=True, slots=True)
class WellDefined:
    """Comparison with a sensible linear result."""

    ordering: Ordering


@dataclass(frozen=True, slots=True)
class IllDefined:
    """Comparison that cannot be reduced to a linear order.

    Produced for cards of different suits and for anything involving a Joker.
    """


CardOrdering = WellDefined | IllDefined
ILL_DEFINED: Final[IllDefined] = IllDefined()


def rank_value(card: Card) -> int:
    """Return the comparison key: Ace 1, numbers face value, J/Q/K 11-13.

    Jokers map to ``JOKER_VALUE``, which sits above every real key.
    """

    return _RANK_VALUES[card.rank]


def compare(a: Card, b: Card) -> CardOrdering:
    """Compare two cards within a suit, treating Ace and King as adjacent."""

    if a.suit != b.suit:
        return ILL_DEFINED

    a_val = rank_value(a)
    b_val = rank_value(b)
    if a_val == 1 and b_val == 13:
        return WellDefined(Ordering.LESS)
    if a_val == 13 and b_val == 1:
        return WellDefined(Ordering.GREATER)
    if a_val == JOKER_VALUE or b_val == JOKER_VALUE:
        return ILL_DEFINED
    return WellDefined(Ordering.of(a_val - b_val))


def distance(a: Card, b: Card, *, ace_high: bool = False) -> int:
    """Return how far ``b`` sits above ``a`` in a sorted same-suit sequence.

    ``a`` must precede ``b``. An Ace directly followed by a King counts as one
    step; with ``ace_high`` the Ace takes the value above the King instead.
    """

    a_val = rank_value(a)
    b_val = rank_value(b)
    if ace_high:
        if a_val == 1:
            a_val = ACE_HIGH_VALUE
        if b_val == 1:
            b_val = ACE_HIGH_VALUE
    elif a_val == 1 and b_val == 13:
        return 1
    return b_val - a_val


def _total_compare(a: Card, b: Card) -> int:
    result = compare(a, b)
    if isinstance(result, WellDefined):
        return int(result.ordering)
    # Tie-break only so sorting stays deterministic; not a ranking.
    return int(Ordering.LESS)


sort_key = cmp_to_key(_total_compare)


def sort_cards(cards: Iterable[Card]) -> list[Card]:
    """Return ``cards`` sorted within their suit, Ace first."""

    return sorted(cards, key=sort_key)


def point_value(card: Card) -> int:
    """Return the point value: face value, 10 for J/Q/K, 11 for Ace, 25 for Joker."""

    if card.is_joker:
        return JOKER_POINTS
    if card.rank is Rank.ACE:
        return 11
    if card.rank.is_face:
        return 10
    return rank_value(card)
