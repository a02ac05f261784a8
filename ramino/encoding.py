"""Two-character card codes used by fixtures and the CLI."""

from __future__ import annotations

from typing import Final, Iterable

from .cards import Card, Rank, Suit
from .errors import InvalidCardCode

SUIT_CODES: Final[dict[str, Suit]] = {suit.value: suit for suit in Suit}
RANK_CODES: Final[dict[str, Rank]] = {rank.value: rank for rank in Rank.ordered()}
JOKER_CODE: Final[str] = Suit.JOKER.value


def parse_code(code: str) -> Card:
    """Decode ``code`` into a :class:`Card`.

    The first character selects the suit (``S``, ``D``, ``C``, ``H`` or ``J``
    for the Joker), the second the rank (``A``, ``2``-``9``, ``X`` for ten,
    ``J``, ``Q``, ``K``). A Joker code has no rank character.
    """

    if not isinstance(code, str) or not 1 <= len(code) <= 2:
        raise InvalidCardCode(f"invalid card code {code!r}")

    suit = SUIT_CODES.get(code[0])
    if suit is None:
        raise InvalidCardCode(f"invalid suit in card code {code!r}")

    if suit is Suit.JOKER:
        if len(code) != 1:
            raise InvalidCardCode(f"joker code {code!r} must not carry a rank")
        return Card.joker()

    if len(code) != 2:
        raise InvalidCardCode(f"card code {code!r} is missing a rank")
    rank = RANK_CODES.get(code[1])
    if rank is None:
        raise InvalidCardCode(f"invalid rank in card code {code!r}")
    return Card(rank, suit)


def parse_codes(codes: Iterable[str]) -> list[Card]:
    """Decode each code in ``codes``."""

    return [parse_code(code) for code in codes]


def card_code(card: Card) -> str:
    """Return the two-character code for ``card``."""

    return card.code


def format_codes(cards: Iterable[Card]) -> str:
    return " ".join(card_code(card) for card in cards)
