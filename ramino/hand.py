"""A player's hand and its end-of-round penalty score."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final

from .cards import Card, Rank, point_value

__all__ = ["HAND_SIZE", "FULL_HAND_PENALTY", "Hand"]

HAND_SIZE: Final[int] = 13
FULL_HAND_PENALTY: Final[int] = 100


@dataclass(slots=True)
class Hand:
    """Cards held by a single player."""

    cards: list[Card] = field(default_factory=list)

    @classmethod
    def draw(cls, deck: list[Card]) -> "Hand":
        """Deal a fresh hand by popping ``HAND_SIZE`` cards off ``deck``."""

        if len(deck) < HAND_SIZE:
            raise ValueError(f"deck holds {len(deck)} cards, a hand needs {HAND_SIZE}")
        return cls([deck.pop() for _ in range(HAND_SIZE)])

    def __len__(self) -> int:
        return len(self.cards)

    def score(self) -> int:
        """Return the penalty score of the cards still held.

        An untouched hand of ``HAND_SIZE`` cards costs ``FULL_HAND_PENALTY``
        and a lone Ace counts as one. Otherwise cards score their point value,
        Jokers included.
        """

        if len(self.cards) == HAND_SIZE:
            return FULL_HAND_PENALTY
        if len(self.cards) == 1 and self.cards[0].rank is Rank.ACE:
            return 1
        return sum(point_value(card) for card in self.cards)
