"""Deck assembly helpers."""

from __future__ import annotations

import random
from typing import Final

from .cards import Card, Rank, Suit

__all__ = ["JOKERS_PER_DECK", "generate_single_deck", "generate_deck"]

JOKERS_PER_DECK: Final[int] = 2
DECK_SUIT_ORDER: Final[tuple[Suit, ...]] = (Suit.SPADES, Suit.HEARTS, Suit.DIAMONDS, Suit.CLUBS)
DECK_RANK_ORDER: Final[tuple[Rank, ...]] = (
    Rank.ACE,
    Rank.KING,
    Rank.QUEEN,
    Rank.JACK,
    *(Rank.number(value) for value in range(2, 11)),
)


def generate_single_deck(shuffled: bool = False, rng: random.Random | None = None) -> list[Card]:
    """Return 52 natural cards and two Jokers, in standard order unless ``shuffled``."""

    deck = [Card(rank, suit) for suit in DECK_SUIT_ORDER for rank in DECK_RANK_ORDER]
    deck.extend(Card.joker() for _ in range(JOKERS_PER_DECK))
    if shuffled:
        (rng or random.Random()).shuffle(deck)
    return deck


def generate_deck(shuffled: bool = False, rng: random.Random | None = None) -> list[Card]:
    """Return the full playing deck made of two single decks."""

    rng = rng or random.Random()
    deck = generate_single_deck(shuffled, rng)
    deck.extend(generate_single_deck(shuffled, rng))
    return deck
