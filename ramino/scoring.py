"""Point values for runs."""

from __future__ import annotations

from typing import Iterable

from .cards import Card, point_value
from .coercion import DEFAULT_STRATEGY, RunCoercionStrategy, coerce
from .runs import Run

__all__ = ["cards_points", "score"]


def cards_points(cards: Iterable[Card]) -> int:
    """Return the summed point value of concrete ``cards``."""

    total = 0
    for card in cards:
        if card.is_joker:
            raise ValueError("jokers must be coerced before scoring")
        total += point_value(card)
    return total


def score(run: Run, strategy: RunCoercionStrategy | None = None) -> int:
    """Return the points ``run`` is worth, resolving Jokers with ``strategy`` first."""

    if run.has_jokers:
        run = coerce(run, strategy or DEFAULT_STRATEGY)
    return cards_points(run.cards)
