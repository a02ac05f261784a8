"""Top-level package for the Ramino rules engine."""

from . import cards, coercion, deck, encoding, errors, hand, runs, scoring
from .cards import Card, Rank, Suit
from .coercion import DEFAULT_STRATEGY, RunCoercionStrategy, coerce
from .runs import AscendingRun, EqualRun, Run, RunKind, classify
from .scoring import score

__all__ = [
    "cards",
    "coercion",
    "deck",
    "encoding",
    "errors",
    "hand",
    "runs",
    "scoring",
    "Card",
    "Rank",
    "Suit",
    "Run",
    "RunKind",
    "AscendingRun",
    "EqualRun",
    "RunCoercionStrategy",
    "DEFAULT_STRATEGY",
    "classify",
    "coerce",
    "score",
]
