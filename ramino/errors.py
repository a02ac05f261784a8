"""Error taxonomy for card parsing, run validation and Joker coercion."""

from __future__ import annotations

from enum import Enum
from typing import ClassVar

__all__ = [
    "ErrorKind",
    "RaminoError",
    "InvalidCardCode",
    "RunValidationError",
    "TooFewCards",
    "DuplicateCard",
    "DuplicateSuitInEqualRun",
    "NonConsecutiveRun",
    "NotARun",
    "UnresolvableJoker",
]


class ErrorKind(str, Enum):
    """Machine-readable kind attached to every rules error."""

    TOO_FEW_CARDS = "too_few_cards"
    DUPLICATE_CARD = "duplicate_card"
    DUPLICATE_SUIT_IN_EQUAL_RUN = "duplicate_suit_in_equal_run"
    NON_CONSECUTIVE_RUN = "non_consecutive_run"
    NOT_A_RUN = "not_a_run"
    UNRESOLVABLE_JOKER = "unresolvable_joker"
    INVALID_CARD_CODE = "invalid_card_code"


class RaminoError(ValueError):
    """Base class for recoverable rules errors."""

    kind: ClassVar[ErrorKind]


class InvalidCardCode(RaminoError):
    """Raised when a card code cannot be parsed."""

    kind = ErrorKind.INVALID_CARD_CODE


class RunValidationError(RaminoError):
    """Raised when a collection of cards does not form a legal run."""


class TooFewCards(RunValidationError):
    """Raised when fewer than three cards are offered as a run."""

    kind = ErrorKind.TOO_FEW_CARDS


class DuplicateCard(RunValidationError):
    """Raised when the same natural card appears twice."""

    kind = ErrorKind.DUPLICATE_CARD


class DuplicateSuitInEqualRun(RunValidationError):
    """Raised when same-rank cards repeat a suit."""

    kind = ErrorKind.DUPLICATE_SUIT_IN_EQUAL_RUN


class NonConsecutiveRun(RunValidationError):
    """Raised when same-suit cards leave gaps the Jokers cannot fill."""

    kind = ErrorKind.NON_CONSECUTIVE_RUN


class NotARun(RunValidationError):
    """Raised when cards share neither a rank nor a suit."""

    kind = ErrorKind.NOT_A_RUN


class UnresolvableJoker(RaminoError):
    """Raised when a Joker has no legal stand-in within its run."""

    kind = ErrorKind.UNRESOLVABLE_JOKER
