"""Run classification: decide whether cards form an Ascending or Equal run."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Iterable, Iterator, Sequence

from .cards import Card, Rank, Suit, distance, sort_cards
from .errors import (
    DuplicateCard,
    DuplicateSuitInEqualRun,
    NonConsecutiveRun,
    NotARun,
    RunValidationError,
    TooFewCards,
)

__all__ = [
    "MIN_RUN_LENGTH",
    "MAX_EQUAL_RUN_LENGTH",
    "RunKind",
    "AscendingRun",
    "EqualRun",
    "Run",
    "classify",
    "can_form_run",
    "check_distinct_suits",
    "ascending_layout",
]

logger = logging.getLogger(__name__)

MIN_RUN_LENGTH = 3
MAX_EQUAL_RUN_LENGTH = len(Suit.real())


class RunKind(str, Enum):
    """The two shapes a run can take."""

    ASCENDING = "ascending"
    EQUAL = "equal"


@dataclass(frozen=True, slots=True)
class _RunBase:
    cards: tuple[Card, ...]

    kind: ClassVar[RunKind]

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    @property
    def naturals(self) -> tuple[Card, ...]:
        """Return the non-Joker cards in stored order."""

        return tuple(card for card in self.cards if not card.is_joker)

    @property
    def joker_count(self) -> int:
        return sum(1 for card in self.cards if card.is_joker)

    @property
    def has_jokers(self) -> bool:
        return any(card.is_joker for card in self.cards)

    @property
    def is_ambiguous(self) -> bool:
        """Return ``True`` when the run reads equally well as either shape.

        That happens only with a single natural card and few enough Jokers
        to still fit an Equal run.
        """

        return len(self.naturals) == 1 and len(self.cards) <= MAX_EQUAL_RUN_LENGTH


@dataclass(frozen=True, slots=True)
class AscendingRun(_RunBase):
    """Same-suit cards with consecutive values, stored in sequence order."""

    kind: ClassVar[RunKind] = RunKind.ASCENDING

    @property
    def suit(self) -> Suit:
        return self.naturals[0].suit


@dataclass(frozen=True, slots=True)
class EqualRun(_RunBase):
    """Same-rank cards of pairwise distinct suits, stored in input order."""

    kind: ClassVar[RunKind] = RunKind.EQUAL

    @property
    def rank(self) -> Rank:
        return self.naturals[0].rank


Run = AscendingRun | EqualRun


def check_distinct_suits(cards: Iterable[Card]) -> set[Suit]:
    """Return the suits of the natural ``cards``, rejecting the first repeat."""

    seen: set[Suit] = set()
    for card in cards:
        if card.is_joker:
            continue
        if card.suit in seen:
            raise DuplicateSuitInEqualRun(f"suit {card.suit.name} appears twice in an equal run")
        seen.add(card.suit)
    return seen


def _check_duplicates(naturals: Sequence[Card]) -> None:
    seen: set[Card] = set()
    for card in naturals:
        if card in seen:
            raise DuplicateCard(f"card {card.code} appears more than once")
        seen.add(card)


def _span(ordered: Sequence[Card], ace_high: bool) -> int:
    return sum(distance(a, b, ace_high=ace_high) for a, b in zip(ordered, ordered[1:]))


def ascending_layout(
    naturals: Sequence[Card],
    total_cards: int,
    *,
    prefer_ace_high: bool | None = None,
) -> tuple[list[Card], bool] | None:
    """Return the sequence order of ``naturals`` and whether the Ace is high.

    ``total_cards`` counts the Jokers as well: each one may fill a single
    missing value. When an Ace is present both readings are tried, Ace-high
    first if ``prefer_ace_high`` (by default: if a King is present). Returns
    ``None`` when no reading fits.
    """

    ordered = sort_cards(naturals)
    readings = []
    # An Ace sorted directly before a King only sits next to it when high.
    if len(ordered) < 2 or not (ordered[0].rank is Rank.ACE and ordered[1].rank is Rank.KING):
        readings.append((ordered, False))
    if ordered[0].rank is Rank.ACE:
        if prefer_ace_high is None:
            prefer_ace_high = any(card.rank is Rank.KING for card in ordered)
        high = (ordered[1:] + ordered[:1], True)
        if prefer_ace_high:
            readings.insert(0, high)
        else:
            readings.append(high)

    for candidate, ace_high in readings:
        if _span(candidate, ace_high) <= total_cards - 1:
            return candidate, ace_high
    return None


def _with_jokers(ordered: Sequence[Card], ace_high: bool, jokers: Sequence[Card]) -> tuple[Card, ...]:
    pending = list(jokers)
    laid: list[Card] = [ordered[0]]
    for previous, card in zip(ordered, ordered[1:]):
        for _ in range(distance(previous, card, ace_high=ace_high) - 1):
            laid.append(pending.pop())
        laid.append(card)
    laid.extend(pending)
    return tuple(laid)


def classify(cards: Iterable[Card]) -> Run:
    """Classify ``cards`` as an Ascending or Equal run.

    Jokers are wildcards: they may take any rank in an Equal run and fill one
    missing value each in an Ascending run. At least one natural card is
    required. Raises a :class:`~ramino.errors.RunValidationError` subclass
    when the cards do not form a run.
    """

    cards = tuple(cards)
    if len(cards) < MIN_RUN_LENGTH:
        raise TooFewCards(f"a run needs at least {MIN_RUN_LENGTH} cards, got {len(cards)}")

    naturals = [card for card in cards if not card.is_joker]
    jokers = [card for card in cards if card.is_joker]
    _check_duplicates(naturals)
    if not naturals:
        raise NotARun("a run needs at least one natural card")

    if all(card.rank is naturals[0].rank for card in naturals):
        check_distinct_suits(naturals)
        if len(cards) <= MAX_EQUAL_RUN_LENGTH:
            return EqualRun(cards)
        logger.debug("%d same-rank cards exceed the equal run limit", len(cards))

    if any(card.suit is not naturals[0].suit for card in naturals):
        raise NotARun("cards share neither a rank nor a suit")

    layout = ascending_layout(naturals, len(cards))
    if layout is None:
        raise NonConsecutiveRun(
            f"{len(jokers)} joker(s) cannot fill the gaps in {', '.join(c.code for c in naturals)}"
        )
    ordered, ace_high = layout
    return AscendingRun(_with_jokers(ordered, ace_high, jokers))


def can_form_run(cards: Iterable[Card]) -> bool:
    """Return ``True`` if ``cards`` form a legal run."""

    try:
        classify(cards)
    except RunValidationError as exc:
        logger.debug("rejected run: %s", exc)
        return False
    return True
