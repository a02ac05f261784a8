"""Resolve Jokers in a classified run into the concrete cards they stand for."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Final

from .cards import ACE_HIGH_VALUE, Card, Rank, Suit, rank_value
from .errors import UnresolvableJoker
from .runs import AscendingRun, EqualRun, Run, ascending_layout

__all__ = [
    "RunCoercionStrategy",
    "DEFAULT_STRATEGY",
    "coerce",
]

logger = logging.getLogger(__name__)

_MAX_SPAN: Final[int] = len(Rank.ordered()) - 1


def _default_suit_preference() -> tuple[Suit, ...]:
    return Suit.real()


@dataclass(frozen=True, slots=True)
class RunCoercionStrategy:
    """Determines how Jokers are resolved.

    ``prefer_ascending`` picks the shape of a run that reads as either one,
    ``highest_possible`` extends an Ascending run upward rather than downward,
    and ``suit_preference`` orders the suits handed to Jokers in Equal runs.

    With ``suit_preference = (CLUBS, DIAMONDS, SPADES, HEARTS)`` the Equal run
    ``[Joker, Q♣, Q♥]`` resolves to ``[Q♦, Q♣, Q♥]``.
    """

    prefer_ascending: bool = True
    highest_possible: bool = True
    suit_preference: tuple[Suit, ...] = field(default_factory=_default_suit_preference)

    def __post_init__(self) -> None:
        preference = tuple(Suit(suit) for suit in self.suit_preference)
        if sorted(preference) != sorted(Suit.real()):
            raise ValueError("suit_preference must list each of the four real suits exactly once")
        object.__setattr__(self, "suit_preference", preference)


DEFAULT_STRATEGY: Final[RunCoercionStrategy] = RunCoercionStrategy()


def _coerce_equal(run: Run, strategy: RunCoercionStrategy) -> EqualRun:
    naturals = run.naturals
    rank = naturals[0].rank
    used = {card.suit for card in naturals}

    resolved: list[Card] = []
    for card in run.cards:
        if not card.is_joker:
            resolved.append(card)
            continue
        suit = next((s for s in strategy.suit_preference if s not in used), None)
        if suit is None:
            raise UnresolvableJoker(f"no free suit left for a joker among {rank.name} cards")
        used.add(suit)
        logger.debug("joker resolved to %s of %s", rank.name, suit.name)
        resolved.append(Card(rank, suit))
    return EqualRun(tuple(resolved))


def _rank_for_value(value: int) -> Rank:
    if value == ACE_HIGH_VALUE:
        return Rank.ACE
    return Rank.ordered()[value - 1]


def _coerce_ascending(run: Run, strategy: RunCoercionStrategy) -> AscendingRun:
    naturals = run.naturals
    suit = naturals[0].suit
    layout = ascending_layout(
        naturals, len(run.cards), prefer_ace_high=strategy.highest_possible
    )
    if layout is None:
        raise UnresolvableJoker("jokers cannot close the gaps in this run")
    ordered, ace_high = layout

    by_value: dict[int, Card] = {}
    for card in ordered:
        value = rank_value(card)
        if ace_high and card.rank is Rank.ACE:
            value = ACE_HIGH_VALUE
        by_value[value] = card
    low = min(by_value)
    high = max(by_value)

    open_ends = len(run.cards) - (high - low + 1)
    for _ in range(open_ends):
        can_rise = high + 1 <= ACE_HIGH_VALUE and high + 1 - low <= _MAX_SPAN
        can_fall = low - 1 >= 1 and high - (low - 1) <= _MAX_SPAN
        if can_rise and (strategy.highest_possible or not can_fall):
            high += 1
        elif can_fall:
            low -= 1
        else:
            raise UnresolvableJoker(f"no room left to place a joker in a {suit.name} run")

    resolved = []
    for value in range(low, high + 1):
        card = by_value.get(value)
        if card is None:
            card = Card(_rank_for_value(value), suit)
            logger.debug("joker resolved to %s", card.format_simple())
        resolved.append(card)
    return AscendingRun(tuple(resolved))


def coerce(run: Run, strategy: RunCoercionStrategy = DEFAULT_STRATEGY) -> Run:
    """Return a copy of ``run`` with every Joker replaced by a concrete card.

    Equal runs keep their card positions; Ascending runs come back in
    sequence order. A run that reads as either shape is resolved according
    to ``strategy.prefer_ascending``. Raises
    :class:`~ramino.errors.UnresolvableJoker` when a Joker has nowhere to go.
    """

    if not run.has_jokers:
        return type(run)(run.cards)

    if run.is_ambiguous:
        as_ascending = strategy.prefer_ascending
    else:
        as_ascending = isinstance(run, AscendingRun)

    if as_ascending:
        return _coerce_ascending(run, strategy)
    return _coerce_equal(run, strategy)
