"""Tests covering Joker coercion strategies."""

from __future__ import annotations

from itertools import combinations
from typing import Sequence

import pytest

from ramino import encoding
from ramino.cards import Card, Rank, Suit
from ramino.coercion import DEFAULT_STRATEGY, RunCoercionStrategy, coerce
from ramino.errors import ErrorKind, UnresolvableJoker
from ramino.runs import AscendingRun, EqualRun, classify

HIGH = RunCoercionStrategy(highest_possible=True)
LOW = RunCoercionStrategy(highest_possible=False)


def _run(codes: Sequence[str]):
    return classify(encoding.parse_codes(codes))


def _codes(run) -> list[str]:
    return [card.code for card in run.cards]


@pytest.mark.parametrize(
    ("codes", "strategy", "expected"),
    [
        (["J", "S3", "S4"], LOW, ["S2", "S3", "S4"]),
        (["J", "S3", "S4"], HIGH, ["S3", "S4", "S5"]),
        (["S3", "J", "S5"], HIGH, ["S3", "S4", "S5"]),
        (["S3", "J", "S5"], LOW, ["S3", "S4", "S5"]),
        (["HQ", "HK", "J"], HIGH, ["HQ", "HK", "HA"]),
        (["HQ", "HK", "J"], LOW, ["HJ", "HQ", "HK"]),
        (["HA", "H2", "J"], HIGH, ["HA", "H2", "H3"]),
        (["SQ", "J", "SA"], LOW, ["SQ", "SK", "SA"]),
        (["D9", "J", "J", "DJ"], HIGH, ["D9", "DX", "DJ", "DQ"]),
        (["D9", "J", "J", "DJ"], LOW, ["D8", "D9", "DX", "DJ"]),
        (["SA", "SK", "J"], HIGH, ["SQ", "SK", "SA"]),
        (["SA", "SK", "J"], LOW, ["SQ", "SK", "SA"]),
        (["SA", "SK", "J", "J"], HIGH, ["SJ", "SQ", "SK", "SA"]),
        (["SA", "SK", "J", "J"], LOW, ["SJ", "SQ", "SK", "SA"]),
    ],
)
def test_ascending_coercion(codes: list[str], strategy: RunCoercionStrategy, expected: list[str]) -> None:
    resolved = coerce(_run(codes), strategy)
    assert isinstance(resolved, AscendingRun)
    assert _codes(resolved) == expected
    assert not resolved.has_jokers


@pytest.mark.parametrize("strategy", [HIGH, LOW])
@pytest.mark.parametrize(
    "codes",
    [
        ["J", "S3", "S4"],
        ["S3", "J", "S5"],
        ["HQ", "HK", "J"],
        ["HA", "H2", "J"],
        ["SQ", "J", "SA"],
        ["SA", "SK", "J"],
        ["SA", "SK", "J", "J"],
        ["D9", "J", "J", "DJ"],
        ["SJ", "SQ", "SK", "J", "J"],
        ["CA", "J", "J", "J", "J"],
        ["HA", "HK", "HQ", "J", "J", "J"],
    ],
)
def test_coercion_keeps_run_length(codes: list[str], strategy: RunCoercionStrategy) -> None:
    run = _run(codes)
    resolved = coerce(run, strategy)
    assert len(resolved) == len(run)
    assert len(set(resolved.cards)) == len(run)


def test_ascending_falls_back_to_the_open_end() -> None:
    run = _run(["SJ", "SQ", "SK", "J", "J"])
    assert _codes(coerce(run, HIGH)) == ["SX", "SJ", "SQ", "SK", "SA"]


def test_lone_ace_follows_height_preference() -> None:
    run = _run(["CA", "J", "J", "J", "J"])
    assert _codes(coerce(run, HIGH)) == ["CX", "CJ", "CQ", "CK", "CA"]
    assert _codes(coerce(run, LOW)) == ["CA", "C2", "C3", "C4", "C5"]


def test_ascending_run_without_room_is_unresolvable() -> None:
    naturals = [f"S{rank.value}" for rank in Rank.ordered()[:-1]]
    run = _run(naturals + ["J", "J"])
    with pytest.raises(UnresolvableJoker) as excinfo:
        coerce(run, HIGH)
    assert excinfo.value.kind is ErrorKind.UNRESOLVABLE_JOKER


def test_equal_coercion_uses_suit_preference() -> None:
    strategy = RunCoercionStrategy(
        prefer_ascending=False,
        suit_preference=(Suit.CLUBS, Suit.DIAMONDS, Suit.SPADES, Suit.HEARTS),
    )
    resolved = coerce(_run(["J", "CQ", "HQ"]), strategy)
    assert isinstance(resolved, EqualRun)
    assert _codes(resolved) == ["DQ", "CQ", "HQ"]


def test_equal_coercion_assigns_distinct_suits_to_each_joker() -> None:
    resolved = coerce(_run(["H5", "J", "J", "S5"]), DEFAULT_STRATEGY)
    assert _codes(resolved) == ["H5", "D5", "C5", "S5"]
    assert len({card.suit for card in resolved.cards}) == 4


@pytest.mark.parametrize(
    ("prefer_ascending", "highest_possible", "expected"),
    [
        (True, True, ["S7", "S8", "S9"]),
        (True, False, ["S5", "S6", "S7"]),
        (False, True, ["S7", "D7", "C7"]),
    ],
)
def test_ambiguous_run_follows_prefer_ascending(
    prefer_ascending: bool, highest_possible: bool, expected: list[str]
) -> None:
    strategy = RunCoercionStrategy(prefer_ascending=prefer_ascending, highest_possible=highest_possible)
    run = _run(["S7", "J", "J"])
    resolved = coerce(run, strategy)
    assert sorted(_codes(resolved)) == sorted(expected)
    assert isinstance(resolved, AscendingRun if prefer_ascending else EqualRun)


def test_coerce_is_non_destructive() -> None:
    run = _run(["J", "S3", "S4"])
    snapshot = run.cards
    resolved = coerce(run)
    assert run.cards == snapshot
    assert run.has_jokers
    assert resolved is not run


def _joker_free_runs() -> list:
    runs = []
    spades = [Card(rank, Suit.SPADES) for rank in Rank.ordered()]
    for start in range(len(spades) - 2):
        runs.append(classify(spades[start : start + 3]))
    for rank in Rank.ordered():
        for suits in combinations(Suit.real(), 3):
            runs.append(classify([Card(rank, suit) for suit in suits]))
    return runs


@pytest.mark.parametrize(
    "strategy",
    [
        DEFAULT_STRATEGY,
        LOW,
        RunCoercionStrategy(prefer_ascending=False, suit_preference=(Suit.HEARTS, Suit.CLUBS, Suit.DIAMONDS, Suit.SPADES)),
    ],
)
def test_coerce_without_jokers_is_identity(strategy: RunCoercionStrategy) -> None:
    for run in _joker_free_runs():
        assert coerce(run, strategy) == run


@pytest.mark.parametrize(
    "preference",
    [
        (Suit.SPADES, Suit.HEARTS, Suit.CLUBS),
        (Suit.SPADES, Suit.SPADES, Suit.CLUBS, Suit.HEARTS),
        (Suit.SPADES, Suit.DIAMONDS, Suit.CLUBS, Suit.JOKER),
    ],
)
def test_strategy_requires_permutation_of_real_suits(preference: tuple[Suit, ...]) -> None:
    with pytest.raises(ValueError):
        RunCoercionStrategy(suit_preference=preference)


def test_strategy_accepts_suit_codes() -> None:
    strategy = RunCoercionStrategy(suit_preference=("H", "S", "D", "C"))
    assert strategy.suit_preference == (Suit.HEARTS, Suit.SPADES, Suit.DIAMONDS, Suit.CLUBS)
