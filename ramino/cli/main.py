"""Typer entry-point wiring for the Ramino rules CLI."""

from __future__ import annotations

import logging
import random
from typing import List, Sequence

import typer
from rich.console import Console
from rich.logging import RichHandler

from .. import encoding
from ..cards import Card, Suit
from ..coercion import RunCoercionStrategy, coerce
from ..deck import generate_deck
from ..errors import RaminoError
from ..hand import Hand
from ..runs import Run, classify
from ..scoring import score as score_run
from .render import format_cards, run_table

app = typer.Typer(add_completion=False, rich_markup_mode="rich")
console = Console()


@app.callback()
def _configure(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log classification and coercion details."),
) -> None:
    """Validate, resolve and score Ramino runs."""

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _parse_cards(codes: Sequence[str]) -> list[Card]:
    try:
        return encoding.parse_codes(codes)
    except RaminoError as exc:
        raise typer.BadParameter(str(exc), param_hint="CODES") from exc


def _classify_or_exit(cards: Sequence[Card]) -> Run:
    try:
        return classify(cards)
    except RaminoError as exc:
        console.print(f"[red]{exc.kind.value}[/red]: {exc}")
        raise typer.Exit(code=1) from exc


def _parse_suits(value: str) -> tuple[Suit, ...]:
    try:
        return tuple(Suit(symbol) for symbol in value.upper())
    except ValueError as exc:
        raise typer.BadParameter(f"unknown suit in {value!r}", param_hint="--suits") from exc


@app.command("classify")
def classify_cli(
    codes: List[str] = typer.Argument(..., help="Card codes such as SA, HX or J for a Joker."),
) -> None:
    """Report whether the cards form a legal run and of which kind."""

    run = _classify_or_exit(_parse_cards(codes))
    console.print(run_table(run))
    if run.is_ambiguous:
        console.print("[dim]Reads as either kind; coercion strategy decides.[/dim]")


@app.command("score")
def score_cli(
    codes: List[str] = typer.Argument(..., help="Card codes such as SA, HX or J for a Joker."),
    prefer_ascending: bool = typer.Option(
        True,
        "--prefer-ascending/--prefer-equal",
        help="Shape to use when a run reads as either kind.",
    ),
    highest_possible: bool = typer.Option(
        True,
        "--highest/--lowest",
        help="Extend ascending runs upward rather than downward.",
    ),
    suits: str = typer.Option("SDCH", help="Suit preference for Jokers in equal runs."),
) -> None:
    """Resolve the Jokers in a run and print its score."""

    run = _classify_or_exit(_parse_cards(codes))
    try:
        strategy = RunCoercionStrategy(
            prefer_ascending=prefer_ascending,
            highest_possible=highest_possible,
            suit_preference=_parse_suits(suits),
        )
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--suits") from exc

    try:
        resolved = coerce(run, strategy)
    except RaminoError as exc:
        console.print(f"[red]{exc.kind.value}[/red]: {exc}")
        raise typer.Exit(code=1) from exc

    console.print(f"Played: {format_cards(run.cards)}")
    console.print(run_table(resolved, show_points=True))
    console.print(f"[bold]Score: {score_run(resolved)}[/bold]")


@app.command("deal")
def deal_cli(
    seed: int | None = typer.Option(None, help="Random seed for a reproducible deal (omit for randomness)."),
) -> None:
    """Deal a hand from a shuffled double deck."""

    rng = random.Random(seed)
    deck = generate_deck(shuffled=True, rng=rng)
    hand = Hand.draw(deck)
    console.print(f"Hand: {format_cards(hand.cards)}")
    console.print(f"Codes: {encoding.format_codes(hand.cards)}")
    console.print(f"[bold]Hand score: {hand.score()}[/bold] [dim]({len(deck)} cards left in stock)[/dim]")


def main() -> None:
    """Entry-point for the ``ramino`` console script."""

    app()


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    main()
