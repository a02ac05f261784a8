"""Rendering helpers dedicated to the CLI experience."""

from __future__ import annotations

from typing import Iterable

from rich import box
from rich.table import Table

from ..cards import Card, Suit
from ..runs import Run

_SUIT_COLORS = {
    Suit.SPADES: "cyan",
    Suit.HEARTS: "red",
    Suit.DIAMONDS: "magenta",
    Suit.CLUBS: "green",
}


def format_card(card: Card) -> str:
    """Return a Rich-rendered label for ``card``."""

    if card.is_joker:
        return "[bold yellow]🃏[/bold yellow]"
    color = _SUIT_COLORS.get(card.suit, "white")
    return f"[{color}]{card.label()}[/{color}]"


def format_cards(cards: Iterable[Card]) -> str:
    return " ".join(format_card(card) for card in cards)


def run_table(run: Run, *, title: str | None = None, show_points: bool = False) -> Table:
    """Return a table listing the cards of ``run`` in stored order."""

    table = Table(title=title or f"{run.kind.value.title()} run", box=box.SIMPLE_HEAVY)
    table.add_column("#", justify="right")
    table.add_column("Card", justify="center")
    table.add_column("Name")
    if show_points:
        table.add_column("Points", justify="right")

    for idx, card in enumerate(run.cards, start=1):
        row = [str(idx), format_card(card), card.format_simple()]
        if show_points:
            row.append(str(card.points))
        table.add_row(*row)
    return table
