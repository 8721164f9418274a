"""Rendering helpers dedicated to the CLI experience."""

from __future__ import annotations

from typing import Sequence

from rich import box
from rich.table import Table

from ..cards import Card, SuitColor

_MARKUP_COLORS = {
    SuitColor.WHITE: "white",
    SuitColor.BRIGHT_RED: "bright_red",
}


def format_card(card: Card) -> str:
    """Return a Rich-markup label for ``card``."""

    if card.hidden:
        return "[dim]??[/dim]"
    color = _MARKUP_COLORS.get(card.suit.color, "white")
    if card.is_joker:
        return f"[{color}]{card.suit.symbol}[/{color}]"
    return f"[{color}]{card.rank.single()}{card.suit.symbol}[/{color}]"


def card_table(cards: Sequence[Card], *, title: str = "Deck") -> Table:
    """Return a Rich table listing ``cards`` with their ordering keys."""

    table = Table(title=title, box=box.SIMPLE_HEAVY)
    table.add_column("#", justify="right")
    table.add_column("Card", justify="center")
    table.add_column("Name", justify="left")
    table.add_column("Suit", justify="left")
    table.add_column("Key", justify="right")

    for idx, card in enumerate(cards, start=1):
        table.add_row(
            str(idx),
            format_card(card),
            str(card),
            card.suit.name,
            str(card.absolute_rank),
        )
    return table
