"""Typer entry-point wiring for the cardkit CLI."""

from __future__ import annotations

import logging
import random
from enum import Enum
from typing import List

import typer
from rich.console import Console
from rich.logging import RichHandler

from .. import deck
from ..cards import Card, find_rank, find_suit
from ..ordering import compare_ranks
from ..render import hand_text
from .render import card_table


class SortMode(str, Enum):
    """Orderings selectable from the command line."""

    NONE = "none"
    SUIT = "suit"
    RANK = "rank"
    RANK_DESC = "rank-desc"


app = typer.Typer(add_completion=False, rich_markup_mode="rich")
console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _validate_labels(faces: List[str], suits: List[str]) -> None:
    unknown_faces = [face for face in faces if find_rank(face) is None]
    if unknown_faces:
        raise typer.BadParameter(f"Unknown face(s): {', '.join(unknown_faces)}", param_hint="--exclude-face")
    unknown_suits = [suit for suit in suits if find_suit(suit) is None]
    if unknown_suits:
        raise typer.BadParameter(f"Unknown suit(s): {', '.join(unknown_suits)}", param_hint="--exclude-suit")


def _options(
    decks: int,
    jokers: int,
    sort: SortMode,
    shuffle: bool,
    seed: int | None,
    exclude_face: List[str],
    exclude_suit: List[str],
) -> list[deck.DeckOption]:
    options: list[deck.DeckOption] = [
        deck.with_additional_decks(decks),
        deck.with_jokers(jokers),
        deck.with_exclusion(exclude_face, exclude_suit),
    ]
    if sort is SortMode.SUIT:
        options.append(deck.with_default_sort())
    elif sort is SortMode.RANK:
        options.append(deck.with_custom_sort())
    elif sort is SortMode.RANK_DESC:
        options.append(deck.with_custom_sort(lambda left, right: compare_ranks(right, left)))
    if shuffle:
        rng = random.Random(seed) if seed is not None else None
        options.append(deck.with_shuffle(rng=rng))
    return options


def _build(
    decks: int,
    jokers: int,
    sort: SortMode,
    shuffle: bool,
    seed: int | None,
    exclude_face: List[str] | None,
    exclude_suit: List[str] | None,
    verbose: bool,
) -> list[Card]:
    _configure_logging(verbose)
    faces = list(exclude_face or [])
    suits = list(exclude_suit or [])
    _validate_labels(faces, suits)
    return deck.build(*_options(decks, jokers, sort, shuffle, seed, faces, suits))


@app.command()
def deal(
    count: int = typer.Option(5, min=0, help="Cards to deal from the top (0 deals the whole deck)."),
    decks: int = typer.Option(0, min=0, help="Additional standard decks to mix in."),
    jokers: int = typer.Option(0, min=0, help="Number of jokers to add."),
    sort: SortMode = typer.Option(SortMode.NONE, case_sensitive=False, help="Ordering applied before shuffling."),
    shuffle: bool = typer.Option(True, "--shuffle/--no-shuffle", help="Shuffle the deck before dealing."),
    seed: int | None = typer.Option(None, help="Random seed for reproducible shuffles (omit for randomness)."),
    exclude_face: List[str] | None = typer.Option(None, "--exclude-face", help="Face to remove, e.g. 2 or Ace."),
    exclude_suit: List[str] | None = typer.Option(None, "--exclude-suit", help="Suit to remove, e.g. Hearts."),
    hidden: int = typer.Option(0, min=0, help="Deal this many of the last cards face down."),
    per_row: int = typer.Option(8, min=1, help="Cards drawn side by side before wrapping."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log deck construction details."),
) -> None:
    """Build a deck and draw the top cards as ASCII art."""

    cards = _build(decks, jokers, sort, shuffle, seed, exclude_face, exclude_suit, verbose)
    hand = cards[:count] if count else cards
    if hidden:
        for card in hand[-hidden:]:
            card.hidden = True
    logger.debug("dealing %d of %d card(s), %d face down", len(hand), len(cards), min(hidden, len(hand)))

    if not hand:
        console.print("[yellow]No cards left to deal.[/yellow]")
        return
    console.print(hand_text(hand, per_row))


@app.command("list")
def list_cards(
    decks: int = typer.Option(0, min=0, help="Additional standard decks to mix in."),
    jokers: int = typer.Option(0, min=0, help="Number of jokers to add."),
    sort: SortMode = typer.Option(SortMode.SUIT, case_sensitive=False, help="Ordering of the listing."),
    shuffle: bool = typer.Option(False, "--shuffle/--no-shuffle", help="Shuffle the deck."),
    seed: int | None = typer.Option(None, help="Random seed for reproducible shuffles (omit for randomness)."),
    exclude_face: List[str] | None = typer.Option(None, "--exclude-face", help="Face to remove, e.g. 2 or Ace."),
    exclude_suit: List[str] | None = typer.Option(None, "--exclude-suit", help="Suit to remove, e.g. Hearts."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log deck construction details."),
) -> None:
    """List every card of the configured deck with its ordering key."""

    cards = _build(decks, jokers, sort, shuffle, seed, exclude_face, exclude_suit, verbose)
    console.print(card_table(cards))
    console.print(f"[cyan]{len(cards)} card(s).[/cyan]")


def main() -> None:
    """Entry-point for the ``cardkit`` script."""

    app()


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    main()
