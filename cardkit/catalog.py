"""Static name and label tables for the playing-card catalog."""

from __future__ import annotations

from typing import Final

RANK_LABELS: Final[list[str]] = ["A", "2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K"]
RANK_TITLES: Final[list[str]] = [
    "Ace",
    "Two",
    "Three",
    "Four",
    "Five",
    "Six",
    "Seven",
    "Eight",
    "Nine",
    "Ten",
    "Jack",
    "Queen",
    "King",
]
JOKER_LABEL: Final[str] = "Joker"

SUIT_NAMES: Final[list[str]] = ["Spades", "Diamonds", "Clubs", "Hearts"]
SUIT_SYMBOLS: Final[list[str]] = ["♠", "♦", "♣", "♥"]
JOKER_SUIT_NAMES: Final[list[str]] = ["BlackJoker", "RedJoker"]
JOKER_SYMBOL: Final[str] = "🃏"

LABEL_TO_TITLE: Final[dict[str, str]] = dict(zip(RANK_LABELS, RANK_TITLES))
SYMBOL_TO_SUIT_NAME: Final[dict[str, str]] = dict(zip(SUIT_SYMBOLS, SUIT_NAMES))

STANDARD_DECK_SIZE: Final[int] = len(SUIT_NAMES) * len(RANK_LABELS)
GLYPH_HEIGHT: Final[int] = 6
GLYPH_WIDTH: Final[int] = 10


def normalise_label(label: str) -> str:
    """Return ``label`` stripped and lower-cased for lookups."""

    return label.strip().lower()
