"""ASCII-art rendering of cards, one card or a whole hand side by side."""

from __future__ import annotations

from typing import Sequence

from rich.text import Text

from . import catalog
from .cards import CARD_BACK, Card

__all__ = ["render_glyph", "render_hand", "render_rows", "hand_text"]


def render_glyph(card: Card) -> list[str]:
    """Return the six uncolored lines that draw ``card``."""

    if card.hidden:
        return list(CARD_BACK)
    template = card.suit.ascii_template
    if not card.suit.has_rank:
        return list(template)
    label = card.rank.single()
    return [line.format(top=label, bottom=label) for line in template]


def render_hand(cards: Sequence[Card]) -> str:
    """Render ``cards`` left to right as one multi-line block.

    Each visible card is painted with its suit color; hidden cards are left
    uncolored. An empty hand renders as an empty string.
    """

    if not cards:
        return ""
    glyphs = [render_glyph(card) for card in cards]
    lines: list[str] = []
    for row in range(catalog.GLYPH_HEIGHT):
        segments = []
        for card, glyph in zip(cards, glyphs):
            segment = glyph[row]
            segments.append(segment if card.hidden else card.suit.color_text(segment))
        lines.append("".join(segments))
    return "\n".join(lines).strip("\n")


def render_rows(cards: Sequence[Card], per_row: int = 8) -> str:
    """Render ``cards`` in blocks of at most ``per_row`` cards."""

    per_row = max(1, per_row)
    blocks = [render_hand(cards[start : start + per_row]) for start in range(0, len(cards), per_row)]
    return "\n\n".join(blocks)


def hand_text(cards: Sequence[Card], per_row: int = 8) -> Text:
    """Return the rendered cards as a Rich :class:`~rich.text.Text`."""

    return Text.from_ansi(render_rows(cards, per_row))
