"""Tests covering ASCII-art rendering of single cards and hands."""

from __future__ import annotations

import re

from rich.text import Text

from cardkit.cards import BLACK_JOKER, CARD_BACK, CLUB, DIAMOND, HEART, RED_JOKER, SPADE, Card, Rank
from cardkit.render import hand_text, render_glyph, render_hand, render_rows

ANSI_PATTERN = re.compile(r"\x1b\[[0-9;]*m")


def _strip_ansi(text: str) -> str:
    return ANSI_PATTERN.sub("", text)


def test_glyph_substitutes_rank_in_both_corners() -> None:
    glyph = render_glyph(Card(SPADE, Rank.ACE))

    assert len(glyph) == 6
    assert glyph[1].startswith("│A ")
    assert glyph[4].endswith(" A│")


def test_glyph_keeps_width_for_ten() -> None:
    for suit in (SPADE, DIAMOND, CLUB, HEART):
        glyph = render_glyph(Card(suit, Rank.TEN))
        assert all(len(line) == 10 for line in glyph)
        assert glyph[1].startswith("│10")
        assert glyph[4].endswith("10│")


def test_joker_glyph_is_template_verbatim() -> None:
    assert render_glyph(Card(BLACK_JOKER, Rank.JOKER)) == list(BLACK_JOKER.ascii_template)
    assert render_glyph(Card(RED_JOKER, Rank.JOKER)) == list(RED_JOKER.ascii_template)


def test_hidden_glyph_is_card_back() -> None:
    assert render_glyph(Card(HEART, Rank.QUEEN, hidden=True)) == list(CARD_BACK)


def test_render_empty_hand() -> None:
    assert render_hand([]) == ""


def test_render_hidden_card_has_no_color() -> None:
    output = render_hand([Card(DIAMOND, Rank.KING, hidden=True)])

    assert output == "\n".join(CARD_BACK)
    assert "\x1b[" not in output


def test_render_visible_card_is_colored() -> None:
    output = render_hand([Card(HEART, Rank.TWO)])

    for line in output.split("\n"):
        assert line.startswith("\x1b[91m")
        assert line.endswith("\x1b[0m")


def test_render_two_cards_side_by_side() -> None:
    output = render_hand([Card(CLUB, Rank.SEVEN), Card(HEART, Rank.TEN)])
    lines = _strip_ansi(output).split("\n")

    assert len(lines) == 6
    assert all(len(line) == 20 for line in lines)
    assert lines[1].startswith("│7 ")
    assert lines[1][10:].startswith("│10")


def test_render_mixed_hidden_and_visible() -> None:
    visible = Card(SPADE, Rank.JACK)
    hidden = Card(HEART, Rank.JACK, hidden=True)

    lines = render_hand([visible, hidden]).split("\n")

    for row, line in enumerate(lines):
        assert line == SPADE.color_text(render_glyph(visible)[row]) + CARD_BACK[row]


def test_card_render_matches_single_card_hand() -> None:
    card = Card(DIAMOND, Rank.FOUR)

    assert card.render() == render_hand([card])


def test_render_rows_wraps_hand() -> None:
    cards = [Card(SPADE, rank) for rank in Rank.standard()[:5]]

    blocks = _strip_ansi(render_rows(cards, per_row=2)).split("\n\n")

    assert len(blocks) == 3
    assert [len(block.split("\n")[0]) for block in blocks] == [20, 20, 10]


def test_hand_text_is_rich_text() -> None:
    text = hand_text([Card(SPADE, Rank.ACE), Card(HEART, Rank.ACE)])

    assert isinstance(text, Text)
    assert "\x1b[" not in text.plain
    assert len(text.plain.split("\n")) == 6


def test_render_every_suit_and_joker_side_by_side() -> None:
    cards = [Card(suit, Rank.TEN) for suit in (SPADE, DIAMOND, CLUB, HEART)]
    cards += [Card(BLACK_JOKER, Rank.JOKER), Card(RED_JOKER, Rank.JOKER), Card(SPADE, Rank.ACE, hidden=True)]

    lines = _strip_ansi(render_hand(cards)).split("\n")

    assert len(lines) == 6
    assert all(len(line) == 10 * len(cards) for line in lines)
    assert lines[1][40:50] == "│JOKER  *│"
