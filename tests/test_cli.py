from __future__ import annotations

import re

from typer.testing import CliRunner

from cardkit import deck
from cardkit.cli.main import SortMode, _options, app

runner = CliRunner()
ANSI_PATTERN = re.compile(r"\x1b\[[0-9;]*m")


def _plain(output: str) -> str:
    return ANSI_PATTERN.sub("", output)


def test_deal_draws_requested_cards() -> None:
    result = runner.invoke(app, ["deal", "--count", "3", "--seed", "42", "--per-row", "8"])

    assert result.exit_code == 0, result.output
    lines = [line for line in _plain(result.output).splitlines() if line]
    assert len(lines) == 6
    assert lines[0] == "┌────────┐" * 3


def test_deal_hidden_cards_show_back() -> None:
    result = runner.invoke(app, ["deal", "--count", "2", "--no-shuffle", "--hidden", "1"])

    assert result.exit_code == 0, result.output
    lines = _plain(result.output).splitlines()
    assert lines[1].startswith("│A   .   │")
    assert lines[1].endswith("│████████│")


def test_deal_wraps_rows() -> None:
    result = runner.invoke(app, ["deal", "--count", "3", "--no-shuffle", "--per-row", "2"])

    assert result.exit_code == 0, result.output
    assert _plain(result.output).count("└────────┘") == 3


def test_deal_rejects_unknown_suit() -> None:
    result = runner.invoke(app, ["deal", "--exclude-suit", "Cups"])

    assert result.exit_code != 0
    assert "Cups" in result.output


def test_deal_empty_deck_reports_nothing_to_deal() -> None:
    args = ["deal", "--count", "0", "--no-shuffle"]
    for suit in ("Spades", "Hearts", "Clubs", "Diamonds"):
        args.extend(["--exclude-suit", suit])

    result = runner.invoke(app, args)

    assert result.exit_code == 0, result.output
    assert "No cards left" in result.output


def test_list_prints_card_count() -> None:
    result = runner.invoke(app, ["list", "--jokers", "2", "--exclude-face", "2"])

    assert result.exit_code == 0, result.output
    assert "50 card(s)." in result.output


def test_options_translate_sort_modes() -> None:
    ascending = deck.build(*_options(0, 0, SortMode.RANK, False, None, [], []))
    descending = deck.build(*_options(0, 0, SortMode.RANK_DESC, False, None, [], []))

    assert ascending[0].rank.single() == "A"
    assert descending[0].rank.single() == "K"


def test_seeded_shuffle_is_reproducible() -> None:
    first = deck.build(*_options(1, 2, SortMode.NONE, True, 99, [], []))
    second = deck.build(*_options(1, 2, SortMode.NONE, True, 99, [], []))

    assert first == second
    assert len(first) == 106
