"""Card abstractions: ranks, suits and the card value object."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Final

from rich.color import ColorSystem
from rich.style import Style

from . import catalog

__all__ = [
    "Rank",
    "SuitColor",
    "Suit",
    "Card",
    "SPADE",
    "DIAMOND",
    "CLUB",
    "HEART",
    "BLACK_JOKER",
    "RED_JOKER",
    "STANDARD_SUITS",
    "JOKER_SUITS",
    "ALL_SUITS",
    "CARD_BACK",
    "MAX_RANK",
    "find_suit",
    "find_rank",
]


class Rank(IntEnum):
    """Card ranks in deck order, with Joker as a pseudo-rank after King."""

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    JOKER = 14

    @classmethod
    def standard(cls) -> tuple["Rank", ...]:
        """Return the thirteen standard ranks in deck order."""

        return tuple(rank for rank in cls if rank is not cls.JOKER)

    def single(self) -> str:
        """Return the short label printed in the card corners."""

        if self is Rank.JOKER:
            return catalog.JOKER_LABEL
        return catalog.RANK_LABELS[self.value - 1]

    @property
    def title(self) -> str:
        if self is Rank.JOKER:
            return catalog.JOKER_LABEL
        return catalog.RANK_TITLES[self.value - 1]

    def matches(self, label: str) -> bool:
        key = catalog.normalise_label(label)
        return key in (self.single().lower(), self.title.lower())


MAX_RANK: Final[Rank] = Rank.KING


class SuitColor(str, Enum):
    """Closed set of colors a suit can be painted with."""

    WHITE = "white"
    BRIGHT_RED = "bright_red"


_COLOR_STYLES: Final[dict[SuitColor, Style]] = {color: Style(color=color.value) for color in SuitColor}


@dataclass(frozen=True, slots=True)
class Suit:
    """Immutable suit definition carrying its glyph, color and ASCII template.

    Identity is ``(value, name)``; the remaining attributes are presentation
    details and take no part in equality or hashing.
    """

    value: int
    name: str
    symbol: str = field(compare=False)
    color: SuitColor = field(compare=False)
    has_rank: bool = field(compare=False)
    ascii_template: tuple[str, ...] = field(compare=False, repr=False)

    def __str__(self) -> str:
        return self.name

    @property
    def is_joker(self) -> bool:
        return not self.has_rank

    def color_text(self, text: str) -> str:
        """Wrap ``text`` in the ANSI escape codes of this suit's color."""

        return _COLOR_STYLES[self.color].render(text, color_system=ColorSystem.STANDARD)

    def matches(self, label: str) -> bool:
        """Return ``True`` if ``label`` names this suit (plural, singular or symbol)."""

        key = catalog.normalise_label(label)
        name = self.name.lower()
        return key in (name, name.removesuffix("s"), self.symbol)


# Template slots: ``top`` is the two-character top-left corner, ``bottom``
# the two-character bottom-right corner.
SPADE: Final[Suit] = Suit(
    value=1,
    name="Spades",
    symbol="♠",
    color=SuitColor.WHITE,
    has_rank=True,
    ascii_template=(
        "┌────────┐",
        "│{top:<2}  .   │",
        r"│   / \  │",
        "│  (_,_) │",
        "│    I {bottom:>2}│",
        "└────────┘",
    ),
)

DIAMOND: Final[Suit] = Suit(
    value=2,
    name="Diamonds",
    symbol="♦",
    color=SuitColor.BRIGHT_RED,
    has_rank=True,
    ascii_template=(
        "┌────────┐",
        r"│{top:<2}  /\  │",
        r"│   /  \ │",
        r"│   \  / │",
        r"│    \/{bottom:>2}│",
        "└────────┘",
    ),
)

CLUB: Final[Suit] = Suit(
    value=3,
    name="Clubs",
    symbol="♣",
    color=SuitColor.WHITE,
    has_rank=True,
    ascii_template=(
        "┌────────┐",
        "│{top:<2}  _   │",
        "│   ( )  │",
        "│  (_x_) │",
        "│    Y {bottom:>2}│",
        "└────────┘",
    ),
)

HEART: Final[Suit] = Suit(
    value=4,
    name="Hearts",
    symbol="♥",
    color=SuitColor.BRIGHT_RED,
    has_rank=True,
    ascii_template=(
        "┌────────┐",
        "│{top:<2} _  _ │",
        r"│  ( \/ )│",
        r"│   \  / │",
        r"│    \/{bottom:>2}│",
        "└────────┘",
    ),
)

BLACK_JOKER: Final[Suit] = Suit(
    value=5,
    name="BlackJoker",
    symbol=catalog.JOKER_SYMBOL,
    color=SuitColor.WHITE,
    has_rank=False,
    ascii_template=(
        "┌────────┐",
        "│JOKER  *│",
        "│  (o o) │",
        r"│   \-/  │",
        "│*  JOKER│",
        "└────────┘",
    ),
)

RED_JOKER: Final[Suit] = Suit(
    value=6,
    name="RedJoker",
    symbol=catalog.JOKER_SYMBOL,
    color=SuitColor.BRIGHT_RED,
    has_rank=False,
    ascii_template=(
        "┌────────┐",
        "│JOKER  +│",
        "│  (o o) │",
        r"│   \-/  │",
        "│+  JOKER│",
        "└────────┘",
    ),
)

STANDARD_SUITS: Final[tuple[Suit, ...]] = (SPADE, DIAMOND, CLUB, HEART)
JOKER_SUITS: Final[tuple[Suit, ...]] = (BLACK_JOKER, RED_JOKER)
ALL_SUITS: Final[tuple[Suit, ...]] = STANDARD_SUITS + JOKER_SUITS

CARD_BACK: Final[tuple[str, ...]] = (
    "┌────────┐",
    "│████████│",
    "│████████│",
    "│████████│",
    "│████████│",
    "└────────┘",
)


def find_suit(label: str) -> Suit | None:
    """Return the suit named by ``label`` or ``None`` when unknown."""

    for suit in ALL_SUITS:
        if suit.matches(label):
            return suit
    return None


def find_rank(label: str) -> Rank | None:
    """Return the rank named by ``label`` or ``None`` when unknown."""

    for rank in Rank:
        if rank.matches(label):
            return rank
    return None


@dataclass(slots=True)
class Card:
    """A playing card; ``hidden`` requests face-down rendering only."""

    suit: Suit
    rank: Rank
    hidden: bool = field(default=False, compare=False)

    def __hash__(self) -> int:
        return hash((self.suit, self.rank))

    def __str__(self) -> str:
        if self.is_joker:
            return catalog.JOKER_LABEL
        return f"{self.rank.title} of {self.suit.symbol}"

    @property
    def is_joker(self) -> bool:
        return self.suit in JOKER_SUITS

    @property
    def absolute_rank(self) -> int:
        from .ordering import absolute_rank

        return absolute_rank(self)

    def copy(self) -> "Card":
        """Return an independent copy of the card, including its hidden flag."""

        return Card(suit=self.suit, rank=self.rank, hidden=self.hidden)

    def render(self) -> str:
        from .render import render_hand

        return render_hand([self])
