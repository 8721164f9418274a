"""Deck construction driven by composable option functions.

Options mutate a transient :class:`DeckConfig`; :func:`build` then interprets
the record in a fixed stage order:

1. standard 52-card base
2. additional decks (linear: ``N`` extra copies of the base)
3. jokers, alternating black and red
4. default sort or custom sort
5. shuffle
6. face/suit exclusion, then predicate filters

Example::

    cards = build(with_jokers(2), with_additional_decks(1), with_shuffle())
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Protocol, Sequence

from .cards import BLACK_JOKER, JOKER_SUITS, RED_JOKER, STANDARD_SUITS, Card, Rank
from .ordering import RankComparator, custom_sort, default_sort

__all__ = [
    "DeckConfig",
    "DeckOption",
    "Shuffler",
    "build",
    "standard_cards",
    "from_decks",
    "add_jokers",
    "exclude_cards",
    "shuffle",
    "with_shuffle",
    "with_default_sort",
    "with_custom_sort",
    "with_jokers",
    "with_additional_decks",
    "with_exclusion",
    "with_filter",
]

logger = logging.getLogger(__name__)

CardPredicate = Callable[[Card], bool]


class Shuffler(Protocol):
    """Anything that can shuffle a list in place, e.g. :class:`random.Random`."""

    def shuffle(self, seq: List[Card]) -> None: ...


@dataclass(slots=True)
class DeckConfig:
    """Configuration record populated by deck options for a single build."""

    apply_default_sort: bool = False
    apply_custom_sort: bool = False
    comparator: RankComparator | None = None
    is_shuffle: bool = False
    rng: Shuffler | None = None
    number_of_jokers: int = 0
    number_of_additional_decks: int = 0
    exclude_faces: list[str] = field(default_factory=list)
    exclude_suits: list[str] = field(default_factory=list)
    filters: list[CardPredicate] = field(default_factory=list)


DeckOption = Callable[[DeckConfig], None]


def _count(value: object) -> int:
    """Clamp an option count to a non-negative int; anything else counts as zero."""

    if isinstance(value, bool) or not isinstance(value, int):
        return 0
    return max(0, value)


def _labels(values: Iterable[str] | str | None) -> list[str]:
    """Normalise an exclusion list; a bare string is a single label."""

    if isinstance(values, str):
        return [values]
    return [value for value in values or () if isinstance(value, str)]


def with_shuffle(enabled: bool = True, rng: Shuffler | None = None) -> DeckOption:
    """Shuffle the final sequence, after any sort, using ``rng`` if given."""

    def apply(config: DeckConfig) -> None:
        config.is_shuffle = enabled
        config.rng = rng

    return apply


def with_default_sort(enabled: bool = True) -> DeckOption:
    def apply(config: DeckConfig) -> None:
        config.apply_default_sort = enabled

    return apply


def with_custom_sort(comparator: RankComparator | None = None, enabled: bool = True) -> DeckOption:
    """Sort by a ``(Rank, Rank) -> int`` comparator; ``None`` sorts ranks ascending.

    The custom sort takes precedence when the default sort is also enabled.
    """

    def apply(config: DeckConfig) -> None:
        config.apply_custom_sort = enabled
        config.comparator = comparator

    return apply


def with_jokers(count: int) -> DeckOption:
    def apply(config: DeckConfig) -> None:
        config.number_of_jokers = _count(count)

    return apply


def with_additional_decks(count: int) -> DeckOption:
    """Add ``count`` extra full copies of the standard deck."""

    def apply(config: DeckConfig) -> None:
        config.number_of_additional_decks = _count(count)

    return apply


def with_exclusion(
    faces: Iterable[str] | str | None = None,
    suits: Iterable[str] | str | None = None,
) -> DeckOption:
    """Remove cards by face, by suit, or by face+suit pairs when both are given.

    Faces accept the corner label ("A", "10") or the rank title ("Ace");
    suits accept the name ("Hearts", "Heart") or the symbol ("♥").
    """

    def apply(config: DeckConfig) -> None:
        config.exclude_faces = _labels(faces)
        config.exclude_suits = _labels(suits)

    return apply


def with_filter(predicate: CardPredicate) -> DeckOption:
    """Drop every card for which ``predicate`` returns ``True``."""

    def apply(config: DeckConfig) -> None:
        config.filters.append(predicate)

    return apply


def standard_cards() -> list[Card]:
    """Return one standard deck: every rank of every suit, face up."""

    return [Card(suit=suit, rank=rank) for suit in STANDARD_SUITS for rank in Rank.standard()]


def from_decks(*decks: Sequence[Card]) -> list[Card]:
    """Concatenate ``decks`` into a new list of independent card copies."""

    return [card.copy() for deck in decks for card in deck]


def _jokers(count: int) -> list[Card]:
    suits = (BLACK_JOKER, RED_JOKER)
    return [Card(suit=suits[idx % 2], rank=Rank.JOKER) for idx in range(_count(count))]


def add_jokers(cards: Sequence[Card], count: int = 2) -> list[Card]:
    """Return ``cards`` followed by ``count`` jokers, black first."""

    return list(cards) + _jokers(count)


def shuffle(cards: Iterable[Card], rng: Shuffler | None = None) -> list[Card]:
    """Return a shuffled copy of ``cards``."""

    shuffled = list(cards)
    (rng or random).shuffle(shuffled)
    return shuffled


def _face_excluded(card: Card, faces: Sequence[str]) -> bool:
    return any(card.rank.matches(face) for face in faces)


def _suit_excluded(card: Card, suits: Sequence[str]) -> bool:
    return any(card.suit.matches(suit) for suit in suits)


def exclude_cards(cards: Iterable[Card], faces: Sequence[str], suits: Sequence[str]) -> list[Card]:
    """Apply the face/suit exclusion rule to ``cards``.

    Only faces: drop matching faces in every suit. Only suits: drop those
    suits. Both: drop cards matching a listed face *and* a listed suit, and
    never drop jokers. Neither: keep everything.
    """

    if faces and suits:
        return [
            card
            for card in cards
            if card.suit in JOKER_SUITS or not (_face_excluded(card, faces) and _suit_excluded(card, suits))
        ]
    if faces:
        return [card for card in cards if not _face_excluded(card, faces)]
    if suits:
        return [card for card in cards if not _suit_excluded(card, suits)]
    return list(cards)


def build(*options: DeckOption) -> list[Card]:
    """Apply ``options`` to a fresh configuration and construct the deck."""

    config = DeckConfig()
    for option in options:
        option(config)

    base = standard_cards()
    cards = from_decks(*([base] * (config.number_of_additional_decks + 1)))
    cards.extend(_jokers(config.number_of_jokers))

    if config.apply_custom_sort:
        cards = custom_sort(cards, config.comparator)
    elif config.apply_default_sort:
        cards = default_sort(cards)

    if config.is_shuffle:
        cards = shuffle(cards, config.rng)

    cards = exclude_cards(cards, config.exclude_faces, config.exclude_suits)
    for predicate in config.filters:
        cards = [card for card in cards if not predicate(card)]

    logger.debug(
        "built deck of %d card(s): decks=%d jokers=%d sort=%s shuffle=%s faces=%s suits=%s filters=%d",
        len(cards),
        config.number_of_additional_decks + 1,
        config.number_of_jokers,
        "custom" if config.apply_custom_sort else "default" if config.apply_default_sort else "none",
        config.is_shuffle,
        config.exclude_faces,
        config.exclude_suits,
        len(config.filters),
    )
    return cards
