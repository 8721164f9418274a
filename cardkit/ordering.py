"""Collision-free ordering keys for cards across suits."""

from __future__ import annotations

from functools import cmp_to_key
from typing import TYPE_CHECKING, Callable, Final, Iterable

from .cards import MAX_RANK, Rank

if TYPE_CHECKING:
    from .cards import Card

__all__ = [
    "CatalogError",
    "RankComparator",
    "ORDERING_COEFFICIENT",
    "compute_coefficient",
    "absolute_rank",
    "default_sort",
    "compare_ranks",
    "custom_sort",
]

RankComparator = Callable[[Rank, Rank], int]


class CatalogError(RuntimeError):
    """Raised when the ordering coefficient cannot be derived from the catalog."""


def compute_coefficient(max_rank_ordinal: int) -> int:
    """Return the smallest power of ten exceeding every rank ordinal's digits.

    The result has one more digit than ``max_rank_ordinal``, so that
    ``suit.value * coefficient + rank`` keeps suit and rank in disjoint
    decimal positions.
    """

    if max_rank_ordinal < 1:
        raise CatalogError(f"maximum rank ordinal must be positive, got {max_rank_ordinal}")
    return 10 ** len(str(int(max_rank_ordinal)))


ORDERING_COEFFICIENT: Final[int] = compute_coefficient(int(MAX_RANK))


def absolute_rank(card: "Card") -> int:
    """Return the total-order key of ``card``: suit first, then rank."""

    return card.suit.value * ORDERING_COEFFICIENT + int(card.rank)


def default_sort(cards: Iterable["Card"]) -> list["Card"]:
    """Return ``cards`` sorted by absolute rank; equal keys keep input order."""

    return sorted(cards, key=absolute_rank)


def compare_ranks(left: Rank, right: Rank) -> int:
    """Ascending rank comparator used when no custom comparator is supplied."""

    return (left > right) - (left < right)


def custom_sort(cards: Iterable["Card"], comparator: RankComparator | None = None) -> list["Card"]:
    """Return ``cards`` stably sorted by ``comparator`` applied to their ranks."""

    compare = comparator or compare_ranks
    key = cmp_to_key(lambda a, b: compare(a.rank, b.rank))
    return sorted(cards, key=key)
