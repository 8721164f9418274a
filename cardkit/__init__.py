"""Top-level package for the cardkit deck builder and renderer."""

from . import cards, catalog, deck, ordering, render

__all__ = [
    "cards",
    "catalog",
    "deck",
    "ordering",
    "render",
]
