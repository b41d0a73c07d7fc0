"""Subset enumeration over the five cards of a hand."""

from __future__ import annotations

from itertools import combinations
from typing import Sequence

from .cards import Card

__all__ = ["Subset", "sorted_subsets"]

Subset = tuple[Card, ...]


def sorted_subsets(cards: Sequence[Card]) -> list[Subset]:
    """Return every non-empty subset of ``cards``, largest first.

    Each subset is sorted by ascending ``total_order``. Run detection relies on
    that, and the multiples and runs evaluators rely on larger groups being
    visited before the groups they contain.
    """

    ordered = sorted(cards, key=lambda card: card.total_order)
    subsets: list[Subset] = []
    for size in range(len(ordered), 0, -1):
        subsets.extend(combinations(ordered, size))
    return subsets
