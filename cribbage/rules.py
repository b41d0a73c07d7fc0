"""Scoring categories and the rule evaluators for cribbage hands."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Final, Sequence

from .cards import Card, Rank

__all__ = [
    "Category",
    "ScoreEntry",
    "ClaimState",
    "MULTIPLE_CATEGORIES",
    "RUN_CATEGORIES",
    "is_run",
    "consider_multiples",
    "consider_runs",
    "consider_fifteen",
    "consider_five_card_flush",
    "consider_hand_flush",
    "consider_nobs",
]

FIFTEEN_TARGET: Final[int] = 15


class Category(str, Enum):
    """Closed set of scoring categories, valued by their display names."""

    FIFTEEN = "Fifteen"
    PAIR = "Pair"
    PAIR_ROYAL = "Pair Royal"
    DOUBLE_PAIR_ROYAL = "Double Pair Royal"
    RUN_OF_THREE = "Run of Three"
    RUN_OF_FOUR = "Run of Four"
    RUN_OF_FIVE = "Run of Five"
    HAND_FLUSH = "Hand Flush"
    FIVE_CARD_FLUSH = "Five Card Flush"
    HIS_NOBS = "His Nobs"

    @property
    def points(self) -> int:
        return _POINTS[self]


_POINTS: Final[dict[Category, int]] = {
    Category.FIFTEEN: 2,
    Category.PAIR: 2,
    Category.PAIR_ROYAL: 6,
    Category.DOUBLE_PAIR_ROYAL: 12,
    Category.RUN_OF_THREE: 3,
    Category.RUN_OF_FOUR: 4,
    Category.RUN_OF_FIVE: 5,
    Category.HAND_FLUSH: 4,
    Category.FIVE_CARD_FLUSH: 5,
    Category.HIS_NOBS: 1,
}

MULTIPLE_CATEGORIES: Final[dict[int, Category]] = {
    2: Category.PAIR,
    3: Category.PAIR_ROYAL,
    4: Category.DOUBLE_PAIR_ROYAL,
}

RUN_CATEGORIES: Final[dict[int, Category]] = {
    3: Category.RUN_OF_THREE,
    4: Category.RUN_OF_FOUR,
    5: Category.RUN_OF_FIVE,
}


@dataclass(frozen=True, slots=True)
class ScoreEntry:
    """A single scoring hit: the category, the cards behind it and its points."""

    category: Category
    cards: tuple[Card, ...]
    points: int
    subtype: Rank | None = None

    @classmethod
    def of(cls, category: Category, cards: Sequence[Card], subtype: Rank | None = None) -> "ScoreEntry":
        return cls(category=category, cards=tuple(cards), points=category.points, subtype=subtype)


@dataclass(slots=True)
class ClaimState:
    """Dedup markers carried across one scoring pass over a hand's subsets.

    ``ranks`` holds ranks already scored as a multiple. ``run_cards`` maps each
    card consumed by a run to the size of the largest run that consumed it.
    """

    ranks: set[Rank] = field(default_factory=set)
    run_cards: dict[Card, int] = field(default_factory=dict)


def _all_same(values: Sequence[object]) -> bool:
    return all(value == values[0] for value in values)


def consider_multiples(subset: Sequence[Card], claims: ClaimState) -> ScoreEntry | None:
    """Score a pair, pair royal or double pair royal for ``subset``.

    Subsets must arrive largest first so four of a kind is claimed once and the
    smaller same-rank groups inside it are skipped.
    """

    size = len(subset)
    if size not in MULTIPLE_CATEGORIES:
        return None
    rank = subset[0].rank
    if rank in claims.ranks or not _all_same([card.rank for card in subset]):
        return None
    claims.ranks.add(rank)
    return ScoreEntry(
        category=MULTIPLE_CATEGORIES[size],
        cards=tuple(subset),
        points=size * (size - 1),
        subtype=rank,
    )


def is_run(subset: Sequence[Card]) -> bool:
    """Return ``True`` when the cards form consecutive ranks (order-insensitive)."""

    values = sorted(card.run_value for card in subset)
    return all(high - low == 1 for low, high in zip(values, values[1:]))


def consider_runs(subset: Sequence[Card], claims: ClaimState) -> ScoreEntry | None:
    """Score a run of three to five cards not covered by a longer run."""

    size = len(subset)
    if size < 3 or not is_run(subset):
        return None
    if any(claims.run_cards.get(card, 0) > size for card in subset):
        return None
    for card in subset:
        claims.run_cards[card] = max(claims.run_cards.get(card, 0), size)
    return ScoreEntry.of(RUN_CATEGORIES[size], subset)


def consider_fifteen(subset: Sequence[Card]) -> ScoreEntry | None:
    if sum(card.sum_value for card in subset) != FIFTEEN_TARGET:
        return None
    return ScoreEntry.of(Category.FIFTEEN, subset)


def consider_five_card_flush(subset: Sequence[Card]) -> ScoreEntry | None:
    if len(subset) != 5 or not _all_same([card.suit for card in subset]):
        return None
    return ScoreEntry.of(Category.FIVE_CARD_FLUSH, subset)


def consider_hand_flush(starter: Card, cards: Sequence[Card]) -> ScoreEntry | None:
    """Score four hand cards of one suit when the starter does not match."""

    if not cards or starter.suit == cards[0].suit:
        return None
    if not _all_same([card.suit for card in cards]):
        return None
    return ScoreEntry.of(Category.HAND_FLUSH, cards)


def consider_nobs(starter: Card, cards: Sequence[Card]) -> ScoreEntry | None:
    """Score the jack of the starter's suit held in hand."""

    for card in cards:
        if card.rank is Rank.JACK and card.suit == starter.suit:
            return ScoreEntry.of(Category.HIS_NOBS, (starter, card))
    return None
