"""Card abstractions and notation helpers for cribbage scoring."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final, Iterable, Iterator

__all__ = [
    "Suit",
    "Rank",
    "Card",
    "parse_card",
    "parse_cards",
    "iter_full_deck",
    "format_cards",
]


class Suit(str, Enum):
    """Enumeration of the four suits, declared in canonical sort order."""

    CLUBS = "C"
    DIAMONDS = "D"
    HEARTS = "H"
    SPADES = "S"

    @property
    def order(self) -> int:
        """Return the 1-4 suit rank used for canonical card ordering."""

        return _SUIT_ORDER[self]

    @property
    def marker(self) -> str:
        return _SUIT_MARKERS[self]

    @property
    def display_name(self) -> str:
        return self.name.title()

    @property
    def is_red(self) -> bool:
        return self in (Suit.HEARTS, Suit.DIAMONDS)


class Rank(str, Enum):
    """Enumeration of ranks, ace low."""

    ACE = "A"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"

    @classmethod
    def ordered(cls) -> tuple["Rank", ...]:
        """Return ranks in run order."""

        return tuple(cls)

    @property
    def run_value(self) -> int:
        return _RUN_VALUES[self]

    @property
    def sum_value(self) -> int:
        return min(self.run_value, 10)


_SUIT_ORDER: Final[dict[Suit, int]] = {suit: idx for idx, suit in enumerate(Suit, start=1)}
_SUIT_MARKERS: Final[dict[Suit, str]] = {
    Suit.CLUBS: "♣",
    Suit.DIAMONDS: "♦",
    Suit.HEARTS: "♥",
    Suit.SPADES: "♠",
}
_RUN_VALUES: Final[dict[Rank, int]] = {rank: idx for idx, rank in enumerate(Rank, start=1)}
_RANK_ALIASES: Final[dict[str, Rank]] = {"T": Rank.TEN}


@dataclass(frozen=True, slots=True)
class Card:
    """Value object describing a single playing card."""

    rank: Rank
    suit: Suit

    @property
    def sum_value(self) -> int:
        """Return the counting value used for fifteens (face cards count ten)."""

        return self.rank.sum_value

    @property
    def run_value(self) -> int:
        """Return the ordinal position of the rank, ace low, king 13."""

        return self.rank.run_value

    @property
    def total_order(self) -> int:
        """Return a key that sorts cards by rank, then by suit."""

        return self.run_value * 10 + self.suit.order

    @property
    def code(self) -> str:
        return f"{self.rank.value}{self.suit.value}"

    def label(self) -> str:
        """Create a display label with the suit marker, e.g. ``5♦``."""

        return f"{self.rank.value}{self.suit.marker}"

    def __str__(self) -> str:
        return self.label()


def parse_card(code: str) -> Card:
    """Parse compact notation such as ``5D``, ``10H`` or ``TS``."""

    text = code.strip().upper()
    if len(text) < 2:
        raise ValueError(f"invalid card code '{code}'")
    rank_text, suit_text = text[:-1], text[-1]
    try:
        suit = Suit(suit_text)
    except ValueError:
        raise ValueError(f"invalid suit in card code '{code}'") from None
    rank = _RANK_ALIASES.get(rank_text)
    if rank is None:
        try:
            rank = Rank(rank_text)
        except ValueError:
            raise ValueError(f"invalid rank in card code '{code}'") from None
    return Card(rank=rank, suit=suit)


def parse_cards(text: str) -> list[Card]:
    """Parse whitespace separated card codes, preserving their order."""

    return [parse_card(token) for token in text.split()]


def iter_full_deck() -> Iterator[Card]:
    """Yield all 52 cards, suit by suit in rank order."""

    for suit in Suit:
        for rank in Rank.ordered():
            yield Card(rank=rank, suit=suit)


def format_cards(cards: Iterable[Card]) -> str:
    return " ".join(card.label() for card in cards)
