"""Shuffleable deck used to deal practice hands."""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

import numpy as np

from .cards import Card, iter_full_deck

__all__ = ["DeckUnderflow", "Deck"]

logger = logging.getLogger(__name__)


class DeckUnderflow(RuntimeError):
    """Raised when more cards are requested than the deck holds."""


class Deck:
    """Ordered pile of cards; the top of the deck is index 0."""

    def __init__(
        self,
        cards: Iterable[Card] | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self._cards: list[Card] = list(iter_full_deck() if cards is None else cards)
        self._rng = rng if rng is not None else np.random.default_rng()

    @classmethod
    def seeded(cls, seed: int | None) -> "Deck":
        return cls(rng=np.random.default_rng(seed))

    def __len__(self) -> int:
        return len(self._cards)

    @property
    def cards(self) -> tuple[Card, ...]:
        return tuple(self._cards)

    def shuffle(self) -> "Deck":
        """Randomise the card order in place and return the deck."""

        order = self._rng.permutation(len(self._cards))
        self._cards = [self._cards[int(idx)] for idx in order]
        logger.debug("shuffled deck of %d cards", len(self._cards))
        return self

    def pick(self, count: int) -> list[Card]:
        """Remove and return the top ``count`` cards."""

        if count > len(self._cards):
            raise DeckUnderflow(f"cannot pick {count} card(s) from a deck of {len(self._cards)}")
        picked = self._cards[:count]
        del self._cards[:count]
        return picked

    def replace(self, cards: Sequence[Card]) -> None:
        """Return ``cards`` to the bottom of the deck without validation."""

        self._cards.extend(cards)
