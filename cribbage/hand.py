"""Five-card cribbage hand with lazily computed score."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence

from . import rules
from .cards import Card, format_cards, parse_cards
from .scoreboard import ScoreBoard
from .subsets import Subset, sorted_subsets

__all__ = ["HandState", "Hand"]

logger = logging.getLogger(__name__)


class HandState(str, Enum):
    """Scoring lifecycle of a hand."""

    UNSCORED = "unscored"
    SCORING = "scoring"
    SCORED = "scored"


@dataclass(slots=True)
class Hand:
    """A starter card plus the four cards held in hand.

    The score board is built on first access and cached for the lifetime of the
    hand. Card distinctness is not checked.
    """

    starter: Card
    cards: tuple[Card, ...]
    state: HandState = field(default=HandState.UNSCORED, init=False, compare=False)
    _board: ScoreBoard | None = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.cards = tuple(self.cards)

    @classmethod
    def from_cards(cls, cards: Sequence[Card]) -> "Hand":
        """Build a hand whose first card is the starter."""

        if not cards:
            raise ValueError("a hand needs at least a starter card")
        return cls(starter=cards[0], cards=tuple(cards[1:]))

    @classmethod
    def from_notation(cls, text: str) -> "Hand":
        """Parse a hand string such as ``"5D 3H 2D 4C 8S"`` (starter first)."""

        return cls.from_cards(parse_cards(text))

    @property
    def all_cards(self) -> tuple[Card, ...]:
        return (self.starter, *self.cards)

    def subsets(self) -> list[Subset]:
        return sorted_subsets(self.all_cards)

    @property
    def score_board(self) -> ScoreBoard:
        if self.state is HandState.SCORED and self._board is not None:
            return self._board
        if self.state is HandState.SCORING:
            raise RuntimeError("score board requested while the hand is being scored")
        self._board = self._score()
        return self._board

    @property
    def score(self) -> int:
        return self.score_board.total

    def _score(self) -> ScoreBoard:
        self.state = HandState.SCORING
        board = ScoreBoard()
        try:
            self._sweep(board)
        except Exception:
            self.state = HandState.UNSCORED
            raise
        board.finalize()
        self.state = HandState.SCORED
        logger.debug("scored %s: %d entries, total %d", self.label(), len(board), board.total)
        return board

    def _sweep(self, board: ScoreBoard) -> None:
        claims = rules.ClaimState()

        for entry in (
            rules.consider_nobs(self.starter, self.cards),
            rules.consider_hand_flush(self.starter, self.cards),
        ):
            if entry is not None:
                board.add(entry)

        for subset in self.subsets():
            for entry in (
                rules.consider_multiples(subset, claims),
                rules.consider_runs(subset, claims),
                rules.consider_fifteen(subset),
                rules.consider_five_card_flush(subset),
            ):
                if entry is not None:
                    board.add(entry)

    def label(self) -> str:
        return f"{self.starter.label()} | {format_cards(self.cards)}"

    def __str__(self) -> str:
        return self.label()
