"""Round driver for the score-guessing trainer."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .deck import Deck
from .guess import GuessResult, grade_guess
from .hand import Hand

__all__ = ["GameConfig", "GuessingGame", "HAND_CARD_COUNT"]

logger = logging.getLogger(__name__)

HAND_CARD_COUNT = 5


@dataclass(frozen=True, slots=True)
class GameConfig:
    """Runtime options for a guessing session."""

    seed: int | None = None
    reveal_breakdown: bool = True


@dataclass(slots=True)
class GuessingGame:
    """Deals practice hands and grades guesses, tracking the correct streak."""

    config: GameConfig = field(default_factory=GameConfig)
    streak: int = 0
    rounds: int = 0
    current_hand: Hand | None = None
    _deck: Deck = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._deck = Deck.seeded(self.config.seed).shuffle()

    @property
    def hand(self) -> Hand:
        if self.current_hand is None:
            raise RuntimeError("no hand dealt; call prep_next_turn() first")
        return self.current_hand

    def prep_next_turn(self) -> Hand:
        """Deal the next hand, then return its cards to the deck and reshuffle."""

        cards = self._deck.pick(HAND_CARD_COUNT)
        self.current_hand = Hand.from_cards(cards)
        self.rounds += 1
        self._deck.replace(cards)
        self._deck.shuffle()
        logger.debug("round %d dealt %s", self.rounds, self.current_hand.label())
        return self.current_hand

    def handle_guess(self, text: str) -> GuessResult | None:
        """Grade ``text`` against the current hand.

        Returns ``None`` for unparseable input, leaving the streak untouched.
        """

        result = grade_guess(text, self.hand.score_board)
        if result is None:
            return None
        if result.is_correct:
            self.streak += 1
        else:
            self.streak = 0
        return result
