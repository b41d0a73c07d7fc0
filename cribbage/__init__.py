"""Top-level package for the cribbage hand scorer."""

from . import cards, deck, game, guess, hand, rules, scoreboard, subsets
from .cards import Card, Rank, Suit
from .hand import Hand
from .scoreboard import ScoreBoard

__all__ = [
    "cards",
    "deck",
    "game",
    "guess",
    "hand",
    "rules",
    "scoreboard",
    "subsets",
    "Card",
    "Rank",
    "Suit",
    "Hand",
    "ScoreBoard",
]
