"""Rendering helpers dedicated to the CLI experience."""

from __future__ import annotations

from typing import Sequence

from rich.text import Text

from ..cards import Card
from ..hand import Hand

CARD_HEIGHT = 5


def card_color(card: Card) -> str:
    return "bright_red" if card.suit.is_red else "bright_black"


def format_card(card: Card) -> str:
    """Return a Rich-markup label for ``card``."""

    color = card_color(card)
    return f"[{color}]{card.rank.value}{card.suit.marker}[/{color}]"


def format_cards(cards: Sequence[Card]) -> str:
    return " ".join(format_card(card) for card in cards)


def card_art(card: Card) -> list[Text]:
    """Return the lines of box art for ``card``, rank in two corners."""

    rank_style = "bold bright_white"
    top = Text("│")
    top.append(card.rank.value.ljust(2), style=rank_style)
    top.append("   │")
    middle = Text("│  ")
    middle.append(card.suit.marker, style=card_color(card))
    middle.append("  │")
    bottom = Text("│   ")
    bottom.append(card.rank.value.rjust(2), style=rank_style)
    bottom.append("│")
    return [Text("╭─────╮"), top, middle, bottom, Text("╰─────╯")]


def hand_art(hand: Hand) -> Text:
    """Render the starter, a gap, then the hand cards side by side."""

    blocks = [card_art(hand.starter), [Text("  ")] * CARD_HEIGHT]
    blocks.extend(card_art(card) for card in hand.cards)
    rows = [Text(" ").join(block[idx] for block in blocks) for idx in range(CARD_HEIGHT)]
    return Text("\n").join(rows)
