from __future__ import annotations

import numpy as np
import pytest

from cribbage.cards import iter_full_deck, parse_cards
from cribbage.deck import Deck, DeckUnderflow


def test_shuffle_keeps_every_card() -> None:
    deck = Deck.seeded(7).shuffle()
    assert len(deck) == 52
    assert set(deck.cards) == set(iter_full_deck())


def test_seeded_shuffles_are_reproducible() -> None:
    first = Deck.seeded(1234).shuffle().cards
    second = Deck.seeded(1234).shuffle().cards
    assert first == second
    assert first != tuple(iter_full_deck())


def test_pick_takes_from_top_and_replace_returns_to_bottom() -> None:
    deck = Deck(rng=np.random.default_rng(0))
    top = deck.cards[:5]
    picked = deck.pick(5)
    assert tuple(picked) == top
    assert len(deck) == 47

    deck.replace(picked)
    assert len(deck) == 52
    assert deck.cards[-5:] == top


def test_pick_more_than_remaining_raises() -> None:
    deck = Deck(cards=parse_cards("5D 3H 2D"))
    with pytest.raises(DeckUnderflow):
        deck.pick(4)
    assert len(deck) == 3
