from __future__ import annotations

from cribbage.cards import parse_cards
from cribbage.hand import Hand
from cribbage.subsets import sorted_subsets


def test_enumerates_all_31_distinct_subsets() -> None:
    cards = parse_cards("5D 3H 2D 4C 8S")
    subsets = sorted_subsets(cards)

    assert len(subsets) == 31
    assert all(1 <= len(subset) <= 5 for subset in subsets)
    assert len({frozenset(subset) for subset in subsets}) == 31


def test_subsets_are_largest_first() -> None:
    sizes = [len(subset) for subset in sorted_subsets(parse_cards("KS QH JD 10C 9S"))]
    assert sizes == sorted(sizes, reverse=True)
    assert sizes[0] == 5
    assert sizes[-5:] == [1, 1, 1, 1, 1]


def test_each_subset_is_in_total_order() -> None:
    for subset in sorted_subsets(parse_cards("5D 5C 2D 4C 5S")):
        keys = [card.total_order for card in subset]
        assert keys == sorted(keys)


def test_hand_subsets_include_starter() -> None:
    hand = Hand.from_notation("2H JH QH 2D 5D")
    assert set(hand.subsets()[0]) == set(hand.all_cards)
