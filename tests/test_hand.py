from __future__ import annotations

from collections import Counter

import pytest

from cribbage import rules
from cribbage.cards import Rank, parse_card
from cribbage.hand import Hand, HandState
from cribbage.rules import Category, ScoreEntry
from cribbage.scoreboard import ScoreBoardFinalized


def _counts(notation: str) -> Counter[Category]:
    return Hand.from_notation(notation).score_board.category_counts()


@pytest.mark.parametrize(
    ("notation", "total"),
    [
        ("5D 3H 2D 4C 8S", 8),
        ("5D 3H 2D 4C 5S", 12),
        ("2H JH QH 2D 5D", 7),
        ("2D JH QH 2H 5H", 10),
        ("5D JD 5C 5S 5H", 29),
        ("AD 2D 3D 4D 5D", 12),
        ("9D 3D AS JS 8D", 0),
        ("3H 3D 4C 4S 5H", 20),
        ("KC 2D 4D 6D 8D", 4),
    ],
)
def test_hand_totals(notation: str, total: int) -> None:
    assert Hand.from_notation(notation).score == total


def test_two_runs_of_four_a_fifteen_and_a_pair() -> None:
    counts = _counts("5D 3H 2D 4C 5S")
    assert counts == Counter({Category.RUN_OF_FOUR: 2, Category.FIFTEEN: 1, Category.PAIR: 1})


def test_fifteens_are_not_deduplicated() -> None:
    # 5+10 twice over (J and Q), nothing else sums to fifteen.
    assert _counts("2H JH QH 2D 5D")[Category.FIFTEEN] == 2
    # Three fives in four ways plus each five with the jack.
    assert _counts("5D JD 5C 5S 5H")[Category.FIFTEEN] == 8


def test_four_of_a_kind_scores_once() -> None:
    board = Hand.from_notation("5D JD 5C 5S 5H").score_board
    multiples = [
        entry
        for entry in board
        if entry.category in (Category.PAIR, Category.PAIR_ROYAL, Category.DOUBLE_PAIR_ROYAL)
    ]
    assert len(multiples) == 1
    assert multiples[0].category is Category.DOUBLE_PAIR_ROYAL
    assert multiples[0].points == 12
    assert multiples[0].subtype is Rank.FIVE


def test_run_of_five_hides_shorter_runs() -> None:
    counts = _counts("AD 2D 3D 4D 5D")
    assert counts[Category.RUN_OF_FIVE] == 1
    assert counts[Category.RUN_OF_FOUR] == 0
    assert counts[Category.RUN_OF_THREE] == 0


def test_double_double_run_counts_all_four_runs() -> None:
    counts = _counts("3H 3D 4C 4S 5H")
    assert counts[Category.RUN_OF_THREE] == 4
    assert counts[Category.PAIR] == 2


def test_flushes_are_exclusive() -> None:
    five = _counts("AD 2D 3D 4D 5D")
    assert five[Category.FIVE_CARD_FLUSH] == 1
    assert five[Category.HAND_FLUSH] == 0

    four = _counts("2D JH QH 2H 5H")
    assert four[Category.HAND_FLUSH] == 1
    assert four[Category.FIVE_CARD_FLUSH] == 0


def test_his_nobs_references_starter_and_jack() -> None:
    hand = Hand.from_notation("2H JH QH 2D 5D")
    nobs = [entry for entry in hand.score_board if entry.category is Category.HIS_NOBS]
    assert len(nobs) == 1
    assert nobs[0].cards == (parse_card("2H"), parse_card("JH"))


def test_score_board_is_computed_once() -> None:
    hand = Hand.from_notation("5D 3H 2D 4C 8S")
    assert hand.state is HandState.UNSCORED

    board = hand.score_board
    assert hand.state is HandState.SCORED
    assert board.is_finalized
    assert hand.score_board is board


def test_finalized_board_rejects_new_entries() -> None:
    board = Hand.from_notation("5D 3H 2D 4C 8S").score_board
    with pytest.raises(ScoreBoardFinalized):
        board.add(ScoreEntry.of(Category.HIS_NOBS, (parse_card("5D"), parse_card("JD"))))
    assert board.total == 8


def test_scoring_is_deterministic() -> None:
    first = Hand.from_notation("5D 3H 2D 4C 5S").score_board.entries
    second = Hand.from_notation("5D 3H 2D 4C 5S").score_board.entries
    assert first == second


def test_duplicate_cards_are_not_rejected() -> None:
    hand = Hand.from_notation("5D 5D 5D 5D 5D")
    assert hand.score_board.category_counts()[Category.FIVE_CARD_FLUSH] == 1


def test_from_notation_requires_a_card() -> None:
    with pytest.raises(ValueError):
        Hand.from_notation("   ")


def test_disjoint_fifteens_each_score() -> None:
    # 7+8 and 5+K share no card.
    board = Hand.from_notation("AC 7C 8D 5H KS").score_board
    fifteens = [entry for entry in board if entry.category is Category.FIFTEEN]
    assert len(fifteens) == 2
    assert sum(entry.points for entry in fifteens) == 4
    assert not set(fifteens[0].cards) & set(fifteens[1].cards)


def test_score_board_access_while_scoring_is_an_error() -> None:
    hand = Hand.from_notation("5D 3H 2D 4C 8S")
    hand.state = HandState.SCORING
    with pytest.raises(RuntimeError):
        hand.score_board


def test_failed_scoring_pass_resets_state(monkeypatch: pytest.MonkeyPatch) -> None:
    def broken(_subset: object) -> None:
        raise ValueError("evaluator failed")

    monkeypatch.setattr(rules, "consider_fifteen", broken)
    hand = Hand.from_notation("5D 3H 2D 4C 8S")
    with pytest.raises(ValueError, match="evaluator failed"):
        hand.score_board
    assert hand.state is HandState.UNSCORED

    monkeypatch.undo()
    assert hand.score == 8
    assert hand.state is HandState.SCORED
