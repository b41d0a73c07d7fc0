"""Guess grammar, lexer and grader.

Two guess syntaxes are accepted. A numeric guess is one or more
whitespace-separated non-negative integers, which are summed. Anything else is
treated as a symbolic guess: whitespace is ignored and the text must lex
completely into the tokens below.

====== ===================
Token  Category
====== ===================
``f``  Fifteen
``n``  His Nobs
``s``  Hand Flush
``S``  Five Card Flush
``r3`` Run of Three
``r4`` Run of Four
``r5`` Run of Five
``p``  Pair (also ``p2``)
``p3`` Pair Royal
``p4`` Double Pair Royal
====== ===================
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Final, Mapping, Sequence

from .rules import Category
from .scoreboard import ScoreBoard

__all__ = [
    "TokenKind",
    "GuessGrammarError",
    "LexResult",
    "NumericGuess",
    "SymbolicGuess",
    "GuessOutcome",
    "Discrepancy",
    "GuessResult",
    "lex_symbolic",
    "parse_guess",
    "grade",
    "grade_guess",
    "shorthand_for",
]

logger = logging.getLogger(__name__)


class TokenKind(str, Enum):
    """Token kinds recognised by the symbolic guess lexer."""

    FIFTEEN = "f"
    NOBS = "n"
    HAND_FLUSH = "s"
    FIVE_CARD_FLUSH = "S"
    RUN_OF_THREE = "r3"
    RUN_OF_FOUR = "r4"
    RUN_OF_FIVE = "r5"
    PAIR = "p2"
    PAIR_ROYAL = "p3"
    DOUBLE_PAIR_ROYAL = "p4"


TOKEN_CATEGORIES: Final[dict[TokenKind, Category]] = {
    TokenKind.FIFTEEN: Category.FIFTEEN,
    TokenKind.NOBS: Category.HIS_NOBS,
    TokenKind.HAND_FLUSH: Category.HAND_FLUSH,
    TokenKind.FIVE_CARD_FLUSH: Category.FIVE_CARD_FLUSH,
    TokenKind.RUN_OF_THREE: Category.RUN_OF_THREE,
    TokenKind.RUN_OF_FOUR: Category.RUN_OF_FOUR,
    TokenKind.RUN_OF_FIVE: Category.RUN_OF_FIVE,
    TokenKind.PAIR: Category.PAIR,
    TokenKind.PAIR_ROYAL: Category.PAIR_ROYAL,
    TokenKind.DOUBLE_PAIR_ROYAL: Category.DOUBLE_PAIR_ROYAL,
}

# Canonical spelling used when writing a board back out as a guess.
_SHORTHAND: Final[dict[Category, str]] = {
    Category.FIFTEEN: "f",
    Category.HIS_NOBS: "n",
    Category.HAND_FLUSH: "s",
    Category.FIVE_CARD_FLUSH: "S",
    Category.RUN_OF_THREE: "r3",
    Category.RUN_OF_FOUR: "r4",
    Category.RUN_OF_FIVE: "r5",
    Category.PAIR: "p",
    Category.PAIR_ROYAL: "p3",
    Category.DOUBLE_PAIR_ROYAL: "p4",
}

_SINGLE_CHAR_TOKENS: Final[dict[str, TokenKind]] = {
    "f": TokenKind.FIFTEEN,
    "n": TokenKind.NOBS,
    "s": TokenKind.HAND_FLUSH,
    "S": TokenKind.FIVE_CARD_FLUSH,
}
_RUN_TOKENS: Final[dict[str, TokenKind]] = {
    "3": TokenKind.RUN_OF_THREE,
    "4": TokenKind.RUN_OF_FOUR,
    "5": TokenKind.RUN_OF_FIVE,
}
_MULTIPLE_TOKENS: Final[dict[str, TokenKind]] = {
    "2": TokenKind.PAIR,
    "3": TokenKind.PAIR_ROYAL,
    "4": TokenKind.DOUBLE_PAIR_ROYAL,
}


class GuessGrammarError(RuntimeError):
    """Raised when the lexer produces a token with no category mapping."""


@dataclass(frozen=True, slots=True)
class LexResult:
    """Tokens lexed from a symbolic guess and any input that did not lex."""

    tokens: tuple[TokenKind, ...]
    leftover: str

    @property
    def complete(self) -> bool:
        return not self.leftover


def lex_symbolic(text: str) -> LexResult:
    """Lex ``text`` into guess tokens, stopping at the first unknown input."""

    source = "".join(text.split())
    tokens: list[TokenKind] = []
    pos = 0
    while pos < len(source):
        char = source[pos]
        nxt = source[pos + 1] if pos + 1 < len(source) else ""
        if char in _SINGLE_CHAR_TOKENS:
            tokens.append(_SINGLE_CHAR_TOKENS[char])
            pos += 1
        elif char == "r" and nxt in _RUN_TOKENS:
            tokens.append(_RUN_TOKENS[nxt])
            pos += 2
        elif char == "p" and nxt in _MULTIPLE_TOKENS:
            tokens.append(_MULTIPLE_TOKENS[nxt])
            pos += 2
        elif char == "p":
            tokens.append(TokenKind.PAIR)
            pos += 1
        else:
            break
    return LexResult(tokens=tuple(tokens), leftover=source[pos:])


@dataclass(frozen=True, slots=True)
class NumericGuess:
    """A guess of the total score only."""

    total: int


@dataclass(frozen=True, slots=True)
class SymbolicGuess:
    """A guess naming the scoring combinations believed to be present."""

    tokens: tuple[TokenKind, ...]

    def claimed_counts(self) -> Counter[Category]:
        counts: Counter[Category] = Counter()
        for token in self.tokens:
            counts[_category_for(token)] += 1
        return counts

    @property
    def total(self) -> int:
        return sum(_category_for(token).points for token in self.tokens)


Guess = NumericGuess | SymbolicGuess


def _category_for(token: TokenKind) -> Category:
    try:
        return TOKEN_CATEGORIES[token]
    except KeyError:
        raise GuessGrammarError(f"unexpected guess token {token!r}") from None


def parse_guess(text: str) -> Guess | None:
    """Classify and parse ``text``; return ``None`` when it cannot be parsed."""

    words = text.split()
    if words and all(word.isascii() and word.isdigit() for word in words):
        return NumericGuess(total=sum(int(word) for word in words))
    lexed = lex_symbolic(text)
    if not lexed.complete:
        logger.debug("rejected guess %r at %r", text, lexed.leftover)
        return None
    return SymbolicGuess(tokens=lexed.tokens)


class GuessOutcome(str, Enum):
    """How a graded guess compares to the real score."""

    CORRECT = "correct"
    RIGHT_TOTAL_WRONG_HANDS = "right_total_wrong_hands"
    INCORRECT = "incorrect"


@dataclass(frozen=True, slots=True)
class Discrepancy:
    """Difference between claimed and actual hits for one category."""

    category: Category
    residual: int

    @property
    def verb(self) -> str:
        return "overcounted" if self.residual > 0 else "missed"

    def describe(self) -> str:
        return f"{self.category.value}: You {self.verb} {abs(self.residual)}"


@dataclass(frozen=True, slots=True)
class GuessResult:
    """Outcome of grading a guess against a score board."""

    outcome: GuessOutcome
    guessed: int
    actual: int
    discrepancies: tuple[Discrepancy, ...] = field(default_factory=tuple)

    @property
    def is_correct(self) -> bool:
        return self.outcome is GuessOutcome.CORRECT

    @property
    def difference(self) -> int:
        """Signed difference, positive when the guess was too high."""

        return self.guessed - self.actual

    @property
    def brief(self) -> str:
        if self.outcome is GuessOutcome.CORRECT:
            return "Correct!"
        if self.outcome is GuessOutcome.RIGHT_TOTAL_WRONG_HANDS:
            return "You got the right score, but the wrong hands."
        return f"You were off by {abs(self.difference)}"

    def details(self) -> list[str]:
        return [item.describe() for item in self.discrepancies]


def _residuals(claimed: Mapping[Category, int], board: ScoreBoard) -> tuple[Discrepancy, ...]:
    balance: Counter[Category] = Counter(claimed)
    balance.subtract(board.category_counts())
    return tuple(
        Discrepancy(category=category, residual=residual)
        for category, residual in sorted(balance.items(), key=lambda item: item[0].value)
        if residual != 0
    )


def grade(guess: Guess, board: ScoreBoard) -> GuessResult:
    """Grade a parsed guess against ``board``."""

    actual = board.total
    if isinstance(guess, NumericGuess):
        outcome = GuessOutcome.CORRECT if guess.total == actual else GuessOutcome.INCORRECT
        return GuessResult(outcome=outcome, guessed=guess.total, actual=actual)

    discrepancies = _residuals(guess.claimed_counts(), board)
    guessed = guess.total
    if guessed == actual and not discrepancies:
        outcome = GuessOutcome.CORRECT
    elif guessed == actual:
        outcome = GuessOutcome.RIGHT_TOTAL_WRONG_HANDS
    else:
        outcome = GuessOutcome.INCORRECT
    return GuessResult(outcome=outcome, guessed=guessed, actual=actual, discrepancies=discrepancies)


def grade_guess(text: str, board: ScoreBoard) -> GuessResult | None:
    """Parse and grade ``text``; ``None`` means no guess was registered."""

    guess = parse_guess(text)
    if guess is None:
        return None
    result = grade(guess, board)
    logger.debug("graded %r: %s (%d vs %d)", text, result.outcome.value, result.guessed, result.actual)
    return result


def shorthand_for(board: ScoreBoard | Sequence[Category]) -> str:
    """Return the symbolic guess that exactly reproduces ``board``."""

    categories = [entry.category for entry in board] if isinstance(board, ScoreBoard) else list(board)
    return "".join(_SHORTHAND[category] for category in categories)
