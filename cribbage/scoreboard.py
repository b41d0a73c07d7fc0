"""Ledger of scoring hits produced for a single hand."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator

from .rules import Category, ScoreEntry

__all__ = ["BoardState", "ScoreBoardFinalized", "ScoreBoard"]


class BoardState(str, Enum):
    """Lifecycle of a score board."""

    OPEN = "open"
    FINALIZED = "finalized"


class ScoreBoardFinalized(RuntimeError):
    """Raised when an entry is added to a board that has been finalized."""


@dataclass(slots=True)
class ScoreBoard:
    """Append-then-lock tracker of the entries scored by one hand."""

    _entries: list[ScoreEntry] = field(default_factory=list, repr=False)
    state: BoardState = BoardState.OPEN

    def add(self, entry: ScoreEntry) -> None:
        """Record ``entry``; only valid while the board is open."""

        if self.state is BoardState.FINALIZED:
            raise ScoreBoardFinalized(f"cannot add {entry.category.value} to a finalized board")
        self._entries.append(entry)

    def finalize(self) -> None:
        self.state = BoardState.FINALIZED

    @property
    def is_finalized(self) -> bool:
        return self.state is BoardState.FINALIZED

    @property
    def entries(self) -> tuple[ScoreEntry, ...]:
        return tuple(self._entries)

    @property
    def total(self) -> int:
        return sum(entry.points for entry in self._entries)

    def category_counts(self) -> Counter[Category]:
        """Return how many times each category was scored."""

        return Counter(entry.category for entry in self._entries)

    def __iter__(self) -> Iterator[ScoreEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
