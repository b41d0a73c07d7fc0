"""Composable view primitives for the cribbage CLI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

from rich import box
from rich.console import Group, RenderableType
from rich.table import Table
from rich.text import Text

from ..cards import Card
from ..guess import GuessOutcome, GuessResult
from ..scoreboard import ScoreBoard

_OUTCOME_STYLES = {
    GuessOutcome.CORRECT: "bold green",
    GuessOutcome.RIGHT_TOTAL_WRONG_HANDS: "bold yellow",
    GuessOutcome.INCORRECT: "bold red",
}


@dataclass(slots=True)
class ScoreBoardView:
    """Renderable itemising every scoring hit and the total."""

    board: ScoreBoard
    card_formatter: Callable[[Card], str]
    title: str | None = None

    def render(self) -> RenderableType:
        table = Table(box=box.SIMPLE_HEAD, title=self.title, show_footer=True)
        table.add_column("Cards", justify="left", footer="")
        table.add_column("Category", justify="left", footer="[bold]TOTAL[/bold]")
        table.add_column("Points", justify="right", footer=f"[bold]{self.board.total}[/bold]")

        for entry in self.board:
            cards_display = " ".join(self.card_formatter(card) for card in entry.cards)
            category = entry.category.value
            if entry.subtype is not None:
                category = f"{category} [dim]({entry.subtype.value}s)[/dim]"
            table.add_row(cards_display, category, str(entry.points))

        if not len(self.board):
            table.add_row("[dim]—[/dim]", "[dim]Nineteen (nothing scores)[/dim]", "0")
        return table


@dataclass(slots=True)
class GuessFeedbackView:
    """Renderable describing how a guess compared to the real score."""

    result: GuessResult
    streak: int | None = None

    def render(self) -> RenderableType:
        style = _OUTCOME_STYLES[self.result.outcome]
        lines: list[RenderableType] = [Text(self.result.brief, style=style)]
        lines.extend(Text(f"  {line}") for line in self.result.details())
        if self.streak is not None:
            lines.append(Text(f"Streak: {self.streak}", style="cyan"))
        return Group(*lines)


def render_session_summary(results: Sequence[GuessResult]) -> Table:
    """Summarise several graded guesses in a single table."""

    table = Table(box=box.MINIMAL, expand=True)
    table.add_column("Guess", justify="right")
    table.add_column("Actual", justify="right")
    table.add_column("Result", justify="left")
    for result in results:
        style = _OUTCOME_STYLES[result.outcome]
        table.add_row(str(result.guessed), str(result.actual), f"[{style}]{result.brief}[/{style}]")
    return table
