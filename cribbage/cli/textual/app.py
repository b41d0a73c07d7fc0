"""Textual-powered interactive guessing trainer."""

from __future__ import annotations

from rich.console import Group
from rich.panel import Panel
from rich.text import Text
from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Footer, Header, Input, Static

from ...game import GameConfig, GuessingGame
from ...guess import GuessResult, shorthand_for
from ..render import format_card, hand_art
from ..views import GuessFeedbackView, ScoreBoardView

MAX_HISTORY_LINES = 12


class HandPanel(Static):
    """Shows the cards of the hand currently being guessed."""

    def show_hand(self, game: GuessingGame) -> None:
        title = f"Hand {game.rounds}"
        self.update(Panel(hand_art(game.hand), title=title, border_style="cyan"))


class FeedbackPanel(Static):
    """Shows the grading of the last guess and, optionally, the breakdown."""

    def show_prompt(self) -> None:
        self.update(
            Panel(
                Text.from_markup("[dim]Type a guess below: a number, or tokens like [bold]ffp r3[/bold][/dim]"),
                title="Result",
                border_style="magenta",
            )
        )

    def show_result(self, game: GuessingGame, result: GuessResult) -> None:
        parts = [GuessFeedbackView(result=result, streak=game.streak).render()]
        if game.config.reveal_breakdown:
            board = game.hand.score_board
            parts.append(ScoreBoardView(board=board, card_formatter=format_card).render())
            parts.append(Text.from_markup(f"[dim]Shorthand:[/dim] {shorthand_for(board) or '—'}"))
        self.update(Panel(Group(*parts), title="Result", border_style="magenta"))

    def show_rejected(self, text: str) -> None:
        self.update(
            Panel(
                Text(f"Couldn't read {text!r}, try again.", style="yellow"),
                title="Result",
                border_style="magenta",
            )
        )


class HistoryLog(Static):
    """Rolling list of past guesses."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._lines: list[str] = []

    def on_mount(self) -> None:  # pragma: no cover - widget lifecycle glue
        self._redraw()

    def add(self, hand_label: str, result: GuessResult) -> None:
        self._lines.append(f"{hand_label}  {result.guessed}/{result.actual}  {result.brief}")
        self._lines = self._lines[-MAX_HISTORY_LINES:]
        self._redraw()

    def _redraw(self) -> None:
        if self._lines:
            body = Text("\n".join(self._lines))
        else:
            body = Text("No guesses yet", style="dim")
        self.update(Panel(body, title="History"))


class CribbageTrainerApp(App[None]):
    """Deal a hand, read a guess, show the grading, deal again."""

    TITLE = "Cribbage Trainer"
    BINDINGS = [
        Binding("ctrl+n", "next_hand", "Next hand"),
        Binding("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, config: GameConfig) -> None:
        super().__init__()
        self.game = GuessingGame(config=config)
        self._awaiting_next = False

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical():
            yield HandPanel(id="hand")
            yield FeedbackPanel(id="feedback")
            yield HistoryLog(id="history")
            yield Input(placeholder="Your guess (Enter to submit, Enter again for the next hand)", id="guess")
        yield Footer()

    def on_mount(self) -> None:  # pragma: no cover - widget lifecycle glue
        self.action_next_hand()
        self.query_one("#guess", Input).focus()

    def action_next_hand(self) -> None:
        self.game.prep_next_turn()
        self._awaiting_next = False
        self.query_one("#hand", HandPanel).show_hand(self.game)
        self.query_one("#feedback", FeedbackPanel).show_prompt()
        self.sub_title = f"Streak {self.game.streak}"

    @on(Input.Submitted, "#guess")
    def handle_guess(self, event: Input.Submitted) -> None:
        text = event.value.strip()
        event.input.value = ""
        if self._awaiting_next:
            self.action_next_hand()
            return
        result = self.game.handle_guess(text)
        feedback = self.query_one("#feedback", FeedbackPanel)
        if result is None:
            feedback.show_rejected(text)
            return
        feedback.show_result(self.game, result)
        self.query_one("#history", HistoryLog).add(self.game.hand.label(), result)
        self.sub_title = f"Streak {self.game.streak}"
        self._awaiting_next = True


def run_textual_app(config: GameConfig) -> None:
    """Launch the Textual trainer."""

    CribbageTrainerApp(config).run()
