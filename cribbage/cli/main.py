"""Typer entry-point wiring for the cribbage CLI."""

from __future__ import annotations

import logging
from typing import List, Sequence

import typer
from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel

from ..game import GameConfig, GuessingGame
from ..guess import GuessResult, shorthand_for
from ..hand import Hand
from .render import format_card, hand_art
from .views import GuessFeedbackView, ScoreBoardView, render_session_summary

app = typer.Typer(add_completion=False, rich_markup_mode="rich")
console = Console()

DEMO_HANDS: tuple[str, ...] = (
    "2H JH QH 2D 5D",
    "2D JH QH 2H 5H",
    "5D JD 5C 5S 5H",
    "AD 2D 3D 4D 5D",
    "9D 3D AS JS 8D",
    "5D 3H 2D 4C 8S",
    "5D 3H 2D 4C 5S",
)

QUIT_WORDS = frozenset({"quit", "exit", ":q"})

GUESS_HELP = (
    "Guess a number ([bold]7[/bold] or [bold]2 2 3[/bold]) or spell out the hand: "
    "[bold]f[/bold] fifteen, [bold]p[/bold]/[bold]p3[/bold]/[bold]p4[/bold] multiples, "
    "[bold]r3[/bold]/[bold]r4[/bold]/[bold]r5[/bold] runs, [bold]s[/bold] flush, "
    "[bold]S[/bold] five card flush, [bold]n[/bold] nobs."
)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@app.callback()
def _root(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log scoring and grading details."),
) -> None:
    """Score cribbage hands and practise counting them."""

    _configure_logging(verbose)


def _parse_hand(text: str) -> Hand:
    try:
        return Hand.from_notation(text)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _render_hand(hand: Hand, *, title: str | None = None) -> Panel:
    return Panel(hand_art(hand), title=title, box=box.ROUNDED, border_style="cyan", expand=False)


def _print_scored_hand(hand: Hand) -> None:
    console.print(_render_hand(hand, title=hand.label()))
    console.print(ScoreBoardView(board=hand.score_board, card_formatter=format_card).render())
    console.print(f"[dim]Shorthand:[/dim] {shorthand_for(hand.score_board) or '—'}")
    console.print()


@app.command()
def score(
    hands: List[str] = typer.Argument(
        ...,
        help="Hands such as '5D 3H 2D 4C 8S'; the first card is the starter.",
    ),
) -> None:
    """Score one or more hands given in card notation."""

    parsed = [_parse_hand(text) for text in hands]
    for hand in parsed:
        _print_scored_hand(hand)


@app.command()
def demo() -> None:
    """Score a handful of showcase hands."""

    for text in DEMO_HANDS:
        _print_scored_hand(Hand.from_notation(text))


def _report(game: GuessingGame, result: GuessResult, reveal: bool) -> None:
    console.print(GuessFeedbackView(result=result, streak=game.streak).render())
    if reveal:
        board = game.hand.score_board
        console.print(ScoreBoardView(board=board, card_formatter=format_card).render())
    console.print()


def run_quiz(config: GameConfig, *, rounds: int | None = None) -> list[GuessResult]:
    """Drive the read-a-line guessing loop until EOF, a quit word or ``rounds``."""

    game = GuessingGame(config=config)
    results: list[GuessResult] = []
    console.print(GUESS_HELP)
    while rounds is None or game.rounds < rounds:
        hand = game.prep_next_turn()
        console.print(_render_hand(hand))
        while True:
            try:
                line = console.input("[bold]> [/bold]").strip()
            except EOFError:
                return results
            if line.lower() in QUIT_WORDS:
                return results
            result = game.handle_guess(line)
            if result is None:
                console.print("[yellow]Couldn't read that guess, try again.[/yellow]")
                continue
            results.append(result)
            _report(game, result, config.reveal_breakdown)
            break
    return results


@app.command()
def quiz(
    seed: int | None = typer.Option(None, help="Random seed for a reproducible sequence of hands."),
    rounds: int | None = typer.Option(None, min=1, help="Stop after this many hands (default: until EOF)."),
    breakdown: bool = typer.Option(
        True,
        "--breakdown/--no-breakdown",
        help="Show the full score table after each guess.",
    ),
) -> None:
    """Guess the score of dealt hands, one line per guess."""

    results = run_quiz(GameConfig(seed=seed, reveal_breakdown=breakdown), rounds=rounds)
    console.print()
    if results:
        console.print(render_session_summary(results))
    console.print("Okay, have fun, bye!")


@app.command()
def play(
    seed: int | None = typer.Option(None, help="Random seed for a reproducible sequence of hands."),
    breakdown: bool = typer.Option(
        True,
        "--breakdown/--no-breakdown",
        help="Show the full score table after each guess.",
    ),
) -> None:
    """Launch the full-screen guessing trainer."""

    from .textual import run_textual_app

    run_textual_app(GameConfig(seed=seed, reveal_breakdown=breakdown))


def main(argv: Sequence[str] | None = None) -> None:
    """Entry-point for the ``cribbage`` console script."""

    app(args=list(argv) if argv is not None else None)


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    main()
