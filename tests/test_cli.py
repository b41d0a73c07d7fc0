from __future__ import annotations

from typer.testing import CliRunner

from cribbage.cli.main import app, run_quiz
from cribbage.game import GameConfig

runner = CliRunner()


def test_score_command_prints_breakdown() -> None:
    result = runner.invoke(app, ["score", "5D 3H 2D 4C 8S"])
    assert result.exit_code == 0, result.output
    assert "Run of Four" in result.output
    assert "Fifteen" in result.output
    assert "TOTAL" in result.output


def test_score_command_rejects_bad_cards() -> None:
    result = runner.invoke(app, ["score", "5X 3H 2D 4C 8S"])
    assert result.exit_code != 0


def test_demo_command_runs() -> None:
    result = runner.invoke(app, ["demo"])
    assert result.exit_code == 0, result.output
    assert "Double Pair Royal" in result.output


def test_quiz_reprompts_on_unparseable_guess() -> None:
    result = runner.invoke(app, ["quiz", "--seed", "3", "--rounds", "1"], input="what\n0\n")
    assert result.exit_code == 0, result.output
    assert "Couldn't read that guess" in result.output
    assert "bye" in result.output


def test_quiz_stops_on_quit_word() -> None:
    result = runner.invoke(app, ["quiz", "--seed", "3"], input="quit\n")
    assert result.exit_code == 0, result.output
    assert "bye" in result.output


def test_run_quiz_stops_at_end_of_input(monkeypatch) -> None:
    answers = iter(["7"])

    def fake_input(*_args, **_kwargs) -> str:
        try:
            return next(answers)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("cribbage.cli.main.console.input", fake_input)
    results = run_quiz(GameConfig(seed=8, reveal_breakdown=False))
    assert len(results) == 1
    assert results[0].guessed == 7


def test_play_passes_breakdown_flag(monkeypatch) -> None:
    configs: list[GameConfig] = []
    monkeypatch.setattr("cribbage.cli.textual.run_textual_app", configs.append)

    result = runner.invoke(app, ["play", "--seed", "4", "--no-breakdown"])
    assert result.exit_code == 0, result.output
    assert configs == [GameConfig(seed=4, reveal_breakdown=False)]

    runner.invoke(app, ["play"])
    assert configs[-1].reveal_breakdown is True
