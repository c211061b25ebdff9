from __future__ import annotations

import builtins

import pytest
from typer.testing import CliRunner

from indigo.cli.main import app

runner = CliRunner()


def test_play_reprompts_until_yes_or_no_then_exits() -> None:
    result = runner.invoke(app, ["play", "--seed", "4"], input="maybe\nYES\nexit\n")

    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert lines[0] == "Indigo Card Game"
    assert lines.count("Play first?") == 2
    assert any(line.startswith("Initial cards on the table: ") for line in lines)
    assert any(line.startswith("Cards in hand: 1)") for line in lines)
    assert "Choose a card to play (1-6):" in lines
    assert lines[-1] == "Game Over"
    assert not any(line.startswith("Score:") for line in lines)


def test_play_computer_first_then_end_of_input_aborts_game() -> None:
    result = runner.invoke(app, ["play", "--seed", "4"], input="no\n")

    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert any(line.startswith("Computer plays ") for line in lines)
    assert lines[-1] == "Game Over"


def test_play_without_answer_aborts() -> None:
    result = runner.invoke(app, ["play"], input="")

    assert result.exit_code != 0


def test_simulate_prints_summary() -> None:
    result = runner.invoke(app, ["simulate", "--games", "3", "--seed", "2"])

    assert result.exit_code == 0
    assert "Simulation Summary" in result.output
    assert "Player" in result.output
    assert "Computer" in result.output
    assert "3 game(s)" in result.output


def test_play_interrupt_at_card_prompt_ends_game(monkeypatch: pytest.MonkeyPatch) -> None:
    answers = iter(["yes"])

    def _input(*_: object) -> str:
        try:
            return next(answers)
        except StopIteration:
            raise KeyboardInterrupt from None

    monkeypatch.setattr(builtins, "input", _input)
    result = runner.invoke(app, ["play", "--seed", "4"])

    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert lines[-2] == "Choose a card to play (1-6):"
    assert lines[-1] == "Game Over"
    assert not any(line.startswith("Score:") for line in lines)


def test_play_interrupt_at_first_prompt_aborts(monkeypatch: pytest.MonkeyPatch) -> None:
    def _input(*_: object) -> str:
        raise KeyboardInterrupt

    monkeypatch.setattr(builtins, "input", _input)
    result = runner.invoke(app, ["play"])

    assert result.exit_code != 0
    assert "Game Over" not in result.output
