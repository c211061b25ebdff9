"""Typer entry-point wiring for the Indigo CLI."""

from __future__ import annotations

import typer
from rich.console import Console

from .. import messages
from ..commands import parse_yes_no
from ..engine import GameEngine
from ..logging_utils import DEFAULT_LOG_LEVEL, setup_logging
from ..simulate import run_simulation
from ..state import GameConfig, Seat, deal_new_game
from ..strategy import ComputerStrategy, HumanInput
from .render import render_history

app = typer.Typer(add_completion=False, rich_markup_mode="rich")
console = Console(highlight=False, soft_wrap=True)


def _say(line: str) -> None:
    console.print(line, markup=False, emoji=False)


def _read_move() -> str:
    try:
        return console.input()
    except (EOFError, KeyboardInterrupt):
        return "exit"


def _ask_play_first() -> bool:
    while True:
        _say(messages.PLAY_FIRST_PROMPT)
        try:
            answer = parse_yes_no(console.input())
        except (EOFError, KeyboardInterrupt):
            raise typer.Abort()
        if answer is not None:
            return answer


@app.command()
def play(
    seed: int | None = typer.Option(None, help="Random seed for reproducible games (omit for randomness)."),
    log_level: str = typer.Option(DEFAULT_LOG_LEVEL, help="Logging level for diagnostics on stderr."),
) -> None:
    """Play one game against the computer."""

    setup_logging(log_level)
    _say(messages.TITLE)

    initial_player = Seat.PLAYER if _ask_play_first() else Seat.COMPUTER
    game_state = deal_new_game(initial_player, GameConfig(seed=seed))
    engine = GameEngine(
        state=game_state,
        sources={
            Seat.PLAYER: HumanInput(read=_read_move, emit=_say),
            Seat.COMPUTER: ComputerStrategy(rng=game_state.rng),
        },
        emit=_say,
    )
    engine.run()


@app.command()
def simulate(
    games: int = typer.Option(100, min=1, help="Number of computer-vs-computer games."),
    seed: int | None = typer.Option(None, help="Random seed for the whole batch."),
    log_level: str = typer.Option(DEFAULT_LOG_LEVEL, help="Logging level for diagnostics on stderr."),
) -> None:
    """Pit the computer heuristic against itself and summarise the results."""

    setup_logging(log_level)
    history = run_simulation(games, seed=seed)
    console.print(render_history(history))


def main() -> None:
    """Entry-point for the ``indigo`` console script."""

    app()


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    main()
