"""Batch runner playing the computer heuristic against itself."""

from __future__ import annotations

import logging
import random

from . import scoreboard
from .engine import GameEngine, GameResult
from .state import GameConfig, Seat, deal_new_game
from .strategy import ComputerStrategy

__all__ = ["play_computer_game", "run_simulation"]

logger = logging.getLogger(__name__)


def play_computer_game(initial_player: Seat, config: GameConfig | None = None) -> GameResult:
    """Play one silent game with the heuristic seated on both sides."""

    game_state = deal_new_game(initial_player, config)
    strategy = ComputerStrategy(rng=game_state.rng)
    engine = GameEngine(state=game_state, sources={seat: strategy for seat in Seat})
    return engine.run()


def run_simulation(games: int, *, seed: int | None = None) -> scoreboard.MatchHistory:
    """Play ``games`` games, alternating the opening seat, and tally the results."""

    if games <= 0:
        raise ValueError("games must be positive")

    rng = random.Random(seed)
    history = scoreboard.MatchHistory()

    for game_number in range(1, games + 1):
        opener = Seat.PLAYER if game_number % 2 == 1 else Seat.COMPUTER
        config = GameConfig(seed=rng.getrandbits(32))
        result = play_computer_game(opener, config)
        history.record(scoreboard.GameSummary(game_number=game_number, result=result))
        logger.debug("game %d finished: %s", game_number, result.final)

    return history
