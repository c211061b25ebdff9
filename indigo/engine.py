"""Turn engine driving a single Indigo game from deal to game over."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Mapping

from . import messages, rules
from .rules import IllegalPlay, PlayOutcome, ScoreLine
from .state import GameState, Seat
from .strategy import MoveSource

__all__ = ["TurnState", "GameResult", "GameEngine"]

logger = logging.getLogger(__name__)


class TurnState(str, Enum):
    """States of the turn engine; the last two are terminal."""

    AWAITING_PLAYER_MOVE = "awaiting_player_move"
    AWAITING_COMPUTER_MOVE = "awaiting_computer_move"
    ROUND_ENDED = "round_ended"
    ABORTED = "aborted"

    @classmethod
    def awaiting(cls, seat: Seat) -> "TurnState":
        return cls.AWAITING_PLAYER_MOVE if seat is Seat.PLAYER else cls.AWAITING_COMPUTER_MOVE

    @property
    def is_terminal(self) -> bool:
        return self in (TurnState.ROUND_ENDED, TurnState.ABORTED)


@dataclass(frozen=True, slots=True)
class GameResult:
    """Outcome of a finished game; ``final`` is ``None`` when it was abandoned."""

    turn_state: TurnState
    final: ScoreLine | None
    initial_player: Seat

    @property
    def winner(self) -> Seat | None:
        """Return the seat with more points, or ``None`` on a draw or abort."""

        if self.final is None or self.final.player_points == self.final.computer_points:
            return None
        if self.final.player_points > self.final.computer_points:
            return Seat.PLAYER
        return Seat.COMPUTER


def _discard(_: str) -> None:
    return None


@dataclass(slots=True)
class GameEngine:
    """Alternate turns between the two seats until a hand runs dry or a human exits."""

    state: GameState
    sources: Mapping[Seat, MoveSource]
    emit: Callable[[str], None] = _discard
    turn_state: TurnState = field(init=False)
    final: ScoreLine | None = field(init=False, default=None)

    def __post_init__(self) -> None:
        missing = [seat for seat in Seat if seat not in self.sources]
        if missing:
            raise ValueError(f"no move source for {', '.join(str(seat) for seat in missing)}")
        self.turn_state = TurnState.awaiting(self.state.initial_player)

    @property
    def active(self) -> Seat:
        if self.turn_state is TurnState.AWAITING_PLAYER_MOVE:
            return Seat.PLAYER
        if self.turn_state is TurnState.AWAITING_COMPUTER_MOVE:
            return Seat.COMPUTER
        raise IllegalPlay(f"no active seat once the game is {self.turn_state.value}")

    def start(self) -> None:
        self.emit(messages.initial_table(self.state.table))
        self.emit("")

    def step(self) -> TurnState:
        """Play one turn for the active seat and return the resulting state."""

        seat = self.active
        table = self.state.table
        hand = self.state.player(seat).hand

        self.emit(messages.table_status(table))

        if hand.is_empty():
            self._end_round()
            return self.turn_state

        self.emit(messages.hand_listing(seat, hand))
        index = self.sources[seat].choose_card(hand.cards, table.top())
        if index is None:
            logger.info("%s left the game", seat)
            self.turn_state = TurnState.ABORTED
            return self.turn_state
        if not 0 <= index < hand.size():
            raise IllegalPlay(f"{seat} chose card {index} from a hand of {hand.size()}")

        card = hand.play(index)
        if seat is Seat.COMPUTER:
            self.emit(messages.computer_plays(card))
        self._report(rules.resolve_play(self.state, seat, card))

        self.turn_state = TurnState.awaiting(seat.other)
        return self.turn_state

    def run(self) -> GameResult:
        """Play from the opening table to game over."""

        self.start()
        while not self.turn_state.is_terminal:
            self.step()
        self.emit(messages.GAME_OVER)
        return GameResult(
            turn_state=self.turn_state,
            final=self.final,
            initial_player=self.state.initial_player,
        )

    def _report(self, outcome: PlayOutcome) -> None:
        if outcome.is_capture:
            self.emit(messages.wins_cards(outcome.seat))
            for line in messages.score_lines(rules.score_line(self.state)):
                self.emit(line)
        self.emit("")

    def _end_round(self) -> None:
        self.final = rules.finish_round(self.state)
        for line in messages.score_lines(self.final):
            self.emit(line)
        self.turn_state = TurnState.ROUND_ENDED
        logger.debug("round ended: %s", self.final)
