"""Helpers for tracking results across a batch of Indigo games."""

from __future__ import annotations

from dataclasses import dataclass, field

from .engine import GameResult, TurnState
from .state import Seat

__all__ = ["GameSummary", "SeatTotal", "MatchHistory"]


@dataclass(frozen=True, slots=True)
class GameSummary:
    """Summary captured after a single completed game."""

    game_number: int
    result: GameResult


@dataclass(frozen=True, slots=True)
class SeatTotal:
    """Aggregate totals for one seat across all recorded games."""

    seat: Seat
    wins: int
    points: int
    cards: int
    openings: int


@dataclass(slots=True)
class MatchHistory:
    """Mutable tracker that accumulates game summaries."""

    games: list[GameSummary] = field(default_factory=list)
    draws: int = 0
    _wins: dict[Seat, int] = field(init=False, repr=False)
    _points: dict[Seat, int] = field(init=False, repr=False)
    _cards: dict[Seat, int] = field(init=False, repr=False)
    _openings: dict[Seat, int] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._wins = {seat: 0 for seat in Seat}
        self._points = {seat: 0 for seat in Seat}
        self._cards = {seat: 0 for seat in Seat}
        self._openings = {seat: 0 for seat in Seat}

    def record(self, summary: GameSummary) -> None:
        """Record ``summary`` and update cumulative totals."""

        result = summary.result
        final = result.final
        if result.turn_state is not TurnState.ROUND_ENDED or final is None:
            raise ValueError("only games that reached the end can be recorded")

        self.games.append(summary)
        self._openings[result.initial_player] += 1
        self._points[Seat.PLAYER] += final.player_points
        self._points[Seat.COMPUTER] += final.computer_points
        self._cards[Seat.PLAYER] += final.player_cards
        self._cards[Seat.COMPUTER] += final.computer_cards

        winner = result.winner
        if winner is None:
            self.draws += 1
        else:
            self._wins[winner] += 1

    def totals(self) -> list[SeatTotal]:
        """Return the cumulative totals for each seat in turn order."""

        return [
            SeatTotal(
                seat=seat,
                wins=self._wins[seat],
                points=self._points[seat],
                cards=self._cards[seat],
                openings=self._openings[seat],
            )
            for seat in Seat
        ]
