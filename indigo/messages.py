"""Exact-format text lines printed during a game."""

from __future__ import annotations

from .cards import Card
from .rules import ScoreLine
from .state import Hand, Seat, Table

__all__ = [
    "TITLE",
    "PLAY_FIRST_PROMPT",
    "GAME_OVER",
    "initial_table",
    "table_status",
    "hand_listing",
    "computer_plays",
    "wins_cards",
    "score_lines",
]

TITLE = "Indigo Card Game"
PLAY_FIRST_PROMPT = "Play first?"
GAME_OVER = "Game Over"


def initial_table(table: Table) -> str:
    return f"Initial cards on the table: {table}"


def table_status(table: Table) -> str:
    if table.is_empty():
        return "No cards on the table"
    return f"{table.size()} cards on the table, and the top card is {table.last()}"


def hand_listing(seat: Seat, hand: Hand) -> str:
    """Numbered listing for the human seat, a bare one for the computer."""

    if seat is Seat.PLAYER:
        return f"Cards in hand: {hand.numbered()}"
    return str(hand)


def computer_plays(card: Card) -> str:
    return f"Computer plays {card}"


def wins_cards(seat: Seat) -> str:
    return f"{seat} wins cards"


def score_lines(line: ScoreLine) -> list[str]:
    return [
        f"Score: {Seat.PLAYER} {line.player_points} - {Seat.COMPUTER} {line.computer_points}",
        f"Cards: {Seat.PLAYER} {line.player_cards} - {Seat.COMPUTER} {line.computer_cards}",
    ]
