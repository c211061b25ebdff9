from __future__ import annotations

import random
from typing import Callable, Sequence

import pytest

from indigo.cards import Card, Deck
from indigo.state import GameState, Hand, PlayerState, Seat, Table, WinPile


def _cards(labels: Sequence[str]) -> list[Card]:
    return [Card.from_label(label) for label in labels]


def _make_state(
    *,
    table: Sequence[str] = (),
    player_hand: Sequence[str] = (),
    computer_hand: Sequence[str] = (),
    deck: Sequence[str] = (),
    player_pile: Sequence[str] = (),
    computer_pile: Sequence[str] = (),
    initial_player: Seat = Seat.PLAYER,
    last_winner: Seat | None = None,
    seed: int = 0,
) -> GameState:
    rng = random.Random(seed)
    draw_pile = Deck(rng=rng)
    draw_pile.cards = _cards(deck)
    players = {
        Seat.PLAYER: PlayerState(
            seat=Seat.PLAYER,
            hand=Hand(_cards(player_hand)),
            win_pile=WinPile(_cards(player_pile)),
        ),
        Seat.COMPUTER: PlayerState(
            seat=Seat.COMPUTER,
            hand=Hand(_cards(computer_hand)),
            win_pile=WinPile(_cards(computer_pile)),
        ),
    }
    return GameState(
        deck=draw_pile,
        table=Table(_cards(table)),
        players=players,
        initial_player=initial_player,
        last_winner=last_winner or initial_player,
        rng=rng,
    )


@pytest.fixture
def make_state() -> Callable[..., GameState]:
    """Build a game state from card labels for each pile."""

    return _make_state
