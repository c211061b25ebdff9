"""Core game state data structures for Indigo."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator

from .cards import Card, Deck, format_cards
from .rules import HAND_SIZE, TABLE_SIZE, EmptyTableError

__all__ = [
    "Seat",
    "Table",
    "Hand",
    "WinPile",
    "PlayerState",
    "GameConfig",
    "GameState",
    "deal_new_game",
]

logger = logging.getLogger(__name__)


class Seat(str, Enum):
    """The two sides of an Indigo game, in turn order."""

    PLAYER = "Player"
    COMPUTER = "Computer"

    @property
    def other(self) -> "Seat":
        return Seat.COMPUTER if self is Seat.PLAYER else Seat.PLAYER

    def __str__(self) -> str:
        return self.value


@dataclass(slots=True)
class Table:
    """Face-up discard pile; the most recently added card is on top."""

    cards: list[Card] = field(default_factory=list)

    def add(self, card: Card) -> None:
        self.cards.append(card)

    def last(self) -> Card:
        """Return the top card; calling this on an empty table is a logic error."""

        if not self.cards:
            raise EmptyTableError("no top card on an empty table")
        return self.cards[-1]

    def top(self) -> Card | None:
        return self.cards[-1] if self.cards else None

    def clear(self) -> list[Card]:
        """Empty the table and hand its former contents, in order, to the caller."""

        result = list(self.cards)
        self.cards.clear()
        return result

    def is_empty(self) -> bool:
        return not self.cards

    def size(self) -> int:
        return len(self.cards)

    def __str__(self) -> str:
        return format_cards(self.cards)


@dataclass(slots=True)
class Hand:
    """Cards held by one player, kept in deal order for numbered display."""

    cards: list[Card] = field(default_factory=list)

    def deal(self, deck: Deck) -> None:
        """Refill with a full hand, or do nothing when the deck cannot cover one."""

        if deck.size() >= HAND_SIZE:
            self.cards.extend(deck.draw(HAND_SIZE))

    def play(self, index: int) -> Card:
        return self.cards.pop(index)

    def is_empty(self) -> bool:
        return not self.cards

    def size(self) -> int:
        return len(self.cards)

    def numbered(self) -> str:
        return "".join(f"{idx}){card} " for idx, card in enumerate(self.cards, start=1))

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __str__(self) -> str:
        return format_cards(self.cards)


@dataclass(slots=True)
class WinPile:
    """Cards captured by one player; order is irrelevant."""

    cards: list[Card] = field(default_factory=list)

    def add(self, card: Card) -> None:
        self.cards.append(card)

    def add_all(self, cards: Iterable[Card]) -> None:
        self.cards.extend(cards)

    def points(self) -> int:
        return sum(card.points for card in self.cards)

    def size(self) -> int:
        return len(self.cards)


@dataclass(slots=True)
class PlayerState:
    """State tracked for each seat at the table."""

    seat: Seat
    hand: Hand = field(default_factory=Hand)
    win_pile: WinPile = field(default_factory=WinPile)


@dataclass(frozen=True, slots=True)
class GameConfig:
    """Runtime configuration for a single game."""

    seed: int | None = None

    def make_rng(self) -> random.Random:
        return random.Random(self.seed)


@dataclass(slots=True)
class GameState:
    """Everything one game owns: deck, table, both players and the RNG."""

    deck: Deck
    table: Table
    players: dict[Seat, PlayerState]
    initial_player: Seat
    last_winner: Seat
    rng: random.Random = field(default_factory=random.Random, repr=False)

    def player(self, seat: Seat) -> PlayerState:
        return self.players[seat]

    def card_count(self) -> int:
        """Count every card currently owned by the game, wherever it sits."""

        total = self.deck.size() + self.table.size()
        for player in self.players.values():
            total += player.hand.size() + player.win_pile.size()
        return total


def deal_new_game(initial_player: Seat, config: GameConfig | None = None) -> GameState:
    """Shuffle a fresh deck and deal the table followed by both hands."""

    config = config or GameConfig()
    rng = config.make_rng()
    deck = Deck(rng=rng)

    table = Table(deck.draw(TABLE_SIZE))
    players = {seat: PlayerState(seat=seat, hand=Hand(deck.draw(HAND_SIZE))) for seat in Seat}
    logger.debug(
        "dealt table=%s player=%s computer=%s, %d left in deck",
        table,
        players[Seat.PLAYER].hand,
        players[Seat.COMPUTER].hand,
        deck.size(),
    )

    return GameState(
        deck=deck,
        table=table,
        players=players,
        initial_player=initial_player,
        last_winner=initial_player,
        rng=rng,
    )
