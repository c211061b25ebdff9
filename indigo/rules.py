"""Rule utilities and constants for Indigo."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from .cards import Card

if TYPE_CHECKING:
    from .state import GameState, Seat

__all__ = [
    "HAND_SIZE",
    "TABLE_SIZE",
    "CARD_BONUS",
    "EmptyTableError",
    "IllegalPlay",
    "PlayOutcome",
    "ScoreLine",
    "resolve_play",
    "score",
    "score_line",
    "finish_round",
]

logger = logging.getLogger(__name__)

HAND_SIZE: Final[int] = 6
TABLE_SIZE: Final[int] = 4
CARD_BONUS: Final[int] = 3


class EmptyTableError(RuntimeError):
    """Raised when the top card of an empty table is requested."""


class IllegalPlay(RuntimeError):
    """Raised when a play cannot be applied to the current state."""


@dataclass(frozen=True, slots=True)
class PlayOutcome:
    """Result of resolving one played card against the table."""

    seat: "Seat"
    card: Card
    captured: tuple[Card, ...] = ()
    refilled: bool = False

    @property
    def is_capture(self) -> bool:
        return bool(self.captured)


@dataclass(frozen=True, slots=True)
class ScoreLine:
    """Points and captured-card counts for both seats at one moment."""

    player_points: int
    computer_points: int
    player_cards: int
    computer_cards: int


def resolve_play(state: "GameState", seat: "Seat", card: Card) -> PlayOutcome:
    """Apply the match-or-discard rule for ``card`` already taken from ``seat``'s hand.

    A card sharing rank or suit with the top of a non-empty table captures the
    whole table plus itself; any other card becomes the new top. A hand emptied
    by the play is refilled when the deck still covers a full hand.
    """

    player = state.player(seat)
    top = state.table.top()
    captured: tuple[Card, ...] = ()

    if top is not None and card.matches(top):
        captured = (*state.table.clear(), card)
        player.win_pile.add_all(captured)
        state.last_winner = seat
        logger.debug("%s captures %d card(s) with %s", seat, len(captured), card)
    else:
        state.table.add(card)

    refilled = False
    if player.hand.is_empty():
        player.hand.deal(state.deck)
        refilled = not player.hand.is_empty()
        if refilled:
            logger.debug("%s hand refilled, %d left in deck", seat, state.deck.size())

    return PlayOutcome(seat=seat, card=card, captured=captured, refilled=refilled)


def score(state: "GameState", seat: "Seat", initial_player: "Seat | None" = None) -> int:
    """Return ``seat``'s score; passing ``initial_player`` adds the end-of-round bonus.

    The bonus goes to the seat holding strictly more captured cards, and to
    ``initial_player`` when both piles are the same size.
    """

    own = state.player(seat).win_pile
    total = own.points()

    if initial_player is not None:
        other = state.player(seat.other).win_pile
        if own.size() > other.size():
            total += CARD_BONUS
        elif own.size() == other.size() and seat is initial_player:
            total += CARD_BONUS

    return total


def score_line(state: "GameState", initial_player: "Seat | None" = None) -> ScoreLine:
    from .state import Seat

    return ScoreLine(
        player_points=score(state, Seat.PLAYER, initial_player),
        computer_points=score(state, Seat.COMPUTER, initial_player),
        player_cards=state.player(Seat.PLAYER).win_pile.size(),
        computer_cards=state.player(Seat.COMPUTER).win_pile.size(),
    )


def finish_round(state: "GameState") -> ScoreLine:
    """Hand the leftover table to the last capturer and return the final scores."""

    leftovers = state.table.clear()
    state.player(state.last_winner).win_pile.add_all(leftovers)
    logger.debug("%d leftover card(s) go to %s", len(leftovers), state.last_winner)
    return score_line(state, state.initial_player)
