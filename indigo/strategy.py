"""Move sources: the computer's card-selection heuristic and the human prompt."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Callable, Hashable, Protocol, Sequence

from .cards import Card
from .commands import CardIndexCommand, ExitCommand, parse_command

__all__ = [
    "MoveSource",
    "ComputerStrategy",
    "HumanInput",
    "select_card",
]

logger = logging.getLogger(__name__)


class MoveSource(Protocol):
    """Anything that can pick a card for one seat.

    Returns a 0-based index into ``hand``, or ``None`` to abandon the game.
    """

    def choose_card(self, hand: Sequence[Card], table_top: Card | None) -> int | None:
        ...


def _duplicated_groups(pool: Sequence[Card], key: Callable[[Card], Hashable]) -> list[Card]:
    """Return every card of ``pool`` whose ``key`` group has two or more members."""

    groups: dict[Hashable, list[Card]] = {}
    for card in pool:
        groups.setdefault(key(card), []).append(card)
    return [card for members in groups.values() if len(members) > 1 for card in members]


def select_card(hand: Sequence[Card], table_top: Card | None, rng: random.Random) -> Card:
    """Pick the computer's card following its fixed priority order.

    A lone card or a lone match is forced. Otherwise the pool is the matching
    cards (or the whole hand when nothing matches or the table is empty),
    and the pick prefers cards sharing a suit, then cards sharing a rank.
    """

    if not hand:
        raise ValueError("cannot choose a card from an empty hand")
    if len(hand) == 1:
        return hand[0]

    candidates = [card for card in hand if table_top is not None and card.matches(table_top)]
    if len(candidates) == 1:
        return candidates[0]

    pool = list(hand) if table_top is None or not candidates else candidates

    same_suit = _duplicated_groups(pool, lambda card: card.suit)
    if same_suit:
        logger.debug("picking among %d card(s) sharing a suit", len(same_suit))
        return rng.choice(same_suit)

    same_rank = _duplicated_groups(pool, lambda card: card.rank)
    if same_rank:
        logger.debug("picking among %d card(s) sharing a rank", len(same_rank))
        return rng.choice(same_rank)

    return rng.choice(pool)


@dataclass(slots=True)
class ComputerStrategy:
    """Heuristic move source drawing its tie-breaks from the game's RNG."""

    rng: random.Random = field(default_factory=random.Random, repr=False)

    def choose_card(self, hand: Sequence[Card], table_top: Card | None) -> int:
        card = select_card(hand, table_top, self.rng)
        return list(hand).index(card)


@dataclass(slots=True)
class HumanInput:
    """Prompt-driven move source; invalid answers are discarded silently."""

    read: Callable[[], str]
    emit: Callable[[str], None]

    def choose_card(self, hand: Sequence[Card], table_top: Card | None) -> int | None:
        while True:
            self.emit(f"Choose a card to play (1-{len(hand)}):")
            command = parse_command(self.read())
            if isinstance(command, ExitCommand):
                return None
            if isinstance(command, CardIndexCommand) and 1 <= command.number <= len(hand):
                return command.number - 1
