"""Card abstractions and the shuffled draw pile for Indigo."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator, Sequence

__all__ = [
    "Suit",
    "Rank",
    "Card",
    "Deck",
    "InsufficientCards",
    "iter_full_deck",
    "format_cards",
]


class Suit(str, Enum):
    """Enumeration of the four suits in deck order."""

    DIAMONDS = "♦"
    HEARTS = "♥"
    SPADES = "♠"
    CLUBS = "♣"


class Rank(Enum):
    """Ranks in deck order, each carrying its label and point value."""

    ACE = ("A", 1)
    TWO = ("2", 0)
    THREE = ("3", 0)
    FOUR = ("4", 0)
    FIVE = ("5", 0)
    SIX = ("6", 0)
    SEVEN = ("7", 0)
    EIGHT = ("8", 0)
    NINE = ("9", 0)
    TEN = ("10", 1)
    JACK = ("J", 1)
    QUEEN = ("Q", 1)
    KING = ("K", 1)

    @property
    def label(self) -> str:
        return self.value[0]

    @property
    def points(self) -> int:
        return self.value[1]


@dataclass(frozen=True, slots=True)
class Card:
    """Value object describing a physical card."""

    suit: Suit
    rank: Rank

    @classmethod
    def from_label(cls, label: str) -> "Card":
        """Parse a display label such as ``"10♥"`` back into a card."""

        rank_label, suit_symbol = label[:-1], label[-1:]
        try:
            suit = Suit(suit_symbol)
        except ValueError:
            raise ValueError(f"invalid card label '{label}'") from None
        for rank in Rank:
            if rank.label == rank_label:
                return cls(suit=suit, rank=rank)
        raise ValueError(f"invalid card label '{label}'")

    @property
    def points(self) -> int:
        """Return the points this card is worth once captured."""

        return self.rank.points

    def matches(self, other: "Card") -> bool:
        """Return ``True`` when ``other`` shares this card's rank or suit."""

        return self.rank is other.rank or self.suit is other.suit

    def label(self) -> str:
        return f"{self.rank.label}{self.suit.value}"

    def __str__(self) -> str:
        return self.label()


class InsufficientCards(ValueError):
    """Raised when more cards are requested than the deck holds."""


def iter_full_deck() -> Iterable[Card]:
    """Yield all 52 cards in suit-major, rank-minor order."""

    for suit in Suit:
        for rank in Rank:
            yield Card(suit=suit, rank=rank)


def format_cards(cards: Sequence[Card]) -> str:
    return " ".join(card.label() for card in cards)


@dataclass(slots=True)
class Deck:
    """Draw pile shuffled once on construction; cards are taken from the front."""

    rng: random.Random = field(default_factory=random.Random, repr=False)
    cards: list[Card] = field(init=False)

    def __post_init__(self) -> None:
        self.cards = list(iter_full_deck())
        self.rng.shuffle(self.cards)

    def pop(self) -> Card | None:
        """Remove and return the front card, or ``None`` once exhausted."""

        if not self.cards:
            return None
        return self.cards.pop(0)

    def draw(self, count: int) -> list[Card]:
        """Pop exactly ``count`` cards, refusing to hand out a short draw."""

        if count > len(self.cards):
            raise InsufficientCards(
                f"not enough cards in deck: need {count}, have {len(self.cards)}"
            )
        drawn = self.cards[:count]
        del self.cards[:count]
        return drawn

    def size(self) -> int:
        return len(self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)
