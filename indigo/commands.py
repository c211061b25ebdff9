"""Classification of raw text typed at the Indigo prompts."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Final, Union

__all__ = [
    "ExitCommand",
    "CardIndexCommand",
    "Command",
    "parse_command",
    "parse_yes_no",
]


@dataclass(frozen=True, slots=True)
class ExitCommand:
    """The player asked to leave the game."""


@dataclass(frozen=True, slots=True)
class CardIndexCommand:
    """The player picked a card by its 1-based position in the hand."""

    number: int


Command = Union[ExitCommand, CardIndexCommand]

_MATCHERS: Final[tuple[tuple[re.Pattern[str], Callable[[str], Command]], ...]] = (
    (re.compile(r"\d", re.ASCII), lambda text: CardIndexCommand(int(text))),
    (re.compile(r"exit"), lambda text: ExitCommand()),
)


def parse_command(text: str) -> Command | None:
    """Return the first command whose pattern matches the whole of ``text``."""

    for pattern, build in _MATCHERS:
        if pattern.fullmatch(text):
            return build(text)
    return None


def parse_yes_no(text: str) -> bool | None:
    """Map a case-insensitive ``yes``/``no`` answer to a bool, else ``None``."""

    answer = text.lower()
    if answer == "yes":
        return True
    if answer == "no":
        return False
    return None
