"""Top-level package for the Indigo card game engine."""

from . import cards, commands, engine, rules, state, strategy

__all__ = [
    "cards",
    "commands",
    "engine",
    "rules",
    "state",
    "strategy",
]
