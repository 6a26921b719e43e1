"""Storage backends for StackDeck."""

from .base import GameStateStore
from .memory import InMemoryGameStateStore

__all__ = [
    "GameStateStore",
    "InMemoryGameStateStore",
]
