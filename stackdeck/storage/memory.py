"""In-memory storage backend for StackDeck."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .base import GameStateStore

if TYPE_CHECKING:
    from ..domain.state import GameStateRecord


class InMemoryGameStateStore(GameStateStore):
    def __init__(self) -> None:
        self._records: dict[str, GameStateRecord] = {}

    async def load(self, profile_id: str) -> GameStateRecord | None:
        return self._records.get(profile_id)

    async def save(self, record: GameStateRecord) -> None:
        self._records[record.profile_id] = record
