"""Storage abstractions used by the StackDeck game service."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..domain.state import GameStateRecord


class GameStateStore(Protocol):
    async def load(self, profile_id: str) -> GameStateRecord | None:
        ...

    async def save(self, record: GameStateRecord) -> None:
        ...
