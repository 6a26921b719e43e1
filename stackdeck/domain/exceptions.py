"""Exceptions raised by StackDeck domain services."""


class StackDeckError(RuntimeError):
    """Base class for domain exceptions."""


class InvalidPoolError(StackDeckError):
    """Raised when a card pool is empty or carries a non-positive weight."""


class EmptyPoolError(StackDeckError):
    """Raised when a selection is attempted against a pool without cards."""


class InvalidArgumentError(StackDeckError, ValueError):
    """Raised when a draw is requested with a non-positive count."""


class UnknownUpgradeTypeError(StackDeckError):
    """Raised when an upgrade type cannot be resolved."""

    def __init__(self, upgrade_type: object) -> None:
        super().__init__(f"Unknown upgrade type {upgrade_type!r}")
        self.upgrade_type = upgrade_type


class InsufficientDecks(StackDeckError):
    """Raised when the player tries to open more decks than they own."""

    def __init__(self, requested: int, available: int) -> None:
        super().__init__(f"Not enough decks: need {requested}, have {available}")
        self.requested = requested
        self.available = available


class InsufficientScore(StackDeckError):
    """Raised when the player cannot pay for an upgrade."""

    def __init__(self, cost: int, score: float) -> None:
        super().__init__(f"Not enough score: need {cost}, have {score:g}")
        self.cost = cost
        self.score = score


class UpgradeNotAllowed(StackDeckError):
    """Raised when the active game mode does not sell an upgrade."""


class PoolNotLoaded(StackDeckError):
    """Raised when a game action runs before a card pool is attached."""
