"""Testing utilities for StackDeck."""

from .factory import CardFactory
from .fixtures import SAMPLE_CARDS, FakeClock, app_fixture, memory_app
from .test_client import TestClient

__all__ = [
    "CardFactory",
    "SAMPLE_CARDS",
    "FakeClock",
    "app_fixture",
    "memory_app",
    "TestClient",
]
