"""Test doubles for the DI container: in-memory persistence."""

from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockPersistenceProvider",
    "build_test_container",
]
