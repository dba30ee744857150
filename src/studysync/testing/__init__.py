"""Test helpers: ``from studysync.testing import TestClient``."""

from studysync.testing.client import TestClient

__all__ = ["TestClient"]
