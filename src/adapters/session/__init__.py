"""Session adapters - Session establishment implementations."""

from .memory import InMemorySessionStore

__all__ = ["InMemorySessionStore"]
