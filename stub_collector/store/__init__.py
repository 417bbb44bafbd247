"""In-memory data stores for maintaining entity relationships."""

from stub_collector.store.session import SessionStore

__all__ = ["SessionStore"]
