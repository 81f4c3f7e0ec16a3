"""Project storage backends."""

from codeqa.storage.store import InMemoryProjectStore

__all__ = ["InMemoryProjectStore"]
