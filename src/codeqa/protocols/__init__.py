"""Protocol definitions for extensible components."""

from codeqa.protocols.chunker import ChunkingStrategy
from codeqa.protocols.embedder import AIProvider, CompletionProvider, EmbeddingProvider
from codeqa.protocols.ingester import Ingester
from codeqa.protocols.store import ProjectStore

__all__ = [
    "AIProvider",
    "ChunkingStrategy",
    "CompletionProvider",
    "EmbeddingProvider",
    "Ingester",
    "ProjectStore",
]
