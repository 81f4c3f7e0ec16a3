"""Protocol for chunking strategies."""

from typing import Iterator, Protocol, runtime_checkable

from codeqa.models import Chunk, ParsedFile


@runtime_checkable
class ChunkingStrategy(Protocol):
    """Protocol for chunking strategies.

    Implementations return a fresh iterator on every call, so a file can be
    chunked again from the start.
    """

    def chunk(self, file: ParsedFile) -> Iterator[Chunk]:
        """Yield the chunks of a parsed file."""
        ...
