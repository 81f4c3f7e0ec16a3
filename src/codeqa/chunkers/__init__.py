"""Chunking strategies."""

from codeqa.chunkers.line_chunker import LineWindowChunker

__all__ = ["LineWindowChunker"]
