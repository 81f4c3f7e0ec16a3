"""Core data models for source files and chunks."""

from dataclasses import dataclass, field

import numpy as np


@dataclass(frozen=True)
class CodeStructure:
    """A structure spotted by the pattern scan (function, class, ...).

    Advisory only: the scan is line-oriented and never claims to be complete.
    """

    kind: str
    name: str
    line: int  # 1-based
    line_content: str


@dataclass(frozen=True)
class ParsedFile:
    """A source file ingested into a project."""

    path: str
    file_name: str
    extension: str
    language: str
    content: str
    line_count: int
    size_bytes: int
    folder: str
    structures: tuple[CodeStructure, ...] = ()

    @property
    def lines(self) -> list[str]:
        return self.content.split("\n")


@dataclass(frozen=True)
class Chunk:
    """A line-addressed slice of a file (1-based, inclusive)."""

    content: str
    start_line: int
    end_line: int
    path: str
    file_name: str
    language: str
    folder: str
    is_summary: bool = False


@dataclass(frozen=True)
class EmbeddedChunk:
    """A chunk together with its embedding vector."""

    chunk: Chunk
    embedding: np.ndarray = field(repr=False, compare=False)
