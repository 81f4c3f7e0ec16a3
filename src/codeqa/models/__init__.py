"""Data models for codeqa."""

from codeqa.models.code import Chunk, CodeStructure, EmbeddedChunk, ParsedFile
from codeqa.models.results import (
    Answer,
    FileExplanation,
    FileMetadata,
    FolderSummary,
    IndexStats,
    Project,
    RankedChunk,
    Reference,
)

__all__ = [
    "Answer",
    "Chunk",
    "CodeStructure",
    "EmbeddedChunk",
    "FileExplanation",
    "FileMetadata",
    "FolderSummary",
    "IndexStats",
    "ParsedFile",
    "Project",
    "RankedChunk",
    "Reference",
]
