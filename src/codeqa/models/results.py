"""Result and bookkeeping models returned by the index and QA service."""

from dataclasses import asdict, dataclass, field
from datetime import datetime

from codeqa.models.code import Chunk, CodeStructure, EmbeddedChunk, ParsedFile


@dataclass(frozen=True)
class IndexStats:
    """Summary of an indexing run."""

    total_files: int
    total_chunks: int
    languages: tuple[str, ...]
    failed_chunks: int = 0

    def to_dict(self) -> dict:
        return {
            "totalFiles": self.total_files,
            "totalChunks": self.total_chunks,
            "languages": list(self.languages),
            "failedChunks": self.failed_chunks,
        }


@dataclass(frozen=True)
class Project:
    """A fully indexed project. Never mutated after it is stored."""

    id: str
    files: tuple[ParsedFile, ...]
    chunks: tuple[EmbeddedChunk, ...]
    stats: IndexStats
    provider: str
    indexed_at: datetime = field(default_factory=datetime.now)


@dataclass(frozen=True)
class RankedChunk:
    """A search hit. Carries the chunk but never its embedding."""

    chunk: Chunk
    similarity: float

    @property
    def path(self) -> str:
        return self.chunk.path

    @property
    def content(self) -> str:
        return self.chunk.content

    def to_dict(self) -> dict:
        data = asdict(self.chunk)
        data["similarity"] = self.similarity
        return data


@dataclass(frozen=True)
class FolderSummary:
    """Files grouped under one folder of a project."""

    path: str
    files: tuple[str, ...]
    file_count: int
    languages: tuple[str, ...]


@dataclass(frozen=True)
class Reference:
    """A citation attached to an answer."""

    file: str
    file_name: str
    start_line: int
    end_line: int
    language: str
    folder: str
    similarity: int  # percent
    preview: str
    is_summary: bool


@dataclass(frozen=True)
class Answer:
    """An answer to a question about a project."""

    answer: str
    references: list[Reference]
    confidence: str
    relevant_files: list[str]
    provider: str

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class FileMetadata:
    """File details returned alongside an explanation."""

    path: str
    file_name: str
    language: str
    line_count: int
    structures: tuple[CodeStructure, ...]


@dataclass(frozen=True)
class FileExplanation:
    """A generated explanation of a single file."""

    explanation: str
    file: FileMetadata
    provider: str

    def to_dict(self) -> dict:
        return asdict(self)
