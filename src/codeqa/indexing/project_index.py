"""Per-project chunk index with similarity search."""

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from functools import partial
from typing import Iterable, Optional

from codeqa.chunkers import LineWindowChunker
from codeqa.errors import EmbeddingError, IndexingPartialFailure, ProjectNotFound
from codeqa.indexing.similarity import cosine_similarity
from codeqa.models import (
    Chunk,
    EmbeddedChunk,
    FolderSummary,
    IndexStats,
    ParsedFile,
    Project,
    RankedChunk,
)
from codeqa.protocols import AIProvider, ChunkingStrategy, ProjectStore

logger = logging.getLogger(__name__)


class _FailureLog:
    """Counts embedding failures and logs only the first few."""

    def __init__(self, limit: int):
        self.limit = limit
        self.count = 0
        self._lock = threading.Lock()

    def record(self, chunk: Chunk, exc: Exception) -> None:
        with self._lock:
            self.count += 1
            count = self.count
        if count <= self.limit:
            logger.warning(f"Warning: Could not embed chunk from {chunk.path}: {exc}")


class ProjectIndex:
    """Index of embedded chunks, one immutable Project per id.

    Indexing builds the whole project before publishing it to the store, so
    readers never see a partially indexed project.
    """

    DEFAULT_LIMIT = 10
    LOGGED_ERRORS = 3
    PROGRESS_EVERY = 10

    def __init__(
        self,
        store: ProjectStore,
        provider: AIProvider,
        chunker: ChunkingStrategy | None = None,
        max_workers: int = 1,
        timeout: float | None = None,
    ):
        """Initialize the index.

        Args:
            store: Where finished projects live
            provider: Active embedding provider (also used for queries)
            chunker: Chunking strategy, LineWindowChunker by default
            max_workers: Embedding threads per file; 1 embeds sequentially
            timeout: Default provider timeout in seconds
        """
        self.store = store
        self.provider = provider
        self.chunker = chunker or LineWindowChunker()
        self.max_workers = max(1, max_workers)
        self.timeout = timeout

    # Write path

    def index(self, project_id: str, files: Iterable[ParsedFile]) -> IndexStats:
        """Chunk and embed files, then publish them as a project.

        Chunks whose embedding fails are left out; indexing still completes.

        Returns:
            Stats reflecting the chunks that were actually embedded
        """
        files = tuple(files)
        logger.info(f"Indexing project {project_id} with {len(files)} files...")

        failures = _FailureLog(self.LOGGED_ERRORS)
        embedded: list[EmbeddedChunk] = []

        executor = (
            ThreadPoolExecutor(max_workers=self.max_workers)
            if self.max_workers > 1
            else None
        )
        embed_one = partial(self._embed_chunk, failures=failures)
        try:
            for file in files:
                chunks = list(self.chunker.chunk(file))
                results = executor.map(embed_one, chunks) if executor else map(embed_one, chunks)

                for result in results:
                    if result is None:
                        continue
                    embedded.append(result)
                    if len(embedded) % self.PROGRESS_EVERY == 0:
                        logger.info(f"  Processed {len(embedded)} chunks...")
        finally:
            if executor is not None:
                executor.shutdown(wait=True)

        if failures.count > self.LOGGED_ERRORS:
            logger.warning(
                f"  ... and {failures.count - self.LOGGED_ERRORS} more embedding errors"
            )
        if failures.count:
            logger.warning(IndexingPartialFailure(project_id, failures.count).message)

        stats = IndexStats(
            total_files=len(files),
            total_chunks=len(embedded),
            languages=tuple(dict.fromkeys(f.language for f in files)),
            failed_chunks=failures.count,
        )
        self.store.put(
            Project(
                id=project_id,
                files=files,
                chunks=tuple(embedded),
                stats=stats,
                provider=self.provider.key,
            )
        )

        logger.info(f"Indexed {len(embedded)} chunks for project {project_id}")
        return stats

    def _embed_chunk(self, chunk: Chunk, failures: _FailureLog) -> Optional[EmbeddedChunk]:
        try:
            embedding = self.provider.embed(chunk.content, timeout=self.timeout)
        except EmbeddingError as exc:
            failures.record(chunk, exc)
            return None
        return EmbeddedChunk(chunk=chunk, embedding=embedding)

    # Read path

    def search(
        self,
        project_id: str,
        query: str,
        language: str | None = None,
        folder: str | None = None,
        limit: int = DEFAULT_LIMIT,
        timeout: float | None = None,
    ) -> list[RankedChunk]:
        """Find the chunks most similar to a query.

        Args:
            project_id: Project to search
            query: Natural language query
            language: Keep only chunks with exactly this language
            folder: Keep only chunks whose folder starts with this prefix
            limit: Maximum number of results
            timeout: Provider timeout for the query embedding, in seconds

        Returns:
            Chunks sorted by descending similarity (ties keep index order)

        Raises:
            ProjectNotFound: If the project is not indexed
        """
        project = self._require(project_id)
        if project.provider != self.provider.key:
            logger.warning(
                f"Project {project_id} was indexed with '{project.provider}' but is "
                f"searched with '{self.provider.key}'; similarity scores may be meaningless"
            )

        candidates = [
            ec
            for ec in project.chunks
            if (not language or ec.chunk.language == language)
            and (not folder or ec.chunk.folder.startswith(folder))
        ]
        if not candidates or limit <= 0:
            return []

        query_embedding = self.provider.embed(query, timeout=timeout or self.timeout)
        results = [
            RankedChunk(
                chunk=ec.chunk,
                similarity=max(0.0, cosine_similarity(query_embedding, ec.embedding)),
            )
            for ec in candidates
        ]
        results.sort(key=lambda r: r.similarity, reverse=True)
        return results[:limit]

    def exists(self, project_id: str) -> bool:
        return self.store.get(project_id) is not None

    def delete(self, project_id: str) -> bool:
        deleted = self.store.delete(project_id)
        if deleted:
            logger.info(f"Deleted project {project_id}")
        return deleted

    def list_ids(self) -> list[str]:
        return self.store.list_ids()

    def stats(self, project_id: str) -> IndexStats:
        return self._require(project_id).stats

    def files(self, project_id: str) -> tuple[ParsedFile, ...]:
        return self._require(project_id).files

    def get_project(self, project_id: str) -> Project:
        return self._require(project_id)

    def folders(self, project_id: str) -> list[FolderSummary]:
        """Group a project's files by folder, in first-seen order."""
        grouped: dict[str, list[ParsedFile]] = {}
        for file in self._require(project_id).files:
            grouped.setdefault(file.folder or "/", []).append(file)

        return [
            FolderSummary(
                path=path,
                files=tuple(f.path for f in files),
                file_count=len(files),
                languages=tuple(dict.fromkeys(f.language for f in files)),
            )
            for path, files in grouped.items()
        ]

    def _require(self, project_id: str) -> Project:
        project = self.store.get(project_id)
        if project is None:
            raise ProjectNotFound(project_id)
        return project
