"""Facade wiring settings, provider, index and QA service together."""

import logging
import uuid
from typing import Iterable

from codeqa.chunkers import LineWindowChunker
from codeqa.config import Settings
from codeqa.indexing import ProjectIndex
from codeqa.models import (
    Answer,
    FileExplanation,
    FolderSummary,
    IndexStats,
    ParsedFile,
    RankedChunk,
)
from codeqa.protocols import AIProvider, ProjectStore
from codeqa.providers import ProviderStatus, create_provider, provider_status
from codeqa.services import QAService
from codeqa.storage import InMemoryProjectStore

logger = logging.getLogger(__name__)


def new_project_id() -> str:
    """Return a fresh opaque project id."""
    return uuid.uuid4().hex


class Engine:
    """Entry point for collaborators (upload, Q&A and project routes)."""

    def __init__(
        self,
        settings: Settings,
        provider: AIProvider,
        store: ProjectStore | None = None,
    ):
        self.settings = settings
        self.provider = provider
        self.project_index = ProjectIndex(
            store or InMemoryProjectStore(),
            provider,
            chunker=LineWindowChunker(),
            max_workers=settings.embed_workers,
            timeout=settings.request_timeout,
        )
        self.qa = QAService(self.project_index, provider, timeout=settings.request_timeout)

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "Engine":
        """Build an engine for the provider selected in the settings."""
        settings = settings or Settings()
        provider = create_provider(settings)
        status = provider_status(settings)
        logger.info(f"AI Provider: {status.name}")
        logger.info(f"   {status.message}")
        return cls(settings, provider)

    def index(self, project_id: str, files: Iterable[ParsedFile]) -> IndexStats:
        return self.project_index.index(project_id, files)

    def search(
        self,
        project_id: str,
        query: str,
        language: str | None = None,
        folder: str | None = None,
        limit: int = ProjectIndex.DEFAULT_LIMIT,
        timeout: float | None = None,
    ) -> list[RankedChunk]:
        return self.project_index.search(
            project_id,
            query,
            language=language,
            folder=folder,
            limit=limit,
            timeout=timeout,
        )

    def answer(
        self,
        project_id: str,
        question: str,
        language: str | None = None,
        folder: str | None = None,
        timeout: float | None = None,
    ) -> Answer:
        return self.qa.answer(
            project_id, question, language=language, folder=folder, timeout=timeout
        )

    def explain_file(
        self, project_id: str, file_path: str, timeout: float | None = None
    ) -> FileExplanation:
        return self.qa.explain_file(project_id, file_path, timeout=timeout)

    def suggest_questions(self, project_id: str) -> list[str]:
        return self.qa.suggest_questions(project_id)

    def project_exists(self, project_id: str) -> bool:
        return self.project_index.exists(project_id)

    def delete_project(self, project_id: str) -> bool:
        return self.project_index.delete(project_id)

    def list_project_ids(self) -> list[str]:
        return self.project_index.list_ids()

    def get_stats(self, project_id: str) -> IndexStats:
        return self.project_index.stats(project_id)

    def get_files(self, project_id: str) -> tuple[ParsedFile, ...]:
        return self.project_index.files(project_id)

    def get_folders(self, project_id: str) -> list[FolderSummary]:
        return self.project_index.folders(project_id)

    def provider_status(self) -> ProviderStatus:
        return provider_status(self.settings)
