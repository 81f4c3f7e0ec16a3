"""Error taxonomy for codeqa.

Every error carries a short machine-readable ``kind`` and a human-readable
message so callers can render a structured response.
"""


class CodeQAError(Exception):
    """Base class for all codeqa errors."""

    kind = "codeqa_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"error": self.kind, "message": self.message}


class ProjectNotFound(CodeQAError):
    """Raised for a query against an unindexed or deleted project."""

    kind = "project_not_found"

    def __init__(self, project_id: str):
        super().__init__(
            f"Project {project_id} not found. "
            "Please upload and index a codebase first."
        )
        self.project_id = project_id


class FileNotFound(CodeQAError):
    """Raised when a path is not part of the project's file list."""

    kind = "file_not_found"

    def __init__(self, path: str):
        super().__init__(f"File {path} not found in project")
        self.path = path


class GenerationFailed(CodeQAError):
    """The completion provider did not produce an answer."""

    kind = "generation_failed"


class EmbeddingError(CodeQAError):
    """A provider could not embed a piece of text."""

    kind = "embedding_failed"


class EmbeddingDegraded(CodeQAError):
    """An embedding call fell back to the offline scheme. Logged, never raised to callers."""

    kind = "embedding_degraded"


class IndexingPartialFailure(CodeQAError):
    """Some chunks failed to embed and were left out of the index. Logged only."""

    kind = "indexing_partial_failure"

    def __init__(self, project_id: str, failed: int):
        super().__init__(
            f"{failed} chunk(s) could not be embedded for project {project_id}"
        )
        self.failed = failed
