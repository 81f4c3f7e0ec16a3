"""codeqa - index a codebase and ask questions about it."""

from codeqa.config import Settings
from codeqa.engine import Engine, new_project_id
from codeqa.errors import (
    CodeQAError,
    EmbeddingError,
    FileNotFound,
    GenerationFailed,
    ProjectNotFound,
)

__version__ = "0.1.0"

__all__ = [
    "CodeQAError",
    "EmbeddingError",
    "Engine",
    "FileNotFound",
    "GenerationFailed",
    "ProjectNotFound",
    "Settings",
    "new_project_id",
]
