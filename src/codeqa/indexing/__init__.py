"""Project indexing and similarity search."""

from codeqa.indexing.project_index import ProjectIndex
from codeqa.indexing.similarity import cosine_similarity

__all__ = ["ProjectIndex", "cosine_similarity"]
