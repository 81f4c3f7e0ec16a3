"""Protocol for project storage backends."""

from typing import Optional, Protocol, runtime_checkable

from codeqa.models import Project


@runtime_checkable
class ProjectStore(Protocol):
    """Protocol for project storage.

    A project is either absent or fully indexed: ``put`` publishes a complete
    project and ``delete`` removes it in one step.
    """

    def get(self, project_id: str) -> Optional[Project]:
        """Return the project, or None if it is not stored."""
        ...

    def put(self, project: Project) -> None:
        """Store (or replace) a project."""
        ...

    def delete(self, project_id: str) -> bool:
        """Remove a project. Returns True if it existed."""
        ...

    def list_ids(self) -> list[str]:
        """Return the ids of all stored projects."""
        ...
