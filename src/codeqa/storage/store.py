"""In-memory project storage."""

import threading
from typing import Optional

from codeqa.models import Project


class InMemoryProjectStore:
    """Dict-backed storage for indexed projects.

    Projects are immutable, so readers can use what ``get`` returns without
    holding the lock. Swapping or removing a whole project under the lock
    keeps every project either absent or complete.
    """

    def __init__(self) -> None:
        self._projects: dict[str, Project] = {}
        self._lock = threading.Lock()

    def get(self, project_id: str) -> Optional[Project]:
        with self._lock:
            return self._projects.get(project_id)

    def put(self, project: Project) -> None:
        with self._lock:
            self._projects[project.id] = project

    def delete(self, project_id: str) -> bool:
        with self._lock:
            return self._projects.pop(project_id, None) is not None

    def list_ids(self) -> list[str]:
        with self._lock:
            return list(self._projects)

    def __len__(self) -> int:
        with self._lock:
            return len(self._projects)
