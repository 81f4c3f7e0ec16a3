"""Protocol for input source handlers."""

from pathlib import Path
from typing import Iterator, Protocol, runtime_checkable

from codeqa.models import ParsedFile


@runtime_checkable
class Ingester(Protocol):
    """Protocol for input source handlers.

    Uses structural subtyping - no inheritance required.
    """

    @property
    def source_type(self) -> str:
        """Return identifier for this source type (e.g., 'folder')."""
        ...

    def can_handle(self, source: Path) -> bool:
        """Check if this ingester can process the given source."""
        ...

    def ingest(self, source: Path) -> Iterator[ParsedFile]:
        """Yield parsed source files. Binary and unsupported files are skipped."""
        ...
