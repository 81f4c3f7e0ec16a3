"""Ingester for local source folders."""

import logging
import os
from pathlib import Path
from typing import Iterator

from codeqa.models import ParsedFile
from codeqa.parsers import parse_file, should_ignore

logger = logging.getLogger(__name__)


class FolderIngester:
    """Ingester for local filesystem folders."""

    source_type = "folder"

    def can_handle(self, source: Path) -> bool:
        """Check if this is an existing directory."""
        return source.is_dir()

    def ingest(self, source: Path) -> Iterator[ParsedFile]:
        """Yield parsed source files from a folder recursively.

        Args:
            source: Path to the folder

        Yields:
            ParsedFile objects for each supported text file, in sorted order
        """
        for root, dirs, files in os.walk(source):
            rel_root = Path(root).relative_to(source)
            # Prune ignored directories so we never descend into node_modules
            dirs[:] = sorted(
                d for d in dirs if not should_ignore((rel_root / d).as_posix())
            )

            for filename in sorted(files):
                full_path = Path(root) / filename
                rel_path = full_path.relative_to(source).as_posix()

                if should_ignore(rel_path):
                    continue

                try:
                    raw_content = full_path.read_bytes()
                except OSError as exc:
                    logger.warning(f"Could not read file {full_path}: {exc}")
                    continue

                parsed = parse_file(rel_path, raw_content)
                if parsed is not None:
                    yield parsed
