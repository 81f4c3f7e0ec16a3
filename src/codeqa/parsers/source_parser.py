"""Turn raw file bytes into ParsedFile records."""

import posixpath
from pathlib import PurePosixPath
from typing import Optional

from codeqa.models import ParsedFile
from codeqa.parsers.structure import extract_structures
from codeqa.utils.binary import is_binary_content

LANGUAGES = {
    ".js": "javascript",
    ".jsx": "javascript",
    ".ts": "typescript",
    ".tsx": "typescript",
    ".py": "python",
    ".md": "markdown",
    ".json": "json",
    ".html": "html",
    ".css": "css",
    ".scss": "scss",
}

SUPPORTED_EXTENSIONS = frozenset(LANGUAGES)

IGNORE_PATTERNS = frozenset(
    {
        "node_modules",
        ".git",
        "dist",
        "build",
        ".next",
        "coverage",
        ".angular",
        "__pycache__",
        "package-lock.json",
        "yarn.lock",
        ".DS_Store",
    }
)


def get_language(extension: str) -> str:
    """Map a file extension to a language tag ('unknown' if unmapped)."""
    return LANGUAGES.get(extension.lower(), "unknown")


def should_ignore(path: str) -> bool:
    """Check if any component of a relative path is on the ignore list."""
    return any(part in IGNORE_PATTERNS for part in PurePosixPath(path).parts)


def parse_content(path: str, content: str) -> ParsedFile:
    """Build a ParsedFile from already-decoded text.

    Args:
        path: Path relative to the project root, using forward slashes
        content: File text
    """
    pure = PurePosixPath(path)
    extension = pure.suffix.lower()
    folder = posixpath.dirname(path) or "/"

    return ParsedFile(
        path=path,
        file_name=pure.name,
        extension=extension,
        language=get_language(extension),
        content=content,
        line_count=len(content.split("\n")),
        size_bytes=len(content.encode("utf-8")),
        folder=folder,
        structures=extract_structures(content, extension),
    )


def parse_file(path: str, raw_content: bytes) -> Optional[ParsedFile]:
    """Parse raw file bytes handed over by an upload or ingester.

    Returns:
        A ParsedFile, or None for unsupported extensions and binary content
    """
    path = path.replace("\\", "/")
    if PurePosixPath(path).suffix.lower() not in SUPPORTED_EXTENSIONS:
        return None
    if is_binary_content(raw_content):
        return None

    return parse_content(path, raw_content.decode("utf-8", errors="replace"))
