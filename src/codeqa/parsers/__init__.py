"""Source parsing: language detection and structure scanning."""

from codeqa.parsers.source_parser import (
    SUPPORTED_EXTENSIONS,
    get_language,
    parse_content,
    parse_file,
    should_ignore,
)
from codeqa.parsers.structure import extract_structures

__all__ = [
    "SUPPORTED_EXTENSIONS",
    "extract_structures",
    "get_language",
    "parse_content",
    "parse_file",
    "should_ignore",
]
