"""Line-window chunking strategy for source files."""

from typing import Iterator

from codeqa.models import Chunk, ParsedFile


class LineWindowChunker:
    """Default chunking: 50-line windows every 40 lines, plus a file summary.

    Neighbouring windows overlap by 10 lines so that code spanning a window
    boundary is still seen whole by at least one chunk. The summary chunk is
    yielded first and describes the file rather than quoting all of it.
    """

    WINDOW_SIZE = 50
    OVERLAP = 10
    PREVIEW_LINES = 20

    def chunk(self, file: ParsedFile) -> Iterator[Chunk]:
        """Yield the summary chunk followed by the line windows of a file.

        Args:
            file: The parsed file to split

        Yields:
            Chunk objects with 1-based, inclusive line ranges
        """
        lines = file.lines
        yield self._make_chunk(
            file, self.summarize(file), 1, len(lines), is_summary=True
        )

        stride = self.WINDOW_SIZE - self.OVERLAP
        for start in range(0, len(lines), stride):
            window = "\n".join(lines[start : start + self.WINDOW_SIZE])
            if not window.strip():
                continue
            end = min(start + self.WINDOW_SIZE, len(lines))
            yield self._make_chunk(file, window, start + 1, end)

    def summarize(self, file: ParsedFile) -> str:
        """Build the synthetic summary text for a file."""
        summary = f"File: {file.path}\nLanguage: {file.language}\n"

        if file.structures:
            summary += "\nCode structures:\n"
            for s in file.structures:
                summary += f"- {s.kind}: {s.name} (line {s.line})\n"

        preview = "\n".join(file.lines[: self.PREVIEW_LINES])
        summary += f"\nContent preview:\n{preview}"
        return summary

    @staticmethod
    def _make_chunk(
        file: ParsedFile,
        content: str,
        start_line: int,
        end_line: int,
        is_summary: bool = False,
    ) -> Chunk:
        return Chunk(
            content=content,
            start_line=start_line,
            end_line=end_line,
            path=file.path,
            file_name=file.file_name,
            language=file.language,
            folder=file.folder,
            is_summary=is_summary,
        )
