"""
Test suite for LineWindowChunker.

Covers window counts and ranges, the summary chunk, blank windows and
restartability.
"""

import pytest

from codeqa.chunkers import LineWindowChunker


def numbered(count: int) -> str:
    return "\n".join(f"line {i}" for i in range(1, count + 1))


@pytest.fixture
def chunker() -> LineWindowChunker:
    return LineWindowChunker()


class TestWindows:
    """Test suite for the overlapping line windows."""

    def test_short_file_yields_summary_and_one_window(self, chunker, make_file) -> None:
        """Test a 5-line file yields exactly 2 chunks."""
        # Act
        chunks = list(chunker.chunk(make_file("a.py", numbered(5))))

        # Assert
        assert len(chunks) == 2
        assert chunks[0].is_summary
        assert (chunks[1].start_line, chunks[1].end_line) == (1, 5)
        assert not chunks[1].is_summary

    def test_hundred_lines_yield_three_overlapping_windows(self, chunker, make_file) -> None:
        """Test a 100-line file is covered by 1-50, 41-90 and 81-100."""
        # Act
        chunks = list(chunker.chunk(make_file("a.py", numbered(100))))

        # Assert
        windows = [(c.start_line, c.end_line) for c in chunks if not c.is_summary]
        assert windows == [(1, 50), (41, 90), (81, 100)]

    def test_window_content_matches_line_range(self, chunker, make_file) -> None:
        """Test window text is exactly the lines of its range."""
        # Act
        chunks = list(chunker.chunk(make_file("a.py", numbered(100))))

        # Assert
        second = chunks[2]
        lines = second.content.split("\n")
        assert lines[0] == "line 41"
        assert lines[-1] == "line 90"
        assert len(lines) == 50

    def test_blank_windows_are_skipped(self, chunker, make_file) -> None:
        """Test a window made only of whitespace is not emitted."""
        # Arrange
        content = numbered(3) + "\n" * 60

        # Act
        chunks = list(chunker.chunk(make_file("a.py", content)))

        # Assert
        windows = [c for c in chunks if not c.is_summary]
        assert len(windows) == 1
        assert windows[0].start_line == 1

    def test_empty_file_yields_only_summary(self, chunker, make_file) -> None:
        """Test an empty file still gets its summary chunk."""
        # Act
        chunks = list(chunker.chunk(make_file("empty.js", "")))

        # Assert
        assert len(chunks) == 1
        assert chunks[0].is_summary

    def test_chunks_carry_file_identity(self, chunker, make_file) -> None:
        """Test chunks copy path, name, language and folder from the file."""
        # Act
        chunks = list(chunker.chunk(make_file("src/lib/util.ts", numbered(3))))

        # Assert
        for chunk in chunks:
            assert chunk.path == "src/lib/util.ts"
            assert chunk.file_name == "util.ts"
            assert chunk.language == "typescript"
            assert chunk.folder == "src/lib"


class TestSummary:
    """Test suite for the synthetic summary chunk."""

    def test_summary_spans_whole_file(self, chunker, make_file) -> None:
        """Test the summary covers line 1 to the last line."""
        # Act
        summary = next(iter(chunker.chunk(make_file("a.py", numbered(100)))))

        # Assert
        assert (summary.start_line, summary.end_line) == (1, 100)

    def test_summary_lists_structures_and_preview(self, chunker, make_file) -> None:
        """Test the summary names structures and previews 20 lines."""
        # Arrange
        content = "export class Cart {}\nfunction total() {}\n" + numbered(40)

        # Act
        summary = next(iter(chunker.chunk(make_file("cart.js", content))))

        # Assert
        assert summary.content.startswith("File: cart.js\nLanguage: javascript\n")
        assert "Code structures:\n" in summary.content
        assert "- class: Cart (line 1)" in summary.content
        assert "- function: total (line 2)" in summary.content
        preview = summary.content.split("Content preview:\n", 1)[1]
        assert len(preview.split("\n")) == 20

    def test_summary_without_structures_omits_section(self, chunker, make_file) -> None:
        """Test files without structures have no structure list."""
        # Act
        summary = next(iter(chunker.chunk(make_file("README.md", "# Title\ntext"))))

        # Assert
        assert "Code structures" not in summary.content
        assert summary.content.endswith("Content preview:\n# Title\ntext")


class TestRestartable:
    """Test suite for lazy, restartable chunking."""

    def test_each_call_restarts(self, chunker, make_file) -> None:
        """Test two calls produce identical sequences."""
        # Arrange
        file = make_file("a.py", numbered(120))

        # Act
        first = list(chunker.chunk(file))
        second = list(chunker.chunk(file))

        # Assert
        assert first == second
