"""
Test suite for source parsing, structure scanning and folder ingestion.
"""

from pathlib import Path

import pytest

from codeqa.ingesters import FolderIngester, get_ingester
from codeqa.parsers import extract_structures, get_language, parse_file, should_ignore
from codeqa.utils import is_binary_content


class TestParseFile:
    """Test suite for parse_file."""

    def test_builds_parsed_file(self) -> None:
        """Test metadata derived from path and content."""
        # Act
        parsed = parse_file("src/app/main.ts", b"const x = 1\nexport class App {}\n")

        # Assert
        assert parsed is not None
        assert parsed.file_name == "main.ts"
        assert parsed.extension == ".ts"
        assert parsed.language == "typescript"
        assert parsed.folder == "src/app"
        assert parsed.line_count == 3
        assert parsed.size_bytes == len(b"const x = 1\nexport class App {}\n")
        assert [(s.kind, s.name, s.line) for s in parsed.structures] == [("class", "App", 2)]

    def test_root_files_live_in_slash_folder(self) -> None:
        assert parse_file("index.js", b"x").folder == "/"

    def test_windows_separators_are_normalised(self) -> None:
        assert parse_file("src\\util.js", b"x").path == "src/util.js"

    def test_unsupported_extension_is_skipped(self) -> None:
        assert parse_file("main.go", b"package main") is None

    def test_binary_content_is_skipped(self) -> None:
        assert parse_file("data.json", b"\x00\x01\x02") is None

    def test_language_map(self) -> None:
        assert get_language(".JSX") == "javascript"
        assert get_language(".py") == "python"
        assert get_language(".rs") == "unknown"

    @pytest.mark.parametrize(
        "path,ignored",
        [
            ("node_modules/react/index.js", True),
            ("src/.git/config.json", True),
            ("package-lock.json", True),
            ("src/builder.js", False),
            ("src/app.js", False),
        ],
    )
    def test_ignore_patterns(self, path, ignored) -> None:
        assert should_ignore(path) is ignored


class TestExtractStructures:
    """Test suite for the best-effort structure scan."""

    def test_javascript_patterns(self) -> None:
        """Test each JS/TS pattern kind is recognised."""
        # Arrange
        content = "\n".join(
            [
                "export async function load() {}",
                "const handler = async (req) => {}",
                "class Store {}",
                "export interface User {}",
                "type Id = string",
            ]
        )

        # Act
        found = {(s.kind, s.name, s.line) for s in extract_structures(content, ".ts")}

        # Assert
        assert ("function", "load", 1) in found
        assert ("arrow_function", "handler", 2) in found
        assert ("class", "Store", 3) in found
        assert ("interface", "User", 4) in found
        assert ("type", "Id", 5) in found

    def test_component_detection(self) -> None:
        """Test JSX-returning arrow functions count as components."""
        # Act
        kinds = {s.kind for s in extract_structures("const Nav = () => <nav/>", ".jsx")}

        # Assert
        assert {"arrow_function", "component"} <= kinds

    def test_python_functions(self) -> None:
        """Test Python defs are only scanned in .py files."""
        # Arrange
        content = "class Parser:\n    def parse(self):\n        pass"

        # Act
        py = {(s.kind, s.name) for s in extract_structures(content, ".py")}
        js = {(s.kind, s.name) for s in extract_structures(content, ".js")}

        # Assert
        assert py == {("class", "Parser"), ("function", "parse")}
        assert js == {("class", "Parser")}

    def test_line_content_is_trimmed(self) -> None:
        structure = extract_structures("    function pad() {}   ")[0]
        assert structure.line_content == "function pad() {}"


class TestBinaryDetection:
    """Test suite for is_binary_content."""

    def test_utf8_source_is_text(self) -> None:
        assert not is_binary_content("const greeting = 'héllo 世界'".encode("utf-8"))

    def test_null_bytes_are_binary(self) -> None:
        assert is_binary_content(b"abc\x00def")

    def test_empty_is_text(self) -> None:
        assert not is_binary_content(b"")

    def test_truncated_multibyte_sample_is_text(self) -> None:
        """Test a UTF-8 sequence cut by the sample boundary is tolerated."""
        # Arrange
        content = "a" * 8191 + "é"

        # Act / Assert
        assert not is_binary_content(content.encode("utf-8"))

    def test_random_high_bytes_are_binary(self) -> None:
        assert is_binary_content(bytes(range(128, 256)) * 4)


class TestFolderIngester:
    """Test suite for FolderIngester."""

    @pytest.fixture
    def project_dir(self, tmp_path: Path) -> Path:
        (tmp_path / "src").mkdir()
        (tmp_path / "src" / "app.js").write_text("function main() {}\n")
        (tmp_path / "src" / "logo.png").write_bytes(b"\x89PNG\r\n\x1a\n\x00")
        (tmp_path / "node_modules" / "lib").mkdir(parents=True)
        (tmp_path / "node_modules" / "lib" / "index.js").write_text("module.exports = 1")
        (tmp_path / "README.md").write_text("# Demo\n")
        (tmp_path / "package-lock.json").write_text("{}")
        return tmp_path

    def test_ingests_supported_files(self, project_dir: Path) -> None:
        """Test ignored, binary and unsupported files are skipped."""
        # Act
        files = list(FolderIngester().ingest(project_dir))

        # Assert
        assert [f.path for f in files] == ["README.md", "src/app.js"]
        assert files[1].structures[0].name == "main"

    def test_get_ingester(self, project_dir: Path) -> None:
        assert isinstance(get_ingester(project_dir), FolderIngester)
        assert get_ingester(project_dir / "README.md") is None
