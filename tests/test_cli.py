"""
Test suite for the codeqa command line.
"""

import json
from pathlib import Path

import pytest

from codeqa.cli import main


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "math.js").write_text("export function add(a, b) {\n  return a + b\n}\n")
    return tmp_path


class TestCli:
    """Test suite for CLI commands in demo mode."""

    def test_ask_prints_answer_and_references(self, project_dir, capsys) -> None:
        # Act
        main(["ask", str(project_dir), "what does add do?"])

        # Assert
        out = capsys.readouterr().out
        assert "Demo Mode" in out
        assert "src/math.js:1-4" in out

    def test_search_json(self, project_dir, capsys) -> None:
        # Act
        main(["--json", "search", str(project_dir), "add", "--limit", "1"])

        # Assert
        results = json.loads(capsys.readouterr().out)
        assert len(results) == 1
        assert results[0]["path"] == "src/math.js"

    def test_explain_missing_file_exits(self, project_dir, capsys) -> None:
        # Act
        with pytest.raises(SystemExit) as exc_info:
            main(["explain", str(project_dir), "missing.js"])

        # Assert
        assert exc_info.value.code == 1
        assert "error: file_not_found" in capsys.readouterr().err

    def test_provider_status(self, capsys) -> None:
        # Act
        main(["provider"])

        # Assert
        assert "Provider: Demo Mode (demo)" in capsys.readouterr().out

    def test_rejects_non_folder(self, tmp_path) -> None:
        with pytest.raises(SystemExit):
            main(["suggest", str(tmp_path / "nope.zip")])

    def test_files_lists_indexed_files(self, project_dir, capsys) -> None:
        # Act
        main(["files", str(project_dir)])

        # Assert
        out = capsys.readouterr().out
        assert "src/math.js" in out
        assert "javascript" in out
        assert "4 lines" in out

    def test_files_json(self, project_dir, capsys) -> None:
        # Act
        main(["--json", "files", str(project_dir)])

        # Assert
        assert json.loads(capsys.readouterr().out) == [
            {
                "path": "src/math.js",
                "fileName": "math.js",
                "language": "javascript",
                "lineCount": 4,
                "folder": "src",
            }
        ]
