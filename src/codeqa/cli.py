"""CLI entry point for codeqa.

Each command ingests and indexes a local folder in process, then runs one
query against it. Nothing is persisted between invocations.
"""

import argparse
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path

from codeqa.config import Settings
from codeqa.engine import Engine, new_project_id
from codeqa.errors import CodeQAError
from codeqa.ingesters import get_ingester

logger = logging.getLogger(__name__)


def load_project(engine: Engine, source: str) -> str:
    """Ingest and index a folder, returning the new project id."""
    source_path = Path(source)
    ingester = get_ingester(source_path)
    if ingester is None:
        logger.error(f"Cannot process: {source}")
        logger.error("Supported inputs: folders")
        sys.exit(1)

    project_id = new_project_id()
    files = list(ingester.ingest(source_path))
    stats = engine.index(project_id, files)
    logger.info(
        f"Indexed {stats.total_files} files, {stats.total_chunks} chunks "
        f"({', '.join(stats.languages) or 'no languages'})"
    )
    return project_id


def index(engine: Engine, args: argparse.Namespace) -> None:
    project_id = load_project(engine, args.source)
    print(f"Project: {project_id}")
    print(f"")
    print(f"Folders:")
    for folder in engine.get_folders(project_id):
        print(f"  {folder.path:<50} {folder.file_count:>4} files  {', '.join(folder.languages)}")


def ask(engine: Engine, args: argparse.Namespace) -> None:
    project_id = load_project(engine, args.source)
    answer = engine.answer(
        project_id, args.question, language=args.language, folder=args.folder
    )

    if args.json:
        print(json.dumps(answer.to_dict(), indent=2))
        return

    print(answer.answer)
    print(f"")
    print(f"Confidence: {answer.confidence}  (provider: {answer.provider})")
    print(f"References:")
    for ref in answer.references:
        kind = " [summary]" if ref.is_summary else ""
        print(f"  {ref.file}:{ref.start_line}-{ref.end_line}  {ref.similarity}%{kind}")


def search(engine: Engine, args: argparse.Namespace) -> None:
    project_id = load_project(engine, args.source)
    results = engine.search(
        project_id,
        args.query,
        language=args.language,
        folder=args.folder,
        limit=args.limit,
    )

    if args.json:
        print(json.dumps([r.to_dict() for r in results], indent=2))
        return

    if not results:
        print(f"No results found for: {args.query}")
        return

    for i, r in enumerate(results, 1):
        # Truncate long text snippets
        text = r.content[:200].replace("\n", " ")
        if len(r.content) > 200:
            text += "..."
        print(f"{i}. [{r.similarity:.3f}] {r.path}:{r.chunk.start_line}-{r.chunk.end_line}")
        print(f"   {text}")
        print(f"")


def explain(engine: Engine, args: argparse.Namespace) -> None:
    project_id = load_project(engine, args.source)
    result = engine.explain_file(project_id, args.path)

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
        return

    print(f"{result.file.path} ({result.file.language}, {result.file.line_count} lines)")
    print(f"")
    print(result.explanation)


def suggest(engine: Engine, args: argparse.Namespace) -> None:
    project_id = load_project(engine, args.source)
    for question in engine.suggest_questions(project_id):
        print(f"- {question}")


def files(engine: Engine, args: argparse.Namespace) -> None:
    project_id = load_project(engine, args.source)
    parsed = engine.get_files(project_id)

    if args.json:
        print(
            json.dumps(
                [
                    {
                        "path": f.path,
                        "fileName": f.file_name,
                        "language": f.language,
                        "lineCount": f.line_count,
                        "folder": f.folder,
                    }
                    for f in parsed
                ],
                indent=2,
            )
        )
        return

    for f in parsed:
        print(f"{f.path:<60} {f.language:<12} {f.line_count:>6} lines")


def provider(engine: Engine, args: argparse.Namespace) -> None:
    status = engine.provider_status()
    if args.json:
        print(json.dumps(asdict(status), indent=2))
        return

    print(f"Provider: {status.name} ({status.provider})")
    print(f"  Configured: {'yes' if status.is_configured else 'no'}")
    print(f"  {status.message}")


COMMANDS = {
    "index": index,
    "ask": ask,
    "search": search,
    "explain": explain,
    "suggest": suggest,
    "files": files,
    "provider": provider,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="codeqa",
        description="codeqa - Ask questions about a codebase",
    )
    parser.add_argument(
        "--json", action="store_true", help="Print machine-readable JSON output"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # index command
    index_parser = subparsers.add_parser(
        "index",
        help="Index a folder and show its folder structure",
    )
    index_parser.add_argument("source", help="Input folder path")

    # ask command
    ask_parser = subparsers.add_parser("ask", help="Ask a question about a folder")
    ask_parser.add_argument("source", help="Input folder path")
    ask_parser.add_argument("question", help="Natural language question")
    ask_parser.add_argument("--language", help="Only use chunks in this language")
    ask_parser.add_argument("--folder", help="Only use chunks under this folder prefix")

    # search command
    search_parser = subparsers.add_parser("search", help="Semantic search in a folder")
    search_parser.add_argument("source", help="Input folder path")
    search_parser.add_argument("query", help="Natural language query")
    search_parser.add_argument("--language", help="Only return chunks in this language")
    search_parser.add_argument("--folder", help="Only return chunks under this folder prefix")
    search_parser.add_argument(
        "--limit",
        type=int,
        default=10,
        help="Maximum number of results (default: 10)",
    )

    # explain command
    explain_parser = subparsers.add_parser("explain", help="Explain a single file")
    explain_parser.add_argument("source", help="Input folder path")
    explain_parser.add_argument("path", help="File path relative to the folder")

    # suggest command
    suggest_parser = subparsers.add_parser(
        "suggest", help="Suggest questions to ask about a folder"
    )
    suggest_parser.add_argument("source", help="Input folder path")

    # files command
    files_parser = subparsers.add_parser("files", help="List the indexed files of a folder")
    files_parser.add_argument("source", help="Input folder path")

    # provider command
    subparsers.add_parser("provider", help="Show the configured AI provider")

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)
    settings = Settings()

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(message)s",
        stream=sys.stderr,
    )

    engine = Engine.from_settings(settings)
    try:
        COMMANDS[args.command](engine, args)
    except CodeQAError as exc:
        print(f"error: {exc.kind}: {exc.message}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
