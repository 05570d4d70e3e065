import argparse
import json
import mimetypes
import sys
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from pathlib import Path

from smartdocs.analysis import AnalysisProviderFactory, SelectedAnalysisProvider
from smartdocs.analysis.exceptions import AnalysisError
from smartdocs.config.provider_selection import PROVIDERS, ProviderSelection
from smartdocs.config.settings import Settings
from smartdocs.database.connection import close_pool, ensure_schema, init_pool
from smartdocs.database.repositories.document_repository import DocumentRepository
from smartdocs.database.repositories.folder_repository import FolderRepository
from smartdocs.documents.models import SourceFile
from smartdocs.documents.stores import BaseDocumentStore, BaseFolderStore, InMemoryLibrary
from smartdocs.ingestion.models import QueueItem
from smartdocs.ingestion.queue import build_ingestion_queue
from smartdocs.logging.logger import Log
from smartdocs.retrieval import RetrievalEngineFactory, SelectedRetrievalEngine, validate_query
from smartdocs.retrieval.exceptions import QueryValidationError

DEFAULT_LIBRARY_PATH = Path("smartdocs-library.json")


def read_source_file(path: Path) -> SourceFile:
    mime_type, _ = mimetypes.guess_type(path.name)
    return SourceFile(
        filename=path.name,
        mime_type=mime_type or "application/octet-stream",
        data=path.read_bytes(),
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="smartdocs",
        description="Analyze, organize and search personal documents.",
    )
    parser.add_argument(
        "--provider",
        choices=PROVIDERS,
        help="AI provider for analysis and search (default: AI_PROVIDER setting)",
    )
    storage = parser.add_mutually_exclusive_group()
    storage.add_argument(
        "--library",
        type=Path,
        default=DEFAULT_LIBRARY_PATH,
        help=f"JSON library file (default: {DEFAULT_LIBRARY_PATH})",
    )
    storage.add_argument(
        "--database",
        action="store_true",
        help="Use the PostgreSQL library configured through DB_* settings",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    analyze = commands.add_parser("analyze", help="Analyze files and print the results")
    analyze.add_argument("files", nargs="+", type=Path)

    ingest = commands.add_parser("ingest", help="Analyze files and file them into the library")
    ingest.add_argument("files", nargs="+", type=Path)
    ingest.add_argument("--folder", help="Put every document into this folder id")

    search = commands.add_parser("search", help="Ask a question about the library")
    search.add_argument("query", nargs="+")
    return parser


@contextmanager
def open_library(
    args: argparse.Namespace, settings: Settings
) -> Iterator[tuple[BaseDocumentStore, BaseFolderStore]]:
    """Yield document and folder stores; a JSON library is saved on exit."""
    if args.database:
        init_pool(settings)
        try:
            ensure_schema()
            yield DocumentRepository(), FolderRepository()
        finally:
            close_pool()
        return
    library = InMemoryLibrary.load(args.library)
    yield library, library
    library.save(args.library)


def _print_transition(item: QueueItem) -> None:
    suffix = f" ({item.error_message})" if item.error_message else ""
    print(f"[{item.status.value}] {item.file.filename}{suffix}")


def run_analyze(args: argparse.Namespace, provider: SelectedAnalysisProvider) -> int:
    if provider.low_fidelity:
        Log.warning("Active provider only sees file names; results are approximate")
    results: list[dict[str, object]] = []
    failed = 0
    for path in args.files:
        try:
            results.append(provider.analyze(read_source_file(path)).to_dict())
        except AnalysisError as exc:
            print(f"{path.name}: analysis failed ({exc})", file=sys.stderr)
            failed += 1
    print(json.dumps(results, indent=2, ensure_ascii=False))
    return 1 if failed else 0


def run_ingest(
    args: argparse.Namespace, provider: SelectedAnalysisProvider, settings: Settings
) -> int:
    with open_library(args, settings) as (documents, folders):
        queue = build_ingestion_queue(provider, documents, folders, on_transition=_print_transition)
        queue.add(read_source_file(path) for path in args.files)
        report = queue.run(target_folder_id=args.folder)
    print(f"{report.done} done, {report.errors} failed")
    return 1 if report.errors else 0


def run_search(
    args: argparse.Namespace, engine: SelectedRetrievalEngine, settings: Settings
) -> int:
    try:
        query = validate_query(" ".join(args.query))
    except QueryValidationError as exc:
        print(str(exc), file=sys.stderr)
        return 2
    with open_library(args, settings) as (documents, _folders):
        result = engine.search(query, documents.list_documents())
    print(
        json.dumps(
            {"relevantDocIds": result.relevant_doc_ids, "answer": result.answer},
            indent=2,
            ensure_ascii=False,
        )
    )
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: settings -> provider selection -> command."""
    args = build_parser().parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)

    selection = ProviderSelection(args.provider or settings.ai_provider)
    Log.info(f"Active provider: {selection.get()}")

    if args.command == "search":
        engine = SelectedRetrievalEngine(
            selection, lambda name: RetrievalEngineFactory.create(name, settings)
        )
        return run_search(args, engine, settings)

    provider = SelectedAnalysisProvider(
        selection, lambda name: AnalysisProviderFactory.create(name, settings)
    )
    if args.command == "analyze":
        return run_analyze(args, provider)
    return run_ingest(args, provider, settings)


if __name__ == "__main__":
    sys.exit(main())
