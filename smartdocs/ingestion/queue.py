import threading
import uuid
from collections.abc import Callable, Iterable

from smartdocs.analysis.base import BaseAnalysisProvider
from smartdocs.documents.models import SourceFile
from smartdocs.documents.stores import BaseDocumentStore, BaseFolderStore
from smartdocs.ingestion.exceptions import QueueBusyError
from smartdocs.ingestion.folder_resolver import FolderResolver
from smartdocs.ingestion.models import FAILED_TO_ANALYZE, ItemStatus, QueueItem, QueueReport
from smartdocs.ingestion.pipeline import PipelineContext, PipelineStep
from smartdocs.ingestion.steps import AnalyzeStep, CreateDocumentStep, ResolveFolderStep
from smartdocs.logging.logger import Log

TransitionCallback = Callable[[QueueItem], None]


class IngestionQueue:
    """Sequential batch runner: analyze -> resolve folder -> create document.

    One item at a time, in insertion order. A failing item is marked
    ERROR and the batch moves on. Items already DONE are skipped when the
    queue is run again; ERROR items are retried.
    """

    def __init__(
        self,
        steps: list[PipelineStep],
        on_transition: TransitionCallback | None = None,
    ) -> None:
        self._steps = steps
        self._on_transition = on_transition
        self._items: list[QueueItem] = []
        self._running = False
        self._cancel = threading.Event()

    @property
    def items(self) -> list[QueueItem]:
        return list(self._items)

    @property
    def is_running(self) -> bool:
        return self._running

    def add(self, files: Iterable[SourceFile]) -> list[QueueItem]:
        self._ensure_idle()
        added = [QueueItem(id=uuid.uuid4().hex[:12], file=f) for f in files]
        self._items.extend(added)
        return added

    def remove(self, item_id: str) -> None:
        self._ensure_idle()
        self._items = [item for item in self._items if item.id != item_id]

    def clear(self) -> None:
        self._ensure_idle()
        self._items = []

    def cancel(self) -> None:
        """Stop the active run before it starts the next item."""
        self._cancel.set()

    def run(self, target_folder_id: str | None = None) -> QueueReport:
        self._ensure_idle()
        self._running = True
        self._cancel.clear()
        report = QueueReport()
        Log.info(f"Ingestion started: {len(self._items)} items")
        try:
            for item in list(self._items):
                if item.status is ItemStatus.DONE:
                    report.skipped += 1
                    continue
                if self._cancel.is_set():
                    Log.warning("Ingestion cancelled")
                    report.cancelled = True
                    break
                self._process(item, target_folder_id, report)
        finally:
            self._running = False
        Log.info(
            f"Ingestion finished: {report.done} done, {report.errors} failed, "
            f"{report.skipped} skipped"
        )
        return report

    def _process(self, item: QueueItem, target_folder_id: str | None, report: QueueReport) -> None:
        item.error_message = None
        self._transition(item, ItemStatus.ANALYZING)
        context = PipelineContext(item=item, target_folder_id=target_folder_id)
        try:
            for step in self._steps:
                context = step.run(context)
        except Exception as exc:
            Log.error(f"Failed to ingest '{item.file.filename}': {exc}")
            item.error_message = FAILED_TO_ANALYZE
            report.errors += 1
            self._transition(item, ItemStatus.ERROR)
            return
        if context.record is not None:
            report.records.append(context.record)
        report.done += 1
        self._transition(item, ItemStatus.DONE)

    def _transition(self, item: QueueItem, status: ItemStatus) -> None:
        item.status = status
        if self._on_transition is not None:
            self._on_transition(item)

    def _ensure_idle(self) -> None:
        if self._running:
            raise QueueBusyError("Ingestion queue is already running")


def build_ingestion_queue(
    provider: BaseAnalysisProvider,
    document_store: BaseDocumentStore,
    folder_store: BaseFolderStore,
    on_transition: TransitionCallback | None = None,
) -> IngestionQueue:
    """Build a queue wired with the standard analyze/resolve/create steps."""
    steps: list[PipelineStep] = [
        AnalyzeStep(provider),
        ResolveFolderStep(FolderResolver(folder_store)),
        CreateDocumentStep(document_store),
    ]
    return IngestionQueue(steps, on_transition=on_transition)
