from dataclasses import dataclass, field
from enum import Enum

from smartdocs.documents.models import AnalysisResult, DocumentRecord, SourceFile

FAILED_TO_ANALYZE = "Failed to analyze"


class ItemStatus(str, Enum):
    IDLE = "idle"
    ANALYZING = "analyzing"
    DONE = "done"
    ERROR = "error"


@dataclass
class QueueItem:
    """One file moving through the ingestion state machine."""

    id: str
    file: SourceFile
    status: ItemStatus = ItemStatus.IDLE
    error_message: str | None = None
    result: AnalysisResult | None = None
    record: DocumentRecord | None = None

    @property
    def is_terminal(self) -> bool:
        return self.status in (ItemStatus.DONE, ItemStatus.ERROR)


@dataclass
class QueueReport:
    """Outcome of one queue run."""

    done: int = 0
    errors: int = 0
    skipped: int = 0
    records: list[DocumentRecord] = field(default_factory=list)
    cancelled: bool = False
