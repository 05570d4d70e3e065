from dataclasses import dataclass, field
from datetime import datetime
from pathlib import PurePath

UNCATEGORIZED = "Uncategorized"
OTHER = "Other"
DEFAULT_DATE_LABEL = "Date"

SENTINEL_CATEGORIES = frozenset({UNCATEGORIZED, OTHER})


@dataclass(frozen=True)
class SourceFile:
    """An uploaded file, alive only for the duration of one analysis call."""

    filename: str
    mime_type: str
    data: bytes = field(repr=False)

    @property
    def size(self) -> int:
        return len(self.data)

    @property
    def stem(self) -> str:
        """Filename without its last extension."""
        return PurePath(self.filename).stem


@dataclass(frozen=True)
class AnalysisResult:
    """Structured output of analyzing one document."""

    title: str
    category: str
    summary: str
    tags: tuple[str, ...] = ()
    important_date: str | None = None
    date_label: str | None = None
    ocr_text: str | None = None

    def __post_init__(self) -> None:
        if not self.category.strip():
            object.__setattr__(self, "category", UNCATEGORIZED)
        # A label without a date is meaningless; a date without a label keeps a generic one.
        if not self.important_date:
            object.__setattr__(self, "important_date", None)
            object.__setattr__(self, "date_label", None)
        elif not self.date_label:
            object.__setattr__(self, "date_label", DEFAULT_DATE_LABEL)
        object.__setattr__(self, "tags", tuple(dict.fromkeys(self.tags)))

    def to_dict(self) -> dict[str, object]:
        """Serialize using the camelCase keys of the remote model boundary."""
        payload: dict[str, object] = {
            "title": self.title,
            "category": self.category,
            "summary": self.summary,
            "tags": list(self.tags),
        }
        if self.important_date is not None:
            payload["importantDate"] = self.important_date
            payload["dateLabel"] = self.date_label
        if self.ocr_text:
            payload["ocrText"] = self.ocr_text
        return payload


@dataclass(frozen=True)
class NewDocument:
    """Fields the ingestion queue hands to the document store."""

    title: str
    category: str
    summary: str
    tags: tuple[str, ...]
    folder_id: str
    mime_type: str
    file_size: int
    image_url: str = ""
    content_analysis: str = ""
    important_date: str | None = None
    date_label: str | None = None
    ocr_text: str | None = None


@dataclass(frozen=True)
class DocumentRecord:
    """A persisted document as returned by the document store."""

    id: str
    title: str
    category: str
    summary: str
    tags: tuple[str, ...] = ()
    folder_id: str = "root"
    created_at: datetime | None = None
    file_size: int = 0
    mime_type: str = ""
    image_url: str = ""
    content_analysis: str = ""
    important_date: str | None = None
    date_label: str | None = None
    ocr_text: str | None = None


@dataclass(frozen=True)
class Folder:
    """A named folder documents are organized into."""

    id: str
    name: str
    color: str = "bg-indigo-500"
    shared_with: frozenset[str] = frozenset()
    created_at: datetime | None = None


@dataclass(frozen=True)
class RankedMatch:
    """A scored document produced by a retrieval engine."""

    document_id: str
    score: float


@dataclass(frozen=True)
class SearchResult:
    """Answer to a natural-language query over the library."""

    relevant_doc_ids: list[str] = field(default_factory=list)
    answer: str = ""
