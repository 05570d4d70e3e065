import json
import uuid
from abc import ABC, abstractmethod
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from smartdocs.documents.models import DocumentRecord, Folder, NewDocument


class BaseDocumentStore(ABC):
    """Contract for the persistence collaborator that owns documents."""

    @abstractmethod
    def create_document(self, document: NewDocument) -> DocumentRecord:
        """Persist a new document and return the stored record."""

    @abstractmethod
    def list_documents(self, folder_id: str | None = None) -> list[DocumentRecord]:
        """Return documents in insertion order, optionally filtered by folder."""


class BaseFolderStore(ABC):
    """Contract for the persistence collaborator that owns folders."""

    @abstractmethod
    def create_folder(self, name: str, color: str) -> Folder | None:
        """Create a folder. May return None when the store refuses it."""

    @abstractmethod
    def list_folders(self) -> list[Folder]:
        """Return folders in creation order."""


class InMemoryLibrary(BaseDocumentStore, BaseFolderStore):
    """Process-local document and folder store, optionally backed by a JSON file."""

    def __init__(
        self,
        documents: list[DocumentRecord] | None = None,
        folders: list[Folder] | None = None,
    ) -> None:
        self._documents: list[DocumentRecord] = list(documents or [])
        self._folders: list[Folder] = list(folders or [])

    def create_document(self, document: NewDocument) -> DocumentRecord:
        record = DocumentRecord(
            id=uuid.uuid4().hex[:12],
            created_at=datetime.now(timezone.utc),
            **asdict(document),
        )
        self._documents.append(record)
        return record

    def list_documents(self, folder_id: str | None = None) -> list[DocumentRecord]:
        if folder_id is None:
            return list(self._documents)
        return [d for d in self._documents if d.folder_id == folder_id]

    def create_folder(self, name: str, color: str) -> Folder:
        folder = Folder(
            id=uuid.uuid4().hex[:12],
            name=name,
            color=color,
            created_at=datetime.now(timezone.utc),
        )
        self._folders.append(folder)
        return folder

    def list_folders(self) -> list[Folder]:
        return list(self._folders)

    # ------------------------------------------------------------------
    # JSON snapshot
    # ------------------------------------------------------------------

    @classmethod
    def load(cls, path: Path) -> "InMemoryLibrary":
        """Load a library snapshot; a missing file yields an empty library."""
        if not path.exists():
            return cls()
        raw = json.loads(path.read_text(encoding="utf-8"))
        documents = [_document_from_dict(d) for d in raw.get("documents", [])]
        folders = [_folder_from_dict(f) for f in raw.get("folders", [])]
        return cls(documents=documents, folders=folders)

    def save(self, path: Path) -> None:
        payload = {
            "documents": [_to_json_dict(asdict(d)) for d in self._documents],
            "folders": [_to_json_dict(asdict(f)) for f in self._folders],
        }
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")


def _to_json_dict(data: dict[str, Any]) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for key, value in data.items():
        if isinstance(value, datetime):
            out[key] = value.isoformat()
        elif isinstance(value, (tuple, frozenset, set)):
            out[key] = sorted(value) if isinstance(value, (frozenset, set)) else list(value)
        else:
            out[key] = value
    return out


def _parse_datetime(raw: Any) -> datetime | None:
    if not raw:
        return None
    return datetime.fromisoformat(raw)


def _document_from_dict(raw: dict[str, Any]) -> DocumentRecord:
    return DocumentRecord(
        id=str(raw["id"]),
        title=raw.get("title", ""),
        category=raw.get("category", ""),
        summary=raw.get("summary", ""),
        tags=tuple(raw.get("tags", [])),
        folder_id=raw.get("folder_id", "root"),
        created_at=_parse_datetime(raw.get("created_at")),
        file_size=int(raw.get("file_size", 0)),
        mime_type=raw.get("mime_type", ""),
        image_url=raw.get("image_url", ""),
        content_analysis=raw.get("content_analysis", ""),
        important_date=raw.get("important_date"),
        date_label=raw.get("date_label"),
        ocr_text=raw.get("ocr_text"),
    )


def _folder_from_dict(raw: dict[str, Any]) -> Folder:
    return Folder(
        id=str(raw["id"]),
        name=raw["name"],
        color=raw.get("color", "bg-indigo-500"),
        shared_with=frozenset(raw.get("shared_with", [])),
        created_at=_parse_datetime(raw.get("created_at")),
    )
