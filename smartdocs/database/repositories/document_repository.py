import uuid
from typing import Any

from psycopg.rows import dict_row

from smartdocs.database.connection import get_connection
from smartdocs.documents.models import DocumentRecord, NewDocument
from smartdocs.documents.stores import BaseDocumentStore

_COLUMNS = """
    id, title, category, summary, tags, folder_id, file_size, mime_type,
    image_url, content_analysis, important_date, date_label, ocr_text, created_at
"""


class DocumentRepository(BaseDocumentStore):
    """Database operations for the documents table."""

    def create_document(self, document: NewDocument) -> DocumentRecord:
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    f"""
                    INSERT INTO documents (
                        id, title, category, summary, tags, folder_id, file_size,
                        mime_type, image_url, content_analysis, important_date,
                        date_label, ocr_text
                    )
                    VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s)
                    RETURNING {_COLUMNS}
                    """,
                    (
                        uuid.uuid4().hex[:12],
                        document.title,
                        document.category,
                        document.summary,
                        list(document.tags),
                        document.folder_id,
                        document.file_size,
                        document.mime_type,
                        document.image_url,
                        document.content_analysis,
                        document.important_date,
                        document.date_label,
                        document.ocr_text,
                    ),
                )
                row = cur.fetchone()
            conn.commit()
        if row is None:
            raise RuntimeError("INSERT INTO documents returned no row")
        return _to_record(row)

    def list_documents(self, folder_id: str | None = None) -> list[DocumentRecord]:
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                if folder_id is None:
                    cur.execute(f"SELECT {_COLUMNS} FROM documents ORDER BY created_at, id")
                else:
                    cur.execute(
                        f"""
                        SELECT {_COLUMNS} FROM documents
                        WHERE folder_id = %s
                        ORDER BY created_at, id
                        """,
                        (folder_id,),
                    )
                rows = cur.fetchall()
        return [_to_record(row) for row in rows]


def _to_record(row: dict[str, Any]) -> DocumentRecord:
    return DocumentRecord(
        id=row["id"],
        title=row["title"],
        category=row["category"],
        summary=row["summary"],
        tags=tuple(row["tags"] or ()),
        folder_id=row["folder_id"],
        created_at=row["created_at"],
        file_size=row["file_size"],
        mime_type=row["mime_type"],
        image_url=row["image_url"],
        content_analysis=row["content_analysis"],
        important_date=row["important_date"],
        date_label=row["date_label"],
        ocr_text=row["ocr_text"],
    )
