import uuid
from typing import Any

from psycopg.rows import dict_row

from smartdocs.database.connection import get_connection
from smartdocs.documents.models import Folder
from smartdocs.documents.stores import BaseFolderStore


class FolderRepository(BaseFolderStore):
    """Database operations for the folders table."""

    def create_folder(self, name: str, color: str) -> Folder | None:
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    """
                    INSERT INTO folders (id, name, color)
                    VALUES (%s, %s, %s)
                    RETURNING id, name, color, shared_with, created_at
                    """,
                    (uuid.uuid4().hex[:12], name, color),
                )
                row = cur.fetchone()
            conn.commit()
        return _to_folder(row) if row is not None else None

    def list_folders(self) -> list[Folder]:
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    """
                    SELECT id, name, color, shared_with, created_at
                    FROM folders
                    ORDER BY created_at, id
                    """
                )
                rows = cur.fetchall()
        return [_to_folder(row) for row in rows]


def _to_folder(row: dict[str, Any]) -> Folder:
    return Folder(
        id=row["id"],
        name=row["name"],
        color=row["color"],
        shared_with=frozenset(row["shared_with"] or ()),
        created_at=row["created_at"],
    )
