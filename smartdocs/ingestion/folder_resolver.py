import random

from smartdocs.documents.models import Folder
from smartdocs.documents.stores import BaseFolderStore
from smartdocs.logging.logger import Log

ROOT_FOLDER_ID = "root"

FOLDER_COLORS: tuple[str, ...] = (
    "bg-blue-500",
    "bg-green-500",
    "bg-purple-500",
    "bg-pink-500",
    "bg-orange-500",
    "bg-teal-500",
)


class FolderResolver:
    """Chooses the folder a freshly analyzed document is filed into.

    Order: the caller's pre-selected folder, then an existing folder named
    like the category (case-insensitive), then a newly created one. When
    creation fails the first existing folder is used, and "root" when the
    library has no folders at all.
    """

    def __init__(self, folder_store: BaseFolderStore, rng: random.Random | None = None) -> None:
        self._folder_store = folder_store
        self._rng = rng or random.Random()

    def resolve(self, category: str, target_folder_id: str | None = None) -> str:
        if target_folder_id:
            return target_folder_id

        folders = self._folder_store.list_folders()
        existing = _find_by_name(folders, category)
        if existing is not None:
            return existing.id

        created = self._create(category)
        if created is not None:
            Log.info(f"Created folder '{created.name}' ({created.color})")
            return created.id

        if folders:
            Log.warning(f"Filing into '{folders[0].name}' instead of '{category}'")
            return folders[0].id
        return ROOT_FOLDER_ID

    def _create(self, name: str) -> Folder | None:
        color = self._rng.choice(FOLDER_COLORS)
        try:
            return self._folder_store.create_folder(name, color)
        except Exception as exc:
            Log.warning(f"Failed to create folder '{name}': {exc}")
            return None


def _find_by_name(folders: list[Folder], name: str) -> Folder | None:
    wanted = name.lower()
    for folder in folders:
        if folder.name.lower() == wanted:
            return folder
    return None
