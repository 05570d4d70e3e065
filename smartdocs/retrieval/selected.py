from collections.abc import Callable

from smartdocs.config.provider_selection import ProviderSelection
from smartdocs.documents.models import DocumentRecord, SearchResult
from smartdocs.logging.logger import Log
from smartdocs.retrieval.base import BaseRetrievalEngine
from smartdocs.retrieval.lexical_engine import LexicalRetrievalEngine

EngineBuilder = Callable[[str], BaseRetrievalEngine]


class SelectedRetrievalEngine(BaseRetrievalEngine):
    """Delegates to the engine the selection names at call time.

    An engine that cannot be built (missing API key, unknown embedding
    backend) is replaced by lexical search for that call.
    """

    def __init__(
        self,
        selection: ProviderSelection,
        build: EngineBuilder,
        fallback: BaseRetrievalEngine | None = None,
    ) -> None:
        self._selection = selection
        self._build = build
        self._fallback = fallback or LexicalRetrievalEngine()
        self._engines: dict[str, BaseRetrievalEngine] = {}

    @property
    def active(self) -> BaseRetrievalEngine:
        name = self._selection.get()
        engine = self._engines.get(name)
        if engine is None:
            try:
                engine = self._build(name)
            except ValueError as exc:
                Log.warning(f"Search provider '{name}' unavailable, using keyword search: {exc}")
                return self._fallback
            self._engines[name] = engine
        return engine

    def search(self, query: str, documents: list[DocumentRecord]) -> SearchResult:
        return self.active.search(query, documents)
