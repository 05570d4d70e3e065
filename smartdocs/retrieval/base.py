from abc import ABC, abstractmethod

from smartdocs.documents.models import DocumentRecord, SearchResult


class BaseRetrievalEngine(ABC):
    """Contract for all search backends."""

    @abstractmethod
    def search(self, query: str, documents: list[DocumentRecord]) -> SearchResult:
        """Answer a free-text query over the given documents.

        Args:
            query: The user's question or keywords.
            documents: The whole library, in insertion order.

        Returns:
            SearchResult with ranked document ids and a natural-language answer.
            Never raises for provider failures; remote engines degrade to
            local lexical scoring.
        """
