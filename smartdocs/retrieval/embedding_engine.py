from smartdocs.documents.models import DocumentRecord, RankedMatch, SearchResult
from smartdocs.embeddings.base import BaseEmbeddingClient
from smartdocs.embeddings.exceptions import EmbeddingError
from smartdocs.embeddings.similarity import cosine_similarity
from smartdocs.logging.logger import Log
from smartdocs.retrieval.base import BaseRetrievalEngine
from smartdocs.retrieval.lexical_engine import (
    EMPTY_LIBRARY_ANSWER,
    LexicalRetrievalEngine,
    compose_answer,
)

_EMBED_CHAR_LIMIT = 512
_MAX_RESULTS = 5


def embedding_text(document: DocumentRecord) -> str:
    text = f"{document.title} {document.summary} {document.category} {document.ocr_text or ''}"
    return text.strip()[:_EMBED_CHAR_LIMIT] or document.id


class EmbeddingRetrievalEngine(BaseRetrievalEngine):
    """Semantic search by cosine similarity between query and document embeddings.

    Document vectors are cached by (id, text) so repeated queries over the
    same library only embed the query.
    """

    def __init__(
        self,
        *,
        embedding_client: BaseEmbeddingClient,
        min_score: float = 0.15,
        max_results: int = _MAX_RESULTS,
        fallback: BaseRetrievalEngine | None = None,
    ) -> None:
        self._embedding_client = embedding_client
        self._min_score = min_score
        self._max_results = max_results
        self._fallback = fallback or LexicalRetrievalEngine()
        self._cache: dict[tuple[str, str], list[float]] = {}

    def rank(self, query: str, documents: list[DocumentRecord]) -> list[RankedMatch]:
        doc_vectors = self._document_vectors(documents)
        [query_vector] = self._embedding_client.embed([query])
        scored = [
            RankedMatch(doc.id, cosine_similarity(query_vector, vector))
            for doc, vector in zip(documents, doc_vectors)
        ]
        ranked = sorted((m for m in scored if m.score > self._min_score), key=lambda m: -m.score)
        return ranked[: self._max_results]

    def search(self, query: str, documents: list[DocumentRecord]) -> SearchResult:
        if not documents:
            return SearchResult(relevant_doc_ids=[], answer=EMPTY_LIBRARY_ANSWER)
        if not query.strip():
            return SearchResult(relevant_doc_ids=[], answer=compose_answer(query, []))
        try:
            ranked = self.rank(query, documents)
        except (EmbeddingError, ValueError) as exc:
            Log.warning(f"Embedding search failed, falling back to keyword search: {exc}")
            return self._fallback.search(query, documents)

        by_id = {doc.id: doc for doc in documents}
        matches = [by_id[m.document_id] for m in ranked]
        Log.info(f"Embedding search matched {len(matches)} documents")
        return SearchResult(
            relevant_doc_ids=[m.document_id for m in ranked],
            answer=compose_answer(query, matches),
        )

    def _document_vectors(self, documents: list[DocumentRecord]) -> list[list[float]]:
        keys = [(doc.id, embedding_text(doc)) for doc in documents]
        missing = [key for key in dict.fromkeys(keys) if key not in self._cache]
        if missing:
            vectors = self._embedding_client.embed([text for _, text in missing])
            if len(vectors) != len(missing):
                raise EmbeddingError("Embedding count does not match document count")
            self._cache.update(zip(missing, vectors))
        return [self._cache[key] for key in keys]
