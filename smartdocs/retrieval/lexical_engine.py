"""Keyword relevance scoring over document metadata and extracted text.

Scoring per document (query and fields lower-cased):

- +100 when the whole query appears anywhere in the searchable text,
- +10 per occurrence of each query word longer than two characters,
- +50 when the query appears in the title, +30 in the category,
  +40 inside any tag,
- +60 when the document's important date is mentioned in the query.

Documents scoring zero are dropped; the rest are sorted by score with ties
kept in library order and capped at ten.
"""

from smartdocs.documents.models import DocumentRecord, RankedMatch, SearchResult
from smartdocs.retrieval.base import BaseRetrievalEngine

EXACT_MATCH_SCORE = 100
WORD_OCCURRENCE_SCORE = 10
TITLE_MATCH_SCORE = 50
CATEGORY_MATCH_SCORE = 30
TAG_MATCH_SCORE = 40
DATE_MATCH_SCORE = 60

MIN_WORD_LENGTH = 3
MAX_RESULTS = 10
MAX_TITLES_IN_ANSWER = 3

EMPTY_LIBRARY_ANSWER = "No documents found in your library."


def searchable_text(document: DocumentRecord) -> str:
    return "\n".join(
        [
            document.title,
            document.summary,
            " ".join(document.tags),
            document.category,
            document.ocr_text or "",
        ]
    ).lower()


def compose_answer(query: str, matches: list[DocumentRecord]) -> str:
    """Natural-language answer citing the matched documents."""
    if not matches:
        return (
            f'No documents found matching "{query}". '
            "Try different keywords or check your document library."
        )
    if len(matches) == 1:
        doc = matches[0]
        return f'Found 1 document: "{doc.title}" ({doc.category}). {doc.summary}'
    titles = '", "'.join(doc.title for doc in matches[:MAX_TITLES_IN_ANSWER])
    return f'Found {len(matches)} documents matching "{query}". Top results: "{titles}".'


class LexicalRetrievalEngine(BaseRetrievalEngine):
    """Local, deterministic keyword search."""

    def __init__(self, max_results: int = MAX_RESULTS) -> None:
        self._max_results = max_results

    def score(self, query: str, document: DocumentRecord) -> float:
        query_lower = query.strip().lower()
        if not query_lower:
            return 0.0
        words = [w for w in query_lower.split() if len(w) >= MIN_WORD_LENGTH]
        blob = searchable_text(document)

        score = 0.0
        if query_lower in blob:
            score += EXACT_MATCH_SCORE
        for word in words:
            score += blob.count(word) * WORD_OCCURRENCE_SCORE
        if query_lower in document.title.lower():
            score += TITLE_MATCH_SCORE
        if query_lower in document.category.lower():
            score += CATEGORY_MATCH_SCORE
        if any(query_lower in tag.lower() for tag in document.tags):
            score += TAG_MATCH_SCORE
        if document.important_date and document.important_date.lower() in query_lower:
            score += DATE_MATCH_SCORE
        return score

    def rank(self, query: str, documents: list[DocumentRecord]) -> list[RankedMatch]:
        scored = [RankedMatch(doc.id, self.score(query, doc)) for doc in documents]
        # sorted() is stable, so equal scores keep library order.
        ranked = sorted((m for m in scored if m.score > 0), key=lambda m: -m.score)
        return ranked[: self._max_results]

    def search(self, query: str, documents: list[DocumentRecord]) -> SearchResult:
        if not documents:
            return SearchResult(relevant_doc_ids=[], answer=EMPTY_LIBRARY_ANSWER)
        ranked = self.rank(query, documents)
        by_id = {doc.id: doc for doc in documents}
        matches = [by_id[m.document_id] for m in ranked]
        return SearchResult(
            relevant_doc_ids=[m.document_id for m in ranked],
            answer=compose_answer(query, matches),
        )
