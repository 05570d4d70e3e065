"""Validates a remote model's search JSON against the library it was asked about."""

from typing import Any

from smartdocs.documents.models import SearchResult
from smartdocs.retrieval.exceptions import RetrievalValidationError

_MAX_RESULTS = 10


def validate_and_build(data: dict[str, Any], known_ids: list[str]) -> SearchResult:
    """Validate raw parsed JSON and build a SearchResult.

    Ids the library does not contain are dropped, duplicates removed and the
    model's order kept.

    Raises:
        RetrievalValidationError: on any validation failure.
    """
    raw_ids = data.get("relevantDocIds")
    if not isinstance(raw_ids, list):
        raise RetrievalValidationError("'relevantDocIds' must be a list")
    answer = data.get("answer")
    if not isinstance(answer, str) or not answer.strip():
        raise RetrievalValidationError("'answer' must be a non-empty string")

    known = set(known_ids)
    ids: list[str] = []
    for i, raw in enumerate(raw_ids):
        if not isinstance(raw, (str, int)) or isinstance(raw, bool):
            raise RetrievalValidationError(f"Document id at index {i} must be a string")
        doc_id = str(raw)
        if doc_id in known and doc_id not in ids:
            ids.append(doc_id)
    return SearchResult(relevant_doc_ids=ids[:_MAX_RESULTS], answer=answer.strip())
