from smartdocs.retrieval.exceptions import QueryValidationError

STOP_WORDS = frozenset(
    {
        "the", "is", "at", "which", "on", "a", "an", "and", "or", "but", "that",
        "this", "to", "in", "for", "of", "with", "as", "those", "these", "there",
        "are", "it", "if", "be", "by",
    }
)

EMPTY_QUERY_HINT = "Please enter something to search for."
STOP_WORDS_HINT = (
    "Please enter specific keywords (e.g., 'Invoice 123', 'Passport') "
    "instead of just common words."
)


def validate_query(query: str) -> str:
    """Return the stripped query, rejecting empty and stop-word-only input.

    Raises:
        QueryValidationError: with a user-facing hint as its message.
    """
    stripped = query.strip()
    words = stripped.lower().split()
    if not words:
        raise QueryValidationError(EMPTY_QUERY_HINT)
    if all(word in STOP_WORDS for word in words):
        raise QueryValidationError(STOP_WORDS_HINT)
    return stripped
