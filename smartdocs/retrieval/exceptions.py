class RetrievalError(Exception):
    """Raised when a search over the library fails."""


class RetrievalValidationError(RetrievalError):
    """Raised when a model search response does not match the search schema."""


class QueryValidationError(RetrievalError):
    """Raised when a query carries no searchable keywords."""
