class EmbeddingError(Exception):
    """Raised when text embeddings cannot be produced."""


class EmbeddingNetworkError(EmbeddingError):
    """Raised when the embedding provider is unreachable or rejects the request."""
