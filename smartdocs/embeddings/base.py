from abc import ABC, abstractmethod


class BaseEmbeddingClient(ABC):
    """Contract for all sentence embedding adapters."""

    @abstractmethod
    def embed(self, texts: list[str]) -> list[list[float]]:
        """Return one embedding vector per input text, in input order.

        Raises:
            EmbeddingNetworkError: on transport or API failures.
            EmbeddingError: when the provider answers with an unexpected shape.
        """
