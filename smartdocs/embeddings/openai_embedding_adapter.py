import httpx
import openai

from smartdocs.embeddings.base import BaseEmbeddingClient
from smartdocs.embeddings.exceptions import EmbeddingError, EmbeddingNetworkError


class OpenAIEmbeddingAdapter(BaseEmbeddingClient):
    """Embeddings from the OpenAI-compatible embeddings API."""

    def __init__(
        self,
        *,
        api_key: str,
        model: str,
        timeout_seconds: int,
        base_url: str | None = None,
        max_retries: int = 2,
    ) -> None:
        self._model = model
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
            max_retries=max_retries,
        )

    def embed(self, texts: list[str]) -> list[list[float]]:
        if not texts:
            return []
        try:
            response = self._client.embeddings.create(model=self._model, input=texts)
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise EmbeddingNetworkError(f"Embedding provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise EmbeddingNetworkError(f"Embedding provider API error: {exc}") from exc

        vectors = [list(item.embedding) for item in sorted(response.data, key=lambda d: d.index)]
        if len(vectors) != len(texts):
            raise EmbeddingError(
                f"Expected {len(texts)} embeddings, provider returned {len(vectors)}"
            )
        return vectors
