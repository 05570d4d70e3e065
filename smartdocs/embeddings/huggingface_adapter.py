import time
from typing import Any

import httpx

from smartdocs.embeddings.base import BaseEmbeddingClient
from smartdocs.embeddings.exceptions import EmbeddingError, EmbeddingNetworkError
from smartdocs.logging.logger import Log

HF_INFERENCE_URL = "https://router.huggingface.co/hf-inference/models"


class HuggingFaceEmbeddingAdapter(BaseEmbeddingClient):
    """Embeddings from the Hugging Face inference feature-extraction pipeline.

    Cold models answer 503 while they load. Those responses are retried a
    bounded number of times with a fixed pause; every other failure is raised
    immediately.
    """

    def __init__(
        self,
        *,
        api_key: str,
        model: str,
        timeout_seconds: int,
        max_retries: int = 3,
        retry_backoff_seconds: float = 20.0,
        base_url: str = HF_INFERENCE_URL,
        http_client: httpx.Client | None = None,
    ) -> None:
        self._url = f"{base_url.rstrip('/')}/{model}/pipeline/feature-extraction"
        self._api_key = api_key
        self._max_retries = max_retries
        self._retry_backoff_seconds = retry_backoff_seconds
        self._http = http_client or httpx.Client(timeout=timeout_seconds)

    def embed(self, texts: list[str]) -> list[list[float]]:
        if not texts:
            return []
        if not self._api_key:
            raise EmbeddingNetworkError("Hugging Face API key not configured")
        payload = self._post({"inputs": texts})
        return self._validate(payload, len(texts))

    def _post(self, body: dict[str, Any]) -> Any:
        headers = {"Authorization": f"Bearer {self._api_key}"}
        for attempt in range(self._max_retries + 1):
            try:
                response = self._http.post(self._url, json=body, headers=headers)
            except httpx.HTTPError as exc:
                raise EmbeddingNetworkError(f"Hugging Face network error: {exc}") from exc

            if response.status_code == 503 and attempt < self._max_retries:
                Log.warning(
                    f"Hugging Face model loading, retrying in {self._retry_backoff_seconds}s "
                    f"(attempt {attempt + 1}/{self._max_retries})"
                )
                time.sleep(self._retry_backoff_seconds)
                continue
            if response.status_code >= 400:
                raise EmbeddingNetworkError(
                    f"Hugging Face API error {response.status_code}: {response.text[:200]}"
                )
            try:
                return response.json()
            except ValueError as exc:
                raise EmbeddingError(f"Hugging Face returned invalid JSON: {exc}") from exc

        raise EmbeddingNetworkError("Hugging Face model still loading after retries")

    @staticmethod
    def _validate(payload: Any, expected: int) -> list[list[float]]:
        if not isinstance(payload, list) or len(payload) != expected:
            raise EmbeddingError("Hugging Face returned an unexpected embedding payload")
        vectors: list[list[float]] = []
        for row in payload:
            if not isinstance(row, list) or not all(
                isinstance(v, (int, float)) and not isinstance(v, bool) for v in row
            ):
                raise EmbeddingError("Embedding rows must be flat lists of numbers")
            vectors.append([float(v) for v in row])
        return vectors
