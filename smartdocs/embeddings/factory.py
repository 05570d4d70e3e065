from smartdocs.config.settings import Settings
from smartdocs.embeddings.base import BaseEmbeddingClient
from smartdocs.embeddings.huggingface_adapter import HuggingFaceEmbeddingAdapter
from smartdocs.embeddings.openai_embedding_adapter import OpenAIEmbeddingAdapter


class EmbeddingClientFactory:
    """Creates the configured embedding client."""

    PROVIDERS = ("huggingface", "openai")

    @classmethod
    def create(cls, settings: Settings) -> BaseEmbeddingClient:
        provider = settings.embedding_provider.lower()
        if provider == "huggingface":
            return HuggingFaceEmbeddingAdapter(
                api_key=settings.huggingface_api_key,
                model=settings.huggingface_embedding_model,
                timeout_seconds=settings.huggingface_timeout_seconds,
                max_retries=settings.huggingface_max_retries,
                retry_backoff_seconds=settings.huggingface_retry_backoff_seconds,
            )
        if provider == "openai":
            return OpenAIEmbeddingAdapter(
                api_key=settings.openai_api_key,
                model=settings.openai_embedding_model,
                timeout_seconds=settings.openai_timeout_seconds,
                max_retries=settings.remote_max_retries,
            )
        raise ValueError(
            f"Unknown embedding provider '{provider}'. Choose from: {list(cls.PROVIDERS)}"
        )
