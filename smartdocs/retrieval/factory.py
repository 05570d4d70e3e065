from smartdocs.config.provider_selection import normalize_provider_name
from smartdocs.config.settings import Settings
from smartdocs.embeddings.factory import EmbeddingClientFactory
from smartdocs.llm.factory import ChatClientFactory
from smartdocs.retrieval.base import BaseRetrievalEngine
from smartdocs.retrieval.embedding_engine import EmbeddingRetrievalEngine
from smartdocs.retrieval.lexical_engine import LexicalRetrievalEngine
from smartdocs.retrieval.llm_engine import LlmRetrievalEngine


class RetrievalEngineFactory:
    """Creates the retrieval engine registered under a provider name."""

    LLM_PROVIDERS = ("openai", "gemini", "groq", "perplexity")
    EMBEDDING_PROVIDERS = ("huggingface", "embedding")

    @classmethod
    def create(cls, provider: str, settings: Settings) -> BaseRetrievalEngine:
        provider = normalize_provider_name(provider)
        if provider in cls.LLM_PROVIDERS:
            chat = ChatClientFactory.create(provider, settings)
            return LlmRetrievalEngine(
                client=chat.client,
                model=chat.model,
                ocr_char_limit=settings.search_ocr_char_limit,
            )
        if provider in cls.EMBEDDING_PROVIDERS:
            return EmbeddingRetrievalEngine(
                embedding_client=EmbeddingClientFactory.create(settings),
                min_score=settings.embedding_min_score,
            )
        return LexicalRetrievalEngine()
