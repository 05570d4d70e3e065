from smartdocs.analysis.base import BaseAnalysisProvider
from smartdocs.analysis.embedding_provider import EmbeddingAnalysisProvider
from smartdocs.analysis.filename_provider import FilenameAnalysisProvider
from smartdocs.analysis.local_provider import LocalAnalysisProvider
from smartdocs.analysis.vision_provider import VisionAnalysisProvider
from smartdocs.config.provider_selection import normalize_provider_name
from smartdocs.config.settings import Settings
from smartdocs.embeddings.factory import EmbeddingClientFactory
from smartdocs.extraction.content_extractor import build_content_extractor
from smartdocs.llm.factory import ChatClientFactory


class AnalysisProviderFactory:
    """Creates the analysis provider registered under a provider name."""

    VISION_PROVIDERS = ("openai", "gemini")
    FILENAME_PROVIDERS = ("groq", "perplexity", "huggingface")

    @classmethod
    def create(cls, provider: str, settings: Settings) -> BaseAnalysisProvider:
        provider = normalize_provider_name(provider)
        if provider == "local":
            return LocalAnalysisProvider(extractor=build_content_extractor(settings))
        if provider in cls.VISION_PROVIDERS:
            chat = ChatClientFactory.create(provider, settings)
            return VisionAnalysisProvider(client=chat.client, model=chat.model)
        if provider in cls.FILENAME_PROVIDERS:
            return FilenameAnalysisProvider(backend=provider)
        return EmbeddingAnalysisProvider(
            extractor=build_content_extractor(settings),
            embedding_client=EmbeddingClientFactory.create(settings),
            min_score=settings.embedding_min_score,
        )
