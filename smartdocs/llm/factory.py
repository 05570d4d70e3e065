from dataclasses import dataclass
from typing import ClassVar

from smartdocs.config.settings import Settings
from smartdocs.llm.client_base import BaseChatClient
from smartdocs.llm.openai_client_adapter import OpenAIClientAdapter


@dataclass(frozen=True)
class ChatModel:
    """A chat client bound to the model name it should be called with."""

    client: BaseChatClient
    model: str
    provider: str


class ChatClientFactory:
    """Creates OpenAI-compatible chat clients for the remote providers."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str | None]] = {
        "openai": None,
        "gemini": "https://generativelanguage.googleapis.com/v1beta/openai/",
        "groq": "https://api.groq.com/openai/v1",
        "perplexity": "https://api.perplexity.ai",
    }

    # Strict schemas are only honored by OpenAI itself; others get a looser mode.
    RESPONSE_FORMATS: ClassVar[dict[str, str]] = {
        "openai": "json_schema",
        "gemini": "json_object",
        "groq": "json_object",
        "perplexity": "none",
    }

    @classmethod
    def create(cls, provider: str, settings: Settings) -> ChatModel:
        """Create a chat client for a remote provider from application settings."""
        provider = provider.lower()
        if provider not in cls.OPENAI_COMPATIBLE_BASE_URLS:
            raise ValueError(
                f"Unknown chat provider '{provider}'. "
                f"Choose from: {sorted(cls.OPENAI_COMPATIBLE_BASE_URLS)}"
            )
        client = OpenAIClientAdapter(
            api_key=cls._resolve_api_key(provider, settings),
            timeout_seconds=cls._resolve_timeout_seconds(provider, settings),
            base_url=cls._resolve_base_url(provider, settings),
            max_retries=settings.remote_max_retries,
            response_format=cls.RESPONSE_FORMATS[provider],
        )
        return ChatModel(
            client=client,
            model=cls._resolve_model_name(provider, settings),
            provider=provider,
        )

    @classmethod
    def _resolve_api_key(cls, provider: str, settings: Settings) -> str:
        key_map = {
            "openai": settings.openai_api_key,
            "gemini": settings.gemini_api_key,
            "groq": settings.groq_api_key,
            "perplexity": settings.perplexity_api_key,
        }
        key = key_map.get(provider, "")
        if not key:
            raise ValueError(f"{provider} API key not configured")
        return key

    @classmethod
    def _resolve_model_name(cls, provider: str, settings: Settings) -> str:
        key_map = {
            "openai": settings.openai_model_name,
            "gemini": settings.gemini_model_name,
            "groq": settings.groq_model_name,
            "perplexity": settings.perplexity_model_name,
        }
        return key_map.get(provider, "") or ""

    @classmethod
    def _resolve_timeout_seconds(cls, provider: str, settings: Settings) -> int:
        key_map = {
            "openai": settings.openai_timeout_seconds,
            "gemini": settings.gemini_timeout_seconds,
            "groq": settings.groq_timeout_seconds,
            "perplexity": settings.perplexity_timeout_seconds,
        }
        return key_map.get(provider, 30) or 30

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        """Configured endpoint override, else the provider's public endpoint."""
        key_map = {
            "openai": settings.openai_base_url,
            "gemini": settings.gemini_base_url,
            "groq": settings.groq_base_url,
            "perplexity": settings.perplexity_base_url,
        }
        return key_map.get(provider) or cls.OPENAI_COMPATIBLE_BASE_URLS[provider]
