from unittest.mock import MagicMock, patch

import pytest

from smartdocs.llm.factory import ChatClientFactory


def _make_settings(**overrides: object) -> MagicMock:
    values: dict[str, object] = {
        "openai_api_key": "sk-openai",
        "openai_model_name": "gpt-4o",
        "openai_timeout_seconds": 60,
        "gemini_api_key": "gm-key",
        "gemini_model_name": "gemini-2.0-flash",
        "gemini_timeout_seconds": 60,
        "groq_api_key": "",
        "groq_model_name": "llama",
        "groq_timeout_seconds": 30,
        "perplexity_api_key": "pp-key",
        "perplexity_model_name": "sonar",
        "perplexity_timeout_seconds": 30,
        "openai_base_url": "",
        "gemini_base_url": "",
        "groq_base_url": "",
        "perplexity_base_url": "",
        "remote_max_retries": 2,
    }
    values.update(overrides)
    return MagicMock(**values)


class TestChatClientFactory:
    def test_openai_uses_default_base_url_and_strict_schema(self) -> None:
        with patch("smartdocs.llm.factory.OpenAIClientAdapter") as mock_adapter:
            chat = ChatClientFactory.create("openai", _make_settings())
        kwargs = mock_adapter.call_args.kwargs
        assert kwargs["api_key"] == "sk-openai"
        assert kwargs["base_url"] is None
        assert kwargs["response_format"] == "json_schema"
        assert chat.model == "gpt-4o"
        assert chat.provider == "openai"

    def test_gemini_uses_openai_compatible_endpoint(self) -> None:
        with patch("smartdocs.llm.factory.OpenAIClientAdapter") as mock_adapter:
            chat = ChatClientFactory.create("Gemini", _make_settings())
        kwargs = mock_adapter.call_args.kwargs
        assert "generativelanguage.googleapis.com" in kwargs["base_url"]
        assert kwargs["response_format"] == "json_object"
        assert chat.model == "gemini-2.0-flash"

    def test_base_url_override_from_settings(self) -> None:
        settings = _make_settings(openai_base_url="http://localhost:8080/v1")
        with patch("smartdocs.llm.factory.OpenAIClientAdapter") as mock_adapter:
            ChatClientFactory.create("openai", settings)
        assert mock_adapter.call_args.kwargs["base_url"] == "http://localhost:8080/v1"

    def test_perplexity_sends_no_response_format(self) -> None:
        with patch("smartdocs.llm.factory.OpenAIClientAdapter") as mock_adapter:
            ChatClientFactory.create("perplexity", _make_settings())
        assert mock_adapter.call_args.kwargs["response_format"] == "none"

    def test_missing_api_key_raises(self) -> None:
        with pytest.raises(ValueError, match="groq API key not configured"):
            ChatClientFactory.create("groq", _make_settings())

    def test_unknown_provider_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown chat provider"):
            ChatClientFactory.create("local", _make_settings())
