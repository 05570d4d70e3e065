import pytest
from pydantic import ValidationError

from smartdocs.config.settings import Settings


class TestSettingsDefaults:
    def test_default_app_env(self) -> None:
        s = Settings()
        assert s.app_env == "dev"

    def test_default_ai_provider_is_local(self) -> None:
        s = Settings()
        assert s.ai_provider == "local"

    def test_default_pdf_engine(self) -> None:
        s = Settings()
        assert s.pdf_engine == "pdfplumber"

    def test_default_pdf_max_pages(self) -> None:
        s = Settings()
        assert s.pdf_max_pages == 10

    def test_default_embedding_threshold(self) -> None:
        s = Settings()
        assert s.embedding_min_score == 0.15

    def test_default_search_ocr_char_limit(self) -> None:
        s = Settings()
        assert s.search_ocr_char_limit == 1500

    def test_default_db_port(self) -> None:
        s = Settings()
        assert s.db_port == 5432


class TestSettingsFromEnv:
    def test_loads_ai_provider(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("AI_PROVIDER", "gemini")
        s = Settings()
        assert s.ai_provider == "gemini"

    def test_loads_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        s = Settings()
        assert s.log_level == "DEBUG"

    def test_loads_openai_api_key(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
        s = Settings()
        assert s.openai_api_key == "sk-test"

    def test_loads_huggingface_retries(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HUGGINGFACE_MAX_RETRIES", "5")
        s = Settings()
        assert s.huggingface_max_retries == 5


class TestSettingsValidation:
    def test_invalid_db_port_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DB_PORT", "not_a_number")
        with pytest.raises(ValidationError):
            Settings()

    def test_invalid_min_score_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("EMBEDDING_MIN_SCORE", "high")
        with pytest.raises(ValidationError):
            Settings()
