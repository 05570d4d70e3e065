from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    ai_provider: str = "local"

    pdf_engine: str = "pdfplumber"
    pdf_max_pages: int = 10

    ocr_language: str = "eng"
    ocr_timeout_seconds: int = 60

    remote_max_retries: int = 2
    search_ocr_char_limit: int = 1500

    openai_api_key: str = ""
    openai_model_name: str = "gpt-4o"
    openai_timeout_seconds: int = 60
    openai_base_url: str = ""

    gemini_api_key: str = ""
    gemini_model_name: str = "gemini-2.0-flash"
    gemini_timeout_seconds: int = 60
    gemini_base_url: str = ""

    groq_api_key: str = ""
    groq_model_name: str = "llama-3.3-70b-versatile"
    groq_timeout_seconds: int = 30
    groq_base_url: str = ""

    perplexity_api_key: str = ""
    perplexity_model_name: str = "sonar"
    perplexity_timeout_seconds: int = 30
    perplexity_base_url: str = ""

    embedding_provider: str = "huggingface"
    embedding_min_score: float = 0.15
    openai_embedding_model: str = "text-embedding-3-small"

    huggingface_api_key: str = ""
    huggingface_embedding_model: str = "sentence-transformers/all-MiniLM-L6-v2"
    huggingface_timeout_seconds: int = 30
    huggingface_max_retries: int = 3
    huggingface_retry_backoff_seconds: float = 20.0

    db_host: str = "localhost"
    db_port: int = 5432
    db_database: str = "smartdocs"
    db_username: str = "smartdocs"
    db_password: str = "secret"
