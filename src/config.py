from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings

from src.pipeline_config import SummarizationProvider


class Settings(BaseSettings):
    """Application settings validated via Pydantic.

    Values are loaded from environment variables and/or a .env file.
    """

    # API Keys
    deepgram_api_key: str = ""
    recallai_api_key: str = ""
    anthropic_api_key: str = ""  # Only needed when summarization_provider is "anthropic"

    # Provider endpoints
    deepgram_api_url: str = "https://api.deepgram.com"
    deepgram_live_url: str = "wss://api.deepgram.com/v1/listen"
    recallai_base_url: str = "https://api.recall.ai"

    # App config
    api_host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"
    transcript_window_seconds: float = 180.0
    summarization_provider: SummarizationProvider = SummarizationProvider.DEEPGRAM
    llm_model: str = "claude-sonnet-4-20250514"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance.

    Gracefully handles missing .env files (e.g. in CI/testing) by falling
    back to environment variables and defaults.
    """
    try:
        return Settings()
    except Exception:
        # If .env is missing or unreadable, build settings from env vars only.
        return Settings(_env_file=None)  # type: ignore[call-arg]


settings = get_settings()
