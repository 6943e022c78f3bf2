# src/design_review/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # LLM Providers
    gemini_api_key: str | None = None
    gemini_model: str = "gemini-2.5-flash"
    openai_api_key: str | None = None
    openai_base_url: str | None = None
    openai_model: str = "gpt-4o-mini"

    # Defaults
    default_provider: str = "gemini"
    docs_root: str | None = None
    max_doc_length: int = 5000
    log_dir: str | None = None
    log_level: str = "INFO"
