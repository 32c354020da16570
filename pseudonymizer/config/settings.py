from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    classifier_engine: str = "transformers"
    ner_model_name: str = "lakshyakh93/deberta_finetuned_pii"
    ner_device: int = -1
    ner_local_files_only: bool = False

    max_span_length: int = 256
