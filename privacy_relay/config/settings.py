from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    pdf_engine: str = "pdfplumber"
    scanned_pdf_min_chars_per_page: int = 100

    chunk_min_length: int = 20
    chunk_select_limit: int = 15

    company_pseudonym: str = "The Company"
