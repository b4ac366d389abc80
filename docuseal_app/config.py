"""
Application configuration using Pydantic settings.
Loads from environment variables or .env file.
"""
from functools import lru_cache
from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # App settings
    app_name: str = "DocuSeal App"
    debug: bool = False
    log_level: str = "INFO"

    # DocuSeal settings
    docuseal_api_key: str = ""
    docuseal_url: str = "https://api.docuseal.com"
    docuseal_user_email: str = ""
    docuseal_timeout_seconds: int = 30

    # GCP Settings (user store)
    gcp_project_id: str = ""
    google_application_credentials: str = ""

    # Auth settings
    secret_key: str = "change-this-in-production-use-a-long-random-string"
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60
    builder_token_expire_minutes: int = 60

    # CORS settings - stored as a plain string, parsed by get_cors_origins()
    cors_origins: str = "http://localhost:3000"

    def get_cors_origins(self) -> List[str]:
        """Parse CORS origins from comma-separated string."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    def get_docuseal_base_url(self) -> str:
        """DocuSeal API base URL without trailing slash."""
        return self.docuseal_url.rstrip("/")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
