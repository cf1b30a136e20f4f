"""Configuration settings for PromptDesk."""

from urllib.parse import quote_plus
from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Provider credentials, one per provider name
    openai_api_key: Optional[str] = None
    google_api_key: Optional[str] = None
    anthropic_api_key: Optional[str] = None
    openai_base_url: Optional[str] = None

    # Storage Configuration
    storage_backend: str = "memory"  # "memory" or "sql"
    database_url: Optional[str] = None

    # MySQL Configuration (used when database_url is not set)
    mysql_host: str = "localhost"
    mysql_port: int = 3306
    mysql_database: str = "promptdesk"
    mysql_user: str = "root"
    mysql_password: str = ""

    # Conversation Configuration
    serialize_prompt_turns: bool = True
    enforce_roles: bool = False

    # Server Configuration
    server_host: str = "0.0.0.0"
    server_port: int = 5000

    # API Configuration
    api_prefix: str = "/api"
    debug: bool = False
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False

    def provider_api_key(self, provider: str) -> Optional[str]:
        """Return the credential configured for a provider name, if any."""
        if provider not in ("openai", "google", "anthropic"):
            return None
        return getattr(self, f"{provider}_api_key") or None

    def sqlalchemy_url(self) -> str:
        """Async database URL, with the MySQL password properly encoded."""
        if self.database_url:
            return self.database_url
        return (
            f"mysql+aiomysql://{self.mysql_user}:{quote_plus(self.mysql_password)}"
            f"@{self.mysql_host}:{self.mysql_port}/{self.mysql_database}"
        )


settings = Settings()
