"""Configuration management using pydantic-settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="EVENTMAIL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Server settings
    debug: bool = False
    cors_origins: list[str] = ["*"]

    # SMTP reply transport (disabled when smtp_host is unset)
    smtp_host: str | None = None
    smtp_port: int = 587
    smtp_secure: bool = False  # implicit TLS (port 465) instead of STARTTLS
    smtp_user: str | None = None
    smtp_pass: str | None = None
    smtp_from: str = "SF Moms Events <events@example.com>"

    # Reply rendering
    display_timezone: str = "America/Los_Angeles"
    form_url: str = "https://sanfranciscomoms.com/addevent/"

    # Request history
    history_size: int = 100


def get_settings() -> Settings:
    """Get application settings instance."""
    return Settings()
