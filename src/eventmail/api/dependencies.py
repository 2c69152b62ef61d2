"""FastAPI dependency injection for shared resources."""

from functools import lru_cache

from eventmail.config import Settings
from eventmail.mailer import SmtpConfig
from eventmail.stores.history import RequestHistory


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


@lru_cache
def get_history() -> RequestHistory:
    """Get the process-wide request history."""
    settings = get_settings()
    return RequestHistory(capacity=settings.history_size)


def get_smtp_config() -> SmtpConfig:
    """Get SMTP settings for reply emails."""
    return SmtpConfig.from_settings(get_settings())
