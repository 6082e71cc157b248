from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class GeneralSettings(BaseSettings):
    """General configuration"""

    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level: DEBUG, INFO, WARNING, ERROR, CRITICAL"
    )

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")


class MindscapeApiSettings(BaseSettings):
    """Content-processing service endpoints"""

    MINDSCAPE_BASE_URL: str = Field(
        default="https://memory-palace-leaning-model-ssbb3bwuaq-ew.a.run.app",
        description="Base URL of the content-processing service"
    )
    MINDSCAPE_UPLOAD_TIMEOUT: float = Field(
        default=600.0,
        description="Request/response timeout in seconds for document uploads"
    )
    MINDSCAPE_CHAT_TIMEOUT: float = Field(
        default=60.0,
        description="Request/response timeout in seconds for concept chat"
    )

    @field_validator("MINDSCAPE_BASE_URL")
    @classmethod
    def validate_base_url(cls, v):
        """Strip trailing slash from the URL"""
        if v.endswith("/"):
            return v.rstrip("/")
        return v

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")


class UploadRetrySettings(BaseSettings):
    """Retry configuration for document uploads"""

    UPLOAD_MAX_RETRIES: int = Field(
        default=3,
        ge=0,
        description="Additional attempts after a 503/504 response"
    )
    UPLOAD_BACKOFF_BASE: float = Field(
        default=2.0,
        gt=0,
        description="Backoff base; delay before retry n is BASE ** n seconds"
    )

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")


class LoggingSettings(BaseSettings):
    """Logging configuration"""

    LOG_DIR: str = Field(
        default="logs",
        description="Directory for log files, relative to the working directory"
    )
    LOG_RETENTION_DAYS: int = Field(
        default=7,
        ge=1,
        description="Days of rotated log files to keep"
    )

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")


class ChatSettings(BaseSettings):
    """Concept chat configuration"""

    CHAT_HISTORY_LIMIT: int = Field(
        default=10,
        ge=1,
        description="Number of most recent messages sent as chat_history"
    )

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")


class Settings(BaseSettings):
    """
    Groups every configuration section
    Usage: from config.settings import settings
           settings.api.MINDSCAPE_BASE_URL, settings.general.LOG_LEVEL, etc
    """

    # Subconfigurations
    general: GeneralSettings = GeneralSettings()
    api: MindscapeApiSettings = MindscapeApiSettings()
    upload_retry: UploadRetrySettings = UploadRetrySettings()
    chat: ChatSettings = ChatSettings()
    logging: LoggingSettings = LoggingSettings()

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")


# Singleton instance
@lru_cache()
def get_settings() -> Settings:
    """
    Return the cached Settings instance
    Usage: from config.settings import get_settings
           settings = get_settings()
    """
    return Settings()


# Global instance (for direct imports)
settings = get_settings()
