"""Configuration management for the Yandex Disk uploader."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_UPLOAD_URL = "https://cloud-api.yandex.net/v1/disk/resources/upload"


class Settings(BaseSettings):
    """Uploader settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    SERVICE_NAME: str = "yadisk-uploader"

    # Yandex Disk API
    YANDEX_DISK_TOKEN: str = Field(default="", repr=False)
    YANDEX_DISK_UPLOAD_URL: str = DEFAULT_UPLOAD_URL

    # HTTP client
    HTTP_TIMEOUT: int = 900  # seconds, per request

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"  # "json" or "text"

    @property
    def has_token(self) -> bool:
        """Check if a Yandex Disk token is configured."""
        return bool(self.YANDEX_DISK_TOKEN)
