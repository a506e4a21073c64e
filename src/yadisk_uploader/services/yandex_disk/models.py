"""
Data models for the Yandex Disk upload protocol.

See: https://yandex.com/dev/disk-api/doc/en/reference/upload
"""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class UploadTarget(BaseModel):
    """
    Upload link returned by ``GET /v1/disk/resources/upload``.

    Only ``href`` is consumed; the link is used literally even when
    ``templated`` is set.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    operation_id: Optional[str] = Field(None, description="Opaque operation tracking identifier")
    href: str = Field(..., description="Absolute URL to PUT the file content to")
    method: str = Field("PUT", description="HTTP method expected by the upload link")
    templated: bool = Field(False, description="Whether href contains URI template placeholders")


class UploadRequest(BaseModel):
    """Everything a single invocation needs to perform one upload."""

    model_config = ConfigDict(frozen=True)

    file_path: Path = Field(..., description="Local file to upload")
    target_path: str = Field(..., min_length=1, description="Destination path on Yandex Disk")
    token: str = Field(..., min_length=1, repr=False, description="OAuth token")
    timeout: int = Field(900, gt=0, description="HTTP client timeout in seconds")

    @field_validator("token")
    @classmethod
    def token_is_ascii(cls, value: str) -> str:
        """The token travels in an HTTP header, which only carries ASCII."""
        if not value.isascii():
            raise ValueError("token must contain only ASCII characters")
        return value
