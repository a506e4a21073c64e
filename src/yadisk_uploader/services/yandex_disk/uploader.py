"""Streaming file upload to a Yandex Disk upload link."""

import logging
from pathlib import Path
from typing import Optional

import httpx

from yadisk_uploader.services.yandex_disk.exceptions import (
    FileOpenError,
    TransportError,
    UnexpectedStatusError,
)
from yadisk_uploader.utils.http_helpers import build_request


class FileUploader:
    """Sends a local file to an upload link with a single PUT."""

    def __init__(self, client: httpx.Client, logger: Optional[logging.Logger] = None):
        """Initialize the uploader.

        Args:
            client: Shared HTTP client; its timeout and transport are used as is
            logger: Logger to report to, defaults to this module's logger
        """
        self.client = client
        self.logger = logger or logging.getLogger(__name__)

    def upload(self, upload_url: str, file_path: str | Path) -> None:
        """Stream ``file_path`` to ``upload_url``.

        The file handle is passed to httpx as the request body, which reads it
        in chunks, so memory use does not grow with the file size.

        Args:
            upload_url: Upload link obtained from the resolver
            file_path: Local file to send

        Raises:
            FileOpenError: If the file cannot be opened; raised before any request
            RequestBuildError: If ``upload_url`` is malformed
            TransportError: If the request could not be completed
            UnexpectedStatusError: If the response is not 201 Created
        """
        try:
            file_obj = open(file_path, "rb")
        except OSError as e:
            raise FileOpenError(f"failed to open source file: {e}") from e

        with file_obj:
            request = build_request(self.client, "PUT", upload_url, content=file_obj)

            self.logger.debug(
                "Uploading file",
                extra={"file": str(file_path), "content_length": request.headers.get("Content-Length")},
            )

            try:
                response = self.client.send(request, stream=True)
            except httpx.RequestError as e:
                raise TransportError(f"error during upload: {e}") from e

            try:
                if response.status_code != httpx.codes.CREATED:
                    try:
                        response.read()
                    except httpx.RequestError as e:
                        raise TransportError(f"error reading upload response: {e}") from e
                    raise UnexpectedStatusError(response.status_code, response.reason_phrase, response.text)
            finally:
                response.close()


def upload_file(client: httpx.Client, upload_url: str, file_path: str | Path) -> None:
    """Upload ``file_path`` to ``upload_url`` using ``client``."""
    FileUploader(client).upload(upload_url, file_path)
