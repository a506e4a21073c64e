"""
Two-step upload to Yandex Disk.

Step 1 asks the REST API for an upload link, step 2 streams the file to it.
Any failure aborts the run; nothing is retried.
"""

import logging

import httpx

from yadisk_uploader.core.config import DEFAULT_UPLOAD_URL
from yadisk_uploader.services.yandex_disk.exceptions import (
    ResolveError,
    UploadError,
    UploaderError,
)
from yadisk_uploader.services.yandex_disk.models import UploadRequest
from yadisk_uploader.services.yandex_disk.resolver import UploadTargetResolver
from yadisk_uploader.services.yandex_disk.uploader import FileUploader


def run_upload(
    request: UploadRequest,
    client: httpx.Client,
    logger: logging.Logger,
    endpoint: str = DEFAULT_UPLOAD_URL,
) -> None:
    """Upload ``request.file_path`` to ``request.target_path``.

    Args:
        request: Upload parameters
        client: Shared HTTP client used for both steps
        logger: Logger for progress messages
        endpoint: Upload-intent endpoint URL

    Raises:
        ResolveError: If the upload link could not be obtained
        UploadError: If the file could not be sent
    """
    resolver = UploadTargetResolver(client, endpoint=endpoint, logger=logger.getChild("resolver"))
    uploader = FileUploader(client, logger=logger.getChild("uploader"))

    try:
        upload_url = resolver.resolve(request.target_path, request.token)
    except UploaderError as e:
        raise ResolveError(f"failed to get upload url for {request.target_path}: {e}") from e

    logger.info("upload url received")

    try:
        uploader.upload(upload_url, request.file_path)
    except UploaderError as e:
        raise UploadError(f"failed to upload {request.file_path}: {e}") from e

