"""Upload target resolution against the Yandex Disk REST API."""

import logging
from typing import Optional

import httpx
from pydantic import ValidationError as PydanticValidationError

from yadisk_uploader.core.config import DEFAULT_UPLOAD_URL
from yadisk_uploader.services.yandex_disk.exceptions import (
    MalformedResponseError,
    TransportError,
    UnexpectedStatusError,
)
from yadisk_uploader.services.yandex_disk.models import UploadTarget
from yadisk_uploader.utils.http_helpers import build_request


class UploadTargetResolver:
    """Asks Yandex Disk for a one-time upload link."""

    def __init__(
        self,
        client: httpx.Client,
        endpoint: str = DEFAULT_UPLOAD_URL,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize the resolver.

        Args:
            client: Shared HTTP client; its timeout and transport are used as is
            endpoint: Upload-intent endpoint URL
            logger: Logger to report to, defaults to this module's logger
        """
        self.client = client
        self.endpoint = endpoint
        self.logger = logger or logging.getLogger(__name__)

    def fetch_target(self, target_path: str, token: str) -> UploadTarget:
        """Request an upload target for ``target_path``.

        Args:
            target_path: Destination path on Yandex Disk, e.g. ``/backups/db.tar``
            token: OAuth token

        Returns:
            Parsed upload target

        Raises:
            RequestBuildError: If the endpoint URL is malformed
            TransportError: If the request could not be completed
            UnexpectedStatusError: If the service does not answer 200
            MalformedResponseError: If the body is not a valid upload target
        """
        request = build_request(
            self.client,
            "GET",
            self.endpoint,
            params={"path": target_path},
            headers={"Authorization": f"OAuth {token}"},
        )

        self.logger.debug(
            "Requesting upload target",
            extra={"endpoint": self.endpoint},
        )

        try:
            response = self.client.send(request)
        except httpx.RequestError as e:
            raise TransportError(f"upload target request failed: {e}") from e

        # send() without stream=True has already read and closed the body
        if response.status_code != httpx.codes.OK:
            raise UnexpectedStatusError(response.status_code, response.reason_phrase)

        try:
            target = UploadTarget.model_validate_json(response.content)
        except PydanticValidationError as e:
            raise MalformedResponseError(f"invalid upload target response: {e}") from e

        if target.method.upper() != "PUT":
            self.logger.warning(
                "Upload target expects a method other than PUT",
                extra={"method": target.method},
            )

        return target

    def resolve(self, target_path: str, token: str) -> str:
        """Return the upload URL for ``target_path``."""
        return self.fetch_target(target_path, token).href
