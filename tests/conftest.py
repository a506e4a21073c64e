"""Pytest configuration and shared fixtures."""

import json
import logging
from typing import Callable, List

import httpx
import pytest

from yadisk_uploader.core.config import Settings
from yadisk_uploader.core.logging import LOGGER_NAME

UPLOAD_HREF = "https://upload.example/abc"


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it was asked to send."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: List[httpx.Request] = []

        def record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(record)


def upload_target_body(href: str = UPLOAD_HREF) -> dict:
    """Upload target payload as returned by the Yandex Disk API."""
    return {
        "operation_id": "d80c269ce4eb16c0207f0a15t4a31415313452f9e950cd9576f36b1146ee0e42",
        "href": href,
        "method": "PUT",
        "templated": False,
    }


def yandex_disk_handler(
    target_status: int = 200,
    target_body=None,
    upload_status: int = 201,
    upload_body: str = "",
) -> Callable[[httpx.Request], httpx.Response]:
    """Build a handler stubbing both steps of the upload protocol."""
    if target_body is None:
        target_body = upload_target_body()

    def handler(request: httpx.Request) -> httpx.Response:
        if request.method == "GET":
            if isinstance(target_body, (dict, list)):
                return httpx.Response(target_status, json=target_body)
            return httpx.Response(target_status, text=target_body)
        if request.method == "PUT":
            return httpx.Response(upload_status, text=upload_body)
        return httpx.Response(405)

    return handler


@pytest.fixture(autouse=True)
def reset_uploader_logger():
    """Undo setup_logging so handlers never outlive the captured stdout of a test."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def make_client():
    """Factory for httpx clients backed by a RecordingTransport."""
    clients = []

    def factory(handler: Callable[[httpx.Request], httpx.Response]):
        transport = RecordingTransport(handler)
        client = httpx.Client(transport=transport, timeout=5)
        clients.append(client)
        return client, transport

    yield factory

    for client in clients:
        client.close()


@pytest.fixture
def sample_file(tmp_path):
    """A 10 byte file to upload."""
    path = tmp_path / "test.txt"
    path.write_bytes(b"0123456789")
    return path


@pytest.fixture
def settings():
    """Settings isolated from the process environment and any .env file."""
    return Settings(_env_file=None, YANDEX_DISK_TOKEN="test-token", LOG_LEVEL="DEBUG")


@pytest.fixture
def test_logger():
    """Logger that propagates to the root so caplog can see records."""
    logger = logging.getLogger("tests.yadisk_uploader")
    logger.setLevel(logging.DEBUG)
    return logger


def parse_log_lines(output: str) -> List[dict]:
    """Parse captured stdout as JSON log lines."""
    return [json.loads(line) for line in output.splitlines() if line.strip()]
