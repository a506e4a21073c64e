"""Upload a single file to Yandex Disk through its REST API."""

__version__ = "0.1.0"
