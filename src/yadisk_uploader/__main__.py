"""Allow running the uploader with ``python -m yadisk_uploader``."""

from yadisk_uploader.main import run

run()
