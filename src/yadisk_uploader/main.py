"""Command-line entrypoint for the Yandex Disk uploader."""

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

import httpx
from pydantic import ValidationError as PydanticValidationError

from yadisk_uploader.core.config import Settings
from yadisk_uploader.core.logging import setup_logging, target_path_context
from yadisk_uploader.services.yandex_disk.exceptions import (
    FileStatError,
    ResolveError,
    UploadError,
    ValidationError,
)
from yadisk_uploader.services.yandex_disk.models import UploadRequest
from yadisk_uploader.services.yandex_disk.service import run_upload
from yadisk_uploader.utils.formatting import format_bytes


def describe_errors(error: PydanticValidationError) -> str:
    """Summarize validation errors without echoing the offending values."""
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in error.errors()
    )


def load_settings() -> Settings:
    """Load settings from the environment and the optional .env file.

    Raises:
        ValidationError: If a variable cannot be parsed, e.g. a non-numeric HTTP_TIMEOUT
    """
    try:
        return Settings()
    except PydanticValidationError as e:
        raise ValidationError(f"invalid environment: {describe_errors(e)}") from e


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    """Create the argument parser; ``--timeout`` defaults to HTTP_TIMEOUT."""
    parser = argparse.ArgumentParser(
        prog="yadisk-upload",
        description="Upload a single file to Yandex Disk. The OAuth token is read from YANDEX_DISK_TOKEN.",
    )
    parser.add_argument("--path-to-file", default="", help="path to source file")
    parser.add_argument("--target-yandex-disk-path", default="", help="target path on yandex disk")
    parser.add_argument(
        "--timeout",
        type=int,
        default=settings.HTTP_TIMEOUT,
        help=f"http client timeout (sec, default: {settings.HTTP_TIMEOUT})",
    )
    return parser


def build_request(args: argparse.Namespace, settings: Settings) -> UploadRequest:
    """Validate parsed flags and settings into an upload request.

    Raises:
        ValidationError: If a required flag or the token is missing, or the timeout is invalid
    """
    if not args.path_to_file or not args.target_yandex_disk_path or not settings.has_token:
        raise ValidationError(
            "please set --path-to-file, --target-yandex-disk-path, and pass ENV variable "
            "with yandex disk token YANDEX_DISK_TOKEN"
        )

    try:
        return UploadRequest(
            file_path=Path(args.path_to_file),
            target_path=args.target_yandex_disk_path,
            token=settings.YANDEX_DISK_TOKEN,
            timeout=args.timeout,
        )
    except PydanticValidationError as e:
        raise ValidationError(f"invalid arguments: {describe_errors(e)}") from e


def stat_source(file_path: Path) -> int:
    """Return the size of the source file in bytes.

    Raises:
        FileStatError: If the file does not exist or cannot be inspected
    """
    try:
        return file_path.stat().st_size
    except OSError as e:
        raise FileStatError(str(e)) from e


def main(
    argv: Optional[Sequence[str]] = None,
    *,
    settings: Optional[Settings] = None,
    http_client: Optional[httpx.Client] = None,
) -> int:
    """Run one upload and return the process exit code.

    Args:
        argv: Command-line arguments, defaults to ``sys.argv[1:]``
        settings: Settings to use instead of loading them from the environment
        http_client: Client to use instead of creating one; it is not closed here

    Returns:
        0 on success, 1 on any failure
    """
    if settings is None:
        try:
            settings = load_settings()
        except ValidationError as e:
            # defaults only, so the failure can still be logged
            setup_logging(Settings.model_construct()).error(str(e))
            return 1
    logger = setup_logging(settings)
    args = build_parser(settings).parse_args(argv)

    try:
        request = build_request(args, settings)
    except ValidationError as e:
        logger.error(str(e))
        return 1

    try:
        size = stat_source(request.file_path)
    except FileStatError as e:
        logger.error(
            "Error during checking source file existence",
            extra={"path": str(request.file_path), "error": str(e)},
        )
        return 1

    context_token = target_path_context.set(request.target_path)
    client = http_client or httpx.Client(timeout=request.timeout)
    try:
        logger.info(
            "src file size",
            extra={
                "src_file_path": str(request.file_path),
                "size": format_bytes(size),
                "target_path": request.target_path,
            },
        )

        run_upload(request, client, logger, endpoint=settings.YANDEX_DISK_UPLOAD_URL)
    except ResolveError as e:
        logger.error(
            "Error during create upload request to yandex disk",
            extra={"operation": "resolve", "error": str(e)},
        )
        return 1
    except UploadError as e:
        logger.error(
            "Error during upload file",
            extra={"operation": "upload", "error": str(e)},
        )
        return 1
    finally:
        if http_client is None:
            client.close()
        target_path_context.reset(context_token)

    logger.info("file uploaded successfully", extra={"file": str(request.file_path)})
    return 0


def run() -> None:
    """Console script entrypoint."""
    sys.exit(main())


if __name__ == "__main__":
    run()
