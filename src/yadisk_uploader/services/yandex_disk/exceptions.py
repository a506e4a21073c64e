"""Custom exceptions for the Yandex Disk uploader."""


class UploaderError(Exception):
    """Base exception for the uploader."""
    pass


class ValidationError(UploaderError):
    """Exception raised when a required flag or environment variable is missing."""
    pass


class FileStatError(UploaderError):
    """Exception raised when the source file cannot be inspected."""
    pass


class ResolveError(UploaderError):
    """Exception raised when obtaining the upload target fails."""
    pass


class UploadError(UploaderError):
    """Exception raised when sending the file to the upload target fails."""
    pass


class UnexpectedStatusError(UploaderError):
    """Exception raised when the service answers with an unexpected HTTP status."""

    def __init__(self, status_code: int, reason: str = "", body: str = ""):
        self.status_code = status_code
        self.reason = reason
        self.body = body

        message = f"unexpected status: {status_code} {reason}".rstrip()
        if body:
            message = f"{message}, body: {body}"
        super().__init__(message)


class MalformedResponseError(UploaderError):
    """Exception raised when the upload target response cannot be parsed."""
    pass


class FileOpenError(UploaderError):
    """Exception raised when the source file cannot be opened for reading."""
    pass


class RequestBuildError(UploaderError):
    """Exception raised when an HTTP request cannot be constructed."""
    pass


class TransportError(UploaderError):
    """Exception raised when the network call itself fails."""
    pass
