"""HTTP request helpers."""

import httpx

from yadisk_uploader.services.yandex_disk.exceptions import RequestBuildError

ALLOWED_SCHEMES = ("http", "https")


def build_request(client: httpx.Client, method: str, url: str, **kwargs) -> httpx.Request:
    """Build a request on ``client``, rejecting URLs it could not send.

    Args:
        client: HTTP client the request will be sent with
        method: HTTP method
        url: Absolute http(s) URL
        **kwargs: Passed through to ``httpx.Client.build_request``

    Returns:
        The built request

    Raises:
        RequestBuildError: If the URL is malformed or not an absolute http(s) URL,
            or a header value cannot be encoded
    """
    try:
        request = client.build_request(method, url, **kwargs)
    except httpx.InvalidURL as e:
        raise RequestBuildError(f"invalid {method} url {url!r}: {e}") from e
    except UnicodeEncodeError as e:
        # header values must be ASCII
        raise RequestBuildError(f"invalid {method} request headers: {e}") from e

    if request.url.scheme not in ALLOWED_SCHEMES or not request.url.host:
        raise RequestBuildError(f"invalid {method} url {url!r}: expected an absolute http(s) url")

    return request
