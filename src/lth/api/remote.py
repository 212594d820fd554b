"""
HTTP retrieval of template resources (text and binary).
"""

from __future__ import annotations

import logging
from typing import Optional

import requests

logger = logging.getLogger(__name__)


class FetchError(RuntimeError):
    """
    Raised when a resource cannot be retrieved.

    Attributes:
        url: The requested URL.
        status: HTTP status code when a response was received.
        cause: Transport error or other failure detail.
    """

    def __init__(self, url: str, *, status: Optional[int] = None, cause: object = None) -> None:
        if status is not None:
            detail = f"HTTP {status}"
        else:
            detail = str(cause) if cause is not None else "unknown error"
        super().__init__(f"{url}: {detail}")
        self.url = url
        self.status = status
        self.cause = cause


def format_request_exception(exc: requests.RequestException) -> str:
    """Summarize a requests exception without dumping the whole response."""
    response = getattr(exc, "response", None)
    if response is not None:
        return f"{type(exc).__name__} (HTTP {response.status_code})"
    return f"{type(exc).__name__}: {exc}"


class RemoteFetcher:
    """
    Issue one GET per resource; only HTTP 200 counts as success.

    Args:
        timeout: Optional timeout in seconds. None keeps the requests default.
    """

    def __init__(self, timeout: Optional[float] = None) -> None:
        self.timeout = timeout

    def _get(self, url: str) -> requests.Response:
        logger.debug("GET %s", url)
        try:
            response = requests.get(url, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.warning("Download failed for %s: %s", url, format_request_exception(exc))
            raise FetchError(url, cause=format_request_exception(exc)) from exc
        if response.status_code != 200:
            logger.warning("Download failed for %s: HTTP %s", url, response.status_code)
            raise FetchError(url, status=response.status_code)
        logger.info("Downloaded %s (%d bytes)", url, len(response.content))
        return response

    def fetch_text(self, url: str) -> str:
        """
        Download a UTF-8 text resource.

        Raises:
            FetchError: On transport errors, non-200 statuses, or bodies that
                are not valid UTF-8.
        """
        response = self._get(url)
        try:
            return response.content.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise FetchError(url, cause=f"response is not valid UTF-8 ({exc.reason})") from exc

    def fetch_bytes(self, url: str) -> bytes:
        """Download a resource verbatim."""
        return self._get(url).content
