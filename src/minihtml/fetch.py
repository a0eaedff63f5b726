"""Fetching markup over HTTP(S)."""

from __future__ import annotations

import http.client
import logging
import urllib.error
import urllib.request

from .encoding import decode_html

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0
USER_AGENT = "minihtml/0.1"


class FetchError(OSError):
    """Raised when markup cannot be fetched from a URL."""

    url: str
    reason: str
    status: int | None

    def __init__(self, url: str, reason: str, status: int | None = None) -> None:
        self.url = url
        self.reason = reason
        self.status = status
        message = f"Failed to fetch {url}: {reason}"
        if status is not None:
            message = f"Failed to fetch {url}: HTTP {status} {reason}"
        super().__init__(message)


def fetch_markup(url: str, *, timeout: float = DEFAULT_TIMEOUT) -> str:
    """GET a URL and return its body as text.

    Raises:
        FetchError: On a non-2xx status, a transport error, or an unusable URL
    """
    try:
        request = urllib.request.Request(url, headers={"User-Agent": USER_AGENT})
    except ValueError as e:
        raise FetchError(url, str(e)) from e

    logger.debug("GET %s", url)
    try:
        with urllib.request.urlopen(request, timeout=timeout) as response:
            status = response.status
            if not 200 <= status < 300:
                raise FetchError(url, response.reason or "unexpected status", status)
            charset = response.headers.get_content_charset()
            body = response.read()
    except FetchError:
        raise
    except urllib.error.HTTPError as e:
        raise FetchError(url, str(e.reason), e.code) from e
    except urllib.error.URLError as e:
        raise FetchError(url, str(e.reason)) from e
    except (OSError, ValueError, http.client.HTTPException) as e:
        raise FetchError(url, str(e) or type(e).__name__) from e

    text, encoding = decode_html(body, transport_encoding=charset)
    logger.debug("Fetched %d bytes from %s (%s)", len(body), url, encoding)
    return text
