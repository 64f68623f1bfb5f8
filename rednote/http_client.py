"""
Page fetcher with browser-like headers, a fixed timeout and bounded redirects.
"""
from __future__ import annotations

import logging
import re
import threading
from time import monotonic
from typing import Dict, List, Optional

import requests
import urllib3

from rednote.exceptions import FetchError
from rednote.settings import FetcherSettings
from utils.security import redact_secrets

logger = logging.getLogger(__name__)

CHUNK_SIZE = 8192
_CHARSET_PATTERN = re.compile(r"charset=([^\s;]+)", re.IGNORECASE)


def build_headers(settings: FetcherSettings) -> Dict[str, str]:
    return {
        "User-Agent": settings.user_agent,
        "Accept": "*/*",
        "Accept-Language": "en-US,en;q=0.9",
        "Accept-Encoding": "gzip, deflate, br",
        "Cache-Control": "no-cache",
        "Pragma": "no-cache",
        "Referer": settings.referer,
        "Origin": settings.origin,
        "sec-ch-ua": '"Chromium";v="132", "Not_A Brand";v="99"',
        "sec-ch-ua-mobile": "?0",
        "sec-ch-ua-platform": '"Windows"',
    }


def detect_charset(content_type: str) -> str:
    """Charset declared in a Content-Type header; UTF-8 when none is given."""
    match = _CHARSET_PATTERN.search(content_type or "")
    return match.group(1).strip("\"'").lower() if match else "utf-8"


def decode_body(body: bytes, content_type: str) -> str:
    charset = detect_charset(content_type)
    try:
        return body.decode(charset, errors="replace")
    except LookupError:
        logger.warning("Unknown charset %r; decoding as utf-8", charset)
        return body.decode("utf-8", errors="replace")


class PageFetcher:
    """
    Thin wrapper over requests.Session; one instance is shared by all requests.
    Failures are never retried.
    """

    def __init__(self, settings: Optional[FetcherSettings] = None) -> None:
        self.settings = settings or FetcherSettings()
        self.session = requests.Session()
        self.session.max_redirects = self.settings.max_redirects
        adapter = requests.adapters.HTTPAdapter(max_retries=0)
        self.session.mount("http://", adapter)
        self.session.mount("https://", adapter)
        self.session.headers.update(build_headers(self.settings))

    def fetch(self, url: str) -> str:
        """
        Download ``url`` and return the decoded body; raises FetchError.

        ``settings.timeout`` bounds the whole exchange, headers and body
        together, not just each socket read.
        """
        timeout = self.settings.timeout
        deadline = monotonic() + timeout
        try:
            response = self.session.get(url, timeout=timeout, stream=True)
        except requests.RequestException as exc:
            logger.warning("Request failed for %s: %s", redact_secrets(url), redact_secrets(str(exc)))
            raise FetchError(f"Request failed: {exc}") from exc

        with response:
            remaining = deadline - monotonic()
            if remaining <= 0:
                raise self._timed_out(url)
            if response.status_code >= 400:
                logger.warning("HTTP %s from %s; extracting body anyway", response.status_code, redact_secrets(url))
            # shutdown() unblocks a read stalled inside urllib3 once the deadline passes
            watchdog = threading.Timer(remaining, response.raw.shutdown)
            watchdog.daemon = True
            watchdog.start()
            try:
                body = self._read_body(response, url, deadline)
            finally:
                watchdog.cancel()
            html = decode_body(body, response.headers.get("Content-Type", ""))
        logger.debug("Fetched %s (%d chars) from %s", redact_secrets(response.url), len(html), redact_secrets(url))
        return html

    def _read_body(self, response: requests.Response, url: str, deadline: float) -> bytes:
        chunks: List[bytes] = []
        try:
            for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                if monotonic() > deadline:
                    raise self._timed_out(url)
                chunks.append(chunk)
        except (requests.RequestException, urllib3.exceptions.HTTPError, OSError) as exc:
            if monotonic() > deadline:
                raise self._timed_out(url) from exc
            logger.warning("Reading body failed for %s: %s", redact_secrets(url), redact_secrets(str(exc)))
            raise FetchError(f"Read HTML failed: {exc}") from exc
        if monotonic() > deadline:
            raise self._timed_out(url)
        return b"".join(chunks)

    def _timed_out(self, url: str) -> FetchError:
        logger.warning("Fetching %s exceeded %ss", redact_secrets(url), self.settings.timeout)
        return FetchError("Request failed: timed out")

    def close(self) -> None:
        self.session.close()
