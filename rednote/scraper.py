"""
Validate, fetch and extract a single note page.
"""
from __future__ import annotations

import logging
import time
from typing import Optional

from rednote.exceptions import InvalidUrlError
from rednote.extractor import extract
from rednote.http_client import PageFetcher
from rednote.models import ExtractionResult
from rednote.validator import is_valid_rednote_url
from utils.security import redact_secrets

logger = logging.getLogger(__name__)


class RedNoteScraper:
    def __init__(self, fetcher: Optional[PageFetcher] = None) -> None:
        self.fetcher = fetcher or PageFetcher()

    def scrape(self, url: str) -> ExtractionResult:
        """
        Raises InvalidUrlError before any network access when ``url`` is not a
        Xiaohongshu link, and FetchError when the page cannot be downloaded.
        Missing fields never raise; they come back empty.
        """
        if not is_valid_rednote_url(url):
            raise InvalidUrlError()

        start = time.perf_counter()
        html = self.fetcher.fetch(url)
        result = extract(html)
        logger.info(
            "Scraped note %r from %s in %.0f ms (%d images, %d downloads)",
            result.note_id,
            redact_secrets(url),
            (time.perf_counter() - start) * 1000,
            len(result.images),
            len(result.downloads),
        )
        return result
