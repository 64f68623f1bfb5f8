"""
Public API for the Xiaohongshu (RedNote) note scraper.
"""
from __future__ import annotations

from rednote.exceptions import FetchError, InvalidUrlError, RedNoteError
from rednote.extractor import extract
from rednote.http_client import PageFetcher
from rednote.models import DownloadOption, EngagementCounters, ExtractionResult
from rednote.scraper import RedNoteScraper
from rednote.settings import AppSettings, FetcherSettings, load_settings
from rednote.validator import is_valid_rednote_url

__all__ = [
    "AppSettings",
    "DownloadOption",
    "EngagementCounters",
    "ExtractionResult",
    "FetchError",
    "FetcherSettings",
    "InvalidUrlError",
    "PageFetcher",
    "RedNoteError",
    "RedNoteScraper",
    "extract",
    "is_valid_rednote_url",
    "load_settings",
]
