"""
Error kinds surfaced at the API boundary.
"""
from __future__ import annotations

INVALID_URL_MESSAGE = "Invalid Xiaohongshu URL"


class RedNoteError(Exception):
    """Base class for errors reported to API clients as HTTP 400."""


class InvalidUrlError(RedNoteError):
    def __init__(self, message: str = INVALID_URL_MESSAGE) -> None:
        super().__init__(message)


class FetchError(RedNoteError):
    """Network, timeout or body-decoding failure while downloading a note page."""
