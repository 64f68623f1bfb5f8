"""
URL gate applied before any outbound request.
"""
from __future__ import annotations

import re

# Only (sub.)xiaohongshu.com and (sub.)xhslink.com with a non-empty path.
_NOTE_URL_PATTERN = re.compile(
    r"https?://(?:[a-z0-9-]+\.)*(?:xhslink\.com|xiaohongshu\.com)/\S+",
    re.IGNORECASE,
)


def is_valid_rednote_url(url: object) -> bool:
    if not isinstance(url, str):
        return False
    return _NOTE_URL_PATTERN.fullmatch(url) is not None
