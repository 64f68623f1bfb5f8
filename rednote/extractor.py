"""
Regex extraction of note metadata from raw page HTML.

Each field comes from an independent lookup over the whole document, so a
missing or malformed tag only blanks that one field. Meta tags are scanned once:
every ``<meta ...>`` run is split into its attribute text (quoted values may
contain ``>`` but never cross a closing quote), then the first ``name="..."``
and the first ``content="..."`` after it are read. None of the patterns can
backtrack across the document, so extraction stays linear in its size even on
truncated or garbled markup.
"""
from __future__ import annotations

import re
from typing import Dict, List, Optional, Pattern, Tuple

from rednote.models import ORIGINAL_QUALITY, DownloadOption, EngagementCounters, ExtractionResult

AUTHOR_SEPARATOR = " - "

TITLE_PATTERN = re.compile(r"<title>([^<]*)</title>", re.IGNORECASE)
META_TAG_PATTERN = re.compile(r'<meta((?:[^<>"]+|"[^"]*")*)', re.IGNORECASE)
NAME_ATTR_PATTERN = re.compile(r'(?<![\w:-])name="([^"]*)"', re.IGNORECASE)
CONTENT_ATTR_PATTERN = re.compile(r'(?<![\w:-])content="([^"]*)"', re.IGNORECASE)

DESCRIPTION = "description"
KEYWORDS = "keywords"
VIDEO = "og:video"
URL = "og:url"
DURATION = "og:videotime"
OG_TITLE = "og:title"
IMAGE = "og:image"
LIKES = "og:xhs:note_like"
COMMENTS = "og:xhs:note_comment"
COLLECTS = "og:xhs:note_collect"


def capture_single(html: str, pattern: Pattern[str]) -> str:
    """First match's first group, stripped; "" when nothing matches."""
    match = pattern.search(html)
    if not match:
        return ""
    return match.group(1).strip()


def collect_meta_contents(html: str) -> Dict[str, List[str]]:
    """Map lower-cased meta ``name`` to every stripped ``content`` value, in document order."""
    contents: Dict[str, List[str]] = {}
    for tag in META_TAG_PATTERN.finditer(html):
        attrs = tag.group(1)
        name = NAME_ATTR_PATTERN.search(attrs)
        if not name:
            continue
        content = CONTENT_ATTR_PATTERN.search(attrs, name.end())
        if not content:
            continue
        contents.setdefault(name.group(1).lower(), []).append(content.group(1).strip())
    return contents


def first_content(contents: Dict[str, List[str]], name: str) -> str:
    values = contents.get(name)
    return values[0] if values else ""


def note_id_from_url(og_url: str) -> str:
    return og_url.rsplit("/", 1)[-1]


def nickname_from_title(og_title: str) -> str:
    return og_title.split(AUTHOR_SEPARATOR, 1)[0]


def build_downloads(video_url: str) -> Tuple[DownloadOption, ...]:
    if not video_url:
        return ()
    return (DownloadOption(quality=ORIGINAL_QUALITY, url=video_url),)


def extract(html: Optional[str]) -> ExtractionResult:
    html = html or ""
    meta = collect_meta_contents(html)
    return ExtractionResult(
        note_id=note_id_from_url(first_content(meta, URL)),
        nickname=nickname_from_title(first_content(meta, OG_TITLE)),
        title=capture_single(html, TITLE_PATTERN),
        desc=first_content(meta, DESCRIPTION),
        keywords=first_content(meta, KEYWORDS),
        duration=first_content(meta, DURATION),
        engagement=EngagementCounters(
            likes=first_content(meta, LIKES),
            comments=first_content(meta, COMMENTS),
            collects=first_content(meta, COLLECTS),
        ),
        images=tuple(meta.get(IMAGE, ())),
        downloads=build_downloads(first_content(meta, VIDEO)),
    )
