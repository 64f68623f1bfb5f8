"""
Centralised settings for the scraper service (env-first, code-light).
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/132.0.0.0 Safari/537.36"
)
SITE_ORIGIN = "https://www.xiaohongshu.com"


@dataclass
class FetcherSettings:
    timeout: int = 30
    max_redirects: int = 10
    user_agent: str = DEFAULT_USER_AGENT
    referer: str = SITE_ORIGIN + "/"
    origin: str = SITE_ORIGIN


@dataclass
class AppSettings:
    host: str = "0.0.0.0"
    port: int = 8080
    debug: bool = False
    log_file: Optional[Path] = Path("logs") / "rednote.log"
    fetcher: FetcherSettings = field(default_factory=FetcherSettings)


def _int_from_env(key: str, default: int) -> int:
    raw = os.getenv(key)
    if raw is None or str(raw).strip() == "":
        return default
    try:
        value = int(raw)
        return value if value > 0 else default
    except ValueError:
        logger.warning("Invalid int value for %s=%s; using default %s", key, raw, default)
        return default


def _bool_from_env(key: str, default: bool) -> bool:
    raw = os.getenv(key)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def load_settings() -> AppSettings:
    log_file_env = os.getenv("REDNOTE_LOG_FILE")
    if log_file_env is None:
        log_file: Optional[Path] = AppSettings.log_file
    else:
        log_file = Path(log_file_env) if log_file_env.strip() else None
    return AppSettings(
        host=os.getenv("HOST", "0.0.0.0"),
        port=_int_from_env("PORT", 8080),
        debug=_bool_from_env("DEBUG", False),
        log_file=log_file,
        fetcher=FetcherSettings(
            timeout=_int_from_env("REDNOTE_TIMEOUT", 30),
            max_redirects=_int_from_env("REDNOTE_MAX_REDIRECTS", 10),
            user_agent=os.getenv("REDNOTE_USER_AGENT") or DEFAULT_USER_AGENT,
        ),
    )
