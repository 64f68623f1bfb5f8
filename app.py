"""Main application module for the RedNote scraper API."""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask
from flask_cors import CORS

from api_routes import register_routes
from rednote import AppSettings, PageFetcher, RedNoteScraper, load_settings

PROJECT_ROOT = Path(__file__).resolve().parent
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger("rednote")


def configure_logging(log_file: Optional[Path]) -> None:
    handlers = [logging.StreamHandler()]
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT, handlers=handlers)


def create_app(settings: Optional[AppSettings] = None, scraper: Optional[RedNoteScraper] = None) -> Flask:
    """Build the Flask app; ``scraper`` defaults to one backed by a shared PageFetcher."""
    settings = settings or load_settings()
    app = Flask(
        __name__,
        template_folder=str(PROJECT_ROOT / "templates"),
        static_folder=str(PROJECT_ROOT / "static"),
    )
    CORS(app)
    app.config["REDNOTE_SETTINGS"] = settings

    scraper = scraper or RedNoteScraper(PageFetcher(settings.fetcher))
    register_routes(app, scraper)
    logger.info(
        "RedNote API ready (timeout=%ss, max_redirects=%s)",
        settings.fetcher.timeout,
        settings.fetcher.max_redirects,
    )
    return app


# Load environment variables before settings are read
load_dotenv(os.getenv("REDNOTE_DOTENV", ".env"))

SETTINGS = load_settings()
configure_logging(SETTINGS.log_file)
app = create_app(SETTINGS)

__all__ = ["app", "create_app", "configure_logging", "SETTINGS"]
