"""API routes for the RedNote scraper."""
from __future__ import annotations

import logging
import time

from flask import g, jsonify, render_template, request, send_from_directory
from jinja2 import TemplateNotFound
from werkzeug.exceptions import NotFound

from app_utils import error_payload, get_current_timestamp, pretty_json, success_payload
from rednote import RedNoteError, RedNoteScraper
from utils.security import redact_secrets

logger = logging.getLogger("rednote")


def register_routes(app, scraper: RedNoteScraper):
    """Register all API routes with the Flask app.

    Args:
        app: Flask app instance.
        scraper: RedNoteScraper shared by every request.
    """

    @app.before_request
    def log_request_start():
        g.request_started = time.perf_counter()
        logger.info(">>> %s %s", request.method, redact_secrets(request.full_path.rstrip("?")))

    @app.after_request
    def log_request_end(response):
        started = g.get("request_started")
        elapsed_ms = (time.perf_counter() - started) * 1000 if started is not None else 0.0
        logger.info(
            "<<< %s %s %s %.2fms",
            request.method,
            redact_secrets(request.full_path.rstrip("?")),
            response.status_code,
            elapsed_ms,
        )
        return response

    def process_url(url):
        try:
            result = scraper.scrape(url)
        except RedNoteError as exc:
            logger.info("Rejected %s: %s", redact_secrets(str(url)), exc)
            return jsonify(error_payload(str(exc))), 400
        except Exception as exc:
            logger.error("Scrape failed for %s: %s", redact_secrets(str(url)), exc, exc_info=True)
            return jsonify(error_payload("Internal server error")), 500
        return app.response_class(pretty_json(success_payload(result)), status=200, mimetype="application/json")

    @app.route("/api/rednote", methods=["GET"])
    def api_rednote():
        """Scrape the note given by the ``url`` query parameter."""
        return process_url(request.args.get("url"))

    @app.route("/api/rednote", methods=["POST"])
    def api_rednote_post():
        """Scrape the note given by ``{"url": ...}`` in the JSON body."""
        payload = request.get_json(silent=True)
        url = payload.get("url") if isinstance(payload, dict) else None
        return process_url(url)

    @app.route("/")
    @app.route("/docs")
    def docs():
        try:
            return render_template("docs.html")
        except TemplateNotFound:
            logger.warning("docs.html template missing")
            return "<h1>docs.html not found</h1>"

    @app.route("/openapi.json")
    def openapi_json():
        try:
            return send_from_directory(app.static_folder, "openapi.json", mimetype="application/json")
        except NotFound:
            return "openapi.json not found", 404, {"Content-Type": "text/plain; charset=utf-8"}

    @app.route("/health")
    def health():
        return jsonify({"status": "ok", "timestamp": get_current_timestamp()})

    @app.errorhandler(404)
    def not_found(_exc):
        return "<h1>404 - Not Found</h1>", 404, {"Content-Type": "text/html; charset=utf-8"}
