"""Utility functions shared by the API routes and the CLI."""
from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any, Dict

from rednote.models import ExtractionResult


def success_payload(result: ExtractionResult) -> Dict[str, Any]:
    """Result fields plus ``"status": true``."""
    payload = result.to_payload()
    payload["status"] = True
    return payload


def error_payload(message: str) -> Dict[str, Any]:
    return {"status": False, "error": message}


def pretty_json(payload: Dict[str, Any]) -> str:
    return json.dumps(payload, ensure_ascii=False, indent=2)


def get_current_timestamp() -> str:
    """Get current UTC timestamp in ISO format.

    Returns:
        ISO formatted timestamp string.
    """
    return datetime.now(timezone.utc).isoformat()
