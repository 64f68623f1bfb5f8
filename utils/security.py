import re


def redact_secrets(text: str) -> str:
    """Redact share tokens and other secrets from URLs before they reach the logs."""
    if not isinstance(text, str):
        return text

    redacted = text

    # Query params like xsec_token=, token=, key=, secret=, sign= (raw or percent-encoded)
    redacted = re.sub(
        r"(?i)((?:[?&]|%3F|%26)(?:xsec_token|api[_-]?key|key|token|secret|sign)(?:=|%3D))([^&#\s]+)",
        r"\1***REDACTED***",
        redacted,
    )

    # Authorization: Bearer <token>
    redacted = re.sub(r"(?i)Bearer\s+[A-Za-z0-9._\-]+", "Bearer ***REDACTED***", redacted)

    return redacted
