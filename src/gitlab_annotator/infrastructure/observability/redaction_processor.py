"""Structlog processor that masks GitLab credentials before rendering."""

import re
from typing import Any

_SECRET_PATTERNS = [
    re.compile(r"(Bearer\s+)([a-zA-Z0-9\-\._~+/=]+)", re.IGNORECASE),
    re.compile(r"(Private-Token:\s*)([a-zA-Z0-9\-\._~+/=]+)", re.IGNORECASE),
    re.compile(r"()(glpat-[A-Za-z0-9_\-]+)"),
]

_SENSITIVE_KEYS = {"authorization", "private-token", "token", "password", "secret"}


def redact_text(text: str) -> str:
    if not text:
        return text
    for pattern in _SECRET_PATTERNS:
        text = pattern.sub(r"\1[REDACTED]", text)
    return text


def redact_value(value: Any) -> Any:
    if isinstance(value, str):
        return redact_text(value)
    if isinstance(value, dict):
        return redact_dict(value)
    if isinstance(value, list):
        return [redact_value(item) for item in value]
    return value


def redact_dict(obj: dict[str, Any]) -> dict[str, Any]:
    redacted: dict[str, Any] = {}
    for key, value in obj.items():
        if any(sensitive in str(key).lower() for sensitive in _SENSITIVE_KEYS):
            redacted[key] = "[REDACTED]"
        else:
            redacted[key] = redact_value(value)
    return redacted


def redaction_processor(
    logger: Any,  # noqa: ARG001
    method_name: str,  # noqa: ARG001
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    return redact_dict(event_dict)
