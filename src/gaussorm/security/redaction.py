"""Redaction helpers for connection strings and logged parameters."""

from __future__ import annotations

import re
from typing import Any, Iterable

REDACTED_VALUE = "***"

_SENSITIVE_VALUE_TOKENS = (
    "password",
    "passwd",
    "secret",
    "token",
    "bearer",
    "authorization",
)

_URL_PASSWORD = re.compile(r"(://[^:/@\s]+:)[^@\s]*@")
_KEYWORD_PASSWORD = re.compile(r"(?i)\b(password|sslpassword)=('(?:[^'\\]|\\.)*'|[^\s&]*)")


def redact_dsn(dsn: str) -> str:
    """
    Mask passwords in URL (``user:pw@host``) and keyword (``password=pw``) DSNs.
    """
    masked = _URL_PASSWORD.sub(rf"\g<1>{REDACTED_VALUE}@", dsn)
    return _KEYWORD_PASSWORD.sub(lambda m: f"{m.group(1)}={REDACTED_VALUE}", masked)


def is_sensitive_value(value: str) -> bool:
    normalized = value.lower()
    return any(token in normalized for token in _SENSITIVE_VALUE_TOKENS)


def redact_value(value: Any) -> Any:
    if isinstance(value, tuple):
        return tuple(redact_value(item) for item in value)
    if isinstance(value, list):
        return [redact_value(item) for item in value]
    if isinstance(value, bytes):
        decoded = value.decode("utf-8", errors="ignore")
        if decoded and is_sensitive_value(decoded):
            return REDACTED_VALUE
        return value
    if isinstance(value, str) and is_sensitive_value(value):
        return REDACTED_VALUE
    return value


def redact_params(params: Iterable[Any]) -> list[Any]:
    return [redact_value(value) for value in params]
