"""Security helpers for gaussorm."""

from .redaction import redact_dsn, redact_params

__all__ = ["redact_dsn", "redact_params"]
