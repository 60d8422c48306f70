"""
Adapter errors and dialect configuration for gaussorm.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any

from ..security.redaction import redact_dsn


class AdapterError(RuntimeError):
    """Base error for adapter-related failures."""


class AdapterConfigurationError(AdapterError):
    """Raised when configuration or required dependencies are invalid."""


class AdapterConnectionError(AdapterError):
    """Raised when establishing or using a connection fails."""


class AdapterExecutionError(AdapterError):
    """Raised when SQL execution or parameter validation fails."""


@dataclass
class DialectConfig:
    """
    Options recognised by the openGauss dialect.

    ``conn`` is an already-open connection (or pool) and bypasses DSN handling.
    ``driver_name`` names a DB-API module to open ``dsn`` with instead of psycopg.
    """

    dsn: str = ""
    driver_name: str = ""
    prefer_simple_protocol: bool = False
    without_returning: bool = False
    conn: Any = None
    source: str | None = None

    @classmethod
    def from_env(cls, env_var: str, **kwargs: Any) -> "DialectConfig":
        """
        Build a config from an environment variable containing a DSN.
        """

        value = os.getenv(env_var)
        if not value:
            raise AdapterConfigurationError(f"Environment variable {env_var} is not set")
        return cls(dsn=value, source=env_var, **kwargs)

    def redacted_dsn(self) -> str:
        """
        Return a DSN safe for logging (credentials removed).
        """

        return redact_dsn(self.dsn)

    def descriptive_label(self) -> str:
        redacted = self.redacted_dsn()
        if self.source:
            return f"{self.source} ({redacted})"
        return redacted
