"""
Connection setup for openGauss through psycopg or a named DB-API driver.
"""

from __future__ import annotations

import importlib
import re
from typing import Any

from ..utils import get_logger
from .base import AdapterConfigurationError, AdapterConnectionError, DialectConfig

TIME_ZONE_MATCHER = re.compile(r"(?:^|(?<=[\s?&]))(time_zone|TimeZone)=(.*?)($|&| )")

logger = get_logger("adapters.opengauss")


def _load_driver():
    try:
        import psycopg
        import psycopg.conninfo

        return psycopg
    except ImportError:
        return None


def _load_named_driver(name: str):
    try:
        return importlib.import_module(name)
    except ImportError as exc:
        raise AdapterConfigurationError(f"Driver module '{name}' could not be imported.") from exc


def extract_time_zone(dsn: str) -> tuple[str, str | None]:
    """
    Split a ``TimeZone=``/``time_zone=`` pair out of ``dsn``.

    Returns the DSN without the pair and the zone, or the DSN unchanged and
    ``None`` when no zone is present. Works for keyword and URL forms.
    """
    match = TIME_ZONE_MATCHER.search(dsn)
    if match is None:
        return dsn, None
    start, end = match.span()
    if match.group(3):
        stripped = dsn[:start] + dsn[end:]
    else:
        stripped = dsn[:start].rstrip("?& ")
    return stripped, match.group(2)


def parse_config(driver: Any, dsn: str) -> dict[str, Any]:
    """
    Parse ``dsn`` into psycopg connection keywords, forwarding the time zone
    as a runtime parameter.
    """
    stripped, time_zone = extract_time_zone(dsn)
    try:
        params = dict(driver.conninfo.conninfo_to_dict(stripped))
    except driver.Error as exc:
        raise AdapterConfigurationError(f"Invalid openGauss DSN: {exc}") from exc
    if time_zone:
        options = params.get("options") or ""
        params["options"] = f"{options} -c timezone={time_zone}".strip()
    return params


def open_connection(config: DialectConfig) -> Any:
    """
    Return the connection a session should use for ``config``.
    """
    if config.conn is not None:
        logger.debug("Using caller-supplied openGauss connection.")
        return config.conn

    if config.driver_name:
        driver = _load_named_driver(config.driver_name)
        logger.info(
            "Connecting to openGauss %s with driver %s",
            config.descriptive_label(),
            config.driver_name,
        )
        try:
            return driver.connect(config.dsn)
        except Exception as exc:
            raise AdapterConnectionError("Failed to connect to openGauss.") from exc

    driver = _load_driver()
    if driver is None:
        raise AdapterConfigurationError("psycopg is required to connect to openGauss.")

    params = parse_config(driver, config.dsn)
    # server-side prepared statements are skipped in simple protocol mode
    prepare_threshold = None if config.prefer_simple_protocol else 5

    logger.info(
        "Connecting to openGauss %s (simple_protocol=%s)",
        config.descriptive_label(),
        config.prefer_simple_protocol,
    )
    try:
        return driver.connect(
            cursor_factory=driver.RawCursor,
            prepare_threshold=prepare_threshold,
            **params,
        )
    except Exception as exc:
        raise AdapterConnectionError("Failed to connect to openGauss.") from exc
