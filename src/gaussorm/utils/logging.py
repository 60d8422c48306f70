"""Structured logging helpers for gaussorm."""

from __future__ import annotations

import logging
import os
import time
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Iterable, Iterator, Optional

_correlation_id: ContextVar[str | None] = ContextVar("correlation_id", default=None)

LOG_LEVEL_ENV = "GAUSSORM_LOG_LEVEL"
SLOW_QUERY_ENV = "GAUSSORM_SLOW_QUERY_MS"


class CorrelationIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = get_correlation_id()
        return True


def resolve_log_level(default: int = logging.INFO) -> int:
    """
    Level named by ``GAUSSORM_LOG_LEVEL`` (``DEBUG``, ``warning``...), else ``default``.
    """
    name = os.getenv(LOG_LEVEL_ENV)
    if not name:
        return default
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else default


def configure_logging(level: int | None = None) -> None:
    logger = logging.getLogger("gaussorm")
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s | %(levelname)s | %(correlation_id)s | %(name)s | %(message)s")
    )
    handler.addFilter(CorrelationIdFilter())
    logger.addHandler(handler)
    logger.setLevel(level if level is not None else resolve_log_level())


def get_logger(name: str) -> logging.Logger:
    configure_logging()
    return logging.getLogger(f"gaussorm.{name}")


def set_correlation_id(value: Optional[str] = None) -> str:
    token = value or str(uuid.uuid4())
    _correlation_id.set(token)
    return token


def get_correlation_id() -> str:
    cid = _correlation_id.get()
    if cid is None:
        cid = set_correlation_id()
    return cid


def resolve_slow_query_ms(*, default: int = 100, override: int | None = None) -> int:
    """
    Pick the slow query threshold: explicit override, then environment, then default.
    """
    if override is not None:
        return override
    value = os.getenv(SLOW_QUERY_ENV)
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        logging.getLogger("gaussorm.utils").warning(
            "Ignoring invalid %s value %r", SLOW_QUERY_ENV, value
        )
        return default


@contextmanager
def time_call(
    name: str,
    logger: logging.Logger,
    *,
    sql: str | None = None,
    params: Iterable[Any] | None = None,
    threshold_ms: int = 100,
) -> Iterator[None]:
    """
    Log how long the block took; slow or failed statements go out at WARNING
    with their SQL in the message.
    """
    start = time.monotonic()
    failed = False
    try:
        yield
    except Exception:
        failed = True
        raise
    finally:
        elapsed_ms = (time.monotonic() - start) * 1000
        extra = {"sql": sql, "params": params, "elapsed_ms": elapsed_ms}
        if failed or elapsed_ms >= threshold_ms:
            outcome = "failed after" if failed else "took"
            logger.warning("%s %s %.2fms: %s", name, outcome, elapsed_ms, sql or "-", extra=extra)
        else:
            logger.debug("%s took %.2fms", name, elapsed_ms, extra=extra)
