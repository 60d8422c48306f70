"""
Utility helpers shared across gaussorm packages.
"""

from .logging import configure_logging, get_logger, resolve_slow_query_ms, time_call

__all__ = ["configure_logging", "get_logger", "resolve_slow_query_ms", "time_call"]
