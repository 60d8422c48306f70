"""
Driver adapters, configuration, and adapter errors.
"""

from .base import (
    AdapterConfigurationError,
    AdapterConnectionError,
    AdapterError,
    AdapterExecutionError,
    DialectConfig,
)
from .opengauss import extract_time_zone, open_connection

__all__ = [
    "AdapterError",
    "AdapterConfigurationError",
    "AdapterConnectionError",
    "AdapterExecutionError",
    "DialectConfig",
    "extract_time_zone",
    "open_connection",
]
