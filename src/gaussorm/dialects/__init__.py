"""
Dialect strategy registry.
"""

from .base import Dialect, DialectCapabilities
from .opengauss import OpenGaussDialect, get_opengauss_dialect
from .quoting import quote_identifier
from .types import data_type_of, serial_base_type

__all__ = [
    "Dialect",
    "DialectCapabilities",
    "OpenGaussDialect",
    "data_type_of",
    "get_opengauss_dialect",
    "quote_identifier",
    "serial_base_type",
]
