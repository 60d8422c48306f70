"""
gaussorm public package initialization.

openGauss SQL dialect: identifier quoting, column type mapping, and the
conflict/returning clause rewrites, plus the database handle that wires them.
"""

from .adapters import (  # noqa: F401
    AdapterConfigurationError,
    AdapterConnectionError,
    AdapterError,
    AdapterExecutionError,
    DialectConfig,
)
from .core import ColumnDescriptor, DataType, Schema  # noqa: F401
from .database import CallbackConfig, Database  # noqa: F401
from .dialects import OpenGaussDialect, get_opengauss_dialect  # noqa: F401
from .query import (  # noqa: F401
    Assignment,
    Column,
    Eq,
    Expr,
    Insert,
    OnConflict,
    Returning,
    Statement,
    Table,
    Values,
    Where,
    excluded,
)

__all__ = [
    "AdapterError",
    "AdapterConfigurationError",
    "AdapterConnectionError",
    "AdapterExecutionError",
    "Assignment",
    "CallbackConfig",
    "Column",
    "ColumnDescriptor",
    "DataType",
    "Database",
    "DialectConfig",
    "Eq",
    "Expr",
    "Insert",
    "OnConflict",
    "OpenGaussDialect",
    "Returning",
    "Schema",
    "Statement",
    "Table",
    "Values",
    "Where",
    "excluded",
    "get_opengauss_dialect",
]
