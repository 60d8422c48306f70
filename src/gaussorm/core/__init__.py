"""
Schema metadata primitives.
"""

from .fields import UNIQUE_INDEX_TAG, ColumnDescriptor, DataType, Schema

__all__ = ["ColumnDescriptor", "DataType", "Schema", "UNIQUE_INDEX_TAG"]
