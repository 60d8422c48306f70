"""
Clause model and statement rendering.
"""

from .clauses import (
    EXCLUDED,
    Assignment,
    Clause,
    Column,
    Eq,
    Expr,
    Insert,
    OnConflict,
    Returning,
    Table,
    Values,
    Where,
    excluded,
)
from .statement import Builder, ClauseBuilder, Statement

__all__ = [
    "EXCLUDED",
    "Assignment",
    "Builder",
    "Clause",
    "ClauseBuilder",
    "Column",
    "Eq",
    "Expr",
    "Insert",
    "OnConflict",
    "Returning",
    "Statement",
    "Table",
    "Values",
    "Where",
    "excluded",
]
