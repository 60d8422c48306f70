"""
Dialect strategy interfaces describing SQL rendering behaviors.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol

from ..core.fields import ColumnDescriptor

if TYPE_CHECKING:
    from ..query.clauses import Expr
    from ..query.statement import Builder, Statement
    from .quoting import Writer


@dataclass(frozen=True)
class DialectCapabilities:
    """
    Feature flags describing backend capabilities.
    """

    supports_returning: bool = False


class Dialect(Protocol):
    """
    Strategy interface consumed by statements and the database handle.
    """

    @property
    def name(self) -> str: ...

    @property
    def capabilities(self) -> DialectCapabilities: ...

    def initialize(self, db: Any) -> None: ...

    def quote_to(self, writer: "Writer", name: str) -> None: ...

    def bind_var_to(self, writer: "Builder", stmt: "Statement", value: Any) -> None: ...

    def data_type_of(self, column: ColumnDescriptor) -> str: ...

    def default_value_of(self, column: ColumnDescriptor) -> "Expr": ...

    def explain(self, sql: str, *vars: Any) -> str: ...

    def savepoint(self, tx: Any, name: str) -> None: ...

    def rollback_to(self, tx: Any, name: str) -> None: ...
