"""
openGauss dialect implementation.
"""

from __future__ import annotations

import re
from dataclasses import replace
from datetime import date, datetime, time
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Final

from ..adapters.base import DialectConfig
from ..adapters.opengauss import open_connection
from ..core.fields import ColumnDescriptor
from ..query.clauses import Expr
from ..utils import get_logger
from . import quoting, rewriter, types
from .base import Dialect, DialectCapabilities

if TYPE_CHECKING:
    from ..query.statement import Builder, Statement
    from .quoting import Writer

NUMERIC_PLACEHOLDER = re.compile(r"\$(\d+)")

CREATE_CLAUSES: Final[tuple[str, ...]] = ("INSERT", "VALUES", "ON CONFLICT", "RETURNING")
UPDATE_CLAUSES: Final[tuple[str, ...]] = ("UPDATE", "SET", "FROM", "WHERE", "RETURNING")
DELETE_CLAUSES: Final[tuple[str, ...]] = ("DELETE", "FROM", "WHERE", "RETURNING")


def _without_returning(names: tuple[str, ...]) -> tuple[str, ...]:
    return tuple(name for name in names if name != rewriter.RETURNING)


def _sql_literal(value: Any) -> str:
    if value is None:
        return "NULL"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float, Decimal)):
        return str(value)
    if isinstance(value, datetime):
        return "'" + value.isoformat(sep=" ", timespec="milliseconds") + "'"
    if isinstance(value, (date, time)):
        return "'" + value.isoformat() + "'"
    if isinstance(value, (bytes, bytearray, memoryview)):
        raw = bytes(value)
        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError:
            return "'\\x" + raw.hex() + "'"
        if text.isprintable():
            return "'" + text.replace("'", "''") + "'"
        return "'\\x" + raw.hex() + "'"
    return "'" + str(value).replace("'", "''") + "'"


class OpenGaussDialect:
    """
    openGauss dialect: double-quoted identifiers, ``$n`` placeholders, and
    ``ON DUPLICATE KEY UPDATE`` conflict handling.
    """

    name: Final[str] = "opengauss"

    def __init__(self, config: DialectConfig | None = None) -> None:
        self.config = config or DialectConfig()
        self.logger = get_logger("dialects.opengauss")

    @classmethod
    def from_dsn(cls, dsn: str) -> "OpenGaussDialect":
        return cls(DialectConfig(dsn=dsn))

    @property
    def capabilities(self) -> DialectCapabilities:
        return DialectCapabilities(supports_returning=not self.config.without_returning)

    def initialize(self, db: Any) -> None:
        """
        Prepare ``db`` for this dialect: clause orders, connection, builders.

        The connection is opened before anything is installed so a bad DSN
        leaves ``db`` untouched.
        """
        connection = open_connection(self.config)

        create, update, delete = CREATE_CLAUSES, UPDATE_CLAUSES, DELETE_CLAUSES
        if not self.capabilities.supports_returning:
            create = _without_returning(create)
            update = _without_returning(update)
            delete = _without_returning(delete)
        db.callbacks = replace(
            db.callbacks,
            create_clauses=create,
            update_clauses=update,
            delete_clauses=delete,
        )
        db.conn_pool = connection
        db.clause_builders.update(rewriter.clause_builders())
        self.logger.debug("Initialized %s dialect for %s", self.name, self.config.redacted_dsn())

    def quote_to(self, writer: "Writer", name: str) -> None:
        quoting.quote_to(writer, name)

    def bind_var_to(self, writer: "Builder", stmt: "Statement", value: Any) -> None:
        writer.write(f"${len(stmt.vars)}")

    def data_type_of(self, column: ColumnDescriptor) -> str:
        return types.data_type_of(column)

    def default_value_of(self, column: ColumnDescriptor) -> Expr:
        return Expr("DEFAULT")

    def explain(self, sql: str, *vars: Any) -> str:
        """
        Inline bound values into ``sql`` for logging; never execute the result.
        """

        def substitute(match: re.Match[str]) -> str:
            index = int(match.group(1)) - 1
            if 0 <= index < len(vars):
                return _sql_literal(vars[index])
            return match.group(0)

        return NUMERIC_PLACEHOLDER.sub(substitute, sql)

    def savepoint(self, tx: Any, name: str) -> None:
        tx.execute("SAVEPOINT " + name)

    def rollback_to(self, tx: Any, name: str) -> None:
        tx.execute("ROLLBACK TO SAVEPOINT " + name)


def get_opengauss_dialect(dsn: str = "", **options: Any) -> Dialect:
    return OpenGaussDialect(DialectConfig(dsn=dsn, **options))
