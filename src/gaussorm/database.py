"""
Database handle tying a dialect to an open connection and statement rendering.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from .adapters.base import AdapterConnectionError, AdapterExecutionError
from .core.fields import Schema
from .dialects.base import Dialect
from .dialects.opengauss import NUMERIC_PLACEHOLDER
from .query.statement import ClauseBuilder, Statement
from .security.redaction import redact_params
from .utils import get_logger, resolve_slow_query_ms, time_call


@dataclass(frozen=True)
class CallbackConfig:
    """
    Clause order used when rendering each statement kind.
    """

    create_clauses: tuple[str, ...] = ("INSERT", "VALUES", "ON CONFLICT")
    update_clauses: tuple[str, ...] = ("UPDATE", "SET", "WHERE")
    delete_clauses: tuple[str, ...] = ("DELETE", "FROM", "WHERE")


class Database:
    """
    Session-level handle; the dialect installs its builders and connection on
    construction.
    """

    def __init__(self, dialect: Dialect, *, slow_query_ms: int | None = None) -> None:
        self.dialect = dialect
        self.conn_pool: Any = None
        self.clause_builders: dict[str, ClauseBuilder] = {}
        self.callbacks = CallbackConfig()
        self.logger = get_logger("database")
        self.slow_query_ms = resolve_slow_query_ms(default=100, override=slow_query_ms)
        dialect.initialize(self)

    def statement(self, schema: Schema | None = None) -> Statement:
        return Statement(self.dialect, schema=schema, clause_builders=self.clause_builders)

    def render_create(self, stmt: Statement) -> Statement:
        return stmt.build(*self.callbacks.create_clauses)

    def render_update(self, stmt: Statement) -> Statement:
        return stmt.build(*self.callbacks.update_clauses)

    def render_delete(self, stmt: Statement) -> Statement:
        return stmt.build(*self.callbacks.delete_clauses)

    def execute(self, sql: str, params: Sequence[Any] | None = None):
        if self.conn_pool is None:
            raise AdapterConnectionError("Database has no open connection.")
        params = tuple(params or ())
        self._validate_params(sql, params)
        cursor = self.conn_pool.cursor()
        with time_call(
            "opengauss.execute",
            self.logger,
            sql=sql,
            params=redact_params(params),
            threshold_ms=self.slow_query_ms,
        ):
            cursor.execute(sql, params)
        return cursor

    def execute_statement(self, stmt: Statement):
        self.logger.debug("SQL: %s", self.dialect.explain(stmt.sql, *redact_params(stmt.vars)))
        return self.execute(stmt.sql, stmt.vars)

    def savepoint(self, name: str) -> None:
        self.dialect.savepoint(self, name)

    def rollback_to(self, name: str) -> None:
        self.dialect.rollback_to(self, name)

    def close(self) -> None:
        if self.conn_pool is not None:
            try:
                self.conn_pool.close()
            finally:
                self.conn_pool = None

    @staticmethod
    def _validate_params(sql: str, params: Sequence[Any]) -> None:
        expected = max((int(index) for index in NUMERIC_PLACEHOLDER.findall(sql)), default=0)
        if expected == 0:
            if params:
                raise AdapterExecutionError(
                    "Parameters provided but SQL statement has no placeholders."
                )
            return
        if expected != len(params):
            raise AdapterExecutionError(
                f"Parameter count mismatch: expected {expected}, received {len(params)}."
            )
