"""
Dialect-neutral clause primitives assembled by the host into statements.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, ClassVar, Protocol

if TYPE_CHECKING:
    from .statement import Builder


EXCLUDED = "excluded"
"""Pseudo-table naming the row that was rejected by a conflicting insert."""


class Expression(Protocol):
    def build(self, builder: "Builder") -> None: ...


@dataclass(frozen=True)
class Table:
    name: str
    alias: str = ""


@dataclass(frozen=True)
class Column:
    name: str
    table: str = ""
    alias: str = ""
    raw: bool = False


def excluded(name: str) -> Column:
    """
    Reference ``name`` on the incoming row of an insert.
    """
    return Column(name=name, table=EXCLUDED)


@dataclass(frozen=True)
class Expr:
    """
    Raw SQL fragment; each ``?`` consumes the next value from ``vars``.
    """

    sql: str
    vars: tuple[Any, ...] = ()

    def build(self, builder: "Builder") -> None:
        pieces = self.sql.split("?")
        builder.write(pieces[0])
        for index, piece in enumerate(pieces[1:]):
            if index < len(self.vars):
                builder.add_var(self.vars[index])
            else:
                builder.write("?")
            builder.write(piece)


@dataclass(frozen=True)
class Eq:
    column: Column | str
    value: Any

    def build(self, builder: "Builder") -> None:
        builder.write_quoted(self.column)
        if self.value is None:
            builder.write(" IS NULL")
            return
        builder.write(" = ")
        builder.add_var(self.value)


@dataclass(frozen=True)
class Where:
    clause_name: ClassVar[str] = "WHERE"

    exprs: tuple[Any, ...] = ()

    def build_conditions(self, builder: "Builder") -> None:
        for idx, expr in enumerate(self.exprs):
            if idx > 0:
                builder.write(" AND ")
            expr.build(builder)

    def build(self, builder: "Builder") -> None:
        if not self.exprs:
            return
        builder.write("WHERE ")
        self.build_conditions(builder)


@dataclass(frozen=True)
class Assignment:
    column: Column
    value: Any


@dataclass(frozen=True)
class Insert:
    clause_name: ClassVar[str] = "INSERT"

    table: Table

    def build(self, builder: "Builder") -> None:
        builder.write("INSERT INTO ")
        builder.write_quoted(self.table)


@dataclass(frozen=True)
class Values:
    clause_name: ClassVar[str] = "VALUES"

    columns: tuple[Column, ...] = ()
    rows: tuple[tuple[Any, ...], ...] = ()

    def build(self, builder: "Builder") -> None:
        if not self.columns:
            builder.write("DEFAULT VALUES")
            return
        builder.write("(")
        for idx, column in enumerate(self.columns):
            if idx > 0:
                builder.write(",")
            builder.write_quoted(column)
        builder.write(") VALUES ")
        for idx, row in enumerate(self.rows):
            if idx > 0:
                builder.write(",")
            builder.add_var(row)


@dataclass(frozen=True)
class OnConflict:
    """
    Insert conflict policy: target columns, filter, and the action to take.

    The default rendering is the standard ``ON CONFLICT ... DO`` form; dialects
    replace it through the clause builder registry.
    """

    clause_name: ClassVar[str] = "ON CONFLICT"

    columns: tuple[Column, ...] = ()
    target_where: Where = field(default_factory=Where)
    do_nothing: bool = False
    do_updates: tuple[Assignment, ...] = ()

    def build(self, builder: "Builder") -> None:
        builder.write("ON CONFLICT ")
        if self.columns:
            builder.write("(")
            for idx, column in enumerate(self.columns):
                if idx > 0:
                    builder.write(",")
                builder.write_quoted(column)
            builder.write(") ")
        if self.target_where.exprs:
            builder.write("WHERE ")
            self.target_where.build_conditions(builder)
            builder.write(" ")
        if self.do_nothing or not self.do_updates:
            builder.write("DO NOTHING")
            return
        builder.write("DO UPDATE SET ")
        for idx, assignment in enumerate(self.do_updates):
            if idx > 0:
                builder.write(",")
            builder.write_quoted(assignment.column)
            builder.write("=")
            builder.add_var(assignment.value)


@dataclass(frozen=True)
class Returning:
    clause_name: ClassVar[str] = "RETURNING"

    columns: tuple[Column, ...] = ()

    def build(self, builder: "Builder") -> None:
        builder.write("RETURNING ")
        if not self.columns:
            builder.write("*")
            return
        for idx, column in enumerate(self.columns):
            if idx > 0:
                builder.write(",")
            builder.write_quoted(column)


@dataclass(frozen=True)
class Clause:
    """
    Named slot in a statement holding one expression.
    """

    name: str
    expression: Any

    def build(self, builder: "Builder") -> None:
        self.expression.build(builder)
