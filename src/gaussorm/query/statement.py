"""
In-flight statement rendering: append-only SQL text plus ordered bound vars.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Mapping, Protocol

from ..core.fields import ColumnDescriptor, Schema
from .clauses import Clause, Column, Table

if TYPE_CHECKING:
    from ..dialects.base import Dialect


class Builder(Protocol):
    """
    Writer interface handed to clause builders.
    """

    clauses: Mapping[str, Clause]
    schema: Schema | None
    vars: list[Any]

    def write(self, text: str) -> None: ...

    def write_quoted(self, value: Any) -> None: ...

    def add_var(self, *values: Any) -> None: ...

    def look_up_field(self, name: str) -> ColumnDescriptor | None: ...


ClauseBuilder = Callable[[Clause, Builder], None]


class Statement:
    """
    One statement being rendered for a dialect.

    Text is only ever appended; clause builders registered on the statement
    replace the default rendering of the clause with the same name.
    """

    def __init__(
        self,
        dialect: "Dialect",
        *,
        schema: Schema | None = None,
        clause_builders: Mapping[str, ClauseBuilder] | None = None,
    ) -> None:
        self.dialect = dialect
        self.schema = schema
        self.clause_builders: dict[str, ClauseBuilder] = dict(clause_builders or {})
        self.clauses: dict[str, Clause] = {}
        self.vars: list[Any] = []
        self._parts: list[str] = []

    @property
    def sql(self) -> str:
        return "".join(self._parts)

    def add_clause(self, *expressions: Any) -> "Statement":
        for expression in expressions:
            name = expression.clause_name
            self.clauses[name] = Clause(name, expression)
        return self

    def write(self, text: str) -> None:
        self._parts.append(text)

    def write_quoted(self, value: Any) -> None:
        if isinstance(value, Table):
            self.dialect.quote_to(self, value.name)
            if value.alias:
                self.write(" ")
                self.dialect.quote_to(self, value.alias)
            return
        if isinstance(value, Column):
            if value.table:
                self.dialect.quote_to(self, value.table)
                self.write(".")
            if value.raw or value.name == "*":
                self.write(value.name)
            else:
                self.dialect.quote_to(self, value.name)
            if value.alias:
                self.write(" AS ")
                self.dialect.quote_to(self, value.alias)
            return
        self.dialect.quote_to(self, str(value))

    def add_var(self, *values: Any) -> None:
        for idx, value in enumerate(values):
            if idx > 0:
                self.write(",")
            if isinstance(value, (Table, Column)):
                self.write_quoted(value)
            elif hasattr(value, "build"):
                value.build(self)
            elif isinstance(value, (list, tuple)):
                self.write("(")
                self.add_var(*value)
                self.write(")")
            else:
                self.vars.append(value)
                self.dialect.bind_var_to(self, self, value)

    def look_up_field(self, name: str) -> ColumnDescriptor | None:
        if self.schema is None:
            return None
        return self.schema.look_up_field(name)

    def build(self, *clause_names: str) -> "Statement":
        first = True
        for name in clause_names:
            clause = self.clauses.get(name)
            if clause is None:
                continue
            if not first:
                self.write(" ")
            first = False
            custom = self.clause_builders.get(name)
            if custom is not None:
                custom(clause, self)
            else:
                clause.build(self)
        return self
