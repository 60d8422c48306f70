"""
openGauss overrides for the conflict-resolution and return-values clauses.
"""

from __future__ import annotations

from enum import Enum
from typing import Final

from ..core.fields import Schema
from ..query.clauses import EXCLUDED, Assignment, Clause, Column, OnConflict, Returning
from ..query.statement import Builder, ClauseBuilder

ON_CONFLICT: Final[str] = "ON CONFLICT"
RETURNING: Final[str] = "RETURNING"


class ConflictAction(Enum):
    UPDATE = "update"
    NOTHING = "nothing"


def updatable_assignments(on_conflict: OnConflict, schema: Schema | None) -> list[Assignment]:
    """
    Drop assignments targeting primary key, unique, or unique-indexed columns.

    ``ON DUPLICATE KEY UPDATE`` cannot rewrite key columns. Columns the schema
    does not know about are kept.
    """
    if schema is None:
        return list(on_conflict.do_updates)
    kept: list[Assignment] = []
    for assignment in on_conflict.do_updates:
        column = schema.look_up_field(assignment.column.name)
        if column is not None and (
            column.primary_key or column.unique or column.has_unique_index
        ):
            continue
        kept.append(assignment)
    return kept


def conflict_action(on_conflict: OnConflict, updatable: list[Assignment]) -> ConflictAction:
    if on_conflict.do_nothing or not updatable:
        return ConflictAction.NOTHING
    return ConflictAction.UPDATE


def _write_assignment_value(builder: Builder, value: object) -> None:
    if isinstance(value, Column) and value.table == EXCLUDED:
        builder.write_quoted(value)
    else:
        builder.add_var(value)


def build_on_conflict(clause: Clause, builder: Builder) -> None:
    on_conflict = clause.expression
    if not isinstance(on_conflict, OnConflict):
        on_conflict = OnConflict()

    updatable = updatable_assignments(on_conflict, builder.schema)
    builder.write("ON DUPLICATE KEY UPDATE ")

    if conflict_action(on_conflict, updatable) is ConflictAction.NOTHING:
        builder.write("NOTHING ")
    else:
        for idx, assignment in enumerate(updatable):
            if idx > 0:
                builder.write(",")
            builder.write_quoted(assignment.column)
            builder.write("=")
            _write_assignment_value(builder, assignment.value)

    if on_conflict.target_where.exprs:
        builder.write(" WHERE ")
        on_conflict.target_where.build_conditions(builder)
        builder.write(" ")


def build_returning(clause: Clause, builder: Builder) -> None:
    # the driver cannot combine RETURNING with ON DUPLICATE KEY UPDATE
    if ON_CONFLICT in builder.clauses:
        return

    returning = clause.expression
    columns = returning.columns if isinstance(returning, Returning) else ()
    builder.write("RETURNING ")
    if not columns:
        builder.write("*")
        return
    for idx, column in enumerate(columns):
        if idx > 0:
            builder.write(",")
        builder.write_quoted(column)


def clause_builders() -> dict[str, ClauseBuilder]:
    return {
        ON_CONFLICT: build_on_conflict,
        RETURNING: build_returning,
    }
