"""
Logical column descriptor to openGauss physical type mapping.
"""

from __future__ import annotations

from typing import Final

from ..core.fields import ColumnDescriptor, DataType

DEFAULT_INTEGER_BITS: Final[int] = 64

_INTEGER_BUCKETS: Final[tuple[tuple[int, str, str], ...]] = (
    (16, "smallint", "smallserial"),
    (32, "integer", "serial"),
)
_WIDEST_INTEGER: Final[tuple[str, str]] = ("bigint", "bigserial")

_SERIAL_BASE_TYPES: Final[dict[str, str]] = {
    "smallserial": "smallint",
    "serial": "integer",
    "bigserial": "bigint",
}


def _integer_width(column: ColumnDescriptor) -> int:
    # no unsigned integers on the server, so reserve one extra bit
    width = column.size or DEFAULT_INTEGER_BITS
    if column.is_unsigned:
        width += 1
    return width


def integer_type(width: int, *, auto_increment: bool) -> str:
    for limit, plain, serial in _INTEGER_BUCKETS:
        if width <= limit:
            return serial if auto_increment else plain
    plain, serial = _WIDEST_INTEGER
    return serial if auto_increment else plain


def _custom_type(column: ColumnDescriptor) -> str:
    sql_type = str(column.data_type)
    if column.auto_increment and "serial" not in sql_type.lower():
        return integer_type(_integer_width(column), auto_increment=True)
    return sql_type


def data_type_of(column: ColumnDescriptor) -> str:
    """
    Return the column type text used in DDL for ``column``.

    Unknown logical types fall through to the declared type string.
    """
    data_type = column.data_type
    if data_type is DataType.BOOL:
        return "boolean"
    if data_type is DataType.INT or data_type is DataType.UINT:
        return integer_type(_integer_width(column), auto_increment=column.auto_increment)
    if data_type is DataType.FLOAT:
        if column.precision > 0:
            if column.scale > 0:
                return f"numeric({column.precision}, {column.scale})"
            return f"numeric({column.precision})"
        return "decimal"
    if data_type is DataType.STRING:
        if column.size > 0:
            return f"varchar({column.size})"
        return "text"
    if data_type is DataType.TIME:
        if column.precision > 0:
            return f"timestamptz({column.precision})"
        return "timestamptz"
    if data_type is DataType.BYTES:
        return "bytea"
    return _custom_type(column)


def serial_base_type(sql_type: str) -> str | None:
    """
    Integer type backing a serial pseudo-type, as reported by the catalog.
    """
    return _SERIAL_BASE_TYPES.get(sql_type.strip().lower())
