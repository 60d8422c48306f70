import pytest

from gaussorm.core import ColumnDescriptor, DataType
from gaussorm.dialects import OpenGaussDialect, data_type_of, serial_base_type


def column(data_type, **kwargs):
    return ColumnDescriptor(name="col", data_type=data_type, **kwargs)


def test_boolean_and_binary():
    assert data_type_of(column(DataType.BOOL)) == "boolean"
    assert data_type_of(column(DataType.BYTES)) == "bytea"


@pytest.mark.parametrize(
    "size, expected, expected_serial",
    [
        (8, "smallint", "smallserial"),
        (16, "smallint", "smallserial"),
        (17, "integer", "serial"),
        (32, "integer", "serial"),
        (33, "bigint", "bigserial"),
        (64, "bigint", "bigserial"),
    ],
)
def test_signed_integer_buckets(size, expected, expected_serial):
    assert data_type_of(column(DataType.INT, size=size)) == expected
    assert data_type_of(column(DataType.INT, size=size, auto_increment=True)) == expected_serial


@pytest.mark.parametrize(
    "size, expected",
    [
        (15, "smallserial"),
        (16, "serial"),
        (31, "serial"),
        (32, "bigserial"),
    ],
)
def test_unsigned_integers_take_one_extra_bit(size, expected):
    assert data_type_of(column(DataType.UINT, size=size, auto_increment=True)) == expected


def test_unsized_integer_is_bigint():
    assert data_type_of(column(DataType.INT)) == "bigint"


def test_float_precision_and_scale():
    assert data_type_of(column(DataType.FLOAT, precision=10, scale=2)) == "numeric(10, 2)"
    assert data_type_of(column(DataType.FLOAT, precision=10, scale=0)) == "numeric(10)"
    assert data_type_of(column(DataType.FLOAT)) == "decimal"


def test_string_and_time():
    assert data_type_of(column(DataType.STRING, size=120)) == "varchar(120)"
    assert data_type_of(column(DataType.STRING)) == "text"
    assert data_type_of(column(DataType.TIME, precision=3)) == "timestamptz(3)"
    assert data_type_of(column(DataType.TIME)) == "timestamptz"


def test_custom_type_passes_through():
    assert data_type_of(column("jsonb")) == "jsonb"
    assert data_type_of(column("int4")) == "int4"


@pytest.mark.parametrize(
    "declared, kwargs, expected",
    [
        ("string", {"size": 32}, "varchar(32)"),
        ("bytes", {}, "bytea"),
        ("time", {"precision": 6}, "timestamptz(6)"),
        ("uint", {"size": 16}, "integer"),
        ("int", {"size": 32}, "integer"),
        ("BOOL", {}, "boolean"),
    ],
)
def test_declared_logical_type_names_map_like_logical_types(declared, kwargs, expected):
    assert data_type_of(column(declared, **kwargs)) == expected


def test_custom_type_with_auto_increment_becomes_serial():
    assert data_type_of(column("int4", size=32, auto_increment=True)) == "serial"
    assert data_type_of(column("numeric", size=16, auto_increment=True)) == "smallserial"
    assert (
        data_type_of(column("int2", size=16, base_type=DataType.UINT, auto_increment=True))
        == "serial"
    )


def test_custom_serial_type_is_kept():
    assert data_type_of(column("BIGSERIAL", size=16, auto_increment=True)) == "BIGSERIAL"


def test_serial_base_type():
    assert serial_base_type("smallserial") == "smallint"
    assert serial_base_type("SERIAL") == "integer"
    assert serial_base_type("bigserial") == "bigint"
    assert serial_base_type("integer") is None


def test_dialect_delegates_type_mapping():
    dialect = OpenGaussDialect()
    assert dialect.data_type_of(column(DataType.INT, size=32)) == "integer"
