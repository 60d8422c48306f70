"""
Column metadata consumed by dialect rendering.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

UNIQUE_INDEX_TAG = "UNIQUEINDEX"


class DataType(str, Enum):
    """
    Logical column kinds understood by the type mapper.
    """

    BOOL = "bool"
    INT = "int"
    UINT = "uint"
    FLOAT = "float"
    STRING = "string"
    TIME = "time"
    BYTES = "bytes"


_LOGICAL_TYPES = {member.value: member for member in DataType}


@dataclass(frozen=True)
class ColumnDescriptor:
    """
    Immutable description of one column as declared by the host schema.

    ``data_type`` is either a :class:`DataType` or the raw type string the user
    declared; a raw string naming a logical kind (``"int"``, ``"string"``...) is
    normalised to that member. For raw types ``base_type`` records the logical kind behind it so
    the unsigned rule can still apply when an auto-increment override kicks in.
    """

    name: str
    data_type: DataType | str
    base_type: Optional[DataType] = None
    size: int = 0
    precision: int = 0
    scale: int = 0
    auto_increment: bool = False
    primary_key: bool = False
    unique: bool = False
    tag_settings: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "tag_settings", MappingProxyType(dict(self.tag_settings)))
        if not isinstance(self.data_type, DataType):
            logical = _LOGICAL_TYPES.get(self.data_type.lower())
            if logical is not None:
                object.__setattr__(self, "data_type", logical)

    @property
    def has_unique_index(self) -> bool:
        return UNIQUE_INDEX_TAG in self.tag_settings

    @property
    def is_unsigned(self) -> bool:
        return self.data_type is DataType.UINT or self.base_type is DataType.UINT


class Schema:
    """
    Lookup table of column descriptors for one table.
    """

    def __init__(self, table: str, columns: Iterable[ColumnDescriptor] = ()) -> None:
        self.table = table
        self._columns: dict[str, ColumnDescriptor] = {}
        for column in columns:
            self.add(column)

    def add(self, column: ColumnDescriptor) -> None:
        if column.name in self._columns:
            raise ValueError(f"Duplicate column '{column.name}' on table '{self.table}'")
        self._columns[column.name] = column

    def look_up_field(self, name: str) -> ColumnDescriptor | None:
        return self._columns.get(name)

    @property
    def primary_keys(self) -> list[ColumnDescriptor]:
        return [column for column in self._columns.values() if column.primary_key]
