"""
AST node definitions for a parsed relational schema.

These nodes represent the item list handed over by the schema parser:
tables and enums, with columns carrying a tagged type variant. Nothing
here is resolved yet; enum and relation types only hold names.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar

# Type names accepted by the "common" variant
COMMON_TYPE_NAMES = (
    "text",
    "varchar",
    "int",
    "float",
    "bigint",
    "tinyint",
    "smallint",
    "real",
    "boolean",
    "timestamp",
    "date",
    "decimal",
)


@dataclass(frozen=True)
class CommonType:
    """A plain SQL type such as int, text or timestamp."""

    kind: ClassVar[str] = "common"

    type: str = ""


@dataclass(frozen=True)
class DecimalType:
    """decimal(precision, scale)."""

    kind: ClassVar[str] = "decimal"

    type: str = "decimal"
    precision: int | None = None
    scale: int | None = None


@dataclass(frozen=True)
class CharsType:
    """varchar(length)."""

    kind: ClassVar[str] = "chars"

    type: str = "varchar"
    length: int | None = None


@dataclass(frozen=True)
class EnumType:
    """A column typed by an enum declared elsewhere in the schema."""

    kind: ClassVar[str] = "enum"

    type: str = "enum"
    enum_name: str = ""


@dataclass(frozen=True)
class RelationType:
    """A foreign key onto `table_name.foreign_key`."""

    kind: ClassVar[str] = "relation"

    type: str = "relation"
    table_name: str = ""
    foreign_key: str = ""


ColumnType = CommonType | DecimalType | CharsType | EnumType | RelationType


@dataclass(frozen=True)
class ColumnAttribute:
    """A typed column flag, e.g. ``null: false`` or ``unique: true``."""

    type: str = ""
    value: Any = None


@dataclass
class ColumnNode:
    """A table column."""

    name: str = ""
    type: ColumnType | None = None
    attributes: list[ColumnAttribute] = field(default_factory=list)

    def get_attribute(self, attr_type: str) -> ColumnAttribute | None:
        """Return the first attribute of the given type, if any."""
        for attr in self.attributes:
            if attr.type == attr_type:
                return attr
        return None

    @property
    def is_required(self) -> bool:
        # Only an explicit null=false makes a column required
        null_attr = self.get_attribute("null")
        return null_attr is not None and not null_attr.value


@dataclass
class TableNode:
    """A table: an ordered list of columns."""

    kind: ClassVar[str] = "table"

    name: str = ""
    columns: list[ColumnNode] = field(default_factory=list)

    def get_column(self, name: str) -> ColumnNode | None:
        for column in self.columns:
            if column.name == name:
                return column
        return None


@dataclass
class EnumNode:
    """An enum: an ordered list of member strings."""

    kind: ClassVar[str] = "enum"

    name: str = ""
    items: list[str] = field(default_factory=list)


Item = TableNode | EnumNode
