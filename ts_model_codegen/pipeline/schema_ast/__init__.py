"""
Schema AST module.

Contains the item, column and type nodes of a parsed schema, and the
loader that reads them from a JSON document.
"""

from __future__ import annotations

from .loader import SchemaLoader
from .nodes import (
    CharsType,
    ColumnAttribute,
    ColumnNode,
    ColumnType,
    CommonType,
    DecimalType,
    EnumNode,
    EnumType,
    Item,
    RelationType,
    TableNode,
)

__all__ = [
    "SchemaLoader",
    "CharsType",
    "ColumnAttribute",
    "ColumnNode",
    "ColumnType",
    "CommonType",
    "DecimalType",
    "EnumNode",
    "EnumType",
    "Item",
    "RelationType",
    "TableNode",
]
