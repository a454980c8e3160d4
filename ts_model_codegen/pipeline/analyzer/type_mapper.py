"""
Type mapper from schema column types to IR type references.
"""

from __future__ import annotations

from ..errors import CircularReferenceError, UnsupportedTypeError
from ..schema_ast.nodes import CharsType, ColumnType, CommonType, DecimalType, EnumType, RelationType
from .ir_nodes import TypeKind, TypeRef
from .reference_resolver import ReferenceResolver

STRING = "string"
NUMBER = "number"
BOOLEAN = "boolean"
DATE_TIME = "date-time"

# Scalar category of every common SQL type
COMMON_TYPE_MAP: dict[str, str] = {
    "text": STRING,
    "varchar": STRING,
    "int": NUMBER,
    "float": NUMBER,
    "bigint": NUMBER,
    "tinyint": NUMBER,
    "smallint": NUMBER,
    "real": NUMBER,
    "decimal": NUMBER,
    "boolean": BOOLEAN,
    "timestamp": DATE_TIME,
    "date": DATE_TIME,
}


class TypeMapper:
    """Maps column type variants to scalar or item type references."""

    def __init__(self, resolver: ReferenceResolver):
        self.resolver = resolver

    def map_type(self, column_type: ColumnType, table_name: str = "", column_name: str = "") -> TypeRef:
        """
        Map a column type to the type its field is declared with.

        Relations map onto the foreign column's own type, following
        relation chains until a non-relation column is reached.

        Args:
            column_type: The column's type variant
            table_name: Owning table, used in error messages
            column_name: Owning column, used in error messages

        Returns:
            The resolved TypeRef

        Raises:
            UnsupportedTypeError: On an unknown variant or common type name
            ResolutionError: If a referenced enum or table does not exist
            ForeignKeyError: If a relation's foreign key does not exist
            CircularReferenceError: If a relation chain loops
        """
        return self._map_type(column_type, table_name, column_name, [])

    def _map_type(self, column_type: ColumnType, table_name: str, column_name: str, chain: list[str]) -> TypeRef:
        match column_type:
            case CommonType(type=type_name):
                scalar = COMMON_TYPE_MAP.get(type_name)
                if scalar is None:
                    raise UnsupportedTypeError(column_name, column_type)
                return TypeRef(TypeKind.PRIMITIVE, scalar)
            case DecimalType():
                return TypeRef(TypeKind.PRIMITIVE, NUMBER)
            case CharsType():
                return TypeRef(TypeKind.PRIMITIVE, STRING)
            case EnumType():
                enum_node = self.resolver.resolve_enum(column_type, column_name)
                return TypeRef(TypeKind.ENUM, enum_node.name)
            case RelationType():
                link = f"{table_name}.{column_name}"
                if link in chain:
                    raise CircularReferenceError([*chain, link])
                resolved = self.resolver.resolve_relation(column_type, table_name, column_name)
                return self._map_type(resolved.column.type, resolved.table.name, resolved.column.name, [*chain, link])
            case _:
                raise UnsupportedTypeError(column_name, column_type)
