"""
Reference resolver for enum and relation columns.

Resolves enum names, table names and foreign keys against the full
item list of a compilation run.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from ..errors import ForeignKeyError, ResolutionError
from ..schema_ast.nodes import ColumnNode, EnumNode, EnumType, Item, RelationType, TableNode


@dataclass(frozen=True)
class ResolvedRelation:
    """A resolved relation: the target table and its foreign column."""

    table: TableNode
    column: ColumnNode


class ReferenceResolver:
    """Resolves column references to the items they point at."""

    def __init__(self, items: Sequence[Item]):
        """
        Initialize the resolver.

        Args:
            items: The full, read-only item list of the compilation run
        """
        self.items = items
        self._tables: dict[str, TableNode] = {}
        self._enums: dict[str, EnumNode] = {}
        self._build_cache()

    def _build_cache(self) -> None:
        """Index items by name; the first item of a given name wins."""
        for item in self.items:
            if isinstance(item, TableNode):
                self._tables.setdefault(item.name, item)
            elif isinstance(item, EnumNode):
                self._enums.setdefault(item.name, item)

    def resolve_enum(self, enum_type: EnumType, column_name: str) -> EnumNode:
        """
        Resolve the enum an enum column is typed with.

        Raises:
            ResolutionError: If no enum has that name
        """
        enum_node = self._enums.get(enum_type.enum_name)
        if enum_node is None:
            raise ResolutionError("enum", column_name, enum_type.enum_name)
        return enum_node

    def resolve_table(self, relation: RelationType, column_name: str) -> TableNode:
        """
        Resolve the target table of a relation column.

        Raises:
            ResolutionError: If no table has that name
        """
        table = self._tables.get(relation.table_name)
        if table is None:
            raise ResolutionError("table", column_name, relation.table_name)
        return table

    def resolve_relation(self, relation: RelationType, table_name: str, column_name: str) -> ResolvedRelation:
        """
        Resolve a relation column to its target table and foreign column.

        Args:
            relation: The relation type of the column
            table_name: Name of the table owning the column (for errors)
            column_name: Name of the relation column (for errors)

        Raises:
            ResolutionError: If the target table does not exist
            ForeignKeyError: If the foreign key is not a column of the target table
        """
        foreign_table = self.resolve_table(relation, column_name)
        foreign_column = foreign_table.get_column(relation.foreign_key)
        if foreign_column is None:
            raise ForeignKeyError(table_name, column_name, relation.table_name, relation.foreign_key)
        return ResolvedRelation(table=foreign_table, column=foreign_column)
