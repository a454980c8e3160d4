"""
Column emitter: turns schema columns into IR field definitions.

Common, decimal, chars and enum columns produce one field. Relation
columns produce two: an eager reference to the target table model and
the foreign key value itself.
"""

from __future__ import annotations

from ...validation_rules import COMMON_TYPE_RULES, DecimalRule, EnumRule, StringRule, ValidationRule
from ..config import CodeGeneratorConfig
from ..errors import UnsupportedTypeError
from ..schema_ast.nodes import CharsType, ColumnNode, CommonType, DecimalType, EnumType, RelationType, TableNode
from .ir_nodes import FieldDef, TypeKind, TypeRef
from .reference_resolver import ReferenceResolver
from .type_mapper import TypeMapper


class ColumnEmitter:
    """Builds the fields of a table model, one column at a time."""

    def __init__(self, resolver: ReferenceResolver, config: CodeGeneratorConfig):
        self.resolver = resolver
        self.config = config
        self.type_mapper = TypeMapper(resolver)

    def emit(self, table: TableNode, column: ColumnNode) -> list[FieldDef]:
        """
        Build the fields generated for a column.

        Args:
            table: The table owning the column
            column: The column to emit

        Returns:
            Ordered list of fields
        """
        column_type = column.type
        is_required = column.is_required

        match column_type:
            case CommonType() | DecimalType() | CharsType() | EnumType():
                type_ref = self.type_mapper.map_type(column_type, table.name, column.name)
                return [
                    FieldDef(
                        name=column.name,
                        type_ref=type_ref,
                        is_required=is_required,
                        validation_rules=self._validation_rules(column),
                    )
                ]
            case RelationType():
                return self._emit_relation(table, column, column_type)
            case _:
                raise UnsupportedTypeError(column.name, column_type)

    def _emit_relation(self, table: TableNode, column: ColumnNode, relation: RelationType) -> list[FieldDef]:
        resolved = self.resolver.resolve_relation(relation, table.name, column.name)
        foreign_type = self.type_mapper.map_type(relation, table.name, column.name)
        return [
            FieldDef(
                name=f"{self.config.relation_field_prefix}{column.name}",
                type_ref=TypeRef(TypeKind.CLASS, resolved.table.name),
                is_required=column.is_required,
            ),
            FieldDef(
                name=column.name,
                type_ref=foreign_type,
                is_required=column.is_required,
            ),
        ]

    def _validation_rules(self, column: ColumnNode) -> list[ValidationRule]:
        """Validation rules of a non-relation column (annotation mode only)."""
        if not self.config.use_annotations:
            return []

        match column.type:
            case CommonType(type=type_name):
                return [COMMON_TYPE_RULES[type_name](column.name)]
            case DecimalType():
                return [DecimalRule(column.name)]
            case CharsType():
                return [StringRule(column.name)]
            case EnumType(enum_name=enum_name):
                return [EnumRule(column.name, enum_name)]
        return []
