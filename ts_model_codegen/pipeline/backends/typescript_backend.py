"""
TypeScript code generation backend.

Generates one file per table (a class-validator decorated class, or a plain
interface) and one file per enum.
"""

from __future__ import annotations

import logging

from ..analyzer.column_emitter import ColumnEmitter
from ..analyzer.ir_nodes import FieldDef, GeneratedFile, ItemOutput, TypeKind, TypeRef
from ..schema_ast.nodes import EnumNode, TableNode
from .base import CodeBackend

logger = logging.getLogger(__name__)

# Library surface imported by every decorated class
HEADER_IMPORTS = [
    'import { ClassConstructor, Transform, Type, plainToInstance } from "class-transformer";',
    'import { IsNotEmpty, IsNumber, IsObject, IsBoolean, IsOptional, IsISO8601, IsString, IsEnum, ValidateNested, IsArray, ValidationError, validateOrReject } from "class-validator";',
]


class TypeScriptBackend(CodeBackend):
    """TypeScript code generation backend."""

    TEMPLATE_LANG = "typescript"
    FILE_EXTENSION = "ts"

    TYPE_MAP = {
        "string": "string",
        "number": "number",
        "boolean": "boolean",
        "date-time": "Date",
    }

    def build_table(self, table: TableNode, column_emitter: ColumnEmitter) -> ItemOutput:
        """Generate the model file of a table."""
        fields: list[FieldDef] = []
        for column in table.columns:
            fields.extend(column_emitter.emit(table, column))

        body: list[str] = []
        for field in fields:
            body.extend(self.render_field(field))

        content = self.table_template.render(
            imports=self._build_imports(table, fields),
            decorated=self.config.use_annotations,
            header_imports=HEADER_IMPORTS,
            name=table.name,
            body=body,
            indent=self.config.indent,
        )
        return self._item_output(table.kind, table.name, content)

    def build_enum(self, enum_node: EnumNode) -> ItemOutput:
        """Generate the file of an enum."""
        content = self.enum_template.render(
            name=enum_node.name,
            members=enum_node.items,
            indent=self.config.indent,
        )
        return self._item_output(enum_node.kind, enum_node.name, content)

    def translate_type(self, type_ref: TypeRef) -> str:
        """Translate IR type to TypeScript type string."""
        if type_ref.kind == TypeKind.PRIMITIVE:
            return self.TYPE_MAP[type_ref.name]
        # Enums and table models are referenced by name
        return type_ref.name

    def render_field(self, field: FieldDef) -> list[str]:
        """
        Render a field: its decorators (annotation mode) then its declaration.

        Required fields get the definite assignment marker ``!`` in classes
        and no marker in interfaces; optional fields get ``?``.
        """
        lines: list[str] = []
        if self.config.use_annotations:
            for rule in field.validation_rules:
                lines.extend(rule.generate_code())
            marker = "!" if field.is_required else "?"
        else:
            marker = "" if field.is_required else "?"

        lines.append(f"{field.name}{marker}: {self.translate_type(field.type_ref)}")
        return lines

    def _build_imports(self, table: TableNode, fields: list[FieldDef]) -> list[str]:
        """One import per distinct enum / table referenced by the fields, in first-occurrence order."""
        imports: list[str] = []
        seen: set[tuple[str, str]] = {(table.kind, table.name)}
        for field in fields:
            type_ref = field.type_ref
            if type_ref.kind == TypeKind.PRIMITIVE:
                continue
            kind = "table" if type_ref.kind == TypeKind.CLASS else "enum"
            if (kind, type_ref.name) in seen:
                continue
            seen.add((kind, type_ref.name))
            import_path = self.get_import_path(table.kind, table.name, kind, type_ref.name)
            imports.append(f"import {{ {type_ref.name} }} from '{import_path}'")
        return imports

    def _item_output(self, kind: str, name: str, content: str) -> ItemOutput:
        filename = self.get_file_name(kind, name)
        logger.debug(f"Generated {kind} {name}: {filename}")
        return ItemOutput(
            files=[GeneratedFile(filename=filename, content=content)],
            name_to_path={name: filename},
        )
