"""
Pipeline generator: compiles a list of schema items into model files.

Tables and enums are emitted independently, in input order. Every table
sees the full, read-only item list for reference resolution. Any error
aborts the whole compilation.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .analyzer.column_emitter import ColumnEmitter
from .analyzer.ir_nodes import CompileOutput, ItemOutput
from .analyzer.reference_resolver import ReferenceResolver
from .backends import CodeBackend, TypeScriptBackend
from .config import CodeGeneratorConfig
from .errors import DuplicateItemError, PathCollisionError
from .schema_ast.nodes import EnumNode, Item, TableNode

logger = logging.getLogger(__name__)

BACKENDS: dict[str, type[CodeBackend]] = {
    "typescript": TypeScriptBackend,
}


class PipelineGenerator:
    """Compiles schema items into generated source files."""

    def __init__(self, config: CodeGeneratorConfig | None = None, language: str = "typescript"):
        """
        Initialize the generator.

        Args:
            config: Code generation configuration (defaults if None)
            language: Target language, a key of BACKENDS
        """
        self.config = config or CodeGeneratorConfig()
        if language not in BACKENDS:
            raise ValueError(f"Unsupported language: {language}")
        self.language = language
        self.backend = BACKENDS[language](self.config)

    def compile(self, items: Sequence[Item]) -> CompileOutput:
        """
        Compile items into files.

        Args:
            items: The full item list (tables and enums)

        Returns:
            CompileOutput with a table bucket and an enum bucket

        Raises:
            CodegenError: On the first unresolved reference, unsupported type
                duplicate name or output path collision; nothing is returned
                in that case
        """
        column_emitter = ColumnEmitter(ReferenceResolver(items), self.config)
        output = CompileOutput()
        # filename -> first item written there, across both kinds
        owners: dict[str, Item] = {}

        for item in items:
            match item:
                case TableNode():
                    bucket = output.table
                    item_output = self.backend.build_table(item, column_emitter)
                case EnumNode():
                    bucket = output.enum
                    item_output = self.backend.build_enum(item)
                case _:
                    raise TypeError(f"Unsupported schema item: {item!r}")
            self._check_paths(owners, item, item_output)
            self._merge(bucket, item, item_output)

        logger.info(f"Compiled {len(output.table.files)} tables and {len(output.enum.files)} enums")
        return output

    def _merge(self, bucket: ItemOutput, item: Item, item_output: ItemOutput) -> None:
        if item.name in bucket.name_to_path:
            if not self.config.allow_duplicate_names:
                raise DuplicateItemError(item.kind, item.name)
            logger.warning(f"Duplicate {item.kind} name '{item.name}': the last definition overwrites {bucket.name_to_path[item.name]}")
            # Same name means same path: drop the earlier file
            bucket.files = [f for f in bucket.files if f.filename != bucket.name_to_path[item.name]]
        bucket.extend(item_output)

    @staticmethod
    def _check_paths(owners: dict[str, Item], item: Item, item_output: ItemOutput) -> None:
        """Reject an item whose file would replace the file of an item of another kind."""
        for generated in item_output.files:
            owner = owners.setdefault(generated.filename, item)
            if owner.kind != item.kind:
                raise PathCollisionError(generated.filename, f'{owner.kind} "{owner.name}"', f'{item.kind} "{item.name}"')
