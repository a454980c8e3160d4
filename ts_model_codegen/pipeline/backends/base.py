"""
Base class for code generation backends.

Defines the interface that all language-specific backends must implement,
and the output layout shared by them.
"""

from __future__ import annotations

import posixpath
from abc import ABC, abstractmethod
from pathlib import Path

import jinja2

from ..analyzer.column_emitter import ColumnEmitter
from ..analyzer.ir_nodes import ItemOutput, TypeRef
from ..config import CodeGeneratorConfig
from ..schema_ast.nodes import EnumNode, TableNode


class CodeBackend(ABC):
    """Abstract base class for code generation backends."""

    # Type mapping from scalar categories to language types
    TYPE_MAP: dict[str, str] = {}

    # Template directory name
    TEMPLATE_LANG: str = ""

    # Template file extension
    FILE_EXTENSION: str = ""

    def __init__(self, config: CodeGeneratorConfig):
        """
        Initialize the backend.

        Args:
            config: Code generation configuration
        """
        self.config = config
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        template_dir = Path(__file__).parent.parent.parent / "templates" / self.TEMPLATE_LANG
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            lstrip_blocks=True,
            trim_blocks=True,
        )

        self.table_template = self.jinja_env.get_template(f"table.{self.FILE_EXTENSION}.jinja2")
        self.enum_template = self.jinja_env.get_template(f"enum.{self.FILE_EXTENSION}.jinja2")

    @abstractmethod
    def build_table(self, table: TableNode, column_emitter: ColumnEmitter) -> ItemOutput:
        """
        Generate the model file of a table.

        Args:
            table: The table to generate
            column_emitter: Emitter bound to the full item list

        Returns:
            One file and its name -> path entry
        """

    @abstractmethod
    def build_enum(self, enum_node: EnumNode) -> ItemOutput:
        """
        Generate the file of an enum.

        Args:
            enum_node: The enum to generate

        Returns:
            One file and its name -> path entry
        """

    @abstractmethod
    def translate_type(self, type_ref: TypeRef) -> str:
        """
        Translate an IR type to a language-specific type string.

        Args:
            type_ref: The type reference

        Returns:
            Language-specific type string
        """

    def _kind_folder(self, kind: str) -> str:
        return self.config.table_folder if kind == "table" else self.config.enum_folder

    def get_module_path(self, kind: str, name: str) -> str:
        """Output path of an item without extension, e.g. ``ts-model/table/User``."""
        parts = [self.config.output_root, self._kind_folder(kind), name]
        return posixpath.join(*[p for p in parts if p])

    def get_file_name(self, kind: str, name: str) -> str:
        """Output path of an item, e.g. ``ts-model/table/User.ts``."""
        return self.get_module_path(kind, name) + self.config.file_extension

    def get_import_path(self, from_kind: str, from_name: str, kind: str, name: str) -> str:
        """Module specifier of an item, relative to another item's file."""
        start = posixpath.dirname(self.get_module_path(from_kind, from_name)) or "."
        relative = posixpath.relpath(self.get_module_path(kind, name), start)
        return relative if relative.startswith(".") else f"./{relative}"
