"""
IR (Intermediate Representation) node definitions.

These nodes represent the analyzed schema, ready for code generation.
All references are resolved and field types are determined.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ...validation_rules import ValidationRule


class TypeKind(Enum):
    """Kind of type in the IR."""

    PRIMITIVE = "primitive"  # string, number, boolean, date-time
    ENUM = "enum"  # A generated enum
    CLASS = "class"  # A generated table model


@dataclass(frozen=True)
class TypeRef:
    """A resolved type reference."""

    kind: TypeKind = TypeKind.PRIMITIVE
    name: str = ""  # Scalar category or referenced item name


@dataclass
class FieldDef:
    """A field of a generated table model."""

    name: str = ""
    type_ref: TypeRef | None = None
    is_required: bool = False

    # Decorators to render above the field in annotation mode
    validation_rules: list[ValidationRule] = field(default_factory=list)


@dataclass
class GeneratedFile:
    """One output file: a relative POSIX path and its content."""

    filename: str = ""
    content: str = ""


@dataclass
class ItemOutput:
    """Files and name -> path index for one item kind."""

    files: list[GeneratedFile] = field(default_factory=list)
    name_to_path: dict[str, str] = field(default_factory=dict)

    def extend(self, other: ItemOutput) -> None:
        self.files.extend(other.files)
        self.name_to_path.update(other.name_to_path)


@dataclass
class CompileOutput:
    """The complete result of a compilation run."""

    table: ItemOutput = field(default_factory=ItemOutput)
    enum: ItemOutput = field(default_factory=ItemOutput)

    def all_files(self) -> list[GeneratedFile]:
        """Enum files first, then table files."""
        return [*self.enum.files, *self.table.files]
