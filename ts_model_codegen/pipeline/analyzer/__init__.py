"""
Analyzer module.

Contains reference resolution, type mapping and column emission.
"""

from __future__ import annotations

from .column_emitter import ColumnEmitter
from .ir_nodes import CompileOutput, FieldDef, GeneratedFile, ItemOutput, TypeKind, TypeRef
from .reference_resolver import ReferenceResolver, ResolvedRelation
from .type_mapper import TypeMapper

__all__ = [
    "ColumnEmitter",
    "CompileOutput",
    "FieldDef",
    "GeneratedFile",
    "ItemOutput",
    "TypeKind",
    "TypeRef",
    "ReferenceResolver",
    "ResolvedRelation",
    "TypeMapper",
]
