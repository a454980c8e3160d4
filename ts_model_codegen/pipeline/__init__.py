"""
Pipeline - relational schema to TypeScript model generator.

This module provides a multi-phase architecture for generating model
files from an already-parsed schema item list:

1. Phase 1 (Loader): Read the item list into schema AST nodes
2. Phase 2 (Analyzer): Resolve references, map types, build field IR
3. Phase 3 (Backend): Render tables and enums through Jinja2 templates
4. Phase 4 (Writer): Atomically write the files of a successful run
"""

from __future__ import annotations

from .config import AnnotationMode, CodeGeneratorConfig, OutputConfig, OutputMode
from .errors import (
    CircularReferenceError,
    CodegenError,
    DuplicateItemError,
    ForeignKeyError,
    PathCollisionError,
    ResolutionError,
    SchemaLoadError,
    UnsupportedTypeError,
)
from .generator import PipelineGenerator
from .writer import AtomicWriter

__all__ = [
    "PipelineGenerator",
    "CodeGeneratorConfig",
    "AnnotationMode",
    "OutputConfig",
    "OutputMode",
    "AtomicWriter",
    "CodegenError",
    "ResolutionError",
    "ForeignKeyError",
    "CircularReferenceError",
    "UnsupportedTypeError",
    "DuplicateItemError",
    "PathCollisionError",
    "SchemaLoadError",
]
