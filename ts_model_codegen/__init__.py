"""Relational schema to TypeScript model generator

A Python package for generating TypeScript model classes and interfaces
from a parsed relational schema (tables, enums, columns, relations), with
optional class-validator / class-transformer decorators.
"""

__version__ = "1.0.0"

from .pipeline import (
    AnnotationMode,
    AtomicWriter,
    CodegenError,
    CodeGeneratorConfig,
    OutputConfig,
    OutputMode,
    PipelineGenerator,
)
from .pipeline.schema_ast import SchemaLoader

__all__ = [
    "PipelineGenerator",
    "CodeGeneratorConfig",
    "AnnotationMode",
    "OutputConfig",
    "OutputMode",
    "CodegenError",
    "AtomicWriter",
    "SchemaLoader",
]
