"""
Configuration for the code generator pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum


class AnnotationMode(str, Enum):
    """Shape of the generated table models."""

    ON = "on"  # Decorated classes with validation / transform metadata
    OFF = "off"  # Plain structural interfaces


class OutputMode(str, Enum):
    """Output mode for file generation.

    Controls behavior when an output file already exists.
    """

    FORCE = "force"  # Default: overwrite existing files
    ERROR_IF_EXISTS = "error"  # Raise error if a file exists


@dataclass
class OutputConfig:
    """Configuration for output file handling.

    Attributes:
        mode: How to handle existing output files
        atomic_write: Whether to use atomic file writes
    """

    mode: OutputMode = OutputMode.FORCE
    atomic_write: bool = True


@dataclass
class CodeGeneratorConfig:
    """Configuration options for code generation."""

    # Decorated classes (on) or plain interfaces (off)
    annotation_mode: AnnotationMode = AnnotationMode.ON

    # Leading path segment of every generated file
    output_root: str = "ts-model"

    # Folder (under output_root) per item kind
    table_folder: str = "table"
    enum_folder: str = "enum"

    # Extension of generated files
    file_extension: str = ".ts"

    # Prefix of the eager-reference field generated for relations
    relation_field_prefix: str = "otm_"

    # Indentation of declaration bodies
    indent: str = "  "

    # Let the last item win when two items of a kind share a name
    allow_duplicate_names: bool = False

    output: OutputConfig = field(default_factory=OutputConfig)

    @property
    def use_annotations(self) -> bool:
        return self.annotation_mode == AnnotationMode.ON

    @staticmethod
    def from_dict(d: dict) -> CodeGeneratorConfig:
        """Create a config from a dictionary."""
        config = CodeGeneratorConfig()
        known = {f.name for f in fields(CodeGeneratorConfig)}
        for k, v in d.items():
            if k == "annotation_mode":
                if isinstance(v, bool):
                    v = AnnotationMode.ON if v else AnnotationMode.OFF
                config.annotation_mode = AnnotationMode(v)
            elif k == "output":
                if not isinstance(v, dict):
                    raise ValueError(f"output must be an object, got {v!r}")
                config.output = OutputConfig(
                    mode=OutputMode(v.get("mode", OutputMode.FORCE)),
                    atomic_write=v.get("atomic_write", True),
                )
            elif k in known:
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "annotation_mode": self.annotation_mode.value,
            "output_root": self.output_root,
            "table_folder": self.table_folder,
            "enum_folder": self.enum_folder,
            "file_extension": self.file_extension,
            "relation_field_prefix": self.relation_field_prefix,
            "indent": self.indent,
            "allow_duplicate_names": self.allow_duplicate_names,
            "output": {
                "mode": self.output.mode.value,
                "atomic_write": self.output.atomic_write,
            },
        }
