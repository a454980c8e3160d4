"""
Errors raised while analyzing and compiling a schema.

Every error here is fatal: the compilation is aborted and no output
is returned.
"""

from __future__ import annotations


class CodegenError(Exception):
    """Base class for all code generation errors."""

    pass


class ResolutionError(CodegenError):
    """A column references an enum or table that is not in the item list."""

    def __init__(self, kind: str, column_name: str, missing_name: str):
        self.kind = kind
        self.column_name = column_name
        self.missing_name = missing_name
        super().__init__(f'{kind.capitalize()} "{missing_name}" referenced by column "{column_name}" is not available on models')


class ForeignKeyError(CodegenError):
    """A relation's foreign key does not exist on the target table."""

    def __init__(self, table: str, column: str, foreign_table: str, foreign_key: str):
        self.table = table
        self.column = column
        self.foreign_table = foreign_table
        self.foreign_key = foreign_key
        super().__init__(f'Column "{foreign_key}" on foreign table "{foreign_table}" not found on relation "{table}.{column}"')


class CircularReferenceError(CodegenError):
    """A chain of relations loops back onto a column already visited."""

    def __init__(self, chain: list[str]):
        self.chain = chain
        super().__init__(f"Circular relation: {' -> '.join(chain)}")


class UnsupportedTypeError(CodegenError):
    """A column carries a type variant (or common type name) this compiler does not know."""

    def __init__(self, column_name: str, column_type: object):
        self.column_name = column_name
        self.column_type = column_type
        super().__init__(f'Unsupported type {column_type!r} on column "{column_name}"')


class DuplicateItemError(CodegenError):
    """Two items of the same kind share a name."""

    def __init__(self, kind: str, name: str):
        self.kind = kind
        self.name = name
        super().__init__(f'Duplicate {kind} name "{name}"')


class SchemaLoadError(CodegenError):
    """The input document does not describe a valid item list."""

    pass


class PathCollisionError(CodegenError):
    """Two items of different kinds would be written to the same file."""

    def __init__(self, filename: str, first: str, second: str):
        self.filename = filename
        self.first = first
        self.second = second
        super().__init__(f'{first} and {second} would both be written to "{filename}"')
