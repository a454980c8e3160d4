"""
Shared fixtures: small schemas built from AST nodes.
"""

from __future__ import annotations

import pytest

from ts_model_codegen.pipeline.schema_ast.nodes import (
    ColumnAttribute,
    ColumnNode,
    CommonType,
    EnumNode,
    EnumType,
    RelationType,
    TableNode,
)


def make_column(name, column_type, null=None):
    """Build a column; null=None leaves the null attribute out."""
    attributes = [] if null is None else [ColumnAttribute(type="null", value=null)]
    return ColumnNode(name=name, type=column_type, attributes=attributes)


@pytest.fixture
def status_enum():
    return EnumNode(name="Status", items=["ACTIVE", "INACTIVE"])


@pytest.fixture
def user_table():
    return TableNode(
        name="User",
        columns=[
            make_column("id", CommonType("int"), null=False),
            make_column("status", EnumType(enum_name="Status"), null=True),
        ],
    )


@pytest.fixture
def role_table():
    return TableNode(
        name="Role",
        columns=[
            make_column("id", CommonType("int"), null=False),
            make_column("label", CommonType("varchar")),
        ],
    )


@pytest.fixture
def member_table():
    return TableNode(
        name="Member",
        columns=[
            make_column("id", CommonType("int"), null=False),
            make_column("role", RelationType(table_name="Role", foreign_key="id"), null=False),
        ],
    )


@pytest.fixture
def items(status_enum, user_table, role_table, member_table):
    return [status_enum, user_table, role_table, member_table]
