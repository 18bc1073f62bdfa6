"""Schema migration helpers for utilkit.

This module builds DDL statements for a single table and hands them to a
caller-supplied query executor. It never opens database connections
itself.
"""

from utilkit.migrations.base import (
    FieldDefinition,
    QueryExecutor,
    SchemaOperation,
    TableState,
)
from utilkit.migrations.runner import MigrationRunner
from utilkit.migrations.operations import (
    AddColumn,
    CreateTable,
    DropColumn,
    DropTable,
    RenameTable,
    TableExists,
    TruncateTable,
    preview,
)
from utilkit.migrations.schema import Migration, SchemaMutator

__all__ = [
    "FieldDefinition",
    "QueryExecutor",
    "SchemaOperation",
    "TableState",
    "MigrationRunner",
    "SchemaMutator",
    "Migration",
    "AddColumn",
    "CreateTable",
    "DropColumn",
    "DropTable",
    "RenameTable",
    "TableExists",
    "TruncateTable",
    "preview",
]
