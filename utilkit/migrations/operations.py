"""Built-in schema operations for utilkit."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Tuple

from utilkit.migrations.base import (
    FieldDefinition,
    SchemaOperation,
    TableState,
    normalize_type_parts,
)

# Joins column and constraint clauses inside CREATE TABLE.
CLAUSE_SEPARATOR = ",\n  "


@dataclass
class CreateTable(SchemaOperation):
    """Create the table from its fields and constraints.

    Example:
        CREATE TABLE accounts (
          id SERIAL PRIMARY KEY,
          FOREIGN KEY (user_id) REFERENCES users(id)
        );
    """

    @property
    def action(self) -> str:
        return "create table"

    def to_sql(self, state: TableState) -> str:
        clauses = [f.render() for f in state.fields]
        clauses.extend(state.constraints)
        return f"CREATE TABLE {state.table} (\n  {CLAUSE_SEPARATOR.join(clauses)}\n);"

    def success_message(self, state: TableState) -> str:
        return f"Successfully created table {state.table}"

    def failure_message(self, state: TableState) -> str:
        return f"Failed to create table {state.table}"


@dataclass
class DropTable(SchemaOperation):
    """Drop the table if it exists."""

    @property
    def action(self) -> str:
        return "drop table"

    def to_sql(self, state: TableState) -> str:
        return f"DROP TABLE IF EXISTS {state.table}"

    def success_message(self, state: TableState) -> str:
        return f"Successfully dropped table {state.table}"

    def failure_message(self, state: TableState) -> str:
        return f"Failed to drop table {state.table}"


@dataclass
class TruncateTable(SchemaOperation):
    """Remove every row, keeping the table."""

    @property
    def action(self) -> str:
        return "truncate table"

    def to_sql(self, state: TableState) -> str:
        return f"TRUNCATE TABLE {state.table}"

    def success_message(self, state: TableState) -> str:
        return f"Successfully truncated table {state.table}"

    def failure_message(self, state: TableState) -> str:
        return f"Failed to truncate table {state.table}"


@dataclass
class AddColumn(SchemaOperation):
    """Add a column.

    Re-adding a tracked column replaces its type parts in place, so
    column names stay unique.

    Example:
        AddColumn("last_login", ["TIMESTAMP", "NULL"])
    """

    field_name: str
    type_parts: Tuple[str, ...] = field(default=())

    def __post_init__(self):
        self.type_parts = normalize_type_parts(self.field_name, self.type_parts)

    @property
    def action(self) -> str:
        return f"add column {self.field_name}"

    def to_sql(self, state: TableState) -> str:
        return (
            f"ALTER TABLE {state.table} ADD COLUMN "
            f"{self.field_name} {' '.join(self.type_parts)}"
        )

    def apply(self, state: TableState) -> TableState:
        new_field = FieldDefinition(self.field_name, self.type_parts)
        fields = list(state.fields)
        for i, existing in enumerate(fields):
            if existing.name == self.field_name:
                fields[i] = new_field
                break
        else:
            fields.append(new_field)
        return state.copy(fields=fields)

    def success_message(self, state: TableState) -> str:
        return f"Successfully added column {self.field_name} to table {state.table}"

    def failure_message(self, state: TableState) -> str:
        return f"Failed to add column {self.field_name}"


@dataclass
class DropColumn(SchemaOperation):
    """Drop a column. Untracked names leave the local state unchanged.

    Example:
        DropColumn("deprecated_flag")
    """

    field_name: str

    @property
    def action(self) -> str:
        return f"drop column {self.field_name}"

    def to_sql(self, state: TableState) -> str:
        return f"ALTER TABLE {state.table} DROP COLUMN {self.field_name}"

    def apply(self, state: TableState) -> TableState:
        return state.copy(
            fields=[f for f in state.fields if f.name != self.field_name]
        )

    def success_message(self, state: TableState) -> str:
        return f"Successfully dropped column {self.field_name} from table {state.table}"

    def failure_message(self, state: TableState) -> str:
        return f"Failed to drop column {self.field_name}"


@dataclass
class RenameTable(SchemaOperation):
    """Rename the table.

    Example:
        RenameTable("user_accounts")
    """

    new_name: str

    @property
    def action(self) -> str:
        return f"rename table to {self.new_name}"

    def to_sql(self, state: TableState) -> str:
        return f"ALTER TABLE {state.table} RENAME TO {self.new_name}"

    def apply(self, state: TableState) -> TableState:
        return state.copy(table=self.new_name)

    def success_message(self, state: TableState) -> str:
        return f"Successfully renamed table {state.table} to {self.new_name}"

    def failure_message(self, state: TableState) -> str:
        return f"Failed to rename table {state.table}"


@dataclass
class TableExists(SchemaOperation):
    """Ask the catalog whether the table exists.

    The table name is interpolated into the query text rather than bound
    as a parameter; table names come from migration code, not user input.
    """

    catalog_table: str = "information_schema.tables"

    @property
    def action(self) -> str:
        return "check table exists"

    def to_sql(self, state: TableState) -> str:
        return (
            f"SELECT EXISTS (SELECT 1 FROM {self.catalog_table} "
            f"WHERE table_name = '{state.table}')"
        )

    def success_message(self, state: TableState) -> str:
        return f"Checked whether table {state.table} exists"

    def failure_message(self, state: TableState) -> str:
        return f"Failed to check if table {state.table} exists"


def preview(state: TableState, operations: Sequence[SchemaOperation]) -> list[str]:
    """Render the statements a sequence of operations would run.

    State changes are applied between operations as if every statement
    succeeded, so a rename affects the statements after it.
    """
    statements = []
    for op in operations:
        statements.append(op.to_sql(state))
        state = op.apply(state)
    return statements
