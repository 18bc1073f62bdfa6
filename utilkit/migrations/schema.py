"""Schema mutator: builds DDL for one table and hands it to a query executor."""

import inspect
import logging
from collections.abc import Mapping, Sequence
from typing import Any, Dict, List, Tuple

from utilkit.core.exceptions import MigrationError
from utilkit.core.settings import UtilkitSettings, get_settings
from utilkit.migrations.base import (
    FieldDefinition,
    QueryExecutor,
    SchemaOperation,
    TableState,
)
from utilkit.migrations.operations import (
    AddColumn,
    CreateTable,
    DropColumn,
    DropTable,
    RenameTable,
    TableExists,
    TruncateTable,
)
from utilkit.migrations.runner import MigrationProcedure, MigrationRunner

logger = logging.getLogger(__name__)


def _lookup(obj: Any, key: str) -> Any:
    """Read ``key`` from a mapping, an attribute, or a subscriptable row."""
    if isinstance(obj, Mapping):
        return obj.get(key)

    value = getattr(obj, key, None)
    if value is None and hasattr(obj, "__getitem__") and not isinstance(obj, (str, bytes)):
        try:
            value = obj[key]
        except (KeyError, IndexError, TypeError):
            value = None
    return value


def read_exists_flag(result: Any) -> bool:
    """Return True only when ``result.rows[0].exists`` is exactly True."""
    rows = _lookup(result, "rows")
    if not rows:
        return False
    try:
        first = rows[0]
    except (KeyError, IndexError, TypeError):
        return False
    return _lookup(first, "exists") is True


class SchemaMutator:
    """Handles schema changes for a single table.

    The mutator keeps an in-memory model of the table (name, ordered
    fields, constraints). Each operation renders one statement, passes
    it to the executor, and updates the model only after the executor
    succeeded. Instances are not safe for concurrent use from several
    tasks.

    Example:
        >>> async def execute(query, params=None):
        ...     return await connection.fetch(query, *(params or []))
        >>> accounts = SchemaMutator(
        ...     "accounts",
        ...     {
        ...         "id": ["SERIAL", "PRIMARY KEY"],
        ...         "email": ["VARCHAR(255)", "UNIQUE", "NOT NULL"],
        ...     },
        ...     execute,
        ...     constraints=["FOREIGN KEY (user_id) REFERENCES users(id)"],
        ... )
        >>> await accounts.create_table()
        >>> await accounts.add_column("last_login", ["TIMESTAMP", "NULL"])
        >>> await accounts.rename_table("user_accounts")
    """

    def __init__(
        self,
        table: str,
        field_definitions: Mapping[str, Sequence[str] | str],
        executor: QueryExecutor,
        constraints: Sequence[str] | None = None,
        *,
        settings: UtilkitSettings | None = None,
        runner: MigrationRunner | None = None,
    ):
        """Initialize the mutator.

        Args:
            table: Name of the table to migrate
            field_definitions: Mapping of column name to SQL type tokens
            executor: Function executing ``(query, params=None)``
            constraints: Raw SQL constraint clauses for CREATE TABLE
            settings: Settings to use (read from the environment on first
                use when omitted)
            runner: Runner used by ``migrate``

        Raises:
            FieldValidationError: If a field has no type tokens
        """
        self._state = TableState.from_definitions(table, field_definitions, constraints)
        self._executor = executor
        self._settings = settings
        self._runner = runner or MigrationRunner()

    def __repr__(self) -> str:
        return (
            f"<SchemaMutator(table={self.table!r}, "
            f"fields={self._state.field_names()!r})>"
        )

    @property
    def table(self) -> str:
        return self._state.table

    @property
    def fields(self) -> Tuple[FieldDefinition, ...]:
        return tuple(self._state.fields)

    @property
    def constraints(self) -> Tuple[str, ...]:
        return self._state.constraints

    @property
    def state(self) -> TableState:
        """A copy of the current table model."""
        return self._state.copy()

    async def _call(self, query: str, *params: Any) -> Any:
        result = self._executor(query, *params)
        if inspect.isawaitable(result):
            result = await result
        return result

    async def execute(self, operation: SchemaOperation) -> Any:
        """Run one schema operation and update the table model.

        Args:
            operation: The operation to execute

        Returns:
            The executor's result

        Raises:
            MigrationError: If the executor fails; the model is left unchanged
        """
        state = self._state
        query = operation.to_sql(state)
        logger.debug(f"Executing {operation.action} on {state.table}: {query}")

        try:
            result = await self._call(query)
        except Exception as e:
            logger.error(operation.failure_message(state))
            raise MigrationError.from_error(
                e, operation=operation.action, table=state.table
            ) from e

        self._state = operation.apply(state)
        logger.info(operation.success_message(state))
        return result

    async def create_table(self) -> None:
        """Create the table with all fields followed by the constraints."""
        await self.execute(CreateTable())

    async def drop_table(self) -> None:
        await self.execute(DropTable())

    async def truncate_table(self) -> None:
        await self.execute(TruncateTable())

    async def add_column(self, field_name: str, type_parts: Sequence[str] | str) -> None:
        """Add a column and track it in the field list.

        Args:
            field_name: The column name
            type_parts: SQL type and modifier tokens, e.g. ``["INT", "DEFAULT 0"]``
        """
        await self.execute(AddColumn(field_name, type_parts))

    async def drop_column(self, column_name: str) -> None:
        await self.execute(DropColumn(column_name))

    async def rename_table(self, new_table_name: str) -> None:
        """Rename the table; later statements use the new name."""
        await self.execute(RenameTable(new_table_name))

    async def table_exists(self) -> bool:
        """Check the catalog for the table.

        Returns:
            True when the first result row's ``exists`` value is True
        """
        catalog_table = (self._settings or get_settings()).catalog_table
        result = await self.execute(TableExists(catalog_table))
        return read_exists_flag(result)

    async def migrate(self, procedure: MigrationProcedure) -> None:
        """Run a migration procedure with this mutator.

        Args:
            procedure: Callable receiving this mutator, sync or async

        Raises:
            MigrationError: If the procedure fails
        """
        await self._runner.run(self, procedure)

    async def sql(self, query: str, params: Sequence[Any] | None = None) -> Any:
        """Execute arbitrary SQL and return the executor's result unchanged.

        Raises:
            MigrationError: If the executor fails
        """
        try:
            return await self._call(query, params)
        except Exception as e:
            logger.error(f"Failed to execute SQL on table {self.table}")
            raise MigrationError.from_error(e, operation="sql", table=self.table) from e

    def get_field_definitions(self) -> Dict[str, List[str]]:
        """Return ``{name: type_parts}`` in field order."""
        return {f.name: list(f.type_parts) for f in self._state.fields}


# Alias matching the name used by migration scripts
Migration = SchemaMutator
