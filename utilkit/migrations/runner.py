"""Migration runner for utilkit."""

import inspect
import logging
from typing import TYPE_CHECKING, Any, Callable

from utilkit.core.exceptions import MigrationError

if TYPE_CHECKING:
    from utilkit.migrations.schema import SchemaMutator

logger = logging.getLogger(__name__)

MigrationProcedure = Callable[["SchemaMutator"], Any]


class MigrationRunner:
    """Runs a migration procedure against a schema mutator.

    This runner:
    - Calls the procedure exactly once with the mutator
    - Awaits the procedure when it returns an awaitable
    - Re-raises any failure as MigrationError (never retries)
    """

    async def run(self, mutator: "SchemaMutator", procedure: MigrationProcedure) -> None:
        """Run a single migration procedure.

        Args:
            mutator: The schema mutator handed to the procedure
            procedure: Callable taking the mutator, sync or async

        Raises:
            MigrationError: If the procedure fails
        """
        table = mutator.table
        try:
            result = procedure(mutator)
            if inspect.isawaitable(result):
                await result
        except MigrationError:
            logger.error(f"Migration for table {table} failed")
            raise
        except Exception as e:
            logger.error(f"Migration for table {table} failed: {e}")
            raise MigrationError.from_error(
                e, operation="migrate", table=table
            ) from e

        logger.info(f"Migration for table {mutator.table} completed successfully")
