"""Base classes for utilkit schema migrations."""

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field, replace
from typing import Any, List, Protocol, Tuple, runtime_checkable

from utilkit.core.exceptions import FieldValidationError


@runtime_checkable
class QueryExecutor(Protocol):
    """Protocol for the caller-supplied query function.

    Either a coroutine function or a plain function; the result is
    awaited when it is awaitable.
    """

    def __call__(
        self, query: str, params: Sequence[Any] | None = None
    ) -> Any:
        ...


def normalize_type_parts(name: str, type_parts: Sequence[str] | str) -> Tuple[str, ...]:
    """Turn a type specification into a non-empty tuple of SQL tokens.

    A bare string counts as a single token.

    Raises:
        FieldValidationError: If no tokens are given
    """
    if isinstance(type_parts, str):
        parts: Tuple[str, ...] = (type_parts,)
    else:
        parts = tuple(type_parts)

    if not parts or not all(isinstance(p, str) and p.strip() for p in parts):
        raise FieldValidationError(
            f"Field '{name}' needs at least one non-empty SQL type token",
            field=name,
        )
    return parts


@dataclass(frozen=True)
class FieldDefinition:
    """A column name paired with its SQL type and modifier tokens.

    Example:
        FieldDefinition("email", ("VARCHAR(255)", "UNIQUE", "NOT NULL"))
    """

    name: str
    type_parts: Tuple[str, ...]

    @property
    def type_sql(self) -> str:
        return " ".join(self.type_parts)

    def render(self) -> str:
        return f"{self.name} {self.type_sql}"


@dataclass
class TableState:
    """In-memory model of one table's schema.

    Attributes:
        table: Current table name
        fields: Column definitions in declaration order
        constraints: Raw SQL constraint clauses, appended after the columns
    """

    table: str
    fields: List[FieldDefinition] = field(default_factory=list)
    constraints: Tuple[str, ...] = ()

    @classmethod
    def from_definitions(
        cls,
        table: str,
        field_definitions: Mapping[str, Sequence[str] | str],
        constraints: Sequence[str] | None = None,
    ) -> "TableState":
        """Build a state from a ``{name: type_parts}`` mapping."""
        fields = [
            FieldDefinition(name, normalize_type_parts(name, type_parts))
            for name, type_parts in field_definitions.items()
        ]
        return cls(
            table=table,
            fields=fields,
            constraints=tuple(constraints or ()),
        )

    def field_names(self) -> List[str]:
        return [f.name for f in self.fields]

    def copy(self, **changes) -> "TableState":
        changes.setdefault("fields", list(self.fields))
        return replace(self, **changes)


@dataclass
class SchemaOperation(ABC):
    """Base class for schema operations.

    Each operation renders exactly one SQL statement from the current
    table state and describes how the state changes once the statement
    has been executed successfully.
    """

    @property
    @abstractmethod
    def action(self) -> str:
        """Short description used in log lines, e.g. ``"create table"``."""
        pass

    @abstractmethod
    def to_sql(self, state: TableState) -> str:
        """Render the statement for the given state.

        Args:
            state: The table state before the operation

        Returns:
            The SQL statement text
        """
        pass

    def apply(self, state: TableState) -> TableState:
        """Return the state after a successful execution.

        Args:
            state: The table state before the operation

        Returns:
            The new state (the default is unchanged)
        """
        return state

    def success_message(self, state: TableState) -> str:
        return f"Successfully executed {self.action} on table {state.table}"

    def failure_message(self, state: TableState) -> str:
        return f"Failed to {self.action} on table {state.table}"
