"""utilkit: small utility helpers for arithmetic, console colors and schema migrations."""

__version__ = "0.2.0"

# Core components
from utilkit.core.exceptions import (
    UtilkitError,
    MigrationError,
    FieldValidationError,
    UtilkitConfigurationError,
    extract_error_message,
)
from utilkit.core.settings import UtilkitSettings, get_settings

# Arithmetic helpers
from utilkit.arithmetic import add_number, subtract_number

# Console helpers
from utilkit.console import (
    STYLES,
    catch_err,
    color,
    format_segments,
    print_color_console,
)

# Migration components
from utilkit.migrations import (
    Migration,
    MigrationRunner,
    SchemaMutator,
    FieldDefinition,
    QueryExecutor,
    TableState,
)

__all__ = [
    "__version__",
    # Core
    "UtilkitError",
    "MigrationError",
    "FieldValidationError",
    "UtilkitConfigurationError",
    "extract_error_message",
    "UtilkitSettings",
    "get_settings",
    # Arithmetic
    "add_number",
    "subtract_number",
    # Console
    "STYLES",
    "catch_err",
    "color",
    "format_segments",
    "print_color_console",
    # Migrations
    "Migration",
    "MigrationRunner",
    "SchemaMutator",
    "FieldDefinition",
    "QueryExecutor",
    "TableState",
]
