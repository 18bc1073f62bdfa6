"""utilkit CLI tool."""

import asyncio
import logging

import click

from utilkit.core.exceptions import FieldValidationError, MigrationError, UtilkitError
from utilkit.core.settings import get_settings


def _parse_field(spec: str) -> tuple[str, list[str]]:
    """Parse ``"name:TYPE TOKENS"`` into a name and its type tokens."""
    name, sep, types = spec.partition(":")
    name = name.strip()
    if not sep or not name or not types.split():
        raise click.BadParameter(
            f"'{spec}' is not of the form NAME:TYPE [MODIFIERS...]",
            param_hint="--field",
        )
    return name, types.split()


def _parse_fields(specs) -> dict[str, list[str]]:
    fields = {}
    for spec in specs:
        name, types = _parse_field(spec)
        fields[name] = types
    return fields


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    help="Logging level (defaults to UTILKIT_LOG_LEVEL)",
)
def cli(log_level):
    """utilkit CLI - arithmetic, console colors and DDL previews."""
    try:
        level = (log_level or get_settings().log_level).upper()
    except UtilkitError as e:
        raise click.ClickException(str(e))
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.argument("a", type=float)
@click.argument("b", type=float)
def add(a, b):
    """Add two numbers."""
    from utilkit.arithmetic import add_number

    click.echo(f"{add_number(a, b):g}")


@cli.command()
@click.argument("a", type=float)
@click.argument("b", type=float)
def subtract(a, b):
    """Subtract B from A."""
    from utilkit.arithmetic import subtract_number

    click.echo(f"{subtract_number(a, b):g}")


@cli.command("color")
@click.argument("text")
@click.option("--color", "color_name", help="Text color, e.g. red or bright_blue")
@click.option("--style", "styles", multiple=True, help="Style to apply (repeatable)")
@click.option("--plain", is_flag=True, help="Print without escape codes")
def color_command(text, color_name, styles, plain):
    """Print TEXT with ANSI colors and styles."""
    from utilkit.console import color

    color((text, color_name, list(styles)), enabled=False if plain else None)


@cli.command()
@click.argument("table")
@click.option("--field", "-f", "field_specs", multiple=True, help="Column as NAME:TYPE [MODIFIERS...]")
@click.option("--constraint", "-c", "constraints", multiple=True, help="Table constraint clause")
@click.option("--add-column", "added", multiple=True, help="Column to add after creation, NAME:TYPE")
@click.option("--drop-column", "dropped", multiple=True, help="Column to drop after creation")
@click.option("--rename-to", help="New table name")
@click.option("--drop-first", is_flag=True, help="Start with DROP TABLE IF EXISTS")
def ddl(table, field_specs, constraints, added, dropped, rename_to, drop_first):
    """Print the DDL statements a migration for TABLE would run.

    No database is contacted; statements are echoed instead of executed.
    """
    from utilkit.migrations import SchemaMutator

    fields = _parse_fields(field_specs)
    additions = [_parse_field(spec) for spec in added]

    async def _echo(query, params=None):
        click.echo(query)
        click.echo()
        return None

    async def _procedure(mutator):
        if drop_first:
            await mutator.drop_table()
        await mutator.create_table()
        for name, types in additions:
            await mutator.add_column(name, types)
        for name in dropped:
            await mutator.drop_column(name)
        if rename_to:
            await mutator.rename_table(rename_to)

    async def _run():
        mutator = SchemaMutator(table, fields, _echo, constraints)
        await mutator.migrate(_procedure)
        return mutator

    try:
        mutator = asyncio.run(_run())
    except (FieldValidationError, MigrationError) as e:
        raise click.ClickException(str(e))

    columns = ", ".join(mutator.get_field_definitions()) or "(none)"
    click.echo(f"-- final table: {mutator.table}; columns: {columns}")


@cli.command()
def version():
    """Show utilkit version."""
    from utilkit import __version__

    click.echo(f"utilkit version: {__version__}")


if __name__ == "__main__":
    cli()
