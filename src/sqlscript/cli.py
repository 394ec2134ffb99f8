"""
Click-based CLI for sqlscript.
"""

import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any, Optional

import click
from loguru import logger
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax

from . import __version__
from .commands import (
    ExecuteError,
    SplitError,
    execute_sql_script,
    render_statements,
    split_script,
    write_statements,
)
from .core.configuration import ParserConfiguration

console = Console()
error_console = Console(stderr=True)


def parser_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Add the parser configuration options to a command."""
    options = [
        click.option("--delimiter", "-d", help="Statement delimiter (default: ;)"),
        click.option("--line-comment", help="Line comment marker (default: --)"),
        click.option("--start-block-comment", help="Block comment start marker (default: /*)"),
        click.option("--end-block-comment", help="Block comment end marker (default: */)"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _build_configuration(
    delimiter: Optional[str],
    line_comment: Optional[str],
    start_block_comment: Optional[str],
    end_block_comment: Optional[str],
) -> ParserConfiguration:
    try:
        return ParserConfiguration.default().replace(
            delimiter=delimiter,
            line_comment=line_comment,
            start_block_comment=start_block_comment,
            end_block_comment=end_block_comment,
        )
    except ValidationError as e:
        messages = "; ".join(error["msg"] for error in e.errors())
        error_console.print(f"[red]✗ Invalid parser configuration:[/red] {escape(messages)}")
        sys.exit(1)


@click.group()
@click.version_option(version=__version__, prog_name="sqlscript")
@click.option("--verbose", "-v", is_flag=True, help="Print debug logs on stderr")
def cli(verbose: bool) -> None:
    """sqlscript CLI: split and run SQL scripts"""
    logger.remove()
    if verbose:
        logger.add(sys.stderr, level="DEBUG")


@cli.command()
@click.argument("source")
@parser_options
@click.option("--json", "as_json", is_flag=True, help="Print statements as a JSON array")
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path),
    help="Output file path (default: stdout)",
)
def split(
    source: str,
    delimiter: Optional[str],
    line_comment: Optional[str],
    start_block_comment: Optional[str],
    end_block_comment: Optional[str],
    as_json: bool,
    output: Optional[Path],
) -> None:
    """Split a SQL script into statements

    SOURCE is a file path, a classpath: name or an http(s) URL.
    """
    configuration = _build_configuration(
        delimiter, line_comment, start_block_comment, end_block_comment
    )

    try:
        statements = split_script(source, configuration)
    except SplitError as e:
        error_console.print(f"[red]✗ Error:[/red] {escape(str(e))}")
        sys.exit(1)

    if output:
        write_statements(statements, output, as_json=as_json)
        console.print(f"[green]✓[/green] {len(statements)} statements written to {output}")
    elif as_json:
        click.echo(render_statements(statements, as_json=True))
    elif not statements:
        console.print("[yellow]No statements found[/yellow]")
    else:
        for statement in statements:
            console.print(Syntax(statement, "sql", theme="monokai", line_numbers=False))


@cli.command()
@click.argument("source")
@click.option(
    "--database",
    required=True,
    type=click.Path(dir_okay=False, path_type=Path),
    help="SQLite database file",
)
@parser_options
@click.option("--dry-run", is_flag=True, help="List statements without executing them")
def execute(
    source: str,
    database: Path,
    delimiter: Optional[str],
    line_comment: Optional[str],
    start_block_comment: Optional[str],
    end_block_comment: Optional[str],
    dry_run: bool,
) -> None:
    """Execute a SQL script against a SQLite database"""
    configuration = _build_configuration(
        delimiter, line_comment, start_block_comment, end_block_comment
    )

    if dry_run:
        try:
            statements = split_script(source, configuration)
        except SplitError as e:
            error_console.print(f"[red]✗ Error:[/red] {escape(str(e))}")
            sys.exit(1)

        console.print(f"[bold cyan]Would execute {len(statements)} statements:[/bold cyan]")
        for i, statement in enumerate(statements, 1):
            console.print(f"  {i}. {statement}", markup=False, highlight=False)
        return

    try:
        result = execute_sql_script(source, database, configuration)
    except ExecuteError as e:
        error_console.print(f"[red]✗ Error:[/red] {escape(str(e))}")
        sys.exit(1)

    exec_time = result.execution_time_ms / 1000
    console.print(
        f"[green]✓[/green] Executed {result.total_statements} statements in {exec_time:.2f}s"
    )


if __name__ == "__main__":
    cli()
