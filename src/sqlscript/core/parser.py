"""
SQL script parser

Splits SQL scripts into statements. Delimiters found inside quoted literals or
comments do not end a statement; comments are dropped from the output.

Scripts are read line by line: every line goes through the state machine one
character at a time, followed by a single space standing in for the line break.
"""

import io
from collections.abc import Iterator
from pathlib import Path
from typing import TYPE_CHECKING, TextIO

from loguru import logger

from sqlscript.core.configuration import ParserConfiguration
from sqlscript.core.context import ParserContext
from sqlscript.exceptions import SqlParserError
from sqlscript.resources import load_resource

if TYPE_CHECKING:
    from sqlscript.resources import Resource

LINE_SEPARATOR = " "

ScriptSource = TextIO | Path | str


def visit_line(line: str, ctx: ParserContext, configuration: ParserConfiguration) -> None:
    """Feed one physical line (without its terminator) through the state machine."""
    position = 0
    while position < len(line):
        position = ctx.state.handle(line, position, ctx, configuration) + 1

    ctx.append(LINE_SEPARATOR)


def _read_lines(stream: TextIO) -> Iterator[str]:
    for raw_line in stream:
        yield raw_line.rstrip("\r\n")


def parse_stream(
    stream: TextIO, configuration: ParserConfiguration | None = None
) -> list[str]:
    """Parse a text stream and return its statements, in order.

    The stream is not closed.

    Args:
        stream: Text stream holding the script
        configuration: Parser configuration (default configuration when None)

    Returns:
        Trimmed, non-blank statements (delimiter included)

    Raises:
        SqlParserError: If reading fails, or the script ends inside a literal
            or a block comment
    """
    configuration = configuration or ParserConfiguration.default()
    ctx = ParserContext()

    try:
        for line in _read_lines(stream):
            visit_line(line, ctx, configuration)
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Failed to read SQL script: {}", e)
        raise SqlParserError(f"Cannot read SQL script: {e}", query=ctx.query) from e

    # Last statement may not end with a delimiter.
    ctx.flush()
    return ctx.statements


def parse_string(sql_text: str, configuration: ParserConfiguration | None = None) -> list[str]:
    """Parse SQL script content held in memory."""
    return parse_stream(io.StringIO(sql_text, newline=None), configuration)


def parse_file(
    path: Path | str,
    configuration: ParserConfiguration | None = None,
    encoding: str = "utf-8",
) -> list[str]:
    """Parse a SQL script file.

    Raises:
        SqlParserError: If the file cannot be opened or parsed
    """
    try:
        stream = Path(path).open("r", encoding=encoding)
    except OSError as e:
        logger.error("Cannot open SQL script {}: {}", path, e)
        raise SqlParserError(f"Cannot open SQL script '{path}': {e}") from e

    with stream:
        return parse_stream(stream, configuration)


def parse_resource(
    resource: "Resource", configuration: ParserConfiguration | None = None
) -> list[str]:
    """Parse a SQL script resource."""
    logger.debug("Parsing SQL script {}", resource.path)
    with resource.open() as stream:
        return parse_stream(stream, configuration)


def parse_script(
    source: "ScriptSource | Resource", configuration: ParserConfiguration | None = None
) -> list[str]:
    """Parse a SQL script from any supported source.

    Args:
        source: Text stream, file path (``pathlib.Path``), resource, or resource
            name such as ``classpath:/sql/init.sql`` or ``https://host/init.sql``
        configuration: Parser configuration (default configuration when None)

    Returns:
        Statements, in order

    Raises:
        SqlParserError: If the script cannot be read or parsed
        ResourceNotFoundError: If a named resource does not exist
    """
    if isinstance(source, Path):
        return parse_file(source, configuration)
    if isinstance(source, str):
        return parse_resource(load_resource(source), configuration)
    if hasattr(source, "readline"):
        return parse_stream(source, configuration)
    return parse_resource(source, configuration)


def split_sql_statements(sql_text: str) -> list[str]:
    """Split script text with the default `;`, `--` and `/* */` conventions.

    Comments are dropped, each statement keeps its closing `;` and line breaks
    inside a statement become single spaces. A `;` inside a quoted literal
    does not end a statement.

    Raises:
        SqlParserError: If the text ends inside a literal or a block comment
    """
    return parse_string(sql_text)
