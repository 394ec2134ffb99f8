"""
Core SQL script parsing: configuration, state machine, context and drivers.
"""

from .configuration import ParserConfiguration
from .context import ParserContext
from .parser import (
    parse_file,
    parse_resource,
    parse_script,
    parse_stream,
    parse_string,
    split_sql_statements,
    visit_line,
)
from .states import ParserState

__all__ = [
    "ParserConfiguration",
    "ParserContext",
    "ParserState",
    "parse_file",
    "parse_resource",
    "parse_script",
    "parse_stream",
    "parse_string",
    "split_sql_statements",
    "visit_line",
]
