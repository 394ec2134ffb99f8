"""
sqlscript

Python library and CLI splitting SQL scripts into statements and running them
against DB-API connections.
"""

__version__ = "0.1.0"

from .core import (
    ParserConfiguration,
    ParserContext,
    ParserState,
    parse_file,
    parse_resource,
    parse_script,
    parse_stream,
    parse_string,
    split_sql_statements,
)
from .exceptions import (
    ResourceLoaderError,
    ResourceNotFoundError,
    SqlParserError,
    SqlScriptError,
)
from .executor import ScriptRunner, execute_script, execute_statements
from .models import ExecutionResult, SqlScript
from .resources import FileResource, ResourceLoader, UrlResource, load_resource

__all__ = [
    "__version__",
    "ParserConfiguration",
    "ParserContext",
    "ParserState",
    "parse_file",
    "parse_resource",
    "parse_script",
    "parse_stream",
    "parse_string",
    "split_sql_statements",
    "SqlScriptError",
    "SqlParserError",
    "ResourceNotFoundError",
    "ResourceLoaderError",
    "ScriptRunner",
    "execute_script",
    "execute_statements",
    "ExecutionResult",
    "SqlScript",
    "FileResource",
    "UrlResource",
    "ResourceLoader",
    "load_resource",
]
