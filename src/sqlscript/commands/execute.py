"""
Execute Command

Runs a SQL script against a SQLite database file.
"""

import sqlite3
from pathlib import Path

import httpx

from sqlscript.core.configuration import ParserConfiguration
from sqlscript.exceptions import SqlScriptError
from sqlscript.executor import ScriptRunner
from sqlscript.models import ExecutionResult


class ExecuteError(Exception):
    """Raised when a script cannot be parsed or one of its statements fails"""


def execute_sql_script(
    source: str,
    database: Path,
    configuration: ParserConfiguration | None = None,
) -> ExecutionResult:
    """Parse `source` and execute it on the SQLite database at `database`.

    Statements run in order; the first failure stops the script and the
    connection is closed without commit.

    Raises:
        ExecuteError: On parse failure or statement failure
    """
    runner = ScriptRunner(lambda: sqlite3.connect(database), configuration)
    try:
        return runner.run(source)
    except (SqlScriptError, ValueError) as e:
        raise ExecuteError(str(e)) from e
    except httpx.HTTPError as e:
        raise ExecuteError(f"Cannot download script: {e}") from e
    except sqlite3.Error as e:
        raise ExecuteError(f"Statement failed: {e}") from e
